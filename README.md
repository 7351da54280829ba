# slrkit

slrkit builds SLR(1) parsing tables from a context-free grammar. It then
uses those tables to parse a stream of tokens and records every shift,
reduce and accept step.

The package has these modules:

- `slrkit.tokens` defines `TokenType`, `Token` and `map_token`.
- `slrkit.lexer` is a small lexer for a C-like language. It is covered in
  its own section below.
- `slrkit.grammar` loads grammars and computes FIRST and FOLLOW sets.
- `slrkit.table` builds the LR(0) states, the ACTION table and the GOTO
  table, and records any conflicts it meets.
- `slrkit.parser` is a table-driven parser that produces a full parse
  trace.
- `slrkit.cli` is the `slrkit` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Grammar files

A grammar is plain text with one rule per line:

```
# expressions
E -> E + T | T
T -> ( E ) | id | num
```

- `->` separates the left-hand side from the right-hand side.
- `|` separates alternatives. Empty alternatives between `|` signs are
  dropped.
- A line with nothing after `->` gives a rule with an empty right-hand side.
- Symbols are separated by whitespace.
- The parser ignores these lines:
  - blank lines;
  - lines starting with `#`;
  - lines without `->`.
- The left-hand side of the first rule is the start symbol.
- The grammar is augmented with a rule `S' -> S`, which becomes rule 0.
- Every symbol that appears on a left-hand side is a non-terminal. Every
  other symbol is a terminal.
- FIRST sets use `eps` for the empty string.

`parse_grammar(text)` and `load_grammar(path)` both return a `Grammar`.
They raise `ValueError` when the text contains no rules. `load_grammar`
also raises `OSError` when the file cannot be read.

## Lexer and terminals

`tokenize(source)` returns a list of `Token` objects. `Lexer(source).tokenize()`
does the same. Each token carries its type, its text, and its 1-based line
and column. The list always ends with an `END_OF_FILE` token. Whitespace and
`//` comments are skipped.

The lexer recognises:

- identifiers;
- integer and float literals;
- the keywords `int`, `if`, `else`, `while` and `return`;
- the operators `+ - * / = == != < >`;
- the delimiters `( ) { } ; ,`.

Any other character becomes an `UNKNOWN` token.

`map_token` turns a token into the grammar terminal that the parser matches:

| Token | Terminal |
| --- | --- |
| identifiers | `id` |
| integer and float literals | `num` |
| every other token | its own text |

The end of input is `$`.

## Command line

```
slrkit GRAMMAR_FILE [-i TEXT]
slrkit --help
```

The command works in this order:

1. It reads one line of input, from `-i/--input` or else from standard
   input.
2. It prints the tokens.
3. It loads the grammar and builds the SLR table.
4. It prints any conflicts, the LR(0) states, the ACTION table and the GOTO
   table.
5. It prints the parse trace with the verdict, ACCEPTED or REJECTED.

The exit status is 1 when the grammar file cannot be read or holds no rules.
It is 0 otherwise, whether the input is accepted or rejected.

## Library use

```python
from slrkit.grammar import load_grammar
from slrkit.lexer import tokenize
from slrkit.parser import Parser
from slrkit.table import SLRTable

grammar = load_grammar("expr.g")
grammar.compute_first_sets()
grammar.compute_follow_sets()
print(grammar.format_rules())
print(grammar.format_symbols())
print(grammar.format_first_sets())
print(grammar.format_follow_sets())

table = SLRTable(grammar)
table.build()
print(table.format_states())
print(table.format_action_table())
print(table.format_goto_table())
for conflict in table.conflicts:
    print(conflict)

result = Parser(table).parse(tokenize("a + ( 1 + b )"))
print(result.accepted)
print(result.format_trace())
```

If FOLLOW sets have not been computed yet, `SLRTable.build()` computes FIRST
and FOLLOW sets itself.

`SLRTable.closure(items)` and `SLRTable.goto(items, symbol)` work on sets of
`Item`. Entries in the ACTION table are `Action` values, and each one has an
`ActionKind` of `SHIFT`, `REDUCE` or `ACCEPT`.

`ParseResult.steps` is a list of `ParseStep` records. Each record holds the
symbol stack, the remaining input and the action taken.

## Limitations

- When a reduce entry meets an existing entry in the ACTION table, the
  later entry replaces the earlier one. Each such case is recorded as a
  `Conflict`, and the grammar is not rejected.
- The parser stops at the first token that has no ACTION entry. It does not
  recover from errors.
- The parser builds no parse tree or other output beyond the trace.