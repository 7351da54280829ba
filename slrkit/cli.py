"""Command line: read a grammar and an input line, build the SLR table and parse."""

from __future__ import annotations

import argparse
import sys

from .grammar import load_grammar
from .lexer import tokenize
from .parser import Parser
from .table import SLRTable
from .tokens import TokenType

_BANNER = (
    "=====================================\n"
    "        SLR PARSER (GENERIC)\n"
    "=====================================\n"
)


def _arguments(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slrkit", description="Build an SLR(1) table from a grammar and parse one input line."
    )
    parser.add_argument("grammar", help="grammar file with rules such as 'E -> E + T | T'")
    parser.add_argument("-i", "--input", dest="text", help="input to parse; read from stdin if omitted")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the parser generator and parser; returns the exit status."""
    args = _arguments(argv)

    print(_BANNER, end="")
    if args.text is None:
        print("Enter input string: ", end="", flush=True)
        text = sys.stdin.readline().rstrip("\n")
    else:
        text = args.text

    tokens = tokenize(text)
    values = "".join(f"{t.value} " for t in tokens if t.type is not TokenType.END_OF_FILE)
    print(f"\nTOKENS: {values}")

    try:
        grammar = load_grammar(args.grammar)
    except OSError:
        print(f"ERROR: Could not open grammar file: {args.grammar}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"ERROR: {args.grammar}: {error}", file=sys.stderr)
        return 1

    grammar.compute_first_sets()
    grammar.compute_follow_sets()

    table = SLRTable(grammar)
    table.build()
    for conflict in table.conflicts:
        print(conflict)

    print(table.format_states(), end="")
    print(table.format_action_table(), end="")
    print(table.format_goto_table(), end="")

    print("\n=========== PARSING ===========")
    print(Parser(table).parse(tokens).format_trace(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())