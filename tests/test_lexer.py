import pytest

from slrkit.lexer import Lexer, tokenize
from slrkit.tokens import TokenType


def _kinds(tokens):
    return [t.type for t in tokens]


def test_declaration():
    tokens = tokenize("int x = 42;")
    assert _kinds(tokens) == [
        TokenType.KW_INT,
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.INTEGER,
        TokenType.SEMICOLON,
        TokenType.END_OF_FILE,
    ]
    assert [t.value for t in tokens[:-1]] == ["int", "x", "=", "42", ";"]


def test_empty_source_yields_only_eof():
    tokens = tokenize("")
    assert len(tokens) == 1
    eof = tokens[0]
    assert eof.type is TokenType.END_OF_FILE
    assert eof.value == ""
    assert (eof.line, eof.col) == (1, 1)


def test_class_and_function_agree():
    source = "while (a != b) { return a; }"
    assert Lexer(source).tokenize() == tokenize(source)


@pytest.mark.parametrize(
    "word, kind",
    [
        ("int", TokenType.KW_INT),
        ("if", TokenType.KW_IF),
        ("else", TokenType.KW_ELSE),
        ("while", TokenType.KW_WHILE),
        ("return", TokenType.KW_RETURN),
        ("if_x", TokenType.IDENTIFIER),
        ("_a1", TokenType.IDENTIFIER),
        ("Int", TokenType.IDENTIFIER),
    ],
)
def test_keywords_and_identifiers(word, kind):
    tokens = tokenize(word)
    assert tokens[0].type is kind
    assert tokens[0].value == word


def test_float_and_integer():
    tokens = tokenize("3.14 7")
    assert tokens[0].type is TokenType.FLOAT
    assert tokens[0].value == "3.14"
    assert tokens[1].type is TokenType.INTEGER
    assert tokens[1].value == "7"


def test_trailing_dot_is_not_part_of_number():
    tokens = tokenize("3.")
    assert _kinds(tokens) == [TokenType.INTEGER, TokenType.UNKNOWN, TokenType.END_OF_FILE]
    assert [t.value for t in tokens[:-1]] == ["3", "."]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("==", TokenType.EQEQ),
        ("!=", TokenType.NEQ),
        ("=", TokenType.ASSIGN),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.STAR),
        ("/", TokenType.SLASH),
        ("<", TokenType.LT),
        (">", TokenType.GT),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("{", TokenType.LBRACE),
        ("}", TokenType.RBRACE),
        (";", TokenType.SEMICOLON),
        (",", TokenType.COMMA),
        ("!", TokenType.UNKNOWN),
        ("@", TokenType.UNKNOWN),
    ],
)
def test_operators(text, kind):
    tokens = tokenize(text)
    assert tokens[0].type is kind
    assert tokens[0].value == text
    assert len(tokens) == 2


def test_comment_is_skipped_and_lines_counted():
    tokens = tokenize("a // comment here\nb")
    assert [t.value for t in tokens[:-1]] == ["a", "b"]
    assert (tokens[1].line, tokens[1].col) == (2, 1)


def test_comment_at_end_of_input():
    tokens = tokenize("x // trailing")
    assert _kinds(tokens) == [TokenType.IDENTIFIER, TokenType.END_OF_FILE]


def test_columns_follow_source_positions():
    source = "ab  cd=ef"
    tokens = tokenize(source)
    for token in tokens[:-1]:
        assert token.line == 1
        assert source[token.col - 1 : token.col - 1 + len(token.value)] == token.value
    assert tokens[-1].col == len(source) + 1


def test_values_reconstruct_source_without_whitespace():
    source = "int  total = (a+b) * 2;\n  if (total == 10) { x = y; }"
    tokens = tokenize(source)
    joined = "".join(t.value for t in tokens)
    assert joined == "".join(source.split())
    assert tokens[-1].type is TokenType.END_OF_FILE


def test_positions_on_second_line():
    source = "x\n  yy"
    tokens = tokenize(source)
    second = tokens[1]
    assert second.line == 2
    assert second.col == source.split("\n")[1].index("yy") + 1