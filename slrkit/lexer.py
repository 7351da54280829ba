"""A small lexer for a C-like language."""

from __future__ import annotations

import re

from .tokens import Token, TokenType

_KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.KW_INT,
    "if": TokenType.KW_IF,
    "else": TokenType.KW_ELSE,
    "while": TokenType.KW_WHILE,
    "return": TokenType.KW_RETURN,
}

_OPERATORS: dict[str, TokenType] = {
    "==": TokenType.EQEQ,
    "!=": TokenType.NEQ,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "=": TokenType.ASSIGN,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}

_TOKEN_RE = re.compile(
    r"(?P<skip>[ \t\n\v\f\r]+|//[^\n]*)"
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<number>[0-9]+(?:\.[0-9]+)?)"
    r"|(?P<op>==|!=|.)",
    re.DOTALL,
)


def _classify(kind: str, text: str) -> TokenType:
    if kind == "ident":
        return _KEYWORDS.get(text, TokenType.IDENTIFIER)
    if kind == "number":
        return TokenType.FLOAT if "." in text else TokenType.INTEGER
    return _OPERATORS.get(text, TokenType.UNKNOWN)


class Lexer:
    """Splits source text into tokens, skipping whitespace and ``//`` comments."""

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return all tokens, always ending with an END_OF_FILE token."""
        tokens: list[Token] = []
        line, col = 1, 1
        for match in _TOKEN_RE.finditer(self.source):
            kind = match.lastgroup
            text = match.group()
            if kind == "skip":
                newlines = text.count("\n")
                if newlines:
                    line += newlines
                    col = len(text) - text.rfind("\n")
                else:
                    col += len(text)
                continue
            tokens.append(Token(_classify(kind, text), text, line, col))
            col += len(text)
        tokens.append(Token(TokenType.END_OF_FILE, "", line, col))
        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source``; shorthand for ``Lexer(source).tokenize()``."""
    return Lexer(source).tokenize()