"""Token kinds produced by the lexer and their mapping onto grammar terminals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # Literals
    INTEGER = auto()
    FLOAT = auto()
    IDENTIFIER = auto()

    # Keywords
    KW_INT = auto()
    KW_IF = auto()
    KW_ELSE = auto()
    KW_WHILE = auto()
    KW_RETURN = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    ASSIGN = auto()
    EQEQ = auto()
    NEQ = auto()
    LT = auto()
    GT = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    SEMICOLON = auto()
    COMMA = auto()

    # Special
    END_OF_FILE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and 1-based source position."""

    type: TokenType
    value: str
    line: int
    col: int


_TERMINALS: dict[TokenType, str] = {
    TokenType.IDENTIFIER: "id",
    TokenType.INTEGER: "num",
    TokenType.FLOAT: "num",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.ASSIGN: "=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SEMICOLON: ";",
    TokenType.COMMA: ",",
    TokenType.KW_INT: "int",
    TokenType.KW_IF: "if",
    TokenType.KW_WHILE: "while",
    TokenType.KW_RETURN: "return",
}


def map_token(token: Token) -> str:
    """Return the grammar terminal that stands for ``token``.

    Kinds without a dedicated terminal map to the token's own text.
    """
    return _TERMINALS.get(token.type, token.value)