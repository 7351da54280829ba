"""SLR(1) table construction, a small C-like lexer and table-driven parsing."""

__version__ = "0.1.0"

__all__ = ["cli", "grammar", "lexer", "parser", "table", "tokens"]