"""Token types shared by the lexer and parser.

Tokens are immutable records produced once by the lexer and consumed by
index in the parser. Nothing mutates a token after creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Closed set of lexical token kinds."""

    # Single-character punctuation
    LESS_THAN = "LessThan"  # <
    GREATER_THAN = "GreaterThan"  # >
    SLASH = "Slash"  # /
    EQUALS = "Equals"  # =
    OPEN_BRACE = "OpenBrace"  # {
    CLOSE_BRACE = "CloseBrace"  # }
    DOT = "Dot"  # .
    SPREAD = "Spread"  # ...

    # Literals
    IDENTIFIER = "Identifier"
    STRING = "String"
    TEXT = "Text"
    WHITESPACE = "Whitespace"

    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, positioned fragment of template source.

    Attributes:
        type: Token kind
        lexeme: Exact source text covered by the token
        literal: Unquoted value for STRING, raw run for TEXT, else None
        line: 1-based line of the first character of the lexeme
        col: 1-based column of the first character of the lexeme
    """

    type: TokenType
    lexeme: str
    literal: str | None
    line: int
    col: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.lexeme!r}, {self.line}:{self.col})"
