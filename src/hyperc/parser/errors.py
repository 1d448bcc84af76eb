"""Parser error handling for hyperc.

Provides ParseError with the offending token's position and an optional
suggestion, plus the closed set of parse failure kinds.
"""

from __future__ import annotations

from enum import Enum

from hyperc._types import Token
from hyperc.environment.exceptions import CompileError, ErrorCode


class ParseErrorKind(Enum):
    """Closed set of parser failures."""

    UNEXPECTED_CLOSING_TAG = "UnexpectedClosingTag"
    UNCLOSED_TAG = "UnclosedTag"
    MISMATCHED_CLOSING_TAG = "MismatchedClosingTag"
    EXPECTED_TOKEN = "ExpectedToken"
    INVALID_ATTRIBUTE_VALUE = "InvalidAttributeValue"
    VOID_ELEMENT_MISUSE = "VoidElementMisuse"

    @property
    def code(self) -> ErrorCode:
        return ErrorCode[self.name]


class ParseError(CompileError):
    """Parser error positioned at the offending token.

    ``line``/``col`` come from the token, or are -1 when no token is
    attributable (a token list that runs out without an EOF).

    Attributes:
        kind: Which parser failure occurred
        token: The offending token, if any
        suggestion: Optional hint for fixing the template
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token | None = None,
        *,
        suggestion: str | None = None,
        source: str | None = None,
        name: str | None = None,
    ):
        self.kind = kind
        self.token = token
        self.suggestion = suggestion
        self.code = kind.code
        line, col = (token.line, token.col) if token is not None else (-1, -1)
        super().__init__(message, line, col, source=source, name=name)

    def _format_message(self) -> str:
        msg = super()._format_message()
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg
