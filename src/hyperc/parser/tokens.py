"""Token navigation for the hyperc parser.

Provides the cursor primitives every parsing mixin builds on: lookahead,
consumption, expectation and error construction.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from hyperc._types import Token, TokenType
from hyperc.nodes import Position
from hyperc.parser.errors import ParseError, ParseErrorKind


def end_of(token: Token) -> Position:
    """Position one past the last character of ``token``'s lexeme."""
    lexeme = token.lexeme
    newlines = lexeme.count("\n")
    if not newlines:
        return Position(token.line, token.col + len(lexeme))
    return Position(token.line + newlines, len(lexeme) - lexeme.rfind("\n"))


def describe(token: Token | None) -> str:
    """Name a token for "Got ... instead." messages."""
    if token is None or token.type is TokenType.EOF:
        return "EOF"
    return f"'{token.lexeme}'"


class TokenNavigationMixin:
    """Mixin providing cursor movement over the filtered token list."""

    if TYPE_CHECKING:
        # Host attributes (from Parser.__init__)
        _tokens: Sequence[Token]
        _pos: int

    @property
    def _current(self) -> Token | None:
        """Token under the cursor, or None past the end of a list with no EOF."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _peek(self, offset: int = 1) -> Token | None:
        index = self._pos + offset
        if index < len(self._tokens):
            return self._tokens[index]
        return None

    def _at_end(self) -> bool:
        current = self._current
        return current is None or current.type is TokenType.EOF

    def _check(self, token_type: TokenType) -> bool:
        """True if the current token has ``token_type`` (EOF only matches EOF)."""
        current = self._current
        return current is not None and current.type is token_type

    def _advance(self) -> Token:
        """Consume and return the current token. The cursor never moves past EOF."""
        token = self._current
        if token is None:
            raise self._error(ParseErrorKind.EXPECTED_TOKEN, "Unexpected end of token stream.")
        if token.type is not TokenType.EOF:
            self._pos += 1
        return token

    def _expect(self, token_type: TokenType, expected: str) -> Token:
        """Consume a token of ``token_type`` or fail.

        Args:
            token_type: Required token kind
            expected: Sentence naming what was expected, e.g. "Expected '}'."

        Raises:
            ParseError: EXPECTED_TOKEN, naming what was found instead
        """
        if self._check(token_type):
            return self._advance()
        current = self._current
        raise self._error(
            ParseErrorKind.EXPECTED_TOKEN,
            f"{expected} Got {describe(current)} instead.",
            current,
        )

    def _error(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token | None = None,
        suggestion: str | None = None,
    ) -> ParseError:
        return ParseError(kind, message, token, suggestion=suggestion)
