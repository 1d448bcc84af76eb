"""Lexer for hyperc templates.

Converts template source into a flat list of positioned tokens.

The scanner is a two-mode state machine:

- **Content** mode captures markup text verbatim. A maximal run of
  characters up to the next ``<``, ``{`` or end of input becomes one TEXT
  token, so ``>`` and other punctuation inside text are plain content.
- **Tag** mode tokenizes tag interiors one lexeme at a time: punctuation,
  quoted strings, identifiers and whitespace runs.

Scanning starts in Content mode. ``<``, ``{`` and end of input switch to Tag
mode without being consumed; a ``>`` that closes a tag switches back.

Example:
    >>> [t.type.value for t in tokenize('<p class="a">Hi</p>')]
    ['LessThan', 'Identifier', 'Whitespace', 'Identifier', 'Equals', 'String',
     'GreaterThan', 'Text', 'LessThan', 'Slash', 'Identifier', 'GreaterThan', 'EOF']

Thread-Safety:
A Lexer owns all of its cursor state; ``tokenize()`` builds a fresh one per
call, so independent sources can be scanned concurrently.
"""

from __future__ import annotations

from enum import Enum

from hyperc._types import Token, TokenType
from hyperc.environment.exceptions import CompileError, ErrorCode

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _ASCII_LETTERS | {"_"}
_IDENT_CHARS = _IDENT_START | frozenset("0123456789-")
_WHITESPACE = frozenset(" \t\r\n")
_QUOTES = frozenset("\"'")

# Characters that end a TEXT run and belong to Tag mode
_CONTENT_DELIMITERS = frozenset("<{")

# O(1) dispatch for single-character punctuation (">" and "." need extra work)
_PUNCTUATION: dict[str, TokenType] = {
    "<": TokenType.LESS_THAN,
    "/": TokenType.SLASH,
    "=": TokenType.EQUALS,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
}


class LexerMode(Enum):
    TAG = "tag"
    CONTENT = "content"


class LexErrorKind(Enum):
    """Closed set of lexer failures."""

    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNTERMINATED_STRING = "UnterminatedString"


class LexerError(CompileError):
    """Lexer failure with the position and offending character.

    Attributes:
        kind: Which lexer failure occurred
        char: The offending character, or "EOF" for an unterminated string
    """

    def __init__(
        self,
        kind: LexErrorKind,
        line: int,
        col: int,
        char: str,
        *,
        source: str | None = None,
        name: str | None = None,
    ):
        self.kind = kind
        self.char = char
        if kind is LexErrorKind.UNTERMINATED_STRING:
            self.code = ErrorCode.UNTERMINATED_STRING
            message = "Unterminated string literal. Got EOF before the closing quote."
        else:
            self.code = ErrorCode.UNEXPECTED_CHARACTER
            message = f"Unexpected character {char!r}."
        super().__init__(message, line, col, source=source, name=name)


class Lexer:
    """Single-use scanner over one template source.

    Example:
        >>> Lexer("<br/>").tokenize()
        [Token(LessThan, '<', 1:1), Token(Identifier, 'br', 1:2),
         Token(Slash, '/', 1:4), Token(GreaterThan, '>', 1:5), Token(EOF, '', 1:6)]
    """

    __slots__ = (
        "_col",
        "_line",
        "_mode",
        "_pos",
        "_source",
        "_start",
        "_start_col",
        "_start_line",
        "_tokens",
    )

    def __init__(self, source: str):
        self._source = source
        self._tokens: list[Token] = []
        self._pos = 0
        self._line = 1
        self._col = 1
        self._mode = LexerMode.CONTENT
        # Start of the lexeme currently being scanned
        self._start = 0
        self._start_line = 1
        self._start_col = 1

    def tokenize(self) -> list[Token]:
        """Scan the whole source.

        Returns:
            Tokens in source order, always terminated by exactly one EOF token
            positioned just past the last consumed character.

        Raises:
            LexerError: On an unrecognized character or unterminated string.
        """
        while not self._at_end():
            self._mark_start()
            if self._mode is LexerMode.CONTENT:
                self._scan_content()
            else:
                self._scan_tag()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line, self._col))
        return self._tokens

    # ─────────────────────────────────────────────────────────────────────────
    # Modes
    # ─────────────────────────────────────────────────────────────────────────

    def _scan_content(self) -> None:
        if self._peek() in _CONTENT_DELIMITERS:
            self._mode = LexerMode.TAG
            return

        while not self._at_end() and self._peek() not in _CONTENT_DELIMITERS:
            self._advance()

        text = self._source[self._start : self._pos]
        if text:
            self._add_token(TokenType.TEXT, text)

    def _scan_tag(self) -> None:
        char = self._advance()

        token_type = _PUNCTUATION.get(char)
        if token_type is not None:
            self._add_token(token_type)
        elif char == ">":
            # An empty "<>" names no element, so there is no body to capture
            previous = self._tokens[-1].type if self._tokens else None
            if previous is not TokenType.LESS_THAN:
                self._mode = LexerMode.CONTENT
            self._add_token(TokenType.GREATER_THAN)
        elif char == ".":
            if self._source.startswith("..", self._pos):
                self._advance()
                self._advance()
                self._add_token(TokenType.SPREAD)
            else:
                self._add_token(TokenType.DOT)
        elif char in _QUOTES:
            self._scan_string(char)
        elif char in _WHITESPACE:
            while self._peek() in _WHITESPACE:
                self._advance()
            self._add_token(TokenType.WHITESPACE)
        elif char in _IDENT_START:
            while self._peek() in _IDENT_CHARS:
                self._advance()
            self._add_token(TokenType.IDENTIFIER)
        else:
            raise LexerError(
                LexErrorKind.UNEXPECTED_CHARACTER,
                self._start_line,
                self._start_col,
                char,
            )

    def _scan_string(self, quote: str) -> None:
        """Scan a quoted string; the opening quote is already consumed."""
        while not self._at_end() and self._peek() != quote:
            self._advance()

        if self._at_end():
            raise LexerError(LexErrorKind.UNTERMINATED_STRING, self._line, self._col, "EOF")

        self._advance()  # closing quote
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._pos - 1])

    # ─────────────────────────────────────────────────────────────────────────
    # Cursor helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        """Return the next character, or "" at end of input."""
        if self._at_end():
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        char = self._source[self._pos]
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return char

    def _mark_start(self) -> None:
        self._start = self._pos
        self._start_line = self._line
        self._start_col = self._col

    def _add_token(self, token_type: TokenType, literal: str | None = None) -> None:
        lexeme = self._source[self._start : self._pos]
        self._tokens.append(
            Token(token_type, lexeme, literal, self._start_line, self._start_col)
        )


def tokenize(source: str) -> list[Token]:
    """Tokenize template source.

    Args:
        source: Template source text

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: On the first lexical error
    """
    return Lexer(source).tokenize()
