"""Markup parsing for the hyperc parser.

Provides the mixin for the template grammar:

    template   := node*
    node       := element | TEXT | expression
    element    := '<' IDENT attribute* ( '/>' | '>' node* '</' IDENT '>' )
    attribute  := IDENT '=' ( STRING | '{' IDENT '}' )
    expression := '{' IDENT '}'

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from hyperc._types import Token, TokenType
from hyperc.nodes import (
    Attribute,
    ASTNode,
    Element,
    Expression,
    Location,
    Position,
    StringLiteral,
    Text,
)
from hyperc.parser.errors import ParseErrorKind
from hyperc.parser.tokens import end_of

if TYPE_CHECKING:
    from hyperc.parser.errors import ParseError


def _start_of(token: Token) -> Position:
    return Position(token.line, token.col)


class ElementParsingMixin:
    """Mixin for parsing elements, text, expressions and attributes.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes and cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # Host attributes (from Parser.__init__)
        _tokens: Sequence[Token]
        _pos: int
        _void_elements: frozenset[str]

        # From TokenNavigationMixin
        @property
        def _current(self) -> Token | None: ...
        def _peek(self, offset: int = 1) -> Token | None: ...
        def _at_end(self) -> bool: ...
        def _check(self, token_type: TokenType) -> bool: ...
        def _advance(self) -> Token: ...
        def _expect(self, token_type: TokenType, expected: str) -> Token: ...
        def _error(
            self,
            kind: ParseErrorKind,
            message: str,
            token: Token | None = None,
            suggestion: str | None = None,
        ) -> ParseError: ...

    def _at_closing_tag(self) -> bool:
        """True when the lookahead is ``<`` immediately followed by ``/``."""
        if not self._check(TokenType.LESS_THAN):
            return False
        following = self._peek()
        return following is not None and following.type is TokenType.SLASH

    def _parse_declaration(self) -> ASTNode | None:
        """Parse one node, or skip one unrecognized token and return None."""
        if self._at_closing_tag():
            raise self._error(
                ParseErrorKind.UNEXPECTED_CLOSING_TAG,
                "Unexpected closing tag.",
                self._current,
                suggestion="Remove the closing tag or add a matching opening tag.",
            )

        if self._check(TokenType.LESS_THAN):
            return self._parse_element()

        if self._check(TokenType.TEXT):
            return self._parse_text()

        if self._check(TokenType.OPEN_BRACE):
            return self._parse_expression()

        # Stray top-level tokens are dropped rather than rejected
        self._advance()
        return None

    def _parse_text(self) -> Text:
        token = self._advance()
        content = token.literal if token.literal is not None else token.lexeme
        return Text(Location(_start_of(token), end_of(token)), content)

    def _parse_expression(self) -> Expression:
        """Parse ``{IDENT}``. Only a single identifier is accepted inside the braces."""
        open_brace = self._advance()
        ident = self._expect(TokenType.IDENTIFIER, "Expected identifier inside '{'.")
        close_brace = self._expect(TokenType.CLOSE_BRACE, "Expected '}'.")
        return Expression(Location(_start_of(open_brace), end_of(close_brace)), ident.lexeme)

    def _parse_attribute(self) -> Attribute:
        name = self._advance()
        self._expect(TokenType.EQUALS, f"Expected '=' after attribute name '{name.lexeme}'.")

        if self._check(TokenType.STRING):
            token = self._advance()
            value = token.literal if token.literal is not None else token.lexeme
            return Attribute(
                name.lexeme,
                StringLiteral(Location(_start_of(token), end_of(token)), value),
            )

        if self._check(TokenType.OPEN_BRACE):
            return Attribute(name.lexeme, self._parse_expression())

        raise self._error(
            ParseErrorKind.INVALID_ATTRIBUTE_VALUE,
            "Expected string literal or expression for attribute value.",
            self._current,
            suggestion=f'Write {name.lexeme}="value" or {name.lexeme}={{identifier}}.',
        )

    def _parse_element(self) -> Element:
        open_token = self._advance()  # '<'
        tag = self._expect(TokenType.IDENTIFIER, "Expected tag name after '<'.").lexeme

        attributes: list[Attribute] = []
        while self._check(TokenType.IDENTIFIER):
            attributes.append(self._parse_attribute())

        if tag in self._void_elements and not self._check(TokenType.SLASH):
            raise self._error(
                ParseErrorKind.VOID_ELEMENT_MISUSE,
                f"Void element <{tag}> cannot have children and must be self-closing.",
                self._current,
                suggestion=f"Write <{tag} ... /> instead.",
            )

        if self._check(TokenType.SLASH):
            self._advance()
            close = self._expect(TokenType.GREATER_THAN, "Expected '>' after '/' in self-closing tag.")
            return Element(
                Location(_start_of(open_token), end_of(close)),
                tag,
                tuple(attributes),
            )

        self._expect(TokenType.GREATER_THAN, f"Expected '>' to end the opening tag <{tag}>.")

        children: list[ASTNode] = []
        while not self._at_closing_tag():
            if self._at_end():
                raise self._error(
                    ParseErrorKind.UNCLOSED_TAG,
                    f"Unclosed tag '{tag}'.",
                    open_token,
                    suggestion=f"Add </{tag}> or write <{tag} />.",
                )
            child = self._parse_declaration()
            if child is not None:
                children.append(child)

        closing_open = self._advance()  # '<'
        self._advance()  # '/'
        closing_name = self._expect(TokenType.IDENTIFIER, "Expected tag name after '</'.")
        if closing_name.lexeme != tag:
            raise self._error(
                ParseErrorKind.MISMATCHED_CLOSING_TAG,
                f"Mismatched closing tag. Expected '{tag}' but got '{closing_name.lexeme}'.",
                closing_open,
            )
        close = self._expect(TokenType.GREATER_THAN, "Expected '>' after closing tag name.")

        return Element(
            Location(_start_of(open_token), end_of(close)),
            tag,
            tuple(attributes),
            tuple(children),
        )
