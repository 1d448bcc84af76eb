"""hyperc Parser — recursive descent over the lexer's token list.

Whitespace tokens are dropped up front: whitespace between tag-level tokens
carries no structure, and whitespace inside markup already lives in TEXT
tokens.

Example:
    >>> from hyperc.lexer import tokenize
    >>> Parser(tokenize("<p>Hi</p>")).parse()
    [Element(location=..., tag_name='p', attributes=(), children=(Text(...),))]
"""

from __future__ import annotations

from collections.abc import Iterable

from hyperc._types import Token, TokenType
from hyperc.nodes import ASTNode
from hyperc.parser.elements import ElementParsingMixin
from hyperc.parser.tokens import TokenNavigationMixin
from hyperc.utils.constants import VOID_ELEMENTS


class Parser(TokenNavigationMixin, ElementParsingMixin):
    """Build an AST forest from tokens.

    A Parser is single use: it owns its cursor and is discarded after
    ``parse()``. The first error aborts parsing.

    Attributes:
        _tokens: Tokens with WHITESPACE removed
        _pos: Cursor into ``_tokens``
        _void_elements: Tag names that must be written self-closing
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        *,
        void_elements: frozenset[str] = VOID_ELEMENTS,
    ):
        self._tokens = [t for t in tokens if t.type is not TokenType.WHITESPACE]
        self._pos = 0
        self._void_elements = void_elements

    def parse(self) -> list[ASTNode]:
        """Parse declarations until EOF.

        Raises:
            ParseError: On the first structural error
        """
        nodes: list[ASTNode] = []
        while not self._at_end():
            node = self._parse_declaration()
            if node is not None:
                nodes.append(node)
        return nodes


def parse(
    tokens: Iterable[Token],
    *,
    void_elements: frozenset[str] = VOID_ELEMENTS,
) -> list[ASTNode]:
    """Parse a token list into an ordered list of top-level nodes."""
    return Parser(tokens, void_elements=void_elements).parse()
