"""Immutable AST nodes for hyperc templates.

A parsed template is an ordered forest of ``Element``, ``Text`` and
``Expression`` nodes. Every located node carries a ``Location`` span.
"""

from hyperc.nodes.base import Location, Node, Position
from hyperc.nodes.markup import (
    Attribute,
    AttributeNode,
    AttributeValue,
    ASTNode,
    Element,
    Expression,
    SpreadAttribute,
    StringLiteral,
    Text,
)

__all__ = [
    "ASTNode",
    "Attribute",
    "AttributeNode",
    "AttributeValue",
    "Element",
    "Expression",
    "Location",
    "Node",
    "Position",
    "SpreadAttribute",
    "StringLiteral",
    "Text",
]
