"""Markup nodes for the hyperc AST: elements, text, expressions and attributes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from hyperc.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text between tags: ``Hello``"""

    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Text", "content": self.content, "location": self.location.to_dict()}


@dataclass(frozen=True, slots=True)
class Expression(Node):
    """Identifier in braces: ``{name}``"""

    content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Expression",
            "content": self.content,
            "location": self.location.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class StringLiteral(Node):
    """Quoted attribute value, stored without its quotes."""

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "StringLiteral",
            "value": self.value,
            "location": self.location.to_dict(),
        }


AttributeValue = Union[StringLiteral, Expression]


@dataclass(frozen=True, slots=True)
class Attribute:
    """Named attribute: ``class="main"`` or ``value={x}``"""

    name: str
    value: AttributeValue

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Attribute", "name": self.name, "value": self.value.to_dict()}


@dataclass(frozen=True, slots=True)
class SpreadAttribute:
    """Spread attribute: ``{...props}``

    Reserved. The lexer recognizes ``...`` but the parser never builds this
    node and the transpiler has no emitter for it.
    """

    expression: Expression

    def to_dict(self) -> dict[str, Any]:
        return {"type": "SpreadAttribute", "expression": self.expression.to_dict()}


AttributeNode = Union[Attribute, SpreadAttribute]


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Tag with attributes and children: ``<div class="a">...</div>``"""

    tag_name: str
    attributes: Sequence[AttributeNode] = ()
    children: Sequence[ASTNode] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Element",
            "tagName": self.tag_name,
            "attributes": [attr.to_dict() for attr in self.attributes],
            "children": [child.to_dict() for child in self.children],
            "location": self.location.to_dict(),
        }


ASTNode = Union[Element, Text, Expression]
