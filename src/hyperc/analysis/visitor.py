"""Shared visitor patterns for hyperc AST analysis.

Provides visit_children and walk for generic AST traversal.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from hyperc.nodes import Attribute, Element, SpreadAttribute

if TYPE_CHECKING:
    from hyperc.nodes import ASTNode, Node


def visit_children(node: Node, visit: Callable[[Node], None]) -> None:
    """Visit the direct children of a node in document order.

    For an Element this is each attribute value (spread expressions
    included) followed by each child node. Text, Expression and
    StringLiteral nodes have no children.
    """
    if not isinstance(node, Element):
        return

    for attr in node.attributes:
        if isinstance(attr, Attribute):
            visit(attr.value)
        elif isinstance(attr, SpreadAttribute):
            visit(attr.expression)

    for child in node.children:
        visit(child)


def walk(nodes: Iterable[ASTNode]) -> Iterator[Node]:
    """Yield every node depth-first, parents before their children.

    Example:
        >>> [type(n).__name__ for n in walk(parse(tokenize('<p id={x}>Hi</p>')))]
        ['Element', 'Expression', 'Text']
    """
    stack: list[Node] = list(nodes)[::-1]
    while stack:
        node = stack.pop()
        yield node
        children: list[Node] = []
        visit_children(node, children.append)
        stack.extend(reversed(children))
