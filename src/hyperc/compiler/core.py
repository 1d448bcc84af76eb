"""hyperc Transpiler — AST to hyperscript call text.

Each top-level node becomes one call expression; multiple top-level nodes
are joined with a newline:

    Element    → h('<tag>', { '<name>': <value>, ... }, [<children>])
    Text       → '<content>'
    Expression → <content>

String attribute values and text are wrapped in single quotes verbatim.
No escaping is applied, so content containing ``'`` yields invalid output
text; callers that need such content must escape it before compiling.

An empty attribute list renders as ``{  }`` (two spaces), matching the
output format downstream tooling already expects.

Node Dispatch:
    Uses O(1) dict lookup for node type → handler:
        ```python
        dispatch = {
            "Element": self._transpile_element,
            "Text": self._transpile_text,
            "Expression": self._transpile_expression,
        }
        handler = dispatch[type(node).__name__]
        ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from hyperc.environment.exceptions import TranspileError
from hyperc.nodes import (
    Attribute,
    ASTNode,
    AttributeNode,
    Element,
    Expression,
    Node,
    StringLiteral,
    Text,
)
from hyperc.utils.constants import DEFAULT_FACTORY


def _unsupported(kind: str, node: object) -> TranspileError:
    location = getattr(node, "location", None)
    if location is None and hasattr(node, "expression"):
        location = node.expression.location
    if location is None:
        return TranspileError(f"Cannot transpile {kind} of type {type(node).__name__}.")
    return TranspileError(
        f"Cannot transpile {kind} of type {type(node).__name__}.",
        location.start.line,
        location.start.column,
    )


class Transpiler:
    """Emit nested constructor calls for a parsed template.

    Stateless after construction; one instance can transpile any number of
    trees, from any number of threads.

    Attributes:
        _factory: Name of the element constructor in the output (``h``)
        _joiner: Separator between top-level calls
    """

    __slots__ = ("_factory", "_joiner", "_node_dispatch")

    def __init__(self, factory: str = DEFAULT_FACTORY, joiner: str = "\n"):
        self._factory = factory
        self._joiner = joiner
        self._node_dispatch: dict[str, Callable[[Node], str]] = {
            "Element": self._transpile_element,
            "Text": self._transpile_text,
            "Expression": self._transpile_expression,
        }

    def transpile(self, nodes: Iterable[ASTNode]) -> str:
        """Transpile top-level nodes, one call expression per node.

        Raises:
            TranspileError: For a node type with no emitter (hand-built trees only)
        """
        return self._joiner.join(self._transpile_node(node) for node in nodes)

    def _transpile_node(self, node: ASTNode) -> str:
        handler = self._node_dispatch.get(type(node).__name__)
        if handler is None:
            raise _unsupported("node", node)
        return handler(node)

    def _transpile_element(self, node: Element) -> str:
        attributes = ", ".join(self._transpile_attribute(attr) for attr in node.attributes)
        children = ", ".join(self._transpile_node(child) for child in node.children)
        return f"{self._factory}('{node.tag_name}', {{ {attributes} }}, [{children}])"

    def _transpile_text(self, node: Text) -> str:
        return f"'{node.content}'"

    def _transpile_expression(self, node: Expression) -> str:
        return node.content

    def _transpile_attribute(self, attr: AttributeNode) -> str:
        if not isinstance(attr, Attribute):
            raise _unsupported("attribute", attr)

        value = attr.value
        if isinstance(value, StringLiteral):
            rendered = f"'{value.value}'"
        elif isinstance(value, Expression):
            rendered = value.content
        else:
            raise _unsupported("attribute value", value)
        return f"'{attr.name}': {rendered}"


def transpile(nodes: Iterable[ASTNode], *, factory: str = DEFAULT_FACTORY) -> str:
    """Transpile a parsed template to hyperscript call text."""
    return Transpiler(factory).transpile(nodes)
