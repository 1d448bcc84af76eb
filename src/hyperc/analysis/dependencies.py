"""Binding analysis for template introspection.

Extracts the identifiers a template reads from its rendering scope: every
``{name}`` child and every ``attr={name}`` value. The runtime uses this to
know which bindings must be supplied before evaluating the emitted calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from hyperc.analysis.visitor import walk
from hyperc.nodes import ASTNode, Expression


def referenced_names(nodes: Iterable[ASTNode]) -> tuple[str, ...]:
    """Identifiers referenced by a template, in first-use order, without duplicates.

    Example:
        >>> referenced_names(parse(tokenize('<p class={cls}>{msg} {cls}</p>')))
        ('cls', 'msg')
    """
    seen: dict[str, None] = {}
    for node in walk(nodes):
        if isinstance(node, Expression):
            seen.setdefault(node.content, None)
    return tuple(seen)
