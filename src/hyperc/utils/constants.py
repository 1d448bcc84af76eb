"""Shared constants for hyperc."""

from __future__ import annotations

# Elements that may never have children and must be written self-closing.
# Source: WHATWG HTML Living Standard, "void elements"
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Default name of the element constructor emitted by the transpiler
DEFAULT_FACTORY = "h"
