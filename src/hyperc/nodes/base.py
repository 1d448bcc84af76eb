"""Base node class and source spans for the hyperc AST."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """1-based line/column pair. Orders by line, then column."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class Location:
    """Source span of a node: ``start`` inclusive, ``end`` one past the last character."""

    start: Position
    end: Position

    def contains(self, other: Location) -> bool:
        """True if ``other`` lies entirely within this span."""
        return self.start <= other.start and other.end <= self.end

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all located AST nodes.

    Nodes are immutable, created once per compilation, and own their
    children exclusively; there are no parent links.

    """

    location: Location
