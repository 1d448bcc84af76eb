"""Pytest configuration and fixtures for hyperc tests."""

import re
from collections.abc import Sequence

import pytest

from hyperc import Element, Environment, Location, Position
from hyperc.environment import terminal

_ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def env():
    """Create a default hyperc Environment."""
    return Environment()


@pytest.fixture
def no_colors(monkeypatch):
    """Disable ANSI colors so formatted diagnostics compare as plain text."""
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from formatted diagnostics."""
    return _ANSI_ESCAPE.sub("", text)


def loc(start_line: int, start_col: int, end_line: int, end_col: int) -> Location:
    """Shorthand for building a Location in expectations."""
    return Location(Position(start_line, start_col), Position(end_line, end_col))


def assert_well_nested(nodes: Sequence) -> None:
    """Assert span invariants over a node forest.

    - every node's end is after its start
    - siblings are ordered by occurrence and do not overlap
    - a parent's span contains each child's span
    """
    previous = None
    for node in nodes:
        assert node.location.start < node.location.end, f"empty or inverted span on {node!r}"
        if previous is not None:
            assert previous.location.end <= node.location.start, (
                f"Sibling spans overlap or are out of order:\n"
                f"  Previous: {previous!r}\n"
                f"  Next: {node!r}"
            )
        if isinstance(node, Element):
            for child in node.children:
                assert node.location.contains(child.location), (
                    f"Child span escapes parent:\n  Parent: {node!r}\n  Child: {child!r}"
                )
            assert_well_nested(node.children)
        previous = node
