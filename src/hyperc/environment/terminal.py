"""ANSI styling for compile diagnostics.

Each diagnostic part (error code, location, gutter, offending line, docs
link) has one style. Styling is decided once at import: ``FORCE_COLOR``
wins over ``NO_COLOR`` (https://no-color.org/), otherwise colors follow
whether stdout is a TTY.
"""

from __future__ import annotations

import os
import sys

_RESET = "\033[0m"

# Diagnostic part -> ANSI prefix
_STYLES: dict[str, str] = {
    "code": "\033[91m\033[1m",
    "location": "\033[36m",
    "gutter": "\033[33m",
    "error_line": "\033[91m",
    "context": "\033[2m",
    "docs": "\033[94m",
}


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def _paint(part: str, text: str) -> str:
    if not _USE_COLORS:
        return text
    return f"{_STYLES[part]}{text}{_RESET}"


def location(text: str) -> str:
    return _paint("location", text)


def error_line(text: str) -> str:
    return _paint("error_line", text)


def dim_text(text: str) -> str:
    return _paint("context", text)


def docs_url(text: str) -> str:
    return _paint("docs", text)


def format_error_header(code: str | None, message: str) -> str:
    """Prefix ``message`` with a styled error code, e.g. ``H-PAR-003: Unclosed tag 'div'.``"""
    if code:
        return f"{_paint('code', code)}: {message}"
    return message


def format_source_line(lineno: int, content: str, is_error: bool = False) -> str:
    """Render one snippet line as ``>  3 | content``; only the error line gets the marker."""
    marker = ">" if is_error else " "
    gutter = _paint("gutter", f"{marker}{lineno:>3}")
    body = error_line(content) if is_error else dim_text(content)
    return f"{gutter} | {body}"
