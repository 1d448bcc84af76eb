"""Recursive-descent parser for hyperc templates."""

from hyperc.parser.core import Parser, parse
from hyperc.parser.errors import ParseError, ParseErrorKind

__all__ = ["ParseError", "ParseErrorKind", "Parser", "parse"]
