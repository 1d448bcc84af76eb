"""Exceptions for the hyperc compile pipeline.

Exception Hierarchy:
CompileError (base)
├── LexerError        # Unrecognized character or unterminated string
├── ParseError        # Structural grammar violation
└── TranspileError    # AST node with no emitter (hand-built trees only)

Each stage raises on its first error; nothing partial is returned. Within a
stage the exact failure is a closed enum carried on ``kind`` (see
``LexErrorKind`` and ``ParseErrorKind``) rather than a further subclass.

Error Messages:
``str(error)`` always starts with the bare message, followed by a location
line. When the template source is attached, a snippet with a caret under
the offending column is appended:

    ```
    Mismatched closing tag. Expected 'div' but got 'p'.
      --> card.tpl:1:6
        |
      1 | <div></p>
        |      ^
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hyperc.environment import terminal

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

_HYPERC_DOCS_BASE = "https://hyperc.readthedocs.io/en/latest/errors"


class ErrorCode(Enum):
    """Searchable error codes for compile errors.

    Format: H-{CATEGORY}-{NUMBER}
    Categories: LEX (lexer), PAR (parser), TRN (transpiler)
    """

    # Lexer errors (H-LEX-xxx)
    UNEXPECTED_CHARACTER = "H-LEX-001"
    UNTERMINATED_STRING = "H-LEX-002"

    # Parser errors (H-PAR-xxx)
    UNEXPECTED_CLOSING_TAG = "H-PAR-001"
    MISMATCHED_CLOSING_TAG = "H-PAR-002"
    UNCLOSED_TAG = "H-PAR-003"
    EXPECTED_TOKEN = "H-PAR-004"
    INVALID_ATTRIBUTE_VALUE = "H-PAR-005"
    VOID_ELEMENT_MISUSE = "H-PAR-006"

    # Transpiler errors (H-TRN-xxx)
    UNSUPPORTED_NODE = "H-TRN-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_HYPERC_DOCS_BASE}/#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category ('lexer', 'parser' or 'transpiler')."""
        prefix = self.value.split("-")[1]
        return {
            "LEX": "lexer",
            "PAR": "parser",
            "TRN": "transpiler",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional 1-based column for the caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet in Rust-inspired diagnostic style with colors."""
        parts: list[str] = [terminal.dim_text("     |")]
        for lineno, content in self.lines:
            is_error = lineno == self.error_line
            parts.append(terminal.format_source_line(lineno, content, is_error=is_error))
            if is_error and self.column is not None and self.column > 0:
                caret = " " * (self.column - 1) + "^"
                parts.append(f"{terminal.dim_text('     |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("     |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional 1-based column for the caret pointer.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class CompileError(Exception):
    """Base exception for all hyperc compile errors.

    Catch this to handle any failure of ``compile()``:

        >>> try:
        ...     code = hyperc.compile(source)
        ... except CompileError as e:
        ...     report(e.message, e.line, e.col)

    Attributes:
        message: Bare error message (no location, no snippet)
        line: 1-based line of the error, or -1 when unknown
        col: 1-based column of the error, or -1 when unknown
        source: Template source, when attached
        name: Template name, when attached
        code: ErrorCode for searchable error identification
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        line: int = -1,
        col: int = -1,
        *,
        source: str | None = None,
        name: str | None = None,
    ):
        self.message = message
        self.line = line
        self.col = col
        self.source = source
        self.name = name
        super().__init__(self._format_message())

    def attach_source(self, source: str, name: str | None = None) -> None:
        """Attach template source (and name) so messages include a snippet."""
        self.source = source
        if name is not None:
            self.name = name
        self.args = (self._format_message(),)

    @property
    def has_location(self) -> bool:
        return self.line > 0 and self.col > 0

    def _location(self) -> str:
        location = self.name or "<template>"
        if self.has_location:
            location += f":{self.line}:{self.col}"
        return location

    def _format_message(self) -> str:
        header = f"{self.message}\n  --> {self._location()}"

        if self.source and self.has_location:
            lines = self.source.splitlines()
            if 0 < self.line <= len(lines):
                error_line = lines[self.line - 1]
                snippet = f"\n    |\n{self.line:>3} | {error_line}"
                snippet += f"\n    | {' ' * (self.col - 1)}^"
                return header + snippet

        return header

    def format_compact(self) -> str:
        """Format error as a structured, colored terminal diagnostic.

        Format::

            H-PAR-003: Unclosed tag 'div'.
              --> page.tpl:1:1
                 |
            >  1 | <div>
                 | ^
                 |
              Docs: https://hyperc.readthedocs.io/en/latest/errors/#h-par-003
        """
        parts: list[str] = [
            terminal.format_error_header(self.code.value if self.code else None, self.message),
            f"  --> {terminal.location(self._location())}",
        ]

        if self.source and self.has_location:
            parts.append(
                build_source_snippet(self.source, self.line, column=self.col).format()
            )

        if self.code:
            parts.append(f"  {terminal.dim_text('Docs:')} {terminal.docs_url(self.code.docs_url)}")

        return "\n".join(parts)


class TranspileError(CompileError):
    """The transpiler met a node type it has no emitter for.

    Parser output never triggers this; it guards hand-built trees, such as
    ones containing the reserved ``SpreadAttribute``.
    """

    code: ErrorCode | None = ErrorCode.UNSUPPORTED_NODE
