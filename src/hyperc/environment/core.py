"""Core Environment class for hyperc.

The Environment holds compile options and runs the pipeline:

    source → tokenize → parse → transpile → call text

Thread-Safety:
    Environments are frozen after construction and every compile uses only
    local state, so one Environment can serve concurrent compiles.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from hyperc._types import Token
from hyperc.compiler import Transpiler
from hyperc.environment.exceptions import CompileError
from hyperc.lexer import tokenize
from hyperc.nodes import ASTNode
from hyperc.parser import Parser
from hyperc.utils.constants import DEFAULT_FACTORY, VOID_ELEMENTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Environment:
    """Compile configuration.

    Attributes:
        factory: Name of the element constructor emitted in calls (``h``)
        void_elements: Tag names that must be written self-closing
        joiner: Separator between top-level calls

    Example:
        >>> env = Environment(factory="createElement")
        >>> env.compile("<br/>")
        "createElement('br', {  }, [])"
    """

    factory: str = DEFAULT_FACTORY
    void_elements: frozenset[str] = VOID_ELEMENTS
    joiner: str = "\n"
    _transpiler: Transpiler = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.factory.isidentifier():
            raise ValueError(f"factory must be a valid identifier, got {self.factory!r}")
        if not isinstance(self.void_elements, frozenset):
            object.__setattr__(self, "void_elements", frozenset(self.void_elements))
        object.__setattr__(self, "_transpiler", Transpiler(self.factory, self.joiner))

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize template source (lexer stage only)."""
        return tokenize(source)

    def parse(self, source: str | Iterable[Token]) -> list[ASTNode]:
        """Parse template source, or an existing token list, into top-level nodes."""
        tokens = tokenize(source) if isinstance(source, str) else source
        return Parser(tokens, void_elements=self.void_elements).parse()

    def transpile(self, nodes: Iterable[ASTNode]) -> str:
        """Emit call text for already-parsed nodes."""
        return self._transpiler.transpile(nodes)

    def compile(self, source: str, *, name: str | None = None) -> str:
        """Compile template source to hyperscript call text.

        Args:
            source: Template source
            name: Template name for error messages

        Returns:
            Newline-joined call expressions, one per top-level node

        Raises:
            LexerError: Unrecognized character or unterminated string
            ParseError: Structural error (tags, attributes, void elements)
            TranspileError: Never for parsed input; kept for symmetry

        Any raised CompileError carries ``source`` and ``name`` so its
        message includes a snippet of the offending line.
        """
        label = name or "<template>"
        start = time.perf_counter()
        try:
            nodes = self.parse(source)
            code = self.transpile(nodes)
        except CompileError as e:
            e.attach_source(source, name)
            logger.debug(
                "Compile failed for %s at %d:%d: %s", label, e.line, e.col, e.message
            )
            raise
        logger.debug(
            "Compiled %s: %d top-level node(s) in %.3fms",
            label,
            len(nodes),
            (time.perf_counter() - start) * 1000,
        )
        return code
