"""hyperc — tag-template to hyperscript compiler.

Compiles JSX-like templates into nested ``h(tag, attrs, children)`` calls
for a UI runtime to evaluate.

Quickstart:
    >>> import hyperc
    >>> hyperc.compile('<div class="container" id={id}>Hello {name}</div>')
    "h('div', { 'class': 'container', 'id': id }, ['Hello ', name])"

Custom options:
    >>> from hyperc import Environment
    >>> env = Environment(factory="createElement")
    >>> env.compile("<br/>")
    "createElement('br', {  }, [])"

Architecture:
Template Source → Lexer → Tokens → Parser → AST → Transpiler → call text

Pipeline stages:
1. **Lexer**: Two-mode scanner; markup text is captured verbatim
2. **Parser**: Recursive descent into an immutable AST with source spans
3. **Transpiler**: One ``h(...)`` call per top-level node

Each stage raises on its first error (``LexerError``, ``ParseError``); no
partial output is ever returned. All errors derive from ``CompileError`` and
carry 1-based ``line``/``col``.

Thread-Safety:
Compilation is a pure function of the source string. Every stage uses only
local state, so templates may be compiled concurrently without locking, and
compiling the same source twice yields identical output or an identical error.

"""

from hyperc._types import Token, TokenType
from hyperc.analysis import referenced_names, walk
from hyperc.compiler import Transpiler, transpile
from hyperc.environment.core import Environment
from hyperc.environment.exceptions import (
    CompileError,
    ErrorCode,
    SourceSnippet,
    TranspileError,
    build_source_snippet,
)
from hyperc.lexer import Lexer, LexerError, LexErrorKind, tokenize
from hyperc.nodes import (
    Attribute,
    ASTNode,
    Element,
    Expression,
    Location,
    Position,
    SpreadAttribute,
    StringLiteral,
    Text,
)
from hyperc.parser import ParseError, ParseErrorKind, Parser, parse
from hyperc.utils.constants import VOID_ELEMENTS

__version__ = "0.1.0"

__all__ = [
    "ASTNode",
    "Attribute",
    "CompileError",
    "Element",
    "Environment",
    "ErrorCode",
    "Expression",
    "LexErrorKind",
    "Lexer",
    "LexerError",
    "Location",
    "ParseError",
    "ParseErrorKind",
    "Parser",
    "Position",
    "SourceSnippet",
    "SpreadAttribute",
    "StringLiteral",
    "Text",
    "Token",
    "TokenType",
    "TranspileError",
    "Transpiler",
    "VOID_ELEMENTS",
    "__version__",
    "build_source_snippet",
    "compile",
    "parse",
    "referenced_names",
    "tokenize",
    "transpile",
    "walk",
]

_default_env = Environment()


def compile(source: str, *, name: str | None = None) -> str:  # noqa: A001
    """Compile template source with the default Environment.

    Args:
        source: Template source
        name: Optional template name used in error messages

    Returns:
        Newline-joined ``h(...)`` call expressions

    Raises:
        CompileError: LexerError or ParseError for the first error found
    """
    return _default_env.compile(source, name=name)


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'hyperc' has no attribute {name!r}")
