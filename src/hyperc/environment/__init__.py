"""Environment, exceptions and terminal helpers for hyperc.

``Environment`` is loaded lazily: the pipeline stages import the exception
types from this package, and the Environment imports the pipeline stages.
"""

from hyperc.environment.exceptions import (
    CompileError,
    ErrorCode,
    SourceSnippet,
    TranspileError,
    build_source_snippet,
)

__all__ = [
    "CompileError",
    "Environment",
    "ErrorCode",
    "SourceSnippet",
    "TranspileError",
    "build_source_snippet",
]


def __getattr__(name: str) -> object:
    if name == "Environment":
        from hyperc.environment.core import Environment

        globals()["Environment"] = Environment
        return Environment
    raise AttributeError(f"module 'hyperc.environment' has no attribute {name!r}")
