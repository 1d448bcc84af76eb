"""Transpiler from hyperc AST to hyperscript-style call text."""

from hyperc.compiler.core import Transpiler, transpile

__all__ = ["Transpiler", "transpile"]
