"""Static analysis over hyperc ASTs."""

from hyperc.analysis.dependencies import referenced_names
from hyperc.analysis.visitor import visit_children, walk

__all__ = ["referenced_names", "visit_children", "walk"]
