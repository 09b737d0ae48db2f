"""Arc-length traversal of vector paths."""

from pathwalk.traversal.curves import CubicCurve, QuadraticCurve
from pathwalk.traversal.path import Path, PathElement, PathElementType, traverse
from pathwalk.traversal.state import TraversalAction, TraversalState
from pathwalk.traversal.subdivision import PATH_SEGMENT_LENGTH_TOLERANCE, curve_length

__all__ = [
    "CubicCurve",
    "QuadraticCurve",
    "Path",
    "PathElement",
    "PathElementType",
    "traverse",
    "TraversalAction",
    "TraversalState",
    "PATH_SEGMENT_LENGTH_TOLERANCE",
    "curve_length",
]
