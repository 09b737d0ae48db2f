"""Leaf-node geometry helpers. No traversal imports."""

from __future__ import annotations

import math

# (x, y) in path space.
Point = tuple[float, float]


def distance(start: Point, end: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(end[0] - start[0], end[1] - start[1])


def midpoint(first: Point, second: Point) -> Point:
    return ((first[0] + second[0]) / 2.0, (first[1] + second[1]) / 2.0)
