"""Quadratic and cubic Bézier pieces used by the length walker.

Both are plain value types. They share a shape (``start``, ``end``,
``approximate_distance()``, ``split()``) but no base class.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathwalk.utils.geometry import Point, distance, midpoint


@dataclass(frozen=True)
class QuadraticCurve:
    start: Point
    control: Point
    end: Point

    def approximate_distance(self) -> float:
        """Control-polygon length. Never shorter than the curve itself."""
        return distance(self.start, self.control) + distance(self.control, self.end)

    def split(self) -> tuple[QuadraticCurve, QuadraticCurve]:
        """De Casteljau split at t = 0.5."""
        left_control = midpoint(self.start, self.control)
        right_control = midpoint(self.control, self.end)
        junction = midpoint(left_control, right_control)
        return (
            QuadraticCurve(self.start, left_control, junction),
            QuadraticCurve(junction, right_control, self.end),
        )


@dataclass(frozen=True)
class CubicCurve:
    start: Point
    control1: Point
    control2: Point
    end: Point

    def approximate_distance(self) -> float:
        """Control-polygon length. Never shorter than the curve itself."""
        return (
            distance(self.start, self.control1)
            + distance(self.control1, self.control2)
            + distance(self.control2, self.end)
        )

    def split(self) -> tuple[CubicCurve, CubicCurve]:
        """De Casteljau split at t = 0.5.

        The two halves share the junction point exactly, so ``left.end`` is
        ``right.start`` and walking left then right retraces the parent.
        """
        between_controls = midpoint(self.control1, self.control2)

        left_control1 = midpoint(self.start, self.control1)
        left_control2 = midpoint(left_control1, between_controls)

        right_control2 = midpoint(self.control2, self.end)
        right_control1 = midpoint(between_controls, right_control2)

        junction = midpoint(left_control2, right_control1)
        return (
            CubicCurve(self.start, left_control1, left_control2, junction),
            CubicCurve(junction, right_control1, right_control2, self.end),
        )
