"""TraversalState: the accumulator one path walk drives, segment by segment.

The caller feeds segments in path order and adds each returned length to
``total_length`` itself; the state only tracks points and angles.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pathwalk.traversal.curves import CubicCurve, QuadraticCurve
from pathwalk.traversal.subdivision import PATH_SEGMENT_LENGTH_TOLERANCE, curve_length
from pathwalk.utils.geometry import Point, distance


class TraversalAction(enum.Enum):
    TOTAL_LENGTH = "total_length"
    POINT_AT_LENGTH = "point_at_length"
    NORMAL_ANGLE_AT_LENGTH = "normal_angle_at_length"


@dataclass
class TraversalState:
    """Mutable state for a single query. Create one per query, never reuse."""

    action: TraversalAction
    success: bool = False
    total_length: float = 0.0
    # Query target; ignored for TOTAL_LENGTH.
    desired_length: float = 0.0
    current: Point = (0.0, 0.0)
    previous: Point = (0.0, 0.0)
    subpath_start: Point = (0.0, 0.0)
    last_control1: Point = (0.0, 0.0)
    last_control2: Point = (0.0, 0.0)
    segment_index: int = 0
    # Degrees, atan2 of the tangent at the query point.
    normal_angle: float = 0.0
    tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE

    @property
    def is_length_query(self) -> bool:
        return self.action in (TraversalAction.POINT_AT_LENGTH, TraversalAction.NORMAL_ANGLE_AT_LENGTH)

    def close_subpath(self) -> float:
        segment_length = distance(self.current, self.subpath_start)
        # The closing line ends at the subpath start; the next subpath starts there too.
        self.current = self.subpath_start
        self.subpath_start = self.last_control1 = self.last_control2 = self.current
        return segment_length

    def move_to(self, point: Point) -> float:
        self.current = self.subpath_start = self.last_control1 = self.last_control2 = point
        return 0.0

    def line_to(self, point: Point) -> float:
        segment_length = distance(self.current, point)
        self.current = self.last_control1 = self.last_control2 = point
        return segment_length

    def quadratic_bezier_to(self, control: Point, end: Point) -> float:
        segment_length = curve_length(self, QuadraticCurve(self.current, control, end))

        self.last_control1 = control
        self.last_control2 = end

        # Length queries already left ``current`` at the truncation point.
        if not self.is_length_query:
            self.current = end
        return segment_length

    def cubic_bezier_to(self, control1: Point, control2: Point, end: Point) -> float:
        segment_length = curve_length(self, CubicCurve(self.current, control1, control2, end))

        self.last_control1 = end
        self.last_control2 = control2

        if not self.is_length_query:
            self.current = end
        return segment_length
