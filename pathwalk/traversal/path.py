"""Path container and the walk that drives a TraversalState over it.

``traverse`` is the only place that adds segment lengths into
``state.total_length`` and decides when a point/angle query is answered.
Angles are reported in degrees, ``atan2(dy, dx)`` of the tangent in path
coordinates, range (-180, 180]. With SVG's y-down axis a positive angle
turns clockwise on screen.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from pathwalk.traversal.state import TraversalAction, TraversalState
from pathwalk.traversal.subdivision import PATH_SEGMENT_LENGTH_TOLERANCE
from pathwalk.utils.geometry import Point, distance

logger = logging.getLogger(__name__)


class PathElementType(enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    QUAD_CURVE_TO = "Q"
    CUBIC_CURVE_TO = "C"
    CLOSE_SUBPATH = "Z"


@dataclass(frozen=True)
class PathElement:
    type: PathElementType
    points: tuple[Point, ...] = ()


class Path:
    """Ordered list of path elements in drawing order.

    Builders return ``self`` so paths can be written as one chain:
    ``Path().move_to((0, 0)).line_to((3, 0)).close_subpath()``.
    """

    def __init__(self, elements: list[PathElement] | None = None) -> None:
        self._elements: list[PathElement] = list(elements or [])

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Path({len(self._elements)} elements)"

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def elements(self) -> list[PathElement]:
        return list(self._elements)

    def move_to(self, point: Point) -> Path:
        self._elements.append(PathElement(PathElementType.MOVE_TO, (_point(point),)))
        return self

    def line_to(self, point: Point) -> Path:
        self._elements.append(PathElement(PathElementType.LINE_TO, (_point(point),)))
        return self

    def quad_curve_to(self, control: Point, end: Point) -> Path:
        self._elements.append(PathElement(PathElementType.QUAD_CURVE_TO, (_point(control), _point(end))))
        return self

    def cubic_curve_to(self, control1: Point, control2: Point, end: Point) -> Path:
        self._elements.append(
            PathElement(PathElementType.CUBIC_CURVE_TO, (_point(control1), _point(control2), _point(end)))
        )
        return self

    def close_subpath(self) -> Path:
        self._elements.append(PathElement(PathElementType.CLOSE_SUBPATH))
        return self

    # Queries. Each one builds a fresh TraversalState and walks the path once.

    def length(self, tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE) -> float:
        state = traverse(self, TraversalState(TraversalAction.TOTAL_LENGTH, tolerance=tolerance))
        logger.debug("Path length %.6f over %d elements", state.total_length, len(self))
        return state.total_length

    def point_at_length(
        self, length: float, tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE
    ) -> tuple[Point, bool]:
        """Point ``length`` units along the path, plus whether it was reached.

        Negative lengths are clamped to 0, the start of the path.
        """
        state = traverse(
            self,
            TraversalState(TraversalAction.POINT_AT_LENGTH, desired_length=max(0.0, length), tolerance=tolerance),
        )
        return state.current, state.success

    def normal_angle_at_length(
        self, length: float, tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE
    ) -> tuple[float, bool]:
        """Tangent direction in degrees ``length`` units along the path."""
        state = traverse(
            self,
            TraversalState(TraversalAction.NORMAL_ANGLE_AT_LENGTH, desired_length=max(0.0, length), tolerance=tolerance),
        )
        return state.normal_angle, state.success

    def segment_index_at_length(self, length: float, tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE) -> int:
        """Index of the element containing ``length``; the last one past the end."""
        state = traverse(
            self,
            TraversalState(TraversalAction.POINT_AT_LENGTH, desired_length=max(0.0, length), tolerance=tolerance),
        )
        return state.segment_index

    def sample_points(self, count: int, tolerance: float = PATH_SEGMENT_LENGTH_TOLERANCE) -> list[Point]:
        """``count`` points at evenly spaced distances from start to end."""
        if count <= 0 or self.is_empty:
            return []
        total = self.length(tolerance)
        points: list[Point] = []
        for target in np.linspace(0.0, total, count):
            point, _ = self.point_at_length(float(target), tolerance)
            points.append(point)
        return points


def traverse(path: Path, state: TraversalState) -> TraversalState:
    """Walk ``path`` in order, feeding each element to ``state``.

    Stops issuing segment calls once a point/angle query succeeds.
    """
    for index, element in enumerate(path):
        state.segment_index = index
        state.previous = state.current
        state.total_length += _dispatch(state, element)

        if element.type is PathElementType.MOVE_TO:
            continue
        if state.is_length_query and state.total_length >= state.desired_length:
            _resolve_query(state)
            break
    else:
        # A path of bare moves still answers targets at or before its start.
        if state.is_length_query and not path.is_empty and state.total_length >= state.desired_length:
            state.previous = state.current
            _resolve_query(state)

    return state


def _dispatch(state: TraversalState, element: PathElement) -> float:
    points = element.points
    if element.type is PathElementType.MOVE_TO:
        return state.move_to(points[0])
    if element.type is PathElementType.LINE_TO:
        return state.line_to(points[0])
    if element.type is PathElementType.QUAD_CURVE_TO:
        return state.quadratic_bezier_to(points[0], points[1])
    if element.type is PathElementType.CUBIC_CURVE_TO:
        return state.cubic_bezier_to(points[0], points[1], points[2])
    return state.close_subpath()


def _resolve_query(state: TraversalState) -> None:
    """Answer the query from the last flat piece (``previous`` → ``current``).

    ``total_length`` may overshoot the target by up to one piece; the point
    is pulled back along the piece by the overshoot.
    """
    dx = state.current[0] - state.previous[0]
    dy = state.current[1] - state.previous[1]
    slope = math.atan2(dy, dx)
    if state.action is TraversalAction.POINT_AT_LENGTH:
        # Never pull back past the start of the piece.
        offset = max(state.desired_length - state.total_length, -distance(state.previous, state.current))
        state.current = (state.current[0] + offset * math.cos(slope), state.current[1] + offset * math.sin(slope))
    else:
        state.normal_angle = math.degrees(slope)
    state.success = True


def _point(value) -> Point:
    return (float(value[0]), float(value[1]))
