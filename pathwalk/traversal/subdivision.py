"""Adaptive arc length of a single Bézier piece.

The curve is split at its midpoint until each piece's control polygon is
within ``state.tolerance`` of its chord; flat pieces are then summed. Pieces
are kept on an explicit LIFO list, left half on top, so they are visited in
start→end order and a point/angle query can stop at the piece that crosses
the desired length.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from pathwalk.utils.geometry import Point, distance

if TYPE_CHECKING:
    from pathwalk.traversal.state import TraversalState

# Maximum gap between control-polygon length and chord length for a piece
# to count as flat, in path-space units.
PATH_SEGMENT_LENGTH_TOLERANCE = 1e-5


class Curve(Protocol):
    @property
    def start(self) -> Point: ...

    @property
    def end(self) -> Point: ...

    def approximate_distance(self) -> float: ...

    def split(self) -> tuple[Curve, Curve]: ...


def curve_length(state: TraversalState, curve: Curve) -> float:
    """Length contributed by ``curve``, possibly cut short for a length query.

    For point/angle queries ``state.previous``/``state.current`` track the
    last flat piece, and the walk returns as soon as
    ``state.total_length`` plus the running length passes
    ``state.desired_length``. ``state.total_length`` itself is not touched.
    """
    stack = [curve]
    length = 0.0

    while stack:
        piece = stack.pop()
        polygon = piece.approximate_distance()
        if polygon - distance(piece.start, piece.end) > state.tolerance:
            left, right = piece.split()
            stack.append(right)
            stack.append(left)
            continue

        length += polygon
        if state.is_length_query:
            state.previous = piece.start
            state.current = piece.end
            if state.total_length + length > state.desired_length:
                return length

    return length
