"""SVG path data front end, a facade over svgpathtools.

Converts a ``d`` attribute string → traversal ``Path``.
"""

from __future__ import annotations

import logging
import math

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path

from pathwalk.traversal.path import Path

logger = logging.getLogger(__name__)

# Quarter turn per cubic keeps the arc approximation error below ~3e-4 of
# the radius.
_ARC_DEGREES_PER_CUBIC = 90.0


class PathDataError(ValueError):
    """Raised when path data cannot be parsed."""


def parse_path_data(d: str) -> Path:
    """Parse SVG path data into a Path.

    svgpathtools resolves relative and shorthand commands and drops the
    subpath structure; a subpath starts wherever a segment does not begin at
    the previous segment's end. A subpath that ends where it started is
    closed with ``close_subpath`` (svgpathtools has already emitted the
    closing line, so the close adds no length).

    svgpathtools keeps no segment for a bare move, so data made only of
    moves (``"M5 5"``, ``"M0 0 Z"``) parses to an empty Path.
    """
    try:
        svg_path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path data: %s", e)
        raise PathDataError(f"Invalid path data: {e}") from e

    path = Path()
    subpath_start: complex | None = None
    pen: complex | None = None

    for seg in svg_path:
        if pen is None or seg.start != pen:
            _close_if_returned(path, subpath_start, pen)
            path.move_to(_xy(seg.start))
            subpath_start = seg.start

        if isinstance(seg, Line):
            path.line_to(_xy(seg.end))
        elif isinstance(seg, QuadraticBezier):
            path.quad_curve_to(_xy(seg.control), _xy(seg.end))
        elif isinstance(seg, CubicBezier):
            path.cubic_curve_to(_xy(seg.control1), _xy(seg.control2), _xy(seg.end))
        elif isinstance(seg, Arc):
            _append_arc(path, seg)
        else:
            raise PathDataError(f"Unsupported segment type: {type(seg).__name__}")
        pen = seg.end

    _close_if_returned(path, subpath_start, pen)

    logger.debug("Parsed path data: %d segments -> %d elements", len(svg_path), len(path))
    return path


def _append_arc(path: Path, arc: Arc) -> None:
    """Approximate an elliptical arc with cubics of at most a quarter turn each.

    Uses the arc's own theta-linear parametrisation: handles run along
    ``arc.derivative`` with the usual 4/3 tan(span / 4) length.
    """
    if arc.delta == 0:
        path.line_to(_xy(arc.end))
        return

    count = max(1, math.ceil(abs(arc.delta) / _ARC_DEGREES_PER_CUBIC))
    step = 1.0 / count
    span = math.radians(abs(arc.delta)) * step
    handle = 4.0 / 3.0 * math.tan(span / 4.0) / span * step

    for i in range(count):
        t0, t1 = i * step, (i + 1) * step
        start = arc.point(t0)
        end = arc.end if i == count - 1 else arc.point(t1)
        control1 = start + arc.derivative(t0) * handle
        control2 = end - arc.derivative(t1) * handle
        path.cubic_curve_to(_xy(control1), _xy(control2), _xy(end))


def _close_if_returned(path: Path, subpath_start: complex | None, pen: complex | None) -> None:
    if subpath_start is not None and pen is not None and pen == subpath_start:
        path.close_subpath()


def _xy(z: complex) -> tuple[float, float]:
    return (z.real, z.imag)
