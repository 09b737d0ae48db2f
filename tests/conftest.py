"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from pathwalk.traversal import Path


# Sample path data

TRIANGLE_D = "M0 0 L3 0 L3 4 Z"
STAIRS_D = "M0 0 L10 0 L10 10 L0 10"
ARCH_D = "M0 0 Q50 100 100 0"
WAVE_D = "M0 0 L10 0 C10 10 20 10 20 0"
HALF_CIRCLE_D = "M0 0 A10 10 0 0 1 20 0"
TWO_DASHES_D = "M0 0 L10 0 M20 0 L30 0"

# Control points for the curves used across the traversal tests
QUAD_ARCH = ((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
CUBIC_S = ((0.0, 0.0), (0.0, 40.0), (60.0, -40.0), (60.0, 0.0))


def bezier_points(control_points, samples: int = 1000) -> NDArray[np.float64]:
    """Evaluate a Bézier curve of any degree at `samples` uniform parameters (Bernstein form)."""
    ctrl = np.asarray(control_points, dtype=np.float64)
    degree = len(ctrl) - 1
    t = np.linspace(0.0, 1.0, samples)[:, None]
    out = np.zeros((samples, 2))
    for i, p in enumerate(ctrl):
        out += math.comb(degree, i) * t**i * (1.0 - t) ** (degree - i) * p
    return out


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def reference_length(control_points, samples: int = 20001) -> float:
    """Length of a densely sampled polyline through the curve."""
    return float(arc_lengths(bezier_points(control_points, samples))[-1])


def triangle_path() -> Path:
    return Path().move_to((0, 0)).line_to((3, 0)).line_to((3, 4)).close_subpath()


def wave_path() -> Path:
    return Path().move_to((0, 0)).line_to((10, 0)).cubic_curve_to((10, 10), (20, 10), (20, 0))


@pytest.fixture
def triangle() -> Path:
    return triangle_path()


@pytest.fixture
def wave() -> Path:
    return wave_path()


@pytest.fixture
def arch() -> Path:
    return Path().move_to(QUAD_ARCH[0]).quad_curve_to(QUAD_ARCH[1], QUAD_ARCH[2])
