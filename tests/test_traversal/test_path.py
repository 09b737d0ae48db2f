"""Tests for Path queries and the traversal driver."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pathwalk.traversal import Path, PathElementType, TraversalAction, TraversalState, traverse

from tests.conftest import arc_lengths, bezier_points, wave_path


def test_builder_records_elements_in_order(triangle):
    assert [e.type for e in triangle] == [
        PathElementType.MOVE_TO,
        PathElementType.LINE_TO,
        PathElementType.LINE_TO,
        PathElementType.CLOSE_SUBPATH,
    ]
    assert len(triangle) == 4
    assert triangle.elements[1].points == ((3.0, 0.0),)


def test_closed_triangle_length(triangle):
    assert triangle.length() == 12.0


def test_straight_lines_ignore_tolerance():
    path = Path().move_to((0, 0)).line_to((1, 1)).line_to((4, 5))
    expected = math.hypot(1.0, 1.0) + 5.0
    for tol in (10.0, 1e-5, 1e-12):
        assert path.length(tol) == expected


def test_length_never_decreases_segment_by_segment(wave, triangle):
    for path in (wave, triangle):
        elements = path.elements
        lengths = [Path(elements[:k]).length() for k in range(len(elements) + 1)]
        assert lengths == sorted(lengths)


def test_empty_path():
    path = Path()
    assert path.is_empty
    assert path.length() == 0.0
    assert path.point_at_length(0.0) == ((0.0, 0.0), False)


def test_point_at_half_length_lies_half_way(wave):
    total = wave.length()
    (x, y), ok = wave.point_at_length(total / 2)
    assert ok

    # Recompute the distance from the start to the returned point independently
    samples = bezier_points([(10.0, 0.0), (10.0, 10.0), (20.0, 10.0), (20.0, 0.0)], 20001)
    cumulative = 10.0 + arc_lengths(samples)
    nearest = int(np.argmin(np.hypot(samples[:, 0] - x, samples[:, 1] - y)))
    assert math.hypot(samples[nearest, 0] - x, samples[nearest, 1] - y) < 2e-3
    assert cumulative[nearest] == pytest.approx(total / 2, abs=1e-2)


def test_point_on_straight_segment_is_exact():
    path = Path().move_to((0, 0)).line_to((10, 0)).line_to((10, 10))
    (x, y), ok = path.point_at_length(15.0)
    assert ok
    assert x == pytest.approx(10.0)
    assert y == pytest.approx(5.0)


def test_point_on_closing_segment(triangle):
    (x, y), ok = triangle.point_at_length(9.5)
    assert ok
    assert x == pytest.approx(1.5)
    assert y == pytest.approx(2.0)


def test_point_at_zero_is_path_start():
    path = Path().move_to((5, 5)).line_to((15, 5))
    assert path.point_at_length(0.0) == ((5.0, 5.0), True)


def test_point_at_exact_length_is_path_end(wave):
    (x, y), ok = wave.point_at_length(wave.length())
    assert ok
    assert (x, y) == pytest.approx((20.0, 0.0), abs=1e-9)


def test_point_beyond_end_fails(wave, triangle):
    for path in (wave, triangle):
        _, ok = path.point_at_length(path.length() + 1.0)
        assert not ok


def test_moves_only_path_answers_its_start():
    path = Path().move_to((5, 5))
    assert path.point_at_length(0.0) == ((5.0, 5.0), True)
    assert path.point_at_length(1.0)[1] is False


def test_normal_angle_on_lines():
    path = Path().move_to((0, 0)).line_to((10, 0)).line_to((10, 10))
    assert path.normal_angle_at_length(5.0) == (0.0, True)
    angle, ok = path.normal_angle_at_length(15.0)
    assert ok
    assert angle == pytest.approx(90.0)
    assert path.normal_angle_at_length(25.0)[1] is False


def test_normal_angle_points_back_along_reversed_line():
    path = Path().move_to((10, 10)).line_to((0, 10))
    angle, ok = path.normal_angle_at_length(3.0)
    assert ok
    assert angle == pytest.approx(180.0)


def test_normal_angle_on_curve(arch):
    total = arch.length()
    start_angle, _ = arch.normal_angle_at_length(0.0)
    apex_angle, _ = arch.normal_angle_at_length(total / 2)
    end_angle, _ = arch.normal_angle_at_length(total)

    # Tangent of (100t, 200t - 200t^2): slope 2 at the start, flat at the apex
    assert start_angle == pytest.approx(math.degrees(math.atan2(200, 100)), abs=2.0)
    assert apex_angle == pytest.approx(0.0, abs=2.0)
    assert end_angle == pytest.approx(math.degrees(math.atan2(-200, 100)), abs=2.0)


def test_segment_index_at_length():
    path = Path().move_to((0, 0)).line_to((10, 0)).line_to((10, 10)).line_to((0, 10))
    assert path.segment_index_at_length(5.0) == 1
    assert path.segment_index_at_length(15.0) == 2
    assert path.segment_index_at_length(25.0) == 3
    assert path.segment_index_at_length(100.0) == 3
    assert Path().segment_index_at_length(1.0) == 0


def test_traversal_stops_after_success():
    path = wave_path().line_to((100, 100))
    state = traverse(path, TraversalState(TraversalAction.POINT_AT_LENGTH, desired_length=5.0))

    assert state.success
    assert state.segment_index == 1
    assert state.current == pytest.approx((5.0, 0.0))
    # Only the first line was measured
    assert state.total_length == 10.0


def test_total_length_traversal_ends_on_last_point(wave):
    state = traverse(wave, TraversalState(TraversalAction.TOTAL_LENGTH))
    assert state.current == (20.0, 0.0)
    assert state.success is False
    assert state.segment_index == 2


def test_sample_points_even_spacing():
    path = Path().move_to((0, 0)).line_to((10, 0))
    points = path.sample_points(5)
    assert [p[0] for p in points] == pytest.approx([0.0, 2.5, 5.0, 7.5, 10.0])
    assert all(p[1] == pytest.approx(0.0) for p in points)
    assert path.sample_points(0) == []


def test_sample_points_cover_curve(arch):
    points = arch.sample_points(3)
    assert points[0] == pytest.approx((0.0, 0.0), abs=1e-4)
    assert points[1] == pytest.approx((50.0, 50.0), abs=1e-2)
    assert points[2] == pytest.approx((100.0, 0.0), abs=1e-9)


def test_negative_distance_clamps_to_path_start(arch):
    line = Path().move_to((5, 5)).line_to((15, 5))
    assert line.point_at_length(-3.0) == ((5.0, 5.0), True)
    assert line.normal_angle_at_length(-3.0) == (0.0, True)
    assert line.segment_index_at_length(-3.0) == 1

    point, ok = arch.point_at_length(-3.0)
    assert ok
    assert point == pytest.approx((0.0, 0.0), abs=1e-9)


def test_point_at_zero_on_curve_is_curve_start(arch):
    point, ok = arch.point_at_length(0.0)
    assert ok
    assert point == pytest.approx((0.0, 0.0), abs=1e-9)
