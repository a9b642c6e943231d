"""Tests for ShapeBuilder.calculate_centroid."""

from __future__ import annotations

import pytest

from centroid_calculator.engine.shape_builder import ShapeBuilder
from tests.conftest import LOOSE_LOOP, SQUARE_3X3, build


def test_empty_builder_has_no_centroid(builder):
    assert builder.calculate_centroid() is None


def test_unit_square_rect(builder):
    builder.add_rect(0.0, 0.0, 1.0, 1.0)
    assert builder.calculate_centroid() == pytest.approx((0.5, 0.5))


def test_unit_square_lines_clockwise(unit_square):
    assert unit_square.calculate_centroid() == pytest.approx((0.5, 0.5))


def test_square_3x3():
    assert build(SQUARE_3X3).calculate_centroid() == pytest.approx((1.5, 1.5))


def test_triangle(triangle):
    assert triangle.calculate_centroid() == pytest.approx((0.5, 1.0 / 3.0))


def test_rect_from_reversed_corners(builder):
    builder.add_rect(10.0, 4.0, 2.0, 0.0)
    assert builder.calculate_centroid() == pytest.approx((6.0, 2.0))


def test_single_segment_uses_mean(builder):
    builder.add_line(0.0, 0.0, 10.0, 0.0)
    assert builder.calculate_centroid() == pytest.approx((5.0, 0.0))


def test_collinear_segments_use_mean(builder):
    builder.add_line(0.0, 0.0, 1.0, 1.0)
    builder.add_line(2.0, 2.0, 3.0, 3.0)
    assert builder.calculate_centroid() == pytest.approx((1.5, 1.5))


def test_zero_length_segment(builder):
    builder.add_line(4.0, -2.0, 4.0, -2.0)
    assert builder.calculate_centroid() == pytest.approx((4.0, -2.0))


def test_degenerate_rect_uses_mean_of_walk(builder):
    builder.add_rect(1.0, 1.0, 1.0, 5.0)
    # Walk: (1,1)(1,1) (1,1)(1,5) (1,5)(1,5) (1,5)(1,1)
    assert builder.calculate_centroid() == pytest.approx((1.0, 3.0))


def test_open_polyline_wraps_last_to_first(builder):
    builder.add_line(0.0, 0.0, 2.0, 0.0)
    builder.add_line(2.0, 0.0, 2.0, 2.0)
    # Wrapping closes the triangle (0,0) (2,0) (2,2)
    assert builder.calculate_centroid() == pytest.approx((4.0 / 3.0, 2.0 / 3.0))


def test_tiny_area_below_epsilon_falls_back_to_mean():
    builder = ShapeBuilder(epsilon=1e-3)
    builder.add_line(0.0, 0.0, 0.01, 0.0)
    builder.add_line(0.01, 0.0, 0.0, 0.01)
    builder.add_line(0.0, 0.01, 0.0, 0.0)
    cx, cy = builder.calculate_centroid()
    # Walk mean, not the area centroid (0.01/3, 0.01/3)
    assert cx == pytest.approx(0.02 / 6)
    assert cy == pytest.approx(0.02 / 6)


def test_walk_is_not_deduplicated():
    builder = build(LOOSE_LOOP)
    centroid = builder.calculate_centroid()
    assert centroid is not None
    assert all(isinstance(v, float) for v in centroid)


def test_centroid_is_read_only(unit_square):
    before = unit_square.get_lines()
    unit_square.calculate_centroid()
    unit_square.is_closed()
    assert unit_square.get_lines() == before


def test_centroid_after_deleting_everything(builder):
    builder.add_line(0.0, 0.0, 1.0, 1.0)
    builder.delete_line(1.0, 1.0, 0.0, 0.0)
    assert builder.calculate_centroid() is None


# ---------------------------------------------------------------------------
# Large magnitudes
# ---------------------------------------------------------------------------

def test_large_segment_mean_stays_finite(builder):
    builder.add_line(1e200, 1e200, 2e200, 1e200)
    assert builder.calculate_centroid() == pytest.approx((1.5e200, 1e200))


def test_segment_near_float_max(builder):
    builder.add_line(1e308, 0.0, 1.5e308, 0.0)
    assert builder.calculate_centroid() == pytest.approx((1.25e308, 0.0))


def test_large_rect_area_centroid(builder):
    builder.add_rect(1e200, 1e200, 3e200, 3e200)
    assert builder.calculate_centroid() == pytest.approx((2e200, 2e200))


def test_far_translated_triangle():
    shift = 1e12
    builder = build([
        (shift, shift, shift + 1.0, shift),
        (shift + 1.0, shift, shift + 0.5, shift + 1.0),
        (shift + 0.5, shift + 1.0, shift, shift),
    ])
    cx, cy = builder.calculate_centroid()
    assert cx - shift == pytest.approx(0.5, abs=1e-3)
    assert cy - shift == pytest.approx(1.0 / 3.0, abs=1e-3)
