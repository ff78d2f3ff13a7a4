"""
Test Geometry Primitives and Color
==================================

Pure value types: Point, Segment, Line, Color.

Usage:
    pytest test_geometry.py
    python test_geometry.py
"""

from dataclasses import FrozenInstanceError
import math

import pytest
import supervision as sv

from shape_raster import Color, InvalidColorError, Line, Point, Segment
from shape_raster.geometry import det


# ========== Line ==========

def test_line_from_points_coefficients():
    line = Line.from_points(Point(1, 2), Point(4, 6))

    assert (line.a, line.b, line.c) == (-4, 3, -2)
    # Both defining points satisfy a*x + b*y + c = 0
    assert line.a * 1 + line.b * 2 + line.c == 0
    assert line.a * 4 + line.b * 6 + line.c == 0


def test_line_equality_is_coefficient_wise():
    assert Line.horizontal(5) == Line.from_coefficients(0, 1, -5)
    # Same geometric line, proportional coefficients
    assert Line.from_coefficients(0, 2, -10) != Line.horizontal(5)
    assert Line.from_points(Point(0, 5), Point(2, 5)) != Line.horizontal(5)


def test_line_distance_to_point():
    line = Line.from_points(Point(0, 0), Point(10, 0))

    assert line.distance_to(3, 4) == pytest.approx(4.0)
    assert line.distance_to(7, 0) == 0

    diagonal = Line.from_points(Point(0, 0), Point(4, 4))
    assert diagonal.distance_to(0, 2) == pytest.approx(math.sqrt(2))


def test_degenerate_line_distance_is_infinite():
    line = Line.from_points(Point(3, 3), Point(3, 3))
    assert line.distance_to(3, 3) == math.inf


def test_line_intersection_cramer():
    ray = Line.horizontal(5)
    vertical = Line.from_points(Point(10, 0), Point(10, 10))

    assert ray.intersection(vertical) == (10, 5)

    diagonal = Line.from_points(Point(0, 0), Point(8, 8))
    x, y = ray.intersection(diagonal)
    assert x == pytest.approx(5)
    assert y == pytest.approx(5)


def test_parallel_lines_do_not_intersect():
    assert Line.horizontal(5).intersection(Line.horizontal(7)) is None
    edge = Line.from_points(Point(0, 3), Point(9, 3))
    assert Line.horizontal(5).intersection(edge) is None


def test_det():
    assert det(1, 2, 3, 4) == -2
    assert det(0, 1, -10, 0) == 10


# ========== Segment ==========

def test_segment_contains_point():
    segment = Segment(Point(0, 0), Point(10, 5))

    assert segment.contains_point(0, 0)
    assert segment.contains_point(4, 2)
    assert segment.contains_point(10, 5)
    assert not segment.contains_point(12, 6)  # colinear, beyond the end
    assert not segment.contains_point(4, 3)


def test_segment_direction_matters():
    assert Segment(Point(0, 0), Point(1, 1)) != Segment(Point(1, 1), Point(0, 0))


# ========== Color ==========

def test_color_accepts_range_bounds():
    assert Color(0, 0, 0).components() == (0, 0, 0)
    assert Color(255, 255, 255).components() == (255, 255, 255)
    assert Color(12, 34, 56).components() == (12, 34, 56)


@pytest.mark.parametrize("channels", [(256, 0, 0), (-1, 5, 5), (0, 300, 0), (0, 0, -20)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(InvalidColorError):
        Color(*channels)


def test_color_error_is_value_error():
    with pytest.raises(ValueError):
        Color(0, 0, 256)


def test_color_rejects_non_integers():
    with pytest.raises(InvalidColorError):
        Color(1.5, 0, 0)
    with pytest.raises(InvalidColorError):
        Color(True, 0, 0)


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(FrozenInstanceError):
        color.r = 10


def test_color_from_sequence():
    assert Color.from_sequence([10, 20, 30]) == Color(10, 20, 30)
    with pytest.raises(InvalidColorError):
        Color.from_sequence([10, 20])
    with pytest.raises(InvalidColorError):
        Color.from_sequence(5)


def test_color_conversions():
    color = Color(10, 20, 30)

    assert color.as_bgr() == (30, 20, 10)

    sv_color = color.as_sv_color()
    assert isinstance(sv_color, sv.Color)
    assert (sv_color.r, sv_color.g, sv_color.b) == (10, 20, 30)


def main():
    """Run all tests without pytest."""
    print("\nshape_raster - Geometry & Color Tests")
    print("=" * 60)

    test_line_from_points_coefficients()
    test_line_equality_is_coefficient_wise()
    test_line_distance_to_point()
    test_degenerate_line_distance_is_infinite()
    test_line_intersection_cramer()
    test_parallel_lines_do_not_intersect()
    test_det()
    test_segment_contains_point()
    test_segment_direction_matters()
    test_color_accepts_range_bounds()
    for channels in [(256, 0, 0), (-1, 5, 5)]:
        test_color_rejects_out_of_range(channels)
    test_color_error_is_value_error()
    test_color_rejects_non_integers()
    test_color_is_immutable()
    test_color_from_sequence()
    test_color_conversions()

    print("✅ ALL TESTS PASSED!")


if __name__ == "__main__":
    main()
