"""Tests for segment intersection and polygon boundary helpers."""

import pytest

from mindplot.geometry import (
    Bounds,
    Segment,
    Vector,
    intersect,
    point_on_polygon_boundary_towards,
    polygon_to_segments,
    quadratic_point,
    rectangle,
    same_sign,
)


def seg(x1, y1, x2, y2):
    return Segment(Vector(x1, y1), Vector(x2, y2))


BOX = [Vector(-50, -10), Vector(50, -10), Vector(50, 10), Vector(-50, 10)]


class TestIntersect:
    def test_crossing_diagonals(self):
        assert intersect(seg(0, 0, 10, 10), seg(0, 10, 10, 0)) == Vector(5, 5)

    def test_parallel_segments(self):
        assert intersect(seg(0, 0, 10, 0), seg(0, 5, 10, 5)) is None

    def test_collinear_overlap_resolves_to_none(self):
        assert intersect(seg(0, 0, 10, 0), seg(5, 0, 15, 0)) is None

    def test_segment_entirely_on_one_side(self):
        assert intersect(seg(0, 0, 10, 0), seg(0, 1, 5, 5)) is None

    def test_lines_cross_outside_segments(self):
        # Infinite lines meet at (20, 0), beyond the end of the first segment
        assert intersect(seg(0, 0, 10, 0), seg(20, -5, 20, 5)) is None

    def test_touching_counts_as_intersection(self):
        assert intersect(seg(0, 0, 10, 0), seg(5, 0, 5, 5)) == Vector(5, 0)

    @pytest.mark.parametrize(
        "a, b",
        [
            (seg(0, 0, 10, 10), seg(0, 10, 10, 0)),
            (seg(0, 0, 10, 0), seg(0, 5, 10, 5)),
            (seg(-3, 2, 7, -4), seg(1, -6, 2, 9)),
            (seg(0, 0, 10, 0), seg(5, 0, 5, 5)),
            (seg(0, 0, 1, 1), seg(3, 3, 4, 5)),
        ],
    )
    def test_symmetric(self, a, b):
        assert intersect(a, b) == intersect(b, a)


class TestSameSign:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 2, True),
            (-1, -3, True),
            (1, -1, False),
            (0, 1, False),
            (-1, 0, False),
            (0, 0, False),
        ],
    )
    def test_values(self, a, b, expected):
        assert same_sign(a, b) is expected


def test_polygon_to_segments_closes_ring():
    segments = polygon_to_segments(BOX)
    assert len(segments) == 4
    assert segments[0] == Segment(BOX[0], BOX[1])
    assert segments[-1] == Segment(BOX[3], BOX[0])


def test_polygon_to_segments_empty():
    assert polygon_to_segments([]) == []


class TestPointOnPolygonBoundary:
    def test_ray_leaves_through_right_side(self):
        point = point_on_polygon_boundary_towards(Vector(0, 0), BOX, Vector(200, 0))
        assert point == Vector(50, 0)

    def test_ray_leaves_through_top(self):
        point = point_on_polygon_boundary_towards(Vector(0, 0), BOX, Vector(0, -100))
        assert point.x == pytest.approx(0)
        assert point.y == pytest.approx(-10)

    def test_external_equal_to_interior(self):
        interior = Vector(3, 2)
        assert point_on_polygon_boundary_towards(interior, BOX, interior) == interior

    def test_external_inside_polygon(self):
        interior = Vector(0, 0)
        assert point_on_polygon_boundary_towards(interior, BOX, Vector(10, 0)) == interior

    def test_first_hit_in_segment_order(self):
        # Concave "U" shape: the ray to the right crosses two walls, the
        # first one listed wins even though it is farther away.
        u_shape = [
            Vector(30, -10), Vector(30, 10),
            Vector(-10, 10), Vector(-10, -10),
            Vector(10, -10), Vector(10, 5),
            Vector(20, 5), Vector(20, -10),
        ]
        point = point_on_polygon_boundary_towards(Vector(0, 0), u_shape, Vector(100, 0))
        assert point.x == pytest.approx(30)


class TestBounds:
    def test_from_points(self):
        bounds = Bounds.from_points(BOX)
        assert bounds.min == Vector(-50, -10)
        assert bounds.max == Vector(50, 10)
        assert bounds.width == 100
        assert bounds.height == 20

    def test_union_and_center(self):
        bounds = Bounds.union([
            Bounds(Vector(0, 0), Vector(10, 10)),
            Bounds(Vector(20, -10), Vector(30, 0)),
        ])
        assert bounds == Bounds(Vector(0, -10), Vector(30, 10))
        assert bounds.center == Vector(15, 0)

    def test_empty_points_rejected(self):
        with pytest.raises(ValueError):
            Bounds.from_points([])


def test_rectangle_corners_are_clockwise_from_top_left():
    assert rectangle(Vector(0, 0), 100, 20) == BOX


def test_quadratic_point_endpoints_and_middle():
    p0, c, p1 = Vector(0, 0), Vector(50, 100), Vector(100, 0)
    assert quadratic_point(p0, c, p1, 0) == p0
    assert quadratic_point(p0, c, p1, 1) == p1
    assert quadratic_point(p0, c, p1, 0.5) == Vector(50, 50)


def test_vector_normalise_zero():
    assert Vector(0, 0).normalise() == Vector(0, 0)
    assert Vector(3, 4).normalise() == Vector(0.6, 0.8)
