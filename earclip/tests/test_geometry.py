"""Unit tests for the vector primitives and orientation predicates."""
import dataclasses

import numpy as np
import pytest

from earclip.core.geometry import (
    Point2D, add, sub, cross, is_clockwise, is_convex, is_point_inside_triangle,
    as_polygon, triangle_area, polygon_signed_area, polygon_area,
)


def P(x, y):
    return Point2D(float(x), float(y))


class TestPoint2D:

    def test_add_sub_componentwise(self):
        a, b = P(1, 2), P(3, -5)
        assert add(a, b) == P(4, -3)
        assert sub(a, b) == P(-2, 7)
        assert a + b == add(a, b)
        assert a - b == sub(a, b)

    def test_cross_sign_is_turn_direction(self):
        assert cross(P(1, 0), P(0, 1)) == 1.0
        assert cross(P(0, 1), P(1, 0)) == -1.0
        assert cross(P(2, 2), P(1, 1)) == 0.0

    def test_immutable_and_hashable(self):
        p = P(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0
        assert {p, P(1, 2)} == {p}

    def test_of_coerces_pairs(self):
        assert Point2D.of((1, 2)) == P(1, 2)
        assert Point2D.of(np.array([3.0, 4.0])) == P(3, 4)
        p = P(1, 1)
        assert Point2D.of(p) is p
        with pytest.raises(ValueError):
            Point2D.of((1, 2, 3))

    def test_iterates_as_xy(self):
        assert tuple(P(1.5, -2)) == (1.5, -2.0)


class TestIsClockwise:

    def test_square_ccw_is_not_clockwise(self):
        square = [P(0, 0), P(2, 0), P(2, 2), P(0, 2)]
        assert is_clockwise(square) is False
        assert is_clockwise(list(reversed(square))) is True

    def test_demo_polygon_is_clockwise(self):
        poly = [P(-1, -1), P(-2, 1), P(1, 1), P(0, 0), P(3, -1)]
        assert is_clockwise(poly) is True

    @pytest.mark.parametrize("coords", [
        [(0, 0), (1, 0), (0, 1)],
        [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)],
        [(-1, -1), (-2, 1), (1, 1), (0, 0), (3, -1)],
        [(0.5, 0.1), (4.2, 0.3), (3.3, 2.7), (1.1, 1.9)],
    ])
    def test_reversal_flips_orientation(self, coords):
        poly = [P(x, y) for x, y in coords]
        assert is_clockwise(poly) != is_clockwise(poly[::-1])

    def test_zero_sum_is_not_clockwise_either_way(self):
        line = [P(0, 0), P(1, 0), P(2, 0)]
        assert is_clockwise(line) is False
        assert is_clockwise(line[::-1]) is False

    def test_single_vertex(self):
        assert is_clockwise([P(3, 4)]) is False


class TestIsConvex:

    def test_convex_corner_on_clockwise_walk(self):
        # up then right: a clockwise turn
        assert is_convex(P(0, 0), P(0, 2), P(2, 2)) is True

    def test_reflex_corner(self):
        assert is_convex(P(2, 2), P(0, 2), P(0, 0)) is False

    def test_collinear_is_not_convex(self):
        assert is_convex(P(0, 0), P(1, 0), P(2, 0)) is False

    def test_pure(self):
        args = [P(0, 0), P(0, 2), P(2, 2)]
        snapshot = list(args)
        results = [is_convex(*args) for _ in range(5)]
        assert results == [True] * 5
        assert args == snapshot
        assert [is_convex(*args[::-1]) for _ in range(3)] == [False] * 3
        assert args == snapshot


class TestIsPointInsideTriangle:
    # clockwise triangle (prev, current, next)
    TRI = (P(0, 0), P(0, 2), P(2, 2))

    def test_interior_point(self):
        assert is_point_inside_triangle(P(0.5, 1.5), *self.TRI) is True

    def test_exterior_point(self):
        assert is_point_inside_triangle(P(2, 0), *self.TRI) is False
        assert is_point_inside_triangle(P(-1, 1), *self.TRI) is False

    def test_edge_and_corner_count_as_inside(self):
        assert is_point_inside_triangle(P(0, 1), *self.TRI) is True
        assert is_point_inside_triangle(P(1, 1), *self.TRI) is True
        for corner in self.TRI:
            assert is_point_inside_triangle(corner, *self.TRI) is True

    def test_pure(self):
        args = (P(0.5, 1.5),) + self.TRI
        snapshot = list(args)
        results = {is_point_inside_triangle(*args) for _ in range(5)}
        assert results == {True}
        assert list(args) == snapshot


class TestAreaHelpers:

    def test_triangle_area_signed(self):
        assert triangle_area((0, 0), (1, 0), (0, 1)) == pytest.approx(0.5)
        assert triangle_area((0, 0), (0, 1), (1, 0)) == pytest.approx(-0.5)

    def test_polygon_signed_area(self):
        square = [(0, 0), (2, 0), (2, 2), (0, 2)]
        assert polygon_signed_area(square) == pytest.approx(4.0)
        assert polygon_signed_area(square[::-1]) == pytest.approx(-4.0)
        assert polygon_area(square[::-1]) == pytest.approx(4.0)

    def test_polygon_area_of_degenerate_input(self):
        assert polygon_signed_area([(0, 0), (1, 1)]) == 0.0
        assert polygon_area([(0, 0), (1, 0), (2, 0)]) == 0.0


class TestAsPolygon:

    def test_from_numpy(self):
        arr = np.array([[0, 0], [1, 0], [0, 1]], dtype=float)
        poly = as_polygon(arr)
        assert poly == [P(0, 0), P(1, 0), P(0, 1)]

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            as_polygon(np.zeros((3, 3)))

    def test_returns_new_list(self):
        src = [P(0, 0), P(1, 0), P(0, 1)]
        out = as_polygon(src)
        assert out == src and out is not src
