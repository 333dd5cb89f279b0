"""Geometry primitives and orientation predicates.

The predicates here use strict comparisons against zero and assume the
clockwise winding that the triangulator establishes before calling them.
A zero cross product never counts as a convex turn, while a query point
lying exactly on a triangle edge counts as inside.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

import numpy as np

__all__ = [
    'Point2D', 'add', 'sub', 'cross',
    'is_clockwise', 'is_convex', 'is_point_inside_triangle',
    'as_polygon', 'triangle_area', 'polygon_signed_area', 'polygon_area',
]


@dataclass(frozen=True)
class Point2D:
    """Immutable 2D point, also used as a free vector."""
    x: float
    y: float

    @classmethod
    def of(cls, p) -> 'Point2D':
        """Coerce a Point2D or any (x, y) pair into a Point2D."""
        if isinstance(p, cls):
            return p
        if len(p) != 2:
            raise ValueError(f"expected an (x, y) pair, got {p!r}")
        return cls(float(p[0]), float(p[1]))

    def __add__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def add(a: Point2D, b: Point2D) -> Point2D:
    return a + b


def sub(a: Point2D, b: Point2D) -> Point2D:
    return a - b


def cross(a: Point2D, b: Point2D) -> float:
    """Scalar 2D cross product; > 0 when b turns counter-clockwise from a."""
    return a.x * b.y - a.y * b.x


def is_clockwise(vertices: Sequence[Point2D]) -> bool:
    """Return True when the cyclic vertex order is clockwise.

    Uses the trapezoid form of the shoelace sum,
    ``sum((next.x - cur.x) * (next.y + cur.y))``, which is positive for a
    clockwise loop. A zero sum (zero area, collinear input) is reported as
    not clockwise.
    """
    n = len(vertices)
    total = 0.0
    for i in range(n):
        current = vertices[i]
        nxt = vertices[(i + 1) % n]
        total += (nxt.x - current.x) * (nxt.y + current.y)
    return total > 0.0


def is_convex(prev: Point2D, current: Point2D, next: Point2D) -> bool:
    """Return True if ``current`` is a convex corner of a clockwise polygon.

    Collinear triples are not convex.
    """
    prev_edge = prev - current
    next_edge = next - current
    return cross(prev_edge, next_edge) > 0.0


def is_point_inside_triangle(point: Point2D, prev: Point2D, current: Point2D, next: Point2D) -> bool:
    """Edge-sign containment test for the triangle (prev, current, next).

    The point is outside as soon as it lies strictly on the positive side of
    one of the three directed edges. Points on an edge or a corner count as
    inside.
    """
    prev_to_current = current - prev
    current_to_next = next - current
    next_to_prev = prev - next

    prev_to_point = point - prev
    current_to_point = point - current
    next_to_point = point - next

    alpha = cross(prev_to_current, prev_to_point)
    beta = cross(current_to_next, current_to_point)
    gamma = cross(next_to_prev, next_to_point)

    if alpha > 0.0 or beta > 0.0 or gamma > 0.0:
        return False
    return True


def as_polygon(points: Iterable) -> List[Point2D]:
    """Build a fresh, caller-independent polygon list from any (x, y) iterable.

    Accepts Point2D instances, tuples/lists, or an ``(N, 2)`` numpy array.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points must be (N, 2), got shape {arr.shape}")
        return [Point2D(float(x), float(y)) for x, y in arr]
    return [Point2D.of(p) for p in points]


def triangle_area(a, b, c) -> float:
    """Signed area of triangle abc; positive when counter-clockwise."""
    a = Point2D.of(a); b = Point2D.of(b); c = Point2D.of(c)
    return 0.5 * cross(b - a, c - a)


def polygon_signed_area(polygon) -> float:
    """Return signed area of polygon (sequence of (x, y)); positive if CCW."""
    arr = np.asarray([tuple(p) for p in polygon], dtype=float)
    if arr.shape[0] < 3:
        return 0.0
    x = arr[:, 0]; y = arr[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def polygon_area(polygon) -> float:
    return abs(polygon_signed_area(polygon))
