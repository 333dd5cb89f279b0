"""Diagnostics for finished triangulations.

Checks the properties a complete ear-clipping run guarantees on a simple
polygon: n - 2 triangles, conserved area and triangle corners drawn from the
input vertices. Functions take plain sequences of (x, y) points.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from .constants import EPS_AREA, EPS_TINY
from .geometry import Point2D, polygon_area
from .logging_utils import get_logger

logger = get_logger('earclip.diagnostics')

__all__ = [
    'TriangulationCheck',
    'triangles_to_array',
    'triangles_unsigned_areas',
    'triangulation_area',
    'verify_triangulation',
]


@dataclass
class TriangulationCheck:
    expected_count: int
    actual_count: int
    polygon_area: float
    triangles_area: float
    foreign_points: List[Point2D] = field(default_factory=list)
    area_ok: bool = True

    @property
    def count_ok(self) -> bool:
        return self.expected_count == self.actual_count

    @property
    def subset_ok(self) -> bool:
        return not self.foreign_points

    @property
    def ok(self) -> bool:
        return self.count_ok and self.area_ok and self.subset_ok

    def summary(self) -> str:
        return (f"triangles={self.actual_count}/{self.expected_count} "
                f"area={self.triangles_area:.6g}/{self.polygon_area:.6g} "
                f"foreign_points={len(self.foreign_points)}")


def triangles_to_array(triangles) -> np.ndarray:
    """Stack triangles into an ``(M, 3, 2)`` float array."""
    if len(triangles) == 0:
        return np.empty((0, 3, 2), dtype=np.float64)
    arr = np.asarray([[tuple(p) for p in tri] for tri in triangles], dtype=np.float64)
    if arr.ndim != 3 or arr.shape[1:] != (3, 2):
        raise ValueError(f"triangles must be (M, 3, 2), got shape {arr.shape}")
    return arr


def triangles_unsigned_areas(triangles) -> np.ndarray:
    t = triangles_to_array(triangles)
    if t.shape[0] == 0:
        return np.zeros((0,), dtype=np.float64)
    ab = t[:, 1] - t[:, 0]
    ac = t[:, 2] - t[:, 0]
    return 0.5 * np.abs(ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0])


def triangulation_area(triangles) -> float:
    return float(np.sum(triangles_unsigned_areas(triangles)))


def verify_triangulation(polygon: Sequence, triangles,
                         area_tol_rel: float = EPS_TINY,
                         area_tol_abs: float = EPS_AREA) -> TriangulationCheck:
    """Compare a triangulation against the polygon it came from.

    ``polygon`` must be the vertex sequence as it was before triangulating
    (the triangulator consumes its own input).
    """
    vertices = {Point2D.of(p) for p in polygon}
    poly_area = polygon_area(polygon)
    tri_area = triangulation_area(triangles)
    foreign = []
    for tri in triangles:
        for p in tri:
            p = Point2D.of(p)
            if p not in vertices and p not in foreign:
                foreign.append(p)
    tol = max(area_tol_abs, area_tol_rel * poly_area)
    check = TriangulationCheck(
        expected_count=max(0, len(polygon) - 2),
        actual_count=len(triangles),
        polygon_area=poly_area,
        triangles_area=tri_area,
        foreign_points=foreign,
        area_ok=abs(tri_area - poly_area) <= tol,
    )
    logger.debug("verify_triangulation: %s", check.summary())
    return check
