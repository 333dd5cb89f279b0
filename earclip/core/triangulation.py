"""Ear-clipping triangulation of simple polygons.

``triangulate`` works in place on a list of :class:`Point2D`: the list is
reversed when it is not clockwise and one vertex is deleted per clipped ear.
Callers that need their polygon afterwards pass a copy or use
``ear_clip_triangulation``, which copies for them.

When a full scan finds no ear (non-simple or degenerate input) clipping stops
and the first three leftover vertices form the final triangle; the other
leftovers are dropped. ``triangulate_report`` exposes that case through
``TriangulationReport.complete``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import TriangulationConfig
from .diagnostics import verify_triangulation
from .geometry import Point2D, as_polygon, is_clockwise, is_convex, is_point_inside_triangle
from .logging_utils import get_logger

__all__ = [
    'Triangle',
    'PolygonTooSmallError',
    'TriangulationReport',
    'is_ear',
    'triangulate',
    'triangulate_report',
    'ear_clip_triangulation',
    'triangulate_indices',
]

logger = get_logger('earclip.triangulation')

Triangle = Tuple[Point2D, Point2D, Point2D]


class PolygonTooSmallError(ValueError):
    """Raised when a polygon with fewer than three vertices is triangulated."""

    def __init__(self, count: int):
        super().__init__(f"a polygon needs at least 3 vertices to be triangulated, got {count}")
        self.count = count


@dataclass
class TriangulationReport:
    """Outcome of one ear-clipping run.

    Attributes
    ----------
    triangles : list of Triangle
        Clipped ears in clip order, final residual triangle last.
    indices : list of (int, int, int)
        The same triangles as positions in the polygon as it was passed in.
    complete : bool
        False when clipping stopped because no ear was found.
    remaining : int
        Vertex count left when clipping stopped (3 for a complete run).
    """
    triangles: List[Triangle] = field(default_factory=list)
    indices: List[Tuple[int, int, int]] = field(default_factory=list)
    complete: bool = True
    remaining: int = 3

    @property
    def discarded(self) -> int:
        """Number of leftover vertices not covered by the final triangle."""
        return max(0, self.remaining - 3)


def is_ear(vertices: Sequence[Point2D], prev_index: int, current_index: int, next_index: int) -> bool:
    """Return True if no other polygon vertex lies in the (prev, current, next) triangle.

    Vertices are skipped by index, not by coordinates: a duplicate of a
    corner stored at another index is still tested and blocks the ear.
    Convexity is not checked here.
    """
    prev = vertices[prev_index]
    current = vertices[current_index]
    nxt = vertices[next_index]
    for j in range(len(vertices)):
        if j == prev_index or j == current_index or j == next_index:
            continue
        if is_point_inside_triangle(vertices[j], prev, current, nxt):
            return False
    return True


def _find_ear(vertices: Sequence[Point2D]) -> Optional[Tuple[int, int, int]]:
    n = len(vertices)
    for i in range(n):
        prev_index = (i - 1 + n) % n
        next_index = (i + 1) % n
        if (is_convex(vertices[prev_index], vertices[i], vertices[next_index])
                and is_ear(vertices, prev_index, i, next_index)):
            return prev_index, i, next_index
    return None


def triangulate_report(vertices: List[Point2D]) -> TriangulationReport:
    """Triangulate ``vertices`` in place and describe how clipping ended.

    Raises
    ------
    PolygonTooSmallError
        If fewer than 3 vertices are given.
    """
    if len(vertices) < 3:
        raise PolygonTooSmallError(len(vertices))
    # labels track original positions through reversal and deletion
    labels = list(range(len(vertices)))
    report = TriangulationReport()

    if not is_clockwise(vertices):
        vertices.reverse()
        labels.reverse()
        logger.debug("reversed %d vertices to clockwise order", len(vertices))

    while len(vertices) > 3:
        ear = _find_ear(vertices)
        if ear is None:
            report.complete = False
            logger.warning(
                "no ear found with %d vertices left; polygon is not simple or degenerate, "
                "keeping the first 3 and dropping %d", len(vertices), len(vertices) - 3)
            break
        p, c, n = ear
        report.triangles.append((vertices[p], vertices[c], vertices[n]))
        report.indices.append((labels[p], labels[c], labels[n]))
        logger.debug("clipped ear at original vertex %d (%d vertices left)", labels[c], len(vertices) - 1)
        del vertices[c]
        del labels[c]

    report.remaining = len(vertices)
    report.triangles.append((vertices[0], vertices[1], vertices[2]))
    report.indices.append((labels[0], labels[1], labels[2]))
    return report


def triangulate(vertices: List[Point2D]) -> List[Triangle]:
    """Ear-clip a simple polygon, consuming ``vertices``.

    On return ``vertices`` holds the last three (or, after an early stop, the
    leftover) vertices in clockwise order. For ``n`` vertices a complete run
    yields ``n - 2`` triangles ordered (prev, current, next).
    """
    return triangulate_report(vertices).triangles


def ear_clip_triangulation(points: Iterable, config: Optional[TriangulationConfig] = None) -> List[Triangle]:
    """Triangulate any iterable of (x, y) pairs.

    With the default config the input is copied into a fresh polygon so the
    caller's data is left untouched. ``copy_input=False`` requires ``points``
    to already be a list of Point2D, which is then consumed.
    """
    cfg = config or TriangulationConfig()
    if cfg.copy_input:
        polygon = as_polygon(points)
    else:
        if not isinstance(points, list) or not all(isinstance(p, Point2D) for p in points):
            raise TypeError("copy_input=False needs a list of Point2D to consume")
        polygon = points
    original = list(polygon) if cfg.verify else None
    triangles = triangulate(polygon)
    if cfg.verify:
        check = verify_triangulation(original, triangles,
                                     area_tol_rel=cfg.area_tol_rel, area_tol_abs=cfg.area_tol_abs)
        if check.ok:
            logger.info("triangulation verified: %s", check.summary())
        else:
            logger.warning("triangulation failed verification: %s", check.summary())
    return triangles


def triangulate_indices(points: Iterable) -> np.ndarray:
    """Return the triangulation as an ``(M, 3)`` int array of input positions.

    The input is copied; indices refer to the order in which ``points`` was
    given, before any winding reversal.
    """
    report = triangulate_report(as_polygon(points))
    return np.asarray(report.indices, dtype=np.int32).reshape(-1, 3)
