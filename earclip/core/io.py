"""Lightweight polygon / triangulation file I/O.

- read_polygon_json: load a polygon from JSON
- write_triangles_json: dump coordinate triangles to JSON
- write_vtk: export legacy VTK for ParaView/VisIt
- format_triangle / format_triangles: the plain text lines printed by the demo

Index based data follows the usual mesh layout:
    points: (N, 2) float64 array
    triangles: (M, 3) int32 array
"""
from __future__ import annotations

import json
from typing import Dict, List, Optional

import numpy as np

from .geometry import Point2D, as_polygon


def read_polygon_json(filepath: str) -> List[Point2D]:
    """Read a polygon from a JSON file.

    Accepted layouts are a bare list of ``[x, y]`` pairs or an object with a
    ``"vertices"`` key holding such a list.

    Raises
    ------
    ValueError
        If the document does not describe an (N, 2) list of numbers.
    FileNotFoundError
        If the file doesn't exist.
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        doc = json.load(f)
    if isinstance(doc, dict):
        if 'vertices' not in doc:
            raise ValueError(f"{filepath}: expected a 'vertices' key")
        doc = doc['vertices']
    try:
        arr = np.asarray(doc, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{filepath}: vertices must be numeric [x, y] pairs ({e})") from e
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"{filepath}: vertices must be (N, 2), got shape {arr.shape}")
    return as_polygon(arr)


def write_triangles_json(filepath: str, triangles, indent: Optional[int] = 2) -> None:
    """Write triangles as ``{"triangles": [[[x, y], [x, y], [x, y]], ...]}``."""
    payload = {'triangles': [[[p.x, p.y] for p in map(Point2D.of, tri)] for tri in triangles]}
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=indent)
        f.write('\n')


def write_vtk(filepath: str,
              points: np.ndarray,
              triangles: np.ndarray,
              cell_data: Optional[Dict[str, np.ndarray]] = None,
              title: str = "earclip triangulation") -> None:
    """Write a 2D triangulation to legacy VTK format (ASCII).

    Parameters
    ----------
    filepath : str
        Output .vtk file path
    points : (N, 2) ndarray
        Vertex coordinates; z=0 is added.
    triangles : (M, 3) ndarray
        Triangle connectivity (0-indexed)
    cell_data : dict, optional
        Scalar data per triangle, each value an (M,) array.
    title : str
        Dataset title/description

    Examples
    --------
    >>> pts = [(0, 0), (2, 0), (2, 2), (0, 2)]
    >>> write_vtk('square.vtk', np.asarray(pts), triangulate_indices(pts),
    ...           cell_data={'clip_order': np.arange(2)})
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles)

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {points.shape}")
    if triangles.ndim != 2 or triangles.shape[1] != 3:
        raise ValueError(f"triangles must be (M, 3), got shape {triangles.shape}")

    num_points = len(points)
    num_triangles = len(triangles)

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {num_points} double\n")
        for pt in points:
            f.write(f"{pt[0]:.16e} {pt[1]:.16e} {0.0:.16e}\n")

        # numIndices v0 v1 v2
        f.write(f"\nCELLS {num_triangles} {num_triangles * 4}\n")
        for tri in triangles:
            f.write(f"3 {int(tri[0])} {int(tri[1])} {int(tri[2])}\n")

        # VTK_TRIANGLE = 5
        f.write(f"\nCELL_TYPES {num_triangles}\n")
        for _ in range(num_triangles):
            f.write("5\n")

        if cell_data:
            f.write(f"\nCELL_DATA {num_triangles}\n")
            for name, values in cell_data.items():
                values = np.asarray(values)
                if values.shape != (num_triangles,):
                    raise ValueError(f"cell_data[{name!r}] must have shape ({num_triangles},), got {values.shape}")
                f.write(f"SCALARS {name} double 1\n")
                f.write("LOOKUP_TABLE default\n")
                for v in values:
                    f.write(f"{float(v):.16e}\n")


def format_triangle(triangle, precision: int = 6) -> str:
    """Render one triangle as ``Triangle: (x, y) (x, y) (x, y) ``."""
    parts = [f"({p.x:.{precision}f}, {p.y:.{precision}f}) " for p in map(Point2D.of, triangle)]
    return "Triangle: " + "".join(parts)


def format_triangles(triangles, precision: int = 6) -> List[str]:
    return [format_triangle(t, precision) for t in triangles]


__all__ = [
    'read_polygon_json',
    'write_triangles_json',
    'write_vtk',
    'format_triangle',
    'format_triangles',
]
