"""Matplotlib rendering of a polygon and its ear-clipping triangulation."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Headless environments need a non-interactive backend before pyplot loads
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as _PolygonPatch

from .config import OutputConfig
from .logging_utils import get_logger

logger = get_logger('earclip.viz')


def plot_triangulation(polygon, triangles, outname="triangulation.png",
                       label_order: bool = True, config: OutputConfig = None):
    """Draw ``triangles`` filled in clip order over the ``polygon`` outline.

    Args:
        polygon: the vertex sequence as it was before triangulating
        triangles: triangles returned by the triangulator
        outname: output image path
        label_order: if True, write the clip index at each triangle centroid
        config: dpi and title settings
    """
    cfg = config or OutputConfig()
    pts = np.asarray([tuple(p) for p in polygon], dtype=float)
    fig, ax = plt.subplots(figsize=(6, 6))
    cmap = plt.get_cmap('viridis')
    ntri = len(triangles)
    for k, tri in enumerate(triangles):
        corners = np.asarray([tuple(p) for p in tri], dtype=float)
        color = cmap(k / max(1, ntri - 1))
        ax.add_patch(_PolygonPatch(corners, closed=True, facecolor=color, alpha=0.45,
                                   edgecolor='black', linewidth=0.8))
        if label_order:
            cx, cy = corners.mean(axis=0)
            ax.text(cx, cy, str(k), ha='center', va='center', fontsize=8)
    if pts.shape[0] >= 2:
        xs = list(pts[:, 0]) + [pts[0, 0]]
        ys = list(pts[:, 1]) + [pts[0, 1]]
        ax.plot(xs, ys, color=(0.85, 0.2, 0.2), linewidth=1.8)
        ax.scatter(pts[:, 0], pts[:, 1], s=12, color='black', zorder=3)
    ax.set_title(f"{cfg.plot_title} ({ntri} triangles)")
    ax.set_aspect('equal')
    ax.autoscale_view()
    fig.savefig(outname, dpi=cfg.plot_dpi)
    plt.close(fig)
    logger.info("wrote %s", outname)
    return outname


__all__ = ['plot_triangulation']
