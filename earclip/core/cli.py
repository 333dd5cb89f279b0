#!/usr/bin/env python3
"""
Triangulate a polygon with ear clipping and print one line per triangle.

Without ``--input`` the built-in five vertex demo polygon is used. Optional
outputs: JSON triangles, a legacy VTK file and a PNG plot.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from .config import RunConfig
from .constants import DEMO_POLYGON
from .diagnostics import verify_triangulation
from .geometry import as_polygon
from .io import format_triangles, read_polygon_json, write_triangles_json, write_vtk
from .logging_utils import configure_logging, get_logger
from .triangulation import triangulate_report

log = get_logger('earclip.cli')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='earclip-demo', description=__doc__.strip().splitlines()[0])
    ap.add_argument('--input', type=str, default=None,
                    help='JSON polygon file (list of [x, y] or {"vertices": [...]}); default: demo polygon')
    ap.add_argument('--json-out', type=str, default=None, help='write triangles to this JSON file')
    ap.add_argument('--vtk-out', type=str, default=None, help='write a legacy VTK file')
    ap.add_argument('--plot', type=str, default=None, help='save a PNG rendering')
    ap.add_argument('--verify', action='store_true', help='check triangle count, area and vertex subset')
    ap.add_argument('--precision', type=_non_negative_int, default=6, help='decimals in printed coordinates')
    ap.add_argument('--log-level', type=str.upper, default='WARNING', choices=LOG_LEVELS,
                    help='logger level for the earclip namespace (default WARNING)')
    return ap


def run(polygon, cfg: RunConfig, json_out=None, vtk_out=None, plot=None) -> List[str]:
    """Triangulate ``polygon`` (left untouched) and write the requested outputs.

    Returns the printable triangle lines.
    """
    original = as_polygon(polygon)
    report = triangulate_report(list(original))
    if cfg.triangulation.verify:
        check = verify_triangulation(original, report.triangles,
                                     area_tol_rel=cfg.triangulation.area_tol_rel,
                                     area_tol_abs=cfg.triangulation.area_tol_abs)
        level = 'info' if check.ok else 'warning'
        getattr(log, level)("verification %s: %s", 'passed' if check.ok else 'failed', check.summary())
    if json_out:
        write_triangles_json(json_out, report.triangles, indent=cfg.output.json_indent)
        log.info("wrote %s", json_out)
    if vtk_out:
        pts = np.asarray([tuple(p) for p in original], dtype=float)
        tris = np.asarray(report.indices, dtype=np.int32).reshape(-1, 3)
        write_vtk(vtk_out, pts, tris, cell_data={'clip_order': np.arange(len(tris), dtype=float)})
        log.info("wrote %s", vtk_out)
    if plot:
        from .visualization import plot_triangulation
        plot_triangulation(original, report.triangles, outname=plot, config=cfg.output)
    return format_triangles(report.triangles, precision=cfg.output.precision)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    cfg = RunConfig()
    cfg.triangulation.verify = args.verify
    cfg.output.precision = args.precision
    polygon = read_polygon_json(args.input) if args.input else DEMO_POLYGON
    for line in run(polygon, cfg, json_out=args.json_out, vtk_out=args.vtk_out, plot=args.plot):
        print(line)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
