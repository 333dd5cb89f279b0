"""Configuration objects for triangulation runs and result output."""
from __future__ import annotations

from dataclasses import dataclass, field

from .constants import EPS_AREA, EPS_TINY


@dataclass
class TriangulationConfig:
    """Options for :func:`earclip.core.triangulation.ear_clip_triangulation`.

    - copy_input: triangulate a private copy so the caller's sequence survives.
    - verify: run the diagnostics checks on the result and log them.
    - area_tol_rel: relative tolerance for the area conservation check.
    - area_tol_abs: absolute tolerance for the area conservation check.
    """
    copy_input: bool = True
    verify: bool = False
    area_tol_rel: float = EPS_TINY
    area_tol_abs: float = EPS_AREA


@dataclass
class OutputConfig:
    precision: int = 6
    json_indent: int = 2
    plot_dpi: int = 150
    plot_title: str = 'ear clipping'


@dataclass
class RunConfig:
    """Unified configuration used by the command line entry point.

    Attributes
    ----------
    triangulation : TriangulationConfig
        Algorithm side options.
    output : OutputConfig
        Formatting of printed and written results.
    """
    triangulation: TriangulationConfig = field(default_factory=TriangulationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


__all__ = ['TriangulationConfig', 'OutputConfig', 'RunConfig']
