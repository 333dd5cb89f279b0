"""Central numerical tolerances and fixed sample data.

The ear-clipping predicates compare against exact zero and never read these
values; they are only used when verifying a finished triangulation so the
checks can be tuned without scattering literals.
"""
from __future__ import annotations

# Verification tolerances
EPS_AREA: float = 1e-12           # absolute slack for summed triangle area
EPS_TINY: float = 1e-9            # relative slack for summed triangle area

# Polygon used by the demonstration entry point
DEMO_POLYGON = (
    (-1.0, -1.0),
    (-2.0, 1.0),
    (1.0, 1.0),
    (0.0, 0.0),
    (3.0, -1.0),
)

__all__ = [
    'EPS_AREA',
    'EPS_TINY',
    'DEMO_POLYGON',
]
