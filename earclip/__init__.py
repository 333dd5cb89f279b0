"""Public package API for earclip.

This facade provides a flat import surface on top of the implementation
package ``earclip.core`` while deferring the matplotlib import until a plot
is actually requested, keeping ``import earclip`` fast.

Example
-------
    from earclip import triangulate, Point2D

    polygon = [Point2D(0, 0), Point2D(2, 0), Point2D(2, 2), Point2D(0, 2)]
    triangles = triangulate(polygon)   # consumes ``polygon``

The deeper modules (``earclip.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
import logging as _logging

try:
    __version__ = _pkg_version("earclip")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_geom = _imp('earclip.core.geometry')
_const = _imp('earclip.core.constants')
_tri = _imp('earclip.core.triangulation')
_diag = _imp('earclip.core.diagnostics')
_io = _imp('earclip.core.io')
_config = _imp('earclip.core.config')
_log = _imp('earclip.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# matplotlib backed, loaded on first use
visualization = _lazy_module('earclip.core.visualization')


def plot_triangulation(*args, **kwargs):
    return visualization.plot_triangulation(*args, **kwargs)


# Primitives and predicates
Point2D = _geom.Point2D
add = _geom.add
sub = _geom.sub
cross = _geom.cross
is_clockwise = _geom.is_clockwise
is_convex = _geom.is_convex
is_point_inside_triangle = _geom.is_point_inside_triangle
polygon_signed_area = _geom.polygon_signed_area

# Triangulation
is_ear = _tri.is_ear
triangulate = _tri.triangulate
triangulate_report = _tri.triangulate_report
ear_clip_triangulation = _tri.ear_clip_triangulation
triangulate_indices = _tri.triangulate_indices
TriangulationReport = _tri.TriangulationReport
PolygonTooSmallError = _tri.PolygonTooSmallError

verify_triangulation = _diag.verify_triangulation
TriangulationConfig = _config.TriangulationConfig
OutputConfig = _config.OutputConfig
configure_logging = _log.configure_logging
DEMO_POLYGON = _const.DEMO_POLYGON

# Namespace submodules
geometry = _geom
triangulation = _tri
diagnostics = _diag
constants = _const
io = _io
config = _config

__all__ = [
    '__version__',
    # primitives
    'Point2D', 'add', 'sub', 'cross',
    'is_clockwise', 'is_convex', 'is_point_inside_triangle', 'polygon_signed_area',
    # triangulation
    'is_ear', 'triangulate', 'triangulate_report', 'ear_clip_triangulation',
    'triangulate_indices', 'TriangulationReport', 'PolygonTooSmallError',
    # ambient
    'verify_triangulation', 'TriangulationConfig', 'OutputConfig', 'configure_logging',
    'plot_triangulation', 'DEMO_POLYGON',
    # submodules / namespaces
    'geometry', 'triangulation', 'diagnostics', 'constants', 'io', 'config', 'visualization',
]
