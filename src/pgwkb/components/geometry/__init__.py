"""
Geometry module for the Simple Features type system.

This module provides the geometry variants (points, lines, polygons, their
curved and multi variants), tree-wide SRID handling and interop with
shapely and numpy.
"""

from pgwkb.components.geometry.base import Geometry, parse_srid
from pgwkb.components.geometry.point import Point
from pgwkb.components.geometry.line_string import (
    LineBasedGeometry,
    LineString,
    LinearRing,
    CircularString,
)
from pgwkb.components.geometry.collection import MultiGeometry
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.polygon import PolygonBase, Polygon, CurvePolygon
from pgwkb.components.geometry.multi_geometry import (
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    MultiCurve,
    MultiSurface,
    GeometryCollection,
)
from pgwkb.components.geometry.geometry_ops import set_srid, iter_geometries, dimension_flags, check_consistency
from pgwkb.components.geometry.geometry_adapter import GeometryAdapter

__all__ = [
    'Geometry',
    'parse_srid',
    'Point',
    'LineBasedGeometry',
    'LineString',
    'LinearRing',
    'CircularString',
    'MultiGeometry',
    'CompoundCurve',
    'PolygonBase',
    'Polygon',
    'CurvePolygon',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'MultiCurve',
    'MultiSurface',
    'GeometryCollection',
    'set_srid',
    'iter_geometries',
    'dimension_flags',
    'check_consistency',
    'GeometryAdapter',
]
