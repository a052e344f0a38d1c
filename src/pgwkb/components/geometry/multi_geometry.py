from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.collection import MultiGeometry
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.line_string import CircularString, LineString
from pgwkb.components.geometry.point import Point
from pgwkb.components.geometry.polygon import CurvePolygon, Polygon
from pgwkb.core.enums import GeometryType


class MultiPoint(MultiGeometry):
    GEOMETRY_TYPE = GeometryType.MULTI_POINT
    ELEMENT_TYPES = (Point,)


class MultiLineString(MultiGeometry):
    GEOMETRY_TYPE = GeometryType.MULTI_LINE_STRING
    ELEMENT_TYPES = (LineString,)


class MultiPolygon(MultiGeometry):
    GEOMETRY_TYPE = GeometryType.MULTI_POLYGON
    ELEMENT_TYPES = (Polygon,)


class MultiCurve(MultiGeometry):
    """Collection of straight, circular and compound curves"""
    GEOMETRY_TYPE = GeometryType.MULTI_CURVE
    ELEMENT_TYPES = (LineString, CircularString, CompoundCurve)


class MultiSurface(MultiGeometry):
    """Collection of plain and curved polygons"""
    GEOMETRY_TYPE = GeometryType.MULTI_SURFACE
    ELEMENT_TYPES = (Polygon, CurvePolygon)


class GeometryCollection(MultiGeometry):
    """Heterogeneous collection of any geometries"""
    GEOMETRY_TYPE = GeometryType.GEOMETRY_COLLECTION
    ELEMENT_TYPES = (Geometry,)
