from typing import Any, Callable, Dict, List, Tuple, Type
import logging
import numpy as np
import shapely
from shapely.geometry import (
    Point as ShapelyPoint,
    LineString as ShapelyLineString,
    LinearRing as ShapelyLinearRing,
    Polygon as ShapelyPolygon,
    MultiPoint as ShapelyMultiPoint,
    MultiLineString as ShapelyMultiLineString,
    MultiPolygon as ShapelyMultiPolygon,
    GeometryCollection as ShapelyGeometryCollection,
)
from shapely.geometry.base import BaseGeometry

from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.geometry_ops import set_srid, iter_geometries
from pgwkb.components.geometry.line_string import LineBasedGeometry, LineString, LinearRing
from pgwkb.components.geometry.multi_geometry import (
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
)
from pgwkb.components.geometry.point import Point
from pgwkb.components.geometry.polygon import Polygon
from pgwkb.core.enums import UNKNOWN_SRID, GeometryType
from pgwkb.core.exceptions import TypeMismatchError, UnsupportedTypeError

logger = logging.getLogger(__name__)


def _point_tuple(point: Point) -> Tuple[float, ...]:
    if point.is_3d:
        return (point.x, point.y, point.z)
    return (point.x, point.y)


def _coord_list(geometry: Geometry) -> List[Tuple[float, ...]]:
    return [_point_tuple(p) for p in geometry.coordinates()]


class GeometryAdapter:
    """
    Adapter between pgwkb geometries, Shapely geometries and numpy arrays (Adapter Pattern)

    Only the linear variants have a Shapely counterpart; curved variants
    raise UnsupportedTypeError. Shapely has no measure support, so measures
    are dropped with a warning.
    """

    @staticmethod
    def _point_to_shapely(geometry: Point) -> ShapelyPoint:
        if geometry.is_empty:
            return ShapelyPoint()
        return ShapelyPoint(_point_tuple(geometry))

    @staticmethod
    def _line_to_shapely(geometry: LineString) -> ShapelyLineString:
        return ShapelyLineString(_coord_list(geometry))

    @staticmethod
    def _ring_to_shapely(geometry: LinearRing) -> ShapelyLinearRing:
        return ShapelyLinearRing(_coord_list(geometry))

    @staticmethod
    def _polygon_to_shapely(geometry: Polygon) -> ShapelyPolygon:
        if geometry.is_empty:
            return ShapelyPolygon()
        shell = _coord_list(geometry.outer_ring)
        holes = [_coord_list(ring) for ring in geometry.inner_rings]
        return ShapelyPolygon(shell, holes)

    @classmethod
    def _multi_point_to_shapely(cls, geometry: MultiPoint) -> ShapelyMultiPoint:
        return ShapelyMultiPoint([cls._point_to_shapely(p) for p in geometry])

    @classmethod
    def _multi_line_to_shapely(cls, geometry: MultiLineString) -> ShapelyMultiLineString:
        return ShapelyMultiLineString([cls._line_to_shapely(line) for line in geometry])

    @classmethod
    def _multi_polygon_to_shapely(cls, geometry: MultiPolygon) -> ShapelyMultiPolygon:
        return ShapelyMultiPolygon([cls._polygon_to_shapely(p) for p in geometry])

    @classmethod
    def _collection_to_shapely(cls, geometry: GeometryCollection) -> ShapelyGeometryCollection:
        return ShapelyGeometryCollection([cls._convert_to_shapely(g) for g in geometry])

    # Strategy map: geometry class -> conversion (filled in below the class body)
    TO_SHAPELY_HANDLERS: Dict[Type[Geometry], Callable] = {}

    @classmethod
    def _convert_to_shapely(cls, geometry: Geometry) -> BaseGeometry:
        handler = cls.TO_SHAPELY_HANDLERS.get(type(geometry))
        if handler is None:
            raise UnsupportedTypeError(type_name=type(geometry).__name__)
        return handler(geometry)

    @classmethod
    def to_shapely(cls, geometry: Geometry) -> BaseGeometry:
        """
        Convert a geometry to its Shapely equivalent

        Args:
            geometry: Linear geometry (no circular or compound parts)

        Returns:
            Shapely geometry carrying the same SRID

        Raises:
            UnsupportedTypeError: If the tree contains a curved variant
        """
        if any(g.has_measure for g in iter_geometries(geometry) if isinstance(g, Point)):
            logger.warning(
                f"[GEOMETRY ADAPTER]: Dropping measures of {type(geometry).__name__}, "
                f"Shapely geometries carry no M values"
            )
        result = cls._convert_to_shapely(geometry)
        if geometry.srid != UNKNOWN_SRID:
            result = shapely.set_srid(result, geometry.srid)
        return result

    @staticmethod
    def _point_from_shapely(shape: Any) -> Point:
        if shape.is_empty:
            return Point()
        return Point(*shape.coords[0])

    @staticmethod
    def _line_from_shapely(shape: Any) -> LineString:
        return LineString([Point(*c) for c in shape.coords])

    @staticmethod
    def _ring_from_shapely(shape: Any) -> LinearRing:
        return LinearRing([Point(*c) for c in shape.coords])

    @classmethod
    def _polygon_from_shapely(cls, shape: Any) -> Polygon:
        if shape.is_empty:
            return Polygon()
        rings = [cls._ring_from_shapely(shape.exterior)]
        rings.extend(cls._ring_from_shapely(r) for r in shape.interiors)
        return Polygon(rings)

    @classmethod
    def _multi_point_from_shapely(cls, shape: Any) -> MultiPoint:
        return MultiPoint([cls._point_from_shapely(g) for g in shape.geoms])

    @classmethod
    def _multi_line_from_shapely(cls, shape: Any) -> MultiLineString:
        return MultiLineString([cls._line_from_shapely(g) for g in shape.geoms])

    @classmethod
    def _multi_polygon_from_shapely(cls, shape: Any) -> MultiPolygon:
        return MultiPolygon([cls._polygon_from_shapely(g) for g in shape.geoms])

    @classmethod
    def _collection_from_shapely(cls, shape: Any) -> GeometryCollection:
        return GeometryCollection([cls._convert_from_shapely(g) for g in shape.geoms])

    # Strategy map: Shapely geom_type -> conversion (filled in below the class body)
    FROM_SHAPELY_HANDLERS: Dict[str, Callable] = {}

    @classmethod
    def _convert_from_shapely(cls, shape: Any) -> Geometry:
        handler = cls.FROM_SHAPELY_HANDLERS.get(shape.geom_type)
        if handler is None:
            raise UnsupportedTypeError(type_name=shape.geom_type)
        return handler(shape)

    @classmethod
    def from_shapely(cls, shape: Any, srid: int = UNKNOWN_SRID) -> Geometry:
        """
        Convert a Shapely geometry

        Args:
            shape: Shapely geometry
            srid: SRID to assign; when 0 the Shapely SRID is used

        Returns:
            Equivalent geometry tree with the SRID applied to every node
        """
        result = cls._convert_from_shapely(shape)
        if srid == UNKNOWN_SRID:
            srid = int(shapely.get_srid(shape))
        return set_srid(result, srid)

    @classmethod
    def to_array(cls, geometry: Geometry) -> np.ndarray:
        """
        Flatten the coordinates of a geometry into an array

        Args:
            geometry: Any geometry

        Returns:
            Float array of shape (N, K) with columns x, y, [z], [m]; K is
            2, 3 or 4 depending on dimension and measure. Ordinates a point
            lacks are NaN.
        """
        has_z = geometry.is_3d
        has_m = geometry.has_measure
        rows = []
        for p in geometry.coordinates():
            row = [p.x, p.y]
            if has_z:
                row.append(np.nan if p.z is None else p.z)
            if has_m:
                row.append(np.nan if p.m is None else p.m)
            rows.append(row)
        return np.array(rows, dtype=np.float64).reshape(len(rows), 2 + int(has_z) + int(has_m))

    @classmethod
    def from_array(
        cls,
        array: Any,
        geometry_class: Type[LineBasedGeometry] = LineString,
        has_measure: bool = False,
        srid: int = UNKNOWN_SRID
    ) -> LineBasedGeometry:
        """
        Build a line-based geometry from a coordinate array

        Args:
            array: Array-like of shape (N, 2), (N, 3) or (N, 4)
            geometry_class: LineString, LinearRing or CircularString
            has_measure: Whether the last column of a 3-column array is m
                rather than z
            srid: Spatial reference id

        Returns:
            New geometry of the requested class

        Raises:
            TypeMismatchError: If geometry_class is not line-based
            ValueError: If the array has the wrong shape
        """
        if not (isinstance(geometry_class, type) and issubclass(geometry_class, LineBasedGeometry)):
            raise TypeMismatchError(
                ("LineString", "LinearRing", "CircularString"), getattr(geometry_class, "__name__", str(geometry_class))
            )
        coords = np.asarray(array, dtype=np.float64)
        if coords.ndim != 2 or coords.shape[1] not in (2, 3, 4):
            raise ValueError(f"Expected an array of shape (N, 2..4), got {coords.shape}")

        points = []
        for row in coords:
            if coords.shape[1] == 2:
                points.append(Point(row[0], row[1]))
            elif coords.shape[1] == 3 and has_measure:
                points.append(Point(row[0], row[1], m=row[2]))
            elif coords.shape[1] == 3:
                points.append(Point(row[0], row[1], row[2]))
            else:
                points.append(Point(row[0], row[1], row[2], row[3]))
        return geometry_class(points, srid=srid)


GeometryAdapter.TO_SHAPELY_HANDLERS.update({
    Point: GeometryAdapter._point_to_shapely,
    LineString: GeometryAdapter._line_to_shapely,
    LinearRing: GeometryAdapter._ring_to_shapely,
    Polygon: GeometryAdapter._polygon_to_shapely,
    MultiPoint: GeometryAdapter._multi_point_to_shapely,
    MultiLineString: GeometryAdapter._multi_line_to_shapely,
    MultiPolygon: GeometryAdapter._multi_polygon_to_shapely,
    GeometryCollection: GeometryAdapter._collection_to_shapely,
})

GeometryAdapter.FROM_SHAPELY_HANDLERS.update({
    GeometryType.POINT.label: GeometryAdapter._point_from_shapely,
    GeometryType.LINE_STRING.label: GeometryAdapter._line_from_shapely,
    GeometryType.LINEAR_RING.label: GeometryAdapter._ring_from_shapely,
    GeometryType.POLYGON.label: GeometryAdapter._polygon_from_shapely,
    GeometryType.MULTI_POINT.label: GeometryAdapter._multi_point_from_shapely,
    GeometryType.MULTI_LINE_STRING.label: GeometryAdapter._multi_line_from_shapely,
    GeometryType.MULTI_POLYGON.label: GeometryAdapter._multi_polygon_from_shapely,
    GeometryType.GEOMETRY_COLLECTION.label: GeometryAdapter._collection_from_shapely,
})
