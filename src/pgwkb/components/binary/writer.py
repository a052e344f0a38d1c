"""
Recursive EWKB writer, the mirror image of BinaryParser.
"""

import logging
import math
from typing import Callable, Dict, Iterable, Optional, Tuple, Type

from pgwkb.components.binary.value_setter import BinaryValueSetter, HexValueSetter, ValueSetter
from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.collection import MultiGeometry
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.geometry_ops import dimension_flags
from pgwkb.components.geometry.line_string import CircularString, LineBasedGeometry, LineString
from pgwkb.components.geometry.multi_geometry import (
    GeometryCollection,
    MultiCurve,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    MultiSurface,
)
from pgwkb.components.geometry.point import Point
from pgwkb.components.geometry.polygon import CurvePolygon, Polygon
from pgwkb.core.enums import MAX_NESTING_DEPTH, UNKNOWN_SRID, ByteOrder, TypeFlag
from pgwkb.core.exceptions import NestingDepthError, UnsupportedTypeError

logger = logging.getLogger(__name__)

# id(geometry) -> (is_3d, has_measure)
Flags = Dict[int, Tuple[bool, bool]]


class BinaryWriter:
    """
    Writes geometries as EWKB bytes or hex text (Strategy Pattern)

    Each concrete geometry class maps to a body writer. The input is
    trusted to be consistent; run check_consistency() first when unsure.
    """

    def write_binary(self, geometry: Geometry, byte_order: ByteOrder = ByteOrder.NDR) -> bytes:
        """
        Encode a geometry as EWKB bytes

        Args:
            geometry: Geometry to encode
            byte_order: Byte order of every header and value

        Returns:
            EWKB bytes

        Raises:
            UnsupportedTypeError: If the tree contains a variant without a writer
        """
        setter = BinaryValueSetter(byte_order)
        self.write_geometry(geometry, setter)
        logger.debug(f"Encoded {type(geometry).__name__} as {len(setter.value)} bytes ({setter.byte_order.name})")
        return setter.value

    def write_hexed(self, geometry: Geometry, byte_order: ByteOrder = ByteOrder.NDR) -> str:
        """
        Encode a geometry as uppercase EWKB hex text

        Args:
            geometry: Geometry to encode
            byte_order: Byte order of every header and value

        Returns:
            Hex text, two characters per byte, no prefix
        """
        setter = HexValueSetter(byte_order)
        self.write_geometry(geometry, setter)
        logger.debug(f"Encoded {type(geometry).__name__} as {len(setter.value) // 2} hex bytes ({setter.byte_order.name})")
        return setter.value

    def write_geometry(
        self,
        geometry: Geometry,
        setter: ValueSetter,
        flags: Optional[Flags] = None,
        depth: int = 0
    ) -> None:
        """
        Write one fully headered geometry

        Args:
            geometry: Geometry to write
            setter: Destination stream
            flags: Z and M flags of the tree, as returned by dimension_flags
            depth: Number of collections enclosing this geometry

        Raises:
            NestingDepthError: If collections nest deeper than MAX_NESTING_DEPTH
            UnsupportedTypeError: If the geometry has no writer
        """
        if depth > MAX_NESTING_DEPTH:
            raise NestingDepthError(depth, MAX_NESTING_DEPTH)
        writer = self._BODY_WRITERS.get(type(geometry))
        if writer is None:
            raise UnsupportedTypeError(type_name=type(geometry).__name__)
        if flags is None:
            flags = dimension_flags(geometry)

        setter.write_encoding()
        setter.write_uint32(self.type_word(geometry, flags))
        if geometry.srid != UNKNOWN_SRID:
            setter.write_int32(geometry.srid)
        writer(self, geometry, setter, flags, depth)

    @staticmethod
    def type_word(geometry: Geometry, flags: Optional[Flags] = None) -> int:
        """
        Build the EWKB type word of a geometry

        Args:
            geometry: Geometry whose code and flags are combined
            flags: Precomputed Z and M flags of the tree containing the geometry

        Returns:
            Unsigned 32-bit type word
        """
        if flags is None:
            flags = dimension_flags(geometry)
        has_z, has_m = flags[id(geometry)]
        word = geometry.type_code
        if has_z:
            word |= TypeFlag.Z
        if has_m:
            word |= TypeFlag.MEASURE
        if geometry.srid != UNKNOWN_SRID:
            word |= TypeFlag.SRID
        return int(word)

    @staticmethod
    def _write_point(point: Point, setter: ValueSetter, has_z: bool, has_m: bool) -> None:
        setter.write_f64(point.x)
        setter.write_f64(point.y)
        if has_z:
            setter.write_f64(math.nan if point.z is None else point.z)
        if has_m:
            setter.write_f64(math.nan if point.m is None else point.m)

    def _write_points(self, line: LineBasedGeometry, setter: ValueSetter, has_z: bool, has_m: bool) -> None:
        setter.write_int32(line.num_points())
        for point in line:
            self._write_point(point, setter, has_z, has_m)

    def _write_point_body(self, geometry: Point, setter: ValueSetter, flags: Flags, depth: int) -> None:
        self._write_point(geometry, setter, *flags[id(geometry)])

    def _write_line_body(self, geometry: LineBasedGeometry, setter: ValueSetter, flags: Flags, depth: int) -> None:
        self._write_points(geometry, setter, *flags[id(geometry)])

    def _write_polygon_body(self, geometry: Polygon, setter: ValueSetter, flags: Flags, depth: int) -> None:
        # rings inherit the polygon's flags and carry no header
        has_z, has_m = flags[id(geometry)]
        setter.write_int32(geometry.num_rings())
        for ring in geometry:
            self._write_points(ring, setter, has_z, has_m)

    def _write_geometries(
        self,
        geometries: Iterable[Geometry],
        count: int,
        setter: ValueSetter,
        flags: Flags,
        depth: int
    ) -> None:
        setter.write_int32(count)
        for geometry in geometries:
            self.write_geometry(geometry, setter, flags, depth + 1)

    def _write_collection_body(self, geometry: MultiGeometry, setter: ValueSetter, flags: Flags, depth: int) -> None:
        self._write_geometries(geometry, geometry.size(), setter, flags, depth)

    def _write_curve_polygon_body(self, geometry: CurvePolygon, setter: ValueSetter, flags: Flags, depth: int) -> None:
        self._write_geometries(geometry, geometry.num_rings(), setter, flags, depth)

    # Strategy map: concrete class -> body writer
    _BODY_WRITERS: Dict[Type[Geometry], Callable] = {}


BinaryWriter._BODY_WRITERS.update({
    Point: BinaryWriter._write_point_body,
    LineString: BinaryWriter._write_line_body,
    CircularString: BinaryWriter._write_line_body,
    Polygon: BinaryWriter._write_polygon_body,
    CurvePolygon: BinaryWriter._write_curve_polygon_body,
    CompoundCurve: BinaryWriter._write_collection_body,
    MultiPoint: BinaryWriter._write_collection_body,
    MultiLineString: BinaryWriter._write_collection_body,
    MultiPolygon: BinaryWriter._write_collection_body,
    MultiCurve: BinaryWriter._write_collection_body,
    MultiSurface: BinaryWriter._write_collection_body,
    GeometryCollection: BinaryWriter._write_collection_body,
})
