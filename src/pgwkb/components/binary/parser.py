"""
Recursive EWKB reader.

Every geometry starts with its own header (endian tag, type word, optional
SRID); lines and polygon rings store their points without a header.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Type, Union

from pgwkb.components.binary.value_getter import ValueGetter, ValueGetterFactory
from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.collection import MultiGeometry
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.geometry_ops import set_srid
from pgwkb.components.geometry.line_string import CircularString, LinearRing, LineString
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
from pgwkb.core.enums import MAX_NESTING_DEPTH, TYPE_CODE_MASK, UNKNOWN_SRID, GeometryType, TypeFlag
from pgwkb.core.exceptions import FormatError, NestingDepthError, UnsupportedTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeometryHeader:
    """Decoded type word of one geometry"""
    type_code: int
    has_z: bool
    has_m: bool
    has_srid: bool

    @classmethod
    def from_type_word(cls, type_word: int) -> "GeometryHeader":
        return cls(
            type_code=type_word & TYPE_CODE_MASK,
            has_z=bool(type_word & TypeFlag.Z),
            has_m=bool(type_word & TypeFlag.MEASURE),
            has_srid=bool(type_word & TypeFlag.SRID),
        )


class BinaryParser:
    """
    Reads geometries from EWKB bytes or hex text (Strategy Pattern)

    Each type code maps to a body reader. The parser keeps no state between
    calls; the cursor lives in the ValueGetter created per parse.
    """

    def parse(self, value: Union[str, bytes, bytearray, memoryview], offset: int = 0) -> Geometry:
        """
        Decode a single geometry

        Args:
            value: Hex text or bytes holding an EWKB geometry
            offset: Byte position of the geometry's endian tag

        Returns:
            The decoded geometry tree. Bytes after the geometry are ignored.

        Raises:
            FormatError: On malformed or truncated input, or nesting deeper than MAX_NESTING_DEPTH
            UnsupportedTypeError: On an unknown type code
            TypeMismatchError: If a collection holds a variant it does not allow
        """
        getter = ValueGetterFactory.create(value, offset)
        geometry = self.parse_geometry(getter)
        logger.debug(
            f"Decoded {type(geometry).__name__} (srid={geometry.srid}, "
            f"points={geometry.num_points()}) from {getter.position - offset} bytes"
        )
        return geometry

    def parse_geometry(self, getter: ValueGetter, depth: int = 0) -> Geometry:
        """
        Read one fully headered geometry at the getter's cursor

        Args:
            getter: Stream positioned on the geometry's endian tag
            depth: Number of collections enclosing this geometry

        Raises:
            NestingDepthError: If collections nest deeper than MAX_NESTING_DEPTH
        """
        if depth > MAX_NESTING_DEPTH:
            raise NestingDepthError(depth, MAX_NESTING_DEPTH)
        getter.read_encoding()
        header = GeometryHeader.from_type_word(getter.read_uint32())
        srid = UNKNOWN_SRID
        if header.has_srid:
            srid = max(getter.read_int32(), UNKNOWN_SRID)

        reader = self._BODY_READERS.get(GeometryType.from_code(header.type_code))
        if reader is None:
            raise UnsupportedTypeError(type_code=header.type_code)

        geometry = reader(self, getter, header, depth)
        if depth == 0:
            # the outermost SRID applies to the whole tree
            set_srid(geometry, srid)
        return geometry

    def _read_count(self, getter: ValueGetter, what: str) -> int:
        count = getter.read_int32()
        if count < 0:
            raise FormatError(f"Negative {what} count {count} at byte {getter.position - 4}")
        return count

    @staticmethod
    def _read_point(getter: ValueGetter, header: GeometryHeader) -> Point:
        x = getter.read_f64()
        y = getter.read_f64()
        z = getter.read_f64() if header.has_z else None
        m = getter.read_f64() if header.has_m else None
        return Point(x, y, z, m)

    def _read_points(self, getter: ValueGetter, header: GeometryHeader) -> List[Point]:
        count = self._read_count(getter, "point")
        return [self._read_point(getter, header) for _ in range(count)]

    def _parse_point(self, getter: ValueGetter, header: GeometryHeader, depth: int) -> Point:
        return self._read_point(getter, header)

    def _parse_line_string(self, getter: ValueGetter, header: GeometryHeader, depth: int) -> LineString:
        return LineString(self._read_points(getter, header))

    def _parse_circular_string(self, getter: ValueGetter, header: GeometryHeader, depth: int) -> CircularString:
        return CircularString(self._read_points(getter, header))

    def _parse_polygon(self, getter: ValueGetter, header: GeometryHeader, depth: int) -> Polygon:
        count = self._read_count(getter, "ring")
        return Polygon([LinearRing(self._read_points(getter, header)) for _ in range(count)])

    def _parse_children(self, getter: ValueGetter, what: str, depth: int) -> List[Geometry]:
        children = []
        for _ in range(self._read_count(getter, what)):
            children.append(self.parse_geometry(getter, depth + 1))
        return children

    def _parse_geometries(
        self,
        getter: ValueGetter,
        header: GeometryHeader,
        depth: int,
        collection_cls: Type[MultiGeometry]
    ) -> MultiGeometry:
        return collection_cls(self._parse_children(getter, "geometry", depth))

    def _parse_curve_polygon(self, getter: ValueGetter, header: GeometryHeader, depth: int) -> CurvePolygon:
        return CurvePolygon(self._parse_children(getter, "ring", depth))

    # Strategy map: geometry type -> body reader
    _BODY_READERS: Dict[GeometryType, Callable] = {}


BinaryParser._BODY_READERS.update({
    GeometryType.POINT: BinaryParser._parse_point,
    GeometryType.LINE_STRING: BinaryParser._parse_line_string,
    GeometryType.POLYGON: BinaryParser._parse_polygon,
    GeometryType.CIRCULAR_STRING: BinaryParser._parse_circular_string,
    GeometryType.CURVE_POLYGON: BinaryParser._parse_curve_polygon,
    GeometryType.COMPOUND_CURVE: partial(BinaryParser._parse_geometries, collection_cls=CompoundCurve),
    GeometryType.MULTI_POINT: partial(BinaryParser._parse_geometries, collection_cls=MultiPoint),
    GeometryType.MULTI_LINE_STRING: partial(BinaryParser._parse_geometries, collection_cls=MultiLineString),
    GeometryType.MULTI_POLYGON: partial(BinaryParser._parse_geometries, collection_cls=MultiPolygon),
    GeometryType.MULTI_CURVE: partial(BinaryParser._parse_geometries, collection_cls=MultiCurve),
    GeometryType.MULTI_SURFACE: partial(BinaryParser._parse_geometries, collection_cls=MultiSurface),
    GeometryType.GEOMETRY_COLLECTION: partial(BinaryParser._parse_geometries, collection_cls=GeometryCollection),
})
