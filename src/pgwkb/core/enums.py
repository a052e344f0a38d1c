from enum import Enum, IntEnum

from pgwkb.core.exceptions import UnsupportedTypeError


UNKNOWN_SRID = 0

# SRIDs are written as signed 32-bit integers
MAX_SRID = 0x7FFFFFFF

# Deepest chain of nested collections accepted by the codec (PostGIS uses the same bound)
MAX_NESTING_DEPTH = 200

# Low 29 bits of the type word carry the geometry type code
TYPE_CODE_MASK = 0x1FFFFFFF


class GeometryType(IntEnum):
    """OGC / PostGIS geometry type codes as written in the WKB type word"""
    LINEAR_RING = 0  # synthetic, never written with its own header
    POINT = 1
    LINE_STRING = 2
    POLYGON = 3
    MULTI_POINT = 4
    MULTI_LINE_STRING = 5
    MULTI_POLYGON = 6
    GEOMETRY_COLLECTION = 7
    CIRCULAR_STRING = 8
    COMPOUND_CURVE = 9
    CURVE_POLYGON = 10
    MULTI_CURVE = 11
    MULTI_SURFACE = 12

    @property
    def label(self) -> str:
        """OGC name of the type, e.g. 'MultiPolygon' (matches shapely's geom_type)"""
        return _LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> "GeometryType":
        """
        Look up a type by its numeric code

        Args:
            code: Type code taken from the low bits of a type word

        Returns:
            Matching GeometryType

        Raises:
            UnsupportedTypeError: If no type has this code
        """
        try:
            return cls(code)
        except ValueError:
            raise UnsupportedTypeError(type_code=code) from None


_LABELS = {
    GeometryType.LINEAR_RING: "LinearRing",
    GeometryType.POINT: "Point",
    GeometryType.LINE_STRING: "LineString",
    GeometryType.POLYGON: "Polygon",
    GeometryType.MULTI_POINT: "MultiPoint",
    GeometryType.MULTI_LINE_STRING: "MultiLineString",
    GeometryType.MULTI_POLYGON: "MultiPolygon",
    GeometryType.GEOMETRY_COLLECTION: "GeometryCollection",
    GeometryType.CIRCULAR_STRING: "CircularString",
    GeometryType.COMPOUND_CURVE: "CompoundCurve",
    GeometryType.CURVE_POLYGON: "CurvePolygon",
    GeometryType.MULTI_CURVE: "MultiCurve",
    GeometryType.MULTI_SURFACE: "MultiSurface",
}


class ByteOrder(IntEnum):
    """Endian tag byte leading every WKB geometry"""
    XDR = 0  # big endian
    NDR = 1  # little endian

    @property
    def struct_prefix(self) -> str:
        """Byte order character understood by the struct module"""
        return ">" if self is ByteOrder.XDR else "<"


class TypeFlag(IntEnum):
    """High bits of the EWKB type word"""
    SRID = 0x20000000
    MEASURE = 0x40000000
    Z = 0x80000000


class BoxType(Enum):
    """Text prefixes and PostgreSQL type names of the bounding box formats"""
    BOX2D = ("BOX", "box2d")
    BOX3D = ("BOX3D", "box3d")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def pg_type(self) -> str:
        return self.value[1]
