"""
pgwkb: PostGIS EWKB geometry model and codec.

Decode a geometry column value, inspect or build geometries, and encode
them back:

    >>> from pgwkb import decode, encode_hex
    >>> point = decode("0101000000000000000000F03F0000000000000040")
    >>> encode_hex(point)
    '0101000000000000000000F03F0000000000000040'
"""

from pgwkb.core import (
    UNKNOWN_SRID,
    MAX_SRID,
    MAX_NESTING_DEPTH,
    GeometryType,
    ByteOrder,
    TypeFlag,
    BoxType,
    GeometryCodecError,
    FormatError,
    TruncatedInputError,
    NestingDepthError,
    NumberFormatError,
    UnsupportedTypeError,
    TypeMismatchError,
    GeometryIndexError,
    InconsistentGeometryError,
    CodecSettings,
    DEFAULT_SETTINGS,
)
from pgwkb.components.geometry import (
    Geometry,
    Point,
    LineBasedGeometry,
    LineString,
    LinearRing,
    CircularString,
    MultiGeometry,
    CompoundCurve,
    PolygonBase,
    Polygon,
    CurvePolygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    MultiCurve,
    MultiSurface,
    GeometryCollection,
    set_srid,
    iter_geometries,
    dimension_flags,
    check_consistency,
    GeometryAdapter,
)
from pgwkb.components.text import GeometryTokenizer, tokenize, Box2D, Box3D, parse_box2d, parse_box3d
from pgwkb.codec import GeometryCodec, GeometryCodecFactory, decode, decode_hex, encode, encode_hex

__version__ = "1.0.0"

__all__ = [
    'UNKNOWN_SRID',
    'MAX_SRID',
    'MAX_NESTING_DEPTH',
    'GeometryType',
    'ByteOrder',
    'TypeFlag',
    'BoxType',
    'GeometryCodecError',
    'FormatError',
    'TruncatedInputError',
    'NestingDepthError',
    'NumberFormatError',
    'UnsupportedTypeError',
    'TypeMismatchError',
    'GeometryIndexError',
    'InconsistentGeometryError',
    'CodecSettings',
    'DEFAULT_SETTINGS',
    'Geometry',
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
    'GeometryTokenizer',
    'tokenize',
    'Box2D',
    'Box3D',
    'parse_box2d',
    'parse_box3d',
    'GeometryCodec',
    'GeometryCodecFactory',
    'decode',
    'decode_hex',
    'encode',
    'encode_hex',
]
