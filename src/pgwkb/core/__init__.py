from pgwkb.core.enums import (
    UNKNOWN_SRID,
    MAX_SRID,
    MAX_NESTING_DEPTH,
    TYPE_CODE_MASK,
    GeometryType,
    ByteOrder,
    TypeFlag,
    BoxType,
)
from pgwkb.core.exceptions import (
    GeometryCodecError,
    FormatError,
    TruncatedInputError,
    NestingDepthError,
    NumberFormatError,
    UnsupportedTypeError,
    TypeMismatchError,
    GeometryIndexError,
    InconsistentGeometryError,
)
from pgwkb.core.config import CodecSettings, DEFAULT_SETTINGS

__all__ = [
    'UNKNOWN_SRID',
    'MAX_SRID',
    'MAX_NESTING_DEPTH',
    'TYPE_CODE_MASK',
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
]
