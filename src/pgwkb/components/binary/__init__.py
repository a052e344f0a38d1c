"""
Binary module for the EWKB wire format.

This module provides the endian-aware value streams and the recursive
parser and writer built on top of them.
"""

from pgwkb.components.binary.value_getter import (
    ValueGetter,
    BinaryValueGetter,
    HexValueGetter,
    ValueGetterFactory,
    hex_to_nibble,
)
from pgwkb.components.binary.value_setter import ValueSetter, BinaryValueSetter, HexValueSetter
from pgwkb.components.binary.parser import BinaryParser, GeometryHeader
from pgwkb.components.binary.writer import BinaryWriter

__all__ = [
    'ValueGetter',
    'BinaryValueGetter',
    'HexValueGetter',
    'ValueGetterFactory',
    'hex_to_nibble',
    'ValueSetter',
    'BinaryValueSetter',
    'HexValueSetter',
    'BinaryParser',
    'GeometryHeader',
    'BinaryWriter',
]
