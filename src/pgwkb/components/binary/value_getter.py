"""
Endian-aware readers over EWKB input.

A value getter wraps either raw bytes or a hex string (two characters per
byte) and exposes typed reads driven by the byte order that the most recent
endian tag selected.
"""

import struct
from abc import ABC, abstractmethod
from typing import Union

from pgwkb.core.enums import ByteOrder
from pgwkb.core.exceptions import FormatError, TruncatedInputError


HEX_DIGITS = "0123456789ABCDEFabcdef"


def hex_to_nibble(char: str) -> int:
    """
    Convert a single hex character to its value

    Args:
        char: One character of hex text

    Returns:
        Value in [0, 15]

    Raises:
        FormatError: If the character is not a hexadecimal digit
    """
    if len(char) != 1 or char not in HEX_DIGITS:
        raise FormatError(f"character is no hexadecimal digit: {char!r}")
    return int(char, 16)


class ValueGetter(ABC):
    """
    Abstract reader of bytes, integers and doubles (Template Method Pattern)

    Subclasses only supply raw bytes; the byte order bound by
    read_encoding() decides how they are combined.
    """

    def __init__(self, offset: int = 0):
        """
        Initialize getter

        Args:
            offset: Byte position to start reading from
        """
        self._position = offset
        self._byte_order = ByteOrder.NDR

    @property
    def position(self) -> int:
        """Current byte cursor"""
        return self._position

    @property
    def byte_order(self) -> ByteOrder:
        """Byte order currently bound to the stream"""
        return self._byte_order

    @abstractmethod
    def remaining(self) -> int:
        """Number of bytes left after the cursor"""
        pass

    @abstractmethod
    def _read_raw(self, count: int) -> bytes:
        """Return the next count bytes without bounds checks or cursor movement"""
        pass

    def _take(self, count: int) -> bytes:
        available = self.remaining()
        if count > available:
            raise TruncatedInputError(self._position, count, max(available, 0))
        data = self._read_raw(count)
        self._position += count
        return data

    def read_encoding(self) -> ByteOrder:
        """
        Read an endian tag byte and bind its byte order

        Returns:
            The byte order now in effect

        Raises:
            FormatError: If the tag is neither 0 (XDR) nor 1 (NDR)
        """
        tag = self.read_byte()
        if tag == ByteOrder.NDR:
            self._byte_order = ByteOrder.NDR
        elif tag == ByteOrder.XDR:
            self._byte_order = ByteOrder.XDR
        else:
            raise FormatError(f"Unknown endian type: {tag}")
        return self._byte_order

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_int32(self) -> int:
        """Read a signed 32-bit integer"""
        return struct.unpack(self._byte_order.struct_prefix + "i", self._take(4))[0]

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer (type words)"""
        return struct.unpack(self._byte_order.struct_prefix + "I", self._take(4))[0]

    def read_int64(self) -> int:
        """Read a signed 64-bit integer"""
        return struct.unpack(self._byte_order.struct_prefix + "q", self._take(8))[0]

    def read_f64(self) -> float:
        """Read a double from the bit pattern of a 64-bit integer"""
        bits = self.read_int64()
        return struct.unpack("<d", struct.pack("<q", bits))[0]


class BinaryValueGetter(ValueGetter):
    """Reads values from a byte buffer"""

    def __init__(self, data: Union[bytes, bytearray, memoryview], offset: int = 0):
        super().__init__(offset)
        self._data = bytes(data)

    def remaining(self) -> int:
        return len(self._data) - self._position

    def _read_raw(self, count: int) -> bytes:
        return self._data[self._position:self._position + count]


class HexValueGetter(ValueGetter):
    """Reads values from hex text, one byte per two characters"""

    def __init__(self, text: str, offset: int = 0):
        super().__init__(offset)
        self._text = text

    def remaining(self) -> int:
        return len(self._text) // 2 - self._position

    def _read_raw(self, count: int) -> bytes:
        start = self._position * 2
        chunk = self._text[start:start + count * 2]
        return bytes(
            (hex_to_nibble(chunk[i]) << 4) | hex_to_nibble(chunk[i + 1])
            for i in range(0, len(chunk), 2)
        )


class ValueGetterFactory:
    """Factory for creating value getters from raw input (Factory Pattern)"""

    @classmethod
    def create(cls, value: Union[str, bytes, bytearray, memoryview], offset: int = 0) -> ValueGetter:
        """
        Create the getter matching the input type

        Args:
            value: Hex text or a bytes-like buffer
            offset: Byte position to start reading from

        Returns:
            HexValueGetter for text, BinaryValueGetter for bytes

        Raises:
            TypeError: If the value is neither text nor bytes-like
        """
        if isinstance(value, str):
            return HexValueGetter(value.strip(), offset)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return BinaryValueGetter(value, offset)
        raise TypeError(
            f"Cannot read geometry from {type(value).__name__}. "
            f"Expected hex text or a bytes-like object"
        )
