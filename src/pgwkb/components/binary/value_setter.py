"""
Endian-aware writers producing EWKB output.

The byte order is fixed when the setter is created; write_encoding() emits
the matching tag byte in front of every geometry header.
"""

import struct
from abc import ABC, abstractmethod
from typing import List

from pgwkb.core.enums import ByteOrder


HEX_CHARS = "0123456789ABCDEF"


class ValueSetter(ABC):
    """Abstract writer of bytes, integers and doubles (Template Method Pattern)"""

    def __init__(self, byte_order: ByteOrder = ByteOrder.NDR):
        """
        Initialize setter

        Args:
            byte_order: Byte order used for every multi-byte value
        """
        self._byte_order = ByteOrder(byte_order)

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    @abstractmethod
    def _write_raw(self, data: bytes) -> None:
        pass

    def write_encoding(self) -> None:
        """Write the endian tag of this setter's byte order"""
        self.write_byte(int(self._byte_order))

    def write_byte(self, value: int) -> None:
        self._write_raw(bytes((value & 0xFF,)))

    def write_int32(self, value: int) -> None:
        self._write_raw(struct.pack(self._byte_order.struct_prefix + "i", value))

    def write_uint32(self, value: int) -> None:
        self._write_raw(struct.pack(self._byte_order.struct_prefix + "I", value & 0xFFFFFFFF))

    def write_int64(self, value: int) -> None:
        self._write_raw(struct.pack(self._byte_order.struct_prefix + "q", value))

    def write_f64(self, value: float) -> None:
        """Write a double as the bit pattern of a 64-bit integer"""
        bits = struct.unpack("<q", struct.pack("<d", value))[0]
        self.write_int64(bits)


class BinaryValueSetter(ValueSetter):
    """Collects written values into a byte buffer"""

    def __init__(self, byte_order: ByteOrder = ByteOrder.NDR):
        super().__init__(byte_order)
        self._buffer = bytearray()

    def _write_raw(self, data: bytes) -> None:
        self._buffer.extend(data)

    @property
    def value(self) -> bytes:
        return bytes(self._buffer)


class HexValueSetter(ValueSetter):
    """Collects written values as uppercase hex text"""

    def __init__(self, byte_order: ByteOrder = ByteOrder.NDR):
        super().__init__(byte_order)
        self._chars: List[str] = []

    def _write_raw(self, data: bytes) -> None:
        for b in data:
            self._chars.append(HEX_CHARS[(b >> 4) & 0xF])
            self._chars.append(HEX_CHARS[b & 0xF])

    @property
    def value(self) -> str:
        return "".join(self._chars)
