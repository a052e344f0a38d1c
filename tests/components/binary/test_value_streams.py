"""Unit tests for the endian-aware value getters and setters"""

import math
import pytest

from pgwkb.components.binary import (
    BinaryValueGetter,
    HexValueGetter,
    ValueGetterFactory,
    BinaryValueSetter,
    HexValueSetter,
    hex_to_nibble,
)
from pgwkb.core import ByteOrder, FormatError, TruncatedInputError


class TestHexToNibble:
    """Tests for hex digit conversion"""

    @pytest.mark.parametrize("char,value", [("0", 0), ("9", 9), ("a", 10), ("F", 15)])
    def test_valid_digits(self, char, value):
        assert hex_to_nibble(char) == value

    @pytest.mark.parametrize("char", ["G", "z", " ", "-"])
    def test_invalid_digit_rejected(self, char):
        with pytest.raises(FormatError):
            hex_to_nibble(char)


class TestValueGetterFactory:
    """Tests for choosing the getter from the input type"""

    def test_text_gives_hex_getter(self):
        assert isinstance(ValueGetterFactory.create("01"), HexValueGetter)

    def test_bytes_give_binary_getter(self):
        assert isinstance(ValueGetterFactory.create(b"\x01"), BinaryValueGetter)
        assert isinstance(ValueGetterFactory.create(bytearray(b"\x01")), BinaryValueGetter)
        assert isinstance(ValueGetterFactory.create(memoryview(b"\x01")), BinaryValueGetter)

    def test_surrounding_whitespace_is_ignored(self):
        getter = ValueGetterFactory.create("  01\n")
        assert getter.remaining() == 1
        assert getter.read_byte() == 1

    def test_other_types_rejected(self):
        with pytest.raises(TypeError):
            ValueGetterFactory.create(12)


class TestValueGetter:
    """Tests for typed reads in both byte orders"""

    def test_read_encoding_binds_byte_order(self):
        getter = HexValueGetter("0001")
        assert getter.read_encoding() is ByteOrder.XDR
        assert getter.byte_order is ByteOrder.XDR
        assert getter.read_encoding() is ByteOrder.NDR
        assert getter.byte_order is ByteOrder.NDR

    def test_unknown_endian_tag(self):
        with pytest.raises(FormatError) as exc_info:
            HexValueGetter("02").read_encoding()
        assert "Unknown endian type: 2" in str(exc_info.value)

    def test_read_int32_little_endian(self):
        getter = HexValueGetter("01E6100000")
        getter.read_encoding()
        assert getter.read_int32() == 4326

    def test_read_int32_big_endian(self):
        getter = HexValueGetter("00000010E6")
        getter.read_encoding()
        assert getter.read_int32() == 4326

    def test_read_negative_int32(self):
        getter = BinaryValueGetter(b"\x01\xfb\xff\xff\xff")
        getter.read_encoding()
        assert getter.read_int32() == -5

    def test_read_uint32_keeps_high_bit(self):
        getter = HexValueGetter("0101000080")
        getter.read_encoding()
        assert getter.read_uint32() == 0x80000001

    def test_read_int64(self):
        getter = HexValueGetter("00FFFFFFFFFFFFFFFE")
        getter.read_encoding()
        assert getter.read_int64() == -2

    def test_read_f64_both_orders(self):
        little = HexValueGetter("01000000000000F03F")
        little.read_encoding()
        big = HexValueGetter("003FF0000000000000")
        big.read_encoding()
        assert little.read_f64() == 1.0
        assert big.read_f64() == 1.0

    def test_read_f64_nan(self):
        getter = HexValueGetter("01000000000000F87F")
        getter.read_encoding()
        assert math.isnan(getter.read_f64())

    def test_lowercase_hex_accepted(self):
        getter = HexValueGetter("01e6100000")
        getter.read_encoding()
        assert getter.read_int32() == 4326

    def test_invalid_hex_digit(self):
        getter = HexValueGetter("01XX100000")
        getter.read_encoding()
        with pytest.raises(FormatError):
            getter.read_int32()

    def test_offset_and_position(self):
        getter = BinaryValueGetter(b"\xff\xff\x01", offset=2)
        assert getter.position == 2
        assert getter.read_byte() == 1
        assert getter.position == 3
        assert getter.remaining() == 0

    def test_reading_past_end(self):
        getter = HexValueGetter("01E610")
        getter.read_encoding()
        with pytest.raises(TruncatedInputError) as exc_info:
            getter.read_int32()
        assert exc_info.value.position == 1
        assert exc_info.value.requested == 4
        assert exc_info.value.available == 2

    def test_odd_trailing_nibble_is_not_a_byte(self):
        getter = HexValueGetter("010")
        assert getter.remaining() == 1
        getter.read_byte()
        with pytest.raises(TruncatedInputError):
            getter.read_byte()


class TestValueSetter:
    """Tests for typed writes in both byte orders"""

    def test_write_encoding(self):
        assert _hex(ByteOrder.NDR, lambda s: s.write_encoding()) == "01"
        assert _hex(ByteOrder.XDR, lambda s: s.write_encoding()) == "00"

    def test_write_int32(self):
        assert _hex(ByteOrder.NDR, lambda s: s.write_int32(4326)) == "E6100000"
        assert _hex(ByteOrder.XDR, lambda s: s.write_int32(4326)) == "000010E6"
        assert _hex(ByteOrder.NDR, lambda s: s.write_int32(-5)) == "FBFFFFFF"

    def test_write_uint32_type_word(self):
        assert _hex(ByteOrder.NDR, lambda s: s.write_uint32(0xA0000001)) == "010000A0"

    def test_write_int64(self):
        assert _hex(ByteOrder.XDR, lambda s: s.write_int64(-2)) == "FFFFFFFFFFFFFFFE"

    def test_write_f64(self):
        assert _hex(ByteOrder.NDR, lambda s: s.write_f64(1.0)) == "000000000000F03F"
        assert _hex(ByteOrder.XDR, lambda s: s.write_f64(2.0)) == "4000000000000000"

    def test_write_byte(self):
        assert _hex(ByteOrder.NDR, lambda s: s.write_byte(0xAB)) == "AB"

    def test_binary_setter_matches_hex_setter(self):
        binary = BinaryValueSetter(ByteOrder.XDR)
        text = HexValueSetter(ByteOrder.XDR)
        for setter in (binary, text):
            setter.write_encoding()
            setter.write_uint32(1)
            setter.write_f64(-0.5)
        assert binary.value.hex().upper() == text.value

    def test_f64_bit_pattern_is_preserved(self):
        """Test that doubles survive a write/read cycle bit for bit"""
        value = 0.1 + 0.2
        setter = BinaryValueSetter(ByteOrder.XDR)
        setter.write_encoding()
        setter.write_f64(value)
        getter = BinaryValueGetter(setter.value)
        getter.read_encoding()
        assert getter.read_f64() == value


def _hex(byte_order, write):
    setter = HexValueSetter(byte_order)
    write(setter)
    return setter.value
