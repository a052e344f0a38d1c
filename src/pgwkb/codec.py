"""
Entry points used by database adapters to marshal geometry column values.

The module level functions delegate to a shared GeometryCodec built with
DEFAULT_SETTINGS; create a GeometryCodec directly for other settings.
"""

import logging
from typing import Optional, Union

from pgwkb.components.binary.parser import BinaryParser
from pgwkb.components.binary.writer import BinaryWriter
from pgwkb.components.geometry.base import Geometry
from pgwkb.core.config import DEFAULT_SETTINGS, CodecSettings
from pgwkb.core.enums import ByteOrder
from pgwkb.core.exceptions import InconsistentGeometryError
from pgwkb.validation.consistency_validator import GeometryConsistencyValidator

logger = logging.getLogger(__name__)

EwkbValue = Union[str, bytes, bytearray, memoryview]


class GeometryCodec:
    """
    Converts geometries to and from EWKB

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, settings: CodecSettings = DEFAULT_SETTINGS):
        """
        Initialize codec

        Args:
            settings: Encoder byte order and validation switch
        """
        self._settings = settings
        self._parser = BinaryParser()
        self._writer = BinaryWriter()
        self._validator = GeometryConsistencyValidator()

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def decode(self, value: EwkbValue) -> Geometry:
        """
        Decode EWKB given as bytes or hex text

        Args:
            value: Raw EWKB bytes or their hex rendering

        Returns:
            Decoded geometry tree

        Raises:
            FormatError: On malformed or truncated input
            UnsupportedTypeError: On an unknown type code
            TypeMismatchError: If a collection holds a variant it does not allow
        """
        return self._parser.parse(value)

    def decode_hex(self, text: str) -> Geometry:
        """Decode EWKB hex text"""
        if not isinstance(text, str):
            raise TypeError(f"Expected hex text, got {type(text).__name__}")
        return self._parser.parse(text)

    def encode(self, geometry: Geometry, byte_order: Optional[ByteOrder] = None) -> bytes:
        """
        Encode a geometry as EWKB bytes

        Args:
            geometry: Geometry to encode
            byte_order: Overrides the configured byte order

        Returns:
            EWKB bytes

        Raises:
            InconsistentGeometryError: If validate_on_encode is set and the
                geometry fails the consistency check
            UnsupportedTypeError: If the tree contains an unencodable variant
        """
        self._check(geometry)
        return self._writer.write_binary(geometry, self._resolve_byte_order(byte_order))

    def encode_hex(self, geometry: Geometry, byte_order: Optional[ByteOrder] = None) -> str:
        """Encode a geometry as uppercase EWKB hex text (see encode)"""
        self._check(geometry)
        return self._writer.write_hexed(geometry, self._resolve_byte_order(byte_order))

    def _resolve_byte_order(self, byte_order: Optional[ByteOrder]) -> ByteOrder:
        if byte_order is None:
            return self._settings.byte_order
        return ByteOrder(byte_order)

    def _check(self, geometry: Geometry) -> None:
        if not self._settings.validate_on_encode:
            return
        result = self._validator.validate(geometry)
        if not result.is_valid:
            logger.warning(
                f"Refusing to encode {type(geometry).__name__}: "
                f"{len(result.issues)} consistency issue(s)"
            )
            raise InconsistentGeometryError(result.issues)


class GeometryCodecFactory:
    """Factory for codec instances (Factory Pattern + Singleton per settings)"""

    _instances = {}

    @classmethod
    def get_instance(cls, settings: Optional[CodecSettings] = None) -> GeometryCodec:
        """
        Get the codec for the given settings

        Args:
            settings: Codec settings (default: DEFAULT_SETTINGS)

        Returns:
            Shared GeometryCodec instance
        """
        settings = settings or DEFAULT_SETTINGS
        if settings not in cls._instances:
            cls._instances[settings] = GeometryCodec(settings)
        return cls._instances[settings]

    @classmethod
    def reset_instances(cls) -> None:
        """Drop cached codecs (useful for testing)"""
        cls._instances = {}


def decode(value: EwkbValue) -> Geometry:
    """Decode EWKB bytes or hex text into a geometry"""
    return GeometryCodecFactory.get_instance().decode(value)


def decode_hex(text: str) -> Geometry:
    """Decode EWKB hex text into a geometry"""
    return GeometryCodecFactory.get_instance().decode_hex(text)


def encode(
    geometry: Geometry,
    byte_order: Optional[ByteOrder] = None,
    settings: Optional[CodecSettings] = None
) -> bytes:
    """
    Encode a geometry as EWKB bytes

    Args:
        geometry: Geometry to encode
        byte_order: Overrides the byte order of the settings
        settings: Codec settings (default: DEFAULT_SETTINGS)

    Returns:
        EWKB bytes
    """
    return GeometryCodecFactory.get_instance(settings).encode(geometry, byte_order)


def encode_hex(
    geometry: Geometry,
    byte_order: Optional[ByteOrder] = None,
    settings: Optional[CodecSettings] = None
) -> str:
    """Encode a geometry as uppercase EWKB hex text (see encode)"""
    return GeometryCodecFactory.get_instance(settings).encode_hex(geometry, byte_order)
