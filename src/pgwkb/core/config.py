"""Codec settings using Pydantic for type safety and validation"""
from pydantic import BaseModel, ConfigDict, Field

from pgwkb.core.enums import ByteOrder


class CodecSettings(BaseModel):
    """
    Encoder settings model.

    Instances are immutable and can be shared between threads.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "byte_order": 1,
                "validate_on_encode": False,
            }
        },
    )

    byte_order: ByteOrder = Field(
        default=ByteOrder.NDR,
        description="Byte order written by the encoder: 0 = XDR (big endian), 1 = NDR (little endian)"
    )
    validate_on_encode: bool = Field(
        default=False,
        description="Run the consistency check before encoding and reject inconsistent geometries"
    )


DEFAULT_SETTINGS = CodecSettings()
