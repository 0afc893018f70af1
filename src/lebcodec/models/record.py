"""Decoded value records.

A ``DecodedRecord`` pairs an encoded value with its integer interpretation and
where it was found. The CLI serializes these with ``model_dump_json``.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from ..codec.widths import IntWidth
from .values import ILeb128, ILeb128Ref, ULeb128, ULeb128Ref

AnyLeb128 = Union[ULeb128Ref, ILeb128Ref, ULeb128, ILeb128]


class DecodedRecord(BaseModel):
    """One decoded LEB128 value.

    Attributes:
        offset: Byte offset of the value in the scanned buffer
        width: Integer width the value was decoded as
        value: Decoded integer
        encoded: The value's wire bytes (serialized as hex)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    offset: int = Field(default=0, ge=0)
    width: IntWidth
    value: int
    encoded: bytes = Field(min_length=1)

    @model_validator(mode="after")
    def check_value_fits_width(self) -> DecodedRecord:
        if not self.width.contains(self.value):
            raise ValueError(
                f"value {self.value} out of range for {self.width.value} "
                f"(range: {self.width.min_value} to {self.width.max_value})"
            )
        return self

    @field_serializer("encoded")
    def serialize_encoded(self, encoded: bytes) -> str:
        return encoded.hex()

    @field_serializer("width")
    def serialize_width(self, width: IntWidth) -> str:
        return width.value

    @property
    def byte_count(self) -> int:
        return len(self.encoded)

    @classmethod
    def from_value(cls, leb: AnyLeb128, width: IntWidth, offset: int = 0) -> DecodedRecord:
        """Decode ``leb`` as ``width`` and record the result.

        Raises:
            WidthError: If ``width`` does not match the value's signedness
            DecodeOverflowError: If the value does not fit ``width``
        """
        return cls(offset=offset, width=width, value=leb.expect(width), encoded=bytes(leb))
