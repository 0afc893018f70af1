"""Borrowed and owned LEB128 values.

There are signed and unsigned versions of each, and two storage strategies:

- ``ULeb128Ref`` / ``ILeb128Ref`` wrap a read-only ``memoryview`` over a buffer
  owned by someone else. Creating one never copies the source bytes, which
  makes them suitable for scanning large buffers.
- ``ULeb128`` / ``ILeb128`` own their bytes. They are frozen pydantic models
  and can outlive the buffer they were parsed from.

A borrowed value is promoted with ``to_owned()`` (a copy); an owned value
lends a borrowed view over its own bytes with ``as_ref()``. Every decode
operation on an owned value goes through that view.

Example:
    >>> buf = bytes([0x7F, 0x80, 0x01])
    >>> [v.expect_u16() for v in ULeb128Ref.all_from_bytes(buf)]
    [127, 128]
    >>> ULeb128.encode(624485, IntWidth.U32).data.hex()
    'e58e26'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from ..codec import decoder, encoder
from ..codec.bits import to_le_bytes
from ..codec.widths import IntWidth
from ..config import NO_LIMITS, DecodeLimits
from ..exceptions import WidthError
from ..framing.scan import check_single_value, split_values, value_length

Buffer = bytes | bytearray | memoryview
R = TypeVar("R", bound="_Leb128Ref")
O = TypeVar("O", bound="_Leb128")


def _as_view(data: Buffer) -> memoryview:
    view = memoryview(data)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view.toreadonly()


class _UnsignedDecode:
    """Per-width decode methods for unsigned values."""

    __slots__ = ()

    signed: ClassVar[bool] = False

    def expect_u8(self) -> int:
        return self.expect(IntWidth.U8)

    def expect_u16(self) -> int:
        return self.expect(IntWidth.U16)

    def expect_u32(self) -> int:
        return self.expect(IntWidth.U32)

    def expect_u64(self) -> int:
        return self.expect(IntWidth.U64)

    def expect_u128(self) -> bytes:
        """Decode a 128-bit value, returned as 16 little-endian bytes."""
        return to_le_bytes(self.expect(IntWidth.U128), signed=False, length=16)


class _SignedDecode:
    """Per-width decode methods for signed values."""

    __slots__ = ()

    signed: ClassVar[bool] = True

    def expect_i8(self) -> int:
        return self.expect(IntWidth.I8)

    def expect_i16(self) -> int:
        return self.expect(IntWidth.I16)

    def expect_i32(self) -> int:
        return self.expect(IntWidth.I32)

    def expect_i64(self) -> int:
        return self.expect(IntWidth.I64)

    def expect_i128(self) -> bytes:
        """Decode a 128-bit value, returned as 16 little-endian two's-complement bytes."""
        return to_le_bytes(self.expect(IntWidth.I128), signed=True, length=16)


class _Leb128Ref(ABC):
    """A single encoded value viewed in place."""

    __slots__ = ("_view",)

    signed: ClassVar[bool]

    def __init__(self, data: Buffer) -> None:
        """Wrap a buffer holding exactly one encoded value.

        Raises:
            TruncatedError: If the buffer has no terminating byte
            TrailingBytesError: If bytes follow the terminating byte
        """
        view = _as_view(data)
        check_single_value(view)
        self._view = view

    @classmethod
    def _wrap(cls: type[R], view: memoryview) -> R:
        # Caller guarantees the view holds exactly one value
        ref = cls.__new__(cls)
        ref._view = view
        return ref

    @classmethod
    def from_bytes(
        cls: type[R], data: Buffer, offset: int = 0, *, limits: DecodeLimits = NO_LIMITS
    ) -> R:
        """Read the value starting at ``offset``; bytes after it are ignored.

        Raises:
            OffsetError: If ``offset`` is outside ``data``
            TruncatedError: If no terminating byte follows ``offset``
            ValueTooLongError: If the value exceeds ``limits.max_bytes``
        """
        view = _as_view(data)
        length = value_length(view, offset, limits)
        return cls._wrap(view[offset : offset + length])

    @classmethod
    def all_from_bytes(
        cls: type[R], data: Buffer, *, limits: DecodeLimits = NO_LIMITS
    ) -> list[R]:
        """Read every value in a buffer of back-to-back encodings.

        Raises:
            TrailingBytesError: If the buffer ends in the middle of a value
            ValueTooLongError: If a value exceeds ``limits.max_bytes``
        """
        view = _as_view(data)
        return [cls._wrap(view[start:end]) for start, end in split_values(view, limits)]

    @property
    def data(self) -> memoryview:
        """Read-only view of the encoded bytes."""
        return self._view

    def byte_count(self) -> int:
        return len(self._view)

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def hex(self) -> str:
        return self._view.hex()

    def expect(self, width: IntWidth) -> int:
        """Decode into an integer of ``width``.

        Raises:
            WidthError: If ``width`` has the wrong signedness
            DecodeOverflowError: If the value does not fit ``width``
        """
        if width.signed != self.signed:
            kind = "signed" if self.signed else "unsigned"
            raise WidthError(f"Cannot decode a {kind} LEB128 value as {width.value}")
        return decoder.decode(self._view, width)

    @abstractmethod
    def to_owned(self) -> _Leb128:
        """Copy the viewed bytes into an owned value."""

    def to_int(self) -> int:
        """Decode without a width limit."""
        if self.signed:
            return decoder.unpack_signed(self._view)
        return decoder.unpack_unsigned(self._view)

    def decode_bytes(self) -> bytes:
        """Decode into the shortest little-endian byte string holding the value.

        Unsigned values give their magnitude, signed values their two's
        complement. The result is at least one byte long.
        """
        return to_le_bytes(self.to_int(), signed=self.signed)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (_Leb128Ref, _Leb128)) and other.signed == self.signed:
            return bytes(self) == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.signed, bytes(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class ULeb128Ref(_UnsignedDecode, _Leb128Ref):
    """Unsigned LEB128 value backed by a borrowed buffer."""

    __slots__ = ()

    def to_owned(self) -> ULeb128:
        return ULeb128(self._view.tobytes())


class ILeb128Ref(_SignedDecode, _Leb128Ref):
    """Signed LEB128 value backed by a borrowed buffer."""

    __slots__ = ()

    def to_owned(self) -> ILeb128:
        return ILeb128(self._view.tobytes())


class _Leb128(BaseModel):
    """A single encoded value that owns its bytes."""

    model_config = ConfigDict(
        # Immutable and hashable
        frozen=True,
        # Only real bytes; no implicit str -> bytes coercion
        strict=True,
        extra="forbid",
    )

    signed: ClassVar[bool]
    ref_type: ClassVar[type[_Leb128Ref]]

    data: bytes

    def __init__(self, data: bytes, **kwargs: Any) -> None:
        super().__init__(data=data, **kwargs)

    @field_validator("data")
    @classmethod
    def check_encoding(cls, value: bytes) -> bytes:
        # Raises TruncatedError / TrailingBytesError directly
        check_single_value(value)
        return value

    @classmethod
    def from_bytes(
        cls: type[O], data: Buffer, offset: int = 0, *, limits: DecodeLimits = NO_LIMITS
    ) -> O:
        """Copy out the value starting at ``offset``; bytes after it are ignored."""
        return cls.ref_type.from_bytes(data, offset, limits=limits).to_owned()

    @classmethod
    def all_from_bytes(
        cls: type[O], data: Buffer, *, limits: DecodeLimits = NO_LIMITS
    ) -> list[O]:
        """Copy out every value in a buffer of back-to-back encodings."""
        return [ref.to_owned() for ref in cls.ref_type.all_from_bytes(data, limits=limits)]

    def as_ref(self) -> _Leb128Ref:
        """Borrow a view over this value's bytes."""
        return self.ref_type._wrap(memoryview(self.data))

    def byte_count(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return self.data.hex()

    def expect(self, width: IntWidth) -> int:
        return self.as_ref().expect(width)

    def to_int(self) -> int:
        return self.as_ref().to_int()

    def decode_bytes(self) -> bytes:
        return self.as_ref().decode_bytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (_Leb128Ref, _Leb128)) and other.signed == self.signed:
            return bytes(self) == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.signed, self.data))


class ULeb128(_UnsignedDecode, _Leb128):
    """Unsigned LEB128 value that owns its bytes."""

    ref_type: ClassVar[type[_Leb128Ref]] = ULeb128Ref

    @classmethod
    def encode(cls, value: int, width: IntWidth = IntWidth.U64) -> ULeb128:
        """Encode an unsigned integer of ``width``."""
        return cls(encoder.encode_unsigned(value, width))


class ILeb128(_SignedDecode, _Leb128):
    """Signed LEB128 value that owns its bytes."""

    ref_type: ClassVar[type[_Leb128Ref]] = ILeb128Ref

    @classmethod
    def encode(cls, value: int, width: IntWidth = IntWidth.I64) -> ILeb128:
        """Encode a signed integer of ``width``."""
        return cls(encoder.encode_signed(value, width))
