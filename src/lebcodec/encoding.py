"""Encode integers into owned LEB128 values.

One function per native width, mirroring the decode side's ``expect_*``
methods. Each checks the value fits its width before encoding, so
``encode_u8(256)`` fails instead of silently producing a wider encoding.

Example:
    >>> encode_u32(624485).hex()
    'e58e26'
    >>> encode_i16(-129).hex()
    'ff7e'
"""

from __future__ import annotations

from typing import Callable

from .codec import encoder
from .codec.bits import from_le_bytes
from .codec.widths import IntWidth
from .models.values import ILeb128, ULeb128


def to_uleb128(value: int, width: IntWidth = IntWidth.U64) -> ULeb128:
    """Encode an unsigned integer of ``width`` into an owned value.

    Raises:
        WidthError: If ``width`` is signed
        EncodeError: If the value is out of range for ``width``
    """
    return ULeb128(encoder.encode_unsigned(value, width))


def to_ileb128(value: int, width: IntWidth = IntWidth.I64) -> ILeb128:
    """Encode a signed integer of ``width`` into an owned value.

    Raises:
        WidthError: If ``width`` is unsigned
        EncodeError: If the value is out of range for ``width``
    """
    return ILeb128(encoder.encode_signed(value, width))


def _unsigned_encoder(width: IntWidth) -> Callable[[int], ULeb128]:
    def encode(value: int) -> ULeb128:
        return to_uleb128(value, width)

    encode.__name__ = encode.__qualname__ = f"encode_{width.value}"
    encode.__doc__ = f"Encode a {width.value} value as unsigned LEB128."
    return encode


def _signed_encoder(width: IntWidth) -> Callable[[int], ILeb128]:
    def encode(value: int) -> ILeb128:
        return to_ileb128(value, width)

    encode.__name__ = encode.__qualname__ = f"encode_{width.value}"
    encode.__doc__ = f"Encode an {width.value} value as signed LEB128."
    return encode


encode_u8 = _unsigned_encoder(IntWidth.U8)
encode_u16 = _unsigned_encoder(IntWidth.U16)
encode_u32 = _unsigned_encoder(IntWidth.U32)
encode_u64 = _unsigned_encoder(IntWidth.U64)
encode_u128 = _unsigned_encoder(IntWidth.U128)

encode_i8 = _signed_encoder(IntWidth.I8)
encode_i16 = _signed_encoder(IntWidth.I16)
encode_i32 = _signed_encoder(IntWidth.I32)
encode_i64 = _signed_encoder(IntWidth.I64)
encode_i128 = _signed_encoder(IntWidth.I128)


def encode_unsigned_bytes(data: bytes) -> ULeb128:
    """Encode an arbitrary-length little-endian magnitude as unsigned LEB128.

    The input has no width limit; an empty byte string is zero. This is the
    inverse of ``decode_bytes()`` on an unsigned value.

    Example:
        >>> encode_unsigned_bytes(bytes(16) + b"\\x01").byte_count()
        19
    """
    return ULeb128(encoder.pack_unsigned(from_le_bytes(data, signed=False)))


def encode_signed_bytes(data: bytes) -> ILeb128:
    """Encode an arbitrary-length little-endian two's-complement integer as signed LEB128.

    The input has no width limit; an empty byte string is zero. This is the
    inverse of ``decode_bytes()`` on a signed value.
    """
    return ILeb128(encoder.pack_signed(from_le_bytes(data, signed=True)))
