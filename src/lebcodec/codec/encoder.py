"""LEB128 encoder.

This module provides the two core encode loops. Both produce the minimal
encoding of the value: unsigned stops when no set bits remain, signed stops
when the remainder is nothing but sign extension of the last emitted byte.
"""

from __future__ import annotations

from ..exceptions import EncodeError, WidthError
from .bits import CONTINUATION_BIT, GROUP_BITS, PAYLOAD_MASK, SIGN_BIT
from .widths import IntWidth


def pack_unsigned(value: int) -> bytes:
    """Encode a non-negative integer of any size as unsigned LEB128.

    Raises:
        EncodeError: If the value is negative
    """
    if value < 0:
        raise EncodeError(f"Unsigned LEB128 requires a non-negative value, got {value}")

    result = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        value >>= GROUP_BITS
        if value == 0:
            result.append(byte)
            return bytes(result)
        result.append(byte | CONTINUATION_BIT)


def pack_signed(value: int) -> bytes:
    """Encode an integer of any size as signed (two's-complement) LEB128."""
    result = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        # >> on a negative int is arithmetic, so the remainder converges to -1
        value >>= GROUP_BITS
        if (value == 0 and not byte & SIGN_BIT) or (value == -1 and byte & SIGN_BIT):
            result.append(byte)
            return bytes(result)
        result.append(byte | CONTINUATION_BIT)


def encode_unsigned(value: int, width: IntWidth = IntWidth.U64) -> bytes:
    """Encode an unsigned integer as LEB128.

    Args:
        value: Integer in the range of ``width``
        width: Unsigned width the value is taken from

    Returns:
        Minimal LEB128 encoding (at least one byte)

    Raises:
        WidthError: If the width has the wrong signedness
        EncodeError: If the value is out of range

    Example:
        >>> encode_unsigned(624485, IntWidth.U32).hex()
        'e58e26'
        >>> encode_unsigned(0).hex()
        '00'
    """
    if width.signed:
        raise WidthError(f"encode_unsigned requires an unsigned width, got {width.value}")
    _check_range(value, width)
    return pack_unsigned(value)


def encode_signed(value: int, width: IntWidth = IntWidth.I64) -> bytes:
    """Encode a signed integer as two's-complement LEB128.

    Args:
        value: Integer in the range of ``width``
        width: Signed width the value is taken from

    Returns:
        Minimal LEB128 encoding (at least one byte)

    Raises:
        WidthError: If the width has the wrong signedness
        EncodeError: If the value is out of range

    Example:
        >>> encode_signed(-1, IntWidth.I8).hex()
        '7f'
        >>> encode_signed(-129, IntWidth.I16).hex()
        'ff7e'
    """
    if not width.signed:
        raise WidthError(f"encode_signed requires a signed width, got {width.value}")
    _check_range(value, width)
    return pack_signed(value)


def encode(value: int, width: IntWidth) -> bytes:
    """Encode a value with the signed or unsigned algorithm chosen by ``width``."""
    if width.signed:
        return encode_signed(value, width)
    return encode_unsigned(value, width)


def _check_range(value: int, width: IntWidth) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"Expected an integer, got {type(value).__name__}")
    if not width.contains(value):
        raise EncodeError(
            f"Value {value} out of range for {width.value} "
            f"(range: {width.min_value} to {width.max_value})"
        )
