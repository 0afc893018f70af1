"""Bit-level helpers shared by the encoder and decoder.

LEB128 stores 7 payload bits per byte; bit 7 is the continuation flag and, for
signed values, bit 6 of the final byte carries the sign.
"""

from __future__ import annotations

PAYLOAD_MASK = 0b0111_1111
CONTINUATION_BIT = 0b1000_0000
SIGN_BIT = 0b0100_0000
GROUP_BITS = 7


def has_continuation(byte: int) -> bool:
    """Return True if more bytes follow this one."""
    return (byte & CONTINUATION_BIT) != 0


def unsigned_bit_length(value: int) -> int:
    """Minimal number of bits needed to hold a non-negative value.

    Zero needs no bits; callers that need a storage width should use
    ``max(1, ...)``.
    """
    return value.bit_length()


def signed_bit_length(value: int) -> int:
    """Minimal two's-complement width of a value, sign bit included.

    Non-negative values count their magnitude plus a leading zero; negative
    values count the bits below the run of leading ones plus one sign bit.

    Example:
        >>> signed_bit_length(127), signed_bit_length(128)
        (8, 9)
        >>> signed_bit_length(-128), signed_bit_length(-129)
        (8, 9)
        >>> signed_bit_length(0), signed_bit_length(-1)
        (1, 1)
    """
    if value < 0:
        return (~value).bit_length() + 1
    return value.bit_length() + 1


def to_le_bytes(value: int, *, signed: bool, length: int | None = None) -> bytes:
    """Convert an integer to little-endian bytes.

    Args:
        value: Integer to convert
        signed: Use two's complement representation
        length: Output length in bytes; minimal (at least 1 byte) if omitted

    Returns:
        Little-endian bytes
    """
    if length is None:
        bits = signed_bit_length(value) if signed else unsigned_bit_length(value)
        length = max(1, (bits + 7) // 8)
    return value.to_bytes(length, "little", signed=signed)


def from_le_bytes(data: bytes, *, signed: bool) -> int:
    """Interpret little-endian bytes as an integer (empty input is zero)."""
    return int.from_bytes(data, "little", signed=signed)
