"""Encoded size calculation utilities.

This module provides functions to calculate the LEB128-encoded size of a value
without actually encoding it.
"""

from __future__ import annotations

from ..codec.bits import GROUP_BITS, signed_bit_length, unsigned_bit_length
from ..codec.widths import IntWidth
from ..exceptions import EncodeError


def encoded_size(value: int, *, signed: bool) -> int:
    """Calculate the encoded size of a value in bytes.

    Each byte carries 7 payload bits. Signed values also need room for the
    sign bit, so 64 encodes in 2 bytes signed but 1 byte unsigned.

    Args:
        value: Integer to size (any magnitude)
        signed: Size the signed (two's-complement) encoding

    Returns:
        Number of bytes ``encode`` would produce (at least 1)

    Raises:
        EncodeError: If ``signed`` is False and the value is negative

    Example:
        >>> encoded_size(624485, signed=False)
        3
        >>> encoded_size(64, signed=False), encoded_size(64, signed=True)
        (1, 2)
    """
    if signed:
        bits = signed_bit_length(value)
    else:
        if value < 0:
            raise EncodeError(f"Unsigned LEB128 requires a non-negative value, got {value}")
        bits = unsigned_bit_length(value)
    return max(1, -(-bits // GROUP_BITS))


def max_encoded_size(width: IntWidth) -> int:
    """Calculate the longest minimal encoding of any value of ``width``.

    Example:
        >>> max_encoded_size(IntWidth.U32), max_encoded_size(IntWidth.I64)
        (5, 10)
    """
    return width.max_encoded_bytes


def encoded_sizes(values: list[int], *, signed: bool) -> dict[int, int]:
    """Get the encoded size of each value.

    Returns:
        Dictionary mapping each value to its encoded size in bytes
    """
    return {value: encoded_size(value, signed=signed) for value in values}
