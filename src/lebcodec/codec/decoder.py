"""LEB128 decoder.

This module provides the core decode loops and the overflow checks that
reject values which do not fit the caller's requested width. Decoding never
truncates: a value is either returned exactly or a DecodeError is raised.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import DecodeOverflowError, TruncatedError, WidthError
from .bits import CONTINUATION_BIT, GROUP_BITS, PAYLOAD_MASK, SIGN_BIT
from .widths import IntWidth


def _accumulate(data: Iterable[int]) -> tuple[int, int, int]:
    """Collect 7-bit groups up to and including the first terminating byte.

    Returns:
        Tuple of (accumulated value, total shift, last byte)

    Raises:
        TruncatedError: If every byte has its continuation bit set
    """
    result = 0
    shift = 0
    count = 0
    for byte in data:
        result |= (byte & PAYLOAD_MASK) << shift
        shift += GROUP_BITS
        count += 1
        if not byte & CONTINUATION_BIT:
            return result, shift, byte
    raise TruncatedError(count)


def _decode_width(data: Iterable[int], width: IntWidth) -> int:
    """Decode into ``width`` without building an integer wider than it.

    Groups starting past ``width.bits + 7`` are not accumulated. Each group
    only moves the highest significant bit, tracked for both possible signs,
    so a long run of padding costs nothing and the overflow report stays exact.
    """
    keep = width.bits + GROUP_BITS
    result = 0
    shift = 0
    kept = 0
    # Bit length of the value if non-negative, and of ~value if negative
    top_zeros = 0
    top_ones = 0
    for byte in data:
        group = byte & PAYLOAD_MASK
        if group:
            top_zeros = shift + group.bit_length()
        if group != PAYLOAD_MASK:
            top_ones = shift + (group ^ PAYLOAD_MASK).bit_length()
        if shift < keep:
            result |= group << shift
            kept = shift + GROUP_BITS
        shift += GROUP_BITS
        if not byte & CONTINUATION_BIT:
            break
    else:
        raise TruncatedError(shift // GROUP_BITS)

    negative = width.signed and bool(byte & SIGN_BIT)
    if width.signed:
        needed = (top_ones if negative else top_zeros) + 1
    else:
        needed = top_zeros
    if needed > width.bits:
        raise DecodeOverflowError(width.bits, needed)
    if negative:
        result |= -(1 << kept)
    return result


def unpack_unsigned(data: Iterable[int]) -> int:
    """Decode unsigned LEB128 without any width limit."""
    result, _shift, _last = _accumulate(data)
    return result


def unpack_signed(data: Iterable[int]) -> int:
    """Decode signed LEB128 without any width limit."""
    result, shift, last = _accumulate(data)
    if last & SIGN_BIT:
        # Sign-extend: every bit from `shift` upwards becomes one
        result |= -(1 << shift)
    return result


def decode_unsigned(data: Iterable[int], width: IntWidth = IntWidth.U64) -> int:
    """Decode unsigned LEB128 into an integer of the given width.

    Args:
        data: Bytes holding one complete encoding (extra bytes are ignored)
        width: Unsigned width the result must fit in

    Returns:
        Decoded integer

    Raises:
        TruncatedError: If no terminating byte is present
        DecodeOverflowError: If the value needs more bits than ``width``

    Example:
        >>> decode_unsigned(bytes([0xE5, 0x8E, 0x26]), IntWidth.U32)
        624485
    """
    if width.signed:
        raise WidthError(f"decode_unsigned requires an unsigned width, got {width.value}")
    return _decode_width(data, width)


def decode_signed(data: Iterable[int], width: IntWidth = IntWidth.I64) -> int:
    """Decode signed LEB128 into an integer of the given width.

    Args:
        data: Bytes holding one complete encoding (extra bytes are ignored)
        width: Signed width the result must fit in

    Returns:
        Decoded integer, sign-extended

    Raises:
        TruncatedError: If no terminating byte is present
        DecodeOverflowError: If the value needs more bits than ``width``

    Example:
        >>> decode_signed(bytes([0x80, 0x7F]), IntWidth.I8)
        -128
    """
    if not width.signed:
        raise WidthError(f"decode_signed requires a signed width, got {width.value}")
    return _decode_width(data, width)


def decode(data: Iterable[int], width: IntWidth) -> int:
    """Decode with the signed or unsigned algorithm chosen by ``width``."""
    if width.signed:
        return decode_signed(data, width)
    return decode_unsigned(data, width)
