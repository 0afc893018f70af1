"""Locating LEB128 values inside a byte buffer.

A value ends at the first byte whose continuation bit is clear. These
functions only find value boundaries; they never decode.
"""

from __future__ import annotations

from ..codec.bits import CONTINUATION_BIT
from ..config import NO_LIMITS, DecodeLimits
from ..exceptions import OffsetError, TrailingBytesError, TruncatedError, ValueTooLongError


def value_length(
    data: bytes | memoryview, offset: int = 0, limits: DecodeLimits = NO_LIMITS
) -> int:
    """Return the length of the LEB128 value starting at ``offset``.

    Args:
        data: Buffer to scan
        offset: Position of the first byte of the value
        limits: Scan limits (``max_bytes`` bounds the value length)

    Returns:
        Number of bytes making up the value, terminator included

    Raises:
        OffsetError: If ``offset`` is negative or past the end of ``data``
        TruncatedError: If the buffer ends before a terminating byte
        ValueTooLongError: If the value is longer than ``limits.max_bytes``

    Example:
        >>> value_length(b"\\xe5\\x8e\\x26\\x01")
        3
    """
    if offset < 0 or offset > len(data):
        raise OffsetError(offset, len(data))

    max_bytes = limits.max_bytes
    for index in range(offset, len(data)):
        count = index - offset + 1
        if max_bytes is not None and count > max_bytes:
            raise ValueTooLongError(max_bytes, offset)
        if not data[index] & CONTINUATION_BIT:
            return count
    raise TruncatedError(len(data) - offset, offset)


def split_values(
    data: bytes | memoryview, limits: DecodeLimits = NO_LIMITS
) -> list[tuple[int, int]]:
    """Split a buffer of concatenated LEB128 values into (start, end) spans.

    Args:
        data: Buffer holding zero or more complete values back to back
        limits: Scan limits applied to each value

    Returns:
        List of half-open spans, one per value, in buffer order

    Raises:
        TrailingBytesError: If the buffer ends in the middle of a value
        ValueTooLongError: If a value is longer than ``limits.max_bytes``

    Example:
        >>> split_values(b"\\x7f\\x80\\x01")
        [(0, 1), (1, 3)]
    """
    spans: list[tuple[int, int]] = []
    start = 0
    while start < len(data):
        try:
            length = value_length(data, start, limits)
        except TruncatedError as e:
            raise TrailingBytesError(e.length, start) from e
        spans.append((start, start + length))
        start += length
    return spans


def check_single_value(data: bytes | memoryview) -> None:
    """Verify ``data`` holds exactly one complete value and nothing else.

    Raises:
        TruncatedError: If the buffer is empty or has no terminating byte
        TrailingBytesError: If bytes follow the terminating byte
    """
    length = value_length(data)
    if length != len(data):
        raise TrailingBytesError(len(data) - length, length)
