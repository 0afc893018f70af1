"""Exception hierarchy for lebcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from LebcodecError for easy catching of any lebcodec-specific error.
"""

from __future__ import annotations


class LebcodecError(Exception):
    """Base exception for all lebcodec errors."""

    pass


class WidthError(LebcodecError, ValueError):
    """Raised when an integer width is unknown or unsupported.

    Examples:
        - Width name that is not one of u8..u128 / i8..i128
        - Bit count that is not 8, 16, 32, 64 or 128
    """

    pass


class EncodeError(LebcodecError):
    """Raised when encoding an integer fails.

    Examples:
        - Negative value passed to an unsigned encoder
        - Value outside the range of the requested width
    """

    pass


class DecodeError(LebcodecError):
    """Raised when decoding LEB128 bytes fails.

    Examples:
        - No byte with a clear continuation bit (truncated value)
        - Input ending in the middle of a value
        - Decoded value does not fit the requested width
    """

    pass


class TruncatedError(DecodeError):
    """Raised when no terminating byte is found."""

    def __init__(self, length: int, offset: int = 0) -> None:
        self.length = length
        self.offset = offset
        super().__init__(
            f"Truncated LEB128 value: no terminating byte in {length} byte(s) "
            f"starting at offset {offset}"
        )


class TrailingBytesError(DecodeError):
    """Raised when bytes remain that are not part of a complete value."""

    def __init__(self, trailing: int, offset: int) -> None:
        self.trailing = trailing
        self.offset = offset
        super().__init__(
            f"{trailing} trailing byte(s) at offset {offset} do not form a complete LEB128 value"
        )


class DecodeOverflowError(DecodeError, OverflowError):
    """Raised when a decoded value needs more bits than the requested width."""

    def __init__(self, requested_width: int, needed_bits: int) -> None:
        self.requested_width = requested_width
        self.needed_bits = needed_bits
        super().__init__(
            f"Value requires {needed_bits} bits, more than the requested {requested_width}"
        )


class ValueTooLongError(DecodeError):
    """Raised when a single encoded value exceeds the configured byte limit."""

    def __init__(self, max_bytes: int, offset: int) -> None:
        self.max_bytes = max_bytes
        self.offset = offset
        super().__init__(f"LEB128 value at offset {offset} is longer than {max_bytes} byte(s)")


class OffsetError(DecodeError, IndexError):
    """Raised when a parse starts outside the buffer."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length
        super().__init__(f"offset {offset} outside buffer of {length} bytes")
