"""Configuration for parsing untrusted LEB128 input.

This module provides the limits applied while scanning a byte buffer for
encoded values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DecodeLimits:
    """Limits applied by ``from_bytes`` and ``all_from_bytes``.

    A LEB128 value has no intrinsic length limit: an attacker can send any
    number of bytes with the continuation bit set. Setting ``max_bytes`` makes
    the scanner give up early instead of walking the whole buffer.

    Attributes:
        max_bytes: Maximum length of a single encoded value in bytes, or None
            for no limit (default None). A 64-bit value needs at most 10 bytes,
            a 128-bit value at most 19.

    Examples:
        ```python
        from lebcodec import DecodeLimits, ULeb128Ref

        limits = DecodeLimits(max_bytes=10)
        values = ULeb128Ref.all_from_bytes(untrusted, limits=limits)
        ```
    """

    max_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_bytes is not None and self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be > 0, got {self.max_bytes}")

    @classmethod
    def for_width(cls, bits: int) -> DecodeLimits:
        """Limits that admit any minimal encoding of a ``bits``-wide value."""
        return cls(max_bytes=-(-bits // 7))


NO_LIMITS = DecodeLimits()
