"""LEB128 codec core.

This module provides the signed and unsigned encode/decode algorithms and the
table of supported integer widths.
"""

from __future__ import annotations

from .decoder import decode, decode_signed, decode_unsigned, unpack_signed, unpack_unsigned
from .encoder import encode, encode_signed, encode_unsigned, pack_signed, pack_unsigned
from .widths import SIGNED_WIDTHS, UNSIGNED_WIDTHS, IntWidth

__all__ = [
    "IntWidth",
    "SIGNED_WIDTHS",
    "UNSIGNED_WIDTHS",
    "encode",
    "encode_signed",
    "encode_unsigned",
    "pack_signed",
    "pack_unsigned",
    "decode",
    "decode_signed",
    "decode_unsigned",
    "unpack_signed",
    "unpack_unsigned",
]
