"""lebcodec: LEB128 Variable-Length Integer Codec

A Python library for LEB128 (Little-Endian Base-128), the variable-length
integer encoding used by DWARF debug info, WebAssembly modules and Android DEX
files. Each byte carries 7 bits of the value and a continuation bit.

Key Features:
- Signed (two's complement) and unsigned encodings
- Decoding into 8/16/32/64/128-bit widths with overflow detection
- Zero-copy borrowed views over existing buffers, plus owned values
- Typed, recoverable errors for malformed or oversized input

Quick Start:
    >>> from lebcodec import ULeb128Ref, encode_u32, encode_i16
    >>>
    >>> encode_u32(624485).hex()
    'e58e26'
    >>> encode_i16(-129).hex()
    'ff7e'
    >>> [v.expect_u8() for v in ULeb128Ref.all_from_bytes(b"\\x7f\\x80\\x01")]
    [127, 128]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import IntWidth, decode, encode
from .config import DecodeLimits
from .encoding import (
    encode_i8,
    encode_i16,
    encode_i32,
    encode_i64,
    encode_i128,
    encode_signed_bytes,
    encode_u8,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_u128,
    encode_unsigned_bytes,
    to_ileb128,
    to_uleb128,
)
from .exceptions import (
    DecodeError,
    DecodeOverflowError,
    EncodeError,
    LebcodecError,
    OffsetError,
    TrailingBytesError,
    TruncatedError,
    ValueTooLongError,
    WidthError,
)
from .models import DecodedRecord, ILeb128, ILeb128Ref, ULeb128, ULeb128Ref
from .utils import encoded_size, encoded_sizes, max_encoded_size

__all__ = [
    # Core API
    "IntWidth",
    "encode",
    "decode",
    # Value types
    "ULeb128Ref",
    "ILeb128Ref",
    "ULeb128",
    "ILeb128",
    "DecodedRecord",
    # Encoders
    "to_uleb128",
    "to_ileb128",
    "encode_u8",
    "encode_u16",
    "encode_u32",
    "encode_u64",
    "encode_u128",
    "encode_i8",
    "encode_i16",
    "encode_i32",
    "encode_i64",
    "encode_i128",
    "encode_unsigned_bytes",
    "encode_signed_bytes",
    # Configuration
    "DecodeLimits",
    # Exceptions
    "LebcodecError",
    "WidthError",
    "EncodeError",
    "DecodeError",
    "TruncatedError",
    "TrailingBytesError",
    "DecodeOverflowError",
    "ValueTooLongError",
    "OffsetError",
    # Sizing
    "encoded_size",
    "encoded_sizes",
    "max_encoded_size",
    # Version
    "__version__",
]
