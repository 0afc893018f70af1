#!/usr/bin/env python3
"""Basic usage example for lebcodec.

This example demonstrates:
1. Encoding integers of fixed widths
2. Decoding back with overflow checks
3. Reading concatenated values from one buffer
4. Calculating encoded sizes
"""

from __future__ import annotations

from lebcodec import (
    DecodeOverflowError,
    ILeb128Ref,
    ULeb128Ref,
    encode_i16,
    encode_u32,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("lebcodec Basic Usage Example")
    print("=" * 60)
    print()

    # Encode
    print("1. Encoding integers...")
    unsigned = encode_u32(624485)
    signed = encode_i16(-129)
    print(f"   624485 as u32 -> {unsigned.hex()} ({unsigned.byte_count()} bytes)")
    print(f"   -129 as i16   -> {signed.hex()} ({signed.byte_count()} bytes)")
    print()

    # Decode
    print("2. Decoding with overflow checks...")
    print(f"   {unsigned.hex()} as u32 -> {unsigned.expect_u32()}")
    try:
        unsigned.expect_u16()
    except DecodeOverflowError as e:
        print(f"   {unsigned.hex()} as u16 -> rejected: {e}")
    print()

    # Concatenated values
    print("3. Reading concatenated values...")
    buf = bytes([0x7F, 0x80, 0x01, 0xFF, 0x7E])
    values = ULeb128Ref.all_from_bytes(buf[:3])
    print(f"   {buf[:3].hex()} as unsigned -> {[v.expect_u8() for v in values]}")
    last = ILeb128Ref.from_bytes(buf, 3)
    print(f"   {last.hex()} at offset 3 as signed -> {last.expect_i16()}")
    print()

    # Sizes
    print("4. Encoded sizes...")
    for value in (63, 64, 127, 128):
        unsigned_size = encoded_size(value, signed=False)
        signed_size = encoded_size(value, signed=True)
        print(f"   {value:>4}: {unsigned_size} byte(s) unsigned, {signed_size} byte(s) signed")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
