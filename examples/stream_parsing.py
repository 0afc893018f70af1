#!/usr/bin/env python3
"""Parsing a length-prefixed stream with borrowed views.

Binary formats such as WebAssembly write section ids, sizes and counts as
LEB128. This example builds a small stream of sections and walks it without
copying, keeping only the section bodies it cares about.
"""

from __future__ import annotations

from lebcodec import DecodeLimits, LebcodecError, ULeb128Ref, encode_u8, encode_u32


def build_stream(sections: list[tuple[int, bytes]]) -> bytes:
    out = bytearray()
    for section_id, body in sections:
        out += encode_u8(section_id).data
        out += encode_u32(len(body)).data
        out += body
    return bytes(out)


def parse_stream(data: bytes) -> list[tuple[int, memoryview]]:
    """Split the stream into (section id, body view) pairs."""
    limits = DecodeLimits.for_width(32)
    view = memoryview(data)
    sections = []
    offset = 0
    while offset < len(data):
        section_id = ULeb128Ref.from_bytes(view, offset, limits=limits)
        offset += section_id.byte_count()
        size = ULeb128Ref.from_bytes(view, offset, limits=limits)
        offset += size.byte_count()
        length = size.expect_u32()
        sections.append((section_id.expect_u8(), view[offset : offset + length]))
        offset += length
    return sections


def main() -> None:
    """Run the stream parsing example."""
    stream = build_stream([(1, b"types"), (3, b"f" * 300), (10, b"code")])
    print(f"Stream: {len(stream)} bytes")

    for section_id, body in parse_stream(stream):
        print(f"  section {section_id:>2}: {len(body)} bytes")

    # A hostile stream: an endless size field
    try:
        parse_stream(b"\x01" + b"\xff" * 64)
    except LebcodecError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
