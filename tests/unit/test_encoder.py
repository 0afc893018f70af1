"""Unit tests for the core encoder."""

from __future__ import annotations

import pytest

from lebcodec.codec.encoder import (
    encode,
    encode_signed,
    encode_unsigned,
    pack_signed,
    pack_unsigned,
)
from lebcodec.codec.widths import SIGNED_WIDTHS, UNSIGNED_WIDTHS, IntWidth
from lebcodec.exceptions import EncodeError, WidthError


class TestEncodeUnsigned:
    """Test unsigned encoding."""

    @pytest.mark.parametrize("width", UNSIGNED_WIDTHS)
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, [0x00]),
            (42, [0x2A]),
            (127, [0x7F]),
            (128, [0x80, 0x01]),
            (255, [0xFF, 0x01]),
        ],
    )
    def test_small_values_every_width(
        self, width: IntWidth, value: int, expected: list[int]
    ) -> None:
        """Test values that fit every unsigned width encode identically."""
        assert encode_unsigned(value, width) == bytes(expected)

    def test_canonical_example(self, canonical_bytes: bytes) -> None:
        """Test the published example 624485."""
        assert encode_unsigned(624485, IntWidth.U32) == canonical_bytes
        assert encode_unsigned(624485, IntWidth.U64) == canonical_bytes

    def test_width_maximums(self) -> None:
        """Test the largest value of each width."""
        assert encode_unsigned(0xFFFF, IntWidth.U16) == bytes([0xFF, 0xFF, 0x03])
        assert encode_unsigned(0xFFFF_FFFF, IntWidth.U32) == bytes([0xFF] * 4 + [0x0F])
        assert encode_unsigned(2**64 - 1, IntWidth.U64) == bytes([0xFF] * 9 + [0x01])
        assert encode_unsigned(2**128 - 1, IntWidth.U128) == bytes([0xFF] * 18 + [0x03])

    def test_out_of_range(self) -> None:
        """Test values outside the width are rejected."""
        with pytest.raises(EncodeError, match="out of range"):
            encode_unsigned(256, IntWidth.U8)

        with pytest.raises(EncodeError, match="out of range"):
            encode_unsigned(-1, IntWidth.U32)

        with pytest.raises(EncodeError, match="out of range"):
            encode_unsigned(2**64, IntWidth.U64)

    def test_signed_width_rejected(self) -> None:
        """Test an unsigned encode with a signed width."""
        with pytest.raises(WidthError, match="unsigned width"):
            encode_unsigned(1, IntWidth.I32)

    def test_non_integer_rejected(self) -> None:
        """Test bools and floats are not integers here."""
        with pytest.raises(EncodeError, match="Expected an integer"):
            encode_unsigned(True, IntWidth.U8)

        with pytest.raises(EncodeError, match="Expected an integer"):
            encode_unsigned(1.0, IntWidth.U8)  # type: ignore[arg-type]


class TestEncodeSigned:
    """Test signed encoding."""

    @pytest.mark.parametrize("width", SIGNED_WIDTHS)
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, [0x00]),
            (2, [0x02]),
            (-2, [0x7E]),
            (-1, [0x7F]),
            (63, [0x3F]),
            (-64, [0x40]),
            (64, [0xC0, 0x00]),
            (-65, [0xBF, 0x7F]),
            (127, [0xFF, 0x00]),
            (-127, [0x81, 0x7F]),
            (-128, [0x80, 0x7F]),
        ],
    )
    def test_small_values_every_width(
        self, width: IntWidth, value: int, expected: list[int]
    ) -> None:
        """Test values that fit every signed width encode identically."""
        assert encode_signed(value, width) == bytes(expected)

    @pytest.mark.parametrize("width", SIGNED_WIDTHS[1:])
    def test_seven_bit_group_boundary(self, width: IntWidth) -> None:
        """Test the sign-extension termination rule around 128."""
        assert encode_signed(128, width) == bytes([0x80, 0x01])
        assert encode_signed(129, width) == bytes([0x81, 0x01])
        assert encode_signed(-127, width) == bytes([0x81, 0x7F])
        assert encode_signed(-128, width) == bytes([0x80, 0x7F])
        assert encode_signed(-129, width) == bytes([0xFF, 0x7E])

    def test_width_extremes(self) -> None:
        """Test the minimum and maximum of each width."""
        assert encode_signed(127, IntWidth.I8) == bytes([0xFF, 0x00])
        assert encode_signed(-128, IntWidth.I8) == bytes([0x80, 0x7F])
        assert encode_signed(32767, IntWidth.I16) == bytes([0xFF, 0xFF, 0x01])
        assert encode_signed(-32768, IntWidth.I16) == bytes([0x80, 0x80, 0x7E])
        assert encode_signed(2**31 - 1, IntWidth.I32) == bytes([0xFF] * 4 + [0x07])
        assert encode_signed(-(2**31), IntWidth.I32) == bytes([0x80] * 4 + [0x78])
        assert encode_signed(2**63 - 1, IntWidth.I64) == bytes([0xFF] * 9 + [0x00])
        assert encode_signed(-(2**63), IntWidth.I64) == bytes([0x80] * 9 + [0x7F])

    def test_out_of_range(self) -> None:
        """Test values outside the width are rejected."""
        with pytest.raises(EncodeError, match="out of range"):
            encode_signed(128, IntWidth.I8)

        with pytest.raises(EncodeError, match="out of range"):
            encode_signed(-129, IntWidth.I8)

        with pytest.raises(EncodeError, match="out of range"):
            encode_signed(2**63, IntWidth.I64)

    def test_unsigned_width_rejected(self) -> None:
        """Test a signed encode with an unsigned width."""
        with pytest.raises(WidthError, match="signed width"):
            encode_signed(-1, IntWidth.U8)


class TestUnboundedPacking:
    """Test the width-free packing loops."""

    def test_pack_unsigned_large(self) -> None:
        """Test values beyond 128 bits."""
        data = pack_unsigned(2**200)
        assert len(data) == 29  # 201 bits / 7
        assert data[-1] & 0x80 == 0
        assert all(b & 0x80 for b in data[:-1])

    def test_pack_unsigned_negative(self) -> None:
        """Test negative input to the unsigned packer."""
        with pytest.raises(EncodeError, match="non-negative"):
            pack_unsigned(-5)

    def test_pack_signed_large_negative(self) -> None:
        """Test a large negative value terminates with sign bit set."""
        data = pack_signed(-(2**200))
        assert data[-1] & 0x40
        assert data[-1] & 0x80 == 0


class TestEncodeDispatch:
    """Test width-based dispatch."""

    def test_dispatch(self) -> None:
        """Test encode() picks the algorithm from the width."""
        assert encode(127, IntWidth.U8) == b"\x7f"
        assert encode(127, IntWidth.I8) == b"\xff\x00"
        assert encode(-1, IntWidth.I32) == b"\x7f"
