"""Integer widths supported by the codec.

Every encode and decode operation is parameterized by an ``IntWidth``. The enum
is the single per-width table; the algorithms themselves are written once.
"""

from __future__ import annotations

import enum

from ..exceptions import WidthError


class IntWidth(enum.Enum):
    """Native integer widths, named the way they are spelled on the command line."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def byte_size(self) -> int:
        """Size of the native integer in bytes (16 for the 128-bit widths)."""
        return self.bits // 8

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def max_encoded_bytes(self) -> int:
        """Length of the longest minimal encoding of a value of this width."""
        return -(-self.bits // 7)

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def parse(cls, name: str | IntWidth) -> IntWidth:
        """Look up a width by name, e.g. ``"u32"`` or ``"I64"``.

        Raises:
            WidthError: If the name is not a supported width
        """
        if isinstance(name, IntWidth):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            choices = ", ".join(w.value for w in cls)
            raise WidthError(f"Unknown integer width {name!r} (expected one of: {choices})") from e

    @classmethod
    def for_bits(cls, bits: int, *, signed: bool) -> IntWidth:
        """Look up a width by bit count and signedness.

        Raises:
            WidthError: If no native width has that many bits
        """
        prefix = "i" if signed else "u"
        try:
            return cls(f"{prefix}{bits}")
        except ValueError as e:
            raise WidthError(f"Unsupported bit width {bits} (expected 8, 16, 32, 64 or 128)") from e


UNSIGNED_WIDTHS = (IntWidth.U8, IntWidth.U16, IntWidth.U32, IntWidth.U64, IntWidth.U128)
SIGNED_WIDTHS = (IntWidth.I8, IntWidth.I16, IntWidth.I32, IntWidth.I64, IntWidth.I128)
