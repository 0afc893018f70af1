"""Unit tests for decoded value records."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from lebcodec import DecodedRecord, ILeb128Ref, IntWidth, ULeb128, ULeb128Ref
from lebcodec.exceptions import DecodeOverflowError, WidthError


def test_from_value(canonical_bytes: bytes) -> None:
    """Test recording a decoded value."""
    record = DecodedRecord.from_value(ULeb128Ref(canonical_bytes), IntWidth.U32, offset=4)
    assert record.value == 624485
    assert record.offset == 4
    assert record.encoded == canonical_bytes
    assert record.byte_count == 3


def test_from_owned_value() -> None:
    """Test owned values record the same way."""
    record = DecodedRecord.from_value(ULeb128(b"\x2a"), IntWidth.U8)
    assert record.value == 42
    assert record.offset == 0


def test_from_value_errors() -> None:
    """Test decode errors surface unchanged."""
    with pytest.raises(DecodeOverflowError):
        DecodedRecord.from_value(ILeb128Ref(b"\x80\x01"), IntWidth.I8)

    with pytest.raises(WidthError):
        DecodedRecord.from_value(ILeb128Ref(b"\x01"), IntWidth.U8)


def test_value_must_fit_width() -> None:
    """Test the record checks its value against its width."""
    with pytest.raises(ValidationError, match="out of range"):
        DecodedRecord(width=IntWidth.U8, value=256, encoded=b"\x80\x02")


def test_field_constraints() -> None:
    """Test offset and encoded constraints."""
    with pytest.raises(ValidationError):
        DecodedRecord(offset=-1, width=IntWidth.U8, value=1, encoded=b"\x01")

    with pytest.raises(ValidationError):
        DecodedRecord(width=IntWidth.U8, value=1, encoded=b"")


def test_json_serialization() -> None:
    """Test the JSON form uses hex bytes and width names."""
    record = DecodedRecord(width=IntWidth.I16, value=-129, encoded=b"\xff\x7e", offset=2)
    assert json.loads(record.model_dump_json()) == {
        "offset": 2,
        "width": "i16",
        "value": -129,
        "encoded": "ff7e",
    }


def test_frozen() -> None:
    """Test records are immutable."""
    record = DecodedRecord(width=IntWidth.U8, value=1, encoded=b"\x01")
    with pytest.raises(ValidationError):
        record.value = 2  # type: ignore[misc]
