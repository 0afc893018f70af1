"""Subcommand implementations for the lebcodec CLI."""

from __future__ import annotations

from pydantic import TypeAdapter
from structlog import get_logger

from ..codec.widths import IntWidth
from ..config import DecodeLimits
from ..encoding import to_ileb128, to_uleb128
from ..exceptions import TrailingBytesError
from ..models.record import DecodedRecord
from ..models.values import ILeb128Ref, ULeb128Ref
from ..utils.sizing import encoded_size, max_encoded_size

logger = get_logger()

_records_adapter = TypeAdapter(list[DecodedRecord])


def _ref_type(width: IntWidth) -> type[ULeb128Ref] | type[ILeb128Ref]:
    return ILeb128Ref if width.signed else ULeb128Ref


def run_encode(value: int, width: IntWidth) -> None:
    """Print the LEB128 encoding of ``value`` as hex."""
    leb = to_ileb128(value, width) if width.signed else to_uleb128(value, width)
    logger.debug("encoded", value=value, width=width.value, byte_count=leb.byte_count())
    print(leb.hex())


def run_decode(
    data: bytes, width: IntWidth, *, limits: DecodeLimits, as_json: bool = False
) -> None:
    """Decode a buffer holding exactly one value and print the integer."""
    leb = _ref_type(width).from_bytes(data, limits=limits)
    if leb.byte_count() != len(data):
        raise TrailingBytesError(len(data) - leb.byte_count(), leb.byte_count())
    record = DecodedRecord.from_value(leb, width)
    logger.debug("decoded", width=width.value, byte_count=record.byte_count)
    if as_json:
        print(record.model_dump_json())
    else:
        print(record.value)


def run_split(
    data: bytes, width: IntWidth, *, limits: DecodeLimits, as_json: bool = False
) -> None:
    """Decode every value in a buffer of concatenated encodings."""
    records: list[DecodedRecord] = []
    offset = 0
    for leb in _ref_type(width).all_from_bytes(data, limits=limits):
        records.append(DecodedRecord.from_value(leb, width, offset=offset))
        offset += leb.byte_count()
    logger.debug("split", count=len(records), total_bytes=len(data))

    if as_json:
        print(_records_adapter.dump_json(records).decode())
        return

    print(f"{len(records)} value{'s' if len(records) != 1 else ''} as {width.value}")
    column = 2 * max_encoded_size(width)
    for record in records:
        print(f"  @{record.offset:<6} {record.encoded.hex():<{column}}  {record.value}")


def run_size(values: list[int], *, signed: bool) -> None:
    """Print the encoded size of each value in bytes."""
    for value in values:
        size = encoded_size(value, signed=signed)
        print(f"{value}: {size} byte{'s' if size != 1 else ''}")
