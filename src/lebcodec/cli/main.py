"""Main CLI entry point for lebcodec."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from structlog import get_logger

from .. import __version__
from ..codec.widths import IntWidth
from ..config import DecodeLimits
from ..exceptions import LebcodecError
from .commands import run_decode, run_encode, run_size, run_split
from .logs import setup_logging

logger = get_logger()


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def _parse_hex(text: str) -> bytes:
    cleaned = text.strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned.replace(":", " "))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex string: {text!r}") from None


def _parse_width(text: str) -> IntWidth:
    try:
        return IntWidth.parse(text)
    except LebcodecError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _positive_int(text: str) -> int:
    value = _parse_int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def _resolve_width(args: argparse.Namespace) -> IntWidth:
    if args.width is not None:
        return args.width
    return IntWidth.I64 if args.signed else IntWidth.U64


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lebcodec",
        description="lebcodec: LEB128 Variable-Length Integer Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lebcodec encode 624485 --width u32     Encode an integer (prints e58e26)
  lebcodec decode ff7e --signed          Decode one value (prints -129)
  lebcodec split 7f8001 --json           Decode every value in a buffer
  lebcodec size 127 128 --signed         Show encoded sizes
        """,
    )

    parser.add_argument("--version", action="version", version=f"lebcodec {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug events to stderr"
    )
    parser.add_argument(
        "--log-json", action="store_true", help="Log JSON lines instead of key=value text"
    )
    parser.add_argument(
        "--max-bytes",
        metavar="N",
        type=_positive_int,
        default=None,
        help="Reject any single encoded value longer than N bytes",
    )

    width_parent = argparse.ArgumentParser(add_help=False)
    width_parent.add_argument(
        "-w",
        "--width",
        type=_parse_width,
        default=None,
        help="Integer width, e.g. u32 or i16; overrides --signed (default: u64 or i64)",
    )
    width_parent.add_argument(
        "-s", "--signed", action="store_true", help="Use signed LEB128 (default width i64)"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser(
        "encode", parents=[width_parent], help="Encode an integer and print hex bytes"
    )
    encode_parser.add_argument("value", type=_parse_int, help="Integer (decimal or 0x-prefixed)")

    decode_parser = subparsers.add_parser(
        "decode", parents=[width_parent], help="Decode exactly one value from hex bytes"
    )
    decode_parser.add_argument("data", type=_parse_hex, help="Hex bytes, e.g. e58e26")
    decode_parser.add_argument("--json", action="store_true", help="Print a JSON record")

    split_parser = subparsers.add_parser(
        "split", parents=[width_parent], help="Decode every value in concatenated hex bytes"
    )
    split_parser.add_argument("data", type=_parse_hex, help="Hex bytes, e.g. 7f8001")
    split_parser.add_argument("--json", action="store_true", help="Print a JSON array of records")

    size_parser = subparsers.add_parser("size", help="Print encoded sizes without encoding")
    size_parser.add_argument("values", nargs="+", type=_parse_int, help="Integers to size")
    size_parser.add_argument("-s", "--signed", action="store_true", help="Size signed LEB128")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the lebcodec CLI.

    Returns:
        Exit code (0 for success, 1 for codec errors, 2 for usage errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.verbose, json=args.log_json)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    limits = DecodeLimits(max_bytes=args.max_bytes)
    logger.debug("command", command=args.command, max_bytes=limits.max_bytes)

    try:
        if args.command == "encode":
            run_encode(args.value, _resolve_width(args))
        elif args.command == "decode":
            run_decode(args.data, _resolve_width(args), limits=limits, as_json=args.json)
        elif args.command == "split":
            run_split(args.data, _resolve_width(args), limits=limits, as_json=args.json)
        elif args.command == "size":
            run_size(args.values, signed=args.signed)
    except LebcodecError as e:
        logger.debug("command_failed", command=args.command, error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
