"""Tests for CLI tool."""

from __future__ import annotations

import json
import subprocess
import sys

import pytest

from lebcodec.cli.main import main


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "lebcodec.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "lebcodec: LEB128 Variable-Length Integer Codec" in result.stdout
    assert "split" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "lebcodec 0.1.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "lebcodec: LEB128 Variable-Length Integer Codec" in result.stdout


def test_cli_encode() -> None:
    """Test encoding the published example."""
    result = run_cli("encode", "624485", "--width", "u32")
    assert result.returncode == 0
    assert result.stdout.strip() == "e58e26"


def test_cli_decode_overflow() -> None:
    """Test decoding a value too wide for the requested width."""
    result = run_cli("decode", "8002", "--width", "u8")
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "requires 9 bits" in result.stderr


def test_cli_bad_hex() -> None:
    """Test malformed hex is a usage error."""
    result = run_cli("decode", "zz")
    assert result.returncode == 2
    assert "invalid hex" in result.stderr


def test_cli_verbose_logs_to_stderr() -> None:
    """Test -v writes debug events to stderr, leaving stdout clean."""
    result = run_cli("-v", "encode", "1")
    assert result.returncode == 0
    assert result.stdout.strip() == "01"
    assert "encoded" in result.stderr


class TestInProcess:
    """Run main() directly and capture its output."""

    def test_encode_signed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --signed selects i64."""
        assert main(["encode", "-129", "--signed"]) == 0
        assert capsys.readouterr().out.strip() == "ff7e"

    def test_encode_hex_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test 0x-prefixed integers."""
        assert main(["encode", "0x80"]) == 0
        assert capsys.readouterr().out.strip() == "8001"

    def test_encode_out_of_range(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an encode error exits 1."""
        assert main(["encode", "256", "-w", "u8"]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decoding signed and unsigned values."""
        assert main(["decode", "ff7e", "--signed"]) == 0
        assert capsys.readouterr().out.strip() == "-129"

        assert main(["decode", "0xE5:8E:26", "-w", "u32"]) == 0
        assert capsys.readouterr().out.strip() == "624485"

    def test_decode_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the JSON record."""
        assert main(["decode", "e58e26", "--json"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record == {"offset": 0, "width": "u64", "value": 624485, "encoded": "e58e26"}

    def test_decode_trailing(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decode rejects bytes after the value."""
        assert main(["decode", "7f8001"]) == 1
        assert "trailing" in capsys.readouterr().err

    def test_decode_truncated(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decode rejects an unterminated value."""
        assert main(["decode", "80"]) == 1
        assert "Truncated" in capsys.readouterr().err

    def test_split(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the text listing."""
        assert main(["split", "7f8001"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "2 values as u64"
        assert lines[1].split() == ["@0", "7f", "127"]
        assert lines[2].split() == ["@1", "8001", "128"]

    def test_split_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the JSON listing."""
        assert main(["split", "7f8001", "--json", "-w", "i16"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["value"] for r in records] == [-1, 128]
        assert [r["offset"] for r in records] == [0, 1]
        assert records[1]["width"] == "i16"

    def test_split_max_bytes(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --max-bytes rejects long values."""
        assert main(["--max-bytes", "2", "split", "808001"]) == 1
        assert "longer than 2" in capsys.readouterr().err

    def test_split_trailing(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a buffer ending mid-value."""
        assert main(["split", "7f80"]) == 1
        assert "trailing" in capsys.readouterr().err

    def test_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unsigned and signed sizes."""
        assert main(["size", "127", "128"]) == 0
        assert capsys.readouterr().out.splitlines() == ["127: 1 byte", "128: 2 bytes"]

        assert main(["size", "--signed", "127", "128"]) == 0
        assert capsys.readouterr().out.splitlines() == ["127: 2 bytes", "128: 2 bytes"]

    def test_size_repeated_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test every argument gets a line, duplicates included, in input order."""
        assert main(["size", "5", "5", "300"]) == 0
        assert capsys.readouterr().out.splitlines() == ["5: 1 byte", "5: 1 byte", "300: 2 bytes"]

    def test_size_negative_unsigned(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test sizing a negative value without --signed."""
        assert main(["size", "-1"]) == 1
        assert "non-negative" in capsys.readouterr().err

    def test_bad_width(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown width is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "1", "-w", "u24"])

        assert exc_info.value.code == 2
        assert "Unknown integer width" in capsys.readouterr().err

    def test_bad_max_bytes(self) -> None:
        """Test --max-bytes must be positive."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-bytes", "0", "split", "00"])

        assert exc_info.value.code == 2

    def test_log_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON log lines on stderr."""
        assert main(["-v", "--log-json", "decode", "2a"]) == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "42"
        events = [json.loads(line)["event"] for line in captured.err.splitlines()]
        assert "decoded" in events
