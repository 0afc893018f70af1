"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def canonical_bytes() -> bytes:
    """The published LEB128 example: 624485 as unsigned LEB128."""
    return bytes([0xE5, 0x8E, 0x26])


@pytest.fixture
def concatenated_bytes() -> bytes:
    """127 followed by 128, both unsigned LEB128."""
    return bytes([0x7F, 0x80, 0x01])
