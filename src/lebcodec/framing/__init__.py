"""Locating LEB128 values in byte buffers.

This module provides the scanners behind ``from_bytes`` and ``all_from_bytes``.
"""

from __future__ import annotations

from .scan import check_single_value, split_values, value_length

__all__ = [
    "value_length",
    "split_values",
    "check_single_value",
]
