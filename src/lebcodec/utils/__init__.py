"""Utility functions for lebcodec.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, encoded_sizes, max_encoded_size

__all__ = [
    "encoded_size",
    "encoded_sizes",
    "max_encoded_size",
]
