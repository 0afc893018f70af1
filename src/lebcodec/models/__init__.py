"""Value types for lebcodec.

This module provides the borrowed and owned LEB128 value types and the
decoded record model.
"""

from __future__ import annotations

from .record import DecodedRecord
from .values import ILeb128, ILeb128Ref, ULeb128, ULeb128Ref

__all__ = [
    "ULeb128Ref",
    "ILeb128Ref",
    "ULeb128",
    "ILeb128",
    "DecodedRecord",
]
