"""Offset units.

This module provides:
    - OffsetKind: variant tag (UTC, UNKNOWN_LOCAL, NUMERIC)
    - Offset: RFC 3339 UTC offset value
"""

from __future__ import annotations

from rfcstamp.units.offset import Offset, OffsetKind

__all__: list[str] = [
    "Offset",
    "OffsetKind",
]
