"""Conversion utilities.

This module provides functions for converting DateTime values to other
representations:
    - JSON serialization and deserialization
    - Unix epoch projection (seconds, milliseconds, microseconds, nanoseconds)

Examples:
    >>> from rfcstamp import DateTime
    >>> from rfcstamp.convert import to_json, from_json, to_unix_seconds

    >>> dt = DateTime.parse("2024-01-15T14:30:45Z")
    >>> from_json(to_json(dt)) == dt
    True

    >>> to_unix_seconds(dt)
    1705329045
"""

from __future__ import annotations

from rfcstamp.convert.json import from_json, to_json
from rfcstamp.convert.epoch import (
    to_unix_micros,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "to_unix_millis",
    "to_unix_micros",
    "to_unix_nanos",
]
