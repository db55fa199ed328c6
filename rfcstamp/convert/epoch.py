"""Epoch conversion utilities.

This module projects a DateTime onto the Unix timeline (seconds,
milliseconds, microseconds or nanoseconds since 1970-01-01T00:00:00Z).
The projection is one-directional: a Unix instant carries no offset, so
there is no way back to the original wall-clock reading.

Functions:
    to_unix_seconds: Convert DateTime to Unix timestamp in seconds.
    to_unix_millis: Convert DateTime to Unix timestamp in milliseconds.
    to_unix_micros: Convert DateTime to Unix timestamp in microseconds.
    to_unix_nanos: Convert DateTime to Unix timestamp in nanoseconds.

Both UTC and the unknown local offset (-00:00) project as UTC. A leap
second (:60) lands on the same instant as :00 of the following minute.

Examples:
    >>> from rfcstamp import DateTime
    >>> to_unix_seconds(DateTime.parse("1970-01-01T00:00:00Z"))
    0

    >>> to_unix_seconds(DateTime.parse("1970-01-01T01:00:00+01:00"))
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rfcstamp.core.datetime import DateTime


def to_unix_seconds(dt: "DateTime") -> int:
    """Convert a DateTime to Unix timestamp in seconds.

    The fraction is dropped.

    Examples:
        >>> from rfcstamp import DateTime
        >>> to_unix_seconds(DateTime.parse("2024-01-15T12:30:00Z"))
        1705321800
    """
    return dt.to_unix_seconds()


def to_unix_millis(dt: "DateTime") -> int:
    """Convert a DateTime to Unix timestamp in milliseconds.

    Examples:
        >>> from rfcstamp import DateTime
        >>> to_unix_millis(DateTime.parse("1970-01-01T00:00:01.5Z"))
        1500
    """
    return dt.to_unix_millis()


def to_unix_micros(dt: "DateTime") -> int:
    """Convert a DateTime to Unix timestamp in microseconds."""
    return dt.to_unix_micros()


def to_unix_nanos(dt: "DateTime") -> int:
    """Convert a DateTime to Unix timestamp in nanoseconds.

    Examples:
        >>> from rfcstamp import DateTime
        >>> to_unix_nanos(DateTime.parse("1970-01-01T00:00:00.000000001Z"))
        1
    """
    return dt.to_unix_nanos()


__all__ = [
    "to_unix_seconds",
    "to_unix_millis",
    "to_unix_micros",
    "to_unix_nanos",
]
