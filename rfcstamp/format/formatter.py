"""Canonical RFC 3339 formatter.

Formatting is the canonicalization step: separators are always the
uppercase ``T`` and ``Z``, a UTC offset is always written ``Z`` (never
``+00:00``), and ``-00:00`` is kept for the unknown-local-offset marker.

Functions:
    format_timestamp: Format calendar fields and an offset.

Examples:
    >>> from rfcstamp.core.calendar_time import CalendarTime
    >>> from rfcstamp.units.offset import Offset

    >>> t = CalendarTime(2024, 1, 15, 14, 30, 45, millisecond=120)
    >>> format_timestamp(t, Offset.utc())
    '2024-01-15T14:30:45.12Z'

    >>> format_timestamp(t, Offset.from_hours(5, 30), precision=0)
    '2024-01-15T14:30:45+05:30'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rfcstamp._internal.constants import FRACTION_DIGITS
from rfcstamp._internal.validation import resolve_precision

if TYPE_CHECKING:
    from rfcstamp.core.calendar_time import CalendarTime
    from rfcstamp.units.offset import Offset


def format_timestamp(
    time: "CalendarTime",
    offset: "Offset",
    precision: int | str | None = None,
) -> str:
    """Format calendar fields and an offset as an RFC 3339 string.

    Args:
        time: The calendar fields.
        offset: The UTC offset to append.
        precision: Fractional-second digits:
            - None or "auto": all significant digits, trailing zeros
              trimmed, no fraction at all when it is zero
            - 0 or "seconds": no fraction
            - 1-9: exactly that many digits, truncated
            - "millis", "micros", "nanos": 3, 6 or 9 digits

    Returns:
        The canonical RFC 3339 string.

    Raises:
        ValidationError: If precision is not an accepted value.

    Examples:
        >>> from rfcstamp.core.calendar_time import CalendarTime
        >>> from rfcstamp.units.offset import Offset
        >>> t = CalendarTime(2024, 1, 1, millisecond=123, microsecond=456, nanosecond=789)
        >>> format_timestamp(t, Offset.utc(), precision=9)
        '2024-01-01T00:00:00.123456789Z'
        >>> format_timestamp(t, Offset.utc(), precision="millis")
        '2024-01-01T00:00:00.123Z'
    """
    digits = resolve_precision(precision)

    return "".join(
        (
            _format_year(time.year),
            f"-{time.month:02d}-{time.day:02d}",
            f"T{time.hour:02d}:{time.minute:02d}:{time.second:02d}",
            _format_fraction(time.total_nanoseconds, digits),
            offset.to_string(),
        )
    )


def _format_year(year: int) -> str:
    """Zero-pad the year to four digits, with a leading '-' when negative."""
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def _format_fraction(total_nanos: int, digits: int | None) -> str:
    """Return the time-secfrac part, including the '.', or ''."""
    if digits is None:
        if total_nanos == 0:
            return ""
        return "." + f"{total_nanos:0{FRACTION_DIGITS}d}".rstrip("0")

    if digits == 0:
        return ""

    truncated = total_nanos // 10 ** (FRACTION_DIGITS - digits)
    return f".{truncated:0{digits}d}"


__all__ = ["format_timestamp"]
