"""RFC 3339 convenience entry points.

RFC 3339 is a profile of ISO 8601 that defines a strict subset for
datetime representations in internet protocols. Key differences from
general ISO 8601:

1. Date and time must be separated by 'T' or 't' (not space)
2. An offset is required
3. The offset must be 'Z' or '+/-HH:MM'
4. '-00:00' means "UTC, local offset unknown"

Functions:
    parse_rfc3339: Parse an RFC 3339 string into a DateTime.
    format_rfc3339: Format a DateTime as an RFC 3339 string.
    is_valid_rfc3339: Check whether a string is valid RFC 3339.

Examples:
    >>> from rfcstamp.format import parse_rfc3339, format_rfc3339

    >>> dt = parse_rfc3339("2024-01-15T14:30:45+00:00")
    >>> format_rfc3339(dt)
    '2024-01-15T14:30:45Z'

    >>> is_valid_rfc3339("2024-11-22 14:30:00Z")
    False
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rfcstamp.errors import OffsetError, ParseError

if TYPE_CHECKING:
    from rfcstamp.core.datetime import DateTime

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def parse_rfc3339(s: str | bytes) -> "DateTime":
    """Parse an RFC 3339 datetime string.

    Args:
        s: The RFC 3339 datetime string to parse.

    Returns:
        A DateTime. Its precision is None.

    Raises:
        ParseError: A subclass naming the field that failed.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45.123456789Z").time.nanosecond
        789

        >>> parse_rfc3339("2024-01-15 14:30:45Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: invalid RFC 3339 format...
    """
    from rfcstamp.format.parser import parse

    return parse(s)


def format_rfc3339(
    value: "DateTime",
    *,
    precision: int | str | None = _UNSET,
) -> str:
    """Format a DateTime as an RFC 3339 string.

    Args:
        value: A DateTime to format.
        precision: Subsecond precision. When omitted the DateTime's own
            precision is used. Otherwise:
            - None or "auto": Include subseconds only if non-zero, minimal digits
            - 0 or "seconds": No subseconds
            - 1-9: Exactly that many decimal places, truncated
            - "millis", "micros", "nanos": 3, 6 or 9 decimal places

    Returns:
        RFC 3339 formatted string.

    Raises:
        TypeError: If value is not a DateTime.
        ValidationError: If precision is not an accepted value.

    Examples:
        >>> from rfcstamp import DateTime
        >>> dt = DateTime.parse("2024-01-15T14:30:45.123Z")
        >>> format_rfc3339(dt, precision="seconds")
        '2024-01-15T14:30:45Z'
        >>> format_rfc3339(dt, precision=6)
        '2024-01-15T14:30:45.123000Z'
    """
    from rfcstamp.core.datetime import DateTime as DateTimeClass

    if not isinstance(value, DateTimeClass):
        raise TypeError(f"expected DateTime, got {type(value).__name__}")

    if precision is _UNSET:
        return value.format()
    return value.format(precision)


def is_valid_rfc3339(s: str | bytes) -> bool:
    """Return True if s parses as an RFC 3339 datetime.

    The parse error, if any, is logged at DEBUG level and discarded.

    Examples:
        >>> is_valid_rfc3339("1990-12-31T23:59:60Z")
        True
        >>> is_valid_rfc3339("2024-01-01T23:59:60Z")
        False
    """
    from rfcstamp.format.parser import parse

    try:
        parse(s)
    except (ParseError, OffsetError) as exc:
        logger.debug("rejected %r: %s", s, exc)
        return False
    return True


__all__ = ["parse_rfc3339", "format_rfc3339", "is_valid_rfc3339"]
