"""rfcstamp: RFC 3339 timestamp parsing and formatting.

rfcstamp turns RFC 3339 internet timestamps into calendar fields plus a
UTC offset and back, with nanosecond fractional seconds and the
historical leap-second allowance.

Core Types:
    CalendarTime: Calendar date and wall-clock time (nanosecond fraction)
    DateTime: CalendarTime paired with an Offset

Units:
    Offset: UTC offset distinguishing Z, -00:00 and numeric offsets
    OffsetKind: Variant tag of an Offset

Format Functions:
    parse_rfc3339: Parse an RFC 3339 string
    format_rfc3339: Format a DateTime canonically
    is_valid_rfc3339: Check a string without raising

Exceptions:
    StampError: Base exception
    ValidationError: Invalid component values
    ParseError: Failed to parse string (one subclass per field)
    OffsetError: Invalid offset

Example:
    >>> from rfcstamp import parse_rfc3339, format_rfc3339
    >>> dt = parse_rfc3339("1985-04-12t23:20:50.52+00:00")
    >>> format_rfc3339(dt)
    '1985-04-12T23:20:50.52Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from rfcstamp.core.calendar_time import CalendarTime
from rfcstamp.core.datetime import DateTime

# Units
from rfcstamp.units.offset import Offset, OffsetKind

# Exceptions
from rfcstamp.errors import (
    EmptyError,
    InvalidDayError,
    InvalidFormatError,
    InvalidFractionError,
    InvalidHourError,
    InvalidLeapSecondError,
    InvalidMinuteError,
    InvalidMonthError,
    InvalidOffsetError,
    InvalidSecondError,
    InvalidYearError,
    OffsetError,
    OffsetOutOfRangeError,
    ParseError,
    StampError,
    ValidationError,
)

# Format functions
from rfcstamp.format import (
    format_rfc3339,
    format_timestamp,
    is_valid_rfc3339,
    parse_rfc3339,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarTime",
    "DateTime",
    # Units
    "Offset",
    "OffsetKind",
    # Exceptions
    "StampError",
    "ValidationError",
    "ParseError",
    "EmptyError",
    "InvalidFormatError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidHourError",
    "InvalidMinuteError",
    "InvalidSecondError",
    "InvalidFractionError",
    "InvalidOffsetError",
    "InvalidLeapSecondError",
    "OffsetError",
    "OffsetOutOfRangeError",
    # Format functions
    "parse_rfc3339",
    "format_rfc3339",
    "format_timestamp",
    "is_valid_rfc3339",
]
