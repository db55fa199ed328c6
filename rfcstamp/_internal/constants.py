"""Internal constants for rfcstamp.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits (four digits either side of zero)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Largest second value; 60 only on a leap-second date
LEAP_SECOND: int = 60

# (month, day) pairs on which a leap second may be inserted
LEAP_SECOND_DATES: frozenset[tuple[int, int]] = frozenset({(6, 30), (12, 31)})

# UTC offset limit: 23:59
MAX_OFFSET_SECONDS: int = 23 * SECONDS_PER_HOUR + 59 * SECONDS_PER_MINUTE  # 86_340

# Shortest valid timestamp: YYYY-MM-DDTHH:MM:SSZ
MIN_TIMESTAMP_LENGTH: int = 20

# Length of a numeric offset token: +HH:MM
NUMERIC_OFFSET_LENGTH: int = 6

# Fractional-second digits kept (nanosecond resolution)
FRACTION_DIGITS: int = 9

# Named output precisions accepted wherever a precision is
PRECISION_NAMES: dict[str, int | None] = {
    "auto": None,
    "seconds": 0,
    "millis": 3,
    "micros": 6,
    "nanos": 9,
}


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "LEAP_SECOND",
    "LEAP_SECOND_DATES",
    "MAX_OFFSET_SECONDS",
    "MIN_TIMESTAMP_LENGTH",
    "NUMERIC_OFFSET_LENGTH",
    "FRACTION_DIGITS",
    "PRECISION_NAMES",
]
