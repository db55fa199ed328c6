"""Calendar utilities for rfcstamp.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths and day ordinals.

This module is not part of the public API.
"""

from __future__ import annotations

from rfcstamp._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def is_valid_day(year: int, month: int, day: int) -> bool:
    """Return True if day exists in the given month of the given year.

    Examples:
        >>> is_valid_day(2024, 2, 29)
        True
        >>> is_valid_day(2023, 2, 29)
        False
        >>> is_valid_day(2024, 13, 1)
        False
    """
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps the formula valid for negative years
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


UNIX_EPOCH_ORDINAL: int = ymd_to_ordinal(1970, 1, 1)


def days_since_unix_epoch(year: int, month: int, day: int) -> int:
    """Return the signed day count from 1970-01-01 to the given date."""
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


__all__ = [
    "is_leap_year",
    "days_in_month",
    "is_valid_day",
    "ymd_to_ordinal",
    "days_since_unix_epoch",
    "UNIX_EPOCH_ORDINAL",
]
