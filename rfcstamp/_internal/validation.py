"""Validation utilities for rfcstamp.

This module provides the range-checking decorator and helpers used by
the value types, the leap-second validator used by the parser, and the
output precision resolver shared by the formatting entry points.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from rfcstamp._internal.constants import (
    FRACTION_DIGITS,
    LEAP_SECOND_DATES,
    PRECISION_NAMES,
)
from rfcstamp.errors import InvalidFormatError, InvalidLeapSecondError, ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23), minute=(0, 59))
        ... def make_time(hour: int, minute: int) -> None:
        ...     pass

        >>> make_time(24, 0)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is None:
                    continue
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ValidationError(
                        f"{param_name} must be an integer, got {type(value).__name__}"
                    )
                if value < min_val or value > max_val:
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def is_ascii_digits(s: str) -> bool:
    """Return True if s is non-empty and made only of ASCII digits 0-9.

    Unlike str.isdigit, other Unicode digits are rejected.
    """
    return bool(s) and all("0" <= ch <= "9" for ch in s)


def coerce_ascii(s: str | bytes) -> str:
    """Return s as text, decoding bytes-like input as strict ASCII.

    Accepts str, bytes, bytearray and memoryview.

    Raises:
        InvalidFormatError: If bytes-like input is not ASCII.
        TypeError: For any other type.
    """
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray, memoryview)):
        raw = bytes(s)
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError:
            raise InvalidFormatError(repr(raw), "not ASCII") from None
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from rfcstamp._internal.calendar import days_in_month

    for name, value in (("year", year), ("month", month), ("day", day)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"{name} must be an integer, got {type(value).__name__}"
            )

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_leap_second(month: int, day: int) -> None:
    """Check that a leap second (second 60) may occur on month/day.

    Leap seconds are only ever inserted at the end of June or December,
    so second 60 is accepted on June 30 and December 31 only. Seconds
    0-59 are never passed here.

    Args:
        month: The month of the timestamp.
        day: The day of the timestamp.

    Raises:
        InvalidLeapSecondError: If month/day is not a leap-second date.

    Examples:
        >>> validate_leap_second(12, 31)
        >>> validate_leap_second(1, 1)
        Traceback (most recent call last):
        ...
        InvalidLeapSecondError: leap second not allowed: '01-01' (only June 30 or December 31)
    """
    if (month, day) not in LEAP_SECOND_DATES:
        raise InvalidLeapSecondError(month, day)


def resolve_precision(precision: int | str | None) -> int | None:
    """Normalize an output precision.

    Args:
        precision: None for automatic trimming, an integer number of
            fractional digits (0-9), or one of the names "auto",
            "seconds", "millis", "micros", "nanos".

    Returns:
        None or an integer in 0-9.

    Raises:
        ValidationError: If precision is not one of the accepted values.

    Examples:
        >>> resolve_precision("millis")
        3
        >>> resolve_precision(None) is None
        True
    """
    if precision is None:
        return None
    if isinstance(precision, str):
        try:
            return PRECISION_NAMES[precision]
        except KeyError:
            raise ValidationError(
                f"unknown precision {precision!r}; expected one of "
                f"{', '.join(PRECISION_NAMES)}"
            ) from None
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise ValidationError(
            f"precision must be an integer, got {type(precision).__name__}"
        )
    if precision < 0 or precision > FRACTION_DIGITS:
        raise ValidationError(
            f"precision must be between 0 and {FRACTION_DIGITS}, got {precision}"
        )
    return precision


__all__ = [
    "coerce_ascii",
    "is_ascii_digits",
    "validate_range",
    "validate_day",
    "validate_leap_second",
    "resolve_precision",
]
