"""RFC 3339 timestamp parser.

Grammar (RFC 3339 section 5.6, with the lowercase separators the RFC
permits)::

    date-time = 4DIGIT "-" 2DIGIT "-" 2DIGIT ("T"|"t")
                2DIGIT ":" 2DIGIT ":" 2DIGIT ["." 1*DIGIT] offset
    offset    = ("Z"|"z") | ("+"|"-") 2DIGIT ":" 2DIGIT

Parsing is a single left-to-right pass over fixed-width tokens with at
most one character of lookahead. Every field parser reads from a _Cursor
and either returns its value or raises a field-specific ParseError
carrying the offending token. The first failure aborts the parse.

Functions:
    parse: Parse an RFC 3339 string into a DateTime.

Examples:
    >>> dt = parse("1985-04-12T23:20:50.52Z")
    >>> dt.time.millisecond
    520

    >>> parse("1996-12-19T16:39:57-08:00").offset.seconds_from_utc
    -28800
"""

from __future__ import annotations

import logging

from rfcstamp._internal.calendar import is_valid_day
from rfcstamp._internal.constants import (
    FRACTION_DIGITS,
    LEAP_SECOND,
    MIN_TIMESTAMP_LENGTH,
    NUMERIC_OFFSET_LENGTH,
)
from rfcstamp._internal.validation import (
    coerce_ascii,
    is_ascii_digits,
    validate_leap_second,
)
from rfcstamp.core.calendar_time import CalendarTime
from rfcstamp.core.datetime import DateTime
from rfcstamp.errors import (
    InvalidDayError,
    InvalidFormatError,
    InvalidFractionError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidMonthError,
    InvalidOffsetError,
    InvalidSecondError,
    InvalidYearError,
    OffsetError,
    ParseError,
    ValidationError,
)
from rfcstamp.units.offset import Offset

logger = logging.getLogger(__name__)


class _Cursor:
    """Read position over the input text.

    The cursor only moves forward. take() returns at most the requested
    number of characters, fewer at the end of input, so callers validate
    the width of what they get back.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or '' at end of input."""
        return self.text[self.pos : self.pos + 1]

    def take(self, width: int) -> str:
        token = self.text[self.pos : self.pos + width]
        self.pos += len(token)
        return token

    def take_while_digits(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and "0" <= self.text[self.pos] <= "9":
            self.pos += 1
        return self.text[start : self.pos]


def parse(s: str | bytes) -> DateTime:
    """Parse an RFC 3339 date-time string.

    Args:
        s: The timestamp, as text or ASCII bytes.

    Returns:
        A DateTime with the parsed calendar fields and offset. Its
        precision is always None.

    Raises:
        InvalidFormatError: Input too short, a literal separator is wrong,
            trailing characters follow the offset, or the input is not ASCII.
        InvalidYearError, InvalidMonthError, InvalidDayError,
        InvalidHourError, InvalidMinuteError, InvalidSecondError:
            A numeric field is malformed or out of range.
        InvalidLeapSecondError: Second 60 outside June 30 / December 31.
        InvalidFractionError: A '.' with no digits after it.
        InvalidOffsetError: The offset is missing or malformed.

    Examples:
        >>> parse("1990-12-31T23:59:60Z").time.second
        60

        >>> parse("2024-01-01T00:00:00-00:00").offset.is_unknown_local
        True
    """
    text = coerce_ascii(s)

    if len(text) < MIN_TIMESTAMP_LENGTH:
        raise InvalidFormatError(
            text, f"shorter than {MIN_TIMESTAMP_LENGTH} characters"
        )

    cursor = _Cursor(text)

    # full-date: YYYY-MM-DD
    year = _parse_year(cursor)
    _expect(cursor, "-")
    month = _parse_month(cursor)
    _expect(cursor, "-")
    day = _parse_day(cursor, year, month)

    _expect(cursor, "T", "t")

    # partial-time: HH:MM:SS[.fraction]
    hour = _parse_two_digit_field(cursor, 0, 23, InvalidHourError)
    _expect(cursor, ":")
    minute = _parse_two_digit_field(cursor, 0, 59, InvalidMinuteError)
    _expect(cursor, ":")
    second = _parse_two_digit_field(cursor, 0, LEAP_SECOND, InvalidSecondError)

    if second == LEAP_SECOND:
        validate_leap_second(month, day)

    millisecond = microsecond = nanosecond = 0
    if cursor.peek() == ".":
        cursor.take(1)
        millisecond, microsecond, nanosecond = _parse_fraction(cursor)

    offset = _parse_offset(cursor)

    if not cursor.at_end:
        raise InvalidFormatError(
            text, f"unexpected trailing characters {text[cursor.pos:]!r}"
        )

    try:
        time = CalendarTime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond=millisecond,
            microsecond=microsecond,
            nanosecond=nanosecond,
        )
    except ValidationError as exc:
        logger.debug("calendar fields of %r rejected: %s", text, exc)
        raise InvalidFormatError(text, str(exc)) from exc

    return DateTime(time, offset)


def _expect(cursor: _Cursor, *allowed: str) -> None:
    """Consume one literal character that must be one of allowed."""
    char = cursor.take(1)
    if char not in allowed:
        expected = " or ".join(repr(a) for a in allowed)
        raise InvalidFormatError(
            cursor.text, f"expected {expected} at position {cursor.pos - len(char)}"
        )


def _parse_year(cursor: _Cursor) -> int:
    """Parse date-fullyear: exactly four ASCII digits."""
    token = cursor.take(4)
    if len(token) != 4 or not is_ascii_digits(token):
        raise InvalidYearError(token, "expected four digits")
    return int(token)


def _parse_month(cursor: _Cursor) -> int:
    """Parse date-month: 01-12."""
    return _parse_two_digit_field(cursor, 1, 12, InvalidMonthError)


def _parse_day(cursor: _Cursor, year: int, month: int) -> int:
    """Parse date-mday, checked against the length of the month."""
    token = cursor.take(2)
    if len(token) != 2 or not is_ascii_digits(token):
        raise InvalidDayError(token, "expected two digits")

    day = int(token)
    if not is_valid_day(year, month, day):
        raise InvalidDayError(token, f"not a day of {year:04d}-{month:02d}")
    return day


def _parse_two_digit_field(
    cursor: _Cursor,
    low: int,
    high: int,
    error: type[ParseError],
) -> int:
    """Parse a two-digit field and check it lies in [low, high]."""
    token = cursor.take(2)
    if len(token) != 2 or not is_ascii_digits(token):
        raise error(token, "expected two digits")

    value = int(token)
    if value < low or value > high:
        raise error(token, f"must be {low:02d}-{high:02d}")
    return value


def _parse_fraction(cursor: _Cursor) -> tuple[int, int, int]:
    """Parse time-secfrac digits (the '.' is already consumed).

    Digits beyond nanosecond resolution are truncated, not rounded.

    Returns:
        (millisecond, microsecond, nanosecond), each 0-999.
    """
    digits = cursor.take_while_digits()
    if not digits:
        raise InvalidFractionError(
            cursor.text[cursor.pos :], "expected at least one digit after '.'"
        )

    padded = digits.ljust(FRACTION_DIGITS, "0")[:FRACTION_DIGITS]
    return int(padded[0:3]), int(padded[3:6]), int(padded[6:9])


def _parse_offset(cursor: _Cursor) -> Offset:
    """Parse time-offset by handing the token to Offset.from_string."""
    head = cursor.peek()
    if not head:
        raise InvalidOffsetError("", "missing offset")

    width = 1 if head in ("Z", "z") else NUMERIC_OFFSET_LENGTH
    token = cursor.take(width)
    try:
        return Offset.from_string(token)
    except (ParseError, OffsetError) as exc:
        raise InvalidOffsetError(token, str(exc)) from exc


__all__ = ["parse"]
