"""rfcstamp exception hierarchy.

All rfcstamp-specific exceptions inherit from StampError. Parsing failures
derive from ParseError and carry the offending text in ``value``.
"""

from __future__ import annotations


class StampError(Exception):
    """Base exception for all rfcstamp errors."""

    pass


class ValidationError(StampError):
    """Invalid input values.

    Raised when a calendar component, offset kind or output precision
    is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Precision outside 0-9
    """

    pass


class ParseError(StampError):
    """Failed to parse a textual representation.

    Attributes:
        value: The offending text (a field token or the whole input).
        reason: Optional detail appended to the message.
    """

    label = "cannot parse"

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"{self.label}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EmptyError(ParseError):
    """Input is empty."""

    label = "empty input"


class InvalidFormatError(ParseError):
    """Input does not match the RFC 3339 grammar."""

    label = "invalid RFC 3339 format"


class InvalidYearError(ParseError):
    """Year is not four ASCII digits."""

    label = "invalid year"


class InvalidMonthError(ParseError):
    """Month is not two digits in 01-12."""

    label = "invalid month"


class InvalidDayError(ParseError):
    """Day is not valid for the month and year."""

    label = "invalid day"


class InvalidHourError(ParseError):
    """Hour is not two digits in 00-23."""

    label = "invalid hour"


class InvalidMinuteError(ParseError):
    """Minute is not two digits in 00-59."""

    label = "invalid minute"


class InvalidSecondError(ParseError):
    """Second is not two digits in 00-60."""

    label = "invalid second"


class InvalidFractionError(ParseError):
    """Fractional seconds have no digits."""

    label = "invalid fractional seconds"


class InvalidOffsetError(ParseError):
    """Timezone offset is missing or malformed."""

    label = "invalid timezone offset"


class InvalidLeapSecondError(ParseError):
    """Second 60 on a date other than June 30 or December 31.

    Attributes:
        month: The month of the rejected timestamp.
        day: The day of the rejected timestamp.
    """

    label = "leap second not allowed"

    def __init__(self, month: int, day: int) -> None:
        self.month = month
        self.day = day
        super().__init__(
            f"{month:02d}-{day:02d}",
            "only June 30 or December 31",
        )


class OffsetError(StampError):
    """Invalid UTC offset value."""

    pass


class OffsetOutOfRangeError(OffsetError):
    """Offset magnitude exceeds 23:59.

    Attributes:
        seconds: The rejected offset in seconds.
    """

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds
        super().__init__(
            f"offset {seconds} seconds is out of range (-23:59 to +23:59)"
        )


__all__ = [
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
]
