"""CalendarTime class holding the calendar fields of a timestamp.

This module provides the CalendarTime class: year, month, day, hour,
minute, second and a nanosecond fraction, with no offset attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rfcstamp._internal.calendar import days_since_unix_epoch
from rfcstamp._internal.constants import (
    LEAP_SECOND,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from rfcstamp._internal.validation import validate_day, validate_range

if TYPE_CHECKING:
    from rfcstamp.units.offset import Offset


class CalendarTime:
    """Calendar date and wall-clock time with nanosecond precision.

    CalendarTime is the calendar primitive consumed by the RFC 3339 codec.
    It validates each field's range and the day against the month length
    (leap years included). Second 60 is accepted here; whether it is
    allowed on a particular date is decided by the parser.
    Fields are read-only properties; no method mutates the value.

    The sub-second part is a single nanosecond fraction, exposed as three
    three-digit groups (millisecond, microsecond, nanosecond) and as
    total_nanoseconds.

    Attributes:
        year: The year (-9999 to 9999).
        month: The month (1-12).
        day: The day of the month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-60).
        millisecond: Digits 1-3 of the fraction (0-999).
        microsecond: Digits 4-6 of the fraction (0-999).
        nanosecond: Digits 7-9 of the fraction (0-999).
        total_nanoseconds: The whole fraction (0-999999999).

    Examples:
        >>> t = CalendarTime(2024, 1, 15, 14, 30, 45, millisecond=123)
        >>> t.total_nanoseconds
        123000000

        >>> t = CalendarTime(1990, 12, 31, 23, 59, 60)
        >>> t.is_leap_second
        True
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_fraction")

    @validate_range(
        year=(MIN_YEAR, MAX_YEAR),
        month=(1, 12),
        hour=(0, 23),
        minute=(0, 59),
        second=(0, LEAP_SECOND),
        millisecond=(0, 999),
        microsecond=(0, 999),
        nanosecond=(0, 999),
    )
    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a CalendarTime from component parts.

        Raises:
            ValidationError: If any component is out of range or the day
                does not exist in the month.
        """
        validate_day(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._fraction: int = (
            millisecond * NANOS_PER_MILLISECOND
            + microsecond * NANOS_PER_MICROSECOND
            + nanosecond
        )

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def millisecond(self) -> int:
        """Return the millisecond group of the fraction (0-999).

        Examples:
            >>> CalendarTime(2024, 1, 1, millisecond=123, microsecond=456).millisecond
            123
        """
        return self._fraction // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond group of the fraction (0-999).

        This is the microseconds within the current millisecond, not the
        total microseconds within the second.
        """
        return (self._fraction % NANOS_PER_MILLISECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond group of the fraction (0-999).

        This is the nanoseconds within the current microsecond.
        """
        return self._fraction % NANOS_PER_MICROSECOND

    @property
    def total_nanoseconds(self) -> int:
        """Return the sub-second fraction in nanoseconds (0-999999999)."""
        return self._fraction

    @property
    def is_leap_second(self) -> bool:
        """Return True if the second field is 60."""
        return self._second == LEAP_SECOND

    @property
    def epoch_seconds(self) -> int:
        """Return whole seconds since 1970-01-01T00:00:00, reading the fields as UTC.

        Second 60 counts as one second past :59, so a leap second maps
        onto the first second of the following minute.

        Examples:
            >>> CalendarTime(1970, 1, 2).epoch_seconds
            86400
        """
        days = days_since_unix_epoch(self._year, self._month, self._day)
        return (
            days * SECONDS_PER_DAY
            + self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    def to_rfc3339(
        self,
        offset: Offset | None = None,
        precision: int | str | None = None,
    ) -> str:
        """Format this calendar time with an offset as an RFC 3339 string.

        Args:
            offset: The offset to append (UTC when None).
            precision: Fractional digits to emit (see format_timestamp).

        Examples:
            >>> CalendarTime(2024, 1, 15, 14, 30, 45).to_rfc3339()
            '2024-01-15T14:30:45Z'
        """
        from rfcstamp.format.formatter import format_timestamp
        from rfcstamp.units.offset import Offset

        if offset is None:
            offset = Offset.utc()
        return format_timestamp(self, offset, precision)

    def _key(self) -> tuple[int, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._fraction,
        )

    def __eq__(self, other: object) -> bool:
        """Field-by-field equality."""
        if not isinstance(other, CalendarTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"CalendarTime({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, "
            f"millisecond={self.millisecond}, microsecond={self.microsecond}, "
            f"nanosecond={self.nanosecond})"
        )


__all__ = ["CalendarTime"]
