"""DateTime class pairing calendar fields with a UTC offset.

This module provides the DateTime aggregate returned by the parser and
consumed by the formatter.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from rfcstamp._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from rfcstamp._internal.validation import resolve_precision
from rfcstamp.core.calendar_time import CalendarTime
from rfcstamp.errors import ParseError
from rfcstamp.units.offset import Offset

_UNSET: Any = object()


class DateTime:
    """An RFC 3339 date-time: calendar fields, an offset and an optional precision.

    DateTime is read-only: fields are properties without setters and
    methods return new values. The calendar fields are the local wall-clock
    reading at the given offset; they are never normalized to UTC.

    ``precision`` fixes how many fractional-second digits the value is
    formatted with. When it is None, formatting trims trailing zeros and
    omits a zero fraction entirely. Parsed values always have precision
    None.

    Attributes:
        time: The CalendarTime.
        offset: The Offset.
        precision: Fractional digits to format with (0-9), or None.

    Examples:
        >>> dt = DateTime.parse("2024-01-15T14:30:45.5+01:00")
        >>> dt.hour, dt.offset.seconds_from_utc
        (14, 3600)

        >>> dt.format()
        '2024-01-15T14:30:45.5+01:00'

        >>> dt.with_precision(3).format()
        '2024-01-15T14:30:45.500+01:00'
    """

    __slots__ = ("_time", "_offset", "_precision")

    def __init__(
        self,
        time: CalendarTime,
        offset: Offset | None = None,
        *,
        precision: int | str | None = None,
    ) -> None:
        """Create a DateTime.

        Args:
            time: The calendar fields.
            offset: The UTC offset (UTC when None).
            precision: Output precision, see format_timestamp.

        Raises:
            TypeError: If time or offset has the wrong type.
            ValidationError: If precision is not an accepted value.
        """
        if not isinstance(time, CalendarTime):
            raise TypeError(f"expected CalendarTime, got {type(time).__name__}")
        if offset is None:
            offset = Offset.utc()
        elif not isinstance(offset, Offset):
            raise TypeError(f"expected Offset, got {type(offset).__name__}")

        self._time: CalendarTime = time
        self._offset: Offset = offset
        self._precision: int | None = resolve_precision(precision)

    @classmethod
    def parse(cls, s: str | bytes) -> DateTime:
        """Parse an RFC 3339 string.

        Raises:
            ParseError: A subclass naming the field that failed.

        Examples:
            >>> DateTime.parse("2024-01-01T00:00:00+00:00").offset
            Offset.utc()
        """
        from rfcstamp.format.parser import parse

        return parse(s)

    @staticmethod
    def is_valid(s: str | bytes) -> bool:
        """Return True if s parses as an RFC 3339 date-time."""
        from rfcstamp.format.rfc3339 import is_valid_rfc3339

        return is_valid_rfc3339(s)

    @classmethod
    def utc_now(cls) -> DateTime:
        """Return the current UTC time (microsecond resolution).

        Examples:
            >>> DateTime.utc_now().offset.is_utc
            True
        """
        now = _datetime.datetime.now(_datetime.timezone.utc)
        time = CalendarTime(
            now.year,
            now.month,
            now.day,
            now.hour,
            now.minute,
            now.second,
            millisecond=now.microsecond // 1000,
            microsecond=now.microsecond % 1000,
        )
        return cls(time, Offset.utc())

    @property
    def time(self) -> CalendarTime:
        return self._time

    @property
    def offset(self) -> Offset:
        return self._offset

    @property
    def precision(self) -> int | None:
        return self._precision

    # Calendar field shortcuts

    @property
    def year(self) -> int:
        return self._time.year

    @property
    def month(self) -> int:
        return self._time.month

    @property
    def day(self) -> int:
        return self._time.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    # Derived values

    def with_precision(self, precision: int | str | None) -> DateTime:
        """Return a copy formatted with the given precision."""
        return DateTime(self._time, self._offset, precision=precision)

    def with_offset(self, offset: Offset) -> DateTime:
        """Return a copy with the offset replaced.

        The calendar fields are kept as they are, so the result denotes a
        different instant unless both offsets are zero.
        """
        return DateTime(self._time, offset, precision=self._precision)

    def format(self, precision: int | str | None = _UNSET) -> str:
        """Return the canonical RFC 3339 string.

        Args:
            precision: Overrides the value's own precision when given.

        Examples:
            >>> DateTime.parse("2024-11-22t14:30:00z").format()
            '2024-11-22T14:30:00Z'
        """
        from rfcstamp.format.formatter import format_timestamp

        if precision is _UNSET:
            precision = self._precision
        return format_timestamp(self._time, self._offset, precision)

    # Unix timestamp conversions

    def to_unix_seconds(self) -> int:
        """Return the Unix timestamp in whole seconds.

        The offset is subtracted from the calendar reading, so
        ``2024-01-01T01:00:00+01:00`` and ``2024-01-01T00:00:00Z`` give the
        same result.
        """
        return self._time.epoch_seconds - self._offset.seconds_from_utc

    def to_unix_millis(self) -> int:
        """Return the Unix timestamp in milliseconds (fraction truncated)."""
        return (
            self.to_unix_seconds() * 1000
            + self._time.total_nanoseconds // NANOS_PER_MILLISECOND
        )

    def to_unix_micros(self) -> int:
        """Return the Unix timestamp in microseconds (fraction truncated)."""
        return (
            self.to_unix_seconds() * 1_000_000
            + self._time.total_nanoseconds // NANOS_PER_MICROSECOND
        )

    def to_unix_nanos(self) -> int:
        """Return the Unix timestamp in nanoseconds."""
        return self.to_unix_seconds() * NANOS_PER_SECOND + self._time.total_nanoseconds

    # JSON

    def to_json(self) -> dict[str, Any]:
        """Return the datetime as a JSON-serializable dictionary.

        ``value`` always carries every significant fraction digit; a fixed
        precision is stored beside it so no digits are lost.

        Examples:
            >>> DateTime.parse("2024-01-15T14:30:45Z").to_json()
            {'_type': 'DateTime', 'value': '2024-01-15T14:30:45Z'}
        """
        data: dict[str, Any] = {"_type": "DateTime", "value": self.format(None)}
        if self._precision is not None:
            data["precision"] = self._precision
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DateTime:
        """Create a DateTime from a JSON dictionary.

        Raises:
            ParseError: If the data is not a dict or has no value.
            ValidationError: If the stored precision is invalid.
        """
        if not isinstance(data, dict):
            raise ParseError(repr(data), f"expected dict, got {type(data).__name__}")

        value = data.get("value")
        if not value:
            raise ParseError(repr(data), "missing 'value' field for DateTime")

        result = cls.parse(value)
        precision = data.get("precision")
        if precision is not None:
            result = result.with_precision(precision)
        return result

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Field-by-field equality: time, offset and precision.

        This is not instant equality; ``...T01:00:00+01:00`` and
        ``...T00:00:00Z`` are different values. Compare to_unix_nanos()
        for that.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return (
            self._time == other._time
            and self._offset == other._offset
            and self._precision == other._precision
        )

    def __hash__(self) -> int:
        return hash((self._time, self._offset, self._precision))

    def __repr__(self) -> str:
        t = self._time
        precision_part = ""
        if self._precision is not None:
            precision_part = f", precision={self._precision}"
        return (
            f"DateTime({t.year}, {t.month}, {t.day}, {t.hour}, {t.minute}, "
            f"{t.second}, nanos={t.total_nanoseconds}, "
            f"offset={self._offset}{precision_part})"
        )

    def __str__(self) -> str:
        """Return the canonical RFC 3339 representation."""
        return self.format()


__all__ = ["DateTime"]
