"""UTC offset model for RFC 3339 timestamps.

RFC 3339 section 4.3 gives a zero offset two distinct meanings:

- ``Z`` (or ``+00:00``): the time is UTC and UTC is the preferred
  reference point.
- ``-00:00``: the time is known in UTC but the offset to local time
  is unknown.

A plain signed integer would conflate the two, so Offset carries an
explicit OffsetKind alongside its seconds payload.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from rfcstamp._internal.constants import (
    MAX_OFFSET_SECONDS,
    NUMERIC_OFFSET_LENGTH,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from rfcstamp._internal.validation import coerce_ascii, is_ascii_digits
from rfcstamp.errors import (
    EmptyError,
    InvalidFormatError,
    OffsetOutOfRangeError,
    ParseError,
    ValidationError,
)


def _check_whole_minutes(seconds: int) -> None:
    """Reject offsets that cannot be written as +HH:MM."""
    if seconds % SECONDS_PER_MINUTE:
        raise ValidationError(
            f"offset must be a whole number of minutes, got {seconds} seconds"
        )


class OffsetKind(Enum):
    """Variant tag of an Offset."""

    UTC = "utc"  # Z
    UNKNOWN_LOCAL = "unknown_local"  # -00:00
    NUMERIC = "numeric"  # +HH:MM / -HH:MM, non-zero


class Offset:
    """A UTC offset as used in RFC 3339 timestamps.

    Offsets are read-only: every field is a property without a setter
    and no method mutates the value. Use the classmethod constructors
    rather than calling the class directly: ``from_seconds`` collapses a
    zero offset to UTC, which the raw constructor refuses to do.

    Attributes:
        kind: The OffsetKind variant.
        seconds_from_utc: Signed seconds east of UTC (0 for UTC and
            UNKNOWN_LOCAL).

    Examples:
        >>> Offset.from_string("+05:30").seconds_from_utc
        19800

        >>> Offset.from_string("-00:00").kind
        <OffsetKind.UNKNOWN_LOCAL: 'unknown_local'>

        >>> str(Offset.from_seconds(-28800))
        '-08:00'
    """

    __slots__ = ("_kind", "_seconds")

    _utc_instance: ClassVar[Offset | None] = None
    _unknown_local_instance: ClassVar[Offset | None] = None

    def __init__(self, kind: OffsetKind, seconds: int = 0) -> None:
        """Create an Offset of the given kind.

        Args:
            kind: The variant.
            seconds: Signed seconds from UTC. Must be 0 for UTC and
                UNKNOWN_LOCAL, non-zero for NUMERIC.

        Raises:
            ValidationError: If seconds is not an int, not a whole number of
                minutes, or does not fit kind.
            OffsetOutOfRangeError: If abs(seconds) exceeds 23:59.
        """
        if not isinstance(kind, OffsetKind):
            raise ValidationError(
                f"kind must be an OffsetKind, got {type(kind).__name__}"
            )
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise ValidationError(
                f"seconds must be an integer, got {type(seconds).__name__}"
            )
        if abs(seconds) > MAX_OFFSET_SECONDS:
            raise OffsetOutOfRangeError(seconds)
        _check_whole_minutes(seconds)
        if kind is OffsetKind.NUMERIC and seconds == 0:
            raise ValidationError(
                "numeric offset must be non-zero; use Offset.utc() or "
                "Offset.unknown_local()"
            )
        if kind is not OffsetKind.NUMERIC and seconds != 0:
            raise ValidationError(
                f"{kind.name} offset carries no seconds, got {seconds}"
            )

        self._kind: OffsetKind = kind
        self._seconds: int = seconds

    @classmethod
    def utc(cls) -> Offset:
        """Return the UTC offset (``Z``).

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(OffsetKind.UTC)
        return cls._utc_instance

    @classmethod
    def unknown_local(cls) -> Offset:
        """Return the unknown-local-offset marker (``-00:00``).

        All calls return the same instance.
        """
        if cls._unknown_local_instance is None:
            cls._unknown_local_instance = cls(OffsetKind.UNKNOWN_LOCAL)
        return cls._unknown_local_instance

    @classmethod
    def from_seconds(cls, seconds: int) -> Offset:
        """Create an offset from signed seconds east of UTC.

        A zero offset is UTC. RFC 3339 offsets have minute resolution, so
        seconds must be a whole number of minutes.

        Args:
            seconds: Offset in seconds, within -86340 to +86340.

        Returns:
            Offset.utc() for 0, otherwise a NUMERIC offset.

        Raises:
            ValidationError: If seconds is not a whole number of minutes.
            OffsetOutOfRangeError: If abs(seconds) exceeds 23:59.

        Examples:
            >>> Offset.from_seconds(0) is Offset.utc()
            True
            >>> Offset.from_seconds(86340).seconds_from_utc
            86340
        """
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise ValidationError(
                f"seconds must be an integer, got {type(seconds).__name__}"
            )
        if abs(seconds) > MAX_OFFSET_SECONDS:
            raise OffsetOutOfRangeError(seconds)
        _check_whole_minutes(seconds)
        if seconds == 0:
            return cls.utc()
        return cls(OffsetKind.NUMERIC, seconds)

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Offset:
        """Create an offset from hours and minutes.

        Args:
            hours: Hour component (-23 to +23). Its sign gives the direction.
            minutes: Minute component (0 to 59), always non-negative.

        Returns:
            The corresponding Offset (UTC for 0:00).

        Raises:
            ValidationError: If minutes is outside 0-59.
            OffsetOutOfRangeError: If the total exceeds 23:59.

        Examples:
            >>> Offset.from_hours(5, 30).seconds_from_utc
            19800
            >>> Offset.from_hours(-5, 30).seconds_from_utc
            -19800
        """
        if minutes < 0 or minutes > 59:
            raise ValidationError(f"minutes must be 0-59, got {minutes}")

        # Minutes take the sign from hours
        if hours >= 0:
            seconds = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
        else:
            seconds = hours * SECONDS_PER_HOUR - minutes * SECONDS_PER_MINUTE
        return cls.from_seconds(seconds)

    @classmethod
    def from_string(cls, s: str | bytes) -> Offset:
        """Decode an RFC 3339 time-offset token.

        Accepted forms are exactly ``Z``, ``z``, or ``+HH:MM`` / ``-HH:MM``
        with HH in 00-23 and MM in 00-59. ``+00:00`` decodes to UTC and
        ``-00:00`` to the unknown-local-offset marker.

        Args:
            s: The token, as text or ASCII bytes.

        Returns:
            The decoded Offset.

        Raises:
            EmptyError: If the token is empty.
            InvalidFormatError: If the token is malformed.
            OffsetOutOfRangeError: If the magnitude exceeds 23:59.

        Examples:
            >>> Offset.from_string("z") is Offset.utc()
            True
            >>> Offset.from_string("+00:00") is Offset.utc()
            True
            >>> Offset.from_string("-00:00") is Offset.unknown_local()
            True
        """
        s = coerce_ascii(s)

        if not s:
            raise EmptyError(s)

        if s in ("Z", "z"):
            return cls.utc()

        if len(s) != NUMERIC_OFFSET_LENGTH:
            raise InvalidFormatError(s, "expected 'Z' or '+HH:MM'")

        sign_char = s[0]
        if sign_char not in ("+", "-"):
            raise InvalidFormatError(s, "expected '+', '-' or 'Z'")

        hour_str, colon, minute_str = s[1:3], s[3], s[4:6]
        if colon != ":" or not is_ascii_digits(hour_str) or not is_ascii_digits(minute_str):
            raise InvalidFormatError(s, "expected '+HH:MM'")

        hours = int(hour_str)
        minutes = int(minute_str)
        if hours > 23 or minutes > 59:
            raise InvalidFormatError(s, "hour must be 00-23 and minute 00-59")

        seconds = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
        if seconds == 0:
            return cls.unknown_local() if sign_char == "-" else cls.utc()

        return cls.from_seconds(-seconds if sign_char == "-" else seconds)

    @property
    def kind(self) -> OffsetKind:
        """Return the variant tag."""
        return self._kind

    @property
    def seconds_from_utc(self) -> int:
        """Return the signed offset in seconds.

        Both UTC and UNKNOWN_LOCAL return 0: they denote the same
        instants and differ only in what they say about local time.
        """
        return self._seconds

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero (UTC or UNKNOWN_LOCAL)."""
        return self._seconds == 0

    @property
    def is_unknown_local(self) -> bool:
        """Return True for the ``-00:00`` marker."""
        return self._kind is OffsetKind.UNKNOWN_LOCAL

    def to_string(self) -> str:
        """Encode the offset as an RFC 3339 time-offset token.

        Returns:
            ``Z``, ``-00:00`` or ``+HH:MM`` / ``-HH:MM``.

        Examples:
            >>> Offset.utc().to_string()
            'Z'
            >>> Offset.from_hours(5, 30).to_string()
            '+05:30'
        """
        if self._kind is OffsetKind.UTC:
            return "Z"
        if self._kind is OffsetKind.UNKNOWN_LOCAL:
            return "-00:00"

        sign = "+" if self._seconds >= 0 else "-"
        magnitude = abs(self._seconds)
        hours = magnitude // SECONDS_PER_HOUR
        minutes = (magnitude % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        return f"{sign}{hours:02d}:{minutes:02d}"

    def to_json(self) -> dict[str, Any]:
        """Return the offset as a JSON-serializable dictionary.

        Examples:
            >>> Offset.unknown_local().to_json()
            {'_type': 'Offset', 'value': '-00:00'}
        """
        return {"_type": "Offset", "value": self.to_string()}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Offset:
        """Create an Offset from a JSON dictionary.

        Raises:
            ParseError: If the data is not a dict or has no value.
        """
        if not isinstance(data, dict):
            raise ParseError(repr(data), f"expected dict, got {type(data).__name__}")

        value = data.get("value")
        if not value:
            raise ParseError(repr(data), "missing 'value' field for Offset")

        return cls.from_string(value)

    def __eq__(self, other: object) -> bool:
        """Structural equality: same kind and same seconds."""
        if not isinstance(other, Offset):
            return NotImplemented
        return self._kind is other._kind and self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash((self._kind, self._seconds))

    def __repr__(self) -> str:
        if self._kind is OffsetKind.UTC:
            return "Offset.utc()"
        if self._kind is OffsetKind.UNKNOWN_LOCAL:
            return "Offset.unknown_local()"
        return f"Offset.from_seconds({self._seconds})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Offset", "OffsetKind"]
