"""Tests for DateTime class."""

from __future__ import annotations

import pytest

from rfcstamp import CalendarTime, DateTime, Offset
from rfcstamp.errors import InvalidMonthError, ValidationError


class TestDateTimeConstruction:
    """Tests for DateTime construction."""

    def test_default_offset_is_utc(self) -> None:
        """Omitting the offset gives UTC."""
        dt = DateTime(CalendarTime(2024, 1, 1))
        assert dt.offset is Offset.utc()
        assert dt.precision is None

    def test_explicit_fields(self, nanos_time: CalendarTime) -> None:
        """time, offset and precision are stored."""
        offset = Offset.from_hours(2)
        dt = DateTime(nanos_time, offset, precision=6)
        assert dt.time is nanos_time
        assert dt.offset is offset
        assert dt.precision == 6

    def test_field_shortcuts(self, nanos_time: CalendarTime) -> None:
        """Calendar fields are readable directly on the DateTime."""
        dt = DateTime(nanos_time)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second) == (14, 30, 45)
        assert (dt.millisecond, dt.microsecond, dt.nanosecond) == (123, 456, 789)

    def test_named_precision(self) -> None:
        """Named precisions are normalized to integers."""
        dt = DateTime(CalendarTime(2024, 1, 1), precision="millis")
        assert dt.precision == 3

    def test_auto_precision_is_none(self) -> None:
        """'auto' is stored as None."""
        assert DateTime(CalendarTime(2024, 1, 1), precision="auto").precision is None

    def test_invalid_precision(self) -> None:
        """Precision outside 0-9 raises ValidationError."""
        with pytest.raises(ValidationError):
            DateTime(CalendarTime(2024, 1, 1), precision=10)

    def test_wrong_time_type(self) -> None:
        """time must be a CalendarTime."""
        with pytest.raises(TypeError, match="CalendarTime"):
            DateTime("2024-01-01")  # type: ignore[arg-type]

    def test_wrong_offset_type(self) -> None:
        """offset must be an Offset."""
        with pytest.raises(TypeError, match="Offset"):
            DateTime(CalendarTime(2024, 1, 1), 3600)  # type: ignore[arg-type]


class TestDateTimeParse:
    """Tests for DateTime.parse() and DateTime.is_valid()."""

    def test_parse(self) -> None:
        """DateTime.parse delegates to the parser."""
        dt = DateTime.parse("2024-01-15T14:30:45.5+01:00")
        assert dt.millisecond == 500
        assert dt.offset.seconds_from_utc == 3600

    def test_parse_error(self) -> None:
        """Parse errors propagate."""
        with pytest.raises(InvalidMonthError):
            DateTime.parse("2024-13-01T00:00:00Z")

    def test_is_valid(self) -> None:
        """is_valid reports without raising."""
        assert DateTime.is_valid("2024-01-01T00:00:00Z") is True
        assert DateTime.is_valid("2024-01-01T00:00:00") is False


class TestDateTimeFormat:
    """Tests for DateTime.format() and str()."""

    def test_auto(self) -> None:
        """Without a precision trailing zeros are trimmed."""
        dt = DateTime.parse("2024-01-15T14:30:45.500Z")
        assert dt.format() == "2024-01-15T14:30:45.5Z"

    def test_own_precision(self) -> None:
        """The value's precision is used by default."""
        dt = DateTime.parse("2024-01-15T14:30:45.5Z").with_precision(3)
        assert dt.format() == "2024-01-15T14:30:45.500Z"

    def test_explicit_precision_overrides(self) -> None:
        """An explicit precision wins over the stored one."""
        dt = DateTime.parse("2024-01-15T14:30:45.5Z").with_precision(3)
        assert dt.format(0) == "2024-01-15T14:30:45Z"

    def test_explicit_none_overrides(self) -> None:
        """An explicit None selects automatic trimming."""
        dt = DateTime.parse("2024-01-15T14:30:45.5Z").with_precision(3)
        assert dt.format(None) == "2024-01-15T14:30:45.5Z"

    def test_str(self) -> None:
        """str() is the canonical format."""
        dt = DateTime.parse("2024-11-22t14:30:00+00:00")
        assert str(dt) == "2024-11-22T14:30:00Z"


class TestDateTimeDerived:
    """Tests for with_precision() and with_offset()."""

    def test_with_precision_returns_new(self) -> None:
        """with_precision leaves the original untouched."""
        dt = DateTime.parse("2024-01-01T00:00:00Z")
        fixed = dt.with_precision(9)
        assert fixed is not dt
        assert dt.precision is None
        assert fixed.precision == 9
        assert fixed.time == dt.time

    def test_with_offset_keeps_fields(self) -> None:
        """with_offset replaces only the offset."""
        dt = DateTime.parse("2024-01-01T12:00:00Z").with_precision(3)
        moved = dt.with_offset(Offset.from_hours(1))
        assert moved.hour == 12
        assert moved.offset.seconds_from_utc == 3600
        assert moved.precision == 3

    @pytest.mark.parametrize("field", ["time", "offset", "precision", "hour"])
    def test_fields_are_read_only(self, field: str) -> None:
        """Public fields have no setters."""
        dt = DateTime.parse("2024-01-01T12:00:00Z")
        with pytest.raises(AttributeError):
            setattr(dt, field, None)
        assert dt.format() == "2024-01-01T12:00:00Z"


class TestDateTimeUtcNow:
    """Tests for DateTime.utc_now()."""

    def test_utc_now(self) -> None:
        """utc_now returns a UTC value with no sub-microsecond digits."""
        dt = DateTime.utc_now()
        assert dt.offset is Offset.utc()
        assert dt.nanosecond == 0
        assert dt.year >= 2024

    def test_utc_now_round_trips(self) -> None:
        """The current time formats and parses back to itself."""
        dt = DateTime.utc_now()
        assert DateTime.parse(dt.format()) == dt


class TestDateTimeEquality:
    """Tests for equality, hashing and repr."""

    def test_equal(self) -> None:
        """Values parsed from equivalent text are equal."""
        a = DateTime.parse("2024-01-01T00:00:00Z")
        b = DateTime.parse("2024-01-01t00:00:00+00:00")
        assert a == b
        assert hash(a) == hash(b)

    def test_offset_kind_matters(self) -> None:
        """Z and -00:00 give different values."""
        a = DateTime.parse("2024-01-01T00:00:00Z")
        b = DateTime.parse("2024-01-01T00:00:00-00:00")
        assert a != b

    def test_same_instant_not_equal(self) -> None:
        """Equality is field-wise, not instant-wise."""
        a = DateTime.parse("2024-01-01T01:00:00+01:00")
        b = DateTime.parse("2024-01-01T00:00:00Z")
        assert a != b
        assert a.to_unix_nanos() == b.to_unix_nanos()

    def test_precision_matters(self) -> None:
        """Precision takes part in equality."""
        dt = DateTime.parse("2024-01-01T00:00:00Z")
        assert dt != dt.with_precision(3)

    def test_not_equal_to_string(self) -> None:
        """DateTime never equals its text."""
        dt = DateTime.parse("2024-01-01T00:00:00Z")
        assert dt != "2024-01-01T00:00:00Z"

    def test_repr(self) -> None:
        """repr shows fields and offset."""
        dt = DateTime.parse("2024-01-15T14:30:45.5+05:30")
        assert repr(dt) == (
            "DateTime(2024, 1, 15, 14, 30, 45, nanos=500000000, offset=+05:30)"
        )

    def test_repr_with_precision(self) -> None:
        """repr includes a fixed precision."""
        dt = DateTime.parse("2024-01-15T14:30:45Z").with_precision(3)
        assert repr(dt).endswith("offset=Z, precision=3)")
