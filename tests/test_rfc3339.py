"""Tests for the RFC 3339 convenience functions and codec properties.

Covers parse_rfc3339, format_rfc3339 and is_valid_rfc3339, plus the
round-trip and canonicalization guarantees of the parser/formatter pair.
"""

from __future__ import annotations

import logging

import pytest

from rfcstamp import (
    CalendarTime,
    DateTime,
    Offset,
    format_rfc3339,
    is_valid_rfc3339,
    parse_rfc3339,
)
from rfcstamp.errors import InvalidLeapSecondError, ParseError, ValidationError


# Inputs exercised by the round-trip and idempotence checks
SAMPLES = [
    "1985-04-12T23:20:50.52Z",
    "1996-12-19T16:39:57-08:00",
    "1990-12-31T23:59:60Z",
    "1990-12-31T15:59:60-08:00",
    "1937-01-01T12:00:27.87+00:20",
    "2024-11-22t14:30:00z",
    "2024-01-01T00:00:00+00:00",
    "2024-01-01T00:00:00-00:00",
    "2024-02-29T23:59:59.999999999+23:59",
    "0001-01-01T00:00:00.000000001-23:59",
    "9999-12-31T23:59:59.1234567890123Z",
]


class TestParseRfc3339:
    """Tests for parse_rfc3339()."""

    def test_parse(self) -> None:
        """parse_rfc3339 returns a DateTime."""
        dt = parse_rfc3339("2024-01-15T14:30:45Z")
        assert isinstance(dt, DateTime)
        assert dt.year == 2024

    def test_parse_error(self) -> None:
        """Errors propagate unchanged."""
        with pytest.raises(InvalidLeapSecondError):
            parse_rfc3339("2024-01-01T23:59:60Z")


class TestFormatRfc3339:
    """Tests for format_rfc3339()."""

    def test_default(self) -> None:
        """Without precision the DateTime's own precision is used."""
        dt = parse_rfc3339("2024-01-15T14:30:45.120Z")
        assert format_rfc3339(dt) == "2024-01-15T14:30:45.12Z"
        assert format_rfc3339(dt.with_precision(6)) == "2024-01-15T14:30:45.120000Z"

    def test_precision_override(self) -> None:
        """An explicit precision overrides the value's precision."""
        dt = parse_rfc3339("2024-01-15T14:30:45.123Z").with_precision(9)
        assert format_rfc3339(dt, precision=3) == "2024-01-15T14:30:45.123Z"
        assert format_rfc3339(dt, precision="seconds") == "2024-01-15T14:30:45Z"
        assert format_rfc3339(dt, precision=None) == "2024-01-15T14:30:45.123Z"

    def test_wrong_type(self) -> None:
        """Only DateTime values can be formatted."""
        with pytest.raises(TypeError, match="expected DateTime"):
            format_rfc3339(CalendarTime(2024, 1, 1))  # type: ignore[arg-type]

    def test_invalid_precision(self) -> None:
        """Invalid precision raises ValidationError."""
        dt = parse_rfc3339("2024-01-15T14:30:45Z")
        with pytest.raises(ValidationError):
            format_rfc3339(dt, precision=12)


class TestIsValidRfc3339:
    """Tests for is_valid_rfc3339()."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_valid(self, text: str) -> None:
        """Well-formed timestamps are valid."""
        assert is_valid_rfc3339(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2024-11-22 14:30:00Z",
            "2024-13-01T00:00:00Z",
            "2024-01-01T23:59:60Z",
            "2024-01-01T00:00:00",
            "2024-01-01T00:00:00.Z",
            "2024-01-01T00:00:00+24:00",
            "2024-01-01T00:00:00Z trailing",
            "2024-01-15",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Malformed timestamps are invalid."""
        assert is_valid_rfc3339(text) is False

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The discarded error is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="rfcstamp.format.rfc3339"):
            assert is_valid_rfc3339("2024-13-01T00:00:00Z") is False
        assert "invalid month" in caplog.text

    def test_type_error_not_swallowed(self) -> None:
        """Non-string input is a programming error, not invalid text."""
        with pytest.raises(TypeError):
            is_valid_rfc3339(None)  # type: ignore[arg-type]


class TestRoundTrip:
    """Tests for parse/format round trips."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_fields_survive(self, text: str) -> None:
        """Parsing the formatted text gives back the same value."""
        dt = parse_rfc3339(text)
        assert parse_rfc3339(format_rfc3339(dt)) == dt

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text: str) -> None:
        """Formatting is a fixed point after one canonicalization."""
        once = format_rfc3339(parse_rfc3339(text))
        twice = format_rfc3339(parse_rfc3339(once))
        assert once == twice

    @pytest.mark.parametrize(
        "text,canonical",
        [
            ("2024-11-22t14:30:00z", "2024-11-22T14:30:00Z"),
            ("2024-01-01T00:00:00+00:00", "2024-01-01T00:00:00Z"),
            ("2024-01-01T00:00:00-00:00", "2024-01-01T00:00:00-00:00"),
            ("2024-01-01T00:00:00.500Z", "2024-01-01T00:00:00.5Z"),
            ("2024-01-01T00:00:00.000Z", "2024-01-01T00:00:00Z"),
            ("9999-12-31T23:59:59.1234567890123Z", "9999-12-31T23:59:59.123456789Z"),
        ],
    )
    def test_canonical_form(self, text: str, canonical: str) -> None:
        """Separators, UTC and the fraction are canonicalized."""
        assert format_rfc3339(parse_rfc3339(text)) == canonical

    def test_calendar_time_round_trip(self) -> None:
        """Formatting a CalendarTime and parsing it gives the same fields."""
        t = CalendarTime(
            2000, 2, 29, 23, 59, 59, millisecond=1, microsecond=20, nanosecond=300
        )
        for offset in (Offset.utc(), Offset.unknown_local(), Offset.from_hours(-9, 30)):
            dt = parse_rfc3339(t.to_rfc3339(offset))
            assert dt.time == t
            assert dt.offset == offset

    def test_fixed_precision_preserves_fields(self) -> None:
        """Precision 9 output parses back to the same fields."""
        dt = parse_rfc3339("2024-01-01T00:00:00.000000001Z")
        text = format_rfc3339(dt, precision=9)
        assert text == "2024-01-01T00:00:00.000000001Z"
        assert parse_rfc3339(text) == dt

    def test_precision_zero_drops_fraction(self) -> None:
        """Precision 0 output parses back with a zero fraction."""
        dt = parse_rfc3339("2024-01-01T00:00:00.999Z")
        assert parse_rfc3339(format_rfc3339(dt, precision=0)).time.total_nanoseconds == 0


class TestErrorHierarchy:
    """Tests that every rejection is a ParseError."""

    @pytest.mark.parametrize(
        "text",
        [
            "2024-11-22 14:30:00Z",
            "2024-13-01T00:00:00Z",
            "2024-01-01T23:59:60Z",
            "2024-01-01T00:00:00+05:3",
        ],
    )
    def test_parse_error(self, text: str) -> None:
        """Callers can catch ParseError for any malformed text."""
        with pytest.raises(ParseError):
            parse_rfc3339(text)
