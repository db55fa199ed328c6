"""RFC 3339 formatting and parsing.

This module provides functions for converting date-times to and from
RFC 3339 text:
    - a single-pass parser producing DateTime values
    - a canonical formatter with selectable fractional precision
    - convenience entry points over both

Functions:
    parse: Parse an RFC 3339 string (the parser itself).
    format_timestamp: Format calendar fields and an offset.
    parse_rfc3339: Parse RFC 3339 datetime string.
    format_rfc3339: Format DateTime as RFC 3339 string.
    is_valid_rfc3339: Check a string without raising.

Examples:
    >>> from rfcstamp.format import parse_rfc3339, format_rfc3339

    >>> dt = parse_rfc3339("2024-01-15t14:30:45z")
    >>> format_rfc3339(dt)
    '2024-01-15T14:30:45Z'
"""

from __future__ import annotations

from rfcstamp.format.formatter import format_timestamp
from rfcstamp.format.parser import parse
from rfcstamp.format.rfc3339 import format_rfc3339, is_valid_rfc3339, parse_rfc3339

__all__: list[str] = [
    # Codec
    "parse",
    "format_timestamp",
    # RFC 3339
    "parse_rfc3339",
    "format_rfc3339",
    "is_valid_rfc3339",
]
