"""Internal utilities for rfcstamp.

This module contains private implementation details:
    - Constants and limits
    - Calendar arithmetic
    - Validation helpers and the leap-second validator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from rfcstamp._internal.validation import (
    resolve_precision,
    validate_day,
    validate_leap_second,
    validate_range,
)

__all__: list[str] = [
    "resolve_precision",
    "validate_day",
    "validate_leap_second",
    "validate_range",
]
