"""Core value types.

This module provides the fundamental types:
    - CalendarTime: Calendar date and wall-clock time with nanosecond fraction
    - DateTime: CalendarTime paired with a UTC offset
"""

from __future__ import annotations

from rfcstamp.core.calendar_time import CalendarTime
from rfcstamp.core.datetime import DateTime

__all__: list[str] = [
    "CalendarTime",
    "DateTime",
]
