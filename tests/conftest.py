"""Pytest configuration and fixtures for rfcstamp tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so rfcstamp can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def nanos_time():
    """CalendarTime with every fraction digit set: .123456789."""
    from rfcstamp import CalendarTime

    return CalendarTime(
        2024, 1, 15, 14, 30, 45, millisecond=123, microsecond=456, nanosecond=789
    )
