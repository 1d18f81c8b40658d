"""Main Module Documentation.

Immutable calendar date, clock time, and date/time value types with exact conversions to and
from a J2000 day count, ISO-8601 week numbering, and leap second aware clock arithmetic.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Local Imports
from .common.exceptions import InvalidComponentsError, OutOfRangeSecondsError
from .time import CalendarDate, CalendarDateTime, ClockTime

__all__ = [
    "CalendarDate",
    "CalendarDateTime",
    "ClockTime",
    "InvalidComponentsError",
    "OutOfRangeSecondsError",
]
