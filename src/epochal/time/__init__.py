"""Contains the calendar date and clock time value types and their conversions.

The day count of every date is measured from the J2000 epoch (2000-01-01) on the hybrid
calendar: proleptic Julian up to 0000-12-31, Julian up to 1582-10-04, and Gregorian from
1582-10-15 onward.
"""

from __future__ import annotations

# Local Imports
from .calendar_date import CalendarDate
from .calendar_date_time import CalendarDateTime
from .clock_time import ClockTime

__all__ = ["CalendarDate", "CalendarDateTime", "ClockTime"]
