"""Hold common label types for easier importing."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum


class CalendarLabel(str, Enum):
    """Defines valid labels for the calendars making up the hybrid calendar."""

    PROLEPTIC_JULIAN: str = "proleptic_julian"
    """``str``: Julian leap rule extended back through year zero, used up to 0000-12-31."""

    JULIAN: str = "julian"
    """``str``: Julian calendar, used from 0001-01-01 to 1582-10-04."""

    GREGORIAN: str = "gregorian"
    """``str``: Gregorian calendar, used from 1582-10-15."""


class MonthTableLabel(str, Enum):
    """Defines valid labels for month succession tables."""

    LEAP: str = "leap"
    """``str``: 366-day year month table."""

    COMMON: str = "common"
    """``str``: 365-day year month table."""
