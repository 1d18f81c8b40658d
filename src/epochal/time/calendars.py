"""Year and month/day models of the hybrid calendar.

The hybrid calendar follows the astronomical convention: a year zero exists between
years -1 and +1, and ten days are missing in October 1582. Three year models cover it:

- proleptic Julian calendar, up to 0000-12-31
- Julian calendar, from 0001-01-01 to 1582-10-04
- Gregorian calendar, from 1582-10-15

Each capability is a plain function dispatching on a :class:`.CalendarLabel` or a
:class:`.MonthTableLabel`, so callers pick the model once and pass the label along.
"""

from __future__ import annotations

# Local Imports
from ..common.labels import CalendarLabel, MonthTableLabel
from .constants import GREGORIAN_CALENDAR_START, GREGORIAN_REFORM_YEAR, JULIAN_CALENDAR_START

LEAP_PREVIOUS_MONTH_END_DAY: tuple[int, ...] = (
    0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335,
)  # fmt: skip
"""``tuple``: day in a leap year of the last day of the previous month, indexed by month."""

COMMON_PREVIOUS_MONTH_END_DAY: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)  # fmt: skip
"""``tuple``: day in a common year of the last day of the previous month, indexed by month."""


def truncatedDivide(numerator: int, denominator: int) -> int:
    """Integer quotient rounded toward zero rather than toward negative infinity.

    The proleptic Julian new year's eve formula depends on this rounding for negative years.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def calendarForJ2000Day(j2000_day: int) -> CalendarLabel:
    """Select the calendar in force on a given day.

    Args:
        j2000_day (``int``): day number with respect to the J2000 epoch

    Returns:
        :class:`.CalendarLabel`: calendar whose year model applies to `j2000_day`
    """
    if j2000_day < JULIAN_CALENDAR_START:
        return CalendarLabel.PROLEPTIC_JULIAN
    if j2000_day < GREGORIAN_CALENDAR_START:
        return CalendarLabel.JULIAN
    return CalendarLabel.GREGORIAN


def calendarForComponents(year: int, month: int, day: int) -> CalendarLabel:
    """Select the calendar in force for a year/month/day triple.

    This is the inverse of :func:`.calendarForJ2000Day` over every valid date.
    """
    if year < 1:
        return CalendarLabel.PROLEPTIC_JULIAN
    if year < GREGORIAN_REFORM_YEAR:
        return CalendarLabel.JULIAN
    if year == GREGORIAN_REFORM_YEAR and (month < 10 or (month == 10 and day < 5)):
        return CalendarLabel.JULIAN
    return CalendarLabel.GREGORIAN


def getYear(calendar: CalendarLabel, j2000_day: int) -> int:
    """Get the year number containing a day.

    Args:
        calendar (:class:`.CalendarLabel`): calendar the day belongs to
        j2000_day (``int``): day number with respect to the J2000 epoch

    Returns:
        ``int``: year number, possibly zero or negative
    """
    match calendar:
        case CalendarLabel.PROLEPTIC_JULIAN:
            return -((-4 * j2000_day - 2920488) // 1461)
        case CalendarLabel.JULIAN:
            return (4 * j2000_day + 2921948) // 1461
        case CalendarLabel.GREGORIAN:
            year = (400 * j2000_day + 292194288) // 146097
            # The estimate is one year too high for some of the last days of a year
            if j2000_day <= getLastJ2000DayOfYear(calendar, year - 1):
                year -= 1
            return year
    raise ValueError(f"Unknown calendar: {calendar!r}")


def getLastJ2000DayOfYear(calendar: CalendarLabel, year: int) -> int:
    """Get the day number of new year's eve with respect to the J2000 epoch.

    Args:
        calendar (:class:`.CalendarLabel`): calendar the year belongs to
        year (``int``): year number

    Returns:
        ``int``: J2000 day of December 31st of `year`
    """
    match calendar:
        case CalendarLabel.PROLEPTIC_JULIAN:
            return 365 * year + truncatedDivide(year + 1, 4) - 730123
        case CalendarLabel.JULIAN:
            return 365 * year + truncatedDivide(year, 4) - 730122
        case CalendarLabel.GREGORIAN:
            return (
                365 * year
                + truncatedDivide(year, 4)
                - truncatedDivide(year, 100)
                + truncatedDivide(year, 400)
                - 730120
            )
    raise ValueError(f"Unknown calendar: {calendar!r}")


def isLeap(calendar: CalendarLabel, year: int) -> bool:
    """Check whether a year is a leap year under a calendar's rule."""
    match calendar:
        case CalendarLabel.PROLEPTIC_JULIAN | CalendarLabel.JULIAN:
            return year % 4 == 0
        case CalendarLabel.GREGORIAN:
            return year % 4 == 0 and (year % 400 == 0 or year % 100 != 0)
    raise ValueError(f"Unknown calendar: {calendar!r}")


def monthTableFor(calendar: CalendarLabel, year: int) -> MonthTableLabel:
    """Select the month succession table of a year."""
    return MonthTableLabel.LEAP if isLeap(calendar, year) else MonthTableLabel.COMMON


def _previousMonthEndDay(table: MonthTableLabel) -> tuple[int, ...]:
    match table:
        case MonthTableLabel.LEAP:
            return LEAP_PREVIOUS_MONTH_END_DAY
        case MonthTableLabel.COMMON:
            return COMMON_PREVIOUS_MONTH_END_DAY
    raise ValueError(f"Unknown month table: {table!r}")


def getMonth(table: MonthTableLabel, day_in_year: int) -> int:
    """Get the month number for a day number within the year.

    Args:
        table (:class:`.MonthTableLabel`): month succession of the year
        day_in_year (``int``): day number within the year, starting at 1

    Returns:
        ``int``: month number from 1 to 12
    """
    if day_in_year < 32:
        return 1
    match table:
        case MonthTableLabel.LEAP:
            return (10 * day_in_year + 313) // 306
        case MonthTableLabel.COMMON:
            return (10 * day_in_year + 323) // 306
    raise ValueError(f"Unknown month table: {table!r}")


def getDay(table: MonthTableLabel, day_in_year: int, month: int) -> int:
    """Get the day of month for a day number within the year and its month."""
    return day_in_year - _previousMonthEndDay(table)[month]


def getDayInYear(table: MonthTableLabel, month: int, day: int) -> int:
    """Get the day number within the year for a month and day of month."""
    return day + _previousMonthEndDay(table)[month]
