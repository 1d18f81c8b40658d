"""Defines the :class:`.CalendarDate` value type and its named reference epochs.

A :class:`.CalendarDate` is a year/month/day triple on the hybrid calendar (see
:mod:`.calendars`). Every date maps one-to-one onto a signed integer day count from the
J2000 epoch (2000-01-01), which gives dates their ordering and all the derived quantities:

.. code-block:: python

    date = CalendarDate(1995, 1, 1)
    date.getJ2000Day()      # -1826
    date.getCalendarWeek()  # 52, the date lies in the last ISO week of 1994
    date.getDayOfWeek()     # 7 (Sunday)

    CalendarDate.fromEpochOffset(CalendarDate.GPS_EPOCH, 7 * 1042)  # GPS week 1042

Instances are immutable, so the named epochs below are safe to share.
"""

from __future__ import annotations

# Standard Library Imports
from typing import Any

# Local Imports
from ..common import isWholeNumber
from ..common.exceptions import InvalidComponentsError
from ..common.logger import epochalLogError
from .calendars import (
    calendarForComponents,
    calendarForJ2000Day,
    getDay,
    getDayInYear,
    getLastJ2000DayOfYear,
    getMonth,
    getYear,
    isLeap,
    monthTableFor,
)
from .constants import MAX_J2000_DAY, MIN_J2000_DAY, MJD_TO_J2000


def componentsToJ2000Day(year: int, month: int, day: int) -> int:
    """Convert a year/month/day triple to its day number with respect to the J2000 epoch.

    No validation is done here: out-of-calendar triples (e.g. 2001-02-29) are mapped
    onto a neighbouring day.
    """
    calendar = calendarForComponents(year, month, day)
    table = monthTableFor(calendar, year)
    return getLastJ2000DayOfYear(calendar, year - 1) + getDayInYear(table, month, day)


def j2000DayToComponents(j2000_day: int) -> tuple[int, int, int]:
    """Convert a day number with respect to the J2000 epoch to its year/month/day triple."""
    calendar = calendarForJ2000Day(j2000_day)
    year = getYear(calendar, j2000_day)
    day_in_year = j2000_day - getLastJ2000DayOfYear(calendar, year - 1)

    table = monthTableFor(calendar, year)
    month = getMonth(table, day_in_year)
    return year, month, getDay(table, day_in_year, month)


def firstWeekMonday(year: int) -> int:
    """Get the J2000 day of the Monday starting ISO week 1 of a year.

    Week 1 is the week holding the year's first Thursday, so its Monday may fall in the
    last days of the previous year.
    """
    year_first = componentsToJ2000Day(year, 1, 1)
    # 2000-01-01 was a Saturday
    offset_to_monday = 4 - (year_first + 2) % 7
    if offset_to_monday > 3:
        offset_to_monday -= 7
    return year_first + offset_to_monday


class CalendarDate:
    """Date broken up as year, month, and day components."""

    __slots__ = ("_year", "_month", "_day")

    JULIAN_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for Julian dates, -4712-01-01."""

    MODIFIED_JULIAN_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for modified Julian dates, 1858-11-17."""

    FIFTIES_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for 1950 dates, 1950-01-01."""

    CCSDS_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for CCSDS time code format, 1958-01-01."""

    GALILEO_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for Galileo system time, 1999-08-22."""

    GPS_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for GPS weeks, 1980-01-06."""

    QZSS_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for QZSS weeks, 1980-01-06."""

    IRNSS_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for IRNSS weeks, 1999-08-22."""

    BEIDOU_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for BeiDou weeks, 2006-01-01."""

    GLONASS_EPOCH: CalendarDate
    """:class:`.CalendarDate`: reference epoch for GLONASS four-year intervals, 1996-01-01."""

    J2000_EPOCH: CalendarDate
    """:class:`.CalendarDate`: J2000.0 reference epoch, 2000-01-01."""

    JAVA_EPOCH: CalendarDate
    """:class:`.CalendarDate`: Java & POSIX reference epoch, 1970-01-01."""

    MAX_EPOCH: CalendarDate
    """:class:`.CalendarDate`: 5881610-07-11, :math:`2^{31}-1` days after the J2000 epoch."""

    MIN_EPOCH: CalendarDate
    """:class:`.CalendarDate`: -5877490-03-03, :math:`2^{31}` days before the J2000 epoch."""

    def __init__(self, year: int, month: int, day: int):
        """Build a date from its components.

        Args:
            year (``int``): year number, zero or negative for BC years
            month (``int``): month number from 1 to 12
            day (``int``): day number from 1 to 31

        Raises:
            :class:`.InvalidComponentsError`: if the triple does not name a real day of the
                hybrid calendar, e.g. February 29th of a common year or 1582-10-10. Non-integral
                components are rejected as well.
        """
        for name, value in (("Year", year), ("Month", month), ("Day of month", day)):
            if not isWholeNumber(value):
                epochalLogError(f"{name} is not a whole number: {value}")
                raise InvalidComponentsError(
                    f"CalendarDate: {name.lower()} {value} is not a whole number",
                )
        year, month, day = int(year), int(month), int(day)

        if month < 1 or month > 12:
            epochalLogError(f"Non-existent month: {month}")
            raise InvalidComponentsError(f"CalendarDate: non-existent month {month}")
        if day < 1 or day > 31:
            epochalLogError(f"Non-existent day of month: {day}")
            raise InvalidComponentsError(f"CalendarDate: non-existent day of month {day}")

        if j2000DayToComponents(componentsToJ2000Day(year, month, day)) != (year, month, day):
            epochalLogError(f"Non-existent date: {year}-{month}-{day}")
            raise InvalidComponentsError(f"CalendarDate: non-existent date {year}-{month}-{day}")

        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def fromJ2000Day(cls, j2000_day: int) -> CalendarDate:
        """Build a date from its offset with respect to the J2000 epoch.

        Args:
            j2000_day (``int``): day number with respect to :attr:`.J2000_EPOCH`

        Returns:
            :class:`.CalendarDate`: date `j2000_day` days after 2000-01-01

        Raises:
            :class:`.InvalidComponentsError`: if `j2000_day` is not a whole number
        """
        if not isWholeNumber(j2000_day):
            epochalLogError(f"Day number is not a whole number: {j2000_day}")
            raise InvalidComponentsError(f"CalendarDate: day number {j2000_day} is not whole")
        return cls(*j2000DayToComponents(int(j2000_day)))

    @classmethod
    def fromEpochOffset(cls, epoch: CalendarDate, offset: int) -> CalendarDate:
        """Build a date from its offset with respect to a reference epoch.

        This is mainly useful to build a date from a modified Julian day (with
        :attr:`.MODIFIED_JULIAN_EPOCH`) or a GPS week number (with :attr:`.GPS_EPOCH`).
        """
        return cls.fromJ2000Day(epoch.getJ2000Day() + offset)

    @classmethod
    def fromDayOfYear(cls, year: int, day_number: int) -> CalendarDate:
        """Build a date from a year and a day number within that year.

        Args:
            year (``int``): year number, zero or negative for BC years
            day_number (``int``): day number in the year, from 1 to 365 or 366

        Raises:
            :class:`.InvalidComponentsError`: if `day_number` falls outside `year`
        """
        date = cls.fromJ2000Day(componentsToJ2000Day(year - 1, 12, 31) + day_number)
        if date.getDayOfYear() != day_number:
            epochalLogError(f"Non-existent day number {day_number} in year {year}")
            raise InvalidComponentsError(
                f"CalendarDate: non-existent day number {day_number} in year {year}",
            )
        return date

    @classmethod
    def fromWeekComponents(cls, week_year: int, week: int, day_of_week: int) -> CalendarDate:
        """Build a date from ISO-8601 week components.

        Week 1 of a year is the one including its first Thursday, so week dates may spill
        over the calendar year: 1995-01-01 is week date 1994-W52-7, and 1996-12-31 is week
        date 1997-W01-2.

        Args:
            week_year (``int``): year associated to the week numbering
            week (``int``): week number in the year, from 1 to 52 or 53
            day_of_week (``int``): day of week from 1 (Monday) to 7 (Sunday)

        Raises:
            :class:`.InvalidComponentsError`: if the components are out of range, e.g. week
                53 of a 52-week year
        """
        date = cls.fromJ2000Day(firstWeekMonday(week_year) + 7 * week + day_of_week - 8)
        if week != date.getCalendarWeek() or day_of_week != date.getDayOfWeek():
            epochalLogError(f"Non-existent week date: {week_year}-W{week}-{day_of_week}")
            raise InvalidComponentsError(
                f"CalendarDate: non-existent week date {week_year}-W{week}-{day_of_week}",
            )
        return date

    @property
    def year(self) -> int:
        """``int``: year number, zero or negative for BC years."""
        return self._year

    @property
    def month(self) -> int:
        """``int``: month number from 1 to 12."""
        return self._month

    @property
    def day(self) -> int:
        """``int``: day number from 1 to 31."""
        return self._day

    def getJ2000Day(self) -> int:
        """Get the day number with respect to the J2000 epoch."""
        return componentsToJ2000Day(self._year, self._month, self._day)

    def getMJD(self) -> int:
        """Get the modified Julian day."""
        return MJD_TO_J2000 + self.getJ2000Day()

    def getCalendarWeek(self) -> int:
        """Get the ISO-8601 calendar week number.

        Returns:
            ``int``: week number between 1 and 52 or 53, see :meth:`.fromWeekComponents`
        """
        first_monday = firstWeekMonday(self._year)
        days_since_first_monday = self.getJ2000Day() - first_monday
        if days_since_first_monday < 0:
            # Still in the last week of the previous year
            days_since_first_monday += first_monday - firstWeekMonday(self._year - 1)
        elif days_since_first_monday > 363:
            # Up to three days at the end of the year may belong to week 1 of the next year
            week_year_length = firstWeekMonday(self._year + 1) - first_monday
            if days_since_first_monday >= week_year_length:
                days_since_first_monday -= week_year_length
        return 1 + days_since_first_monday // 7

    def getDayOfWeek(self) -> int:
        """Get the day of week, from 1 (Monday) to 7 (Sunday)."""
        day_of_week = (self.getJ2000Day() + 6) % 7
        return day_of_week if day_of_week > 0 else 7

    def getDayOfYear(self) -> int:
        """Get the day number in year, from 1 (January 1st) to 365 or 366."""
        return self.getJ2000Day() - componentsToJ2000Day(self._year - 1, 12, 31)

    def isLeapYear(self) -> bool:
        """Check whether the date's year is a leap year in the calendar in force on that date."""
        return isLeap(calendarForComponents(self._year, self._month, self._day), self._year)

    def __eq__(self, other: Any) -> bool:
        """Dates are equal when their year, month, and day match."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._month, self._day) == (other._year, other._month, other._day)

    def __lt__(self, other: CalendarDate) -> bool:
        """Order dates chronologically."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.getJ2000Day() < other.getJ2000Day()

    def __le__(self, other: CalendarDate) -> bool:
        """."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.getJ2000Day() <= other.getJ2000Day()

    def __gt__(self, other: CalendarDate) -> bool:
        """."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.getJ2000Day() > other.getJ2000Day()

    def __ge__(self, other: CalendarDate) -> bool:
        """."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.getJ2000Day() >= other.getJ2000Day()

    def __hash__(self) -> int:
        """Hash the year/month/day triple, consistent with :meth:`.__eq__`."""
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.CalendarDate`."""
        return f"CalendarDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, sign-extended outside years 0000-9999."""
        if 0 <= self._year <= 9999:
            year = f"{self._year:04d}"
        else:
            year = f"{self._year:+05d}"
        return f"{year}-{self._month:02d}-{self._day:02d}"


CalendarDate.JULIAN_EPOCH = CalendarDate(-4712, 1, 1)
CalendarDate.MODIFIED_JULIAN_EPOCH = CalendarDate(1858, 11, 17)
CalendarDate.FIFTIES_EPOCH = CalendarDate(1950, 1, 1)
CalendarDate.CCSDS_EPOCH = CalendarDate(1958, 1, 1)
CalendarDate.GALILEO_EPOCH = CalendarDate(1999, 8, 22)
CalendarDate.GPS_EPOCH = CalendarDate(1980, 1, 6)
CalendarDate.QZSS_EPOCH = CalendarDate(1980, 1, 6)
CalendarDate.IRNSS_EPOCH = CalendarDate(1999, 8, 22)
CalendarDate.BEIDOU_EPOCH = CalendarDate(2006, 1, 1)
CalendarDate.GLONASS_EPOCH = CalendarDate(1996, 1, 1)
CalendarDate.J2000_EPOCH = CalendarDate(2000, 1, 1)
CalendarDate.JAVA_EPOCH = CalendarDate(1970, 1, 1)
CalendarDate.MAX_EPOCH = CalendarDate.fromJ2000Day(MAX_J2000_DAY)
CalendarDate.MIN_EPOCH = CalendarDate.fromJ2000Day(MIN_J2000_DAY)
