"""Helper functions that convert between :class:`.CalendarDateTime` and other forms of time.

Python's :class:`datetime.datetime` uses the proleptic Gregorian calendar, so conversions go
through day ordinals rather than year/month/day: 1582-10-04 in the hybrid calendar is
1582-10-14 as a ``datetime``.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone

# Third Party Imports
from numpy import floor

# Local Imports
from ..common.exceptions import InvalidComponentsError
from ..common.logger import epochalLogError
from .calendar_date import CalendarDate
from .calendar_date_time import CalendarDateTime
from .clock_time import ClockTime
from .constants import JD_TO_MJD, JULIAN_DAY, SECONDS_PER_MINUTE

J2000_ORDINAL: int = date(2000, 1, 1).toordinal()
"""``int``: proleptic Gregorian ordinal of the J2000 epoch, as used by :mod:`datetime`."""


def datetimeToCalendarDateTime(date_time: datetime) -> CalendarDateTime:
    """Convert a ``datetime`` object to a :class:`.CalendarDateTime`.

    Naive ``datetime`` objects are taken as UTC.

    Args:
        date_time (``datetime``): ``datetime`` object to be converted.

    Returns:
        :class:`.CalendarDateTime`: same instant, tagged with the ``datetime``'s UTC offset.

    Raises:
        :class:`.InvalidComponentsError`: if the UTC offset is not a whole number of minutes
    """
    minutes_from_utc = 0
    if (utc_offset := date_time.utcoffset()) is not None:
        minutes_from_utc, remainder = divmod(utc_offset, timedelta(minutes=1))
        if remainder:
            epochalLogError(f"UTC offset {utc_offset} is not a whole number of minutes")
            raise InvalidComponentsError(
                f"UTC offset {utc_offset} is not a whole number of minutes",
            )

    return CalendarDateTime(
        CalendarDate.fromJ2000Day(date_time.toordinal() - J2000_ORDINAL),
        ClockTime(
            date_time.hour,
            date_time.minute,
            date_time.second + date_time.microsecond / 1e6,
            minutes_from_utc,
        ),
    )


def calendarDateTimeToDatetime(date_time: CalendarDateTime) -> datetime:
    """Convert a :class:`.CalendarDateTime` to a timezone-aware ``datetime`` object.

    Args:
        date_time (:class:`.CalendarDateTime`): object to be converted.

    Returns:
        ``datetime``: converted ``datetime`` object, truncated to whole microseconds.

    Raises:
        ValueError: if `date_time` is during a leap second or outside of ``datetime``'s range
    """
    ordinal = date_time.date.getJ2000Day() + J2000_ORDINAL
    if not date(MINYEAR, 1, 1).toordinal() <= ordinal <= date(MAXYEAR, 12, 31).toordinal():
        epochalLogError(f"{date_time} is outside of the range of `datetime`")
        raise ValueError(f"{date_time} is outside of the range of `datetime`")

    time = date_time.time
    if time.second >= SECONDS_PER_MINUTE:
        epochalLogError(f"{date_time} is during a leap second, which `datetime` can't hold")
        raise ValueError(f"{date_time} is during a leap second, which `datetime` can't hold")

    whole_seconds = int(floor(time.second))
    microseconds = min(int(round((time.second - whole_seconds) * 1e6)), 999999)
    calendar_date = date.fromordinal(ordinal)
    return datetime(
        calendar_date.year,
        calendar_date.month,
        calendar_date.day,
        time.hour,
        time.minute,
        whole_seconds,
        microseconds,
        tzinfo=timezone(timedelta(minutes=time.minutes_from_utc)),
    )


def calendarDateTimeToJulianDate(date_time: CalendarDateTime) -> float:
    """Convert a :class:`.CalendarDateTime` to a floating point UTC Julian date.

    References:
        Vallado, D. A., *Fundamentals of Astrodynamics and Applications*, 4th ed., Section 3.5.1
    """
    # UTC seconds may be negative or exceed a day when a UTC offset is applied
    return (
        JD_TO_MJD
        + date_time.date.getMJD()
        + date_time.time.getSecondsInUTCDay() / JULIAN_DAY
    )


def julianDateToCalendarDateTime(julian_date: float) -> CalendarDateTime:
    """Convert a floating point Julian date to a UTC :class:`.CalendarDateTime`.

    Args:
        julian_date (``float``): Julian date, days since -4712-01-01 12:00:00

    Returns:
        :class:`.CalendarDateTime`: corresponding date and UTC time
    """
    modified_julian_date = julian_date - JD_TO_MJD
    mjd = int(floor(modified_julian_date))
    return CalendarDateTime.fromOffset(
        CalendarDateTime(
            CalendarDate.fromEpochOffset(CalendarDate.MODIFIED_JULIAN_EPOCH, mjd),
            ClockTime.H00,
        ),
        (modified_julian_date - mjd) * JULIAN_DAY,
    )
