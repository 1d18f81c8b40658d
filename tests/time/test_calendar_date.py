from __future__ import annotations

# Standard Library Imports
import logging
import random

# Third Party Imports
import pytest
from numpy import nan

# epochal Imports
from epochal.common.exceptions import InvalidComponentsError
from epochal.common.logger import PACKAGE_LOGGER_NAME
from epochal.time.calendar_date import CalendarDate, firstWeekMonday
from epochal.time.calendars import calendarForComponents, isLeap

# Local Imports
from . import KNOWN_J2000_DAYS

NAMED_EPOCHS: list[tuple[str, tuple[int, int, int]]] = [
    ("JULIAN_EPOCH", (-4712, 1, 1)),
    ("MODIFIED_JULIAN_EPOCH", (1858, 11, 17)),
    ("FIFTIES_EPOCH", (1950, 1, 1)),
    ("CCSDS_EPOCH", (1958, 1, 1)),
    ("GALILEO_EPOCH", (1999, 8, 22)),
    ("GPS_EPOCH", (1980, 1, 6)),
    ("QZSS_EPOCH", (1980, 1, 6)),
    ("IRNSS_EPOCH", (1999, 8, 22)),
    ("BEIDOU_EPOCH", (2006, 1, 1)),
    ("GLONASS_EPOCH", (1996, 1, 1)),
    ("J2000_EPOCH", (2000, 1, 1)),
    ("JAVA_EPOCH", (1970, 1, 1)),
    ("MAX_EPOCH", (5881610, 7, 11)),
    ("MIN_EPOCH", (-5877490, 3, 3)),
]

INVALID_DATES: list[tuple[int | float, int | float, int | float]] = [
    (2001, 2, 29),
    (1900, 2, 29),
    (-1, 2, 29),
    (1582, 10, 5),
    (1582, 10, 10),
    (1582, 10, 14),
    (2000, 4, 31),
    (2000, 13, 1),
    (2000, 0, 1),
    (2000, 1, 0),
    (2000, 1, 32),
    (2000, 12, -3),
    (2000.5, 1, 1),
    (2000, 1.5, 1),
    (2000, 1, 1.25),
    (2000, 1, nan),
]

CALENDAR_WEEKS: list[tuple[tuple[int, int, int], int]] = [
    ((1995, 1, 1), 52),
    ((1996, 12, 31), 1),
    ((2000, 1, 1), 52),
    ((2000, 1, 3), 1),
    ((2004, 12, 31), 53),
    ((2005, 1, 2), 53),
    ((2008, 12, 29), 1),
    ((2009, 12, 31), 53),
    ((2010, 1, 3), 53),
]

DAYS_OF_WEEK: list[tuple[tuple[int, int, int], int]] = [
    ((2000, 1, 1), 6),
    ((2000, 1, 2), 7),
    ((2000, 1, 3), 1),
    ((1970, 1, 1), 4),
    ((1582, 10, 4), 4),
    ((1582, 10, 15), 5),
    ((-4712, 1, 1), 1),
]

DAYS_OF_YEAR: list[tuple[tuple[int, int, int], int]] = [
    ((2000, 1, 1), 1),
    ((2000, 12, 31), 366),
    ((2001, 3, 1), 60),
    ((1582, 10, 15), 278),
    ((1582, 12, 31), 355),
    ((0, 12, 31), 366),
    ((-1, 12, 31), 365),
]


def weekYear(date: CalendarDate) -> int:
    """Year the ISO week of `date` belongs to."""
    week = date.getCalendarWeek()
    if week >= 52 and date.month == 1:
        return date.year - 1
    if week == 1 and date.month == 12:
        return date.year + 1
    return date.year


@pytest.mark.parametrize(("components", "j2000_day"), KNOWN_J2000_DAYS)
def testKnownJ2000Days(components: tuple[int, int, int], j2000_day: int):
    """Test conversions in both directions for dates in all three calendars."""
    date = CalendarDate(*components)
    assert date.getJ2000Day() == j2000_day
    assert CalendarDate.fromJ2000Day(j2000_day) == date
    assert (date.year, date.month, date.day) == components


@pytest.mark.parametrize(("name", "components"), NAMED_EPOCHS)
def testNamedEpochs(name: str, components: tuple[int, int, int]):
    """Test the named reference epochs."""
    epoch = getattr(CalendarDate, name)
    assert isinstance(epoch, CalendarDate)
    assert epoch == CalendarDate(*components)


def testEpochBounds():
    """Test the minimum and maximum epochs sit on the signed 32-bit day count bounds."""
    assert CalendarDate.MAX_EPOCH.getJ2000Day() == 2**31 - 1
    assert CalendarDate.MIN_EPOCH.getJ2000Day() == -(2**31)
    assert CalendarDate.MIN_EPOCH < CalendarDate.JULIAN_EPOCH < CalendarDate.MAX_EPOCH


def testModifiedJulianDay():
    """Test the modified Julian day is offset from the J2000 day number."""
    assert CalendarDate.J2000_EPOCH.getMJD() == 51544
    assert CalendarDate.MODIFIED_JULIAN_EPOCH.getMJD() == 0
    assert CalendarDate(1970, 1, 1).getMJD() == 40587


def testOffsetRoundTrip():
    """Test that every sampled day number survives the round trip through components."""
    days = [
        *range(-800000, 800000, 37),
        *range(-730130, -730110),
        *range(-152395, -152375),
        *range(-(2**31), -(2**31) + 1000),
        *range(2**31 - 1000, 2**31),
    ]
    for j2000_day in days:
        assert CalendarDate.fromJ2000Day(j2000_day).getJ2000Day() == j2000_day


def testConsecutiveDays():
    """Test consecutive day numbers across the Julian/Gregorian and year zero transitions."""
    assert CalendarDate.fromJ2000Day(-152385) == CalendarDate(1582, 10, 4)
    assert CalendarDate.fromJ2000Day(-152384) == CalendarDate(1582, 10, 15)
    assert CalendarDate.fromJ2000Day(-730122) == CalendarDate(0, 12, 31)
    assert CalendarDate.fromJ2000Day(-730121) == CalendarDate(1, 1, 1)
    assert CalendarDate.fromJ2000Day(-730488) == CalendarDate(-1, 12, 31)
    assert CalendarDate.fromJ2000Day(-730487) == CalendarDate(0, 1, 1)


@pytest.mark.parametrize("components", INVALID_DATES)
def testInvalidDates(components: tuple[int, int, int], caplog: pytest.LogCaptureFixture):
    """Test non-existent dates are rejected, and the rejection is logged."""
    with pytest.raises(InvalidComponentsError):
        CalendarDate(*components)

    assert any(
        name == PACKAGE_LOGGER_NAME and level == logging.ERROR
        for name, level, _ in caplog.record_tuples
    )


def testLeapDayValidity():
    """Test February 29th exists exactly in the leap years of the calendar in force."""
    for year in range(-500, 2500):
        leap = isLeap(calendarForComponents(year, 2, 29), year)
        if leap:
            assert CalendarDate(year, 2, 29).isLeapYear()
        else:
            with pytest.raises(InvalidComponentsError):
                CalendarDate(year, 2, 29)
            assert not CalendarDate(year, 2, 28).isLeapYear()


@pytest.mark.parametrize(("components", "week"), CALENDAR_WEEKS)
def testCalendarWeek(components: tuple[int, int, int], week: int):
    """Test ISO-8601 week numbers, including weeks spilling over the calendar year."""
    assert CalendarDate(*components).getCalendarWeek() == week


@pytest.mark.parametrize(("components", "day_of_week"), DAYS_OF_WEEK)
def testDayOfWeek(components: tuple[int, int, int], day_of_week: int):
    """Test days of week, Monday being 1 and Sunday 7."""
    assert CalendarDate(*components).getDayOfWeek() == day_of_week


@pytest.mark.parametrize(("components", "day_of_year"), DAYS_OF_YEAR)
def testDayOfYear(components: tuple[int, int, int], day_of_year: int):
    """Test day numbers within the year, including the short year 1582."""
    assert CalendarDate(*components).getDayOfYear() == day_of_year


@pytest.mark.parametrize(
    ("year", "day_number", "components"),
    [
        (1900, 60, (1900, 3, 1)),
        (2000, 60, (2000, 2, 29)),
        (1500, 60, (1500, 2, 29)),
        (1582, 278, (1582, 10, 15)),
        (1582, 355, (1582, 12, 31)),
        (0, 366, (0, 12, 31)),
    ],
)
def testFromDayOfYear(year: int, day_number: int, components: tuple[int, int, int]):
    """Test building dates from a day number in the year."""
    assert CalendarDate.fromDayOfYear(year, day_number) == CalendarDate(*components)


@pytest.mark.parametrize(("year", "day_number"), [(2001, 366), (2000, 367), (2000, 0), (1582, 356)])
def testInvalidDayOfYear(year: int, day_number: int):
    """Test day numbers outside of their year are rejected."""
    with pytest.raises(InvalidComponentsError):
        CalendarDate.fromDayOfYear(year, day_number)


@pytest.mark.parametrize(
    ("week_components", "components"),
    [
        ((1994, 52, 7), (1995, 1, 1)),
        ((1997, 1, 2), (1996, 12, 31)),
        ((2004, 53, 5), (2004, 12, 31)),
        ((2000, 1, 1), (2000, 1, 3)),
    ],
)
def testFromWeekComponents(week_components: tuple[int, int, int], components: tuple[int, int, int]):
    """Test building dates from ISO-8601 week components."""
    assert CalendarDate.fromWeekComponents(*week_components) == CalendarDate(*components)


@pytest.mark.parametrize(
    "week_components",
    [(2003, 53, 1), (2000, 0, 1), (2000, 1, 0), (2000, 1, 8)],
)
def testInvalidWeekComponents(week_components: tuple[int, int, int]):
    """Test week 53 of a 52-week year and out of range days of week are rejected."""
    with pytest.raises(InvalidComponentsError):
        CalendarDate.fromWeekComponents(*week_components)


def testWeekRoundTrip():
    """Test every date is rebuilt from its own week components."""
    for j2000_day in range(-2200, 2200):
        date = CalendarDate.fromJ2000Day(j2000_day)
        rebuilt = CalendarDate.fromWeekComponents(
            weekYear(date),
            date.getCalendarWeek(),
            date.getDayOfWeek(),
        )
        assert rebuilt == date


def testFirstWeekMonday():
    """Test the Monday starting week 1 may fall in the previous year."""
    assert CalendarDate.fromJ2000Day(firstWeekMonday(1995)) == CalendarDate(1995, 1, 2)
    assert CalendarDate.fromJ2000Day(firstWeekMonday(1997)) == CalendarDate(1996, 12, 30)
    for year in range(1990, 2030):
        assert CalendarDate.fromJ2000Day(firstWeekMonday(year)).getDayOfWeek() == 1


def testFromEpochOffset():
    """Test building dates relative to a reference epoch."""
    assert CalendarDate.fromEpochOffset(CalendarDate.MODIFIED_JULIAN_EPOCH, 51544) == (
        CalendarDate.J2000_EPOCH
    )
    # GPS week 1042 started a week before the J2000 epoch
    assert CalendarDate.fromEpochOffset(CalendarDate.GPS_EPOCH, 7 * 1042) == CalendarDate(
        1999,
        12,
        26,
    )
    assert CalendarDate.fromEpochOffset(CalendarDate.J2000_EPOCH, -1) == CalendarDate(1999, 12, 31)


def testOrdering():
    """Test dates form a strict total order consistent with equality."""
    days = random.sample(range(-1000000, 1000000), 200)
    dates = [CalendarDate.fromJ2000Day(day) for day in days]
    assert [date.getJ2000Day() for date in sorted(dates)] == sorted(days)

    for first, second, third in zip(dates, dates[1:], dates[2:]):
        assert not (first < second and second < first)
        assert (first < second) != (second <= first)
        if first < second and second < third:
            assert first < third

    assert CalendarDate(1582, 10, 4) < CalendarDate(1582, 10, 15)
    assert CalendarDate(0, 12, 31) < CalendarDate(1, 1, 1)
    assert CalendarDate(2000, 1, 1) <= CalendarDate(2000, 1, 1)
    assert CalendarDate(2000, 1, 2) >= CalendarDate(2000, 1, 1)
    assert CalendarDate(2000, 1, 2) > CalendarDate(2000, 1, 1)


def testEqualityAndHash():
    """Test dates can be used as dictionary keys."""
    assert CalendarDate(2000, 1, 1) == CalendarDate.J2000_EPOCH
    assert CalendarDate(2000, 1, 1) != CalendarDate(2000, 1, 2)
    assert CalendarDate(2000, 1, 1) != (2000, 1, 1)
    assert len({CalendarDate(1980, 1, 6), CalendarDate.GPS_EPOCH, CalendarDate.QZSS_EPOCH}) == 1


def testWholeNumberComponents():
    """Test integral floats are accepted and stored as integers, other numbers rejected."""
    date = CalendarDate(2000.0, 1.0, 1.0)
    assert date == CalendarDate.J2000_EPOCH
    assert isinstance(date.year, int)
    assert isinstance(date.getJ2000Day(), int)
    assert CalendarDate.fromJ2000Day(366.0) == CalendarDate(2001, 1, 1)

    with pytest.raises(InvalidComponentsError):
        CalendarDate.fromJ2000Day(0.5)
    with pytest.raises(InvalidComponentsError):
        CalendarDate.fromEpochOffset(CalendarDate.GPS_EPOCH, 7.5)
    with pytest.raises(InvalidComponentsError):
        CalendarDate.fromDayOfYear(2000, 60.5)


def testImmutable():
    """Test components can't be reassigned."""
    date = CalendarDate(2000, 1, 1)
    with pytest.raises(AttributeError):
        date.year = 2001
    with pytest.raises(AttributeError):
        date.extra = 1


@pytest.mark.parametrize(
    ("components", "iso"),
    [
        ((2000, 1, 1), "2000-01-01"),
        ((0, 1, 1), "0000-01-01"),
        ((33, 4, 3), "0033-04-03"),
        ((-44, 3, 15), "-0044-03-15"),
        ((10000, 1, 1), "+10000-01-01"),
    ],
)
def testIsoString(components: tuple[int, int, int], iso: str):
    """Test the ISO-8601 representation of dates."""
    assert str(CalendarDate(*components)) == iso
