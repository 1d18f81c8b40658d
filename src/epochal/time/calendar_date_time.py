"""Defines the :class:`.CalendarDateTime` value type, a date paired with a time of day."""

from __future__ import annotations

# Standard Library Imports
from typing import Any

# Third Party Imports
from numpy import floor, isfinite

# Local Imports
from ..common.exceptions import OutOfRangeSecondsError
from ..common.logger import epochalLogError
from .calendar_date import CalendarDate
from .clock_time import ClockTime
from .constants import JULIAN_DAY


class CalendarDateTime:
    """Holder for date and time components.

    Offsets between instances are expressed in seconds, and the time's offset from UTC is
    taken into account so instances from different time zones can be subtracted.
    """

    __slots__ = ("_date", "_time")

    JULIAN_EPOCH: CalendarDateTime
    """:class:`.CalendarDateTime`: Julian epoch, -4712-01-01 at 12:00:00."""

    def __init__(self, date: CalendarDate, time: ClockTime):
        """Build a new instance from its components.

        Args:
            date (:class:`.CalendarDate`): date component
            time (:class:`.ClockTime`): time component
        """
        self._date = date
        self._time = time

    @classmethod
    def fromComponents(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> CalendarDateTime:
        """Build an instance from raw level components, at midnight UTC unless a time is given.

        Raises:
            :class:`.InvalidComponentsError`: if any component is out of range
        """
        return cls(CalendarDate(year, month, day), ClockTime(hour, minute, second))

    @classmethod
    def fromOffset(cls, reference: CalendarDateTime, offset: float) -> CalendarDateTime:
        """Build an instance from a seconds offset with respect to another one.

        Whole days in the offset are carried into the date, and the reference's offset from
        UTC is kept on the new time.

        Args:
            reference (:class:`.CalendarDateTime`): reference date/time
            offset (``float``): offset from the reference in seconds

        Returns:
            :class:`.CalendarDateTime`: instance `offset` seconds after `reference`

        Raises:
            :class:`.OutOfRangeSecondsError`: if `offset` is NaN or infinite
        """
        seconds = reference.time.getSecondsInLocalDay() + offset
        if not isfinite(seconds):
            epochalLogError(f"Offset from {reference} is not finite: {offset}")
            raise OutOfRangeSecondsError(f"CalendarDateTime: offset {offset} is not finite")

        day_shift = int(floor(seconds / JULIAN_DAY))
        seconds -= JULIAN_DAY * day_shift
        # An offset just below a day boundary may round up to exactly one day, read as 23:59:60
        local_time = ClockTime.fromSecondsInDay(seconds)

        return cls(
            CalendarDate.fromJ2000Day(reference.date.getJ2000Day() + day_shift),
            ClockTime(
                local_time.hour,
                local_time.minute,
                local_time.second,
                reference.time.minutes_from_utc,
            ),
        )

    @property
    def date(self) -> CalendarDate:
        """:class:`.CalendarDate`: date component."""
        return self._date

    @property
    def time(self) -> ClockTime:
        """:class:`.ClockTime`: time component."""
        return self._time

    def offsetFrom(self, other: CalendarDateTime) -> float:
        """Compute the seconds offset between two instances.

        This is the inverse of :meth:`.fromOffset`.

        Args:
            other (:class:`.CalendarDateTime`): instance to subtract from this one

        Returns:
            ``float``: offset in seconds, positive if this instance is after `other`
        """
        date_offset = self._date.getJ2000Day() - other.date.getJ2000Day()
        time_offset = self._time.getSecondsInUTCDay() - other.time.getSecondsInUTCDay()
        return JULIAN_DAY * date_offset + time_offset

    def __eq__(self, other: Any) -> bool:
        """."""
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self._date == other.date and self._time == other.time

    def __lt__(self, other: CalendarDateTime) -> bool:
        """Order by date first, then by time."""
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        if self._date == other.date:
            return self._time < other.time
        return self._date < other.date

    def __le__(self, other: CalendarDateTime) -> bool:
        """Check this instance is not after `other`."""
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return not other < self

    def __gt__(self, other: CalendarDateTime) -> bool:
        """."""
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return other < self

    def __ge__(self, other: CalendarDateTime) -> bool:
        """."""
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return not self < other

    def __hash__(self) -> int:
        """Combine the date and time hashes."""
        return hash((self._date, self._time))

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.CalendarDateTime`."""
        return f"CalendarDateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, e.g. ``2000-01-01T12:00:00.000Z``."""
        return f"{self._date}T{self._time}"


CalendarDateTime.JULIAN_EPOCH = CalendarDateTime(CalendarDate.JULIAN_EPOCH, ClockTime.H12)
