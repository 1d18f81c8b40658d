"""Defines the :class:`.ClockTime` value type, a time within a day with leap second support.

Seconds between 60.0 (inclusive) and 61.0 (exclusive) are valid, since they occur while a
leap second is inserted in the UTC time scale. The general constructor,
:meth:`.ClockTime.fromSeconds`, splits the seconds past midnight into a whole part, a
fractional part, and the leap second magnitude:

.. code-block:: python

    ClockTime.fromSeconds(86399, 0.5, 1.0, 61)  # 23:59:60.5
    ClockTime.fromSecondsInDay(3661.25)         # 01:01:01.25
"""

from __future__ import annotations

# Standard Library Imports
from typing import Any

# Third Party Imports
from numpy import floor, inf, isinf, isnan, nextafter

# Local Imports
from ..common import isWholeNumber
from ..common.exceptions import InvalidComponentsError, OutOfRangeSecondsError
from ..common.logger import epochalLogDebug, epochalLogError
from .constants import (
    JULIAN_DAY,
    MAX_SECOND_OF_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIME_EQUALITY_TOLERANCE,
)


class ClockTime:
    """Time within the day broken up as hour, minute, and second components."""

    __slots__ = ("_hour", "_minute", "_second", "_minutes_from_utc")

    H00: ClockTime
    """:class:`.ClockTime`: commonly used time 00:00:00."""

    H12: ClockTime
    """:class:`.ClockTime`: commonly used time 12:00:00."""

    def __init__(self, hour: int, minute: int, second: float, minutes_from_utc: int = 0):
        """Build a time from its clock elements.

        Args:
            hour (``int``): hour number from 0 to 23
            minute (``int``): minute number from 0 to 59
            second (``float``): second number from 0.0 to 61.0 (excluded)
            minutes_from_utc (``int``, optional): offset between the local time and UTC, as
                an integral number of minutes per ISO-8601. Defaults to 0.

        Raises:
            :class:`.InvalidComponentsError`: if an element is out of range or not a
                whole number
        """
        for name, value in (("Hour", hour), ("Minute", minute), ("UTC offset", minutes_from_utc)):
            if not isWholeNumber(value):
                epochalLogError(f"{name} is not a whole number: {value}")
                raise InvalidComponentsError(
                    f"ClockTime: {name.lower()} {value} is not a whole number",
                )

        if hour < 0 or hour > 23:
            epochalLogError(f"Hour out of range: {hour}")
            raise InvalidComponentsError(f"ClockTime: hour {hour} not in [0, 23]")
        if minute < 0 or minute > 59:
            epochalLogError(f"Minute out of range: {minute}")
            raise InvalidComponentsError(f"ClockTime: minute {minute} not in [0, 59]")
        if second < 0 or second >= MAX_SECOND_OF_MINUTE:
            epochalLogError(f"Second out of range: {second}")
            raise InvalidComponentsError(f"ClockTime: second {second} not in [0, 61)")

        self._hour = int(hour)
        self._minute = int(minute)
        self._second = float(second)
        self._minutes_from_utc = int(minutes_from_utc)

    @classmethod
    def fromSecondsInDay(cls, second_in_day: float) -> ClockTime:
        """Build a UTC time from the second number within the day.

        If `second_in_day` runs past the end of a regular day, the excess is read as a leap
        second: the final minute lasts 61 seconds and :attr:`.second` reaches [60, 61).

        Args:
            second_in_day (``float``): second number from 0.0 to 86401.0 (excluded)

        Raises:
            :class:`.OutOfRangeSecondsError`: if `second_in_day` is out of range
        """
        return cls.fromSplitSecondsInDay(0, second_in_day)

    @classmethod
    def fromSplitSecondsInDay(cls, second_in_day_a: int, second_in_day_b: float) -> ClockTime:
        """Build a UTC time from the second number within the day, given in two parts.

        The second number is `second_in_day_a + second_in_day_b`, split for increased
        accuracy. A sum reaching :data:`.JULIAN_DAY` is read as a leap second.

        Args:
            second_in_day_a (``int``): whole part of the second number
            second_in_day_b (``float``): remaining part of the second number

        Raises:
            :class:`.OutOfRangeSecondsError`: if the sum is out of [0, 86401)
        """
        if (JULIAN_DAY - second_in_day_a) - second_in_day_b > 0:
            return cls.fromSeconds(second_in_day_a, second_in_day_b, 0.0, SECONDS_PER_MINUTE)
        return cls.fromSeconds(second_in_day_a - 1, second_in_day_b, 1.0, SECONDS_PER_MINUTE + 1)

    @classmethod
    def fromSeconds(
        cls,
        second_in_day_a: int,
        second_in_day_b: float,
        leap: float,
        minute_duration: int,
    ) -> ClockTime:
        """Build a UTC time from the second number within the day and a leap second.

        Only `second_in_day_a + second_in_day_b` is used to compute the hour and minute;
        `leap` is added directly to the second of minute. The inputs must satisfy:

        - ``0 <= second_in_day_a + second_in_day_b < 86400``
        - ``0 <= (second_in_day_a + second_in_day_b) % 60 + leap``
        - ``0 <= leap <= minute_duration - 60`` if ``minute_duration >= 60``
        - ``0 >= leap >= minute_duration - 60`` if ``minute_duration < 60``
        - ``59 <= minute_duration <= 61``

        A second of minute computed at or above `minute_duration`, which may happen through
        rounding, is set to the largest float below `minute_duration`. If
        `second_in_day_b` or `leap` is NaN the hour and minute come from the whole part and
        the second of minute is NaN.

        Args:
            second_in_day_a (``int``): first part of the second number
            second_in_day_b (``float``): last part of the second number
            leap (``float``): magnitude of the leap second in progress, otherwise 0.0
            minute_duration (``int``): number of seconds in the current minute, normally 60

        Raises:
            :class:`.OutOfRangeSecondsError`: if the inequalities above do not hold
        """
        # Split as a whole number of seconds and a fraction in [0.0, 1.0)
        carry = 0
        if not (isnan(second_in_day_b) or isinf(second_in_day_b)):
            carry = int(floor(second_in_day_b))
        whole_seconds = second_in_day_a + carry
        fractional = second_in_day_b - carry

        if whole_seconds < 0 or whole_seconds >= JULIAN_DAY or isinf(second_in_day_b):
            epochalLogError(f"Seconds in day out of range: {second_in_day_a + second_in_day_b}")
            raise OutOfRangeSecondsError(
                f"ClockTime: seconds in day {second_in_day_a + second_in_day_b} "
                f"not in [0, {JULIAN_DAY})",
            )

        if not SECONDS_PER_MINUTE - 1 <= minute_duration <= SECONDS_PER_MINUTE + 1:
            epochalLogError(f"Minute duration out of range: {minute_duration}")
            raise OutOfRangeSecondsError(
                f"ClockTime: minute duration {minute_duration} not in [59, 61]",
            )

        max_extra_seconds = minute_duration - SECONDS_PER_MINUTE
        if leap * max_extra_seconds < 0 or abs(leap) > abs(max_extra_seconds):
            epochalLogError(f"Leap second {leap} incompatible with {minute_duration}s minute")
            raise OutOfRangeSecondsError(
                f"ClockTime: leap {leap} not between 0 and {max_extra_seconds}",
            )

        hour = whole_seconds // SECONDS_PER_HOUR
        whole_seconds -= SECONDS_PER_HOUR * hour
        minute = whole_seconds // SECONDS_PER_MINUTE
        whole_seconds -= SECONDS_PER_MINUTE * minute

        naive_second = whole_seconds + (leap + fractional)
        if naive_second < 0:
            epochalLogError(f"Second of minute out of range: {naive_second}")
            raise OutOfRangeSecondsError(
                f"ClockTime: second {naive_second} not in [0, {minute_duration})",
            )

        if naive_second < minute_duration or isnan(naive_second):
            second = naive_second
        else:
            second = float(nextafter(float(minute_duration), -inf))
            epochalLogDebug(f"Second of minute {naive_second} rounded down to {second}")

        return cls(hour, minute, second)

    @property
    def hour(self) -> int:
        """``int``: hour number from 0 to 23."""
        return self._hour

    @property
    def minute(self) -> int:
        """``int``: minute number from 0 to 59."""
        return self._minute

    @property
    def second(self) -> float:
        """``float``: second number from 0.0 to 61.0 (excluded), 60.0 and up in a leap second."""
        return self._second

    @property
    def minutes_from_utc(self) -> int:
        """``int``: offset between the local time and UTC, in minutes."""
        return self._minutes_from_utc

    def getSecondsInLocalDay(self) -> float:
        """Get the second number within the local day, ignoring the offset from UTC."""
        return self._second + 60.0 * self._minute + 3600.0 * self._hour

    def getSecondsInUTCDay(self) -> float:
        """Get the second number within the UTC day, applying the offset from UTC.

        Returns:
            ``float``: second number, from ``-60 * minutes_from_utc`` up to a day later
        """
        return self._second + 60.0 * (self._minute - self._minutes_from_utc) + 3600.0 * self._hour

    def __eq__(self, other: Any) -> bool:
        """Times are equal when hour, minute, and offset match and seconds are within 1e-8."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        return (
            self._hour == other._hour
            and self._minute == other._minute
            and abs(self._second - other._second) < TIME_EQUALITY_TOLERANCE
            and self._minutes_from_utc == other._minutes_from_utc
        )

    def __lt__(self, other: ClockTime) -> bool:
        """Order times by their second number within the UTC day."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.getSecondsInUTCDay() < other.getSecondsInUTCDay()

    def __le__(self, other: ClockTime) -> bool:
        """Check this instance is not after `other`."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        return not other < self

    def __gt__(self, other: ClockTime) -> bool:
        """."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        return other < self

    def __ge__(self, other: ClockTime) -> bool:
        """."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        return not self < other

    def __hash__(self) -> int:
        """Hash everything but the second, which only compares equal within a tolerance."""
        return hash((self._hour, self._minute, self._minutes_from_utc))

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.ClockTime`."""
        return (
            f"ClockTime({self._hour}, {self._minute}, {self._second}, "
            f"minutes_from_utc={self._minutes_from_utc})"
        )

    def __str__(self) -> str:
        """Return the ISO-8601 representation, e.g. ``23:59:60.500Z`` or ``09:30:00.000+02:00``."""
        if self._minutes_from_utc == 0:
            zone = "Z"
        else:
            sign = "+" if self._minutes_from_utc > 0 else "-"
            hours, minutes = divmod(abs(self._minutes_from_utc), 60)
            zone = f"{sign}{hours:02d}:{minutes:02d}"
        return f"{self._hour:02d}:{self._minute:02d}:{self._second:06.3f}{zone}"


ClockTime.H00 = ClockTime(0, 0, 0.0)
ClockTime.H12 = ClockTime(12, 0, 0.0)
