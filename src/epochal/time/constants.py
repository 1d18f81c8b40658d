"""Day-count and clock constants shared by the calendar and clock value types.

All day offsets are signed integer day counts relative to the J2000 epoch (2000-01-01).
"""

from __future__ import annotations

# Clock constants
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3600
JULIAN_DAY: int = 86400
"""``int``: number of seconds in a day without leap second."""

MAX_SECOND_OF_MINUTE: float = 61.0
"""``float``: exclusive upper bound of a second of minute, reached only during a leap second."""

TIME_EQUALITY_TOLERANCE: float = 1e-8
"""``float``: absolute tolerance (seconds) under which two seconds of minute compare equal."""

# Epoch offsets
MJD_TO_J2000: int = 51544
"""``int``: modified Julian day of the J2000 epoch."""

JD_TO_MJD: float = 2400000.5
"""``float``: Julian date of the modified Julian day epoch."""

JULIAN_CALENDAR_START: int = -730121
"""``int``: J2000 day of 0001-01-01, first day of the Julian calendar."""

GREGORIAN_CALENDAR_START: int = -152384
"""``int``: J2000 day of 1582-10-15, first day of the Gregorian calendar."""

GREGORIAN_REFORM_YEAR: int = 1582

MIN_J2000_DAY: int = -(2**31)
"""``int``: J2000 day of the earliest named epoch, bounded by a signed 32-bit day count."""

MAX_J2000_DAY: int = 2**31 - 1
"""``int``: J2000 day of the latest named epoch, bounded by a signed 32-bit day count."""
