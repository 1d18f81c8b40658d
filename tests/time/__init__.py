"""Shared reference values for the calendar date and clock time tests."""

from __future__ import annotations

KNOWN_J2000_DAYS: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((2000, 1, 1), 0),
    ((1999, 12, 31), -1),
    ((2000, 12, 31), 365),
    ((1858, 11, 17), -51544),
    ((1970, 1, 1), -10957),
    ((1980, 1, 6), -7300),
    ((1999, 8, 22), -132),
    ((2006, 1, 1), 2192),
    ((1996, 1, 1), -1461),
    ((1950, 1, 1), -18262),
    ((1958, 1, 1), -15340),
    ((-4712, 1, 1), -2451545),
    ((1582, 10, 4), -152385),
    ((1582, 10, 15), -152384),
    ((1, 1, 1), -730121),
    ((0, 12, 31), -730122),
    ((0, 1, 1), -730487),
    ((-1, 12, 31), -730488),
    ((5881610, 7, 11), 2**31 - 1),
    ((-5877490, 3, 3), -(2**31)),
)
"""Year/month/day triples and their day number with respect to the J2000 epoch."""
