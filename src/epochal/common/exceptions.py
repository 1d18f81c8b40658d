"""Contains all the custom-defined exceptions used in :mod:`epochal`."""

from __future__ import annotations


class InvalidComponentsError(ValueError):
    """Exception indicating out-of-range or calendar-impossible date, time, or week components."""


class OutOfRangeSecondsError(ValueError):
    """Exception indicating seconds-in-day or leap-second parameters violating their bounds."""
