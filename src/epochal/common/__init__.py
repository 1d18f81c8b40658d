"""Contains the configuration, logging, error, and label helpers shared by :mod:`epochal.time`."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from numbers import Integral, Real


def pathSafeTime(stamp: datetime | None = None) -> str:
    """Return a time stamp that can be embedded in a log file name.

    Args:
        stamp (``datetime``, optional): time to render. Defaults to the current local time.

    Returns:
        ``str``: ISO-8601 rendering of `stamp` without colons or decimal points.
    """
    if stamp is None:
        stamp = datetime.now()
    return stamp.isoformat().replace(":", "-").replace(".", "")


def isWholeNumber(value) -> bool:
    """Check that `value` is an integer, or a real number without fractional part.

    NaN and infinities are not whole numbers.
    """
    if isinstance(value, Integral):
        return True
    return isinstance(value, Real) and float(value).is_integer()
