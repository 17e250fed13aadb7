"""Epoch conversion utilities for calendar dates.

This module maps calendar dates at midnight UTC to and from Unix
timestamps in seconds.

Functions:
    to_unix_seconds: Convert (day, month, year) to Unix seconds.
    from_unix_seconds: Convert Unix seconds to (day, month, year).

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> to_unix_seconds(1, 1, 1970)
    0
    >>> to_unix_seconds(2, 1, 1970)
    86400
    >>> from_unix_seconds(1705276800)
    (15, 1, 2024)
"""

from __future__ import annotations

from almanac._internal.calendar import ordinal_to_ymd, ymd_to_ordinal
from almanac._internal.constants import SECONDS_PER_DAY

# Ordinal of 1970-01-01
UNIX_EPOCH_ORDINAL: int = ymd_to_ordinal(1970, 1, 1)


def to_unix_seconds(day: int, month: int, year: int) -> int:
    """Convert a calendar date to a Unix timestamp in seconds.

    The date is taken at 00:00:00 UTC. Dates before 1970 give negative
    timestamps.

    Args:
        day: The day of the month.
        month: The month (1-12).
        year: The year.

    Returns:
        Seconds since 1970-01-01 00:00:00 UTC.

    Examples:
        >>> to_unix_seconds(15, 1, 2024)
        1705276800
        >>> to_unix_seconds(31, 12, 1969)
        -86400
    """
    return (ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL) * SECONDS_PER_DAY


def from_unix_seconds(seconds: int) -> tuple[int, int, int]:
    """Convert a Unix timestamp in seconds to a calendar date.

    Any time-of-day component is discarded (floored toward the earlier
    midnight).

    Args:
        seconds: Seconds since 1970-01-01 00:00:00 UTC.

    Returns:
        Tuple of (day, month, year).

    Examples:
        >>> from_unix_seconds(0)
        (1, 1, 1970)
        >>> from_unix_seconds(-1)
        (31, 12, 1969)
    """
    days = seconds // SECONDS_PER_DAY
    year, month, day = ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)
    return (day, month, year)


def day_of_year(day: int, month: int, year: int) -> int:
    """Return the 1-based day of the year from the epoch timestamps.

    Examples:
        >>> day_of_year(1, 1, 2023)
        1
        >>> day_of_year(1, 4, 2023)
        91
        >>> day_of_year(31, 12, 2024)
        366
    """
    elapsed = to_unix_seconds(day, month, year) - to_unix_seconds(1, 1, year)
    return elapsed // SECONDS_PER_DAY + 1


__all__ = [
    "UNIX_EPOCH_ORDINAL",
    "to_unix_seconds",
    "from_unix_seconds",
    "day_of_year",
]
