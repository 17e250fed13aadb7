"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError.

Out-of-range numbers are never an error in Almanac: they are clamped.
The exceptions here cover contract violations that clamping cannot repair.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class FormatError(AlmanacError):
    """Unusable format argument.

    Raised when a format code is neither text nor coercible to an integer
    length.

    Examples:
        - format_day(None)
        - format_month(object())
        - format_year("four") is fine: text is measured, not parsed
    """

    pass


class ClockError(AlmanacError):
    """Invalid clock override.

    Raised when a programmatic override of the current date is not a
    (day, month, year) triple of integers.
    """

    pass


__all__ = [
    "AlmanacError",
    "FormatError",
    "ClockError",
]
