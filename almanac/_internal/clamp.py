"""Clamping utilities for Almanac.

Almanac never rejects an out-of-range value; it snaps it to the nearest
bound instead. This module provides the primitive used by every setter.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from almanac._internal.calendar import days_in_month
from almanac._internal.constants import (
    MAX_MONTH,
    MAX_YEAR_BOUND,
    MIN_MONTH,
    MIN_YEAR_BOUND,
)

logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int, *, name: str = "value") -> int:
    """Constrain a value to the inclusive range [low, high].

    When the bounds cross (low > high), low wins.

    Args:
        value: The value to clamp.
        low: Inclusive lower bound.
        high: Inclusive upper bound.
        name: Field name used in the debug log when the value changes.

    Returns:
        The clamped value.

    Examples:
        >>> clamp(13, 1, 12)
        12
        >>> clamp(-4, 1, 12)
        1
        >>> clamp(7, 1, 12)
        7
    """
    result = max(low, min(value, high))
    if result != value:
        logger.debug("clamped %s %d -> %d", name, value, result)
    return result


def clamp_year_bounds(value: int) -> int:
    """Clamp a year-window bound to [1000, 9999]."""
    return clamp(value, MIN_YEAR_BOUND, MAX_YEAR_BOUND, name="year bound")


def clamp_month(month: int) -> int:
    """Clamp a month to [1, 12]."""
    return clamp(month, MIN_MONTH, MAX_MONTH, name="month")


def clamp_year(year: int, min_year: int, max_year: int) -> int:
    """Clamp a year to the window [min_year, max_year]."""
    return clamp(year, min_year, max_year, name="year")


def clamp_day(day: int, month: int, year: int) -> int:
    """Clamp a day to [1, days_in_month(month, year)].

    The caller is responsible for passing an already valid month and year.
    """
    return clamp(day, 1, days_in_month(year, month), name="day")


__all__ = [
    "clamp",
    "clamp_year_bounds",
    "clamp_month",
    "clamp_year",
    "clamp_day",
]
