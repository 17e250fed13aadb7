"""Conversion collaborators.

This module provides the two outside sources of truth the library consumes:
    - The clock: today's (day, month, year), local or UTC
    - Unix epoch conversions for calendar dates at midnight UTC

Examples:
    >>> from almanac.convert import to_unix_seconds, from_unix_seconds
    >>> to_unix_seconds(1, 1, 1970)
    0
    >>> from_unix_seconds(86400)
    (2, 1, 1970)
"""

from __future__ import annotations

from almanac.convert.clock import set_current_date, today
from almanac.convert.epoch import from_unix_seconds, to_unix_seconds

__all__ = [
    # Clock
    "today",
    "set_current_date",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
]
