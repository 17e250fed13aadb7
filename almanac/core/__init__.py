"""Core calendar types.

This module provides the fundamental type:
    - Date: A mutable, always-clamped calendar date with chained setters,
      day/month/year arithmetic, ISO-8601 week math and month grids
"""

from __future__ import annotations

from almanac.core.date import Date

__all__: list[str] = [
    "Date",
]
