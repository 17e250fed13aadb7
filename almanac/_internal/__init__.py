"""Internal utilities for Almanac.

This module contains private implementation details:
    - Clamping primitives
    - Constants, name tables and weekday offsets
    - Pure calendar math

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.clamp import (
    clamp,
    clamp_day,
    clamp_month,
    clamp_year,
    clamp_year_bounds,
)

__all__: list[str] = [
    "clamp",
    "clamp_day",
    "clamp_month",
    "clamp_year",
    "clamp_year_bounds",
]
