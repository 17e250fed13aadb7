"""Internal constants for Almanac.

These constants define the limits, lookup tables and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Outer limits for the configurable year window
MIN_YEAR_BOUND: int = 1000
MAX_YEAR_BOUND: int = 9999

# Default year window for a new Date
DEFAULT_MIN_YEAR: int = MIN_YEAR_BOUND
DEFAULT_MAX_YEAR: int = MAX_YEAR_BOUND

MIN_MONTH: int = 1
MAX_MONTH: int = 12

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday first, matching the weekday numbering (0=Monday, 6=Sunday)
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Per-month offsets for the Zeller-style weekday congruence, indexed by month - 1
WEEKDAY_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# Month grid geometry
GRID_ROWS: int = 6
GRID_COLUMNS: int = 7
GRID_SLOTS: int = GRID_ROWS * GRID_COLUMNS  # 42

# Environment variable that pins the clock (YYYY-MM-DD)
TODAY_ENV_VAR: str = "ALMANAC_TODAY"


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR_BOUND",
    "MAX_YEAR_BOUND",
    "DEFAULT_MIN_YEAR",
    "DEFAULT_MAX_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "WEEKDAY_OFFSETS",
    "GRID_ROWS",
    "GRID_COLUMNS",
    "GRID_SLOTS",
    "TODAY_ENV_VAR",
]
