"""Almanac: a clamped calendar-date library.

Almanac models a single (day, month, year) value that is always valid:
out-of-range input is snapped to the nearest valid value instead of being
rejected. Dates mutate in place and every mutator returns the same
instance, so calls chain.

Core Types:
    Date: Calendar date with a configurable [min_year, max_year] window

Calendar Features:
    ISO-8601 week numbers, ISO day of year, weeks per year
    6x7 Monday-first month grids, as dicts, 2-D string arrays or text

Format Functions:
    format_day, format_month, format_year: Length-coded field formatting
    join_formats: Join formatted fields with a delimiter

Exceptions:
    AlmanacError: Base exception
    FormatError: Unusable format argument
    ClockError: Invalid clock override

Example:
    >>> from almanac import Date
    >>> d = Date(10, 11, 2002)
    >>> d.join_formats([d.format_year(4), d.format_day(2), d.format_month(4)])
    '2002-10-November'
    >>> d.set_day(40).get_dict()
    {'day': 30, 'month': 11, 'year': 2002}
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from almanac.core.date import Date

# Exceptions
from almanac.errors import (
    AlmanacError,
    ClockError,
    FormatError,
)

# Clock
from almanac.convert import set_current_date, today

# Format functions
from almanac.format import (
    format_day,
    format_month,
    format_year,
    join_formats,
    render_calendar,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Exceptions
    "AlmanacError",
    "FormatError",
    "ClockError",
    # Clock
    "today",
    "set_current_date",
    # Format functions
    "format_day",
    "format_month",
    "format_year",
    "join_formats",
    "render_calendar",
]
