"""Date formatting and calendar rendering.

This module provides functions for turning calendar values into text:
    - Field formatting driven by a length code (day, month, year)
    - Month-grid layout and rendering

Functions:
    format_length: Normalize a text/integer format code to a length.
    format_day: Format a day number or weekday name.
    format_month: Format a month number or month name.
    format_year: Format a full or two-digit year.
    join_formats: Join formatted fields with a delimiter.
    calendar_dict: Lay out a month on the 42-slot grid.
    calendar_array2d: Lay out a month as 6x7 two-character cells.
    calendar_weeks: ISO week number per grid row.
    render_calendar: Printable month calendar.

Examples:
    >>> from almanac.format import format_month, render_calendar
    >>> format_month("mmm", 1)
    'Jan'
"""

from __future__ import annotations

from almanac.format.fields import (
    FormatCode,
    format_day,
    format_length,
    format_month,
    format_year,
    join_formats,
)
from almanac.format.grid import (
    CalendarSlot,
    calendar_array2d,
    calendar_dict,
    calendar_weeks,
    render_calendar,
)

__all__: list[str] = [
    # Fields
    "FormatCode",
    "format_length",
    "format_day",
    "format_month",
    "format_year",
    "join_formats",
    # Grid
    "CalendarSlot",
    "calendar_dict",
    "calendar_array2d",
    "calendar_weeks",
    "render_calendar",
]
