"""Month-grid calendars.

A month is laid out on a fixed grid of 6 rows by 7 columns, Monday first.
The grid always has 42 slots so that every month renders at the same
height; slots before the first and after the last day of the month are
empty.

Functions:
    calendar_dict: Slot index -> day record (or an empty record).
    calendar_array2d: 6 rows of 7 two-character cells.
    calendar_weeks: ISO week number for each grid row.
    render_calendar: Printable text with a title and a weekday header.

Examples:
    >>> calendar_dict(2023, 4)[5]
    {'day': 1, 'row': 0, 'week': 13, 'weekday': 5}
    >>> calendar_array2d(2023, 4)[0]
    ['  ', '  ', '  ', '  ', '  ', '01', '02']
"""

from __future__ import annotations

from typing import Dict

from almanac._internal.calendar import days_in_month, iso_week_number, weekday
from almanac._internal.constants import (
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SLOTS,
    MONTH_NAMES,
    WEEKDAY_NAMES,
)
from almanac.convert.epoch import day_of_year

# A populated slot has day, row, week and weekday; an empty slot is {}
CalendarSlot = Dict[str, int]

_BLANK_CELL = "  "


def calendar_dict(year: int, month: int) -> dict[int, CalendarSlot]:
    """Lay out a month on the 42-slot grid.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        Mapping of slot index (0-41) to either an empty dict or a dict with
        the day of the month, the grid row, the ISO week number and the
        weekday (0=Monday).
    """
    first = weekday(year, month, 1)
    last = first + days_in_month(year, month)

    slots: dict[int, CalendarSlot] = {}
    for index in range(GRID_SLOTS):
        if first <= index < last:
            day = index - first + 1
            slots[index] = {
                "day": day,
                "row": index // GRID_COLUMNS,
                "week": iso_week_number(year, day_of_year(day, month, year)),
                "weekday": weekday(year, month, day),
            }
        else:
            slots[index] = {}
    return slots


def calendar_array2d(year: int, month: int) -> list[list[str]]:
    """Lay out a month as 6 rows of 7 two-character cells.

    Empty slots are two spaces; days are zero-padded to two digits.
    """
    slots = calendar_dict(year, month)
    rows: list[list[str]] = []
    for row in range(GRID_ROWS):
        cells = []
        for column in range(GRID_COLUMNS):
            slot = slots[row * GRID_COLUMNS + column]
            cells.append(f"{slot['day']:02d}" if slot else _BLANK_CELL)
        rows.append(cells)
    return rows


def calendar_weeks(year: int, month: int) -> list[str]:
    """Return the ISO week number of each grid row.

    A row with no day of the month gets an empty string.

    Examples:
        >>> calendar_weeks(2023, 4)
        ['13', '14', '15', '16', '17', '']
    """
    weeks = [""] * GRID_ROWS
    for slot in calendar_dict(year, month).values():
        if slot and not weeks[slot["row"]]:
            weeks[slot["row"]] = str(slot["week"])
    return weeks


def render_calendar(year: int, month: int, *, show_weeks: bool = False) -> str:
    """Render a month as printable text.

    The first line is the month name and year centred over the grid,
    followed by a two-letter weekday header and the six grid rows. With
    show_weeks, every line is prefixed by a column holding the ISO week
    number of the row.

    Examples:
        >>> print(render_calendar(2023, 4))  # doctest: +NORMALIZE_WHITESPACE
             April 2023
        Mo Tu We Th Fr Sa Su
                       01 02
        03 04 05 06 07 08 09
        10 11 12 13 14 15 16
        17 18 19 20 21 22 23
        24 25 26 27 28 29 30
    """
    header = " ".join(name[:2] for name in WEEKDAY_NAMES)
    grid = [" ".join(cells) for cells in calendar_array2d(year, month)]

    if show_weeks:
        weeks = calendar_weeks(year, month)
        header = f"{'':>2} {header}"
        grid = [f"{week:>2} {line}" for week, line in zip(weeks, grid)]

    title = f"{MONTH_NAMES[month - 1]} {year}".center(len(header)).rstrip()
    return "\n".join([title, header, *grid])


__all__ = [
    "CalendarSlot",
    "calendar_dict",
    "calendar_array2d",
    "calendar_weeks",
    "render_calendar",
]
