"""Field formatting for calendar dates.

Each date field is rendered according to a format code. The code is either
text, whose length selects the rendering, or an integer length:

    format_day("dd", ...) == format_day(2, ...)

Day renderings (by length):
    1 - plain number (7)
    2 - zero-padded number (07)
    3 - first two letters of the weekday name (Mo)
    4 - first three letters of the weekday name (Mon)
    * - full weekday name (Monday)

Month renderings (by length):
    1 - plain number (4)
    2 - zero-padded number (04)
    3 - first three letters of the month name (Apr)
    * - full month name (April)

Year renderings (by length):
    >= 4 - full year (2023)
    *    - last two digits, zero-padded (23)

Names are English only.

Examples:
    >>> format_month("mmm", 1)
    'Jan'
    >>> join_formats([format_year(4, 2002), format_month(2, 11)])
    '2002-11'
"""

from __future__ import annotations

from typing import Iterable, Union

from almanac._internal.constants import MONTH_NAMES, WEEKDAY_NAMES
from almanac.errors import FormatError

# Text is measured, integers are taken as the length directly
FormatCode = Union[str, int]


def format_length(fmt: FormatCode) -> int:
    """Normalize a format code to its effective length.

    Args:
        fmt: Text (its length is used) or an integer-coercible value.

    Returns:
        The effective length.

    Raises:
        FormatError: If fmt is neither text nor integer-coercible.

    Examples:
        >>> format_length("yyyy")
        4
        >>> format_length(2)
        2
        >>> format_length("12")  # text is measured, not parsed
        2
    """
    if isinstance(fmt, str):
        return len(fmt)
    try:
        return int(fmt)
    except (TypeError, ValueError) as exc:
        raise FormatError(
            f"format must be text or an integer length, got {fmt!r}"
        ) from exc


def format_day(fmt: FormatCode, day: int, weekday: int) -> str:
    """Format a day of the month or its weekday name.

    Args:
        fmt: The format code.
        day: The day of the month.
        weekday: The day of the week (0=Monday, 6=Sunday).

    Returns:
        The formatted day.

    Examples:
        >>> format_day(1, 7, 0)
        '7'
        >>> format_day("dd", 7, 0)
        '07'
        >>> format_day(3, 7, 0)
        'Mo'
        >>> format_day(4, 7, 0)
        'Mon'
        >>> format_day("dddddd", 7, 0)
        'Monday'
    """
    length = format_length(fmt)
    if length == 1:
        return str(day)
    elif length == 2:
        return f"{day:02d}"

    name = WEEKDAY_NAMES[weekday]
    if length == 3:
        return name[:2]
    elif length == 4:
        return name[:3]
    return name


def format_month(fmt: FormatCode, month: int) -> str:
    """Format a month as a number or an English name.

    Args:
        fmt: The format code.
        month: The month (1-12).

    Returns:
        The formatted month.

    Examples:
        >>> format_month(1, 4)
        '4'
        >>> format_month("mm", 4)
        '04'
        >>> format_month("mmm", 4)
        'Apr'
        >>> format_month(4, 4)
        'April'
    """
    length = format_length(fmt)
    if length == 1:
        return str(month)
    elif length == 2:
        return f"{month:02d}"

    name = MONTH_NAMES[month - 1]
    if length == 3:
        return name[:3]
    return name


def format_year(fmt: FormatCode, year: int) -> str:
    """Format a year in full or as its last two digits.

    Examples:
        >>> format_year("yyyy", 2002)
        '2002'
        >>> format_year(2, 2002)
        '02'
    """
    if format_length(fmt) >= 4:
        return str(year)
    return f"{year % 100:02d}"


def join_formats(parts: Iterable[str], delimiter: str = "-") -> str:
    """Join already formatted fields, preserving their order.

    Examples:
        >>> join_formats(["2002", "10", "November", "Sun"])
        '2002-10-November-Sun'
        >>> join_formats(["10", "11", "2002"], "/")
        '10/11/2002'
    """
    return delimiter.join(parts)


__all__ = [
    "FormatCode",
    "format_length",
    "format_day",
    "format_month",
    "format_year",
    "join_formats",
]
