"""Calendar utilities for Almanac.

This module provides the pure functions behind every calendar calculation:
leap year logic, month lengths, proleptic Gregorian ordinals, the
Zeller-style weekday congruence and the ISO-8601 week rules.

Weekdays are numbered Monday=0 through Sunday=6 unless stated otherwise.
Arguments are ordered (year, month, day) throughout; none of these
functions clamp their inputs.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import DAYS_IN_MONTH, WEEKDAY_OFFSETS


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is below 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400: each has 36524 days (except last)
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim

    # Should never reach here for a valid ordinal
    raise ValueError(f"Invalid ordinal: {ordinal}")


def weekday(year: int, month: int, day: int) -> int:
    """Return the day of the week using a Zeller-style congruence.

    January and February count as months of the previous year so that the
    leap day falls at the end of the counting year.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of week (0=Monday, 6=Sunday).

    Examples:
        >>> weekday(2000, 1, 1)  # Saturday
        5
        >>> weekday(2023, 4, 1)  # Saturday
        5
        >>> weekday(2024, 1, 15)  # Monday
        0
    """
    dd = WEEKDAY_OFFSETS[month - 1] + day - 1
    yy = year - 1 if month < 3 else year
    return (yy + yy // 4 - yy // 100 + yy // 400 + dd) % 7


def last_weekday_of_year(year: int) -> int:
    """Return the weekday of December 31 counted from Sunday.

    This is the p(y) term of the ISO-8601 week rules: 0=Sunday,
    4=Thursday, 6=Saturday.

    Examples:
        >>> last_weekday_of_year(2020)  # Thursday
        4
        >>> last_weekday_of_year(2022)  # Saturday
        6
    """
    return (year + year // 4 - year // 100 + year // 400) % 7


def weeks_in_year(year: int) -> int:
    """Return the number of ISO-8601 weeks in a year (52 or 53).

    A year has 53 weeks when it ends on a Thursday, or when the previous
    year ended on a Wednesday.

    Examples:
        >>> weeks_in_year(2020)
        53
        >>> weeks_in_year(2023)
        52
    """
    if last_weekday_of_year(year) == 4 or last_weekday_of_year(year - 1) == 3:
        return 53
    return 52


def iso_week_number(year: int, day_of_year: int) -> int:
    """Return the ISO-8601 week number for a day of the year.

    Days before the first ISO week of the year belong to the last week of
    the previous year; days after the last ISO week belong to week 1 of
    the next year.

    Args:
        year: The year.
        day_of_year: Day of year, 1-based.

    Returns:
        The ISO week number (1-53).

    Examples:
        >>> iso_week_number(2023, 91)  # 2023-04-01
        13
        >>> iso_week_number(2021, 1)  # 2021-01-01 is in week 53 of 2020
        53
    """
    doy = day_of_year - 1
    iso_weekday = (last_weekday_of_year(year - 1) + doy) % 7 + 1
    week = (doy + 1 - iso_weekday + 10) // 7
    if week < 1:
        return weeks_in_year(year - 1)
    if week > weeks_in_year(year):
        return 1
    return week


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "weekday",
    "last_weekday_of_year",
    "weeks_in_year",
    "iso_week_number",
]
