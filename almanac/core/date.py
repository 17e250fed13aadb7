"""Date class representing a mutable, always-clamped calendar date.

This module provides the Date class: a (day, month, year) value that
snaps every out-of-range input to the nearest valid value instead of
rejecting it, mutates in place, and returns itself from every mutator so
calls can be chained.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from almanac._internal import calendar as _calendar
from almanac._internal.clamp import (
    clamp_day,
    clamp_month,
    clamp_year,
    clamp_year_bounds,
)
from almanac._internal.constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from almanac.convert.clock import today
from almanac.convert.epoch import day_of_year
from almanac.format import fields as _fields
from almanac.format import grid as _grid
from almanac.format.fields import FormatCode
from almanac.format.grid import CalendarSlot

logger = logging.getLogger(__name__)


class Date:
    """A calendar date that is valid by construction.

    Every component is clamped into range on the way in: the month into
    1-12, the year into the instance's [min_year, max_year] window and the
    day into 1 through the length of the month. Nothing in this class
    raises for an out-of-range number.

    Mutators change the instance in place and return it, so calls chain.
    Query methods take optional arguments that default to the instance's
    current fields at call time.

    The day is only re-validated when it is written (set_day, the day and
    year arithmetic). Changing the month or year alone leaves the day as it
    was, even if the new month is shorter.

    Attributes:
        day: The day of the month.
        month: The month (1-12).
        year: The year (min_year to max_year).
        min_year: Lower bound of the year window (>= 1000).
        max_year: Upper bound of the year window (<= 9999).

    Examples:
        >>> d = Date(31, 2, 2023)
        >>> d.get_dict()
        {'day': 28, 'month': 2, 'year': 2023}

        >>> d.set_day(4).set_year(1991) is d
        True

        >>> Date(10, 11, 2002).format_day(4)
        'Sun'
    """

    __slots__ = ("_day", "_month", "_year", "_min_year", "_max_year")

    def __init__(
        self,
        day: int | None = None,
        month: int | None = None,
        year: int | None = None,
        *,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: int = DEFAULT_MAX_YEAR,
    ) -> None:
        """Create a Date from day, month and year.

        Omitted components come from today's local date. The year window
        is set first, then the month and year are clamped, then the day is
        clamped against the clamped month and year.

        Args:
            day: The day of the month, or None for today's day.
            month: The month, or None for today's month.
            year: The year, or None for today's year.
            min_year: Lower bound of the year window, clamped to 1000-9999.
            max_year: Upper bound of the year window, clamped to 1000-9999.

        Examples:
            >>> Date(15, 13, 2024)
            Date(15, 12, 2024)

            >>> Date(29, 2, 2023)
            Date(28, 2, 2023)

            >>> Date(1, 1, 200)
            Date(1, 1, 1000)
        """
        self._min_year = clamp_year_bounds(min_year)
        self._max_year = clamp_year_bounds(max_year)

        if day is None or month is None or year is None:
            today_day, today_month, today_year = today()
            day = today_day if day is None else day
            month = today_month if month is None else month
            year = today_year if year is None else year

        self._month = self.clamp_month(month)
        self._year = self.clamp_year(year)
        self._day = self.clamp_day(day, self._month, self._year)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: int = DEFAULT_MAX_YEAR,
    ) -> Date:
        """Create a Date from a mapping with day, month and year keys.

        This is the inverse of get_dict(). Missing keys fall back to
        today's date, exactly like omitted constructor arguments.

        Raises:
            TypeError: If data is not a mapping.

        Examples:
            >>> Date.from_dict({"day": 1, "month": 4, "year": 2023})
            Date(1, 4, 2023)
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"expected mapping, got {type(data).__name__}")
        return cls(
            data.get("day"),
            data.get("month"),
            data.get("year"),
            min_year=min_year,
            max_year=max_year,
        )

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._month

    @property
    def year(self) -> int:
        """Return the year."""
        return self._year

    @property
    def min_year(self) -> int:
        """Return the lower bound of the year window."""
        return self._min_year

    @property
    def max_year(self) -> int:
        """Return the upper bound of the year window."""
        return self._max_year

    @property
    def is_leap_year(self) -> bool:
        """Return True if the current year is a leap year.

        Examples:
            >>> Date(1, 1, 2000).is_leap_year
            True
            >>> Date(1, 1, 1900).is_leap_year
            False
        """
        return _calendar.is_leap_year(self._year)

    # ------------------------------------------------------------------
    # Bounds & clamp
    # ------------------------------------------------------------------

    def clamp_year_bounds(self, value: int) -> int:
        """Clamp a candidate min_year/max_year to 1000-9999."""
        return clamp_year_bounds(value)

    def clamp_year(self, y: int | None = None) -> int:
        """Clamp a year into [min_year, max_year].

        Args:
            y: The year, or None for the current year.

        Returns:
            The clamped year.
        """
        if y is None:
            y = self._year
        return clamp_year(y, self._min_year, self._max_year)

    def clamp_month(self, m: int | None = None) -> int:
        """Clamp a month into 1-12 (None for the current month)."""
        if m is None:
            m = self._month
        return clamp_month(m)

    def clamp_day(
        self,
        d: int | None = None,
        m: int | None = None,
        y: int | None = None,
    ) -> int:
        """Clamp a day into 1 through the length of its month.

        The month and year are clamped to their own ranges first, so the
        day bound is always computed against a valid month.

        Args:
            d: The day, or None for the current day.
            m: The month, or None for the current month.
            y: The year, or None for the current year.

        Returns:
            The clamped day.

        Examples:
            >>> Date(1, 1, 2023).clamp_day(31, 2)
            28
            >>> Date(1, 1, 2023).clamp_day(31, 2, 2024)
            29
            >>> Date(1, 1, 2023).clamp_day(0)
            1
        """
        if d is None:
            d = self._day
        return clamp_day(d, self.clamp_month(m), self.clamp_year(y))

    def days_in_month(self, m: int | None = None, y: int | None = None) -> int:
        """Return the length of a month, after clamping month and year.

        Examples:
            >>> Date(1, 1, 2023).days_in_month(2, 2000)
            29
            >>> Date(1, 1, 2023).days_in_month(2, 1900)
            28
            >>> Date(1, 4, 2023).days_in_month()
            30
        """
        return _calendar.days_in_month(self.clamp_year(y), self.clamp_month(m))

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_day(self, d: int) -> Date:
        """Set the day, clamped against the current month and year.

        Returns:
            This instance.
        """
        self._day = self.clamp_day(d, self._month, self._year)
        return self

    def set_month(self, m: int) -> Date:
        """Set the month, clamped into 1-12.

        The day is not re-clamped: after Date(31, 1, 2023).set_month(2)
        the day is still 31 until it is next written.

        Returns:
            This instance.
        """
        self._month = self.clamp_month(m)
        return self

    def set_year(self, y: int) -> Date:
        """Set the year, clamped into the year window.

        The day is not re-clamped (see set_month).

        Returns:
            This instance.
        """
        self._year = self.clamp_year(y)
        return self

    def set_min_year(self, value: int) -> Date:
        """Set the lower bound of the year window, clamped to 1000-9999.

        The current year is left alone; it is only re-clamped on its
        next write.
        """
        self._min_year = self.clamp_year_bounds(value)
        return self

    def set_max_year(self, value: int) -> Date:
        """Set the upper bound of the year window, clamped to 1000-9999."""
        self._max_year = self.clamp_year_bounds(value)
        return self

    def set_today(self, utc: bool = False) -> Date:
        """Reset to today's date.

        Args:
            utc: Use the UTC date instead of the local date.

        Returns:
            This instance.
        """
        day, month, year = today(utc)
        logger.debug("resetting date to today: %d-%02d-%02d", year, month, day)
        return self.set_month(month).set_year(year).set_day(day)

    def get_dict(self) -> dict[str, int]:
        """Return an independent snapshot of day, month and year.

        Examples:
            >>> Date(10, 11, 2002).get_dict()
            {'day': 10, 'month': 11, 'year': 2002}
        """
        return {"day": self._day, "month": self._month, "year": self._year}

    def copy(self) -> Date:
        """Return an independent Date with identical fields and bounds.

        The fields are copied as they are, without clamping, so a stale
        day survives the copy.
        """
        other = Date.__new__(Date)
        other._day = self._day
        other._month = self._month
        other._year = self._year
        other._min_year = self._min_year
        other._max_year = self._max_year
        return other

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def increment_day(self, mode: bool, max_iteration: int = 1) -> Date:
        """Step the date one day at a time, carrying into month and year.

        Args:
            mode: Step forward when True, backward when False.
            max_iteration: Number of single-day steps.

        Returns:
            This instance.

        Examples:
            >>> Date(31, 12, 2023).increment_day(True)
            Date(1, 1, 2024)
            >>> Date(1, 3, 2024).increment_day(False)
            Date(29, 2, 2024)
            >>> Date(25, 2, 2023).increment_day(True, 7)
            Date(4, 3, 2023)
        """
        for _ in range(max_iteration):
            if mode:
                self._day += 1
                if self._day > self.days_in_month():
                    self.increment_month(True)
                    self._day = 1
            else:
                self._day -= 1
                if self._day < 1:
                    self.increment_month(False)
                    self._day = self.days_in_month()
        return self

    def increment_month(self, mode: bool, max_iteration: int = 1) -> Date:
        """Step the month, wrapping into the next or previous year.

        The day is not re-clamped, so Date(31, 1, 2023).increment_month(True)
        holds day 31 in February until the day is next written.

        Args:
            mode: Step forward when True, backward when False.
            max_iteration: Number of single-month steps.

        Returns:
            This instance.

        Examples:
            >>> Date(15, 12, 2023).increment_month(True)
            Date(15, 1, 2024)
            >>> Date(15, 1, 2023).increment_month(False, 13)
            Date(15, 12, 2021)
        """
        for _ in range(max_iteration):
            self._month += 1 if mode else -1
            if self._month > 12:
                self._month = 1
                self._year = self.clamp_year(self._year + 1)
            elif self._month < 1:
                self._month = 12
                self._year = self.clamp_year(self._year - 1)
        return self

    def increment_year(self, mode: bool, max_iteration: int = 1) -> Date:
        """Step the year by max_iteration, then re-validate the day.

        Examples:
            >>> Date(29, 2, 2024).increment_year(True)
            Date(28, 2, 2025)
            >>> Date(1, 1, 9998).increment_year(True, 5)
            Date(1, 1, 9999)
        """
        if mode:
            self._year = self.clamp_year(self._year + max_iteration)
        else:
            self._year = self.clamp_year(self._year - max_iteration)
        return self.set_day(self._day)

    # ------------------------------------------------------------------
    # Calendar math
    # ------------------------------------------------------------------

    def get_weekday(
        self,
        d: int | None = None,
        m: int | None = None,
        y: int | None = None,
    ) -> int:
        """Return the day of the week (0=Monday, 6=Sunday).

        All three components are clamped first.

        Examples:
            >>> Date(1, 1, 2000).get_weekday()  # Saturday
            5
            >>> Date().get_weekday(1, 4, 2023)  # Saturday
            5
        """
        m = self.clamp_month(m)
        y = self.clamp_year(y)
        d = self.clamp_day(d, m, y)
        return _calendar.weekday(y, m, d)

    def get_last_week_day_of_year(self, y: int | None = None) -> int:
        """Return the weekday of December 31, counted from Sunday=0.

        This is the year term of the ISO-8601 week rules; the year is not
        clamped so that neighbouring years can be queried.
        """
        if y is None:
            y = self._year
        return _calendar.last_weekday_of_year(y)

    def get_number_of_weeks_of_year(self, y: int | None = None) -> int:
        """Return the number of ISO-8601 weeks in a year (52 or 53).

        Examples:
            >>> Date(1, 1, 2020).get_number_of_weeks_of_year()
            53
            >>> Date(1, 1, 2020).get_number_of_weeks_of_year(2023)
            52
        """
        if y is None:
            y = self._year
        return _calendar.weeks_in_year(y)

    def get_iso_day_of_year(
        self,
        d: int | None = None,
        m: int | None = None,
        y: int | None = None,
    ) -> int:
        """Return the 1-based day of the year.

        Computed from the difference between the Unix timestamps of the
        date and of January 1 of its year.

        Examples:
            >>> Date(1, 4, 2023).get_iso_day_of_year()
            91
            >>> Date(31, 12, 2024).get_iso_day_of_year()
            366
        """
        m = self.clamp_month(m)
        y = self.clamp_year(y)
        d = self.clamp_day(d, m, y)
        return day_of_year(d, m, y)

    def get_iso_week_number(
        self,
        d: int | None = None,
        m: int | None = None,
        y: int | None = None,
    ) -> int:
        """Return the ISO-8601 week number.

        Early January days can belong to the last week of the previous
        year, and late December days to week 1 of the next.

        Examples:
            >>> Date(1, 4, 2023).get_iso_week_number()
            13
            >>> Date(1, 1, 2021).get_iso_week_number()
            53
            >>> Date(30, 12, 2024).get_iso_week_number()
            1
        """
        m = self.clamp_month(m)
        y = self.clamp_year(y)
        d = self.clamp_day(d, m, y)
        return _calendar.iso_week_number(y, self.get_iso_day_of_year(d, m, y))

    # ------------------------------------------------------------------
    # Calendar grid
    # ------------------------------------------------------------------

    def get_calendar_dict(
        self, m: int | None = None, y: int | None = None
    ) -> dict[int, CalendarSlot]:
        """Lay out a month on the 42-slot, Monday-first grid.

        Returns:
            Mapping of slot index (0-41) to {} for an empty slot, or to a
            dict with day, row, week (ISO) and weekday for a day of the
            month.

        Examples:
            >>> Date(1, 1, 2000).get_calendar_dict(4, 2023)[5]
            {'day': 1, 'row': 0, 'week': 13, 'weekday': 5}
        """
        return _grid.calendar_dict(self.clamp_year(y), self.clamp_month(m))

    def get_calendar_array2d(
        self, m: int | None = None, y: int | None = None
    ) -> list[list[str]]:
        """Lay out a month as 6 rows of 7 two-character cells."""
        return _grid.calendar_array2d(self.clamp_year(y), self.clamp_month(m))

    def get_calendar_weeks(
        self, m: int | None = None, y: int | None = None
    ) -> list[str]:
        """Return the ISO week number of each grid row ('' for empty rows)."""
        return _grid.calendar_weeks(self.clamp_year(y), self.clamp_month(m))

    def render_calendar(
        self,
        m: int | None = None,
        y: int | None = None,
        *,
        show_weeks: bool = False,
    ) -> str:
        """Render a month as text: title, weekday header and grid rows."""
        return _grid.render_calendar(
            self.clamp_year(y), self.clamp_month(m), show_weeks=show_weeks
        )

    def print_calendar_array2d(
        self,
        m: int | None = None,
        y: int | None = None,
        *,
        show_weeks: bool = False,
    ) -> None:
        """Print the month calendar produced by render_calendar()."""
        print(self.render_calendar(m, y, show_weeks=show_weeks))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_day(
        self,
        fmt: FormatCode,
        d: int | None = None,
        m: int | None = None,
        y: int | None = None,
    ) -> str:
        """Format the day as a number or a weekday name.

        Lengths 1 and 2 render the day number as given; longer codes
        render the weekday of the clamped date (3: two letters, 4: three
        letters, otherwise the full name).

        Raises:
            FormatError: If fmt is neither text nor integer-coercible.

        Examples:
            >>> d = Date(10, 11, 2002)
            >>> d.format_day("d"), d.format_day(2), d.format_day(3), d.format_day(5)
            ('10', '10', 'Su', 'Sunday')
        """
        if d is None:
            d = self._day
        return _fields.format_day(fmt, d, self.get_weekday(d, m, y))

    def format_month(self, fmt: FormatCode, m: int | None = None) -> str:
        """Format the month as a number or an English name.

        Examples:
            >>> d = Date(1, 1, 2023)
            >>> d.format_month(3), d.format_month("mmm"), d.format_month("mmmm")
            ('Jan', 'Jan', 'January')
        """
        return _fields.format_month(fmt, self.clamp_month(m))

    def format_year(self, fmt: FormatCode, y: int | None = None) -> str:
        """Format the year in full (length >= 4) or as two digits."""
        if y is None:
            y = self._year
        return _fields.format_year(fmt, y)

    @staticmethod
    def join_formats(parts: Iterable[str], delimiter: str = "-") -> str:
        """Join formatted fields with a delimiter, preserving order.

        Examples:
            >>> d = Date(10, 11, 2002)
            >>> d.join_formats(
            ...     [d.format_year(4), d.format_day(2), d.format_month(4), d.format_day(4)]
            ... )
            '2002-10-November-Sun'
        """
        return _fields.join_formats(parts, delimiter)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(1, 4, 2023).to_iso_format()
            '2023-04-01'
        """
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check equality of day, month and year with another date.

        The year window is not part of the comparison.
        """
        if not isinstance(other, Date):
            return NotImplemented
        return (self._day, self._month, self._year) == (
            other._day,
            other._month,
            other._year,
        )

    # Mutable, so unhashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a string like 'Date(1, 4, 2023)'."""
        return f"Date({self._day}, {self._month}, {self._year})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["Date"]
