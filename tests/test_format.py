"""Tests for length-coded field formatting."""

from __future__ import annotations

import pytest

from almanac import Date, FormatError
from almanac.format import format_length, join_formats


class TestFormatLength:
    """Tests for format code normalization."""

    def test_text_is_measured(self) -> None:
        """Text codes use their length."""
        assert format_length("") == 0
        assert format_length("yyyy") == 4
        assert format_length("12") == 2

    def test_integers_pass_through(self) -> None:
        """Integer codes are the length."""
        assert format_length(3) == 3
        assert format_length(3.9) == 3  # type: ignore[arg-type]

    @pytest.mark.parametrize("bad", [None, object(), [1, 2]])
    def test_unusable_code_raises(self, bad: object) -> None:
        """Codes that are neither text nor integer-coercible raise FormatError."""
        with pytest.raises(FormatError, match="format must be text or an integer"):
            format_length(bad)  # type: ignore[arg-type]


class TestFormatDay:
    """Tests for format_day()."""

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (1, "10"),
            (2, "10"),
            (3, "Su"),
            (4, "Sun"),
            (5, "Sunday"),
            (0, "Sunday"),
            ("d", "10"),
            ("ddd", "Su"),
            ("dddd", "Sun"),
            ("ddddddd", "Sunday"),
        ],
    )
    def test_table(self, fmt: str | int, expected: str) -> None:
        """Each length selects its rendering (2002-11-10 was a Sunday)."""
        assert Date(10, 11, 2002).format_day(fmt) == expected

    def test_zero_padding(self) -> None:
        """Length 2 pads single-digit days."""
        d = Date(7, 5, 2023)
        assert d.format_day(1) == "7"
        assert d.format_day("dd") == "07"

    def test_explicit_date(self) -> None:
        """Arguments override the current fields."""
        d = Date(10, 11, 2002)
        assert d.format_day(5, 1, 1, 2000) == "Saturday"
        assert d.format_day(2, 3) == "03"
        assert d.format_day(4, 3) == "Sun"  # 2002-11-03


class TestFormatMonth:
    """Tests for format_month()."""

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (1, "1"),
            (2, "01"),
            (3, "Jan"),
            ("mmm", "Jan"),
            ("XyZ", "Jan"),
            (4, "January"),
            ("mmmm", "January"),
            ("XyZW", "January"),
            (0, "January"),
        ],
    )
    def test_table(self, fmt: str | int, expected: str) -> None:
        """Three distinct branches plus the full-name fallback."""
        assert Date(1, 1, 2023).format_month(fmt) == expected

    def test_explicit_month_clamped(self) -> None:
        """Month arguments are clamped."""
        d = Date(1, 1, 2023)
        assert d.format_month(4, 11) == "November"
        assert d.format_month(2, 42) == "12"

    def test_asymmetry_with_format_day(self) -> None:
        """Length 4 is an abbreviation for days but the full name for months."""
        d = Date(1, 9, 2023)  # a Friday
        assert d.format_day(4) == "Fri"
        assert d.format_month(4) == "September"


class TestFormatYear:
    """Tests for format_year()."""

    def test_full_year(self) -> None:
        """Length 4 and above give the full year."""
        d = Date(1, 1, 2002)
        assert d.format_year(4) == "2002"
        assert d.format_year("yyyyyy") == "2002"

    def test_two_digit_year(self) -> None:
        """Shorter codes give the last two digits."""
        d = Date(1, 1, 2002)
        assert d.format_year(2) == "02"
        assert d.format_year("y") == "02"
        assert d.format_year(3, 1999) == "99"
        assert d.format_year(2, 2100) == "00"


class TestJoinFormats:
    """Tests for join_formats()."""

    def test_documented_example(self) -> None:
        """Test the year-day-month-weekday combination."""
        d = Date(10, 11, 2002)
        joined = d.join_formats(
            [d.format_year(4), d.format_day(2), d.format_month(4), d.format_day(4)]
        )
        assert joined == "2002-10-November-Sun"

    def test_custom_delimiter(self) -> None:
        """The delimiter is configurable."""
        d = Date(1, 4, 2023)
        parts = [d.format_day(2), d.format_month(2), d.format_year(4)]
        assert d.join_formats(parts, "/") == "01/04/2023"
        assert join_formats(parts, "") == "01042023"

    def test_empty_and_single(self) -> None:
        """Edge sizes join naturally."""
        assert join_formats([]) == ""
        assert join_formats(["only"]) == "only"
