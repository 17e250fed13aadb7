"""Tests for month-grid calendars."""

from __future__ import annotations

import pytest

from almanac import Date
from almanac.format import calendar_array2d, calendar_dict, calendar_weeks, render_calendar


class TestCalendarDict:
    """Tests for get_calendar_dict()."""

    def test_always_42_slots(self) -> None:
        """Every month has 42 slots keyed 0-41."""
        for month in range(1, 13):
            slots = Date(1, month, 2023).get_calendar_dict()
            assert sorted(slots) == list(range(42))

    def test_april_2023_first_day(self) -> None:
        """April 1 2023 sits in slot 5 of row 0, ISO week 13, Saturday."""
        slots = Date(1, 1, 2000).get_calendar_dict(4, 2023)
        assert slots[5] == {"day": 1, "row": 0, "week": 13, "weekday": 5}

    def test_empty_slots(self) -> None:
        """Slots outside the month are empty records."""
        slots = calendar_dict(2023, 4)
        assert all(slots[i] == {} for i in range(5))
        assert all(slots[i] == {} for i in range(35, 42))

    def test_populated_slots_are_consecutive(self) -> None:
        """Days run 1..n through consecutive slots."""
        slots = calendar_dict(2024, 2)
        days = [slot["day"] for slot in slots.values() if slot]
        assert days == list(range(1, 30))

    def test_rows_and_weekdays(self) -> None:
        """Row is slot // 7 and weekday is slot % 7."""
        for index, slot in calendar_dict(2023, 10).items():
            if slot:
                assert slot["row"] == index // 7
                assert slot["weekday"] == index % 7

    def test_month_starting_monday_uses_slot_zero(self) -> None:
        """May 1 2023 was a Monday."""
        assert calendar_dict(2023, 5)[0]["day"] == 1

    def test_month_needing_six_rows(self) -> None:
        """July 2023 starts on Saturday and spills into row 5."""
        slots = calendar_dict(2023, 7)
        assert slots[35] == {"day": 31, "row": 5, "week": 31, "weekday": 0}

    def test_week_numbers_cross_year(self) -> None:
        """January 1 2021 is shown in week 53."""
        slots = calendar_dict(2021, 1)
        assert slots[4] == {"day": 1, "row": 0, "week": 53, "weekday": 4}

    def test_arguments_clamped(self) -> None:
        """Month 13 is treated as December."""
        d = Date(1, 1, 2023)
        assert d.get_calendar_dict(13) == calendar_dict(2023, 12)


class TestCalendarArray2D:
    """Tests for get_calendar_array2d()."""

    def test_april_2023(self) -> None:
        """First row is padded, last row is blank."""
        rows = Date(1, 4, 2023).get_calendar_array2d()
        assert len(rows) == 6
        assert all(len(row) == 7 for row in rows)
        assert rows[0] == ["  ", "  ", "  ", "  ", "  ", "01", "02"]
        assert rows[1] == ["03", "04", "05", "06", "07", "08", "09"]
        assert rows[4] == ["24", "25", "26", "27", "28", "29", "30"]
        assert rows[5] == ["  "] * 7

    def test_pure_function_agrees(self) -> None:
        """The Date method delegates to calendar_array2d."""
        assert Date(1, 1, 2000).get_calendar_array2d(4, 2023) == calendar_array2d(2023, 4)


class TestCalendarWeeks:
    """Tests for get_calendar_weeks()."""

    def test_april_2023(self) -> None:
        """One ISO week per populated row."""
        assert Date(1, 4, 2023).get_calendar_weeks() == ["13", "14", "15", "16", "17", ""]

    def test_january_2021(self) -> None:
        """The first row belongs to the previous ISO year."""
        assert calendar_weeks(2021, 1) == ["53", "1", "2", "3", "4", ""]


class TestRenderCalendar:
    """Tests for render_calendar() and print_calendar_array2d()."""

    def test_layout(self) -> None:
        """Title, header and six rows."""
        lines = render_calendar(2023, 4).split("\n")
        assert len(lines) == 8
        assert lines[0] == "     April 2023"
        assert lines[1] == "Mo Tu We Th Fr Sa Su"
        assert lines[2] == "               01 02"
        assert lines[6] == "24 25 26 27 28 29 30"
        assert lines[7] == " " * 20

    def test_show_weeks(self) -> None:
        """Week numbers prefix each row."""
        lines = render_calendar(2023, 4, show_weeks=True).split("\n")
        assert lines[1] == "   Mo Tu We Th Fr Sa Su"
        assert lines[2] == "13                01 02"
        assert lines[3] == "14 03 04 05 06 07 08 09"
        assert lines[7].strip() == ""

    def test_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        """print_calendar_array2d prints the rendering."""
        Date(1, 4, 2023).print_calendar_array2d()
        out = capsys.readouterr().out
        assert out == render_calendar(2023, 4) + "\n"
