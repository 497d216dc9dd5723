"""Tests for the lexical rules: numbers, calendar and clock fields, units."""

import pytest

from timelang.domain.primitives import (
    AmPm,
    DayOfMonth,
    Hour12,
    Hour24,
    Minute,
    Month,
    Number,
    TimeUnit,
    Weekday,
    Year,
)
from timelang.grammar import (
    parse_am_pm,
    parse_day_of_month,
    parse_hour,
    parse_minute,
    parse_month,
    parse_number,
    parse_time_unit,
    parse_weekday,
    parse_year,
)
from timelang.grammar.errors import ParseError


class TestNumber:
    def test_plain(self) -> None:
        assert parse_number("42") == Number(42)

    def test_leading_zeros(self) -> None:
        assert parse_number("007") == Number(7)

    def test_surrounding_space(self) -> None:
        assert parse_number("  3 ") == Number(3)

    @pytest.mark.parametrize("text", ["-1", "1.5", "three", "", "1 2"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_number(text)


class TestCalendarFields:
    def test_year(self) -> None:
        assert parse_year("2025") == Year(2025)

    def test_day_bounds(self) -> None:
        assert parse_day_of_month("1") == DayOfMonth(1)
        assert parse_day_of_month("31") == DayOfMonth(31)

    @pytest.mark.parametrize("text", ["0", "32"])
    def test_day_out_of_range(self, text: str) -> None:
        with pytest.raises(ParseError, match="day must be between 1 and 31"):
            parse_day_of_month(text)

    def test_month_name_case_insensitive(self) -> None:
        assert parse_month("april") == Month.APRIL
        assert parse_month("DECEMBER") == Month.DECEMBER

    @pytest.mark.parametrize("text", ["apr", "4", "Aprill"])
    def test_month_full_names_only(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_month(text)


class TestClockFields:
    def test_hour24(self) -> None:
        assert parse_hour("0") == Hour24(0)
        assert parse_hour("23") == Hour24(23)

    def test_hour12(self) -> None:
        assert parse_hour("12 am") == Hour12(12, AmPm.AM)
        assert parse_hour("7 PM") == Hour12(7, AmPm.PM)

    def test_hour24_out_of_range(self) -> None:
        with pytest.raises(ParseError, match="between 0 and 23"):
            parse_hour("24")

    @pytest.mark.parametrize("text", ["0 AM", "13 PM"])
    def test_hour12_out_of_range(self, text: str) -> None:
        with pytest.raises(ParseError, match="between 1 and 12"):
            parse_hour(text)

    def test_minute(self) -> None:
        assert parse_minute("59") == Minute(59)
        with pytest.raises(ParseError):
            parse_minute("60")

    def test_am_pm(self) -> None:
        assert parse_am_pm("pm") is AmPm.PM
        with pytest.raises(ParseError):
            parse_am_pm("a.m.")


class TestWords:
    def test_weekday(self) -> None:
        assert parse_weekday("Tuesday") is Weekday.TUESDAY
        assert parse_weekday("SUNDAY") is Weekday.SUNDAY

    def test_weekday_abbreviation_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse_weekday("tue")

    @pytest.mark.parametrize(
        ("text", "unit"),
        [
            ("year", TimeUnit.YEARS),
            ("yrs", TimeUnit.YEARS),
            ("Months", TimeUnit.MONTHS),
            ("week", TimeUnit.WEEKS),
            ("days", TimeUnit.DAYS),
            ("hr", TimeUnit.HOURS),
            ("minute", TimeUnit.MINUTES),
            ("mins", TimeUnit.MINUTES),
        ],
    )
    def test_time_unit(self, text: str, unit: TimeUnit) -> None:
        assert parse_time_unit(text) is unit

    def test_unknown_unit(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_time_unit("fortnight")
        assert "days" in exc_info.value.expected
