"""Tests for named idioms, next/last weekdays and directional offsets."""

import pytest

from timelang.domain.nodes import (
    AGO,
    FROM_NOW,
    Date,
    DateTime,
    Directional,
    DirectionKind,
    Duration,
    Last,
    NamedRelativeTime,
    Next,
    Time,
    TimeDirection,
)
from timelang.domain.primitives import AmPm, Hour12, Minute, Weekday
from timelang.grammar import (
    parse_named_relative_time,
    parse_relative_time,
    parse_time_direction,
)
from timelang.grammar.errors import ParseError


class TestNamedRelativeTime:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("now", NamedRelativeTime.NOW),
            ("Today", NamedRelativeTime.TODAY),
            ("tomorrow", NamedRelativeTime.TOMORROW),
            ("yesterday", NamedRelativeTime.YESTERDAY),
            ("day after tomorrow", NamedRelativeTime.DAY_AFTER_TOMORROW),
            ("the day after tomorrow", NamedRelativeTime.DAY_AFTER_TOMORROW),
            ("the  day  before   yesterday", NamedRelativeTime.DAY_BEFORE_YESTERDAY),
        ],
    )
    def test_idioms(self, text: str, expected: NamedRelativeTime) -> None:
        assert parse_named_relative_time(text) is expected

    @pytest.mark.parametrize(
        "text", ["nowhere", "the now", "day after yesterday", "the day", "tonight"]
    )
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_named_relative_time(text)


class TestNextLast:
    def test_next(self) -> None:
        assert parse_relative_time("next tuesday") == Next(Weekday.TUESDAY)

    def test_last(self) -> None:
        assert parse_relative_time("LAST Wednesday") == Last(Weekday.WEDNESDAY)

    def test_missing_weekday_reported_after_keyword(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_relative_time("next week")
        assert exc_info.value.position == 5
        assert exc_info.value.expected == ("weekday",)


class TestTimeDirection:
    def test_ago(self) -> None:
        assert parse_time_direction("ago") == AGO

    def test_from_now(self) -> None:
        assert parse_time_direction("from now") == FROM_NOW

    def test_from_requires_now(self) -> None:
        with pytest.raises(ParseError):
            parse_time_direction("from tomorrow")

    def test_after_absolute(self) -> None:
        result = parse_time_direction("after 15/4/2025 at 9:27 AM")
        assert result.kind is DirectionKind.AFTER
        assert isinstance(result.anchor, DateTime)
        assert result.anchor.time == Time(Hour12(9, AmPm.AM), Minute(27))

    def test_before_named(self) -> None:
        result = parse_time_direction("before the day before yesterday")
        assert result == TimeDirection.before(NamedRelativeTime.DAY_BEFORE_YESTERDAY)

    def test_after_next(self) -> None:
        assert parse_time_direction("after next friday") == TimeDirection.after(Next(Weekday.FRIDAY))

    def test_before_last(self) -> None:
        assert parse_time_direction("before last monday") == TimeDirection.before(
            Last(Weekday.MONDAY)
        )

    def test_after_needs_anchor(self) -> None:
        with pytest.raises(ParseError):
            parse_time_direction("after")


class TestDirectional:
    def test_ago(self) -> None:
        assert parse_relative_time("3 days ago") == Directional(Duration.of(days=3), AGO)

    def test_from_now(self) -> None:
        result = parse_relative_time("2 hours and 30 minutes from now")
        assert result == Directional(Duration.of(hours=2, minutes=30), FROM_NOW)

    def test_after_date(self) -> None:
        result = parse_relative_time("1 week after 1/1/2021")
        assert isinstance(result, Directional)
        assert isinstance(result.direction.anchor, Date)
        assert result.direction.variant == "after_absolute"

    def test_after_now(self) -> None:
        result = parse_relative_time("2 hours after now")
        assert result == Directional(
            Duration.of(hours=2), TimeDirection.after(NamedRelativeTime.NOW)
        )

    def test_named_idiom_wins_over_duration(self) -> None:
        assert parse_relative_time("day after tomorrow") is NamedRelativeTime.DAY_AFTER_TOMORROW

    def test_duration_after_named_idiom(self) -> None:
        result = parse_relative_time("1 day after tomorrow")
        assert result == Directional(
            Duration.of(days=1), TimeDirection.after(NamedRelativeTime.TOMORROW)
        )

    def test_bare_duration_is_not_relative(self) -> None:
        with pytest.raises(ParseError):
            parse_relative_time("3 days")

    def test_no_nested_directions(self) -> None:
        with pytest.raises(ParseError):
            parse_relative_time("1 day after 2 days ago")
