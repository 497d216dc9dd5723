"""Lexical rules — numbers, calendar and clock fields, weekdays, units.

Range checks happen here, before any node is constructed, so an
out-of-range field is a parse failure at that field's position.
"""

from __future__ import annotations

from collections.abc import Callable

from timelang.domain.primitives import (
    UNIT_KEYWORDS,
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
    check_day,
    check_hour12,
    check_hour24,
    check_minute,
    check_month_number,
)
from timelang.grammar.cursor import Cursor, Failure, Match, digits, fail, keyword, word

_MONTH_NAMES: dict[str, Month] = {m.name.lower(): m for m in Month}
_WEEKDAY_NAMES: dict[str, Weekday] = {d.value: d for d in Weekday}


def _integer(
    cur: Cursor, construct: str, check: Callable[[int], str | None] | None = None
) -> Match[int] | Failure:
    """Digit run as an int, optionally validated by a ``check_*`` helper."""
    result = digits(cur, construct)
    if not result:
        return result
    value = int(result.value)
    if check is not None:
        error = check(value)
        if error:
            return fail(cur, construct, reason=error, reach=result.rest)
    return result.map(lambda _: value)


def number(cur: Cursor) -> Match[Number] | Failure:
    result = _integer(cur, "number")
    return result.map(Number) if result else result


def year(cur: Cursor) -> Match[Year] | Failure:
    result = _integer(cur, "year")
    return result.map(Year) if result else result


def day_of_month(cur: Cursor) -> Match[DayOfMonth] | Failure:
    result = _integer(cur, "day of month", check_day)
    return result.map(DayOfMonth) if result else result


def month_number(cur: Cursor) -> Match[Month] | Failure:
    """Numeric month (1-12), only valid inside a slash-separated date."""
    result = _integer(cur, "month", check_month_number)
    return result.map(Month) if result else result


def month_name(cur: Cursor) -> Match[Month] | Failure:
    """Full month name, case-insensitive (``April``)."""
    result = word(cur, "month")
    if result and result.value in _MONTH_NAMES:
        return result.map(_MONTH_NAMES.__getitem__)
    return fail(cur, "month", "month name")


def minute(cur: Cursor) -> Match[Minute] | Failure:
    result = _integer(cur, "minute", check_minute)
    return result.map(Minute) if result else result


def am_pm(cur: Cursor) -> Match[AmPm] | Failure:
    result = keyword(cur, "am", "pm", construct="AM/PM")
    return result.map(lambda w: AmPm(w.upper())) if result else result


def hour(cur: Cursor) -> Match[Hour24 | Hour12] | Failure:
    """``N AM``/``N PM`` as a 12-hour hour, bare ``N`` as a 24-hour hour."""
    value = _integer(cur, "hour")
    if not value:
        return value
    marker = am_pm(value.rest)
    if marker:
        error = check_hour12(value.value)
        if error:
            return fail(cur, "hour", reason=error, reach=marker.rest)
        return Match(Hour12(value.value, marker.value), marker.rest)
    error = check_hour24(value.value)
    if error:
        return fail(cur, "hour", reason=error, reach=value.rest)
    return value.map(Hour24)


def weekday(cur: Cursor) -> Match[Weekday] | Failure:
    """Full weekday name, case-insensitive (``Tuesday``)."""
    result = word(cur, "weekday")
    if result and result.value in _WEEKDAY_NAMES:
        return result.map(_WEEKDAY_NAMES.__getitem__)
    return fail(cur, "weekday", "weekday")


def time_unit(cur: Cursor) -> Match[TimeUnit] | Failure:
    result = word(cur, "time unit")
    if result and result.value in UNIT_KEYWORDS:
        return result.map(UNIT_KEYWORDS.__getitem__)
    return fail(cur, "time unit", *(u.value for u in TimeUnit))
