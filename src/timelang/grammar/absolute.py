"""Absolute time rules — ``D/M/Y`` dates, ``H:MM [AM|PM]`` times, date-times."""

from __future__ import annotations

from dataclasses import replace

from timelang.domain.nodes import Date, DateTime, Time
from timelang.domain.primitives import (
    Hour12,
    Hour24,
    Minute,
    check_calendar_day,
    check_hour12,
    check_hour24,
    check_minute,
)
from timelang.grammar.cursor import (
    Cursor,
    Failure,
    Match,
    digits,
    fail,
    first_of,
    keyword,
    merge_hints,
    symbol,
)
from timelang.grammar.primitives import am_pm, day_of_month, month_number, year


def date(cur: Cursor) -> Match[Date] | Failure:
    """Day-first ``D/M/Y``, validated against the month and year."""
    day = day_of_month(cur)
    if not day:
        return replace(day, construct="date")
    slash = symbol(day.rest, "/", "date")
    if not slash:
        return slash
    month = month_number(slash.rest)
    if not month:
        return replace(month, construct="date")
    slash = symbol(month.rest, "/", "date")
    if not slash:
        return slash
    yr = year(slash.rest)
    if not yr:
        return replace(yr, construct="date")
    error = check_calendar_day(day.value.value, int(month.value), yr.value.value)
    if error:
        return fail(cur, "date", reason=error, reach=yr.rest)
    return Match(Date(month.value, day.value, yr.value), yr.rest)


def time(cur: Cursor) -> Match[Time] | Failure:
    """``H:MM`` as a 24-hour time, or ``H:MM AM|PM`` as a 12-hour time."""
    hour = digits(cur, "time")
    if not hour:
        return hour
    colon = symbol(hour.rest, ":", "time")
    if not colon:
        return colon
    mins = digits(colon.rest, "time")
    if not mins:
        return mins
    if len(mins.value) != 2:
        return fail(colon.rest, "time", "two-digit minute")
    error = check_minute(int(mins.value))
    if error:
        return fail(colon.rest, "time", reason=error, reach=mins.rest)
    minute = Minute(int(mins.value))
    hour_value = int(hour.value)

    marker = am_pm(mins.rest)
    if marker:
        error = check_hour12(hour_value)
        if error:
            return fail(cur, "time", reason=error, reach=marker.rest)
        return Match(Time(Hour12(hour_value, marker.value), minute), marker.rest)
    error = check_hour24(hour_value)
    if error:
        return fail(cur, "time", reason=error, reach=mins.rest)
    return Match(Time(Hour24(hour_value), minute), mins.rest)


def date_time(cur: Cursor) -> Match[DateTime] | Failure:
    """A date followed by a time, joined by an optional ``at``."""
    day = date(cur)
    if not day:
        return day
    at = keyword(day.rest, "at", construct="date-time")
    clock = time(at.rest if at else day.rest)
    if not clock:
        failure = replace(clock, construct="date-time")
        if not at:
            failure = failure.merge(at)
        return merge_hints(failure, day)
    return Match(DateTime(day.value, clock.value), clock.rest)


# Date is a strict prefix of DateTime, so the longer form goes first.
absolute_time = first_of("absolute time", date_time, date, time)
