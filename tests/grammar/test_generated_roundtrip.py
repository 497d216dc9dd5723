"""Render-then-parse over randomly built ASTs, not just hand-written text."""

from __future__ import annotations

import random
from typing import Any

import pytest

from timelang.domain.nodes import (
    AGO,
    FROM_NOW,
    Date,
    DateTime,
    Directional,
    Duration,
    Last,
    NamedRelativeTime,
    Next,
    Time,
    TimeDirection,
    TimeRange,
)
from timelang.domain.primitives import (
    AmPm,
    DayOfMonth,
    Hour12,
    Hour24,
    Minute,
    Month,
    TimeUnit,
    Weekday,
    Year,
    days_in_month,
)
from timelang.domain.render import RenderOptions, render
from timelang.grammar import parse

SEEDS = range(40)
PER_SEED = 25


def _date(rng: random.Random) -> Date:
    month = rng.randint(1, 12)
    year = rng.choice([1900, 2000, 2023, 2024, rng.randint(0, 9999)])
    day = rng.randint(1, days_in_month(month, year))
    return Date(Month(month), DayOfMonth(day), Year(year))


def _time(rng: random.Random) -> Time:
    if rng.random() < 0.5:
        hour: Hour24 | Hour12 = Hour24(rng.randint(0, 23))
    else:
        hour = Hour12(rng.randint(1, 12), rng.choice(list(AmPm)))
    return Time(hour, Minute(rng.randint(0, 59)))


def _absolute(rng: random.Random) -> Date | Time | DateTime:
    return rng.choice([_date, _time, lambda r: DateTime(_date(r), _time(r))])(rng)


def _duration(rng: random.Random) -> Duration:
    units = rng.sample(list(TimeUnit), rng.randint(1, len(TimeUnit)))
    return Duration.of(**{unit.value: rng.choice([0, 1, 2, rng.randint(3, 500)]) for unit in units})


def _weekday_relative(rng: random.Random) -> Next | Last:
    return rng.choice([Next, Last])(rng.choice(list(Weekday)))


def _anchor(rng: random.Random) -> Any:
    return rng.choice(
        [_absolute, lambda r: r.choice(list(NamedRelativeTime)), _weekday_relative]
    )(rng)


def _direction(rng: random.Random) -> TimeDirection:
    kind = rng.randrange(4)
    if kind == 0:
        return AGO
    if kind == 1:
        return FROM_NOW
    build = TimeDirection.after if kind == 2 else TimeDirection.before
    return build(_anchor(rng))


def _point(rng: random.Random) -> Any:
    return rng.choice(
        [
            _absolute,
            lambda r: r.choice(list(NamedRelativeTime)),
            _weekday_relative,
            lambda r: Directional(_duration(r), _direction(r)),
        ]
    )(rng)


def _expression(rng: random.Random) -> Any:
    return rng.choice([_point, _duration, lambda r: TimeRange(_point(r), _point(r))])(rng)


def _values(seed: int) -> list[Any]:
    rng = random.Random(seed)
    return [_expression(rng) for _ in range(PER_SEED)]


class TestGeneratedRoundTrip:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_default_rendering(self, seed: int) -> None:
        for value in _values(seed):
            assert parse(render(value)) == value, render(value)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_oxford_comma_rendering(self, seed: int) -> None:
        options = RenderOptions(oxford_comma=True)
        for value in _values(seed):
            assert parse(render(value, options)) == value, render(value, options)

    @pytest.mark.parametrize("seed", range(10))
    def test_clock_conversion_reparses_to_converted_time(self, seed: int) -> None:
        rng = random.Random(seed)
        for _ in range(PER_SEED):
            time = _time(rng)
            assert parse(render(time, RenderOptions(clock="24h")), Time) == time.to_24h()
            assert parse(render(time, RenderOptions(clock="12h")), Time) == time.to_12h()
