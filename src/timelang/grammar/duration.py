"""Duration rule — ``<number> <unit>`` pairs joined by ``,``, ``and`` or spaces.

Units are collected by name, not position, so ``2 hours, 30 minutes``
and ``30 minutes, 2 hours`` are the same Duration. Naming a unit twice
is a failure rather than a sum: "2 hours, 3 hours" is more likely a
typo than an intent.
"""

from __future__ import annotations

from dataclasses import replace

from timelang.domain.nodes import Duration
from timelang.domain.primitives import Number, TimeUnit
from timelang.grammar.cursor import Cursor, Failure, Match, keyword, symbol
from timelang.grammar.primitives import number, time_unit


def _pair(cur: Cursor) -> Match[tuple[TimeUnit, Number]] | Failure:
    amount = number(cur)
    if not amount:
        return replace(amount, construct="duration")
    unit = time_unit(amount.rest)
    if not unit:
        return replace(unit, construct="duration")
    return Match((unit.value, amount.value), unit.rest)


def _separator(cur: Cursor) -> Cursor:
    """Skip an optional ``,`` then an optional ``and``."""
    comma = symbol(cur, ",", "duration")
    if comma:
        cur = comma.rest
    conjunction = keyword(cur, "and", construct="duration")
    return conjunction.rest if conjunction else cur


def duration(cur: Cursor) -> Match[Duration] | Failure:
    first = _pair(cur)
    if not first:
        return first
    unit, amount = first.value
    units: dict[TimeUnit, Number] = {unit: amount}
    rest = first.rest
    while True:
        start = _separator(rest)
        nxt = _pair(start)
        if not nxt:
            # A dangling separator is not consumed; the caller rejects it.
            hint = nxt
            break
        unit, amount = nxt.value
        if unit in units:
            return Failure(
                start.skip_space().pos,
                "duration",
                ("a unit not already given",),
                reason=f"duplicate unit '{unit.value}' in duration",
            )
        units[unit] = amount
        rest = nxt.rest
    value = Duration(**{u.value: n for u, n in units.items()})
    return Match(value, rest, hint)
