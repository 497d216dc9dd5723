"""Relative time rules — named idioms, next/last weekdays, directional offsets.

Tried in a fixed priority: named idioms first, so ``now`` is never read
as the start of a duration; then ``next``/``last``; then the general
``<duration> <direction>`` form.
"""

from __future__ import annotations

from timelang.domain.nodes import (
    AGO,
    FROM_NOW,
    Directional,
    DirectionKind,
    Last,
    NamedRelativeTime,
    Next,
    TimeDirection,
)
from timelang.grammar.absolute import absolute_time
from timelang.grammar.cursor import (
    Cursor,
    Failure,
    Match,
    fail,
    first_of,
    keyword,
    merge_hints,
    phrase,
    word,
)
from timelang.grammar.duration import duration
from timelang.grammar.primitives import weekday

_SINGLE_WORD: dict[str, NamedRelativeTime] = {
    "now": NamedRelativeTime.NOW,
    "today": NamedRelativeTime.TODAY,
    "tomorrow": NamedRelativeTime.TOMORROW,
    "yesterday": NamedRelativeTime.YESTERDAY,
}

# "day <relation> <target>" idioms, with an optional leading "the".
_DAY_IDIOMS: dict[tuple[str, str], NamedRelativeTime] = {
    ("after", "tomorrow"): NamedRelativeTime.DAY_AFTER_TOMORROW,
    ("before", "yesterday"): NamedRelativeTime.DAY_BEFORE_YESTERDAY,
}

_CONNECTIVES = ("ago", "from", "after", "before")


def named_relative_time(cur: Cursor) -> Match[NamedRelativeTime] | Failure:
    first = word(cur, "named time")
    if first and first.value in _SINGLE_WORD:
        return first.map(_SINGLE_WORD.__getitem__)
    rest = cur
    if first and first.value == "the":
        rest = first.rest
    day = keyword(rest, "day", construct="named time")
    if not day:
        expected = (*(f"'{w}'" for w in _SINGLE_WORD), "'the'", "'day'")
        return fail(cur, "named time", *expected) if rest is cur else day
    relation = keyword(day.rest, "after", "before", construct="named time")
    if not relation:
        return relation
    target = "tomorrow" if relation.value == "after" else "yesterday"
    end = keyword(relation.rest, target, construct="named time")
    if not end:
        return end
    return end.map(lambda _: _DAY_IDIOMS[(relation.value, target)])


def next_or_last(cur: Cursor) -> Match[Next | Last] | Failure:
    """``next <weekday>`` or ``last <weekday>``."""
    lead = keyword(cur, "next", "last", construct="relative time")
    if not lead:
        return lead
    day = weekday(lead.rest)
    if not day:
        return day
    node = Next(day.value) if lead.value == "next" else Last(day.value)
    return day.map(lambda _: node)


_anchor = first_of("anchor", absolute_time, named_relative_time, next_or_last)


def time_direction(cur: Cursor) -> Match[TimeDirection] | Failure:
    """``ago``, ``from now``, or ``after``/``before`` followed by an anchor."""
    lead = keyword(cur, *_CONNECTIVES, construct="direction")
    if not lead:
        return lead
    if lead.value == "ago":
        return lead.map(lambda _: AGO)
    if lead.value == "from":
        now = phrase(lead.rest, "now", construct="direction")
        return now.map(lambda _: FROM_NOW) if now else now
    kind = DirectionKind(lead.value)
    anchor = _anchor(lead.rest)
    if not anchor:
        return anchor
    return Match(TimeDirection(kind, anchor.value), anchor.rest, anchor.hint)


def follows_direction(cur: Cursor) -> bool:
    """Whether a directional connective comes next (lookahead only)."""
    return bool(keyword(cur, *_CONNECTIVES))


def directional(cur: Cursor) -> Match[Directional] | Failure:
    amount = duration(cur)
    if not amount:
        return amount
    direction = time_direction(amount.rest)
    if not direction:
        return merge_hints(direction, amount)
    return Match(Directional(amount.value, direction.value), direction.rest, direction.hint)


relative_time = first_of("relative time", named_relative_time, next_or_last, directional)
