"""Top-level dispatch — points in time, ranges, and whole expressions.

``time_expression`` tries, in order:

1. a range (``from A to B``),
2. a bare duration, but only when no directional connective follows it,
3. a single point in time.

Step 2's lookahead is what keeps ``2 hours after now`` from being read
as the duration ``2 hours`` with trailing text: the duration form
steps aside and the directional grammar under step 3 takes the input.
"""

from __future__ import annotations

from timelang.domain.nodes import Duration, PointInTime, TimeRange
from timelang.grammar.absolute import absolute_time
from timelang.grammar.cursor import Cursor, Failure, Match, fail, first_of, keyword, merge_hints
from timelang.grammar.duration import duration
from timelang.grammar.relative import follows_direction, relative_time

_absolute_first = first_of("point in time", absolute_time, relative_time)
_relative_first = first_of("point in time", relative_time, absolute_time)


def point_in_time(cur: Cursor) -> Match[PointInTime] | Failure:
    """Absolute first when the input starts with a digit, relative otherwise.

    Both alternatives are always attempted; the order only decides
    which one is tried first.
    """
    if cur.peek().isdigit():
        return _absolute_first(cur)
    return _relative_first(cur)


def time_range(cur: Cursor) -> Match[TimeRange] | Failure:
    """``from <point in time> to <point in time>``; start may follow end."""
    lead = keyword(cur, "from", construct="time range")
    if not lead:
        return lead
    start = point_in_time(lead.rest)
    if not start:
        return start
    to = keyword(start.rest, "to", construct="time range")
    if not to:
        return merge_hints(to, start)
    end = point_in_time(to.rest)
    if not end:
        return end
    return Match(TimeRange(start.value, end.value), end.rest, end.hint)


def bare_duration(cur: Cursor) -> Match[Duration] | Failure:
    """A duration that is not the start of a directional relative time."""
    result = duration(cur)
    if not result:
        return result
    if follows_direction(result.rest):
        return fail(result.rest, "duration", "end of duration")
    return result


time_expression = first_of("time expression", time_range, bare_duration, point_in_time)
