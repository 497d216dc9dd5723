"""Grammar layer — turns text into AST nodes.

One ``parse_*`` function per node type. Each requires the whole input
(ignoring surrounding whitespace) to match and raises
:class:`~timelang.grammar.errors.ParseError` otherwise.
:func:`try_parse` returns the raw ``Match``/``Failure`` instead.
"""

from __future__ import annotations

from typing import Any

from timelang.domain import nodes
from timelang.domain import primitives as prim
from timelang.grammar import absolute, duration, expression, relative
from timelang.grammar import primitives as lexical
from timelang.grammar.cursor import Cursor, Failure, Match, Rule, end_of_input
from timelang.grammar.errors import ParseError

# Node type (or alias) -> (rule, construct name used in failures).
RULES: dict[Any, tuple[Rule, str]] = {
    nodes.TimeExpression: (expression.time_expression, "time expression"),
    nodes.PointInTime: (expression.point_in_time, "point in time"),
    nodes.TimeRange: (expression.time_range, "time range"),
    nodes.Duration: (duration.duration, "duration"),
    nodes.RelativeTime: (relative.relative_time, "relative time"),
    nodes.Directional: (relative.directional, "relative time"),
    nodes.TimeDirection: (relative.time_direction, "direction"),
    nodes.NamedRelativeTime: (relative.named_relative_time, "named time"),
    nodes.AbsoluteTime: (absolute.absolute_time, "absolute time"),
    nodes.DateTime: (absolute.date_time, "date-time"),
    nodes.Date: (absolute.date, "date"),
    nodes.Time: (absolute.time, "time"),
    prim.Number: (lexical.number, "number"),
    prim.Year: (lexical.year, "year"),
    prim.Month: (lexical.month_name, "month"),
    prim.DayOfMonth: (lexical.day_of_month, "day of month"),
    prim.Hour: (lexical.hour, "hour"),
    prim.Minute: (lexical.minute, "minute"),
    prim.AmPm: (lexical.am_pm, "AM/PM"),
    prim.Weekday: (lexical.weekday, "weekday"),
    prim.TimeUnit: (lexical.time_unit, "time unit"),
}

# CLI-facing names for the node types above.
NODE_NAMES: dict[str, Any] = {
    "expression": nodes.TimeExpression,
    "point": nodes.PointInTime,
    "range": nodes.TimeRange,
    "duration": nodes.Duration,
    "relative": nodes.RelativeTime,
    "direction": nodes.TimeDirection,
    "named": nodes.NamedRelativeTime,
    "absolute": nodes.AbsoluteTime,
    "datetime": nodes.DateTime,
    "date": nodes.Date,
    "time": nodes.Time,
    "number": prim.Number,
    "year": prim.Year,
    "month": prim.Month,
    "day": prim.DayOfMonth,
    "hour": prim.Hour,
    "minute": prim.Minute,
    "ampm": prim.AmPm,
    "weekday": prim.Weekday,
    "unit": prim.TimeUnit,
}


def resolve_node(node: Any) -> Any:
    """Accept a node type or its CLI name; raise KeyError if unknown."""
    if isinstance(node, str):
        return NODE_NAMES[node]
    if node not in RULES:
        raise KeyError(node)
    return node


def try_parse(text: str, node: Any = nodes.TimeExpression) -> Match[Any] | Failure:
    """Parse all of *text* as *node* without raising."""
    rule, construct = RULES[resolve_node(node)]
    result = rule(Cursor(text))
    if not result:
        return result
    return end_of_input(result, construct)


def parse(text: str, node: Any = nodes.TimeExpression) -> Any:
    """Parse all of *text* as *node*, raising ParseError on failure."""
    result = try_parse(text, node)
    if not result:
        raise ParseError(text, result)
    return result.value


def parse_time_expression(text: str) -> nodes.TimeExpression:
    return parse(text, nodes.TimeExpression)


def parse_point_in_time(text: str) -> nodes.PointInTime:
    return parse(text, nodes.PointInTime)


def parse_time_range(text: str) -> nodes.TimeRange:
    return parse(text, nodes.TimeRange)


def parse_duration(text: str) -> nodes.Duration:
    return parse(text, nodes.Duration)


def parse_relative_time(text: str) -> nodes.RelativeTime:
    return parse(text, nodes.RelativeTime)


def parse_time_direction(text: str) -> nodes.TimeDirection:
    return parse(text, nodes.TimeDirection)


def parse_named_relative_time(text: str) -> nodes.NamedRelativeTime:
    return parse(text, nodes.NamedRelativeTime)


def parse_absolute_time(text: str) -> nodes.AbsoluteTime:
    return parse(text, nodes.AbsoluteTime)


def parse_date_time(text: str) -> nodes.DateTime:
    return parse(text, nodes.DateTime)


def parse_date(text: str) -> nodes.Date:
    return parse(text, nodes.Date)


def parse_time(text: str) -> nodes.Time:
    return parse(text, nodes.Time)


def parse_number(text: str) -> prim.Number:
    return parse(text, prim.Number)


def parse_year(text: str) -> prim.Year:
    return parse(text, prim.Year)


def parse_month(text: str) -> prim.Month:
    return parse(text, prim.Month)


def parse_day_of_month(text: str) -> prim.DayOfMonth:
    return parse(text, prim.DayOfMonth)


def parse_hour(text: str) -> prim.Hour:
    return parse(text, prim.Hour)


def parse_minute(text: str) -> prim.Minute:
    return parse(text, prim.Minute)


def parse_am_pm(text: str) -> prim.AmPm:
    return parse(text, prim.AmPm)


def parse_weekday(text: str) -> prim.Weekday:
    return parse(text, prim.Weekday)


def parse_time_unit(text: str) -> prim.TimeUnit:
    return parse(text, prim.TimeUnit)
