"""timelang — parse and render human-readable time expressions.

    >>> from timelang import parse, render
    >>> expr = parse("5 days, 3 weeks after 15/4/2025 at 9:27 AM")
    >>> render(expr)
    '3 weeks and 5 days after 15/4/2025 at 9:27 AM'
"""

from __future__ import annotations

from timelang.domain.nodes import (
    AGO,
    FROM_NOW,
    AbsoluteTime,
    Date,
    DateTime,
    Directional,
    DirectionKind,
    Duration,
    Last,
    NamedRelativeTime,
    Next,
    PointInTime,
    RelativeTime,
    Time,
    TimeDirection,
    TimeExpression,
    TimeRange,
    expression_kind,
    is_absolute,
)
from timelang.domain.primitives import (
    AmPm,
    DayOfMonth,
    Hour,
    Hour12,
    Hour24,
    Minute,
    Month,
    Number,
    RelativeTimeUnit,
    TimeUnit,
    Weekday,
    Year,
)
from timelang.domain.render import RenderOptions, render
from timelang.grammar import (
    parse,
    parse_absolute_time,
    parse_am_pm,
    parse_date,
    parse_date_time,
    parse_day_of_month,
    parse_duration,
    parse_hour,
    parse_minute,
    parse_month,
    parse_named_relative_time,
    parse_number,
    parse_point_in_time,
    parse_relative_time,
    parse_time,
    parse_time_direction,
    parse_time_expression,
    parse_time_range,
    parse_time_unit,
    parse_weekday,
    parse_year,
    try_parse,
)
from timelang.grammar.errors import ParseError

__version__ = "0.1.0"

__all__ = [
    "AGO",
    "FROM_NOW",
    "AbsoluteTime",
    "AmPm",
    "Date",
    "DateTime",
    "DayOfMonth",
    "DirectionKind",
    "Directional",
    "Duration",
    "Hour",
    "Hour12",
    "Hour24",
    "Last",
    "Minute",
    "Month",
    "NamedRelativeTime",
    "Next",
    "Number",
    "ParseError",
    "PointInTime",
    "RelativeTime",
    "RelativeTimeUnit",
    "RenderOptions",
    "Time",
    "TimeDirection",
    "TimeExpression",
    "TimeRange",
    "TimeUnit",
    "Weekday",
    "Year",
    "__version__",
    "expression_kind",
    "is_absolute",
    "parse",
    "parse_absolute_time",
    "parse_am_pm",
    "parse_date",
    "parse_date_time",
    "parse_day_of_month",
    "parse_duration",
    "parse_hour",
    "parse_minute",
    "parse_month",
    "parse_named_relative_time",
    "parse_number",
    "parse_point_in_time",
    "parse_relative_time",
    "parse_time",
    "parse_time_direction",
    "parse_time_expression",
    "parse_time_range",
    "parse_time_unit",
    "parse_weekday",
    "parse_year",
    "render",
    "try_parse",
]
