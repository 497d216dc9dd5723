"""Canonical formatter — one fixed textual form per AST node.

Pure functions, no infrastructure dependencies. For every node the
grammar can produce, ``parse(render(node)) == node`` holds under the
default options. The input text is not reproduced verbatim: spacing,
letter case, optional words and unit order are all normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Literal

from timelang.domain.nodes import (
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
    Number,
    TimeUnit,
    Weekday,
    Year,
)

ClockStyle = Literal["preserve", "12h", "24h"]


@dataclass(frozen=True)
class RenderOptions:
    """Rendering knobs.

    Attributes:
        clock: ``preserve`` keeps whichever hour form was parsed, which
            keeps round trips exact. ``12h``/``24h`` convert every time
            of day to one clock.
        oxford_comma: Write ``1 year, 2 days, and 3 hours`` instead of
            ``1 year, 2 days and 3 hours``. Both forms parse identically.
    """

    clock: ClockStyle = "preserve"
    oxford_comma: bool = False


DEFAULT_OPTIONS = RenderOptions()

_NAMED_TEXT: dict[NamedRelativeTime, str] = {
    NamedRelativeTime.NOW: "now",
    NamedRelativeTime.TODAY: "today",
    NamedRelativeTime.TOMORROW: "tomorrow",
    NamedRelativeTime.YESTERDAY: "yesterday",
    NamedRelativeTime.DAY_AFTER_TOMORROW: "the day after tomorrow",
    NamedRelativeTime.DAY_BEFORE_YESTERDAY: "the day before yesterday",
}


def render(node: Any, options: RenderOptions | None = None) -> str:
    """Render any AST node to its canonical text."""
    return _render(node, options or DEFAULT_OPTIONS)


@singledispatch
def _render(node: Any, options: RenderOptions) -> str:
    raise TypeError(f"cannot render {type(node).__name__}")


# --- Primitives ---


@_render.register(Number)
@_render.register(Year)
@_render.register(DayOfMonth)
@_render.register(Minute)
@_render.register(Hour24)
@_render.register(Hour12)
def _render_scalar(node: Any, options: RenderOptions) -> str:
    return str(node)


@_render.register
def _render_month(node: Month, options: RenderOptions) -> str:
    return node.display_name


@_render.register
def _render_am_pm(node: AmPm, options: RenderOptions) -> str:
    return node.value


@_render.register
def _render_weekday(node: Weekday, options: RenderOptions) -> str:
    return node.display_name


@_render.register
def _render_time_unit(node: TimeUnit, options: RenderOptions) -> str:
    return node.value


# --- Absolute times ---


@_render.register
def _render_date(node: Date, options: RenderOptions) -> str:
    return f"{node.day.value}/{int(node.month)}/{node.year.value}"


@_render.register
def _render_time(node: Time, options: RenderOptions) -> str:
    if options.clock == "24h":
        node = node.to_24h()
    elif options.clock == "12h":
        node = node.to_12h()
    hour = node.hour
    if isinstance(hour, Hour12):
        return f"{hour.value}:{node.minute} {hour.am_pm.value}"
    return f"{hour.value}:{node.minute}"


@_render.register
def _render_date_time(node: DateTime, options: RenderOptions) -> str:
    return f"{_render(node.date, options)} at {_render(node.time, options)}"


# --- Durations ---


def _join(parts: list[str], oxford_comma: bool) -> str:
    if len(parts) == 1:
        return parts[0]
    head = ", ".join(parts[:-1])
    conjunction = ", and " if oxford_comma and len(parts) > 2 else " and "
    return f"{head}{conjunction}{parts[-1]}"


@_render.register
def _render_duration(node: Duration, options: RenderOptions) -> str:
    if node.is_empty:
        return "0 minutes"
    parts = [
        f"{amount} {unit.singular if amount.value == 1 else unit.value}"
        for unit, amount in node.items()
    ]
    return _join(parts, options.oxford_comma)


# --- Relative times ---


@_render.register
def _render_named(node: NamedRelativeTime, options: RenderOptions) -> str:
    return _NAMED_TEXT[node]


@_render.register
def _render_next(node: Next, options: RenderOptions) -> str:
    return f"next {node.unit.display_name}"


@_render.register
def _render_last(node: Last, options: RenderOptions) -> str:
    return f"last {node.unit.display_name}"


@_render.register
def _render_direction(node: TimeDirection, options: RenderOptions) -> str:
    if node.anchor is None:
        return node.kind.value
    return f"{node.kind.value} {_render(node.anchor, options)}"


@_render.register
def _render_directional(node: Directional, options: RenderOptions) -> str:
    return f"{_render(node.duration, options)} {_render(node.direction, options)}"


@_render.register
def _render_range(node: TimeRange, options: RenderOptions) -> str:
    return f"from {_render(node.start, options)} to {_render(node.end, options)}"
