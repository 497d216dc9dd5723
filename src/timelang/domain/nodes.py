"""AST node types for time expressions.

Tree-shaped and immutable: every node is a frozen dataclass or an enum,
compared structurally. Alternatives ("a PointInTime is either absolute
or relative") are plain type unions over distinct node classes, so the
variant of any value is recovered with ``isinstance``.

INVARIANT: Nodes never hold a reference to input text. Rendering via
``str(node)`` produces the canonical form, which parses back to an
equal node.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum, StrEnum
from typing import Any, Literal

from timelang.domain.primitives import (
    DayOfMonth,
    Hour12,
    Hour24,
    Minute,
    Month,
    Number,
    TimeUnit,
    Weekday,
    Year,
    check_calendar_day,
)


class _Rendered:
    """Mixin: ``str()`` yields the canonical rendering."""

    __slots__ = ()

    def __str__(self) -> str:
        from timelang.domain.render import render

        return render(self)


@functools.total_ordering
class _Ordered:
    """Mixin: values of one node type compare by their ``sort_key``.

    Fields holding a union compare by variant rank first, then payload,
    so mixed variants (``Hour24`` vs ``Hour12``) never raise TypeError.
    """

    __slots__ = ()

    @property
    def sort_key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sort_key < other.sort_key  # type: ignore[attr-defined]


def _key(value: Any) -> Any:
    if isinstance(value, _Ordered):
        return value.sort_key
    if isinstance(value, Enum):
        return list(type(value)).index(value)
    return value


def _ranked(value: Any, variants: tuple[type, ...]) -> tuple[int, Any]:
    return (variants.index(type(value)), _key(value))


_HOURS: tuple[type, ...] = (Hour24, Hour12)


# --- Absolute times ---


@dataclass(frozen=True)
class Date(_Rendered, _Ordered):
    """A calendar date written day-first, e.g. ``20/4/2021``.

    Ordered chronologically (year, month, day) even though the fields
    follow the (month, day, year) shape of the AST.
    """

    month: Month
    day: DayOfMonth
    year: Year

    def __post_init__(self) -> None:
        error = check_calendar_day(self.day.value, int(self.month), self.year.value)
        if error:
            raise ValueError(error)

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.year.value, int(self.month), self.day.value)


@dataclass(frozen=True)
class Time(_Rendered, _Ordered):
    """A time of day such as ``14:07`` or ``2:07 PM``.

    Every 24-hour time sorts before every 12-hour one; the two forms
    are never converted for comparison.
    """

    hour: Hour24 | Hour12
    minute: Minute

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (_ranked(self.hour, _HOURS), self.minute.value)

    def to_24h(self) -> Time:
        if isinstance(self.hour, Hour12):
            return Time(self.hour.to_hour24(), self.minute)
        return self

    def to_12h(self) -> Time:
        if isinstance(self.hour, Hour24):
            return Time(self.hour.to_hour12(), self.minute)
        return self


@dataclass(frozen=True)
class DateTime(_Rendered, _Ordered):
    date: Date
    time: Time

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (self.date.sort_key, self.time.sort_key)


AbsoluteTime = Date | Time | DateTime


# --- Durations ---


@dataclass(frozen=True)
class Duration(_Rendered, _Ordered):
    """One magnitude per unit; units not mentioned are zero.

    An all-zero duration is valid (``0 minutes``) but flagged by
    :attr:`is_empty` so callers can warn about it.
    """

    years: Number = Number(0)
    months: Number = Number(0)
    weeks: Number = Number(0)
    days: Number = Number(0)
    hours: Number = Number(0)
    minutes: Number = Number(0)

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f.name).value for f in fields(self))

    @classmethod
    def of(cls, **units: int) -> Duration:
        """Build from plain ints, e.g. ``Duration.of(days=3, hours=2)``."""
        return cls(**{name: Number(value) for name, value in units.items()})

    def get(self, unit: TimeUnit) -> Number:
        return getattr(self, unit.value)

    def items(self) -> list[tuple[TimeUnit, Number]]:
        """Non-zero components, largest unit first."""
        return [(unit, self.get(unit)) for unit in TimeUnit if self.get(unit)]

    @property
    def is_empty(self) -> bool:
        return not self.items()

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )


# --- Relative times ---


class NamedRelativeTime(StrEnum):
    """Fixed idioms mapped directly to a relative point in time."""

    NOW = "now"
    TODAY = "today"
    TOMORROW = "tomorrow"
    YESTERDAY = "yesterday"
    DAY_AFTER_TOMORROW = "day after tomorrow"
    DAY_BEFORE_YESTERDAY = "day before yesterday"


@dataclass(frozen=True)
class Next(_Rendered, _Ordered):
    """``next tuesday``"""

    unit: Weekday

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (_key(self.unit),)


@dataclass(frozen=True)
class Last(_Rendered, _Ordered):
    """``last wednesday``"""

    unit: Weekday

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (_key(self.unit),)


class DirectionKind(StrEnum):
    AGO = "ago"
    FROM_NOW = "from now"
    AFTER = "after"
    BEFORE = "before"


Anchor = Date | Time | DateTime | NamedRelativeTime | Next | Last
_ANCHORS: tuple[type, ...] = (Date, Time, DateTime, NamedRelativeTime, Next, Last)

_ANCHORED = frozenset({DirectionKind.AFTER, DirectionKind.BEFORE})


@dataclass(frozen=True)
class TimeDirection(_Rendered, _Ordered):
    """Where a duration is measured from, and in which direction.

    ``ago`` and ``from now`` are implicitly anchored at now and carry no
    anchor. ``after``/``before`` carry an absolute time, a named idiom,
    or a ``next``/``last`` weekday.
    """

    kind: DirectionKind
    anchor: Anchor | None = None

    def __post_init__(self) -> None:
        if self.kind in _ANCHORED and self.anchor is None:
            raise ValueError(f"'{self.kind.value}' requires an anchor")
        if self.kind not in _ANCHORED and self.anchor is not None:
            raise ValueError(f"'{self.kind.value}' takes no anchor")

    @property
    def sort_key(self) -> tuple[Any, ...]:
        """Kind, then anchor variant (absolute, named, next, last), then anchor."""
        anchor = () if self.anchor is None else _ranked(self.anchor, _ANCHORS)
        return (_key(self.kind), anchor)

    @classmethod
    def after(cls, anchor: Anchor) -> TimeDirection:
        return cls(DirectionKind.AFTER, anchor)

    @classmethod
    def before(cls, anchor: Anchor) -> TimeDirection:
        return cls(DirectionKind.BEFORE, anchor)

    @property
    def variant(self) -> str:
        """Variant name, e.g. ``after_absolute``, ``before_last``, ``ago``."""
        if self.kind is DirectionKind.AGO:
            return "ago"
        if self.kind is DirectionKind.FROM_NOW:
            return "from_now"
        if isinstance(self.anchor, NamedRelativeTime):
            target = "named"
        elif isinstance(self.anchor, Next):
            target = "next"
        elif isinstance(self.anchor, Last):
            target = "last"
        else:
            target = "absolute"
        return f"{self.kind.value}_{target}"


AGO = TimeDirection(DirectionKind.AGO)
FROM_NOW = TimeDirection(DirectionKind.FROM_NOW)


@dataclass(frozen=True)
class Directional(_Rendered, _Ordered):
    """A duration anchored by a direction: ``3 days ago``, ``2 hours after now``."""

    duration: Duration
    direction: TimeDirection

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (self.duration.sort_key, self.direction.sort_key)


RelativeTime = NamedRelativeTime | Next | Last | Directional

PointInTime = AbsoluteTime | RelativeTime
_POINTS: tuple[type, ...] = (*_ANCHORS, Directional)


@dataclass(frozen=True)
class TimeRange(_Rendered, _Ordered):
    """``from A to B``. Start is not required to precede end."""

    start: PointInTime
    end: PointInTime

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (_ranked(self.start, _POINTS), _ranked(self.end, _POINTS))


TimeExpression = PointInTime | Duration | TimeRange

ExpressionKind = Literal["specific", "duration", "range"]


def is_absolute(point: PointInTime) -> bool:
    return isinstance(point, AbsoluteTime)


def expression_kind(expr: TimeExpression) -> ExpressionKind:
    """Classify a top-level expression the way the dispatcher produced it."""
    if isinstance(expr, TimeRange):
        return "range"
    if isinstance(expr, Duration):
        return "duration"
    return "specific"


_SCALARS = (Number, Year, DayOfMonth, Minute)


def to_data(node: Any) -> Any:
    """Convert a node tree into JSON-compatible data tagged with node names.

    Scalar wrappers (numbers, years, days, minutes) collapse to ints.
    """
    if isinstance(node, _SCALARS):
        return node.value
    if isinstance(node, Month):
        return {"node": "Month", "value": int(node), "name": node.display_name}
    if isinstance(node, StrEnum):
        return {"node": type(node).__name__, "value": node.value}
    if is_dataclass(node):
        data: dict[str, Any] = {"node": type(node).__name__}
        for f in fields(node):
            data[f.name] = to_data(getattr(node, f.name))
        return data
    return node
