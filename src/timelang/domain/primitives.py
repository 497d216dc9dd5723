"""Lexical value types — numbers, calendar fields, clock fields, weekdays.

Every type here is immutable and structurally compared. Range checks
run at construction so a programmatically built node is always valid;
the grammar applies the same checks first and reports a parse failure
instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

MAX_DAY = 31


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in *month* (1-12) of *year*."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


# --- Validation helpers (return an error message, or None when valid) ---


def check_day(day: int) -> str | None:
    if not 1 <= day <= MAX_DAY:
        return "day must be between 1 and 31 (inclusive)"
    return None


def check_month_number(month: int) -> str | None:
    if not 1 <= month <= 12:
        return "month must be between 1 and 12 (inclusive)"
    return None


def check_calendar_day(day: int, month: int, year: int) -> str | None:
    """Check *day* exists in the given month and year."""
    error = check_day(day)
    if error:
        return error
    limit = days_in_month(month, year)
    if day > limit:
        return f"day {day} does not exist in month {month} of {year} (max {limit})"
    return None


def check_hour24(hour: int) -> str | None:
    if not 0 <= hour <= 23:
        return "hour must be between 0 and 23 (inclusive)"
    return None


def check_hour12(hour: int) -> str | None:
    if not 1 <= hour <= 12:
        return "hour must be between 1 and 12 (inclusive) when AM/PM is given"
    return None


def check_minute(minute: int) -> str | None:
    if not 0 <= minute <= 59:
        return "minute must be between 0 and 59 (inclusive)"
    return None


def _require(error: str | None) -> None:
    if error:
        raise ValueError(error)


# --- Number ---


@dataclass(frozen=True, order=True)
class Number:
    """A non-negative integer magnitude with no implied unit."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("number must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Number) -> Number:
        return Number(self.value + other.value)

    def __sub__(self, other: Number) -> Number:
        return Number(self.value - other.value)

    def __mul__(self, other: Number) -> Number:
        return Number(self.value * other.value)

    def __floordiv__(self, other: Number) -> Number:
        return Number(self.value // other.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)


# --- Calendar fields ---


@dataclass(frozen=True, order=True)
class Year:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("year must be non-negative")

    def __str__(self) -> str:
        return str(self.value)


class Month(IntEnum):
    """Month of the year, numbered 1-12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class DayOfMonth:
    """Day of the month, 1-31. Month-specific limits are checked by Date."""

    value: int

    def __post_init__(self) -> None:
        _require(check_day(self.value))

    def __str__(self) -> str:
        return str(self.value)


# --- Clock fields ---


class AmPm(StrEnum):
    AM = "AM"
    PM = "PM"


@dataclass(frozen=True, order=True)
class Hour24:
    """24-hour clock hour, 0-23."""

    value: int

    def __post_init__(self) -> None:
        _require(check_hour24(self.value))

    def to_hour12(self) -> Hour12:
        am_pm = AmPm.AM if self.value < 12 else AmPm.PM
        return Hour12(self.value % 12 or 12, am_pm)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Hour12:
    """12-hour clock hour, 1-12, with its AM/PM marker."""

    value: int
    am_pm: AmPm

    def __post_init__(self) -> None:
        _require(check_hour12(self.value))

    def to_hour24(self) -> Hour24:
        base = self.value % 12
        return Hour24(base + 12 if self.am_pm is AmPm.PM else base)

    def __str__(self) -> str:
        return f"{self.value} {self.am_pm.value}"


Hour = Hour24 | Hour12


@dataclass(frozen=True, order=True)
class Minute:
    """Minute of the hour, 0-59."""

    value: int

    def __post_init__(self) -> None:
        _require(check_minute(self.value))

    def __str__(self) -> str:
        return f"{self.value:02d}"


# --- Weekdays and duration units ---


class Weekday(StrEnum):
    """The seven weekdays, usable after ``next``/``last``."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# Public alias matching the grammar's name for the next/last target.
RelativeTimeUnit = Weekday


class TimeUnit(StrEnum):
    """Duration units, largest first. Values name the Duration fields."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"

    @property
    def singular(self) -> str:
        return self.value[:-1]


# Accepted spellings for each unit; singular and plural regardless of magnitude.
UNIT_KEYWORDS: dict[str, TimeUnit] = {
    "year": TimeUnit.YEARS,
    "years": TimeUnit.YEARS,
    "yr": TimeUnit.YEARS,
    "yrs": TimeUnit.YEARS,
    "month": TimeUnit.MONTHS,
    "months": TimeUnit.MONTHS,
    "week": TimeUnit.WEEKS,
    "weeks": TimeUnit.WEEKS,
    "day": TimeUnit.DAYS,
    "days": TimeUnit.DAYS,
    "hour": TimeUnit.HOURS,
    "hours": TimeUnit.HOURS,
    "hr": TimeUnit.HOURS,
    "hrs": TimeUnit.HOURS,
    "minute": TimeUnit.MINUTES,
    "minutes": TimeUnit.MINUTES,
    "min": TimeUnit.MINUTES,
    "mins": TimeUnit.MINUTES,
}
