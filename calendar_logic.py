"""Pure calendar calculations, no UI dependencies."""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime
from enum import Enum

MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

DaySlot = int | None
Week = tuple[DaySlot, ...]


class InvalidArgument(ValueError):
    """Raised for a month, year or reference instant that cannot be laid out."""


class DotState(Enum):
    TODAY = "today"
    PAST = "past"
    FUTURE = "future"


@dataclass(frozen=True)
class MonthLayout:
    month_name: str
    days_in_month: int
    start_offset: int


@dataclass(frozen=True)
class MonthGrid:
    month_name: str
    weeks: tuple[Week, ...]
    today: int | None


def _check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgument(f"year must be an int, got {year!r}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgument(f"year {year} outside {MINYEAR}..{MAXYEAR}")


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgument(f"month must be an int, got {month!r}")
    if not 0 <= month <= 11:
        raise InvalidArgument(f"month {month} outside 0..11")


def _check_instant(instant: date) -> None:
    if not isinstance(instant, date):
        raise InvalidArgument(f"reference instant must be a date or datetime, got {instant!r}")
    if isinstance(instant, datetime) and instant.utcoffset() is None:
        raise InvalidArgument("reference instant has no timezone")


def day_of_week(instant: date) -> int:
    """Return the weekday with Sunday = 0 .. Saturday = 6."""
    return (instant.weekday() + 1) % 7


def month_layout(year: int, month: int) -> MonthLayout:
    """Return name, length and Monday-first start offset for a month.

    *month* is 0-based (January = 0). The offset is the number of empty
    slots before day 1: Sunday goes to the last column, every other
    weekday one column left of its Sunday-first index.
    """
    _check_year(year)
    _check_month(month)
    _, days_in_month = calendar.monthrange(year, month + 1)
    first = day_of_week(date(year, month + 1, 1))
    start_offset = 6 if first == 0 else first - 1
    return MonthLayout(MONTH_ABBR[month], days_in_month, start_offset)


def partition_weeks(days_in_month: int, start_offset: int) -> tuple[Week, ...]:
    """Cut the padded day sequence into 7-slot weeks, Monday to Sunday.

    The last week is padded with None so every row has 7 slots.
    """
    if days_in_month < 0:
        raise InvalidArgument(f"days_in_month must not be negative, got {days_in_month}")
    if not 0 <= start_offset <= 6:
        raise InvalidArgument(f"start_offset {start_offset} outside 0..6")

    slots: list[DaySlot] = [None] * start_offset
    slots.extend(range(1, days_in_month + 1))

    weeks: list[Week] = []
    row: list[DaySlot] = []
    for d in slots:
        row.append(d)
        if len(row) == 7:
            weeks.append(tuple(row))
            row = []
    if row:
        row.extend([None] * (7 - len(row)))
        weeks.append(tuple(row))
    return tuple(weeks)


def resolve_today(instant: date, year: int, month: int) -> int | None:
    """Return the instant's day-of-month if it falls in (year, month), else None."""
    if instant.year == year and instant.month - 1 == month:
        return instant.day
    return None


def classify_dot(day: int, today: int | None) -> DotState:
    if day == today:
        return DotState.TODAY
    if today is not None and day < today:
        return DotState.PAST
    return DotState.FUTURE


def build_month(instant: date, year: int, month: int) -> MonthGrid:
    """Lay out one month and mark today if the instant falls inside it."""
    _check_instant(instant)
    layout = month_layout(year, month)
    weeks = partition_weeks(layout.days_in_month, layout.start_offset)
    return MonthGrid(layout.month_name, weeks, resolve_today(instant, year, month))


def build_year(instant: date, year: int | None = None) -> tuple[MonthGrid, ...]:
    """Return the 12 month grids (January first) for *year*.

    *instant* is the reference "now", already resolved in the wanted
    timezone. *year* defaults to the instant's own year. Invalid input
    raises before any grid is produced.
    """
    _check_instant(instant)
    if year is None:
        year = instant.year
    _check_year(year)
    return tuple(build_month(instant, year, m) for m in range(12))
