"""Recurrence rules ("repeaters") and next-occurrence arithmetic.

Pure functions - no I/O.

Repeater syntax is a kind prefix, a magnitude and a unit:

    +1w     cumulative: keep the original alignment, skip whole intervals
    ++1m    catch-up: one interval from now (weeks keep the weekday)
    .+3d    restart: one interval from now, no alignment at all

Units are h, d, w, m, y. The date model carries no time of day, so an hour
repeater advances by a single day whatever its magnitude.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

_MAGNITUDE = re.compile(r"[0-9]+")


class RepeaterKind(Enum):
    CUMULATIVE = "+"
    CATCH_UP = "++"
    RESTART = ".+"


class RepeaterUnit(Enum):
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    MONTH = "m"
    YEAR = "y"


# Longest prefix first so "++" and ".+" are not read as "+"
_PREFIXES = (
    (".+", RepeaterKind.RESTART),
    ("++", RepeaterKind.CATCH_UP),
    ("+", RepeaterKind.CUMULATIVE),
)


@dataclass(frozen=True)
class Repeater:
    """A parsed recurrence rule."""

    kind: RepeaterKind
    value: int
    unit: RepeaterUnit

    def __str__(self) -> str:
        return f"{self.kind.value}{self.value}{self.unit.value}"

    @property
    def day_step(self) -> int | None:
        """Interval length in days, or None for calendar-month units."""
        match self.unit:
            case RepeaterUnit.DAY:
                return self.value
            case RepeaterUnit.WEEK:
                return self.value * 7
            case RepeaterUnit.HOUR:
                return 1
        return None

    @property
    def month_step(self) -> int:
        """Interval length in months (0 for day-based units)."""
        match self.unit:
            case RepeaterUnit.MONTH:
                return self.value
            case RepeaterUnit.YEAR:
                return self.value * 12
        return 0


def parse_repeater(token: str) -> Repeater | None:
    """Parse a repeater token like "+1d", "++2w" or ".+1m"."""
    token = token.strip()

    for prefix, kind in _PREFIXES:
        if token.startswith(prefix):
            rest = token[len(prefix):]
            break
    else:
        return None

    if not rest:
        return None

    magnitude, unit_char = rest[:-1], rest[-1]
    if not _MAGNITUDE.fullmatch(magnitude):
        return None
    value = int(magnitude)
    if value == 0:
        return None

    try:
        unit = RepeaterUnit(unit_char)
    except ValueError:
        return None

    return Repeater(kind=kind, value=value, unit=unit)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(d: date, months: int) -> date | None:
    """
    Add calendar months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 29 in a leap year and Feb 28 otherwise.
    Returns None when the result falls outside the supported date range.
    """
    total = d.year * 12 + (d.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        return None
    day = min(d.day, days_in_month(year, month))
    return date(year, month, day)


def _add_days(d: date, days: int) -> date | None:
    try:
        return d + timedelta(days=days)
    except OverflowError:
        return None


def _advance(d: date, repeater: Repeater) -> date | None:
    """Move one interval forward from d."""
    step = repeater.day_step
    if step is not None:
        return _add_days(d, step)
    return add_months(d, repeater.month_step)


def _next_cumulative(base_date: date, repeater: Repeater, from_date: date) -> date | None:
    step = repeater.day_step
    if step is not None:
        if base_date >= from_date:
            return base_date
        intervals = -(-(from_date - base_date).days // step)
        return _add_days(base_date, intervals * step)

    # Months are counted from the anchor each time so a clamped short month
    # does not drag later occurrences off the anchor's day
    k = 0
    current: date | None = base_date
    while current is not None and current < from_date:
        k += 1
        current = add_months(base_date, k * repeater.month_step)
    return current


def _next_catch_up(base_date: date, repeater: Repeater, from_date: date) -> date | None:
    if repeater.unit is not RepeaterUnit.WEEK:
        return _advance(from_date, repeater)

    target_weekday = base_date.weekday()
    current: date | None = from_date
    while current is not None and (current.weekday() != target_weekday or current <= base_date):
        current = _add_days(current, 1)
    return current


def _next_restart(repeater: Repeater, from_date: date) -> date | None:
    return _advance(from_date, repeater)


def next_occurrence(base_date: date, repeater: Repeater, from_date: date) -> date | None:
    """
    Compute the next occurrence of a repeating timestamp.

    Args:
        base_date: The date written in the annotation (the anchor)
        repeater: The parsed recurrence rule
        from_date: Reference date to advance past (usually today)

    Returns:
        The next occurrence, or None if it cannot be represented
    """
    match repeater.kind:
        case RepeaterKind.CUMULATIVE:
            return _next_cumulative(base_date, repeater, from_date)
        case RepeaterKind.CATCH_UP:
            return _next_catch_up(base_date, repeater, from_date)
        case RepeaterKind.RESTART:
            return _next_restart(repeater, from_date)
    return None
