"""Agenda queries over extracted tasks - no I/O dependencies."""

import logging
from datetime import date, datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from mdagenda.errors import (
    DateRangeError,
    InvalidDateError,
    InvalidModeError,
    InvalidTimezoneError,
)

from .tasks import Task, filter_open, sort_by_priority
from .timestamp import (
    DATE_FORMAT,
    parse_org_timestamp,
    timestamp_in_range,
    timestamp_matches_date,
)

logger = logging.getLogger(__name__)


class AgendaMode(Enum):
    """Agenda query shape."""

    DAY = "day"  # Tasks dated on a single day
    WEEK = "week"  # Tasks dated within an inclusive range
    TASKS = "tasks"  # Open tasks by priority, dates ignored

    @classmethod
    def parse(cls, value: str) -> "AgendaMode":
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None


def resolve_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA timezone name. No fallback on failure."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise InvalidTimezoneError(name) from None


def parse_date(value: str, label: str = "date") -> date:
    """Strictly parse a YYYY-MM-DD query date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid {label} '{value}': {e}. Use YYYY-MM-DD") from None


def current_day(tz: ZoneInfo, now: datetime | None = None) -> date:
    """Today's calendar date in the given timezone."""
    now = now or datetime.now(tz)
    if now.tzinfo is None:
        # Naive instants are taken as UTC
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    return now.astimezone(tz).date()


def current_week(tz: ZoneInfo, now: datetime | None = None) -> tuple[date, date]:
    """Monday and Sunday of the week containing today in the given timezone."""
    today = current_day(tz, now)
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=6)


def task_matches_date(task: Task, target: date) -> bool:
    """Check if a task's timestamp falls on the target date."""
    if not task.timestamp:
        return False
    parsed = parse_org_timestamp(task.timestamp)
    return parsed is not None and timestamp_matches_date(parsed, target)


def task_in_range(task: Task, start: date, end: date) -> bool:
    """Check if a task's timestamp falls within [start, end]."""
    if not task.timestamp:
        return False
    parsed = parse_org_timestamp(task.timestamp)
    return parsed is not None and timestamp_in_range(parsed, start, end)


def _week_range(
    date_from: str | None,
    date_to: str | None,
    tz: ZoneInfo,
    now: datetime | None,
) -> tuple[date, date]:
    if date_from is None and date_to is None:
        return current_week(tz, now)
    if date_from is None or date_to is None:
        raise DateRangeError("Both 'from' and 'to' dates are required for an explicit range")

    start = parse_date(date_from, "'from' date")
    end = parse_date(date_to, "'to' date")
    if start > end:
        raise DateRangeError(f"Start date {date_from} is after end date {date_to}")
    return start, end


def filter_agenda(
    tasks: list[Task],
    mode: str,
    date: str | None = None,
    date_from: str | None = None,
    date_to: str | None = None,
    timezone: str = "UTC",
    now: datetime | None = None,
) -> list[Task]:
    """
    Select tasks for an agenda view.

    Pure function - no I/O.

    Args:
        tasks: Tasks to filter (not modified)
        mode: "day", "week" or "tasks"
        date: Target date for "day" mode (YYYY-MM-DD), defaults to today
        date_from: Range start for "week" mode (YYYY-MM-DD)
        date_to: Range end for "week" mode (YYYY-MM-DD)
        timezone: IANA timezone used to determine "today"
        now: Current instant, for tests

    Returns:
        Matching tasks in their original order ("tasks" mode sorts by priority)

    Raises:
        AgendaError: On an invalid mode, timezone, date or range
    """
    agenda_mode = AgendaMode.parse(mode)

    if agenda_mode is AgendaMode.TASKS:
        result = sort_by_priority(filter_open(tasks))
        logger.debug(f"Agenda tasks: {len(result)} of {len(tasks)} open")
        return result

    tz = resolve_timezone(timezone)

    if agenda_mode is AgendaMode.DAY:
        target = parse_date(date) if date is not None else current_day(tz, now)
        result = [t for t in tasks if task_matches_date(t, target)]
        logger.debug(f"Agenda day {target}: {len(result)} of {len(tasks)} tasks")
        return result

    start, end = _week_range(date_from, date_to, tz, now)
    result = [t for t in tasks if task_in_range(t, start, end)]
    logger.debug(f"Agenda week {start}..{end}: {len(result)} of {len(tasks)} tasks")
    return result
