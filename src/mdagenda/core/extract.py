"""Timestamp annotation extraction - no I/O dependencies.

Annotations are angle-bracketed dates at the start of a line, optionally
prefixed by a keyword:

    SCHEDULED: <2024-01-15 Mon 10:00-11:00 +1w -2d>
    <2024-01-15 Mon>--<2024-01-17 Wed>
    <2024-01-15>
    CREATED: <2024-01-10 Wed>

Localized weekday names are rewritten to English before matching.
"""

import re
from collections.abc import Callable, Sequence

from .tasks import Task

WeekdayMappings = Sequence[tuple[str, str]]

_PAYLOAD = r"<(\d{4}-\d{2}-\d{2}[^>]*)>"

_KEYWORD_RE = re.compile(rf"^\s*((?:SCHEDULED|DEADLINE|CLOSED):\s*){_PAYLOAD}")
_RANGE_RE = re.compile(rf"^\s*{_PAYLOAD}--{_PAYLOAD}")
_SIMPLE_RE = re.compile(rf"^\s*{_PAYLOAD}")
_CREATED_RE = re.compile(rf"^\s*CREATED:\s*{_PAYLOAD}")

_DATE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})")
_TIME_RE = re.compile(r"(\d{1,2}:\d{2})(?:-(\d{1,2}:\d{2}))?")

# Tried in order, first match wins
_TIMESTAMP_MATCHERS: list[tuple[re.Pattern[str], Callable[[re.Match[str]], str]]] = [
    (_KEYWORD_RE, lambda m: f"{m[1]}<{m[2]}>"),
    (_RANGE_RE, lambda m: f"<{m[1]}>--<{m[2]}>"),
    (_SIMPLE_RE, lambda m: f"<{m[1]}>"),
]

TIMESTAMP_KEYWORDS = ("SCHEDULED", "DEADLINE", "CLOSED")
PLAIN = "PLAIN"


def normalize_weekdays(text: str, mappings: WeekdayMappings) -> str:
    """
    Replace localized weekday tokens with their English equivalents.

    Plain substring replacement applied in list order: callers must list
    longer tokens before any shorter token they contain.
    """
    for localized, english in mappings:
        if localized in text:
            text = text.replace(localized, english)
    return text


def extract_created(text: str, mappings: WeekdayMappings = ()) -> str | None:
    """Extract a CREATED timestamp from the start of a line."""
    m = _CREATED_RE.match(normalize_weekdays(text, mappings))
    if not m:
        return None
    return f"CREATED: <{m[1]}>"


def extract_timestamp(text: str, mappings: WeekdayMappings = ()) -> str | None:
    """Extract a SCHEDULED/DEADLINE/CLOSED, range or plain timestamp from the start of a line."""
    text = normalize_weekdays(text, mappings)
    for pattern, render in _TIMESTAMP_MATCHERS:
        m = pattern.match(text)
        if m:
            return render(m)
    return None


def parse_timestamp_fields(
    timestamp: str,
    mappings: WeekdayMappings = (),
) -> tuple[str, str | None, str | None, str | None]:
    """
    Split an annotation into display fields for structured export.

    Returns: (kind, date, time, end_time). Kind is always set; the other
    fields are None when absent. Not used for date matching.
    """
    kind = next((k for k in TIMESTAMP_KEYWORDS if f"{k}:" in timestamp), PLAIN)

    normalized = normalize_weekdays(timestamp, mappings)

    date_match = _DATE_RE.search(normalized)
    date_str = date_match[1] if date_match else None

    time_match = _TIME_RE.search(normalized)
    if time_match:
        time_str, end_time = time_match[1], time_match[2]
    else:
        time_str, end_time = None, None

    return kind, date_str, time_str, end_time


def apply_timestamp_fields(task: Task, mappings: WeekdayMappings = ()) -> Task:
    """Fill a task's display fields from its raw timestamp."""
    if task.timestamp is None:
        return task
    (
        task.timestamp_type,
        task.timestamp_date,
        task.timestamp_time,
        task.timestamp_end_time,
    ) = parse_timestamp_fields(task.timestamp, mappings)
    return task
