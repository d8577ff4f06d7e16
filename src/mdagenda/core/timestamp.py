"""Timestamp annotation parsing - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime

from .extract import WeekdayMappings, normalize_weekdays
from .repeater import Repeater, parse_repeater

_WEEKDAY = (
    r"(?: (?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday"
    r"|Mon|Tue|Wed|Thu|Fri|Sat|Sun))?"
)
_TIME = r"(?: (\d{1,2}:\d{2})(?:-(\d{1,2}:\d{2}))?)?"
_REPEATER = r"(?:\s*([.+]+\d+[dwmyh]))?"
_WARNING = r"(?:\s+-(\d+)d)?"

_START = rf"<(\d{{4}}-\d{{2}}-\d{{2}}){_WEEKDAY}{_TIME}{_REPEATER}{_WARNING}>"
_END = rf"<(\d{{4}}-\d{{2}}-\d{{2}}){_WEEKDAY}{_TIME}>"

_RANGE_RE = re.compile(rf"{_START}--{_END}")
_SINGLE_RE = re.compile(_START)

DATE_FORMAT = "%Y-%m-%d"


@dataclass
class ParsedTimestamp:
    """The date of an annotation plus its optional recurrence rule."""

    date: date
    repeater: Repeater | None = None


def parse_org_timestamp(
    timestamp: str,
    mappings: WeekdayMappings | None = None,
) -> ParsedTimestamp | None:
    """
    Parse an annotation into its start date and repeater.

    Ranges are anchored on their start bracket. Returns None when no
    timestamp is found or the date is not a real calendar date; a malformed
    repeater only drops the repeater.
    """
    if mappings:
        timestamp = normalize_weekdays(timestamp, mappings)

    m = _RANGE_RE.search(timestamp) or _SINGLE_RE.search(timestamp)
    if not m:
        return None

    try:
        parsed_date = datetime.strptime(m[1], DATE_FORMAT).date()
    except ValueError:
        return None

    repeater = parse_repeater(m[4]) if m[4] else None
    return ParsedTimestamp(date=parsed_date, repeater=repeater)


def timestamp_matches_date(parsed: ParsedTimestamp, target: date) -> bool:
    return parsed.date == target


def timestamp_in_range(parsed: ParsedTimestamp, start: date, end: date) -> bool:
    """Check if the timestamp date falls within [start, end]."""
    return start <= parsed.date <= end
