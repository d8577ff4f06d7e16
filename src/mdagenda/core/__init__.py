"""Functional core - pure timestamp, recurrence and agenda logic with no I/O."""

from .tasks import Task, TaskType, Priority, filter_open, sort_by_priority
from .extract import extract_created, extract_timestamp, parse_timestamp_fields, normalize_weekdays
from .timestamp import ParsedTimestamp, parse_org_timestamp
from .repeater import Repeater, RepeaterKind, RepeaterUnit, parse_repeater, next_occurrence, add_months
from .agenda import AgendaMode, filter_agenda, current_day, current_week
from .render import OutputFormat, render

__all__ = [
    # Tasks
    "Task",
    "TaskType",
    "Priority",
    "filter_open",
    "sort_by_priority",
    # Extraction
    "extract_created",
    "extract_timestamp",
    "parse_timestamp_fields",
    "normalize_weekdays",
    # Parsing
    "ParsedTimestamp",
    "parse_org_timestamp",
    # Recurrence
    "Repeater",
    "RepeaterKind",
    "RepeaterUnit",
    "parse_repeater",
    "next_occurrence",
    "add_months",
    # Agenda
    "AgendaMode",
    "filter_agenda",
    "current_day",
    "current_week",
    # Rendering
    "OutputFormat",
    "render",
]
