"""Tests for timestamp annotation extraction."""

import pytest

from mdagenda.core.extract import (
    apply_timestamp_fields,
    extract_created,
    extract_timestamp,
    normalize_weekdays,
    parse_timestamp_fields,
)
from mdagenda.core.tasks import Task

RU = [
    ("Понедельник", "Monday"),
    ("Пн", "Mon"),
    ("Ср", "Wed"),
]


class TestNormalizeWeekdays:
    def test_replaces_tokens(self):
        assert normalize_weekdays("<2024-01-15 Пн>", RU) == "<2024-01-15 Mon>"

    def test_longer_token_first(self):
        assert normalize_weekdays("Понедельник", RU) == "Monday"

    def test_order_matters(self):
        # A short token listed first shadows part of a longer one
        mappings = [("Пн", "Mon"), ("Пнд", "Monday")]
        assert normalize_weekdays("Пнд", mappings) == "Monд"

    def test_no_mappings(self):
        assert normalize_weekdays("<2024-01-15 Mon>", []) == "<2024-01-15 Mon>"

    def test_idempotent_on_english(self):
        assert normalize_weekdays("<2024-01-15 Mon>", RU) == "<2024-01-15 Mon>"


class TestExtractTimestamp:
    @pytest.mark.parametrize("keyword", ["SCHEDULED", "DEADLINE", "CLOSED"])
    def test_keyword(self, keyword):
        line = f"{keyword}: <2024-01-15 Mon 10:00 +1w>"
        assert extract_timestamp(line) == f"{keyword}: <2024-01-15 Mon 10:00 +1w>"

    def test_keyword_keeps_separator(self):
        assert extract_timestamp("SCHEDULED:<2024-01-15>") == "SCHEDULED:<2024-01-15>"

    def test_leading_whitespace(self):
        assert extract_timestamp("   DEADLINE: <2024-01-15 -2d>") == "DEADLINE: <2024-01-15 -2d>"

    def test_range(self):
        line = "<2024-01-15 Mon>--<2024-01-17 Wed>"
        assert extract_timestamp(line) == "<2024-01-15 Mon>--<2024-01-17 Wed>"

    def test_bare(self):
        assert extract_timestamp("<2024-01-15 Mon 09:00-10:30>") == "<2024-01-15 Mon 09:00-10:30>"

    def test_trailing_text_dropped(self):
        assert extract_timestamp("<2024-01-15> call Bob") == "<2024-01-15>"

    def test_localized_weekday(self):
        assert extract_timestamp("SCHEDULED: <2024-01-15 Пн>", RU) == "SCHEDULED: <2024-01-15 Mon>"

    def test_not_at_line_start(self):
        assert extract_timestamp("Meet on <2024-01-15>") is None

    def test_created_is_not_a_timestamp(self):
        assert extract_timestamp("CREATED: <2024-01-15>") is None

    def test_no_date(self):
        assert extract_timestamp("<not a date>") is None

    def test_unclosed(self):
        assert extract_timestamp("<2024-01-15") is None


class TestExtractCreated:
    def test_canonical_form(self):
        assert extract_created("CREATED:<2024-01-10 Wed>") == "CREATED: <2024-01-10 Wed>"

    def test_localized(self):
        assert extract_created("  CREATED: <2024-01-10 Ср>", RU) == "CREATED: <2024-01-10 Wed>"

    def test_other_keywords_ignored(self):
        assert extract_created("SCHEDULED: <2024-01-10>") is None

    def test_plain_text(self):
        assert extract_created("created yesterday") is None


class TestParseTimestampFields:
    def test_scheduled_with_time_range(self):
        fields = parse_timestamp_fields("SCHEDULED: <2024-01-15 Mon 10:00-11:30>")
        assert fields == ("SCHEDULED", "2024-01-15", "10:00", "11:30")

    def test_deadline_date_only(self):
        assert parse_timestamp_fields("DEADLINE: <2024-01-15>") == ("DEADLINE", "2024-01-15", None, None)

    def test_closed(self):
        assert parse_timestamp_fields("CLOSED: <2024-01-15 9:05>")[0:3] == ("CLOSED", "2024-01-15", "9:05")

    def test_plain(self):
        assert parse_timestamp_fields("<2024-01-15 Mon>") == ("PLAIN", "2024-01-15", None, None)

    def test_range_uses_first_date(self):
        kind, date, _, _ = parse_timestamp_fields("<2024-01-15>--<2024-01-17>")
        assert (kind, date) == ("PLAIN", "2024-01-15")

    def test_never_fails(self):
        assert parse_timestamp_fields("garbage") == ("PLAIN", None, None, None)


class TestApplyTimestampFields:
    def test_fills_display_fields(self):
        task = Task(file="a.md", line=1, heading="x", timestamp="SCHEDULED: <2024-01-15 Mon 10:00>")
        apply_timestamp_fields(task)
        assert task.timestamp_type == "SCHEDULED"
        assert task.timestamp_date == "2024-01-15"
        assert task.timestamp_time == "10:00"
        assert task.timestamp_end_time is None

    def test_without_timestamp(self):
        task = Task(file="a.md", line=1, heading="x")
        apply_timestamp_fields(task)
        assert task.timestamp_type is None
