"""Tests for timestamp annotation parsing."""

from datetime import date

import pytest

from mdagenda.core.extract import extract_timestamp
from mdagenda.core.repeater import Repeater, RepeaterKind, RepeaterUnit
from mdagenda.core.timestamp import (
    ParsedTimestamp,
    parse_org_timestamp,
    timestamp_in_range,
    timestamp_matches_date,
)


class TestParseOrgTimestamp:
    def test_bare_date(self):
        parsed = parse_org_timestamp("<2024-01-15>")
        assert parsed.date == date(2024, 1, 15)
        assert parsed.repeater is None

    @pytest.mark.parametrize("value", ["2024-01-15", "2023-12-31", "2024-02-29", "0001-01-01"])
    def test_date_reformats_unchanged(self, value):
        assert parse_org_timestamp(f"<{value}>").date.isoformat() == value

    def test_extracted_scheduled_with_repeater(self):
        annotation = extract_timestamp("SCHEDULED: <2024-01-15 +1w>")
        parsed = parse_org_timestamp(annotation)
        assert parsed.date == date(2024, 1, 15)
        assert parsed.repeater == Repeater(RepeaterKind.CUMULATIVE, 1, RepeaterUnit.WEEK)

    def test_full_payload(self):
        parsed = parse_org_timestamp("DEADLINE: <2024-01-15 Mon 10:00-11:00 .+2d -3d>")
        assert parsed.date == date(2024, 1, 15)
        assert parsed.repeater == Repeater(RepeaterKind.RESTART, 2, RepeaterUnit.DAY)

    def test_long_weekday_name(self):
        parsed = parse_org_timestamp("<2024-01-15 Monday ++1m>")
        assert parsed.repeater.kind is RepeaterKind.CATCH_UP

    def test_range_uses_start(self):
        parsed = parse_org_timestamp("<2024-01-15 Mon 10:00 +1w>--<2024-01-17 Wed 12:00>")
        assert parsed.date == date(2024, 1, 15)
        assert parsed.repeater.unit is RepeaterUnit.WEEK

    def test_invalid_calendar_date(self):
        assert parse_org_timestamp("<2024-13-01>") is None
        assert parse_org_timestamp("<2024-02-30>") is None

    def test_bad_repeater_keeps_date(self):
        parsed = parse_org_timestamp("<2024-01-15 +0d>")
        assert parsed == ParsedTimestamp(date=date(2024, 1, 15), repeater=None)

    def test_unrecognized_payload(self):
        assert parse_org_timestamp("<2024-01-15 whenever>") is None

    def test_no_timestamp(self):
        assert parse_org_timestamp("no date here") is None

    def test_localized_with_mappings(self):
        parsed = parse_org_timestamp("<2024-01-15 Пн +1d>", [("Пн", "Mon")])
        assert parsed.repeater == Repeater(RepeaterKind.CUMULATIVE, 1, RepeaterUnit.DAY)

    def test_localized_without_mappings(self):
        assert parse_org_timestamp("<2024-01-15 Пн>") is None


class TestDatePredicates:
    @pytest.fixture
    def parsed(self):
        return ParsedTimestamp(date=date(2024, 1, 15))

    def test_matches_date(self, parsed):
        assert timestamp_matches_date(parsed, date(2024, 1, 15)) is True
        assert timestamp_matches_date(parsed, date(2024, 1, 16)) is False

    def test_in_range_inclusive(self, parsed):
        assert timestamp_in_range(parsed, date(2024, 1, 15), date(2024, 1, 21)) is True
        assert timestamp_in_range(parsed, date(2024, 1, 8), date(2024, 1, 15)) is True

    def test_outside_range(self, parsed):
        assert timestamp_in_range(parsed, date(2024, 1, 16), date(2024, 1, 21)) is False
