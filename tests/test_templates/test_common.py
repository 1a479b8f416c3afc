"""Tests for shared template helpers and the report catalogue."""

import pytest

from slack_reports.templates import (
    REPORT_TYPES,
    get_available_report_types,
    get_report_type_description,
)
from slack_reports.templates.common import (
    Severity,
    format_currency,
    format_list_items,
    format_percent,
    format_timestamp,
    safe_percentage,
    severity_info,
)


class TestSeverity:
    @pytest.mark.parametrize("level,icon", [
        ("CRITICAL", "🚨"),
        ("high", "⚠️"),
        ("Medium", "🔶"),
        ("low", "ℹ️"),
        ("whatever", "❓"),
    ])
    def test_icons(self, level, icon):
        assert severity_info(level).icon == icon

    def test_label_keeps_caller_spelling(self):
        assert severity_info("High").label == "High"

    def test_custom_default_icon(self):
        assert severity_info("NOTICE", default_icon="📊").icon == "📊"

    def test_parse_unknown(self):
        assert Severity.parse(None) == Severity.UNKNOWN


class TestFormatting:
    def test_timestamp(self, fixed_now):
        assert format_timestamp(fixed_now) == "19.10.2026 09:30:00"

    def test_list_items_bullets_every_item(self):
        assert format_list_items(["a", "b", "c"]) == "• a\n• b\n• c"

    def test_list_items_empty(self):
        assert format_list_items([]) == "No items to display"
        assert format_list_items([], empty_text="Nothing") == "Nothing"

    def test_currency(self):
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(-12) == "-$12.00"

    def test_percent(self):
        assert format_percent(12.345) == "12.3%"
        assert format_percent(50, decimals=0) == "50%"

    def test_safe_percentage(self):
        assert safe_percentage(1, 4) == 25.0
        assert safe_percentage(5, 0) == 0.0


class TestCatalogue:
    def test_lists_report_types(self):
        types = get_available_report_types()
        assert types[0] == "Performance Report"
        assert "Test Report" in types
        assert len(types) == len(REPORT_TYPES)

    def test_description_lookup_is_case_insensitive(self):
        assert get_report_type_description("error report") == REPORT_TYPES["Error Report"]

    def test_unknown_description(self):
        assert get_report_type_description("Weather Report") == "Report type description not available"
