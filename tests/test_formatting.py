"""Tests for the entry template formatter."""

from dataclasses import replace

import pytest

from datebook.services.formatting import format_entry


class TestFormatEntry:
    def test_day_count(self, first_entry):
        assert format_entry(first_entry, "Day %d, %D") == "Day 1, 1st"

    def test_week_count(self, first_entry):
        assert format_entry(first_entry, "Week %w, %W") == "Week 1, 1st"

    def test_percent_literal(self, first_entry):
        assert format_entry(first_entry, "Day %%%d, %D") == "Day %1, 1st"
        assert format_entry(first_entry, "%%") == "%"

    def test_unknown_codes_pass_through(self, first_entry):
        assert format_entry(first_entry, "Day %p%d, %D") == "Day %p1, 1st"

    def test_date_pattern(self, first_entry):
        assert format_entry(first_entry, "Year %{yyyy}") == "Year 2025"
        assert format_entry(first_entry, "%{EEEE, d MMMM}") == "Monday, 16 June"

    def test_quoted_text_in_date_pattern(self, first_entry):
        assert format_entry(first_entry, "%{'Week' W}") == "Week 25"

    def test_default_template(self, first_entry):
        assert format_entry(first_entry, "%{yyyy-MM-dd}") == "2025-06-16"

    @pytest.mark.parametrize("template", ["%{yyyy-MM-dd", "100%", "%}", "%{", "plain"])
    def test_malformed_templates_are_literal(self, first_entry, template):
        assert format_entry(first_entry, template) == template

    @pytest.mark.parametrize(
        "count, expected",
        [(2, "2nd"), (3, "3rd"), (11, "11th"), (12, "12th"), (22, "22nd"), (101, "101st")],
    )
    def test_ordinals(self, first_entry, count, expected):
        entry = replace(first_entry, day_count=count, week_count=count)
        assert format_entry(entry, "%D") == expected
        assert format_entry(entry, "%W") == expected

    def test_russian_ordinals(self, first_entry):
        assert format_entry(first_entry, "%D день", lang="ru") == "1-й день"
