"""Tests for calendar helpers."""

from datetime import date, datetime

import pytest

from datebook.errors import DateOutOfRangeError, InvalidDateError
from datebook.utils.date_utils import (
    add_days,
    format_with_pattern,
    invalid_reason,
    parse_date,
    start_of_month,
    start_of_week,
    unit_difference,
    weekday_name,
)

START = date(2025, 6, 16)  # Monday


class TestParseDate:
    @pytest.mark.parametrize("text", ["2025-06-16", "16.06.2025", "16/06/2025", " 2025-06-16 "])
    def test_formats(self, text):
        assert parse_date(text) == START

    def test_date_and_datetime(self):
        assert parse_date(START) == START
        assert parse_date(datetime(2025, 6, 16, 13, 30)) == START

    def test_out_of_range(self):
        with pytest.raises(InvalidDateError, match="out of range"):
            parse_date("2025-02-30")

    def test_garbage(self):
        with pytest.raises(InvalidDateError, match="unparsable"):
            parse_date("next tuesday")

    def test_invalid_reason(self):
        assert invalid_reason(START) is None
        assert invalid_reason("2025-06-16") is None
        assert "unsupported" in invalid_reason(42)


class TestCalendarArithmetic:
    def test_weekday_name(self):
        assert weekday_name(START) == "Monday"
        assert weekday_name(date(2025, 6, 22)) == "Sunday"

    def test_start_of_week(self):
        assert start_of_week(date(2025, 6, 22)) == START
        assert start_of_week(START) == START

    def test_start_of_month(self):
        assert start_of_month(START) == date(2025, 6, 1)

    def test_add_days(self):
        assert add_days(START, 16) == date(2025, 7, 2)

    def test_add_days_past_end_of_calendar(self):
        with pytest.raises(DateOutOfRangeError):
            add_days(date.max, 1)

    def test_week_difference(self):
        assert unit_difference(date(2025, 6, 30), START, "week") == 2.0
        assert unit_difference(date(2025, 6, 19), START, "week") == pytest.approx(3 / 7)

    def test_month_difference(self):
        assert unit_difference(date(2025, 7, 1), date(2025, 6, 1), "month") == 1.0
        assert unit_difference(START, date(2025, 6, 1), "month") == pytest.approx(0.5)
        assert unit_difference(date(2026, 1, 15), date(2025, 11, 1), "month") == pytest.approx(
            2 + 14 / 31
        )

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            unit_difference(START, START, "fortnight")  # type: ignore[arg-type]


class TestFormatWithPattern:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("yyyy-MM-dd", "2025-06-16"),
            ("d/M/yy", "16/6/25"),
            ("EEE d MMM", "Mon 16 Jun"),
            ("cccc", "Monday"),
            ("E", "1"),
            ("EEEEE", "M"),
            ("ccccc", "M"),
            ("MMMMM", "J"),
            ("yyyyyy", "002025"),
            ("EE", "EE"),
            ("o", "167"),
            ("q", "2"),
            ("WW", "25"),
            ("DDD", "June 16, 2025"),
            ("DDDD", "Monday, June 16, 2025"),
            ("'day' d", "day 16"),
            ("''", "'"),
            ("zz", "zz"),
        ],
    )
    def test_tokens(self, pattern, expected):
        assert format_with_pattern(START, pattern) == expected
