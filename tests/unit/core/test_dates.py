"""Tests for calendar-date helpers (no timezone shifting)."""

import datetime
import locale

import pytest

from athlete_tracker.core.dates import (
    compare_dates,
    days_between,
    format_date,
    format_date_long,
    format_month_label,
    get_local_date_string,
    month_key,
    parse_local_date,
)


class TestParseLocalDate:
    def test_plain_date_string(self):
        assert parse_local_date("2024-01-05") == datetime.date(2024, 1, 5)

    @pytest.mark.parametrize("value", [
        "2024-01-05T00:00:00Z",
        "2024-01-05T23:30:00-08:00",
        "2024-01-05T00:30:00+14:00",
        "2024-01-05 08:30",
    ])
    def test_time_suffix_does_not_shift_day(self, value):
        assert parse_local_date(value) == datetime.date(2024, 1, 5)

    def test_date_passthrough(self):
        d = datetime.date(2023, 12, 31)
        assert parse_local_date(d) is d

    def test_datetime_truncated(self):
        assert parse_local_date(datetime.datetime(2024, 3, 9, 23, 59)) == datetime.date(2024, 3, 9)

    @pytest.mark.parametrize("value", [
        "",
        "05/01/2024",
        "2024-02-30",
        "not a date",
        "2024-01-011",
        "2024-12-3199",
        "2024-01-05garbage",
        "2024-01-05Z",
    ])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError):
            parse_local_date(value)


class TestCompareDates:
    def test_ordering(self):
        assert compare_dates("2024-01-01", "2024-01-08") < 0
        assert compare_dates("2024-01-08", "2024-01-01") > 0

    def test_same_day_different_offsets_equal(self):
        assert compare_dates("2024-01-05T00:30:00+14:00", "2024-01-05T23:00:00-12:00") == 0

    def test_mixed_types(self):
        assert compare_dates(datetime.date(2024, 1, 5), "2024-01-05") == 0


class TestFormatting:
    def test_format_date(self):
        assert format_date("2024-01-05") == "Jan 5"

    def test_format_date_long(self):
        assert format_date_long("2024-01-05") == "Friday, January 5, 2024"

    @pytest.mark.parametrize("value, expected", [
        ("2024-03-09", "Saturday, March 9, 2024"),
        ("2024-12-31", "Tuesday, December 31, 2024"),
    ])
    def test_format_date_long_names(self, value, expected):
        assert format_date_long(value) == expected

    def test_labels_ignore_process_locale(self):
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_date("2024-03-09") == "Mar 9"
            assert format_date_long("2024-03-09") == "Saturday, March 9, 2024"
            assert format_month_label("2024-10-01") == "Oct 2024"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_month_helpers(self):
        assert month_key("2024-03-09") == "2024-03"
        assert format_month_label("2024-03-09") == "Mar 2024"

    def test_get_local_date_string(self):
        assert get_local_date_string(datetime.date(2024, 3, 9)) == "2024-03-09"
        assert get_local_date_string() == datetime.date.today().isoformat()

    def test_days_between(self):
        assert days_between("2024-02-28", "2024-03-01") == 2
