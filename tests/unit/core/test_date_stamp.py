"""
Unit tests for DateStamp helpers.
"""

from datetime import date

import pytest

from climatrack.core.retrieval.date_stamp import (
    format_date_stamp,
    parse_date_stamp,
    previous_day,
)


class TestPreviousDay:
    """previous_day across month, year and leap-day boundaries."""

    @pytest.mark.parametrize(
        "stamp, expected",
        [
            ("20240301", "20240229"),  # leap year
            ("20230301", "20230228"),
            ("21000301", "21000228"),  # century, not leap
            ("20000301", "20000229"),  # 400-year rule
            ("20240101", "20231231"),
            ("20240501", "20240430"),
            ("20240615", "20240614"),
        ],
    )
    def test_previous_day(self, stamp, expected):
        assert previous_day(stamp) == expected

    def test_previous_day_rejects_invalid_stamp(self):
        with pytest.raises(ValueError):
            previous_day("20240230")


class TestParsing:
    def test_parse_and_format(self):
        assert parse_date_stamp("20240615") == date(2024, 6, 15)
        assert format_date_stamp(date(2024, 6, 5)) == "20240605"

    @pytest.mark.parametrize(
        "value", ["2024-06-15", "2024061", "202406150", "abcdefgh", "20241301", ""]
    )
    def test_invalid_values(self, value):
        with pytest.raises(ValueError, match="use YYYYMMDD"):
            parse_date_stamp(value)

    def test_lexicographic_order_matches_calendar(self):
        stamps = ["20240101", "20231231", "20240229", "20240210"]
        assert sorted(stamps) == sorted(stamps, key=parse_date_stamp)
