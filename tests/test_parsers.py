"""Tests for amount and date parsing."""

from datetime import date, datetime, timedelta

import pytest

from faretrack.utils.amount_parser import parse_amount
from faretrack.utils.date_parser import parse_date, parse_datetime


@pytest.mark.parametrize(
    "text,expected",
    [
        ("45", 45),
        ("NT$45", 45),
        ("$45", 45),
        ("1,200", 1200),
        (" 35 ", 35),
        ("TWD 60", 60),
        ("45元", 45),
        ("45.0", 45),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12.5", "nan"])
def test_parse_amount_rejects(text):
    with pytest.raises(ValueError):
        parse_amount(text)


class TestParseDate:
    """Tests for date parsing with relative dates."""

    TODAY = date(2025, 3, 5)  # Wednesday

    def test_absolute(self):
        assert parse_date("2025-03-01") == date(2025, 3, 1)
        assert parse_date("March 1, 2025") == date(2025, 3, 1)

    def test_relative_words(self):
        assert parse_date("today", today=self.TODAY) == self.TODAY
        assert parse_date("Yesterday", today=self.TODAY) == date(2025, 3, 4)
        assert parse_date("tomorrow", today=self.TODAY) == date(2025, 3, 6)
        assert parse_date("3 days ago", today=self.TODAY) == date(2025, 3, 2)

    def test_last_weekday(self):
        assert parse_date("last friday", today=self.TODAY) == date(2025, 2, 28)
        assert parse_date("last wednesday", today=self.TODAY) == date(2025, 2, 26)

    def test_default_today(self):
        assert parse_date("yesterday") == date.today() - timedelta(days=1)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_date("not a date")


class TestParseDatetime:
    """Tests for trip timestamp parsing."""

    NOW = datetime(2025, 3, 5, 18, 0)

    def test_now(self):
        assert parse_datetime("now", now=self.NOW) == self.NOW

    def test_relative_day_with_time(self):
        assert parse_datetime("yesterday 08:30", now=self.NOW) == datetime(2025, 3, 4, 8, 30)
        assert parse_datetime("2 days ago 07:15", now=self.NOW) == datetime(2025, 3, 3, 7, 15)

    def test_absolute(self):
        assert parse_datetime("2025-03-01 18:05", now=self.NOW) == datetime(2025, 3, 1, 18, 5)
        assert parse_datetime("2025-03-01", now=self.NOW) == datetime(2025, 3, 1)

    def test_relative_day_is_midnight(self):
        assert parse_datetime("today", now=self.NOW) == datetime(2025, 3, 5)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_datetime("whenever", now=self.NOW)
