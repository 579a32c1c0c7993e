"""Date parsing utilities."""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser

DAYS_AGO_PATTERN = re.compile(r"^(\d+)\s+days?\s+ago$")
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def _relative_date(date_str: str, today: date) -> Optional[date]:
    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)
    if date_str == "tomorrow":
        return today + timedelta(days=1)

    match = DAYS_AGO_PATTERN.match(date_str)
    if match:
        return today - timedelta(days=int(match.group(1)))

    if date_str.startswith("last "):
        day = date_str[5:]
        if day in WEEKDAYS:
            days_ago = (today.weekday() - WEEKDAYS.index(day)) % 7 or 7
            return today - timedelta(days=days_ago)
    return None


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2025-03-01", "March 1, 2025") and relative
    ones ("today", "yesterday", "tomorrow", "3 days ago", "last friday").

    Args:
        date_str: Date string
        today: Reference date for relative dates (defaults to the current date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative = _relative_date(date_str, today)
    if relative is not None:
        return relative

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str, now: Optional[datetime] = None) -> datetime:
    """Parse a trip timestamp.

    Accepts "now", a relative day optionally followed by a time
    ("yesterday 08:30"), or anything dateutil understands
    ("2025-03-01 18:05"). A bare date resolves to midnight.

    Raises:
        ValueError: If the value cannot be parsed
    """
    value = value.strip().lower()
    now = now or datetime.now()
    if value == "now":
        return now

    day_part, _, time_part = value.rpartition(" ")
    if day_part and re.fullmatch(r"\d{1,2}:\d{2}", time_part):
        relative = _relative_date(day_part, now.date())
        if relative is not None:
            hours, minutes = (int(p) for p in time_part.split(":"))
            return datetime.combine(relative, time(hours, minutes))

    relative = _relative_date(value, now.date())
    if relative is not None:
        return datetime.combine(relative, time())

    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{value}': {e}")
