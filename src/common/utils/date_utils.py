"""Utility functions for Google Base date and dateTime values."""

from datetime import date, datetime

import pytz


def parse_gbase_date(date_str: str) -> date:
    """Parses an ISO date string such as '2006-12-04'."""
    if not date_str:
        raise ValueError("Empty date value")
    return date.fromisoformat(date_str.strip())


def parse_gbase_datetime(dt_str: str) -> datetime:
    """
    Parses an ISO 8601 date or dateTime string into an aware datetime.

    Both 'Z' and numeric offsets are accepted. Naive values are taken as UTC
    and a plain date becomes midnight UTC.
    """
    if not dt_str:
        raise ValueError("Empty dateTime value")
    value = dt_str.strip()
    if "T" not in value:
        day = date.fromisoformat(value)
        return pytz.utc.localize(datetime(day.year, day.month, day.day))

    dt_obj = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt_obj.tzinfo is None:
        return pytz.utc.localize(dt_obj)
    return dt_obj


def format_gbase_date(value: date) -> str:
    """Formats a date as 'YYYY-MM-DD'."""
    return value.strftime("%Y-%m-%d")


def format_gbase_datetime(value: datetime) -> str:
    """Formats a datetime in UTC with a 'Z' suffix. Microseconds are dropped."""
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
