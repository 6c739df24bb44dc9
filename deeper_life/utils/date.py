"""
Date parsing and formatting utilities.

Habit history is kept as ISO day strings (YYYY-MM-DD) and compared as
``datetime.date`` values, so every difference is a whole number of calendar
days regardless of time of day or DST.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Set


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """
    Parse a date string into a date object.

    Handles various formats:
    - ISO format (YYYY-MM-DD)
    - ISO datetime (YYYY-MM-DDTHH:MM:SS)

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object or None if invalid
    """
    if not date_str:
        return None

    # Take only date part if it's a datetime string
    if 'T' in date_str:
        date_str = date_str.split('T')[0]

    try:
        return datetime.strptime(date_str.strip(), '%Y-%m-%d').date()
    except ValueError:
        return None


def format_date(d: Optional[date]) -> Optional[str]:
    """
    Format a date object as ISO string (YYYY-MM-DD).

    Args:
        d: Date object to format

    Returns:
        ISO formatted date string or None
    """
    if not d:
        return None

    return d.strftime('%Y-%m-%d')


def resolve_today(today: Optional[date] = None) -> date:
    """Return ``today`` or the local calendar date."""
    return today if today is not None else date.today()


def today_string(today: Optional[date] = None) -> str:
    return format_date(resolve_today(today))


def parse_dates(values: Iterable[str]) -> Set[date]:
    """Parse a collection of ISO day strings, dropping invalid entries."""
    parsed = set()
    for value in values:
        d = parse_date(value)
        if d is not None:
            parsed.add(d)
    return parsed


def date_range_back(end: date, days: int) -> List[date]:
    """Return ``days`` dates walking backward from ``end`` (inclusive)."""
    return [end - timedelta(days=i) for i in range(days)]


def start_of_week(d: date) -> date:
    """Sunday on or before ``d``."""
    return d - timedelta(days=(d.weekday() + 1) % 7)


def parse_hhmm(value: str) -> int:
    """
    Convert an HH:MM string into minutes since midnight.

    Raises:
        ValueError: If the value is not a valid 24h time
    """
    try:
        hours_str, minutes_str = value.strip().split(':')
        hours, minutes = int(hours_str), int(minutes_str)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time '{value}', expected HH:MM")

    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    return hours * 60 + minutes
