"""Time-of-day helpers for the status screen."""

from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..utils.date import format_date, parse_hhmm, resolve_today


def get_time_until(target_time: str, now: Optional[datetime] = None) -> Tuple[int, int]:
    """
    Hours and minutes until the next ``target_time`` (HH:MM).

    Rolls over to tomorrow when the target has already passed today.
    """
    now = now or datetime.now()
    target_minutes = parse_hhmm(target_time)
    target = now.replace(
        hour=target_minutes // 60,
        minute=target_minutes % 60,
        second=0,
        microsecond=0,
    )
    if target < now:
        target += timedelta(days=1)

    total_minutes = int((target - now).total_seconds() // 60)
    return total_minutes // 60, total_minutes % 60


def format_time_remaining(hours: int, minutes: int) -> str:
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def get_greeting(now: Optional[datetime] = None) -> str:
    hour = (now or datetime.now()).hour
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    if hour < 21:
        return "Good evening"
    return "Good night"


def is_first_visit_today(store, today: Optional[date] = None) -> bool:
    """
    True the first time this is called on a given day.

    Records today as the last visit on the store's marker.
    """
    today_str = format_date(resolve_today(today))
    if store.get_last_visit() != today_str:
        store.set_last_visit(today_str)
        return True
    return False
