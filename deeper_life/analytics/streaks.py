"""
Streak calculations for habit completion dates.

Dates are ISO day strings; they are parsed to ``datetime.date`` and
compared by calendar day. Duplicates and unparsable entries are ignored.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional

from ..core.models import Habit
from ..utils.date import parse_dates, resolve_today


def current_streak(dates: Iterable[str], today: Optional[date] = None) -> int:
    """
    Count consecutive completed days ending today or yesterday.

    The most recent date has to be today or yesterday to start the count;
    every following date must be exactly one day before the previously
    accepted one. The walk stops at the first gap. Dates after ``today``
    are not counted.
    """
    today = resolve_today(today)
    days = sorted((d for d in parse_dates(dates) if d <= today), reverse=True)
    if not days:
        return 0

    streak = 0
    reference = today
    for d in days:
        gap = (reference - d).days
        if gap == 1 or (streak == 0 and gap == 0):
            streak += 1
            reference = d
        else:
            break

    return streak


def longest_streak(dates: Iterable[str]) -> int:
    """Longest run of consecutive days anywhere in the history."""
    days = sorted(parse_dates(dates))
    if not days:
        return 0

    best = 1
    run = 1
    for previous, current in zip(days, days[1:]):
        if (current - previous).days == 1:
            run += 1
            best = max(best, run)
        else:
            run = 1

    return best


def get_streak(habit: Habit, today: Optional[date] = None) -> Dict[str, int]:
    """
    Calculate current and best streak for a habit.

    Returns:
        Dict with "current" and "best" streak counts in days
    """
    return {
        "current": current_streak(habit.dates, today),
        "best": longest_streak(habit.dates),
    }


def get_all_streaks(
    habits: List[Habit],
    min_current: int = 1,
    today: Optional[date] = None
) -> Dict[str, Dict[str, int]]:
    """
    Get all active streaks.

    Args:
        habits: Habits to inspect
        min_current: Minimum current streak to include

    Returns:
        Dict mapping habit id to streak info
    """
    streaks = {}
    for habit in habits:
        info = get_streak(habit, today)
        if info["current"] >= min_current:
            streaks[habit.id] = info
    return streaks
