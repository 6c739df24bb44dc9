"""Habit history mutations and id-based lookups."""

import logging
from datetime import date
from typing import Optional

from ..analytics.habits import completion_rate
from ..analytics.streaks import current_streak
from ..core.models import AppData, Habit, HABIT_HISTORY_LIMIT
from ..utils.date import format_date, parse_date, resolve_today

logger = logging.getLogger(__name__)


def add_habit_date(habit: Habit, day: str, limit: int = HABIT_HISTORY_LIMIT) -> bool:
    """
    Record ``day`` for ``habit``.

    Keeps ``habit.dates`` sorted, free of duplicates and trimmed to the
    latest ``limit`` days.

    ``day`` is stored as a plain YYYY-MM-DD string whatever form it was
    given in.

    Returns:
        True if the date was added and kept, False if it was already present
        or is older than the kept window
    """
    parsed = parse_date(day)
    if parsed is None:
        raise ValueError(f"Invalid date '{day}', expected YYYY-MM-DD")
    day = format_date(parsed)
    if day in habit.dates:
        return False

    habit.dates = sorted(set(habit.dates) | {day})[-limit:]
    if day not in habit.dates:
        logger.warning("Date %s for habit %s is outside the last %d tracked days", day, habit.id, limit)
        return False
    return True


def track_habit(data: AppData, habit_id: str, day: Optional[str] = None, today: Optional[date] = None) -> bool:
    """
    Mark a habit as done on ``day`` (today by default).

    Unknown habit ids are ignored.
    """
    habit = data.find_habit(habit_id)
    if habit is None:
        logger.warning("Cannot track unknown habit '%s'", habit_id)
        return False

    day = day or format_date(resolve_today(today))
    added = add_habit_date(habit, day)
    if added:
        logger.debug("Tracked habit %s on %s", habit_id, day)
    return added


def get_habit_completion_rate(data: AppData, habit_id: str, days: int = 7, today: Optional[date] = None) -> int:
    habit = data.find_habit(habit_id)
    if habit is None:
        return 0
    return completion_rate(habit, days, today)


def get_habit_streak(data: AppData, habit_id: str, today: Optional[date] = None) -> int:
    habit = data.find_habit(habit_id)
    if habit is None or not habit.dates:
        return 0
    return current_streak(habit.dates, today)
