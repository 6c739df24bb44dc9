"""Mutations of the persisted record: habits, journal and study sessions."""

from .habits import add_habit_date, track_habit, get_habit_completion_rate, get_habit_streak
from .journal import add_journal_entry, split_lines
from .study import log_study_session, get_study_time_for_range, get_today_study_time

__all__ = [
    'add_habit_date',
    'track_habit',
    'get_habit_completion_rate',
    'get_habit_streak',
    'add_journal_entry',
    'split_lines',
    'log_study_session',
    'get_study_time_for_range',
    'get_today_study_time',
]
