"""Analytics modules for habit statistics and streak tracking."""

from .streaks import current_streak, longest_streak, get_streak, get_all_streaks
from .habits import (
    completion_rate,
    weekly_comparison,
    get_stats,
    predict_tomorrow,
    motivational_messages,
    motivational_message,
    today_summary,
    generate_report,
)

__all__ = [
    'current_streak',
    'longest_streak',
    'get_streak',
    'get_all_streaks',
    'completion_rate',
    'weekly_comparison',
    'get_stats',
    'predict_tomorrow',
    'motivational_messages',
    'motivational_message',
    'today_summary',
    'generate_report',
]
