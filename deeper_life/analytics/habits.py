"""
Habit analytics: completion rates, weekly comparison, predictions and reports.

Every function recomputes from ``habit.dates`` and the supplied ``today``
(local calendar date by default); nothing is cached between calls.
"""

import math
import random
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.models import Habit, now_iso
from ..utils.date import date_range_back, format_date, parse_dates, resolve_today, start_of_week
from .streaks import current_streak, longest_streak


PREDICTION_WEEKS = 8
NEEDS_ATTENTION_RATE = 50

MessageChooser = Callable[[Sequence[str]], str]


def _percent(part: int, whole: int) -> int:
    """Percentage rounded half up."""
    if whole <= 0:
        return 0
    return int(math.floor(part * 100 / whole + 0.5))


def get_last_n_days(n: int = 21, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Describe the last ``n`` days, oldest first, today last."""
    today = resolve_today(today)
    days = []
    for offset in range(n - 1, -1, -1):
        d = today - timedelta(days=offset)
        days.append({
            "date": format_date(d),
            "day": d.day,
            "month": d.month,
            "year": d.year,
            "weekday": d.weekday(),
            "is_today": offset == 0,
            "is_weekend": d.weekday() >= 5,
        })
    return days


def is_completed_on(habit: Habit, day: str) -> bool:
    return day in habit.dates


def completion_count(habit: Habit, start: date, end: date) -> int:
    """Number of completions between ``start`` and ``end`` inclusive."""
    return sum(1 for d in parse_dates(habit.dates) if start <= d <= end)


def completion_rate(habit: Habit, days: int = 7, today: Optional[date] = None) -> int:
    """Percentage of the last ``days`` calendar days (today inclusive) completed."""
    if days <= 0:
        return 0
    completed = parse_dates(habit.dates)
    window = date_range_back(resolve_today(today), days)
    hits = sum(1 for d in window if d in completed)
    return _percent(hits, days)


def weekly_comparison(habit: Habit, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Compare this week (Sunday..today) with the previous seven days.

    Returns:
        Dict with this_week, last_week, change and improved
    """
    today = resolve_today(today)
    this_week_start = start_of_week(today)
    last_week_start = this_week_start - timedelta(days=7)
    last_week_end = this_week_start - timedelta(days=1)

    this_week = completion_count(habit, this_week_start, today)
    last_week = completion_count(habit, last_week_start, last_week_end)

    return {
        "this_week": this_week,
        "last_week": last_week,
        "change": this_week - last_week,
        "improved": this_week > last_week,
    }


def get_stats(habit: Habit, today: Optional[date] = None) -> Dict[str, Any]:
    today = resolve_today(today)
    return {
        "total": len(habit.dates),
        "current_streak": current_streak(habit.dates, today),
        "longest_streak": longest_streak(habit.dates),
        "completion_rate_7_days": completion_rate(habit, 7, today),
        "completion_rate_30_days": completion_rate(habit, 30, today),
        "completed_today": format_date(today) in habit.dates,
    }


def predict_tomorrow(habit: Habit, today: Optional[date] = None) -> int:
    """
    Estimate the chance of completing the habit tomorrow.

    Looks at the same weekday as tomorrow over the last eight weeks
    (tomorrow, tomorrow - 7 days, ... tomorrow - 49 days) and returns the
    share that were completed as a rounded percentage.
    """
    tomorrow = resolve_today(today) + timedelta(days=1)
    completed = parse_dates(habit.dates)
    hits = sum(
        1 for week in range(PREDICTION_WEEKS)
        if tomorrow - timedelta(days=7 * week) in completed
    )
    return _percent(hits, PREDICTION_WEEKS)


def motivational_messages(habit: Habit, today: Optional[date] = None) -> List[str]:
    """Every message whose trigger applies, in priority order."""
    stats = get_stats(habit, today)
    streak = stats["current_streak"]
    messages = []

    if streak >= 7:
        messages.append(f"🔥 Amazing! {streak}-day streak on {habit.name}!")
    if streak >= 21:
        messages.append(f"🏆 Incredible! {streak} days - this is now a habit!")
    if streak >= 66:
        messages.append(f"⭐ Legendary! {streak} days - you've mastered this!")
    if stats["completion_rate_7_days"] == 100:
        messages.append("✨ Perfect week! Keep it up!")
    if streak == 0 and stats["total"] > 0:
        messages.append(f"💪 Time to restart your {habit.name} streak!")
    if streak > 0 and streak == stats["longest_streak"]:
        messages.append(f"🎯 New personal record! {streak} days!")

    return messages


def motivational_message(
    habit: Habit,
    today: Optional[date] = None,
    chooser: MessageChooser = random.choice
) -> str:
    """Pick one triggered message, or a generic nudge when none apply."""
    messages = motivational_messages(habit, today)
    if not messages:
        return f"Keep going with {habit.name}!"
    return chooser(messages)


def visualize(habit: Habit, days: int = 21, today: Optional[date] = None) -> str:
    """Render the last ``days`` days as a strip of ■ (done) and □ (missed)."""
    return " ".join(
        "■" if is_completed_on(habit, day["date"]) else "□"
        for day in get_last_n_days(days, today)
    )


def get_by_category(habits: List[Habit], category: str) -> List[Habit]:
    return [habit for habit in habits if habit.category == category]


def get_categories(habits: List[Habit]) -> List[str]:
    return sorted({habit.category for habit in habits})


def sort_by_completion_rate(habits: List[Habit], days: int = 7, today: Optional[date] = None) -> List[Habit]:
    """Best rate first; returns a new list."""
    return sorted(habits, key=lambda h: completion_rate(h, days, today), reverse=True)


def sort_by_streak(habits: List[Habit], today: Optional[date] = None) -> List[Habit]:
    """Longest current streak first; returns a new list."""
    return sorted(habits, key=lambda h: current_streak(h.dates, today), reverse=True)


def today_summary(habits: List[Habit], today: Optional[date] = None) -> Dict[str, Any]:
    today_str = format_date(resolve_today(today))
    completed = [habit.name for habit in habits if today_str in habit.dates]
    remaining = [habit.name for habit in habits if today_str not in habit.dates]
    total = len(habits)

    return {
        "completed": len(completed),
        "total": total,
        "percentage": _percent(len(completed), total),
        "remaining": len(remaining),
        "habits": {
            "completed": completed,
            "remaining": remaining,
        },
    }


def generate_report(
    habits: List[Habit],
    today: Optional[date] = None,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Build a full habit report.

    Returns:
        Dict with keys:
            - timestamp: when the report was generated
            - summary: today's completed/remaining habits
            - habits: per-habit stats and weekly comparison
            - insights: human readable observations
    """
    today = resolve_today(today)
    report = {
        "timestamp": now_iso(now),
        "summary": today_summary(habits, today),
        "habits": [
            {
                "id": habit.id,
                "name": habit.name,
                "category": habit.category,
                "stats": get_stats(habit, today),
                "weekly": weekly_comparison(habit, today),
            }
            for habit in habits
        ],
        "insights": [],
    }

    ranked = sort_by_streak(habits, today)
    if ranked:
        best = ranked[0]
        report["insights"].append(
            f"Your strongest habit: {best.name} ({current_streak(best.dates, today)}-day streak)"
        )

    needs_work = [
        habit.name for habit in habits
        if completion_rate(habit, 7, today) < NEEDS_ATTENTION_RATE
    ]
    if needs_work:
        report["insights"].append(f"Habits needing attention: {', '.join(needs_work)}")

    return report
