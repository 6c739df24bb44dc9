"""
Tests for habit analytics: rates, weekly comparison, predictions,
motivational messages and reports.
"""

from datetime import date, datetime

import pytest

from deeper_life.analytics.habits import (
    completion_rate,
    generate_report,
    get_by_category,
    get_categories,
    get_last_n_days,
    get_stats,
    motivational_message,
    motivational_messages,
    predict_tomorrow,
    sort_by_completion_rate,
    sort_by_streak,
    today_summary,
    visualize,
    weekly_comparison,
)
from deeper_life.core.models import Habit


# Wednesday; the week started on Sunday 2024-03-10
TODAY = date(2024, 3, 13)


def make_habit(habit_id="read", name="Reading", category="learning", dates=None):
    return Habit(id=habit_id, name=name, category=category, dates=list(dates or []))


class TestCompletionRate:
    def test_three_of_seven_rounds_half_up(self):
        habit = make_habit(dates=["2024-03-13", "2024-03-11", "2024-03-09"])
        assert completion_rate(habit, 7, TODAY) == 43

    def test_window_is_calendar_days_ending_today(self):
        # 2024-03-06 is eight days back and outside the window
        habit = make_habit(dates=["2024-03-06", "2024-03-07"])
        assert completion_rate(habit, 7, TODAY) == 14

    def test_empty_history(self):
        assert completion_rate(make_habit(), 7, TODAY) == 0

    def test_zero_days(self):
        habit = make_habit(dates=["2024-03-13"])
        assert completion_rate(habit, 0, TODAY) == 0

    def test_perfect_week(self):
        dates = [f"2024-03-{day:02d}" for day in range(7, 14)]
        assert completion_rate(make_habit(dates=dates), 7, TODAY) == 100


class TestWeeklyComparison:
    def test_this_week_against_last_week(self):
        habit = make_habit(dates=["2024-03-10", "2024-03-11", "2024-03-12", "2024-03-05"])

        weekly = weekly_comparison(habit, TODAY)

        assert weekly == {"this_week": 3, "last_week": 1, "change": 2, "improved": True}

    def test_saturday_belongs_to_previous_week(self):
        habit = make_habit(dates=["2024-03-09"])

        weekly = weekly_comparison(habit, TODAY)

        assert weekly["this_week"] == 0
        assert weekly["last_week"] == 1
        assert weekly["improved"] is False

    def test_no_change(self):
        weekly = weekly_comparison(make_habit(), TODAY)
        assert weekly["change"] == 0
        assert weekly["improved"] is False


class TestStats:
    def test_stats_keys(self):
        habit = make_habit(dates=["2024-03-12", "2024-03-13"])

        stats = get_stats(habit, TODAY)

        assert stats["total"] == 2
        assert stats["current_streak"] == 2
        assert stats["longest_streak"] == 2
        assert stats["completion_rate_7_days"] == 29
        assert stats["completion_rate_30_days"] == 7
        assert stats["completed_today"] is True

    def test_not_completed_today(self):
        stats = get_stats(make_habit(dates=["2024-03-12"]), TODAY)
        assert stats["completed_today"] is False


class TestPrediction:
    def test_same_weekday_history(self):
        # Tomorrow is Thursday 2024-03-14; two of the last eight Thursdays done
        habit = make_habit(dates=["2024-03-07", "2024-02-29", "2024-03-06"])
        assert predict_tomorrow(habit, TODAY) == 25

    def test_no_history(self):
        assert predict_tomorrow(make_habit(), TODAY) == 0


class TestMotivationalMessages:
    def test_week_long_streak_triggers_several_messages(self):
        dates = [f"2024-03-{day:02d}" for day in range(7, 14)]
        habit = make_habit(dates=dates)

        messages = motivational_messages(habit, TODAY)

        assert "🔥 Amazing! 7-day streak on Reading!" in messages
        assert "✨ Perfect week! Keep it up!" in messages
        assert "🎯 New personal record! 7 days!" in messages

    def test_broken_streak_suggests_restart(self):
        habit = make_habit(dates=["2024-03-01"])
        assert motivational_messages(habit, TODAY) == ["💪 Time to restart your Reading streak!"]

    def test_chooser_picks_from_triggered_messages(self):
        dates = [f"2024-03-{day:02d}" for day in range(7, 14)]
        habit = make_habit(dates=dates)

        message = motivational_message(habit, TODAY, chooser=lambda options: options[-1])

        assert message == "🎯 New personal record! 7 days!"

    def test_fallback_when_nothing_triggers(self):
        message = motivational_message(make_habit(), TODAY, chooser=lambda options: pytest.fail("not called"))
        assert message == "Keep going with Reading!"


class TestCollections:
    def test_last_n_days_ends_today(self):
        days = get_last_n_days(3, TODAY)

        assert [d["date"] for d in days] == ["2024-03-11", "2024-03-12", "2024-03-13"]
        assert days[-1]["is_today"] is True
        assert days[0]["is_today"] is False

    def test_visualize(self):
        habit = make_habit(dates=["2024-03-13", "2024-03-11"])
        assert visualize(habit, days=3, today=TODAY) == "■ □ ■"

    def test_categories(self):
        habits = [
            make_habit("a", category="health"),
            make_habit("b", category="spiritual"),
            make_habit("c", category="health"),
        ]

        assert get_categories(habits) == ["health", "spiritual"]
        assert [h.id for h in get_by_category(habits, "health")] == ["a", "c"]

    def test_sorting_returns_new_lists(self):
        weak = make_habit("weak", dates=["2024-03-13"])
        strong = make_habit("strong", dates=["2024-03-11", "2024-03-12", "2024-03-13"])
        habits = [weak, strong]

        assert [h.id for h in sort_by_streak(habits, TODAY)] == ["strong", "weak"]
        assert [h.id for h in sort_by_completion_rate(habits, 7, TODAY)] == ["strong", "weak"]
        assert [h.id for h in habits] == ["weak", "strong"]

    def test_today_summary(self):
        habits = [
            make_habit("a", name="A", dates=["2024-03-13"]),
            make_habit("b", name="B"),
            make_habit("c", name="C"),
        ]

        summary = today_summary(habits, TODAY)

        assert summary["completed"] == 1
        assert summary["total"] == 3
        assert summary["percentage"] == 33
        assert summary["remaining"] == 2
        assert summary["habits"]["remaining"] == ["B", "C"]

    def test_today_summary_without_habits(self):
        assert today_summary([], TODAY)["percentage"] == 0


class TestReport:
    def test_report_structure_and_insights(self):
        strong = make_habit("strong", name="Strong", dates=["2024-03-11", "2024-03-12", "2024-03-13"])
        idle = make_habit("idle", name="Idle")
        habits = [idle, strong]

        report = generate_report(habits, today=TODAY, now=datetime(2024, 3, 13, 20, 0))

        assert report["timestamp"] == "2024-03-13T20:00:00"
        assert [entry["id"] for entry in report["habits"]] == ["idle", "strong"]
        assert report["habits"][1]["stats"]["current_streak"] == 3
        assert report["insights"][0] == "Your strongest habit: Strong (3-day streak)"
        assert report["insights"][1] == "Habits needing attention: Idle, Strong"
        # Caller's list is left untouched
        assert [h.id for h in habits] == ["idle", "strong"]

    def test_report_without_habits(self):
        report = generate_report([], today=TODAY)

        assert report["habits"] == []
        assert report["insights"] == []
        assert report["summary"]["total"] == 0
