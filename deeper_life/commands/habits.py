"""
Habits command - list, track and analyse habits.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..analytics.habits import (
    generate_report,
    get_by_category,
    get_categories,
    get_stats,
    motivational_message,
    predict_tomorrow,
    visualize,
    weekly_comparison,
)
from ..core.exceptions import DeeperLifeError, HabitNotFoundError
from ..core.models import HABIT_HISTORY_LIMIT
from ..storage.store import DataStore
from ..tracking.habits import track_habit
from ..utils.date import format_date, parse_date
from ..utils.insights import format_habit_detail_cli, format_report_cli
from ..utils.io import atomic_write


class HabitsCommand:
    """Command for habit tracking and habit analytics."""

    def __init__(self, store: DataStore, verbose: bool = False, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.verbose = verbose
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, action: str, habit_id: Optional[str] = None, day: Optional[str] = None,
            category: Optional[str] = None, export_path: Optional[str] = None) -> bool:
        try:
            if action == "list":
                return self._list(category)
            if action == "track":
                return self._track(habit_id, day)
            if action == "stats":
                return self._stats(habit_id)
            if action == "report":
                return self._report(export_path)
            print(f"Unknown habits action '{action}'.")
            return False
        except (DeeperLifeError, ValueError) as exc:
            self.logger.error("Habits command failed: %s", exc)
            print(f"❌ {exc}")
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False

    def _list(self, category: Optional[str]) -> bool:
        data = self.store.load()
        today = self.clock().date()
        habits = data.habits
        if category:
            habits = get_by_category(habits, category)
            if not habits:
                print(f"No habits in category '{category}'. Known: {', '.join(get_categories(data.habits))}")
                return True

        if not habits:
            print("No habits configured.")
            return True

        today_str = today.isoformat()
        for habit in habits:
            mark = "✅" if today_str in habit.dates else "⭕"
            streak = get_stats(habit, today)["current_streak"]
            print(f"  {mark} {habit.id:<16} {habit.name:<22} [{habit.category}] 🔥 {streak}")
        return True

    def _track(self, habit_id: Optional[str], day: Optional[str]) -> bool:
        if not habit_id:
            print("A habit id is required.")
            return False

        now = self.clock()
        if day is None:
            day = now.date().isoformat()
        elif parse_date(day) is None:
            raise ValueError(f"Invalid date '{day}', expected YYYY-MM-DD")
        else:
            day = format_date(parse_date(day))

        data = self.store.load()
        habit = data.find_habit(habit_id)
        if habit is None:
            raise HabitNotFoundError(f"Unknown habit '{habit_id}'")

        if day in habit.dates:
            print(f"{habit.name} was already tracked for {day}.")
            return True

        if not track_habit(data, habit_id, day=day, today=now.date()):
            print(f"⚠️  {day} is older than the last {HABIT_HISTORY_LIMIT} tracked days of {habit.name}; not recorded.")
            return False

        if not self.store.save(data, now):
            print("⚠️  Could not save your progress.")
            return False
        print(f"✅ {habit.name} tracked. {motivational_message(habit, now.date())}")
        return True

    def _stats(self, habit_id: Optional[str]) -> bool:
        if not habit_id:
            print("A habit id is required.")
            return False

        data = self.store.load()
        habit = data.find_habit(habit_id)
        if habit is None:
            raise HabitNotFoundError(f"Unknown habit '{habit_id}'")

        today = self.clock().date()
        print(format_habit_detail_cli(
            habit.name,
            get_stats(habit, today),
            weekly_comparison(habit, today),
            predict_tomorrow(habit, today),
            motivational_message(habit, today),
            history=visualize(habit, today=today),
        ))
        return True

    def _report(self, export_path: Optional[str]) -> bool:
        data = self.store.load()
        now = self.clock()
        report = generate_report(data.habits, today=now.date(), now=now)
        print(format_report_cli(report))

        if export_path:
            target = Path(export_path).expanduser()
            if not atomic_write(str(target), json.dumps(report, indent=2, ensure_ascii=False)):
                print(f"⚠️  Could not write report to {target}")
                return False
            print(f"\nReport written to {target}")
        return True
