"""Status command - show the gate mode, routine progress and today's habits."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..analytics.habits import today_summary
from ..core.exceptions import DeeperLifeError
from ..core.models import EVENING, MORNING
from ..routines.clock import format_time_remaining, get_greeting, get_time_until, is_first_visit_today
from ..routines.gate import Mode, RoutineGate
from ..routines.items import get_progress
from ..storage.store import DataStore
from ..tracking.study import get_today_study_time
from ..utils.insights import format_progress_bar


MODE_MESSAGES = {
    Mode.PRE_MORNING: "🌙 Too early. The app unlocks at {morning}.",
    Mode.MORNING_REQUIRED: "☀️  Morning routine first: deeper routine show morning",
    Mode.DAYTIME: "✅ Morning routine done. Everything is unlocked.",
    Mode.EVENING_REQUIRED: "🌆 Evening routine time: deeper routine show evening",
    Mode.EVENING_COMPLETE: "😴 Day complete. See you tomorrow.",
}


def gate_redirect(store: DataStore, page: str, now: Optional[datetime] = None) -> Optional[str]:
    """Page the gate forces instead of ``page``, or None."""
    return RoutineGate(store.load()).should_redirect(page, now or datetime.now())


class StatusCommand:
    """Command for showing where the day stands."""

    def __init__(self, store: DataStore, verbose: bool = False, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.verbose = verbose
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self) -> bool:
        try:
            now = self.clock()
            today = now.date()
            data = self.store.load()
            prefs = data.preferences

            if is_first_visit_today(self.store, today):
                print(f"\n{get_greeting(now)}! Welcome to a new day.")
            else:
                print(f"\n{get_greeting(now)}!")

            mode = RoutineGate(data).mode(now)
            print(MODE_MESSAGES[mode].format(morning=prefs.morning_time))

            if mode == Mode.PRE_MORNING:
                target = prefs.morning_time
            elif mode in (Mode.MORNING_REQUIRED, Mode.DAYTIME):
                target = prefs.evening_time
            else:
                target = None
            if target:
                hours, minutes = get_time_until(target, now)
                print(f"   Next gate at {target} (in {format_time_remaining(hours, minutes)})")

            print("")
            for name in (MORNING, EVENING):
                if name not in data.routines:
                    continue
                progress = get_progress(data, name)
                done = " (done today)" if data.routines[name].last_completed == today.isoformat() else ""
                print(
                    f"  {name.capitalize():<8} {format_progress_bar(progress['percentage'])} "
                    f"{progress['completed']}/{progress['total']}{done}"
                )

            summary = today_summary(data.habits, today)
            print(f"  Habits   {format_progress_bar(summary['percentage'])} {summary['completed']}/{summary['total']}")
            print(f"  Studied  {get_today_study_time(data, today)} min today")
            return True

        except DeeperLifeError as exc:
            self.logger.error("Status command failed: %s", exc)
            print(f"❌ {exc}")
            return False
