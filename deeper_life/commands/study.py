"""Study command - log sessions and show totals."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..core.exceptions import DeeperLifeError
from ..storage.store import DataStore
from ..tracking.study import get_study_time_for_range, get_today_study_time, log_study_session
from ..utils.date import start_of_week


class StudyCommand:
    def __init__(self, store: DataStore, verbose: bool = False, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.verbose = verbose
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, action: str, duration: int = 0, subject: Optional[str] = None,
            notes: Optional[str] = None) -> bool:
        try:
            if action == "log":
                return self._log(duration, subject or "", notes or "")
            if action == "summary":
                return self._summary()
            print(f"Unknown study action '{action}'.")
            return False
        except (DeeperLifeError, ValueError) as exc:
            self.logger.error("Study command failed: %s", exc)
            print(f"❌ {exc}")
            return False

    def _log(self, duration: int, subject: str, notes: str) -> bool:
        data = self.store.load()
        now = self.clock()
        session = log_study_session(
            data,
            duration=duration,
            subject=subject,
            notes=notes,
            today=now.date(),
            now=now,
        )
        if not self.store.save(data, now):
            print("⚠️  Could not save the session.")
            return False

        label = f" of {session.subject}" if session.subject else ""
        print(f"📚 Logged {session.duration} min{label}.")
        print(f"   Today: {get_today_study_time(data, now.date())} min")
        return True

    def _summary(self) -> bool:
        data = self.store.load()
        today = self.clock().date()

        week_start = start_of_week(today)
        print(f"📚 Today:      {get_today_study_time(data, today)} min")
        print(f"   This week:  {get_study_time_for_range(data, week_start, today)} min")
        print(f"   Last 30d:   {get_study_time_for_range(data, today - timedelta(days=29), today)} min")

        recent = [s for s in data.study_sessions if s.date == today.isoformat()]
        for session in recent:
            subject = session.subject or "(no subject)"
            print(f"     - {session.duration:>3} min  {subject}")
        return True
