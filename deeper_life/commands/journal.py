"""Journal command - add and read reflection entries."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.exceptions import DeeperLifeError
from ..storage.store import DataStore
from ..tracking.journal import add_journal_entry, recent_entries, split_lines
from ..utils.prompts import prompt_text


class JournalCommand:
    """Command for the reflection journal."""

    def __init__(self, store: DataStore, verbose: bool = False, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.verbose = verbose
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, action: str, good_things: Optional[str] = None, lessons: Optional[str] = None,
            improvements: Optional[str] = None, notes: Optional[str] = None, limit: int = 5) -> bool:
        try:
            if action == "add":
                return self._add(good_things, lessons, improvements, notes)
            if action == "list":
                return self._list(limit)
            print(f"Unknown journal action '{action}'.")
            return False
        except DeeperLifeError as exc:
            self.logger.error("Journal command failed: %s", exc)
            print(f"❌ {exc}")
            return False

    def _add(self, good_things, lessons, improvements, notes) -> bool:
        if all(value is None for value in (good_things, lessons, improvements, notes)):
            good_things = prompt_text("Three good things")
            lessons = prompt_text("Lessons learned")
            improvements = prompt_text("What to improve tomorrow")

        entries = [split_lines(v) for v in (good_things, lessons, improvements)]
        if not any(entries) and not notes:
            print("Nothing to record.")
            return False

        data = self.store.load()
        now = self.clock()
        entry = add_journal_entry(
            data,
            good_things=entries[0],
            lessons=entries[1],
            improvements=entries[2],
            notes=notes or "",
            today=now.date(),
            now=now,
        )
        if not self.store.save(data, now):
            print("⚠️  Could not save the entry.")
            return False
        print(f"📝 Journal entry saved for {entry.date}.")
        return True

    def _list(self, limit: int) -> bool:
        data = self.store.load()
        entries = recent_entries(data, limit)
        if not entries:
            print("No journal entries yet.")
            return True

        for entry in entries:
            print(f"\n📝 {entry.date}")
            for heading, lines in (
                ("Good things", entry.good_things),
                ("Lessons", entry.lessons),
                ("Improvements", entry.improvements),
            ):
                if lines:
                    print(f"  {heading}:")
                    for line in lines:
                        print(f"    • {line}")
            if entry.notes:
                print(f"  Notes: {entry.notes}")
        return True
