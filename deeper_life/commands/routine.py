"""Routine command - work through the morning and evening checklists."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.exceptions import DeeperLifeError
from ..core.models import ItemType
from ..routines.items import (
    complete_item,
    finalize_routine,
    get_item,
    get_progress,
    get_routine,
    is_routine_fully_completed,
)
from ..routines.timer import CountdownTimer, format_timer
from ..storage.store import DataStore
from ..utils.insights import format_routine_items_cli
from ..utils.prompts import prompt_text


class RoutineCommand:
    """Command for showing, checking off and finalizing routines."""

    def __init__(self, store: DataStore, verbose: bool = False, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.verbose = verbose
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, action: str, routine: str, item_id: Optional[str] = None,
            value: Optional[str] = None, timer_interval: float = 1.0) -> bool:
        try:
            if action == "show":
                return self._show(routine)
            if action == "check":
                return self._check(routine, item_id, value)
            if action == "timer":
                return self._timer(routine, item_id, timer_interval)
            if action == "finalize":
                return self._finalize(routine)
            print(f"Unknown routine action '{action}'.")
            return False
        except (DeeperLifeError, ValueError) as exc:
            self.logger.error("Routine command failed: %s", exc)
            print(f"❌ {exc}")
            return False

    def _show(self, routine_name: str) -> bool:
        data = self.store.load()
        routine = get_routine(data, routine_name)
        title = f"{routine_name.capitalize()} routine"
        print(format_routine_items_cli(
            title,
            [item.to_dict() for item in routine.items],
            get_progress(data, routine_name),
        ))
        if routine.last_completed:
            print(f"\nLast completed: {routine.last_completed}")
        return True

    def _save(self, data) -> bool:
        if not self.store.save(data, self.clock()):
            print("⚠️  Could not save your progress.")
            return False
        return True

    def _check(self, routine_name: str, item_id: Optional[str], value: Optional[str]) -> bool:
        if not item_id:
            print("An item id is required.")
            return False

        data = self.store.load()
        item = get_item(data, routine_name, item_id)
        if item.type == ItemType.TEXT and value is None:
            value = prompt_text(item.label, default=item.value)

        item = complete_item(data, routine_name, item_id, value)
        if item.completed:
            print(f"✅ {item.label}")
        elif item.type == ItemType.COUNTER:
            print(f"⏳ {item.label}: {item.current or 0}/{item.target or 0}")

        if not self._save(data):
            return False

        if is_routine_fully_completed(data, routine_name):
            print(f"🎉 All done! Run 'deeper routine finalize {routine_name}' to close the routine.")
        return True

    def _timer(self, routine_name: str, item_id: Optional[str], interval: float) -> bool:
        if not item_id:
            print("An item id is required.")
            return False

        data = self.store.load()
        item = get_item(data, routine_name, item_id)
        if item.type != ItemType.TIMER:
            print(f"'{item_id}' is not a timer item.")
            return False

        def on_tick(remaining: int) -> None:
            print(f"\r   ⏱  {format_timer(remaining)}", end="", flush=True)

        timer = CountdownTimer(item.duration or 0, on_tick=on_tick, interval=interval)
        print(f"⏱  {item.label} ({format_timer(item.duration or 0)})")
        timer.start()
        try:
            finished = timer.wait()
        except KeyboardInterrupt:
            timer.stop()
            print("\nTimer stopped.")
            return False
        print("")

        if not finished:
            return False

        complete_item(data, routine_name, item_id)
        print(f"✅ {item.label}")
        return self._save(data)

    def _finalize(self, routine_name: str) -> bool:
        data = self.store.load()
        now = self.clock()
        if not finalize_routine(data, routine_name, today=now.date(), now=now):
            progress = get_progress(data, routine_name)
            print(
                f"Routine not finished yet: {progress['completed']}/{progress['total']} items done."
            )
            return False

        if not self._save(data):
            return False
        print(f"🌟 {routine_name.capitalize()} routine complete for {now.date().isoformat()}.")
        return True
