"""In-memory DataStore used by command and routine tests."""

import copy
from datetime import datetime
from typing import Optional

from deeper_life.core.defaults import default_app_data
from deeper_life.core.models import AppData, now_iso
from deeper_life.storage.store import DataStore


class InMemoryStore(DataStore):
    """Keeps the record in memory; ``fail_saves`` simulates a full disk."""

    def __init__(self, data: Optional[AppData] = None):
        self.data = copy.deepcopy(data) if data is not None else None
        self.backup: Optional[AppData] = None
        self.last_visit: Optional[str] = None
        self.fail_saves = False
        self.save_count = 0

    def load(self) -> AppData:
        if self.data is None:
            return default_app_data()
        return copy.deepcopy(self.data)

    def save(self, data: AppData, now: Optional[datetime] = None) -> bool:
        if self.fail_saves:
            return False
        data.meta.last_updated = now_iso(now)
        self.data = copy.deepcopy(data)
        self.backup = copy.deepcopy(data)
        self.save_count += 1
        return True

    def restore_backup(self) -> Optional[AppData]:
        return copy.deepcopy(self.backup) if self.backup is not None else None

    def clear(self) -> None:
        self.data = None
        self.backup = None
        self.last_visit = None

    def get_last_visit(self) -> Optional[str]:
        return self.last_visit

    def set_last_visit(self, day: str) -> None:
        self.last_visit = day
