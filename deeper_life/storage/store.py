"""
Persistence for the deeper-life record.

``DataStore`` is the port the rest of the package talks to;
``JsonFileStore`` keeps the record as JSON files in a data directory.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.config import DEFAULT_STORAGE_KEY
from ..core.defaults import default_app_data, merge_with_defaults
from ..core.models import AppData, now_iso
from ..utils.io import read_json, remove_file, safe_read_json, safe_write_json

LAST_VISIT_KEY = "deeper-last-visit"


class DataStore(ABC):
    """Loads and saves the whole record."""

    @abstractmethod
    def load(self) -> AppData:
        """Return the stored record, or the default record when none is usable."""

    @abstractmethod
    def save(self, data: AppData, now: Optional[datetime] = None) -> bool:
        """Persist ``data``; returns False instead of raising on failure."""

    @abstractmethod
    def restore_backup(self) -> Optional[AppData]:
        """Return the backup copy, or None if there is none."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the record, its backup and the last-visit marker."""

    @abstractmethod
    def get_last_visit(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_last_visit(self, day: str) -> None:
        pass


class JsonFileStore(DataStore):
    """
    Stores the record as ``<key>.json`` with a ``<key>-backup.json`` copy
    written alongside on every save.
    """

    def __init__(
        self,
        data_dir: str,
        storage_key: str = DEFAULT_STORAGE_KEY,
        logger: Optional[logging.Logger] = None
    ):
        self.data_dir = Path(os.path.expanduser(data_dir))
        self.storage_key = storage_key
        self.logger = logger or logging.getLogger(__name__)

    @property
    def data_path(self) -> Path:
        return self.data_dir / f"{self.storage_key}.json"

    @property
    def backup_path(self) -> Path:
        return self.data_dir / f"{self.storage_key}-backup.json"

    @property
    def last_visit_path(self) -> Path:
        return self.data_dir / f"{LAST_VISIT_KEY}.json"

    def load(self) -> AppData:
        if not self.data_path.exists():
            self.logger.debug(f"No record at {self.data_path}; using defaults")
            return default_app_data()

        try:
            raw = read_json(str(self.data_path))
        except (OSError, json.JSONDecodeError, TimeoutError) as exc:
            self.logger.error(f"Error loading data from {self.data_path}: {exc}")
            return default_app_data()

        if not isinstance(raw, dict):
            self.logger.error(f"Error loading data from {self.data_path}: record is not a JSON object")
            return default_app_data()

        # Fill in top-level keys added since the record was written
        return AppData.from_dict(merge_with_defaults(raw))

    def save(self, data: AppData, now: Optional[datetime] = None) -> bool:
        data.meta.last_updated = now_iso(now)
        record = data.to_dict()

        if not safe_write_json(str(self.data_path), record):
            self.logger.error(f"Error saving data to {self.data_path}")
            return False

        self._create_backup(record, now)
        return True

    def _create_backup(self, record: dict, now: Optional[datetime] = None) -> None:
        """Write the backup copy; failures are reported but never fatal."""
        payload = {"data": record, "timestamp": now_iso(now)}
        if not safe_write_json(str(self.backup_path), payload):
            self.logger.warning(f"Could not create backup at {self.backup_path}")

    def restore_backup(self) -> Optional[AppData]:
        if not self.backup_path.exists():
            return None

        try:
            payload = read_json(str(self.backup_path))
        except (OSError, json.JSONDecodeError, TimeoutError) as exc:
            self.logger.error(f"Error restoring backup from {self.backup_path}: {exc}")
            return None

        record = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(record, dict):
            self.logger.error(f"Backup at {self.backup_path} has no data")
            return None

        return AppData.from_dict(merge_with_defaults(record))

    def clear(self) -> None:
        for path in (self.data_path, self.backup_path, self.last_visit_path):
            if remove_file(str(path)):
                self.logger.info(f"Removed {path}")

    def get_last_visit(self) -> Optional[str]:
        marker = safe_read_json(str(self.last_visit_path))
        return marker.get("date") if isinstance(marker, dict) else None

    def set_last_visit(self, day: str) -> None:
        if not safe_write_json(str(self.last_visit_path), {"date": day}):
            self.logger.warning(f"Could not record last visit at {self.last_visit_path}")
