"""
Data command - export, import, reset and restore the stored record.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.config import AppConfig
from ..core.exceptions import DeeperLifeError
from ..storage.store import DataStore
from ..storage.transfer import export_data, import_data, reset_data
from ..utils.prompts import confirm


class DataCommand:
    """Command for moving the record in and out of the store."""

    def __init__(
        self,
        store: DataStore,
        config: AppConfig,
        verbose: bool = False,
        clock: Callable[[], datetime] = datetime.now,
        confirm_fn: Callable[[str], bool] = confirm
    ):
        self.store = store
        self.config = config
        self.verbose = verbose
        self.clock = clock
        self.confirm = confirm_fn
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, action: str, path: Optional[str] = None) -> bool:
        try:
            if action == "export":
                return self._export(path)
            if action == "import":
                return self._import(path)
            if action == "reset":
                return self._reset()
            if action == "restore":
                return self._restore()
            print(f"Unknown data action '{action}'.")
            return False
        except DeeperLifeError as exc:
            self.logger.error("Data command failed: %s", exc)
            print(f"❌ {exc}")
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False

    def _export(self, directory: Optional[str]) -> bool:
        target = export_data(self.store.load(), directory or self.config.export_dir, self.clock())
        if target is None:
            print("❌ Error exporting data.")
            return False
        print(f"📦 Exported to {target}")
        return True

    def _import(self, file_path: Optional[str]) -> bool:
        if not file_path:
            print("A file to import is required.")
            return False

        data = import_data(file_path)
        if not self.store.save(data, self.clock()):
            print("❌ Imported data could not be saved.")
            return False
        print("✅ Data imported successfully!")
        return True

    def _reset(self) -> bool:
        if not reset_data(self.store, self.confirm):
            print("Reset cancelled.")
            return False
        print("🗑  All data has been reset.")
        return True

    def _restore(self) -> bool:
        data = self.store.restore_backup()
        if data is None:
            print("No backup available.")
            return False
        if not self.store.save(data, self.clock()):
            print("❌ Restored data could not be saved.")
            return False
        print("♻️  Backup restored.")
        return True
