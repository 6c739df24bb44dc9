"""
Centralized path management for deeper-life.

Resolves the per-user working directory and the files that live in it.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


class PathManager:
    """Manages deeper-life file paths."""

    APP_DIR_NAME = "deeper-life"
    HOME_ENV_VAR = "DEEPER_LIFE_HOME"

    # File names
    CONFIG_FILE = "config.json"

    def __init__(self, working_dir: Optional[Path] = None, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._working_dir: Optional[Path] = Path(working_dir) if working_dir else None

    def _default_user_dir(self) -> Path:
        """Platform-appropriate per-user data directory."""
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / self.APP_DIR_NAME
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / self.APP_DIR_NAME
            return Path.home() / "AppData" / "Roaming" / self.APP_DIR_NAME
        return Path.home() / ".config" / self.APP_DIR_NAME

    @property
    def working_dir(self) -> Path:
        """
        Get the working directory for deeper-life data.

        Priority order:
        1. Explicit directory passed to the constructor
        2. DEEPER_LIFE_HOME environment variable
        3. Platform per-user directory
        """
        if self._working_dir is None:
            env_home = os.environ.get(self.HOME_ENV_VAR)
            if env_home:
                self._working_dir = Path(env_home).expanduser()
                self.logger.debug(f"Using working dir from {self.HOME_ENV_VAR}: {self._working_dir}")
            else:
                self._working_dir = self._default_user_dir()
        return self._working_dir

    def ensure_directories(self) -> None:
        """Create the working directories if they are missing."""
        for directory in (self.working_dir, self.data_dir, self.export_dir):
            directory.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        return self.working_dir / "data"

    @property
    def export_dir(self) -> Path:
        return self.working_dir / "exports"

    @property
    def config_path(self) -> Path:
        return self.working_dir / self.CONFIG_FILE


# Global instance
_path_manager = None


def get_path_manager() -> PathManager:
    """Get or create the global PathManager instance."""
    global _path_manager
    if _path_manager is None:
        _path_manager = PathManager()
    return _path_manager
