"""
Configuration management for deeper-life.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError
from .paths import get_path_manager

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "deeper-life-v1"


def _normalize_path(path: str) -> str:
    """Expand user and convert to absolute path."""
    return os.path.abspath(os.path.expanduser(path))


@dataclass
class AppConfig:
    """Where the record lives and where exports go."""

    data_dir: Optional[str] = None
    export_dir: Optional[str] = None
    storage_key: str = DEFAULT_STORAGE_KEY

    def __post_init__(self) -> None:
        manager = get_path_manager()

        if self.data_dir is None:
            self.data_dir = str(manager.data_dir)
        else:
            self.data_dir = _normalize_path(self.data_dir)

        if self.export_dir is None:
            self.export_dir = str(manager.export_dir)
        else:
            self.export_dir = _normalize_path(self.export_dir)

        if not self.storage_key or "/" in self.storage_key or os.sep in self.storage_key:
            raise ConfigurationError(f"Invalid storage key: {self.storage_key!r}")

    @classmethod
    def load_from_file(cls, config_path: str) -> AppConfig:
        config_path = _normalize_path(config_path)
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
            return cls()

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

        paths = data.get("paths", {})
        return cls(
            data_dir=paths.get("data", data.get("data_dir")),
            export_dir=paths.get("exports", data.get("export_dir")),
            storage_key=data.get("storage_key", DEFAULT_STORAGE_KEY),
        )

    def save_to_file(self, config_path: str) -> None:
        config_path = _normalize_path(config_path)
        os.makedirs(os.path.dirname(config_path), exist_ok=True)

        data = {
            "storage_key": self.storage_key,
            "paths": {
                "data": self.data_dir,
                "exports": self.export_dir,
            },
        }

        with open(config_path, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2, ensure_ascii=False)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return get_path_manager().config_path


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        AppConfig object
    """
    if config_path is None:
        config_path = str(get_default_config_path())

    return AppConfig.load_from_file(config_path)


def save_config(config: AppConfig, config_path: Optional[str] = None) -> None:
    """
    Save configuration to file.

    Args:
        config: AppConfig object to save
        config_path: Optional path to save to. Uses default if not provided.
    """
    if config_path is None:
        manager = get_path_manager()
        manager.ensure_directories()
        config_path = str(manager.config_path)

    config.save_to_file(config_path)
