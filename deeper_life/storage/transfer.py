"""
Export, import and reset of the whole record.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import jsonschema

from ..core.defaults import merge_with_defaults
from ..core.exceptions import DataImportError
from ..core.models import AppData
from ..utils.io import atomic_write
from .store import DataStore

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "deeper-backup"

# Keys export_data adds on top of the record
EXPORT_ENVELOPE_KEYS = ("exportDate", "version")

# Minimal shape an import must have before it is merged in
IMPORT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["meta", "preferences"],
    "properties": {
        "meta": {"type": "object"},
        "preferences": {"type": "object"},
    },
}

RESET_PROMPTS = (
    "Are you sure you want to reset ALL data? This cannot be undone.",
    "Really reset everything? Your data will be permanently deleted.",
)


def export_filename(now: datetime) -> str:
    return f"{EXPORT_PREFIX}-{now.date().isoformat()}.json"


def build_export(data: AppData, now: Optional[datetime] = None) -> Dict[str, Any]:
    """The record plus export timestamp and data version."""
    now = now or datetime.now()
    payload = data.to_dict()
    payload["exportDate"] = now.isoformat()
    payload["version"] = data.meta.version
    return payload


def export_data(data: AppData, directory: str, now: Optional[datetime] = None) -> Optional[Path]:
    """
    Write the record as pretty-printed JSON named after today's date.

    Returns:
        Path of the written file, or None if the export failed
    """
    now = now or datetime.now()
    target = Path(directory).expanduser() / export_filename(now)

    try:
        content = json.dumps(build_export(data, now), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.error("Error exporting data: %s", exc)
        return None

    if not atomic_write(str(target), content):
        logger.error("Error exporting data to %s", target)
        return None

    logger.info("Exported data to %s", target)
    return target


def parse_import(text: str) -> AppData:
    """
    Validate and merge an exported record.

    Raises:
        DataImportError: malformed JSON or missing ``meta``/``preferences``
    """
    try:
        imported = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataImportError(f"Import file is not valid JSON: {exc}") from exc

    try:
        jsonschema.validate(instance=imported, schema=IMPORT_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise DataImportError(f"Invalid data format: {exc.message}") from exc

    record = {key: value for key, value in imported.items() if key not in EXPORT_ENVELOPE_KEYS}
    return AppData.from_dict(merge_with_defaults(record))


def import_data(file_path: str) -> AppData:
    """
    Read an export file and merge it onto the default record.

    Nothing is written; the caller decides whether to save the result.

    Raises:
        DataImportError: unreadable file, malformed JSON or invalid format
    """
    path = Path(file_path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataImportError(f"Failed to read file {path}: {exc}") from exc

    return parse_import(text)


def reset_data(store: DataStore, confirm: Callable[[str], bool]) -> bool:
    """
    Delete the record, its backup and the last-visit marker.

    ``confirm`` is asked twice; both answers must be affirmative.

    Returns:
        True if the data was cleared
    """
    for prompt in RESET_PROMPTS:
        if not confirm(prompt):
            logger.info("Reset cancelled")
            return False

    store.clear()
    logger.warning("All data was reset")
    return True
