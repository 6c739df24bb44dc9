"""
Tests for the JSON file store.
"""

import json
import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

from deeper_life.core.models import DATA_VERSION, MORNING
from deeper_life.storage.store import JsonFileStore
from deeper_life.utils.io import safe_write_json as real_write


NOW = datetime(2024, 3, 13, 10, 0)


class TestLoad:
    def test_missing_file_gives_default_record(self, temp_dir):
        data = JsonFileStore(temp_dir).load()

        assert data.meta.version == DATA_VERSION
        assert [h.id for h in data.habits] == [
            "morning-routine", "evening-routine", "bible-study", "exercise", "study-time",
        ]
        assert len(data.routines[MORNING].items) == 9

    def test_corrupt_file_gives_default_record(self, temp_dir):
        store = JsonFileStore(temp_dir)
        Path(store.data_path).write_text("{not json", encoding="utf-8")

        data = store.load()

        assert data.preferences.morning_time == "06:30"

    def test_non_object_record_gives_default(self, temp_dir):
        store = JsonFileStore(temp_dir)
        Path(store.data_path).write_text("[1, 2, 3]", encoding="utf-8")

        assert store.load().habits

    def test_missing_top_level_keys_come_from_defaults(self, temp_dir):
        store = JsonFileStore(temp_dir)
        Path(store.data_path).write_text(
            json.dumps({"preferences": {"morningTime": "07:00", "eveningTime": "22:00"}}),
            encoding="utf-8",
        )

        data = store.load()

        assert data.preferences.morning_time == "07:00"
        assert len(data.habits) == 5

    def test_merge_is_shallow(self, temp_dir):
        store = JsonFileStore(temp_dir)
        Path(store.data_path).write_text(
            json.dumps({"routines": {"morning": {"items": [], "lastCompleted": None}}}),
            encoding="utf-8",
        )

        data = store.load()

        # The stored routines object replaces the default one wholesale
        assert list(data.routines) == ["morning"]
        assert data.routines[MORNING].items == []

    def test_unknown_keys_survive_a_round_trip(self, temp_dir):
        store = JsonFileStore(temp_dir)
        Path(store.data_path).write_text(json.dumps({"settings": {"theme": "dark"}}), encoding="utf-8")

        data = store.load()
        store.save(data, NOW)

        saved = json.loads(Path(store.data_path).read_text(encoding="utf-8"))
        assert saved["settings"] == {"theme": "dark"}


class TestSave:
    def test_save_writes_record_and_backup(self, temp_dir):
        store = JsonFileStore(temp_dir, storage_key="test-key")
        data = store.load()

        assert store.save(data, NOW) is True

        assert store.data_path.name == "test-key.json"
        saved = json.loads(store.data_path.read_text(encoding="utf-8"))
        assert saved["meta"]["lastUpdated"] == "2024-03-13T10:00:00"

        backup = json.loads(store.backup_path.read_text(encoding="utf-8"))
        assert backup["data"] == saved
        assert backup["timestamp"] == "2024-03-13T10:00:00"

    def test_save_then_load(self, temp_dir):
        store = JsonFileStore(temp_dir)
        data = store.load()
        data.find_habit("exercise").dates.append("2024-03-13")
        store.save(data, NOW)

        assert JsonFileStore(temp_dir).load().find_habit("exercise").dates == ["2024-03-13"]

    def test_backup_failure_does_not_fail_save(self, temp_dir):
        store = JsonFileStore(temp_dir)

        def fail_backup(path, payload, *args, **kwargs):
            if path.endswith("-backup.json"):
                return False
            return real_write(path, payload, *args, **kwargs)

        with patch("deeper_life.storage.store.safe_write_json", side_effect=fail_backup):
            assert store.save(store.load(), NOW) is True

        assert store.data_path.exists()
        assert not store.backup_path.exists()

    def test_primary_failure_returns_false(self, temp_dir):
        store = JsonFileStore(temp_dir)
        with patch("deeper_life.storage.store.safe_write_json", return_value=False):
            assert store.save(store.load(), NOW) is False


class TestBackupAndClear:
    def test_restore_backup(self, temp_dir):
        store = JsonFileStore(temp_dir)
        data = store.load()
        data.find_habit("exercise").dates.append("2024-03-13")
        store.save(data, NOW)
        os.remove(store.data_path)

        restored = store.restore_backup()

        assert restored is not None
        assert restored.find_habit("exercise").dates == ["2024-03-13"]

    def test_restore_without_backup(self, temp_dir):
        assert JsonFileStore(temp_dir).restore_backup() is None

    def test_clear_removes_everything(self, temp_dir):
        store = JsonFileStore(temp_dir)
        store.save(store.load(), NOW)
        store.set_last_visit("2024-03-13")

        store.clear()

        assert not store.data_path.exists()
        assert not store.backup_path.exists()
        assert store.get_last_visit() is None

    def test_last_visit_marker(self, temp_dir):
        store = JsonFileStore(temp_dir)

        assert store.get_last_visit() is None
        store.set_last_visit("2024-03-13")
        assert store.get_last_visit() == "2024-03-13"
