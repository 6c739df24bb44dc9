"""
Tests for utility modules (deeper_life/utils/{io,date,prompts,insights}.py).

Validates atomic writes, date handling, prompts and terminal formatting.
"""

import json
import tempfile
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from deeper_life.utils.date import (
    date_range_back,
    format_date,
    parse_date,
    parse_dates,
    parse_hhmm,
    start_of_week,
    today_string,
)
from deeper_life.utils.insights import (
    format_habit_detail_cli,
    format_progress_bar,
    format_report_cli,
    format_routine_items_cli,
)
from deeper_life.utils.io import atomic_write, read_json, remove_file, safe_read_json, safe_write_json
from deeper_life.utils.prompts import confirm, prompt_text


class TestIOUtils:
    """Test suite for deeper_life/utils/io.py."""

    def test_safe_read_json_existing_file(self):
        """Test reading existing JSON file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "test.json"
            test_data = {"key": "value", "number": 42}
            test_file.write_text(json.dumps(test_data))

            assert safe_read_json(str(test_file)) == test_data

    def test_safe_read_json_nonexistent_file(self):
        """Test reading non-existent file returns default."""
        result = safe_read_json("/nonexistent/file.json", default={"empty": True})

        assert result == {"empty": True}

    def test_safe_read_json_invalid_json(self):
        """Test reading invalid JSON returns default."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "invalid.json"
            test_file.write_text("not valid json {{{")

            assert safe_read_json(str(test_file), default={}) == {}

    def test_read_json_propagates_errors(self):
        """Test that read_json lets decode errors through."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "invalid.json"
            test_file.write_text("{")

            with pytest.raises(json.JSONDecodeError):
                read_json(str(test_file))

    def test_safe_write_json_creates_parent_dirs(self):
        """Test that parent directories are created if needed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "nested" / "dir" / "file.json"

            assert safe_write_json(str(test_file), {"test": True}) is True
            assert json.loads(test_file.read_text()) == {"test": True}

    def test_safe_write_json_unserialisable(self):
        """Test that unserialisable data is reported, not raised."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "bad.json"

            assert safe_write_json(str(test_file), {"when": date(2024, 3, 13)}) is False
            assert not test_file.exists()

    def test_atomic_write_replaces_content(self):
        """Test that atomic_write overwrites and leaves no temp files."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "file.txt"
            atomic_write(str(test_file), "first")
            atomic_write(str(test_file), "second")

            assert test_file.read_text() == "second"
            assert not list(Path(tmpdir).glob(".tmp_*"))

    def test_remove_file(self):
        """Test removing a file and its lock companion."""
        with tempfile.TemporaryDirectory() as tmpdir:
            test_file = Path(tmpdir) / "file.json"
            safe_write_json(str(test_file), {})

            assert remove_file(str(test_file)) is True
            assert remove_file(str(test_file)) is False
            assert not test_file.exists()
            assert not (Path(tmpdir) / "file.json.lock").exists()


class TestDateUtils:
    def test_parse_date(self):
        assert parse_date("2024-03-13") == date(2024, 3, 13)
        assert parse_date("2024-03-13T22:10:00Z") == date(2024, 3, 13)
        assert parse_date("13/03/2024") is None
        assert parse_date("") is None
        assert parse_date(None) is None

    def test_format_date(self):
        assert format_date(date(2024, 3, 1)) == "2024-03-01"
        assert format_date(None) is None

    def test_today_string(self):
        assert today_string(date(2024, 3, 13)) == "2024-03-13"

    def test_parse_dates_drops_invalid(self):
        assert parse_dates(["2024-03-13", "bad", "2024-03-13"]) == {date(2024, 3, 13)}

    def test_date_range_back(self):
        assert date_range_back(date(2024, 3, 1), 3) == [
            date(2024, 3, 1), date(2024, 2, 29), date(2024, 2, 28),
        ]

    @pytest.mark.parametrize("day, expected", [
        (date(2024, 3, 10), date(2024, 3, 10)),  # Sunday
        (date(2024, 3, 13), date(2024, 3, 10)),  # Wednesday
        (date(2024, 3, 16), date(2024, 3, 10)),  # Saturday
    ])
    def test_start_of_week_is_sunday(self, day, expected):
        assert start_of_week(day) == expected

    def test_parse_hhmm(self):
        assert parse_hhmm("06:30") == 390
        assert parse_hhmm("00:00") == 0
        assert parse_hhmm("23:59") == 1439

    @pytest.mark.parametrize("value", ["24:00", "7", "ab:cd", "12:60", ""])
    def test_parse_hhmm_invalid(self, value):
        with pytest.raises(ValueError):
            parse_hhmm(value)


class TestPrompts:
    def test_confirm_accepts_yes(self):
        with patch("deeper_life.utils.prompts.input", create=True, return_value="yes"):
            assert confirm("Proceed?") is True

    def test_confirm_defaults_to_no(self):
        with patch("deeper_life.utils.prompts.input", create=True, return_value=""):
            assert confirm("Proceed?") is False

    def test_confirm_without_tty(self):
        with patch("deeper_life.utils.prompts.is_interactive", return_value=False):
            assert confirm("Proceed?") is False

    def test_prompt_text_reads_until_blank_line(self):
        with patch("deeper_life.utils.prompts.input", create=True, side_effect=["first", "second", ""]):
            assert prompt_text("Good things") == "first\nsecond"

    def test_prompt_text_keeps_default_on_empty_input(self):
        with patch("deeper_life.utils.prompts.input", create=True, side_effect=[""]):
            assert prompt_text("Lessons", default="kept") == "kept"


class TestFormatting:
    def test_progress_bar(self):
        assert format_progress_bar(0, width=4) == "░░░░"
        assert format_progress_bar(50, width=4) == "██░░"
        assert format_progress_bar(150, width=4) == "████"

    def test_report_lists_habits_and_insights(self):
        report = {
            "summary": {"completed": 1, "total": 2, "percentage": 50,
                        "habits": {"completed": ["Reading"], "remaining": ["Running"]}},
            "habits": [{
                "name": "Reading",
                "stats": {"current_streak": 3, "longest_streak": 5,
                          "completion_rate_7_days": 43, "completion_rate_30_days": 10},
                "weekly": {"this_week": 2, "change": 1},
            }],
            "insights": ["Your strongest habit: Reading (3-day streak)"],
        }

        output = format_report_cli(report)

        assert "HABIT REPORT" in output
        assert "Still to do: Running" in output
        assert "Reading" in output
        assert "💡 Your strongest habit: Reading (3-day streak)" in output

    def test_habit_detail(self):
        output = format_habit_detail_cli(
            "Reading",
            {"completed_today": True, "current_streak": 2},
            {"this_week": 2, "last_week": 1, "change": 1},
            25,
            "Keep going with Reading!",
            history="□ ■ ■",
        )

        assert "READING" in output
        assert "Done today:      yes" in output
        assert "change +1" in output
        assert "25% likely" in output

    def test_routine_items(self):
        items = [
            {"id": "squats", "label": "Squats", "type": "counter", "current": 20, "target": 50, "completed": False},
            {"id": "water", "label": "Water", "type": "manual", "completed": True},
        ]

        output = format_routine_items_cli("Morning routine", items, {"completed": 1, "total": 2, "percentage": 50})

        assert output.splitlines()[0] == "Morning routine (1/2, 50%)"
        assert "[20/50]" in output
        assert "✅ water" in output
