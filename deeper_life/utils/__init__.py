"""
Utility functions for deeper-life.
"""

from .io import safe_read_json, safe_write_json, atomic_write, read_json, remove_file
from .date import parse_date, format_date, today_string, parse_hhmm, start_of_week
from .prompts import is_interactive, confirm, prompt_text
from .insights import (
    format_progress_bar, format_report_cli, format_habit_detail_cli, format_routine_items_cli
)

__all__ = [
    # I/O utilities
    'safe_read_json',
    'safe_write_json',
    'atomic_write',
    'read_json',
    'remove_file',
    # Date utilities
    'parse_date',
    'format_date',
    'today_string',
    'parse_hhmm',
    'start_of_week',
    # Prompt utilities
    'is_interactive',
    'confirm',
    'prompt_text',
    # Formatting
    'format_progress_bar',
    'format_report_cli',
    'format_habit_detail_cli',
    'format_routine_items_cli',
]
