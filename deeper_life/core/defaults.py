"""
Default record used for first runs and as the base of every merge.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from .models import AppData, DATA_VERSION, DEFAULT_EVENING_TIME, DEFAULT_MORNING_TIME, now_iso


def default_record(now: Optional[datetime] = None) -> Dict[str, Any]:
    """Return a fresh default record in its persisted (dict) form."""
    timestamp = now_iso(now)
    return {
        "preferences": {
            "morningTime": DEFAULT_MORNING_TIME,
            "eveningTime": DEFAULT_EVENING_TIME,
        },
        "routines": {
            "morning": {
                "lastCompleted": None,
                "items": [
                    {"id": "wake", "label": "Wake up (6:30 AM)", "type": "auto", "completed": False},
                    {"id": "stretch", "label": "Stretch for 5 minutes", "type": "timer", "duration": 300, "completed": False},
                    {"id": "pushups", "label": "1 failure set of push-ups", "type": "manual", "completed": False},
                    {"id": "squats", "label": "50x bodyweight squats", "type": "counter", "target": 50, "current": 0, "completed": False},
                    {"id": "shower", "label": "Quick shower (max 5 min)", "type": "timer", "duration": 300, "completed": False},
                    {"id": "water", "label": "Drink full bottle of water", "type": "manual", "completed": False},
                    {"id": "breakfast", "label": "Good breakfast", "type": "manual", "completed": False},
                    {"id": "bible", "label": "Bible study and prayer", "type": "redirect", "completed": False},
                    {"id": "study", "label": "Start studying", "type": "manual", "completed": False},
                ],
            },
            "evening": {
                "lastCompleted": None,
                "items": [
                    {"id": "lights", "label": "Turn on red lights", "type": "manual", "completed": False},
                    {"id": "hygiene", "label": "Brush teeth and change into pyjamas", "type": "manual", "completed": False},
                    {"id": "good-things", "label": "3 good things from today", "type": "text", "value": "", "completed": False},
                    {"id": "lessons", "label": "3 lessons from today", "type": "text", "value": "", "completed": False},
                    {"id": "improvements", "label": "Improvements for tomorrow", "type": "text", "value": "", "completed": False},
                    {"id": "plan", "label": "Plan tomorrow on paper", "type": "manual", "completed": False},
                    {"id": "read-book", "label": "Read a book", "type": "manual", "completed": False},
                ],
            },
        },
        # 21 day rolling window per habit
        "habits": [
            {"id": "morning-routine", "name": "Morning Routine", "category": "routine", "dates": []},
            {"id": "evening-routine", "name": "Evening Routine", "category": "routine", "dates": []},
            {"id": "bible-study", "name": "Bible Study", "category": "spiritual", "dates": []},
            {"id": "exercise", "name": "Exercise", "category": "health", "dates": []},
            {"id": "study-time", "name": "Study Time", "category": "productivity", "dates": []},
        ],
        "studySessions": [],
        "journalEntries": [],
        "todos": [],
        "bible": {
            "day": 1,
            "completedDates": [],
            "streak": 0,
            "best": 0,
            "lastDate": None,
        },
        "meta": {
            "version": DATA_VERSION,
            "created": timestamp,
            "lastUpdated": timestamp,
        },
    }


def merge_with_defaults(loaded: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Lay ``loaded`` over the default record.

    The merge is shallow: a top-level key present in ``loaded`` replaces the
    default value for that key wholesale, nested fields are not merged.
    """
    return {**default_record(now), **loaded}


def default_app_data(now: Optional[datetime] = None) -> AppData:
    """Return the default record as an ``AppData``."""
    return AppData.from_dict(default_record(now))
