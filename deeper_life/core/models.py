"""
Domain models for deeper-life.

This module contains the data structures that make up the persisted record.
Every model serialises to the camelCase JSON layout used on disk via
``to_dict`` and is rebuilt with ``from_dict``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DATA_VERSION = "1.0"
DEFAULT_MORNING_TIME = "06:30"
DEFAULT_EVENING_TIME = "21:00"
HABIT_HISTORY_LIMIT = 21

MORNING = "morning"
EVENING = "evening"


def now_iso(now: Optional[datetime] = None) -> str:
    """Return an ISO 8601 timestamp for ``now`` (UTC wall clock by default)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.isoformat()


def record_id(now: Optional[datetime] = None) -> int:
    """Millisecond timestamp used as the id of append-only records."""
    if now is None:
        now = datetime.now(timezone.utc)
    return int(now.timestamp() * 1000)


class ItemType(Enum):
    """Routine item types; the type decides how an item gets completed."""

    AUTO = "auto"
    TIMER = "timer"
    MANUAL = "manual"
    COUNTER = "counter"
    TEXT = "text"
    REDIRECT = "redirect"


@dataclass
class Preferences:
    """Gate trigger times as HH:MM strings."""

    morning_time: str = DEFAULT_MORNING_TIME
    evening_time: str = DEFAULT_EVENING_TIME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "morningTime": self.morning_time,
            "eveningTime": self.evening_time,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Preferences:
        return cls(
            morning_time=data.get("morningTime") or DEFAULT_MORNING_TIME,
            evening_time=data.get("eveningTime") or DEFAULT_EVENING_TIME,
        )


@dataclass
class RoutineItem:
    """A single checklist entry inside a routine."""

    id: str
    label: str
    type: ItemType
    completed: bool = False
    duration: Optional[int] = None  # seconds, timer items
    target: Optional[int] = None  # counter items
    current: Optional[int] = None  # counter items
    value: Optional[str] = None  # text items

    def reset(self) -> None:
        """Clear completion state for the next day."""
        self.completed = False
        if self.type == ItemType.COUNTER:
            self.current = 0
        if self.type == ItemType.TEXT:
            self.value = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "type": self.type.value,
            "completed": self.completed,
        }
        for key in ("duration", "target", "current", "value"):
            attr = getattr(self, key)
            if attr is not None:
                data[key] = attr
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RoutineItem:
        try:
            item_type = ItemType(data.get("type", "manual"))
        except ValueError:
            logger.warning(
                "Routine item %r has unknown type %r; treating it as manual",
                data.get("id"), data.get("type"),
            )
            item_type = ItemType.MANUAL

        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            type=item_type,
            completed=bool(data.get("completed", False)),
            duration=data.get("duration"),
            target=data.get("target"),
            current=data.get("current"),
            value=data.get("value"),
        )


@dataclass
class Routine:
    """An ordered checklist plus the day it was last finished."""

    items: List[RoutineItem] = field(default_factory=list)
    last_completed: Optional[str] = None

    def find_item(self, item_id: str) -> Optional[RoutineItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastCompleted": self.last_completed,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Routine:
        return cls(
            items=[RoutineItem.from_dict(entry) for entry in data.get("items", [])],
            last_completed=data.get("lastCompleted"),
        )


@dataclass
class Habit:
    """A tracked habit and the days it was completed."""

    id: str
    name: str
    category: str = ""
    dates: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "dates": list(self.dates),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Habit:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            category=data.get("category", ""),
            dates=list(data.get("dates", [])),
        )


@dataclass
class JournalEntry:
    """Evening reflection; never modified after creation."""

    id: int
    date: str
    timestamp: str
    good_things: List[str] = field(default_factory=list)
    lessons: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "timestamp": self.timestamp,
            "goodThings": list(self.good_things),
            "lessons": list(self.lessons),
            "improvements": list(self.improvements),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> JournalEntry:
        return cls(
            id=data.get("id", 0),
            date=data.get("date", ""),
            timestamp=data.get("timestamp", ""),
            good_things=list(data.get("goodThings", [])),
            lessons=list(data.get("lessons", [])),
            improvements=list(data.get("improvements", [])),
            notes=data.get("notes", ""),
        )


@dataclass
class StudySession:
    """A logged block of study time; duration is in minutes."""

    id: int
    date: str
    start_time: str
    end_time: str
    duration: int = 0
    subject: str = ""
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "duration": self.duration,
            "subject": self.subject,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StudySession:
        return cls(
            id=data.get("id", 0),
            date=data.get("date", ""),
            start_time=data.get("startTime", ""),
            end_time=data.get("endTime", ""),
            duration=data.get("duration", 0) or 0,
            subject=data.get("subject", ""),
            notes=data.get("notes", ""),
        )


@dataclass
class BibleProgress:
    """Reading-plan progress carried over from the standalone Bible app."""

    day: int = 1
    completed_dates: List[str] = field(default_factory=list)
    streak: int = 0
    best: int = 0
    last_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "completedDates": list(self.completed_dates),
            "streak": self.streak,
            "best": self.best,
            "lastDate": self.last_date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BibleProgress:
        return cls(
            day=data.get("day", 1),
            completed_dates=list(data.get("completedDates", [])),
            streak=data.get("streak", 0),
            best=data.get("best", 0),
            last_date=data.get("lastDate"),
        )


@dataclass
class Meta:
    version: str = DATA_VERSION
    created: str = field(default_factory=now_iso)
    last_updated: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "created": self.created,
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Meta:
        return cls(
            version=data.get("version", DATA_VERSION),
            created=data.get("created") or now_iso(),
            last_updated=data.get("lastUpdated") or now_iso(),
        )


# Top-level keys owned by AppData; anything else lands in ``extra``.
_KNOWN_KEYS = (
    "preferences",
    "routines",
    "habits",
    "studySessions",
    "journalEntries",
    "todos",
    "bible",
    "meta",
)


@dataclass
class AppData:
    """The whole persisted record."""

    preferences: Preferences = field(default_factory=Preferences)
    routines: Dict[str, Routine] = field(default_factory=dict)
    habits: List[Habit] = field(default_factory=list)
    study_sessions: List[StudySession] = field(default_factory=list)
    journal_entries: List[JournalEntry] = field(default_factory=list)
    todos: List[Dict[str, Any]] = field(default_factory=list)
    bible: BibleProgress = field(default_factory=BibleProgress)
    meta: Meta = field(default_factory=Meta)
    extra: Dict[str, Any] = field(default_factory=dict)

    def find_habit(self, habit_id: str) -> Optional[Habit]:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "preferences": self.preferences.to_dict(),
            "routines": {name: routine.to_dict() for name, routine in self.routines.items()},
            "habits": [habit.to_dict() for habit in self.habits],
            "studySessions": [session.to_dict() for session in self.study_sessions],
            "journalEntries": [entry.to_dict() for entry in self.journal_entries],
            "todos": [dict(todo) for todo in self.todos],
            "bible": self.bible.to_dict(),
            "meta": self.meta.to_dict(),
        }
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppData:
        routines = {
            name: Routine.from_dict(entry or {})
            for name, entry in (data.get("routines") or {}).items()
        }
        return cls(
            preferences=Preferences.from_dict(data.get("preferences") or {}),
            routines=routines,
            habits=[Habit.from_dict(entry) for entry in data.get("habits") or []],
            study_sessions=[
                StudySession.from_dict(entry) for entry in data.get("studySessions") or []
            ],
            journal_entries=[
                JournalEntry.from_dict(entry) for entry in data.get("journalEntries") or []
            ],
            todos=[dict(todo) for todo in data.get("todos") or []],
            bible=BibleProgress.from_dict(data.get("bible") or {}),
            meta=Meta.from_dict(data.get("meta") or {}),
            extra={key: value for key, value in data.items() if key not in _KNOWN_KEYS},
        )
