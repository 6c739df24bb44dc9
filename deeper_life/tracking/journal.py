"""Journal entries (append-only)."""

from datetime import date, datetime
from typing import List, Optional, Sequence

from ..core.models import AppData, JournalEntry, now_iso, record_id
from ..utils.date import format_date, resolve_today


def split_lines(text: Optional[str]) -> List[str]:
    """Split free text into entries, dropping blank lines."""
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]


def add_journal_entry(
    data: AppData,
    good_things: Sequence[str] = (),
    lessons: Sequence[str] = (),
    improvements: Sequence[str] = (),
    notes: str = "",
    today: Optional[date] = None,
    now: Optional[datetime] = None
) -> JournalEntry:
    entry = JournalEntry(
        id=record_id(now),
        date=format_date(resolve_today(today)),
        timestamp=now_iso(now),
        good_things=list(good_things),
        lessons=list(lessons),
        improvements=list(improvements),
        notes=notes or "",
    )
    data.journal_entries.append(entry)
    return entry


def recent_entries(data: AppData, limit: int = 5) -> List[JournalEntry]:
    """Newest entries first."""
    if limit <= 0:
        return []
    return list(reversed(data.journal_entries[-limit:]))
