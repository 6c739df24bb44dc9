"""Study session logging and totals."""

from datetime import date, datetime
from typing import Optional

from ..core.models import AppData, StudySession, now_iso, record_id
from ..utils.date import format_date, parse_date, resolve_today
from .habits import track_habit

STUDY_HABIT_ID = "study-time"


def log_study_session(
    data: AppData,
    duration: int = 0,
    subject: str = "",
    notes: str = "",
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    today: Optional[date] = None,
    now: Optional[datetime] = None
) -> StudySession:
    """
    Append a study session and count it towards the study-time habit.

    Args:
        duration: Length in minutes
    """
    if duration < 0:
        raise ValueError("Study duration cannot be negative")

    today = resolve_today(today)
    timestamp = now_iso(now)
    session = StudySession(
        id=record_id(now),
        date=format_date(today),
        start_time=start_time or timestamp,
        end_time=end_time or timestamp,
        duration=duration,
        subject=subject or "",
        notes=notes or "",
    )
    data.study_sessions.append(session)

    track_habit(data, STUDY_HABIT_ID, today=today)
    return session


def get_study_time_for_range(data: AppData, start: date, end: date) -> int:
    """Total minutes studied between ``start`` and ``end`` inclusive."""
    total = 0
    for session in data.study_sessions:
        session_date = parse_date(session.date)
        if session_date is not None and start <= session_date <= end:
            total += session.duration
    return total


def get_today_study_time(data: AppData, today: Optional[date] = None) -> int:
    today = resolve_today(today)
    return get_study_time_for_range(data, today, today)
