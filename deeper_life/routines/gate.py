"""
Routine gate: decides which screen the user is allowed to see.

The mode is a pure function of the wall clock and today's completion flags.
It is never stored, so it must be recomputed on every page load.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional

from ..core.exceptions import ConfigurationError
from ..core.models import AppData, EVENING, MORNING, Preferences
from ..utils.date import format_date, parse_hhmm, resolve_today
from .items import get_routine


class Mode(Enum):
    """Allowed app mode for the current time of day."""

    PRE_MORNING = "pre-morning"
    MORNING_REQUIRED = "morning-required"
    DAYTIME = "daytime"
    EVENING_REQUIRED = "evening-required"
    EVENING_COMPLETE = "evening-complete"


class Page:
    """Page names understood by the gate."""

    LOCKED = "locked"
    MORNING_ROUTINE = "morning-routine"
    EVENING_ROUTINE = "evening-routine"
    EVENING_DONE = "evening-done"
    DASHBOARD = "dashboard"
    HABITS = "habits"
    STUDY = "study"
    JOURNAL = "journal"


# Page each restricted mode forces; daytime has none
MANDATORY_PAGES = {
    Mode.PRE_MORNING: Page.LOCKED,
    Mode.MORNING_REQUIRED: Page.MORNING_ROUTINE,
    Mode.EVENING_REQUIRED: Page.EVENING_ROUTINE,
    Mode.EVENING_COMPLETE: Page.EVENING_DONE,
}


def _minutes(value: str, label: str) -> int:
    try:
        return parse_hhmm(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {label} time preference: {exc}") from exc


def current_mode(
    now: datetime,
    preferences: Preferences,
    morning_done: bool,
    evening_done: bool
) -> Mode:
    """
    Derive the gate mode.

    - before the morning time: pre-morning
    - from the morning time until the evening time: morning-required until
      the morning routine is done, then daytime
    - from the evening time on: evening-required until the evening routine
      is done, then evening-complete
    """
    time_value = now.hour * 60 + now.minute
    morning_start = _minutes(preferences.morning_time, "morning")
    evening_start = _minutes(preferences.evening_time, "evening")

    if time_value < morning_start:
        return Mode.PRE_MORNING

    if time_value < evening_start:
        return Mode.DAYTIME if morning_done else Mode.MORNING_REQUIRED

    return Mode.EVENING_COMPLETE if evening_done else Mode.EVENING_REQUIRED


def redirect_for(mode: Mode, current_page: str) -> Optional[str]:
    """Return the page ``mode`` forces, or None when ``current_page`` is allowed."""
    mandatory = MANDATORY_PAGES.get(mode)
    if mandatory is None or mandatory == current_page:
        return None
    return mandatory


def is_routine_completed_today(data: AppData, routine_name: str, today: Optional[date] = None) -> bool:
    routine = get_routine(data, routine_name)
    if not routine.last_completed:
        return False
    return routine.last_completed == format_date(resolve_today(today))


class RoutineGate:
    """Applies the gate policy to a loaded record."""

    def __init__(
        self,
        data: AppData,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[logging.Logger] = None
    ):
        self.data = data
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)

    def mode(self, now: Optional[datetime] = None) -> Mode:
        now = now or self.clock()
        today = now.date()
        # Only the routine for the current window is looked up
        time_value = now.hour * 60 + now.minute
        evening_start = _minutes(self.data.preferences.evening_time, "evening")
        if time_value < evening_start:
            morning_done = is_routine_completed_today(self.data, MORNING, today)
            evening_done = False
        else:
            morning_done = False
            evening_done = is_routine_completed_today(self.data, EVENING, today)

        mode = current_mode(now, self.data.preferences, morning_done, evening_done)
        self.logger.debug(f"Gate mode at {now:%H:%M}: {mode.value}")
        return mode

    def should_redirect(self, current_page: str, now: Optional[datetime] = None) -> Optional[str]:
        """
        Return the page the user must be sent to, or None if ``current_page``
        may be shown.
        """
        return redirect_for(self.mode(now), current_page)
