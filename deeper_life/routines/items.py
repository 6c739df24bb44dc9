"""
Routine item completion and end-of-routine bookkeeping.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from ..core.exceptions import RoutineItemNotFoundError, RoutineNotFoundError
from ..core.models import AppData, EVENING, ItemType, Routine, RoutineItem
from ..tracking.habits import track_habit
from ..tracking.journal import add_journal_entry, split_lines
from ..utils.date import format_date, resolve_today

logger = logging.getLogger(__name__)

# Evening text items that feed the journal entry
JOURNAL_ITEM_IDS = {
    "good_things": "good-things",
    "lessons": "lessons",
    "improvements": "improvements",
}


def get_routine(data: AppData, routine_name: str) -> Routine:
    routine = data.routines.get(routine_name)
    if routine is None:
        raise RoutineNotFoundError(f"Unknown routine '{routine_name}'")
    return routine


def get_item(data: AppData, routine_name: str, item_id: str) -> RoutineItem:
    item = get_routine(data, routine_name).find_item(item_id)
    if item is None:
        raise RoutineItemNotFoundError(f"No item '{item_id}' in the {routine_name} routine")
    return item


def complete_item(
    data: AppData,
    routine_name: str,
    item_id: str,
    value: Optional[Union[int, str]] = None
) -> RoutineItem:
    """
    Apply a completion to a routine item.

    - counter: ``current`` becomes ``value`` (when given); the item counts as
      completed only once ``current >= target``
    - text: stores ``value`` (when given) and marks the item completed;
      the text itself does not decide completion
    - every other type: marked completed

    Raises:
        RoutineNotFoundError, RoutineItemNotFoundError
        ValueError: counter value that is not a whole number
    """
    item = get_item(data, routine_name, item_id)

    if item.type == ItemType.COUNTER:
        if value is not None:
            try:
                item.current = int(value)
            except (TypeError, ValueError):
                raise ValueError(f"Counter value for '{item_id}' must be a whole number, got {value!r}")
        current = item.current or 0
        target = item.target or 0
        item.completed = current >= target
        logger.debug("Counter %s/%s at %s of %s", routine_name, item_id, current, target)
        return item

    if item.type == ItemType.TEXT and value is not None:
        item.value = str(value)

    item.completed = True
    return item


def is_item_completed(data: AppData, routine_name: str, item_id: str) -> bool:
    item = get_routine(data, routine_name).find_item(item_id)
    return item.completed if item else False


def is_routine_fully_completed(data: AppData, routine_name: str) -> bool:
    return all(item.completed for item in get_routine(data, routine_name).items)


def get_progress(data: AppData, routine_name: str) -> Dict[str, Any]:
    items = get_routine(data, routine_name).items
    completed = sum(1 for item in items if item.completed)
    total = len(items)
    percentage = int(completed * 100 / total + 0.5) if total else 0
    return {"completed": completed, "total": total, "percentage": percentage}


def complete_routine(data: AppData, routine_name: str, today: Optional[date] = None) -> None:
    """
    Mark a routine as done for ``today``.

    Sets ``last_completed``, records the day on the matching
    ``<routine>-routine`` habit and resets every item for the next day.
    """
    routine = get_routine(data, routine_name)
    today = resolve_today(today)

    routine.last_completed = format_date(today)
    track_habit(data, f"{routine_name}-routine", today=today)

    for item in routine.items:
        item.reset()


def finalize_routine(
    data: AppData,
    routine_name: str,
    today: Optional[date] = None,
    now: Optional[datetime] = None
) -> bool:
    """
    Close out a fully completed routine.

    The evening routine also turns its reflection items into a journal
    entry. Does nothing unless every item is completed.

    Returns:
        True if the routine was finalized, False otherwise
    """
    if not is_routine_fully_completed(data, routine_name):
        logger.debug("Routine %s is not fully completed; nothing to finalize", routine_name)
        return False

    if routine_name == EVENING:
        routine = get_routine(data, routine_name)
        fields = {}
        for field_name, item_id in JOURNAL_ITEM_IDS.items():
            item = routine.find_item(item_id)
            fields[field_name] = split_lines(item.value if item else "")
        add_journal_entry(data, today=today, now=now, **fields)

    complete_routine(data, routine_name, today)
    logger.info("Finalized %s routine", routine_name)
    return True
