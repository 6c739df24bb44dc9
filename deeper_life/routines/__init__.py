"""Routine gate, routine items and timers."""

from .gate import Mode, Page, RoutineGate, current_mode, redirect_for, is_routine_completed_today
from .items import (
    get_routine,
    get_item,
    complete_item,
    is_item_completed,
    is_routine_fully_completed,
    get_progress,
    complete_routine,
    finalize_routine,
)
from .timer import CountdownTimer, format_timer
from .clock import get_time_until, format_time_remaining, get_greeting, is_first_visit_today

__all__ = [
    'Mode',
    'Page',
    'RoutineGate',
    'current_mode',
    'redirect_for',
    'is_routine_completed_today',
    'get_routine',
    'get_item',
    'complete_item',
    'is_item_completed',
    'is_routine_fully_completed',
    'get_progress',
    'complete_routine',
    'finalize_routine',
    'CountdownTimer',
    'format_timer',
    'get_time_until',
    'format_time_remaining',
    'get_greeting',
    'is_first_visit_today',
]
