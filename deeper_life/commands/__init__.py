"""
Command implementations for the deeper CLI.
"""

from .status import StatusCommand, gate_redirect
from .routine import RoutineCommand
from .habits import HabitsCommand
from .study import StudyCommand
from .journal import JournalCommand
from .data import DataCommand

__all__ = [
    'StatusCommand',
    'gate_redirect',
    'RoutineCommand',
    'HabitsCommand',
    'StudyCommand',
    'JournalCommand',
    'DataCommand',
]
