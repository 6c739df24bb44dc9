"""
Core module for deeper-life - contains domain models, configuration, and exceptions.
"""

from .models import (
    AppData,
    Preferences,
    Routine,
    RoutineItem,
    ItemType,
    Habit,
    JournalEntry,
    StudySession,
    BibleProgress,
    Meta,
)

from .defaults import default_app_data, default_record, merge_with_defaults

from .exceptions import (
    DeeperLifeError,
    ConfigurationError,
    StorageError,
    DataImportError,
    RoutineNotFoundError,
    RoutineItemNotFoundError,
    HabitNotFoundError,
)

__all__ = [
    # Models
    'AppData',
    'Preferences',
    'Routine',
    'RoutineItem',
    'ItemType',
    'Habit',
    'JournalEntry',
    'StudySession',
    'BibleProgress',
    'Meta',
    # Defaults
    'default_app_data',
    'default_record',
    'merge_with_defaults',
    # Exceptions
    'DeeperLifeError',
    'ConfigurationError',
    'StorageError',
    'DataImportError',
    'RoutineNotFoundError',
    'RoutineItemNotFoundError',
    'HabitNotFoundError',
]
