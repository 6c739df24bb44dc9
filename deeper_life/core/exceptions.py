"""
Exception classes for deeper-life.
"""


class DeeperLifeError(Exception):
    """Base exception for all deeper-life errors."""
    pass


class ConfigurationError(DeeperLifeError):
    """Raised when configuration is invalid or missing."""
    pass


class StorageError(DeeperLifeError):
    """Raised when the persisted record cannot be read or written."""
    pass


class DataImportError(StorageError):
    """Raised when an imported file is unreadable or has an invalid format."""
    pass


class RoutineNotFoundError(DeeperLifeError):
    """Raised when a routine name is not present in the record."""
    pass


class RoutineItemNotFoundError(DeeperLifeError):
    """Raised when a routine item id cannot be found."""
    pass


class HabitNotFoundError(DeeperLifeError):
    """Raised when a habit id cannot be found."""
    pass
