"""Persistence port, JSON file store and data transfer."""

from .store import DataStore, JsonFileStore
from .transfer import export_data, import_data, parse_import, reset_data

__all__ = [
    'DataStore',
    'JsonFileStore',
    'export_data',
    'import_data',
    'parse_import',
    'reset_data',
]
