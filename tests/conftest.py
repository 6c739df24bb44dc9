#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- A fixed calendar day and wall clock for date-sensitive tests
- Fresh default records and an in-memory store
- Temporary directories and an isolated working directory
"""

import os
import sys
import tempfile
import shutil
from datetime import date, datetime
from typing import Generator

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from deeper_life.core.defaults import default_app_data
from deeper_life.core.models import AppData

from tests.fake_store import InMemoryStore

# Wednesday
FIXED_TODAY = date(2024, 3, 13)
FIXED_NOW = datetime(2024, 3, 13, 10, 0, 0)


def pytest_configure(config):
    """Configure pytest environment."""
    config.addinivalue_line("markers", "slow: tests that wait on real timers")


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = tempfile.mkdtemp(prefix="deeper_life_test_")
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def isolated_home(temp_dir, monkeypatch):
    """Point the working directory at a temp dir and reset the path manager."""
    import deeper_life.core.paths as paths

    monkeypatch.setenv("DEEPER_LIFE_HOME", temp_dir)
    monkeypatch.setattr(paths, "_path_manager", None)
    return temp_dir


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def app_data(now) -> AppData:
    """A fresh default record."""
    return default_app_data(now)


@pytest.fixture
def store(app_data) -> InMemoryStore:
    """In-memory store seeded with the default record."""
    return InMemoryStore(app_data)
