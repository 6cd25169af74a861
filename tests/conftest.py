"""Pytest configuration and shared fixtures.

This module provides fixtures for testing habittracker, including
store paths, fixed clocks and captured tracker output.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator

import pytest

from habittracker.config import reset_config
from habittracker.store import HabitStore, open_store


def parse_time(timestamp: str) -> datetime:
    """Parse an RFC 3339 timestamp such as 2024-02-06T13:00:00Z."""
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


# ============================================================================
# Time Fixtures
# ============================================================================


@pytest.fixture
def ts() -> Callable[[str], datetime]:
    """Parser for RFC 3339 timestamps."""
    return parse_time


@pytest.fixture
def fixed_clock() -> Callable[[str], Callable[[], datetime]]:
    """Build a clock that always returns the given timestamp."""

    def build(timestamp: str) -> Callable[[], datetime]:
        moment = parse_time(timestamp)
        return lambda: moment

    return build


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a store file that does not exist yet."""
    return tmp_path / "test.store"


@pytest.fixture
def store(store_path: Path) -> HabitStore:
    """An empty store bound to a temporary file."""
    return open_store(store_path)


@pytest.fixture
def transient_store() -> HabitStore:
    """An in-memory store that is never written to disk."""
    return open_store("")


# ============================================================================
# Output Fixtures
# ============================================================================


@pytest.fixture
def output() -> list[str]:
    """Collects tracker output lines; pass output.append as the sink."""
    return []


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def habit_env(store_path: Path) -> Generator[Path, None, None]:
    """Point HABIT_STORE_PATH at a temporary store for the duration of a test."""
    reset_config()
    os.environ["HABIT_STORE_PATH"] = str(store_path)

    yield store_path

    reset_config()
    if "HABIT_STORE_PATH" in os.environ:
        del os.environ["HABIT_STORE_PATH"]
