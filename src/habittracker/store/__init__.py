"""Persistent habit storage."""

from .file_store import HabitStore, open_store
from .schemas import Habit, StoreDocument

__all__ = [
    "HabitStore",
    "open_store",
    "Habit",
    "StoreDocument",
]
