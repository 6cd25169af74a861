"""Habit streak tracking module."""

from .manager import HabitTracker, TrackerConfig, local_now, write_stdout
from .reporting import format_event, pluralize_days
from .schemas import TrackEvent, TrackEventKind

__all__ = [
    "HabitTracker",
    "TrackerConfig",
    "local_now",
    "write_stdout",
    "format_event",
    "pluralize_days",
    "TrackEvent",
    "TrackEventKind",
]
