"""Pydantic schemas for streak tracking events."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrackEventKind(str, Enum):
    """Which transition or summary line an event describes."""

    NEW_HABIT = "new_habit"
    REPEATED_TODAY = "repeated_today"
    STREAK_RESET = "streak_reset"  # days = days since last occurrence
    STREAK_EXTENDED = "streak_extended"  # days = new streak length
    INACTIVE = "inactive"  # days = days since last occurrence
    ON_STREAK = "on_streak"  # days = current streak length
    NO_HABITS = "no_habits"


class TrackEvent(BaseModel):
    """Outcome of recording a habit or of one summary line."""

    kind: TrackEventKind
    habit_name: Optional[str] = None
    days: Optional[int] = Field(None, ge=0)

    model_config = {"frozen": True}
