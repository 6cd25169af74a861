"""Exception classes for habittracker."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union


class HabitError(Exception):
    """Base exception for all habittracker errors."""

    pass


class PersistenceError(HabitError):
    """Raised when the habit store cannot be read, decoded, encoded or written."""

    def __init__(
        self,
        path: Union[str, Path, None],
        message: str,
        cause: Optional[BaseException] = None,
    ):
        self.path = path
        self.cause = cause
        detail = f"{message} {str(path)!r}"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail)


class ValidationError(HabitError):
    """Raised when a tracker is misconfigured or given invalid input."""

    pass


class OutOfOrderError(HabitError):
    """Raised when an occurrence precedes the habit's last recorded one."""

    def __init__(self, habit_name: str, now: datetime, last_done: datetime):
        self.habit_name = habit_name
        self.now = now
        self.last_done = last_done
        super().__init__(
            f"current time {now.isoformat()!r} cannot precede last time habit "
            f"{habit_name!r} was updated on {last_done.isoformat()!r}"
        )
