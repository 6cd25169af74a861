"""Streak tracker for recording habits and summarizing streaks."""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, Union

from ..errors import OutOfOrderError, PersistenceError, ValidationError
from ..store import Habit, HabitStore, open_store
from .reporting import format_event
from .schemas import TrackEvent, TrackEventKind

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
OutputSink = Callable[[str], None]

ONE_DAY = timedelta(hours=24)


def local_now() -> datetime:
    """Return the current local wall-clock time as an aware datetime."""
    return datetime.now().astimezone()


def write_stdout(line: str) -> None:
    """Write one line of tracker output to standard output."""
    sys.stdout.write(line + "\n")


def days_between(earlier: datetime, later: datetime) -> int:
    """Count whole 24-hour periods from earlier to later."""
    return (later - earlier) // ONE_DAY


def same_date(first: datetime, second: datetime) -> bool:
    """Check whether two timestamps fall on the same calendar date."""
    return first.date() == second.date()


@dataclass
class TrackerConfig:
    """Collaborators wired into a HabitTracker."""

    store: Optional[HabitStore]
    output: Optional[OutputSink] = write_stdout
    clock: Optional[Clock] = local_now

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.store is None:
            errors.append("habit store must be provided")
        if self.output is None:
            errors.append("output sink must be provided")
        if self.clock is None:
            errors.append("clock must be provided")
        return errors


class HabitTracker:
    """Applies the streak rules to recorded habits and reports on them."""

    def __init__(self, config: TrackerConfig):
        """Initialize tracker.

        Args:
            config: Store, output sink and clock to use

        Raises:
            ValidationError: If a collaborator is missing
        """
        errors = config.validate()
        if errors:
            raise ValidationError("; ".join(errors))

        self.store = config.store
        self.output = config.output
        self.clock = config.clock

    @classmethod
    def open(
        cls,
        path: Union[str, Path, None],
        output: OutputSink = write_stdout,
        clock: Clock = local_now,
    ) -> "HabitTracker":
        """Create a tracker backed by the store file at path.

        Raises:
            PersistenceError: If the store file cannot be opened
        """
        return cls(TrackerConfig(store=open_store(path), output=output, clock=clock))

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def record(self, name: str) -> TrackEvent:
        """Record an occurrence of a habit now.

        Starts the habit if it is new, otherwise extends, keeps or resets its
        streak. The store is saved after the change; if saving fails the
        change is undone.

        Args:
            name: Habit name

        Returns:
            The event describing what changed

        Raises:
            ValidationError: If name is empty or the clock is naive
            OutOfOrderError: If now precedes the habit's last occurrence
            PersistenceError: If the store cannot be saved
        """
        if not name or not name.strip():
            raise ValidationError("habit name must not be empty")

        now = self._now()
        with self.store.transaction():
            existing, found = self.store.get(name)
            if not found:
                updated = Habit(name=name, current_streak=1, last_done=now)
                event = TrackEvent(kind=TrackEventKind.NEW_HABIT, habit_name=name)
            else:
                updated, event = self._advance(existing, name, now)

            self.store.set(name, updated)
            try:
                self.store.save()
            except PersistenceError:
                if found:
                    self.store.set(name, existing)
                else:
                    self.store.delete(name)
                raise

        logger.debug("Recorded %r: %s", name, event.kind.value)
        self._emit(event)
        return event

    def _advance(
        self, habit: Habit, name: str, now: datetime
    ) -> tuple[Habit, TrackEvent]:
        """Apply the streak rules to an existing habit."""
        last = habit.last_done
        if now < last:
            logger.warning("Rejected out-of-order update of %r", name)
            raise OutOfOrderError(name, now, last)

        days_since = days_between(last, now)

        if same_date(now, last):
            streak = habit.current_streak
            event = TrackEvent(kind=TrackEventKind.REPEATED_TODAY, habit_name=name)
        elif days_since > 0:
            streak = 1
            event = TrackEvent(
                kind=TrackEventKind.STREAK_RESET, habit_name=name, days=days_since
            )
        else:
            streak = habit.current_streak + 1
            event = TrackEvent(
                kind=TrackEventKind.STREAK_EXTENDED, habit_name=name, days=streak
            )

        return habit.model_copy(update={"current_streak": streak, "last_done": now}), event

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def summarize(self) -> list[TrackEvent]:
        """Report the state of every tracked habit, ordered by name.

        Returns:
            One event per habit, or a single NO_HABITS event
        """
        habits = self.store.all()
        if not habits:
            events = [TrackEvent(kind=TrackEventKind.NO_HABITS)]
        else:
            now = self._now()
            events = []
            for name in sorted(habits):
                habit = habits[name]
                days_since = days_between(habit.last_done, now)
                if days_since > 0:
                    events.append(TrackEvent(
                        kind=TrackEventKind.INACTIVE, habit_name=habit.name, days=days_since
                    ))
                else:
                    events.append(TrackEvent(
                        kind=TrackEventKind.ON_STREAK,
                        habit_name=habit.name,
                        days=habit.current_streak,
                    ))

        for event in events:
            self._emit(event)
        return events

    def _now(self) -> datetime:
        """Read the clock, which must return timezone-aware datetimes."""
        now = self.clock()
        if now.tzinfo is None or now.utcoffset() is None:
            raise ValidationError(f"clock returned a naive datetime {now.isoformat()!r}")
        return now

    def _emit(self, event: TrackEvent) -> None:
        self.output(format_event(event))
