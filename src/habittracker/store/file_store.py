"""File-backed habit store.

Keeps every habit in memory behind a single lock and writes the whole
mapping to one JSON file on demand.
"""

import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

import pydantic

from ..errors import PersistenceError
from .schemas import Habit, StoreDocument

logger = logging.getLogger(__name__)


class HabitStore:
    """Concurrency-safe key-value store of habits persisted to a local file."""

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        habits: Optional[dict[str, Habit]] = None,
    ):
        """Initialize the store.

        Args:
            path: File the store saves to. None or "" keeps the store in
                  memory only.
            habits: Initial habit mapping
        """
        self._path = Path(path) if path else None
        self._data: dict[str, Habit] = dict(habits or {})
        self._lock = threading.RLock()

    @property
    def path(self) -> Optional[Path]:
        """File backing this store, or None for a transient store."""
        return self._path

    @property
    def is_transient(self) -> bool:
        """Whether save() skips writing to disk."""
        return self._path is None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._data

    @contextmanager
    def transaction(self) -> Generator["HabitStore", None, None]:
        """Hold the store lock across several operations."""
        with self._lock:
            yield self

    def get(self, name: str) -> tuple[Habit, bool]:
        """Return the habit stored under name and whether it exists.

        A missing name yields the zero-value habit and False.
        """
        with self._lock:
            habit = self._data.get(name)
        if habit is None:
            return Habit.empty(), False
        return habit, True

    def set(self, name: str, habit: Habit) -> None:
        """Add or replace the habit stored under name."""
        with self._lock:
            self._data[name] = habit

    def delete(self, name: str) -> None:
        """Remove name from the store. Missing names are ignored."""
        with self._lock:
            self._data.pop(name, None)

    def all(self) -> dict[str, Habit]:
        """Return a snapshot of every stored habit keyed by name."""
        with self._lock:
            return dict(self._data)

    def save(self) -> None:
        """Write the store to its file, replacing any previous content.

        The data is written to a sibling temporary file first and then moved
        over the target, so a failed save leaves the old file intact.

        Raises:
            PersistenceError: If encoding fails or the file cannot be written
        """
        with self._lock:
            if self._path is None:
                logger.debug("Skipping save of transient store (%d habits)", len(self._data))
                return

            try:
                payload = StoreDocument(habits=self._data).model_dump_json(indent=2)
            except ValueError as e:
                raise PersistenceError(self._path, "error encoding habit data to store", e) from e

            tmp_path = self._path.with_name(self._path.name + ".tmp")
            try:
                tmp_path.write_text(payload, encoding="utf-8")
                os.replace(tmp_path, self._path)
            except OSError as e:
                tmp_path.unlink(missing_ok=True)
                raise PersistenceError(self._path, "error writing store", e) from e

            logger.debug("Saved %d habits to %s", len(self._data), self._path)


def open_store(path: Union[str, Path, None]) -> HabitStore:
    """Open the store file at path.

    A missing file yields an empty store bound to path. None or "" yields a
    transient store that is never written to disk.

    Args:
        path: Location of the store file

    Returns:
        HabitStore loaded with the file's habits

    Raises:
        PersistenceError: If the file exists but cannot be read or decoded
    """
    if not path:
        return HabitStore()

    store_path = Path(path)
    try:
        raw = store_path.read_bytes()
    except FileNotFoundError:
        logger.debug("No store at %s, starting empty", store_path)
        return HabitStore(store_path)
    except OSError as e:
        raise PersistenceError(store_path, "error opening store", e) from e

    try:
        document = StoreDocument.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise PersistenceError(store_path, "error decoding store data from", e) from e

    logger.debug("Loaded %d habits from %s", len(document.habits), store_path)
    return HabitStore(store_path, document.habits)
