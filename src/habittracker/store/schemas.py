"""Pydantic schemas for stored habits."""

from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, Field, model_validator

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
STORE_FORMAT_VERSION = 1


class Habit(BaseModel):
    """A tracked habit and its current streak."""

    name: str
    current_streak: int = Field(0, ge=0)
    last_done: AwareDatetime = EPOCH

    model_config = {"frozen": True}

    @classmethod
    def empty(cls, name: str = "") -> "Habit":
        """Return the zero-value habit handed out for missing names."""
        return cls(name=name)


class StoreDocument(BaseModel):
    """On-disk layout of a habit store file."""

    version: int = STORE_FORMAT_VERSION
    habits: dict[str, Habit] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_keys_match_names(self) -> "StoreDocument":
        for key, habit in self.habits.items():
            if key != habit.name:
                raise ValueError(f"habit {habit.name!r} is stored under key {key!r}")
        return self
