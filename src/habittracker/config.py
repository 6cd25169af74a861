"""Configuration management for habittracker.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_STORE_PATH = "habit.store"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    # Store
    store_path: Path

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        store_path = Path(
            os.environ.get("HABIT_STORE_PATH", DEFAULT_STORE_PATH)
        ).expanduser()

        return cls(
            store_path=store_path,
            log_level=os.environ.get("HABIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        return self.validate_store_path() + self.validate_log_level()

    def validate_store_path(self) -> list[str]:
        """Check the store directory exists or can be created."""
        if not self.store_path.parent.exists():
            try:
                self.store_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError:
                return [f"Cannot create store directory: {self.store_path.parent}"]
        return []

    def validate_log_level(self) -> list[str]:
        """Check the log level is one logging knows."""
        if not isinstance(logging.getLevelName(self.log_level), int):
            return [f"Unknown log level: {self.log_level}"]
        return []


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
