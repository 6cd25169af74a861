"""Track daily habits and the streaks they build."""

__version__ = "0.1.0"
