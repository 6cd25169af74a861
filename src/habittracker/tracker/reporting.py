"""Human-readable messages for tracking events."""

from .schemas import TrackEvent, TrackEventKind

MESSAGES = {
    TrackEventKind.NEW_HABIT: (
        "Congratulations on starting your new habit '{name}'! "
        "Don't forget to do it again."
    ),
    TrackEventKind.REPEATED_TODAY: (
        "Way to go practicing your habit '{name}' more than once today!"
    ),
    TrackEventKind.STREAK_RESET: (
        "You last did the habit '{name}' {days} {unit} ago, "
        "so you're starting a new streak today. Good luck!"
    ),
    TrackEventKind.STREAK_EXTENDED: (
        "Nice work: you've done the habit '{name}' for {days} {unit} in a row now."
    ),
    TrackEventKind.INACTIVE: (
        "It's been {days} {unit} since you did '{name}'. "
        "Stay positive and get back on it!"
    ),
    TrackEventKind.ON_STREAK: (
        "You are currently on a {days}-day streak for '{name}'. Keep it going!"
    ),
    TrackEventKind.NO_HABITS: "You're not currently tracking any habits.",
}


def pluralize_days(days: int) -> str:
    """Return "day" for exactly one day, "days" otherwise."""
    return "day" if days == 1 else "days"


def format_event(event: TrackEvent) -> str:
    """Render an event as a single line of text.

    Example:
        >>> format_event(TrackEvent(kind=TrackEventKind.INACTIVE, habit_name="yoga", days=1))
        "It's been 1 day since you did 'yoga'. Stay positive and get back on it!"
    """
    days = event.days or 0
    return MESSAGES[event.kind].format(
        name=event.habit_name,
        days=days,
        unit=pluralize_days(days),
    )
