"""Command-line interface for habittracker.

Built with Typer for commands and Rich for output.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import DEFAULT_STORE_PATH, get_config
from .errors import HabitError
from .tracker import HabitTracker

TRACK_HELP = (
    "Record HABIT for today, or summarize every tracked habit when no HABIT "
    "is given.\n\n"
    f"The default store file is '{DEFAULT_STORE_PATH}'. This file is created "
    "automatically the first time a habit is recorded with 'habit <habit-name>'."
)

app = typer.Typer(
    name="habit",
    help="Track a habit and report your current streak.",
    add_completion=False,
)

# Rich consoles for output
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True
    )


def print_line(line: str) -> None:
    """Print one line of tracker output verbatim."""
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def version_callback(value: bool) -> None:
    if value:
        from . import __version__

        console.print(f"habit version {__version__}")
        raise typer.Exit()


# ============================================================================
# Commands
# ============================================================================


@app.command(help=TRACK_HELP)
def track(
    habit: Optional[str] = typer.Argument(
        None, help="Habit to record. Omit to print a summary of all habits."
    ),
    store: Optional[Path] = typer.Option(
        None, "--store", "-s", help="Store file to use instead of HABIT_STORE_PATH"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    config = get_config()
    errors = []
    if store is None:
        errors.extend(config.validate_store_path())
        store = config.store_path
    if not verbose:
        errors.extend(config.validate_log_level())
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else config.log_level)

    try:
        tracker = HabitTracker.open(store, output=print_line)
        if habit is None:
            tracker.summarize()
        else:
            tracker.record(habit)
    except HabitError as e:
        print_error(str(e))
        raise typer.Exit(1)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
