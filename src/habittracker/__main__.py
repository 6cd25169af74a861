"""Main entry point for the habittracker package."""

from habittracker.cli import main


if __name__ == "__main__":
    main()
