"""Allow running the tracker with `python -m expense_tracker`."""

from expense_tracker.cli import run

if __name__ == "__main__":
    run()
