"""
Command-line interface for Expense Tracker

    expense-tracker                                   # create datastore if missing
    expense-tracker add -d "Coffee" -a 3.5
    expense-tracker delete -i 2
    expense-tracker list

Exit status: 0 on success (including "not found" and "no expenses"),
2 on bad arguments, 1 when the datastore cannot be created, read,
decoded or written.
"""

import argparse
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.console import Console

from expense_tracker import __version__
from expense_tracker.audit import AuditLogger, configure_logging
from expense_tracker.config import get_settings
from expense_tracker.orchestrator import ExpenseTracker, create_tracker
from expense_tracker.rendering import build_expense_table
from expense_tracker.services.storage import (
    DatastoreInitError,
    DatastoreReadError,
    DatastoreWriteError,
    StorageError,
)


PROG_NAME = "expense-tracker"


def non_negative_int(value: str) -> int:
    """argparse type for expense ids."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"id must be non-negative: {value!r}")
    return number


def finite_float(value: str) -> float:
    """argparse type for amounts; NaN and infinity cannot be stored as JSON."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"amount must be finite: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Track expenses in a local JSON datastore.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--datastore",
        type=Path,
        default=None,
        metavar="PATH",
        help="datastore file (default: EXPENSE_TRACKER_DATASTORE_PATH or datastore.json)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{add,delete,list}")

    add_parser = subparsers.add_parser(
        "add",
        help="Add an expense with a description and amount",
    )
    add_parser.add_argument(
        "-d", "--description",
        required=True,
        help="Expense's description",
    )
    add_parser.add_argument(
        "-a", "--amount",
        required=True,
        type=finite_float,
        help="Expense's amount",
    )

    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete an existing expense given its ID",
    )
    delete_parser.add_argument(
        "-i", "--id",
        required=True,
        type=non_negative_int,
        help="Expense's ID",
    )

    subparsers.add_parser("list", help="List all expenses")

    return parser


def _run_command(
    args: argparse.Namespace,
    tracker: ExpenseTracker,
    console: Console,
) -> None:
    if args.command == "add":
        expense = tracker.add_expense(args.description, args.amount)
        console.print(
            f"Expense added successfully with ID: {expense.id}",
            markup=False,
            highlight=False,
        )
    elif args.command == "delete":
        if tracker.delete_expense(args.id):
            console.print(
                f"Expense with ID: '{args.id}' deleted successfully",
                markup=False,
                highlight=False,
            )
        else:
            console.print(
                f"No expense found with ID: {args.id}",
                markup=False,
                highlight=False,
            )
    elif args.command == "list":
        expenses = tracker.list_expenses()
        if not expenses:
            console.print("No expenses found", markup=False, highlight=False)
        else:
            console.print(build_expense_table(expenses))


def _storage_failure_prefix(error: StorageError) -> str:
    if isinstance(error, DatastoreInitError):
        return "Failed to initialize datastore"
    if isinstance(error, DatastoreReadError):
        return "Failed to read from datastore"
    if isinstance(error, DatastoreWriteError):
        return "Failed to write to datastore"
    return "Datastore error"


def main(
    argv: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> int:
    """
    Parse arguments, prepare the datastore and run one command.

    Returns the process exit status. Argument errors, --help and
    --version exit through argparse (SystemExit) before the datastore
    is touched.
    """
    args = build_parser().parse_args(argv)

    console = console or Console(highlight=False)
    error_console = error_console or Console(stderr=True, highlight=False)

    try:
        settings = get_settings()
    except ValidationError as e:
        error_console.print(f"Invalid configuration: {e}", markup=False)
        return 1

    configure_logging(settings.log_level_number, settings.log_format)

    datastore_path = args.datastore or settings.datastore_path
    audit_logger = AuditLogger()
    tracker = create_tracker(datastore_path, audit_logger)

    try:
        if tracker.initialize():
            console.print(
                f"Datastore initialized at '{datastore_path}'",
                markup=False,
                highlight=False,
            )
        else:
            console.print(
                f"Reading from datastore at '{datastore_path}'",
                markup=False,
                highlight=False,
            )

        if args.command is not None:
            _run_command(args, tracker, console)
    except StorageError as e:
        audit_logger.log_storage_error(
            error_type=type(e).__name__,
            error_message=str(e),
            path=str(datastore_path),
        )
        error_console.print(
            f"{_storage_failure_prefix(e)}: {e}",
            markup=False,
            highlight=False,
        )
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
