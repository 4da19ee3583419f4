"""Test doubles and small helpers shared by the test modules."""

import io
import json
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from expense_tracker.models.expense import Expense
from expense_tracker.services.storage import ExpenseStorageInterface


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """
    Storage backend that keeps expenses in a list.
    
    Counts writes so tests can check that nothing was written.
    """
    
    def __init__(self, expenses: Optional[list[Expense]] = None):
        self._expenses = list(expenses or [])
        self._initialized = expenses is not None
        self.write_count = 0
    
    @property
    def path(self) -> Path:
        return Path("<memory>")
    
    def initialize(self) -> bool:
        if self._initialized:
            return False
        self._initialized = True
        return True
    
    def read_expenses(self) -> list[Expense]:
        return [expense.model_copy() for expense in self._expenses]
    
    def write_expenses(self, expenses: list[Expense]) -> None:
        self.write_count += 1
        self._expenses = [expense.model_copy() for expense in expenses]


def write_datastore(path: Path, records: list[dict[str, Any]]) -> None:
    """Write raw records to a datastore file."""
    path.write_text(json.dumps(records), encoding="utf-8")


def read_datastore(path: Path) -> list[dict[str, Any]]:
    """Read raw records from a datastore file."""
    return json.loads(path.read_text(encoding="utf-8"))


def make_console() -> tuple[Console, io.StringIO]:
    """A plain-text console that writes into a buffer."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=120,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    return console, buffer
