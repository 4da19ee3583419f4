"""
JSON File Storage Implementation

The datastore is a single JSON array of expense objects. An empty
datastore is the literal text `[]`.

TRADEOFFS:
- Every write rewrites the whole file (fine for personal use)
- No locking: two processes writing at once may lose an update
- Writes are not atomic; a crash mid-write can leave a truncated file
"""

from pathlib import Path
from typing import Union

from pydantic import ValidationError

from expense_tracker.models.expense import Expense, ExpenseList
from expense_tracker.services.storage.interface import (
    DatastoreDecodeError,
    DatastoreInitError,
    DatastoreReadError,
    DatastoreWriteError,
    ExpenseStorageInterface,
)


EMPTY_DATASTORE = "[]"

PathLike = Union[str, Path]


def init_datastore(path: PathLike) -> bool:
    """
    Create an empty datastore at path unless one already exists.
    
    Existing content is left untouched and not validated.
    Returns True if the datastore was created.
    """
    path = Path(path)
    if path.exists():
        return False
    
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(EMPTY_DATASTORE, encoding="utf-8")
    except OSError as e:
        raise DatastoreInitError(f"{path}: {e}") from e
    return True


def read_expenses(path: PathLike) -> list[Expense]:
    """Load and decode the whole datastore."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DatastoreReadError(f"{path}: {e}") from e
    
    try:
        return ExpenseList.validate_json(data)
    except ValidationError as e:
        raise DatastoreDecodeError(f"{path}: {e}") from e


def write_expenses(path: PathLike, expenses: list[Expense]) -> None:
    """Encode the expenses and overwrite the whole datastore."""
    path = Path(path)
    data = ExpenseList.dump_json(expenses)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise DatastoreWriteError(f"{path}: {e}") from e


class JsonFileExpenseStorage(ExpenseStorageInterface):
    """
    JSON file implementation of expense storage.
    
    Thin object wrapper over the module-level functions so the
    domain layer can depend on ExpenseStorageInterface.
    """
    
    def __init__(self, path: PathLike):
        self._path = Path(path)
    
    @property
    def path(self) -> Path:
        return self._path
    
    def initialize(self) -> bool:
        return init_datastore(self._path)
    
    def read_expenses(self) -> list[Expense]:
        return read_expenses(self._path)
    
    def write_expenses(self, expenses: list[Expense]) -> None:
        write_expenses(self._path, expenses)
