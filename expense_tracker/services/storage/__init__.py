"""
Storage Services Package

Provides the abstract storage interface and the JSON file implementation.
"""

from expense_tracker.services.storage.interface import (
    DatastoreDecodeError,
    DatastoreInitError,
    DatastoreReadError,
    DatastoreWriteError,
    ExpenseStorageInterface,
    StorageError,
)
from expense_tracker.services.storage.json_file import (
    EMPTY_DATASTORE,
    JsonFileExpenseStorage,
    init_datastore,
    read_expenses,
    write_expenses,
)

__all__ = [
    # Interfaces
    "ExpenseStorageInterface",
    # Exceptions
    "DatastoreDecodeError",
    "DatastoreInitError",
    "DatastoreReadError",
    "DatastoreWriteError",
    "StorageError",
    # JSON file implementation
    "EMPTY_DATASTORE",
    "JsonFileExpenseStorage",
    "init_datastore",
    "read_expenses",
    "write_expenses",
]
