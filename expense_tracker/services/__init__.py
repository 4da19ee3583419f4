"""Services package."""

from expense_tracker.services.storage import (
    DatastoreDecodeError,
    DatastoreInitError,
    DatastoreReadError,
    DatastoreWriteError,
    ExpenseStorageInterface,
    JsonFileExpenseStorage,
    StorageError,
)

__all__ = [
    "DatastoreDecodeError",
    "DatastoreInitError",
    "DatastoreReadError",
    "DatastoreWriteError",
    "ExpenseStorageInterface",
    "JsonFileExpenseStorage",
    "StorageError",
]
