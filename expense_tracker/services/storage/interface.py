"""
Abstract Storage Interface

DESIGN DECISION: Domain operations talk to storage only through this
interface. This allows us to:
1. Keep the JSON file backend out of the business logic
2. Use in-memory storage for testing

The interface mirrors the persistence contract exactly: the datastore is
always read and written as a whole. There is no incremental update.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from expense_tracker.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage operations.
    
    Any storage implementation must implement these methods.
    """
    
    @property
    @abstractmethod
    def path(self) -> Path:
        """Location of the datastore, used in user-facing messages."""
        pass
    
    @abstractmethod
    def initialize(self) -> bool:
        """
        Make sure the datastore exists.
        
        Returns:
            True if an empty datastore was created, False if one already existed
            
        Raises:
            DatastoreInitError: If the datastore cannot be created
        """
        pass
    
    @abstractmethod
    def read_expenses(self) -> list[Expense]:
        """
        Load every expense in datastore order.
        
        Raises:
            DatastoreReadError: If the datastore cannot be read
            DatastoreDecodeError: If the content is not a list of expenses
        """
        pass
    
    @abstractmethod
    def write_expenses(self, expenses: list[Expense]) -> None:
        """
        Replace the whole datastore with the given expenses.
        
        Raises:
            DatastoreWriteError: If the datastore cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class DatastoreInitError(StorageError):
    """The datastore could not be created."""
    pass


class DatastoreReadError(StorageError):
    """The datastore could not be read."""
    pass


class DatastoreDecodeError(DatastoreReadError):
    """The datastore content is not a valid list of expenses."""
    pass


class DatastoreWriteError(StorageError):
    """The datastore could not be written."""
    pass
