"""
Domain Operations for Expense Tracker

This module defines the three user-facing operations (add, delete, list)
on top of the storage interface. Each one loads the full datastore,
works on it in memory and, for mutations, writes the full datastore back.

DESIGN DECISION: Storage failures are NOT handled here. Read, decode and
write errors propagate to the entry point, which reports them and exits.
Only "no such expense" and "no expenses" are treated as normal outcomes.
"""

from pathlib import Path
from typing import Optional, Union

from expense_tracker.audit import AuditLogger
from expense_tracker.models.expense import Expense, next_expense_id
from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    JsonFileExpenseStorage,
)


class ExpenseTracker:
    """
    Add, delete and list expenses in a datastore.
    
    Flow for every operation:
    1. Read → load the whole datastore
    2. Mutate → change the list in memory (add/delete only)
    3. Write → overwrite the whole datastore (only if something changed)
    """
    
    def __init__(
        self,
        storage: ExpenseStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()
    
    @property
    def storage(self) -> ExpenseStorageInterface:
        return self._storage
    
    def initialize(self) -> bool:
        """
        Ensure the datastore exists before any operation runs.
        
        Returns True if an empty datastore was created.
        """
        created = self._storage.initialize()
        path = str(self._storage.path)
        if created:
            self._audit_logger.log_datastore_initialized(path)
        else:
            self._audit_logger.log_datastore_opened(path)
        return created
    
    def add_expense(self, description: str, amount: float) -> Expense:
        """
        Record a new expense and return it with its assigned id.
        
        No bounds checks: zero and negative amounts are stored as given.
        """
        expenses = self._storage.read_expenses()
        
        expense = Expense(
            id=next_expense_id(expenses),
            description=description,
            amount=amount,
        )
        expenses.append(expense)
        self._storage.write_expenses(expenses)
        
        self._audit_logger.log_expense_added(expense.id, description, amount)
        return expense
    
    def delete_expense(self, expense_id: int) -> bool:
        """
        Remove the expense with the given id.
        
        Returns False (and leaves the datastore untouched) if no
        expense has that id.
        """
        expenses = self._storage.read_expenses()
        remaining = [expense for expense in expenses if expense.id != expense_id]
        
        if len(remaining) == len(expenses):
            self._audit_logger.log_expense_not_found(expense_id)
            return False
        
        self._storage.write_expenses(remaining)
        self._audit_logger.log_expense_deleted(expense_id, len(remaining))
        return True
    
    def list_expenses(self) -> list[Expense]:
        """Return every expense in datastore (insertion) order."""
        expenses = self._storage.read_expenses()
        self._audit_logger.log_expenses_listed(len(expenses))
        return expenses


def create_tracker(
    datastore_path: Union[str, Path],
    audit_logger: Optional[AuditLogger] = None,
) -> ExpenseTracker:
    """
    Factory function for a tracker backed by a JSON datastore.
    
    Args:
        datastore_path: Location of the JSON datastore
        audit_logger: Logger for domain events (a default one if None)
    """
    return ExpenseTracker(
        storage=JsonFileExpenseStorage(datastore_path),
        audit_logger=audit_logger,
    )
