"""
Data Models Package

This package contains the Pydantic models used in the Expense Tracker.
All data read from or written to the datastore conforms to these schemas.
"""

from expense_tracker.models.expense import (
    Expense,
    ExpenseList,
    format_amount,
    next_expense_id,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "Expense",
    "ExpenseList",
    "format_amount",
    "next_expense_id",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
