"""
Audit Models for Expense Tracker

Every domain operation produces an audit event that is written to the
structured log. Audit events are never persisted to the datastore.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Datastore lifecycle
    DATASTORE_INITIALIZED = "datastore_initialized"
    DATASTORE_OPENED = "datastore_opened"
    
    # Domain operations
    EXPENSE_ADDED = "expense_added"
    EXPENSE_DELETED = "expense_deleted"
    EXPENSE_NOT_FOUND = "expense_not_found"
    EXPENSES_LISTED = "expenses_listed"
    
    # Failures
    STORAGE_ERROR = "storage_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.
    
    Every domain operation creates one of these.
    """
    
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )
    entity_id: Optional[int] = Field(
        default=None,
        description="Id of the expense this event relates to"
    )
    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = Field(
        default=None,
        description="Error message if this is an error event"
    )
    
    def to_log_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary for structured logging."""
        log_dict: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
        }
        if self.entity_id is not None:
            log_dict["entity_id"] = self.entity_id
        if self.details:
            log_dict["details"] = self.details
        if self.error_message:
            log_dict["error_message"] = self.error_message
        return log_dict


class AuditEventBuilder:
    """
    Factory methods for the audit events the tracker emits.
    
    Keeps event descriptions consistent across call sites.
    """
    
    @staticmethod
    def datastore_initialized(path: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATASTORE_INITIALIZED,
            description="Datastore created",
            details={"path": path},
        )
    
    @staticmethod
    def datastore_opened(path: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATASTORE_OPENED,
            severity=AuditSeverity.DEBUG,
            description="Using existing datastore",
            details={"path": path},
        )
    
    @staticmethod
    def expense_added(expense_id: int, description: str, amount: float) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            entity_id=expense_id,
            description=f"Expense {expense_id} added",
            details={"description": description, "amount": amount},
        )
    
    @staticmethod
    def expense_deleted(expense_id: int, remaining: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            entity_id=expense_id,
            description=f"Expense {expense_id} deleted",
            details={"remaining": remaining},
        )
    
    @staticmethod
    def expense_not_found(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_NOT_FOUND,
            entity_id=expense_id,
            description=f"No expense with id {expense_id}",
        )
    
    @staticmethod
    def expenses_listed(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSES_LISTED,
            severity=AuditSeverity.DEBUG,
            description=f"Listed {count} expenses",
            details={"count": count},
        )
    
    @staticmethod
    def storage_error(
        error_type: str,
        error_message: str,
        path: Optional[str] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"Datastore failure: {error_type}",
            details={"error_type": error_type, "path": path},
            error_message=error_message,
        )
