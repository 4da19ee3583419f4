"""
Audit Logger

Every domain operation is logged as a structured event. This provides:
1. Traceability of what each invocation did to the datastore
2. Debugging capability when a datastore turns out corrupt

Logs go to stderr so they never mix with command output on stdout.
Nothing is logged below WARNING unless the log level is lowered
(EXPENSE_TRACKER_LOG_LEVEL=INFO).
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


LOGGER_NAME = "expense_tracker"


def configure_logging(
    level: int = logging.WARNING,
    log_format: str = "console",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog on top of the stdlib logging module.
    
    Args:
        level: Minimum stdlib level for the expense_tracker logger
        log_format: "json" for JSON lines, anything else for console output
        stream: Where to write logs (defaults to stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.handlers.clear()
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(level)
    stdlib_logger.propagate = False
    
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class AuditLogger:
    """
    Central audit logging service.
    
    Turns domain events into AuditEvent records and logs them at
    the event's severity.
    """
    
    def __init__(self, logger_name: str = LOGGER_NAME):
        self._logger = structlog.get_logger(logger_name)
        self.events: list[AuditEvent] = []
    
    def log(self, event: AuditEvent) -> None:
        """Log an audit event and keep it for inspection."""
        self.events.append(event)
        log_dict = event.to_log_dict()
        # The stdlib bridge owns the level and timestamp fields
        log_dict.pop("severity")
        log_dict.pop("timestamp")
        
        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)
    
    def log_datastore_initialized(self, path: str) -> None:
        """Log creation of an empty datastore."""
        self.log(AuditEventBuilder.datastore_initialized(path))
    
    def log_datastore_opened(self, path: str) -> None:
        """Log use of an existing datastore."""
        self.log(AuditEventBuilder.datastore_opened(path))
    
    def log_expense_added(self, expense_id: int, description: str, amount: float) -> None:
        """Log a new expense."""
        self.log(AuditEventBuilder.expense_added(expense_id, description, amount))
    
    def log_expense_deleted(self, expense_id: int, remaining: int) -> None:
        """Log removal of an expense."""
        self.log(AuditEventBuilder.expense_deleted(expense_id, remaining))
    
    def log_expense_not_found(self, expense_id: int) -> None:
        """Log a delete that matched nothing."""
        self.log(AuditEventBuilder.expense_not_found(expense_id))
    
    def log_expenses_listed(self, count: int) -> None:
        """Log a list operation."""
        self.log(AuditEventBuilder.expenses_listed(count))
    
    def log_storage_error(
        self,
        error_type: str,
        error_message: str,
        path: Optional[str] = None,
    ) -> None:
        """Log a fatal datastore failure."""
        self.log(AuditEventBuilder.storage_error(error_type, error_message, path))
