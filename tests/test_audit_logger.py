"""Tests for structured audit logging."""

import io
import json
import logging

from expense_tracker.audit import AuditLogger, configure_logging


def _json_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestAuditLogger:
    """Tests for AuditLogger output."""
    
    def test_json_output(self):
        stream = io.StringIO()
        configure_logging(logging.DEBUG, "json", stream)
        
        AuditLogger().log_expense_added(1, "Coffee", 3.5)
        
        (record,) = _json_lines(stream)
        assert record["event"] == "audit_event"
        assert record["event_type"] == "expense_added"
        assert record["entity_id"] == 1
        assert record["level"] == "info"
        assert record["details"] == {"description": "Coffee", "amount": 3.5}
        assert "timestamp" in record
    
    def test_level_filtering(self):
        """Events below the configured level are dropped."""
        stream = io.StringIO()
        configure_logging(logging.WARNING, "json", stream)
        
        audit_logger = AuditLogger()
        audit_logger.log_expenses_listed(3)
        audit_logger.log_expense_added(1, "Coffee", 3.5)
        audit_logger.log_expense_not_found(9)
        audit_logger.log_storage_error("DatastoreWriteError", "disk full")
        
        records = _json_lines(stream)
        assert [r["event_type"] for r in records] == ["storage_error"]
        assert records[0]["level"] == "error"
        # Filtered events are still kept in memory
        assert len(audit_logger.events) == 4
    
    def test_storage_error_logged_as_error(self):
        stream = io.StringIO()
        configure_logging(logging.WARNING, "json", stream)
        
        AuditLogger().log_storage_error("DatastoreReadError", "missing", "datastore.json")
        
        (record,) = _json_lines(stream)
        assert record["level"] == "error"
        assert record["error_message"] == "missing"
    
    def test_console_format(self):
        stream = io.StringIO()
        configure_logging(logging.INFO, "console", stream)
        
        AuditLogger().log_datastore_initialized("datastore.json")
        
        output = stream.getvalue()
        assert "audit_event" in output
        assert "datastore_initialized" in output
