"""Shared fixtures for Expense Tracker tests."""

import io
from pathlib import Path

import pytest

from expense_tracker.audit import configure_logging
from expense_tracker.config import get_settings

from helpers import InMemoryExpenseStorage


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Run every test in an empty working directory with default settings.
    
    Logging goes to a throwaway stream so it never reaches stdout.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("DATASTORE_PATH", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"EXPENSE_TRACKER_{name}", raising=False)
    get_settings.cache_clear()
    configure_logging(stream=io.StringIO())
    yield
    get_settings.cache_clear()


@pytest.fixture
def datastore_path(tmp_path: Path) -> Path:
    """Location for a datastore that does not exist yet."""
    return tmp_path / "datastore.json"


@pytest.fixture
def memory_storage() -> InMemoryExpenseStorage:
    return InMemoryExpenseStorage()
