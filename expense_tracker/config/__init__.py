"""Configuration package."""

from expense_tracker.config.settings import (
    DEFAULT_DATASTORE_PATH,
    TrackerSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_DATASTORE_PATH",
    "TrackerSettings",
    "get_settings",
]
