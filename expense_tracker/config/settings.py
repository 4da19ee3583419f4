"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

Every setting can be supplied as EXPENSE_TRACKER_<NAME> in the environment
or in a .env file in the working directory. Command-line options take
precedence over both.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATASTORE_PATH = Path("datastore.json")


class TrackerSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    datastore_path: Path = Field(
        default=DEFAULT_DATASTORE_PATH,
        description="Path of the JSON datastore, relative to the working directory"
    )
    
    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for diagnostic logs written to stderr"
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Render diagnostic logs for humans or as JSON lines"
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @property
    def log_level_number(self) -> int:
        """Get the log level as a stdlib logging constant."""
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
