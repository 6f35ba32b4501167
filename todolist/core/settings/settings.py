"""Application settings loaded from the environment and an optional .env file.

The document store connection is pre-provisioned outside the application;
these settings only tell the application where to find it.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TodoSettings(BaseSettings):
    """Settings for the todolist application with environment variable support."""

    # Document store selection
    store_backend: str = Field(default="mongodb", validation_alias=AliasChoices("TODOLIST_STORE_BACKEND", "store_backend"))
    collection_name: str = Field(default="tasks", validation_alias=AliasChoices("TODOLIST_COLLECTION", "collection_name"))

    # MongoDB connection
    mongodb_connection_string: Optional[str] = Field(default=None, validation_alias=AliasChoices("TODOLIST_MONGODB_URI", "mongodb_connection_string"))
    mongodb_host: str = Field(default="localhost", validation_alias=AliasChoices("TODOLIST_MONGODB_HOST", "mongodb_host"))
    mongodb_port: int = Field(default=27017, validation_alias=AliasChoices("TODOLIST_MONGODB_PORT", "mongodb_port"))
    mongodb_database: str = Field(default="todolist", validation_alias=AliasChoices("TODOLIST_MONGODB_DATABASE", "mongodb_database"))
    mongodb_username: Optional[str] = Field(default=None, validation_alias=AliasChoices("TODOLIST_MONGODB_USERNAME", "mongodb_username"))
    mongodb_password: Optional[str] = Field(default=None, validation_alias=AliasChoices("TODOLIST_MONGODB_PASSWORD", "mongodb_password"))

    # Logging
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("TODOLIST_LOG_LEVEL", "log_level"))
    logs_dir: Path = Field(default=Path.home() / ".todolist" / "logs", validation_alias=AliasChoices("TODOLIST_LOGS_DIR", "logs_dir"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("store_backend")
    @classmethod
    def normalize_store_backend(cls, v):
        return v.strip().lower()

    @field_validator("collection_name")
    @classmethod
    def validate_collection_name(cls, v):
        if not v.strip():
            raise ValueError("Collection name must not be empty")
        return v


@lru_cache(maxsize=1)
def get_settings() -> TodoSettings:
    """Return the process-wide settings instance."""
    settings = TodoSettings()
    logger.debug(f"Loaded settings: backend={settings.store_backend}, collection={settings.collection_name}")
    return settings
