"""Configuration system for logger-manager.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (LOGGER_MANAGER_*) -> .env file -> field defaults.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggerManagerConfig(BaseSettings):
    """Configuration for logger-manager.

    Resolution order: init kwargs -> env vars (LOGGER_MANAGER_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGGER_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    sink_type: str = Field(
        default="stdlib",
        description="Registered sink used for new (subsystem, category) pairs: 'stdlib', 'memory'",
    )
    logger_namespace: str = Field(
        default="applog",
        description="Prefix for stdlib logger names ('<namespace>.<subsystem>.<category>')",
    )
    propagate: bool = Field(
        default=True,
        description="Whether stdlib sink loggers propagate records to ancestor loggers",
    )
