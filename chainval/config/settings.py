"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all chainval settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for chainval namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class MessageSettings(BaseSettings):
    """Default failure messages for the built-in null checks."""

    model_config = SettingsConfigDict(env_prefix="CHAINVAL_", extra="ignore")

    not_null_message: str = Field(
        default="Provided value must not be null",
        description="Message used by not_null() when none is given",
    )
    is_null_message: str = Field(
        default="Provided value must be null",
        description="Message used by is_null() when none is given",
    )

    @field_validator("not_null_message", "is_null_message")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Default validation messages must not be blank")
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from chainval.config import get_settings

        settings = get_settings()
        level = settings.logging.log_level
        message = settings.messages.not_null_message
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    messages: MessageSettings = Field(default_factory=MessageSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
