"""Configuration module for chainval.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from chainval.config import get_settings

    settings = get_settings()

    # Access logging settings
    log_level = settings.logging.log_level

    # Access default failure messages
    not_null_message = settings.messages.not_null_message
"""

from chainval.config.settings import (
    LoggingSettings,
    MessageSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "MessageSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
