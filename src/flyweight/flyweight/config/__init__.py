# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the flyweight package

from flyweight.config._base import BaseFlyweightSettings
from flyweight.config.settings import FlyweightSettings, get_settings
from flyweight.config.logging import (
    LoggerConfig,
    LoggingSettings,
    logger_config_from_settings,
    setup_logging,
)

__all__ = [
    "BaseFlyweightSettings",
    "FlyweightSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "logger_config_from_settings",
    "setup_logging",
]
