# ABOUTME: Loguru configuration for the flyweight package
# ABOUTME: Builds console and file handlers from FlyweightSettings and FLYWEIGHT_ logging options

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from flyweight.config.settings import FlyweightSettings, get_settings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Bound to every record as extra["app"]
    app_name: str = "FlyweightRegistry"

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = True
    console_serialize: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/flyweight.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[app]} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Error file output
    error_file_enabled: bool = False
    error_file_level: str = "ERROR"
    error_file_path: Union[str, Path] = "logs/flyweight-errors.log"

    # Performance settings
    enqueue: bool = False  # Async logging
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Log destination options read from FLYWEIGHT_-prefixed environment variables.

    Level and format are not repeated here; they come from `LOG_LEVEL` and
    `LOG_FORMAT` on FlyweightSettings.
    """

    log_file_enabled: bool = False
    log_file_path: str = "logs/flyweight.log"
    log_error_file_path: str = "logs/flyweight-errors.log"
    log_console_colorize: bool = True

    model_config = SettingsConfigDict(env_prefix="FLYWEIGHT_", case_sensitive=False, extra="ignore")


def logger_config_from_settings(
    settings: Optional[FlyweightSettings] = None,
    logging_settings: Optional[LoggingSettings] = None,
) -> LoggerConfig:
    """
    Derive a LoggerConfig from application settings.

    - `LOG_LEVEL` sets the console and file level; `DEBUG=true` forces DEBUG.
    - `LOG_FORMAT=json` serializes console and file records.
    - `ENV=production` disables colors and diagnostics, always writes the log
      and error files, and enqueues writes. `ENV=development` enables
      diagnostics; staging keeps backtraces only.

    Args:
        settings: Application settings (defaults to get_settings())
        logging_settings: Log destination options (defaults to LoggingSettings())

    Returns:
        The derived logger configuration
    """
    settings = settings or get_settings()
    logging_settings = logging_settings or LoggingSettings()

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    structured = settings.LOG_FORMAT == "json"
    production = settings.ENV == "production"

    return LoggerConfig(
        app_name=settings.APP_NAME,
        console_level=level,
        console_colorize=logging_settings.log_console_colorize and not structured and not production,
        console_backtrace=not production,
        console_diagnose=settings.ENV == "development",
        console_serialize=structured,
        file_enabled=production or logging_settings.log_file_enabled,
        file_level=level,
        file_path=logging_settings.log_file_path,
        file_serialize=structured,
        error_file_enabled=production,
        error_file_path=logging_settings.log_error_file_path,
        enqueue=production,
    )


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Args:
        config: Logger configuration. If None, derives one from the current settings.
    """
    if config is None:
        config = logger_config_from_settings()

    # Remove default handler
    logger.remove()
    logger.configure(extra={"app": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stderr,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            serialize=config.console_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.error_file_enabled:
        error_path = Path(config.error_file_path)
        error_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.error_file_path,
            level=config.error_file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            enqueue=config.enqueue,
            catch=config.catch,
        )
