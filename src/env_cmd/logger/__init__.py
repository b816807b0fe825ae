"""
env-cmd Logger Module

Provides the logging interface used for ``--verbose`` reporting and error
output, with a plain console implementation and a structured one.

Usage:
    from env_cmd.logger import Logger, get_logger, create_logger

    # Logger configured from the environment
    logger = get_logger()
    logger.info("Found .env file at default path: ./.env")

    # Or create one with specific settings
    logger = create_logger(
        name="env-cmd",
        level=logging.DEBUG,
        json_format=True,
        log_file="/var/log/env-cmd.log"
    )

Environment Variables:
    ENV_CMD_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ENV_CMD_LOG_FORMAT: console (default), structured or json
    ENV_CMD_LOG_FILE: Optional file path for log output
"""

import logging
from typing import Optional, TextIO

from .console_logger import ConsoleLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "env-cmd" -> "ENV_CMD"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "env-cmd",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    output: Optional[TextIO] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from the settings for the name's
    environment prefix ({PREFIX}_LOG_LEVEL, {PREFIX}_LOG_FORMAT,
    {PREFIX}_LOG_FILE).

    A console logger is returned unless JSON output or a log file was asked
    for, in which case a StructuredLogger is used.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON
        output: Stream for console output (default: stdout)

    Returns:
        A configured Logger instance

    Raises:
        ConfigurationError: A {PREFIX}_LOG_* variable holds an invalid value
    """
    from env_cmd.config.settings import get_settings
    from env_cmd.exceptions import ConfigurationError

    prefix = _get_env_prefix(name)
    try:
        log_settings = get_settings(prefix).log
    except ValueError as e:
        raise ConfigurationError(
            str(e), code="INVALID_SETTINGS", details={"prefix": prefix}
        ) from e

    if level is None:
        level = getattr(logging, log_settings.level, logging.INFO)

    if log_file is None:
        log_file = log_settings.file

    if json_format is None:
        json_format = log_settings.format == "json"

    if not json_format and not log_file and log_settings.format == "console":
        return ConsoleLogger(name=name, level=level, output=output)

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
        output=output,
    )


def get_logger(name: str = "env-cmd") -> Logger:
    """Get a logger configured from environment variables.

    Args:
        name: Logger name

    Returns:
        A configured Logger instance
    """
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "ConsoleLogger",
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
