"""Dataclass-based Settings for env-cmd

Provides typed configuration with environment variable support. Settings
only affect how env-cmd reports what it does; they never change which
files are resolved or how their values are merged.

Design principles:
- Environment variable overrides with sensible defaults
- Type-safe settings with validation
- Per-prefix caching, resettable for tests
"""

import os
from dataclasses import dataclass, field
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "structured", "json")


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console, structured, json)
        file: Optional file that receives log records as well
    """

    level: str = "INFO"
    format: str = "console"
    file: Optional[str] = None

    def __post_init__(self):
        """Validate logging settings"""
        self.level = self.level.upper()
        self.format = self.format.lower()
        if self.level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.level}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        if self.format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid log format '{self.format}'. Expected one of: {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls, prefix: str = "ENV_CMD") -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FORMAT: Log format
            {prefix}_LOG_FILE: Log file path
        """
        return cls(
            level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO"),
            format=os.environ.get(f"{prefix}_LOG_FORMAT", "console"),
            file=os.environ.get(f"{prefix}_LOG_FILE") or None,
        )


@dataclass
class Settings:
    """Complete application settings

    Attributes:
        log: Logging settings
        prefix: Environment variable prefix used
    """

    log: LogSettings = field(default_factory=LogSettings)
    prefix: str = "ENV_CMD"

    @classmethod
    def from_env(cls, prefix: str = "ENV_CMD") -> "Settings":
        """
        Load complete settings from environment variables

        Args:
            prefix: Environment variable prefix (default: ENV_CMD)

        Returns:
            Settings object populated from environment
        """
        return cls(log=LogSettings.from_env(prefix), prefix=prefix)


# Global settings storage per prefix
_global_settings: dict[str, Settings] = {}


def get_settings(prefix: str = "ENV_CMD", reload: bool = False) -> Settings:
    """
    Get or create settings instance for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload settings from environment

    Returns:
        Settings instance for the given prefix
    """
    if prefix not in _global_settings or reload:
        _global_settings[prefix] = Settings.from_env(prefix=prefix)

    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Reset settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()
