"""Configuration Module for env-cmd

Holds the default file locations probed during resolution and the typed,
environment-driven settings that control logging.

Example:
    from env_cmd.config import ENV_FILE_DEFAULT_LOCATIONS, get_settings

    settings = get_settings()
    print(settings.log.level)
"""

from env_cmd.config.paths import (
    ENV_FILE_DEFAULT_LOCATIONS,
    ENV_FILE_FALLBACK_LOCATION,
    PY_MODULE_ENV_ATTRIBUTE,
    RC_BASE_ENVIRONMENT,
    RC_FILE_DEFAULT_LOCATIONS,
)
from env_cmd.config.settings import (
    LogSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    # Default locations
    "ENV_FILE_DEFAULT_LOCATIONS",
    "ENV_FILE_FALLBACK_LOCATION",
    "RC_FILE_DEFAULT_LOCATIONS",
    "RC_BASE_ENVIRONMENT",
    "PY_MODULE_ENV_ATTRIBUTE",
    # Dataclass settings
    "LogSettings",
    "Settings",
    # Singleton
    "get_settings",
    "reset_settings",
]
