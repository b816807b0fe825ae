"""Default file locations probed when no explicit path is given.

Paths are relative to the current working directory and listed in priority
order: extensionless first, then the Python-module form, then JSON.
"""

from typing import List

ENV_FILE_DEFAULT_LOCATIONS: List[str] = ["./.env", "./.env.py", "./.env.json"]
RC_FILE_DEFAULT_LOCATIONS: List[str] = ["./.env-cmdrc", "./.env-cmdrc.py", "./.env-cmdrc.json"]

# Single path tried after a custom env file path misses and --fallback is set
ENV_FILE_FALLBACK_LOCATION: str = ENV_FILE_DEFAULT_LOCATIONS[0]

# Section of an .rc file merged underneath every requested environment
RC_BASE_ENVIRONMENT: str = "base"

# Attribute read from .py env/rc files
PY_MODULE_ENV_ATTRIBUTE: str = "env"

__all__ = [
    "ENV_FILE_DEFAULT_LOCATIONS",
    "RC_FILE_DEFAULT_LOCATIONS",
    "ENV_FILE_FALLBACK_LOCATION",
    "RC_BASE_ENVIRONMENT",
    "PY_MODULE_ENV_ATTRIBUTE",
]
