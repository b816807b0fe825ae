"""Exceptions for env-cmd.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from env_cmd.exceptions import (
        EnvCmdError,
        PathError,
        EnvironmentNotFoundError,
        ParseError,
        ResolutionError,
        ConfigurationError,
    )
"""

from env_cmd.exceptions.base import (
    ConfigurationError,
    EnvCmdError,
    EnvironmentNotFoundError,
    ParseError,
    PathError,
    ResolutionError,
)

__all__ = [
    "EnvCmdError",
    # Parser errors
    "PathError",
    "EnvironmentNotFoundError",
    "ParseError",
    # Engine / CLI errors
    "ResolutionError",
    "ConfigurationError",
]
