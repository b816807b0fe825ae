"""env-cmd - Run commands with environment variables loaded from files.

This package provides:
- parsers: .env and multi-environment .rc file loading
- resolver: default path scanning and fallback for a single source
- environment: merging env file and rc file variables
- launcher: spawning the command with the merged environment
- logger: console and structured logging for --verbose output
- exceptions: structured error classes
"""

__version__ = "1.0.0"

# Re-export commonly used items for convenience
from env_cmd.logger import (
    Logger,
    ConsoleLogger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from env_cmd.config import (
    ENV_FILE_DEFAULT_LOCATIONS,
    RC_FILE_DEFAULT_LOCATIONS,
    LogSettings,
    Settings,
    get_settings,
    reset_settings,
)

from env_cmd.exceptions import (
    EnvCmdError,
    PathError,
    EnvironmentNotFoundError,
    ParseError,
    ResolutionError,
    ConfigurationError,
)

from env_cmd.types import (
    EnvFileRequest,
    RcFileRequest,
    LaunchOptions,
    EnvCmdOptions,
)

from env_cmd.parsers import parse_env_file, parse_rc_file
from env_cmd.resolver import FailureReason, Resolved, Failed, candidate_paths, resolve_source
from env_cmd.environment import resolve_environment
from env_cmd.expand_envs import expand_envs
from env_cmd.launcher import LaunchResult, env_cmd

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "ConsoleLogger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Config
    "ENV_FILE_DEFAULT_LOCATIONS",
    "RC_FILE_DEFAULT_LOCATIONS",
    "LogSettings",
    "Settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "EnvCmdError",
    "PathError",
    "EnvironmentNotFoundError",
    "ParseError",
    "ResolutionError",
    "ConfigurationError",
    # Types
    "EnvFileRequest",
    "RcFileRequest",
    "LaunchOptions",
    "EnvCmdOptions",
    # Resolution
    "parse_env_file",
    "parse_rc_file",
    "FailureReason",
    "Resolved",
    "Failed",
    "candidate_paths",
    "resolve_source",
    "resolve_environment",
    # Launch
    "expand_envs",
    "LaunchResult",
    "env_cmd",
]
