"""Base exception classes for env-cmd.

All env-cmd exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Parsers raise PathError, EnvironmentNotFoundError or ParseError. The
resolver decides from the exception type alone whether a candidate path is
retried, so message wording is free to change.
"""

from typing import Any, Dict, List, Optional


class EnvCmdError(Exception):
    """Base exception for all env-cmd errors.

    Attributes:
        code: Machine-readable error code (e.g., "PATH_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PathError(EnvCmdError):
    """No file exists at the requested path.

    Retryable: the resolver moves on to the next candidate path.
    """

    def __init__(self, message: str, path: str, code: str = "PATH_NOT_FOUND"):
        super().__init__(code=code, message=message, details={"path": path})
        self.path = path


class EnvironmentNotFoundError(EnvCmdError):
    """An .rc file was found but holds none of the requested environments.

    Terminal: never retried against other candidate paths.
    """

    def __init__(
        self,
        message: str,
        path: str,
        environments: List[str],
        code: str = "ENVIRONMENT_NOT_FOUND",
    ):
        super().__init__(
            code=code,
            message=message,
            details={"path": path, "environments": list(environments)},
        )
        self.path = path
        self.environments = list(environments)


class ParseError(EnvCmdError):
    """A file was found but its content could not be parsed."""

    def __init__(self, message: str, path: str, code: str = "PARSE_ERROR"):
        super().__init__(code=code, message=message, details={"path": path})
        self.path = path


class ConfigurationError(EnvCmdError):
    """Invalid command line options or logging settings."""

    def __init__(self, message: str, code: str = "INVALID_OPTIONS", details: Optional[Dict[str, Any]] = None):
        super().__init__(code=code, message=message, details=details)


class ResolutionError(EnvCmdError):
    """Terminal failure to resolve an environment source.

    Raised by the merge engine. Unlike the other errors, ``str()`` is the bare
    human-readable message so the CLI can print it as-is.

    Attributes:
        reason: FailureReason of the failed resolution
        source: "env_file" or "rc_file"
        attempted_paths: Every path probed, in order
        path: The path that produced a terminal failure, if any
    """

    def __init__(
        self,
        message: str,
        reason: Any,
        source: str,
        attempted_paths: Optional[List[str]] = None,
        path: Optional[str] = None,
        code: str = "RESOLUTION_FAILED",
    ):
        attempted = list(attempted_paths or [])
        super().__init__(
            code=code,
            message=message,
            details={
                "reason": getattr(reason, "value", reason),
                "source": source,
                "attempted_paths": attempted,
                "path": path,
            },
        )
        self.reason = reason
        self.source = source
        self.attempted_paths = attempted
        self.path = path

    def __str__(self) -> str:
        return self.message
