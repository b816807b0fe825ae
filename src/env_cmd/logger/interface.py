"""
Logger interface for env-cmd.

Everything env-cmd says goes through this contract:

- ``info``: ``--verbose`` progress from the resolver ("Found .env file at
  default path: ./.env") and the child's exit code from TermSignals
- ``debug``: candidates skipped during a scan, sources ignored under
  ``--silent``
- ``error``: uncaught exceptions while the child runs

ConsoleLogger prints these as bare lines; StructuredLogger turns them into
log records. Tests pass ``create_autospec(Logger, instance=True)`` and
count the ``info`` calls.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Sink for env-cmd progress and error messages.

    Keyword arguments are extra context fields. ConsoleLogger appends them
    as ``(key=value)``; StructuredLogger stores them on the record.

    Example:
        class ListLogger(Logger):
            def __init__(self):
                self.lines = []

            def info(self, message: str, **kwargs: Any) -> None:
                self.lines.append(message)
            # debug, warning, error, critical, get_session_id likewise
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Diagnostics that are not user-facing events."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """One verbose event: a file found, a file missed, a child exit."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Identifier shared by every message of one env-cmd run."""
