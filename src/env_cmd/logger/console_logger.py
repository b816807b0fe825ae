"""
Console logger for command line output.

Writes bare messages, one per line, so ``--verbose`` output reads like the
tool talking rather than a log file. Warnings and above go to stderr.
"""

import logging
import sys
import uuid
from typing import Any, Optional, TextIO

from .interface import Logger


class ConsoleLogger(Logger):
    """Message-only logger for interactive use.

    Example:
        logger = ConsoleLogger()
        logger.info("Found .env file at default path: ./.env")
    """

    def __init__(
        self,
        name: str = "env-cmd",
        level: int = logging.INFO,
        output: Optional[TextIO] = None,
        error_output: Optional[TextIO] = None,
    ):
        """Initialize the console logger.

        Args:
            name: Logger name
            level: Minimum level written
            output: Stream for debug/info (default: stdout at call time)
            error_output: Stream for warning and above (default: stderr at call time)
        """
        self._name = name
        self._level = level
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._error_output = error_output

    def get_session_id(self) -> str:
        """Get the current session ID."""
        return self._session_id

    def _format_message(self, message: str, **kwargs: Any) -> str:
        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            return f"{message} ({extra})"
        return message

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if level < self._level:
            return
        if level >= logging.WARNING:
            stream = self._error_output or sys.stderr
        else:
            stream = self._output or sys.stdout
        print(self._format_message(message, **kwargs), file=stream, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, message, **kwargs)
