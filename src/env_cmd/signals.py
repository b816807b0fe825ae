"""Termination signal relay between env-cmd and the spawned command.

While the child runs, SIGINT, SIGTERM and SIGHUP received by env-cmd are
passed on to the child instead of killing env-cmd first; env-cmd then exits
with the child's status.
"""

import signal
import subprocess
import sys
import traceback
from typing import Any, Callable, Dict, Optional

from env_cmd.logger import Logger, get_logger

TERM_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGTERM", "SIGHUP") if hasattr(signal, name)
)


class TermSignals:
    """Forward termination signals to a child process.

    Example:
        proc = subprocess.Popen(["node", "server.js"], env=env)
        signals = TermSignals(verbose=True)
        signals.handle_term_signals(proc)
        returncode = signals.wait(proc)
    """

    def __init__(self, logger: Optional[Logger] = None, verbose: bool = False):
        self.logger = logger
        self.verbose = verbose
        self.received_signal: Optional[int] = None
        self._previous: Dict[int, Any] = {}
        self._previous_excepthook: Optional[Callable[..., Any]] = None

    def _log(self, message: str) -> None:
        if self.verbose:
            (self.logger or get_logger()).info(message)

    def _forward_to(self, proc: subprocess.Popen) -> Callable[[int, Any], None]:
        def handler(signum: int, frame: Any) -> None:
            self.received_signal = signum
            self._log(
                f"Parent process received signal: {signal.Signals(signum).name}. "
                "Forwarding to child process..."
            )
            if proc.poll() is None:
                proc.send_signal(signum)

        return handler

    def handle_term_signals(self, proc: subprocess.Popen) -> None:
        """Install handlers that forward termination signals to ``proc``."""
        handler = self._forward_to(proc)
        for sig in TERM_SIGNALS:
            self._previous[sig] = signal.signal(sig, handler)

    def restore(self) -> None:
        """Put back the signal handlers and excepthook replaced by this instance."""
        for sig, previous in self._previous.items():
            signal.signal(sig, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()
        if self._previous_excepthook is not None:
            sys.excepthook = self._previous_excepthook
            self._previous_excepthook = None

    def wait(self, proc: subprocess.Popen) -> int:
        """Wait for ``proc`` to exit and return its return code."""
        try:
            returncode = proc.wait()
        finally:
            self.restore()
        self._log(f"Child process exited with code: {returncode}")
        return returncode

    def handle_uncaught_exceptions(self) -> None:
        """Report uncaught exceptions as a single error line until restore()."""
        if self._previous_excepthook is None:
            self._previous_excepthook = sys.excepthook
        sys.excepthook = self._uncaught_exception_handler

    def _uncaught_exception_handler(self, exc_type, exc, tb) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        message = "".join(traceback.format_exception_only(exc_type, exc)).strip()
        (self.logger or get_logger()).error(message)

    @staticmethod
    def exit_code_for(returncode: int) -> int:
        """Map a Popen return code to a shell-style exit status.

        A child killed by signal N has return code -N and maps to 128 + N.
        """
        if returncode < 0:
            return 128 - returncode
        return returncode
