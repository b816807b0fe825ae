"""Tests for env_cmd.logger module."""

import io
import json
import logging

import pytest

from env_cmd.config import reset_settings
from env_cmd.exceptions import ConfigurationError
from env_cmd.logger import (
    ConsoleLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)


@pytest.fixture(autouse=True)
def clean_settings():
    reset_settings()
    yield
    reset_settings()


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        """Test that Logger cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_logger_has_required_methods(self):
        """Test that Logger defines all required abstract methods."""
        for method in ("debug", "info", "warning", "error", "critical", "get_session_id"):
            assert hasattr(Logger, method)

    def test_partial_sink_is_rejected(self):
        """A sink must implement every method, not just info."""

        class InfoOnly(Logger):
            def info(self, message, **kwargs):
                pass

        assert Logger.__abstractmethods__ == frozenset(
            {"debug", "info", "warning", "error", "critical", "get_session_id"}
        )
        with pytest.raises(TypeError):
            InfoOnly()  # type: ignore


class TestConsoleLogger:
    """Tests for the ConsoleLogger implementation."""

    def test_info_writes_bare_message(self):
        """Info lines are the message only."""
        output = io.StringIO()
        logger = ConsoleLogger(output=output)

        logger.info("Found .env file at default path: ./.env")

        assert output.getvalue() == "Found .env file at default path: ./.env\n"

    def test_kwargs_are_appended(self):
        """Extra kwargs are appended in parentheses."""
        output = io.StringIO()
        logger = ConsoleLogger(output=output)

        logger.info("Loaded", count=3)

        assert output.getvalue() == "Loaded (count=3)\n"

    def test_debug_filtered_at_info_level(self):
        """Messages below the level are dropped."""
        output = io.StringIO()
        logger = ConsoleLogger(output=output)

        logger.debug("hidden")

        assert output.getvalue() == ""

    def test_debug_written_at_debug_level(self):
        """Debug messages are written when the level allows."""
        output = io.StringIO()
        logger = ConsoleLogger(level=logging.DEBUG, output=output)

        logger.debug("shown")

        assert output.getvalue() == "shown\n"

    def test_errors_go_to_error_stream(self):
        """Warnings and above use the error stream."""
        output = io.StringIO()
        errors = io.StringIO()
        logger = ConsoleLogger(output=output, error_output=errors)

        logger.error("Failed to find .rc file at path: ./x")

        assert output.getvalue() == ""
        assert errors.getvalue() == "Failed to find .rc file at path: ./x\n"

    def test_session_ids_differ(self):
        """Each instance gets its own session id."""
        assert ConsoleLogger().get_session_id() != ConsoleLogger().get_session_id()


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_json_output(self):
        """JSON format writes one object per record with extras."""
        output = io.StringIO()
        logger = StructuredLogger(name="env-cmd-test-json", json_format=True, output=output)

        logger.info("Found .env file at path: ./.env", path="./.env")

        record = json.loads(output.getvalue().strip())
        assert record["message"] == "Found .env file at path: ./.env"
        assert record["level"] == "INFO"
        assert record["logger"] == "env-cmd-test-json"
        assert record["session_id"] == logger.get_session_id()
        assert record["path"] == "./.env"

    def test_text_output_contains_session(self):
        """Text format includes level, name and session id."""
        output = io.StringIO()
        logger = StructuredLogger(name="env-cmd-test-text", output=output)

        logger.warning("careful", attempt=2)

        line = output.getvalue()
        assert "[WARNING]" in line
        assert "[env-cmd-test-text]" in line
        assert f"[session:{logger.get_session_id()}]" in line
        assert "attempt=2" in line

    def test_reserved_kwargs_are_prefixed(self):
        """Reserved LogRecord names do not break logging."""
        output = io.StringIO()
        logger = StructuredLogger(name="env-cmd-test-reserved", json_format=True, output=output)

        logger.info("message", name="shadow")

        record = json.loads(output.getvalue().strip())
        assert record["_name"] == "shadow"
        assert record["logger"] == "env-cmd-test-reserved"

    def test_file_output(self, tmp_path):
        """Records are also written to the configured file."""
        log_file = tmp_path / "env-cmd.log"
        logger = StructuredLogger(
            name="env-cmd-test-file", log_file=str(log_file), output=io.StringIO()
        )

        logger.info("to file")

        assert "to file" in log_file.read_text()

    def test_reinitialisation_does_not_duplicate_handlers(self):
        """Creating the same logger twice keeps one console handler."""
        output = io.StringIO()
        StructuredLogger(name="env-cmd-test-dup", output=io.StringIO())
        logger = StructuredLogger(name="env-cmd-test-dup", output=output)

        logger.info("once")

        assert output.getvalue().count("once") == 1


class TestLoggerFactory:
    """Tests for create_logger and get_logger."""

    def test_default_is_console_logger(self, monkeypatch):
        """Without configuration a ConsoleLogger is returned."""
        monkeypatch.delenv("ENV_CMD_LOG_FORMAT", raising=False)
        monkeypatch.delenv("ENV_CMD_LOG_FILE", raising=False)

        assert isinstance(get_logger(), ConsoleLogger)

    def test_json_format_from_env(self, monkeypatch):
        """ENV_CMD_LOG_FORMAT=json selects a StructuredLogger."""
        monkeypatch.setenv("ENV_CMD_LOG_FORMAT", "json")

        assert isinstance(get_logger(), StructuredLogger)

    def test_log_file_selects_structured_logger(self, tmp_path):
        """An explicit log file selects a StructuredLogger."""
        logger = create_logger(log_file=str(tmp_path / "out.log"), output=io.StringIO())

        assert isinstance(logger, StructuredLogger)

    def test_level_from_env(self, monkeypatch):
        """ENV_CMD_LOG_LEVEL controls the console threshold."""
        monkeypatch.setenv("ENV_CMD_LOG_LEVEL", "WARNING")
        output = io.StringIO()
        logger = create_logger(output=output)

        logger.info("hidden")

        assert output.getvalue() == ""

    def test_explicit_arguments_win(self, monkeypatch):
        """Explicit arguments override environment settings."""
        monkeypatch.setenv("ENV_CMD_LOG_FORMAT", "json")
        output = io.StringIO()

        logger = create_logger(json_format=False, level=logging.INFO, output=output)
        logger.info("plain")

        assert isinstance(logger, StructuredLogger)
        assert not output.getvalue().startswith("{")

    def test_invalid_level_raises_configuration_error(self, monkeypatch):
        """A bad ENV_CMD_LOG_LEVEL surfaces as an EnvCmdError."""
        monkeypatch.setenv("ENV_CMD_LOG_LEVEL", "verbose")

        with pytest.raises(ConfigurationError, match="Invalid log level") as exc_info:
            get_logger()

        assert exc_info.value.code == "INVALID_SETTINGS"
        assert exc_info.value.details == {"prefix": "ENV_CMD"}
