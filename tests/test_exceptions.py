"""Tests for the env-cmd exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy
3. String representation
4. Dictionary conversion for JSON serialization
"""

import pytest

from env_cmd.exceptions import (
    ConfigurationError,
    EnvCmdError,
    EnvironmentNotFoundError,
    ParseError,
    PathError,
    ResolutionError,
)
from env_cmd.resolver import FailureReason


class TestEnvCmdError:
    """Tests for base EnvCmdError class."""

    def test_basic_construction(self):
        """Test basic exception construction."""
        error = EnvCmdError("TEST_CODE", "Test message")

        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_str_without_details(self):
        """Test string representation without details."""
        error = EnvCmdError("TEST_CODE", "Test message")

        assert str(error) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        """Test string representation with details."""
        error = EnvCmdError("TEST_CODE", "Test message", details={"foo": "bar"})

        result = str(error)
        assert "TEST_CODE" in result
        assert "Test message" in result
        assert "foo" in result

    def test_args_contains_message(self):
        """Test that Exception.args contains the message."""
        error = EnvCmdError("CODE", "The error message")
        assert "The error message" in error.args

    def test_to_dict(self):
        """Test conversion to dictionary."""
        error = EnvCmdError("TEST_CODE", "Test message", details={"key": "value"})

        assert error.to_dict() == {
            "code": "TEST_CODE",
            "message": "Test message",
            "details": {"key": "value"},
        }


class TestParserErrors:
    """Tests for errors raised by the file parsers."""

    def test_path_error(self):
        """PathError records the path that was missing."""
        error = PathError("Failed to find .env file at path: ./.env", path="./.env")

        assert isinstance(error, EnvCmdError)
        assert error.code == "PATH_NOT_FOUND"
        assert error.path == "./.env"
        assert error.details["path"] == "./.env"

    def test_environment_not_found_error(self):
        """EnvironmentNotFoundError records the path and environments."""
        error = EnvironmentNotFoundError(
            "Failed to find environments: [bad] for .rc file at path: ./.env-cmdrc",
            path="./.env-cmdrc",
            environments=["bad"],
        )

        assert error.code == "ENVIRONMENT_NOT_FOUND"
        assert error.environments == ["bad"]
        assert error.details == {"path": "./.env-cmdrc", "environments": ["bad"]}

    def test_parse_error(self):
        """ParseError keeps the parser's message untouched."""
        error = ParseError("Failed to parse .rc file at path: x: boom", path="x")

        assert error.code == "PARSE_ERROR"
        assert error.message == "Failed to parse .rc file at path: x: boom"

    def test_parser_errors_are_distinct_types(self):
        """Retryable and terminal failures can be told apart by type."""
        assert not issubclass(PathError, EnvironmentNotFoundError)
        assert not issubclass(EnvironmentNotFoundError, PathError)
        assert not issubclass(ParseError, PathError)


class TestResolutionError:
    """Tests for ResolutionError."""

    def test_str_is_bare_message(self):
        """ResolutionError prints without the code prefix."""
        error = ResolutionError(
            "Failed to find .env file at default paths: [./.env]",
            reason=FailureReason.NOT_FOUND,
            source="env_file",
            attempted_paths=["./.env"],
        )

        assert str(error) == "Failed to find .env file at default paths: [./.env]"
        assert error.code == "RESOLUTION_FAILED"

    def test_details(self):
        """ResolutionError exposes reason, source and paths."""
        error = ResolutionError(
            "Failed to find environments: [bad] for .rc file at path: ./.env-cmdrc",
            reason=FailureReason.PROFILE_MISSING,
            source="rc_file",
            attempted_paths=["./.env-cmdrc"],
            path="./.env-cmdrc",
        )

        assert error.reason is FailureReason.PROFILE_MISSING
        assert error.to_dict()["details"] == {
            "reason": "profile_missing",
            "source": "rc_file",
            "attempted_paths": ["./.env-cmdrc"],
            "path": "./.env-cmdrc",
        }


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_default_code(self):
        """ConfigurationError uses INVALID_OPTIONS by default."""
        error = ConfigurationError("--rc-file requires --environments")
        assert error.code == "INVALID_OPTIONS"

    def test_can_be_caught_as_base(self):
        """ConfigurationError can be caught as EnvCmdError."""
        with pytest.raises(EnvCmdError):
            raise ConfigurationError("bad options")
