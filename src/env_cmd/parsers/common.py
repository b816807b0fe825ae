"""Loading and normalisation helpers shared by both parsers."""

import json
import runpy
from pathlib import Path
from typing import Any, Mapping

from env_cmd.config.paths import PY_MODULE_ENV_ATTRIBUTE
from env_cmd.exceptions import ParseError
from env_cmd.types import Environment


def normalize_value(value: Any) -> str:
    """Convert a loaded value to the string an environment variable holds."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def normalize_env_object(data: Mapping[Any, Any]) -> Environment:
    """Stringify every key and value of a loaded mapping."""
    return {str(key): normalize_value(value) for key, value in data.items()}


def load_json_file(path: Path, display_path: str, kind: str) -> Any:
    """Read and decode a JSON file, wrapping failures in ParseError."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise ParseError(
            f"Failed to parse {kind} file at path: {display_path}: {e}", path=display_path
        ) from e


def load_py_module_env(path: Path, display_path: str, kind: str) -> Any:
    """Execute a Python file and return its ``env`` attribute.

    ``env`` may be a mapping or a zero-argument callable returning one.
    """
    try:
        module_globals = runpy.run_path(str(path))
    except Exception as e:
        raise ParseError(
            f"Failed to parse {kind} file at path: {display_path}: {e}", path=display_path
        ) from e

    if PY_MODULE_ENV_ATTRIBUTE not in module_globals:
        raise ParseError(
            f"Failed to parse {kind} file at path: {display_path}: "
            f"module does not define '{PY_MODULE_ENV_ATTRIBUTE}'",
            path=display_path,
        )

    value = module_globals[PY_MODULE_ENV_ATTRIBUTE]
    if callable(value):
        try:
            value = value()
        except Exception as e:
            raise ParseError(
                f"Failed to parse {kind} file at path: {display_path}: {e}", path=display_path
            ) from e
    return value
