"""Parser for flat .env files.

``.json`` and ``.py`` files are loaded as data; anything else is read as
``KEY=value`` lines by python-dotenv.
"""

from collections.abc import Mapping

from dotenv import dotenv_values

from env_cmd.exceptions import ParseError, PathError
from env_cmd.parsers.common import load_json_file, load_py_module_env, normalize_env_object
from env_cmd.types import Environment
from env_cmd.utils import resolve_env_file_path


def parse_env_file(file_path: str) -> Environment:
    """Load one .env file into a flat mapping.

    Args:
        file_path: Path as given by the user or a default location

    Returns:
        Mapping of variable names to string values

    Raises:
        PathError: No file exists at the path
        ParseError: The file exists but could not be read or decoded
    """
    path = resolve_env_file_path(file_path)
    if not path.is_file():
        raise PathError(f"Failed to find .env file at path: {file_path}", path=file_path)

    suffix = path.suffix.lower()
    if suffix == ".json":
        data = load_json_file(path, file_path, ".env")
    elif suffix == ".py":
        data = load_py_module_env(path, file_path, ".env")
    else:
        try:
            values = dotenv_values(path, interpolate=False, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(
                f"Failed to parse .env file at path: {file_path}: {e}", path=file_path
            ) from e
        # Keys declared without "=" come back as None
        return {k: v for k, v in values.items() if v is not None}

    if not isinstance(data, Mapping):
        raise ParseError(
            f"Failed to parse .env file at path: {file_path}: expected a mapping of variables",
            path=file_path,
        )
    return normalize_env_object(data)
