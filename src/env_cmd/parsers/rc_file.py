"""Parser for multi-environment .rc files.

An .rc file maps environment names to flat variable mappings:

    base:
      LOG_LEVEL: info
    production:
      API_URL: https://api.example.com
    staging:
      API_URL: https://staging.example.com

``.json`` and ``.py`` files are loaded as data; extensionless, ``.yaml``
and ``.yml`` files are read with PyYAML, which also accepts plain JSON.
"""

from collections.abc import Mapping
from typing import Any, List

import yaml  # PyYAML

from env_cmd.config.paths import RC_BASE_ENVIRONMENT
from env_cmd.exceptions import EnvironmentNotFoundError, ParseError, PathError
from env_cmd.parsers.common import load_json_file, load_py_module_env, normalize_env_object
from env_cmd.types import Environment
from env_cmd.utils import resolve_env_file_path


def _load_yaml_file(path, display_path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ParseError(
            f"Failed to parse .rc file at path: {display_path}: {e}", path=display_path
        ) from e


def _section(data: Mapping, name: str, display_path: str) -> Environment:
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ParseError(
            f"Failed to parse .rc file at path: {display_path}: "
            f"environment '{name}' is not a mapping of variables",
            path=display_path,
        )
    return normalize_env_object(section)


def parse_rc_file(file_path: str, environments: List[str]) -> Environment:
    """Load and merge the requested environments of an .rc file.

    The ``base`` environment, when present, is applied first; each requested
    environment then overrides it in the order given.

    Args:
        file_path: Path as given by the user or a default location
        environments: Environment names to merge

    Returns:
        Mapping of variable names to string values

    Raises:
        PathError: No file exists at the path
        ParseError: The file exists but is not a valid .rc file
        EnvironmentNotFoundError: None of the requested environments exist
    """
    path = resolve_env_file_path(file_path)
    if not path.is_file():
        raise PathError(f"Failed to find .rc file at path: {file_path}", path=file_path)

    suffix = path.suffix.lower()
    if suffix == ".json":
        data = load_json_file(path, file_path, ".rc")
    elif suffix == ".py":
        data = load_py_module_env(path, file_path, ".rc")
    else:
        data = _load_yaml_file(path, file_path)

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ParseError(
            f"Failed to parse .rc file at path: {file_path}: "
            "expected a mapping of environment names",
            path=file_path,
        )

    env: Environment = {}
    if RC_BASE_ENVIRONMENT in data:
        env.update(_section(data, RC_BASE_ENVIRONMENT, file_path))

    found = False
    for name in environments:
        if name in data:
            found = True
            env.update(_section(data, name, file_path))

    if not found:
        raise EnvironmentNotFoundError(
            f"Failed to find environments: [{','.join(environments)}] "
            f"for .rc file at path: {file_path}",
            path=file_path,
            environments=environments,
        )

    return env
