"""Small helpers shared by the parsers and the CLI."""

from pathlib import Path
from typing import List


def resolve_env_file_path(file_path: str) -> Path:
    """Resolve a user supplied path against ``~`` and the working directory."""
    path = Path(file_path).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path.resolve()


def parse_arg_list(value: str) -> List[str]:
    """Split a comma separated option value, dropping blanks.

    Example:
        "production, staging," -> ["production", "staging"]
    """
    return [part.strip() for part in value.split(",") if part.strip()]
