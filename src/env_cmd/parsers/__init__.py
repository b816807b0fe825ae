"""File-format parsers for .env and .rc files.

Both parsers return a flat mapping of string keys to string values or raise
one of PathError, ParseError or (rc files only) EnvironmentNotFoundError.

Usage:
    from env_cmd.parsers import parse_env_file, parse_rc_file

    env = parse_env_file("./.env")
    env = parse_rc_file("./.env-cmdrc", ["base", "production"])
"""

from env_cmd.parsers.common import load_json_file, load_py_module_env, normalize_env_object
from env_cmd.parsers.env_file import parse_env_file
from env_cmd.parsers.rc_file import parse_rc_file

__all__ = [
    "parse_env_file",
    "parse_rc_file",
    "normalize_env_object",
    "load_json_file",
    "load_py_module_env",
]
