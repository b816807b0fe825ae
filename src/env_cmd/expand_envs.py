"""$VAR / ${VAR} substitution for command lines and values."""

import re
from typing import Mapping

# $NAME or ${NAME}, unless the dollar sign is escaped with a backslash
_VARIABLE = re.compile(r"(?<!\\)\$(?:\{([A-Za-z0-9_]+)\}|([A-Za-z0-9_]+))")


def expand_envs(text: str, env: Mapping[str, str]) -> str:
    """Replace variable references in ``text`` with values from ``env``.

    Unknown variables are left as written.

    Example:
        expand_envs("echo $USER ${HOME}", {"USER": "arthur", "HOME": "/home/arthur"})
        -> "echo arthur /home/arthur"
    """

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1) or match.group(2)
        value = env.get(name)
        return match.group(0) if value is None else value

    return _VARIABLE.sub(substitute, text)


def expand_env_values(env: dict) -> dict:
    """Expand references inside the values of ``env`` in place.

    Keys are processed in insertion order, so a value sees the already
    expanded form of the keys before it.
    """
    for key in list(env):
        env[key] = expand_envs(env[key], env)
    return env
