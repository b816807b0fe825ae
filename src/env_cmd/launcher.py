"""Run a command with the resolved environment.

Builds the child environment in deterministic order:
1) Variables resolved from the env / rc files
2) The process environment snapshot, below or above the file variables
   depending on ``no_override``
3) Optional $VAR expansion of values and of the command line
"""

import os
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

from env_cmd.environment import resolve_environment
from env_cmd.expand_envs import expand_env_values, expand_envs
from env_cmd.logger import Logger, get_logger
from env_cmd.signals import TermSignals
from env_cmd.types import EnvCmdOptions, Environment

Spawner = Callable[[str, List[str], Environment, bool], subprocess.Popen]


@dataclass
class LaunchResult:
    """Outcome of one env-cmd run.

    Attributes:
        env: The full environment handed to the child
        returncode: The child's return code (negative when killed by a signal)
    """

    env: Environment
    returncode: int


def build_environment(
    file_env: Mapping[str, str],
    process_env: Mapping[str, str],
    no_override: bool = False,
) -> Environment:
    """Combine file variables with a process environment snapshot.

    Precedence (low -> high): process env, file variables. ``no_override``
    flips it so variables already set in the process are kept.
    """
    if no_override:
        return {**file_env, **process_env}
    return {**process_env, **file_env}


def spawn(command: str, args: List[str], env: Environment, use_shell: bool = False) -> subprocess.Popen:
    """Start ``command`` with inherited stdio and the given environment."""
    if use_shell:
        # Leave the command line to the shell as typed
        return subprocess.Popen(" ".join([command, *args]), shell=True, env=env)
    return subprocess.Popen([command, *args], env=env)


def env_cmd(
    options: EnvCmdOptions,
    *,
    process_env: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
    spawner: Spawner = spawn,
    term_signals: Optional[TermSignals] = None,
) -> LaunchResult:
    """Resolve the environment, then run the command and wait for it.

    Args:
        options: Parsed env-cmd options
        process_env: Environment snapshot to merge with (default: os.environ)
        logger: Destination for verbose output
        spawner: Starts the child process
        term_signals: Signal relay (default: a new TermSignals)

    Returns:
        LaunchResult with the child environment and return code

    Raises:
        ResolutionError: Resolution failed and silent was not set; nothing
            is spawned in that case
    """
    launch = options.options
    if launch.verbose and logger is None:
        logger = get_logger()

    file_env = resolve_environment(
        env_file=options.env_file,
        rc=options.rc,
        verbose=launch.verbose,
        silent=launch.silent,
        logger=logger,
    )

    snapshot = dict(os.environ) if process_env is None else dict(process_env)
    env = build_environment(file_env, snapshot, no_override=launch.no_override)

    if launch.recursive:
        expand_env_values(env)

    command = options.command
    command_args = list(options.command_args)
    if launch.expand_envs:
        command = expand_envs(command, env)
        command_args = [expand_envs(arg, env) for arg in command_args]

    proc = spawner(command, command_args, env, launch.use_shell)

    signals = term_signals or TermSignals(logger=logger, verbose=launch.verbose)
    signals.handle_uncaught_exceptions()
    signals.handle_term_signals(proc)
    returncode = signals.wait(proc)

    return LaunchResult(env=env, returncode=returncode)


__all__ = ["LaunchResult", "build_environment", "spawn", "env_cmd"]
