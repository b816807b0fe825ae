"""Command line interface for env-cmd.

USAGE:
    env-cmd [options] <command> [args...]

EXAMPLES:
    # Load ./.env (or ./.env.py, ./.env.json) and run a command:
    env-cmd python manage.py runserver

    # Use a custom env file, falling back to ./.env if it is missing:
    env-cmd -f ./config/dev.env --fallback python app.py

    # Use the "base" + "production" environments of ./.env-cmdrc:
    env-cmd -e production python app.py

    # Use a custom rc file and merge two environments in order:
    env-cmd -r ./envs.yaml -e staging,debug python app.py

    # Expand variables in the command line itself:
    env-cmd -x echo '$API_URL'

ENVIRONMENT VARIABLES:
    ENV_CMD_LOG_LEVEL      Logging level for env-cmd output (default: INFO)
    ENV_CMD_LOG_FORMAT     console, structured or json (default: console)
    ENV_CMD_LOG_FILE       Also write env-cmd log records to this file
"""

import argparse
import sys
from typing import List, Optional

from env_cmd import __version__
from env_cmd.exceptions import ConfigurationError, EnvCmdError
from env_cmd.launcher import env_cmd
from env_cmd.signals import TermSignals
from env_cmd.types import EnvCmdOptions, EnvFileRequest, LaunchOptions, RcFileRequest
from env_cmd.utils import parse_arg_list


def build_parser() -> argparse.ArgumentParser:
    """Create the env-cmd argument parser."""
    parser = argparse.ArgumentParser(
        prog="env-cmd",
        description="Run a command with environment variables loaded from .env or .rc files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  Load ./.env and run a command:
    %(prog)s python app.py

  Custom env file with fallback to ./.env:
    %(prog)s -f ./config/dev.env --fallback python app.py

  Environments from ./.env-cmdrc:
    %(prog)s -e production,debug python app.py

DEFAULT FILES:
  .env file:  ./.env, ./.env.py, ./.env.json
  .rc file:   ./.env-cmdrc, ./.env-cmdrc.py, ./.env-cmdrc.json
        """,
    )

    parser.add_argument(
        "-e", "--environments",
        help="Comma-separated list of .rc file environments to use",
    )
    parser.add_argument(
        "-f", "--file",
        help="Custom env file path. Default: ./.env, then ./.env.py, then ./.env.json",
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Fall back to ./.env if the custom env file is not found",
    )
    parser.add_argument(
        "-r", "--rc-file",
        help="Custom .rc file path. Default: ./.env-cmdrc, then .py, then .json",
    )
    parser.add_argument(
        "--no-override",
        action="store_true",
        help="Do not override existing environment variables",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Ignore any env-cmd errors and only fail on executed program failure",
    )
    parser.add_argument(
        "--use-shell",
        action="store_true",
        help="Execute the command in a new shell with the given environment",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print helpful debugging information",
    )
    parser.add_argument(
        "-x", "--expand-envs",
        action="store_true",
        help="Replace $VAR references in the command and its arguments",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Replace $VAR references inside the loaded variable values",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("command", help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed to the command")

    return parser


def build_options(args: argparse.Namespace) -> EnvCmdOptions:
    """Convert parsed arguments into EnvCmdOptions.

    Raises:
        ConfigurationError: The option combination is not valid
    """
    rc: Optional[RcFileRequest] = None
    if args.environments is not None:
        environments = parse_arg_list(args.environments)
        if not environments:
            raise ConfigurationError("At least one environment name is required with --environments")
        rc = RcFileRequest(environments=environments, file_path=args.rc_file)
    elif args.rc_file is not None:
        raise ConfigurationError(
            "--rc-file requires --environments",
            details={"rc_file": args.rc_file},
        )

    env_file: Optional[EnvFileRequest] = None
    if args.file is not None:
        env_file = EnvFileRequest(file_path=args.file, fallback=args.fallback)

    return EnvCmdOptions(
        command=args.command,
        command_args=list(args.args),
        env_file=env_file,
        rc=rc,
        options=LaunchOptions(
            expand_envs=args.expand_envs,
            recursive=args.recursive,
            no_override=args.no_override,
            silent=args.silent,
            use_shell=args.use_shell,
            verbose=args.verbose,
        ),
    )


def parse_args(argv: Optional[List[str]] = None) -> EnvCmdOptions:
    """Parse command line arguments; exits with status 2 on usage errors."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return build_options(args)
    except ConfigurationError as e:
        parser.error(e.message)
        raise  # parser.error() exits


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    options = parse_args(argv)

    try:
        result = env_cmd(options)
    except EnvCmdError as e:
        print(e.message, file=sys.stderr)
        return 1
    except FileNotFoundError:
        print(f"Command not found: {options.command}", file=sys.stderr)
        return 127
    except OSError as e:
        print(f"Failed to run {options.command}: {e}", file=sys.stderr)
        return 1

    return TermSignals.exit_code_for(result.returncode)


if __name__ == "__main__":
    sys.exit(main())
