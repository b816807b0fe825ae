"""Environment merge engine.

Resolves every requested source and merges the results into one flat
mapping. Precedence (low -> high): env file, rc file.

When neither source is requested the default env-file locations are
scanned. The returned mapping holds file variables only; combining it with
the process environment is left to the launcher.
"""

from typing import List, Optional, Tuple

from env_cmd.exceptions import ResolutionError
from env_cmd.logger import Logger, get_logger
from env_cmd.parsers import parse_env_file, parse_rc_file
from env_cmd.resolver import EnvFileParser, RcFileParser, Resolved, resolve_source
from env_cmd.types import EnvFileRequest, Environment, RcFileRequest, SourceRequest


def _source_name(request: SourceRequest) -> str:
    return "rc_file" if isinstance(request, RcFileRequest) else "env_file"


def resolve_environment(
    env_file: Optional[EnvFileRequest] = None,
    rc: Optional[RcFileRequest] = None,
    verbose: bool = False,
    silent: bool = False,
    *,
    logger: Optional[Logger] = None,
    env_file_parser: EnvFileParser = parse_env_file,
    rc_file_parser: RcFileParser = parse_rc_file,
) -> Environment:
    """Resolve and merge the requested environment sources.

    Args:
        env_file: Env file request, if any
        rc: Rc file request, if any
        verbose: Report found/missed files through the logger
        silent: Treat a failed source as empty instead of raising
        logger: Destination for verbose output (default: get_logger())
        env_file_parser: Loader for env files
        rc_file_parser: Loader for rc files

    Returns:
        Merged mapping of file-sourced variables, possibly empty

    Raises:
        ResolutionError: A source failed and silent is False
    """
    if verbose and logger is None:
        logger = get_logger()
    reporter = logger if verbose else None

    requests: List[SourceRequest] = []
    if rc is not None:
        requests.append(rc)
    if env_file is not None:
        requests.append(env_file)
    if not requests:
        requests.append(EnvFileRequest())

    results: List[Tuple[SourceRequest, Environment]] = []
    for request in requests:
        outcome = resolve_source(
            request,
            env_file_parser=env_file_parser,
            rc_file_parser=rc_file_parser,
            logger=reporter,
        )
        if isinstance(outcome, Resolved):
            results.append((request, dict(outcome.env)))
            continue

        if silent:
            if logger is not None:
                logger.debug(f"Ignoring unresolved {_source_name(request)}: {outcome.message}")
            results.append((request, {}))
            continue

        raise ResolutionError(
            outcome.message,
            reason=outcome.reason,
            source=_source_name(request),
            attempted_paths=outcome.attempted_paths,
            path=outcome.path,
        )

    env: Environment = {}
    for request, values in results:
        if isinstance(request, EnvFileRequest):
            env.update(values)
    for request, values in results:
        if isinstance(request, RcFileRequest):
            env.update(values)
    return env


__all__ = ["resolve_environment"]
