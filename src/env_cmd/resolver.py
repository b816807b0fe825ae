"""Source resolver: turn one env-file or rc-file request into an outcome.

Resolution order:
1) An explicit path is the only candidate
2) An explicit env-file path with fallback also tries ``./.env``, once
3) Without a path, the default locations are probed in priority order

Candidates are probed strictly in order and probing stops at the first
successful parse. A missing file moves on to the next candidate. For rc
files, a file that lacks every requested environment, or that cannot be
parsed, ends the scan at once.

When a logger is given (verbose mode) exactly one ``info`` line is written
per reportable event: a success, a custom path miss before the fallback is
tried, or the final failure.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Type, Union

from env_cmd.config.paths import (
    ENV_FILE_DEFAULT_LOCATIONS,
    ENV_FILE_FALLBACK_LOCATION,
    RC_FILE_DEFAULT_LOCATIONS,
)
from env_cmd.exceptions import EnvCmdError, EnvironmentNotFoundError, ParseError, PathError
from env_cmd.logger import Logger
from env_cmd.parsers import parse_env_file, parse_rc_file
from env_cmd.types import EnvFileRequest, Environment, RcFileRequest, SourceRequest

EnvFileParser = Callable[[str], Environment]
RcFileParser = Callable[[str, List[str]], Environment]

# Env files have no sections, so an unreadable candidate is skipped like a missing one
_ENV_FILE_RETRYABLE: Tuple[Type[EnvCmdError], ...] = (PathError, ParseError)
_RC_FILE_RETRYABLE: Tuple[Type[EnvCmdError], ...] = (PathError,)


class FailureReason(str, Enum):
    """Why a source could not be resolved."""

    NOT_FOUND = "not_found"
    PROFILE_MISSING = "profile_missing"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class Resolved:
    """A candidate was parsed successfully."""

    env: Environment
    matched_path: str


@dataclass(frozen=True)
class Failed:
    """No candidate produced a usable mapping.

    Attributes:
        reason: Failure category
        message: Human-readable description, used verbatim in errors
        attempted_paths: Every path probed, in order
        path: The file that ended the scan (profile missing / parse error)
    """

    reason: FailureReason
    message: str
    attempted_paths: List[str] = field(default_factory=list)
    path: Optional[str] = None


ResolutionOutcome = Union[Resolved, Failed]


def candidate_paths(request: SourceRequest) -> List[str]:
    """Compute the ordered list of paths to probe for a request."""
    if isinstance(request, EnvFileRequest):
        if request.file_path is None:
            return list(ENV_FILE_DEFAULT_LOCATIONS)
        if request.fallback:
            return [request.file_path, ENV_FILE_FALLBACK_LOCATION]
        return [request.file_path]

    if isinstance(request, RcFileRequest):
        if request.file_path is None:
            return list(RC_FILE_DEFAULT_LOCATIONS)
        return [request.file_path]

    raise TypeError(f"Unsupported source request: {request!r}")


def _report(logger: Optional[Logger], message: str) -> None:
    if logger is not None:
        logger.info(message)


def _probe(
    candidates: Sequence[str],
    load: Callable[[str], Environment],
    retryable: Tuple[Type[EnvCmdError], ...],
    logger: Optional[Logger],
) -> Tuple[Optional[Resolved], List[str]]:
    """Try each candidate in order, returning the first match.

    Retryable errors move on to the next candidate; anything else propagates
    to the caller.
    """
    attempted: List[str] = []
    for path in candidates:
        attempted.append(path)
        try:
            env = load(path)
        except retryable as e:
            if logger is not None:
                logger.debug(f"Skipping {path}: {e.message}")
            continue
        return Resolved(env=env, matched_path=path), attempted
    return None, attempted


def _fail(
    logger: Optional[Logger],
    reason: FailureReason,
    message: str,
    attempted: List[str],
    path: Optional[str] = None,
) -> Failed:
    _report(logger, message)
    return Failed(reason=reason, message=message, attempted_paths=attempted, path=path)


def _resolve_env_file(
    request: EnvFileRequest,
    parser: EnvFileParser,
    logger: Optional[Logger],
) -> ResolutionOutcome:
    candidates = candidate_paths(request)

    if request.file_path is None:
        match, attempted = _probe(candidates, parser, _ENV_FILE_RETRYABLE, logger)
        if match is not None:
            _report(logger, f"Found .env file at default path: {match.matched_path}")
            return match
        return _fail(
            logger,
            FailureReason.NOT_FOUND,
            f"Failed to find .env file at default paths: [{','.join(attempted)}]",
            attempted,
        )

    match, attempted = _probe(candidates[:1], parser, _ENV_FILE_RETRYABLE, logger)
    if match is not None:
        _report(logger, f"Found .env file at path: {match.matched_path}")
        return match

    message = f"Failed to find .env file at path: {request.file_path}"
    fallbacks = candidates[1:]
    if not fallbacks:
        return _fail(logger, FailureReason.NOT_FOUND, message, attempted)

    _report(logger, message)
    match, tried = _probe(fallbacks, parser, _ENV_FILE_RETRYABLE, logger)
    attempted.extend(tried)
    if match is not None:
        _report(logger, f"Found .env file at default path: {match.matched_path}")
        return match

    return _fail(
        logger,
        FailureReason.NOT_FOUND,
        f"{message} or fallback path: {','.join(fallbacks)}",
        attempted,
    )


def _resolve_rc_file(
    request: RcFileRequest,
    parser: RcFileParser,
    logger: Optional[Logger],
) -> ResolutionOutcome:
    environments = list(request.environments)
    names = ",".join(environments)
    candidates = candidate_paths(request)
    attempted: List[str] = []

    def load(path: str) -> Environment:
        attempted.append(path)
        return parser(path, environments)

    try:
        match, _ = _probe(candidates, load, _RC_FILE_RETRYABLE, logger)
    except EnvironmentNotFoundError:
        path = attempted[-1]
        return _fail(
            logger,
            FailureReason.PROFILE_MISSING,
            f"Failed to find environments: [{names}] for .rc file at path: {path}",
            attempted,
            path=path,
        )
    except ParseError as e:
        return _fail(logger, FailureReason.PARSE_ERROR, e.message, attempted, path=attempted[-1])

    if match is not None:
        where = ".rc file" if request.file_path is not None else "default .rc file"
        _report(logger, f"Found environments: [{names}] for {where} at path: {match.matched_path}")
        return match

    if request.file_path is not None:
        message = f"Failed to find .rc file at path: {request.file_path}"
    else:
        message = f"Failed to find .rc file at default paths: [{','.join(attempted)}]"
    return _fail(logger, FailureReason.NOT_FOUND, message, attempted)


def resolve_source(
    request: SourceRequest,
    *,
    env_file_parser: EnvFileParser = parse_env_file,
    rc_file_parser: RcFileParser = parse_rc_file,
    logger: Optional[Logger] = None,
) -> ResolutionOutcome:
    """Resolve a single source request.

    Args:
        request: EnvFileRequest or RcFileRequest
        env_file_parser: Loader for env files (path -> mapping)
        rc_file_parser: Loader for rc files (path, environments -> mapping)
        logger: Receives verbose progress lines; None keeps resolution quiet

    Returns:
        Resolved with the parsed mapping, or Failed describing why not
    """
    if isinstance(request, RcFileRequest):
        return _resolve_rc_file(request, rc_file_parser, logger)
    if isinstance(request, EnvFileRequest):
        return _resolve_env_file(request, env_file_parser, logger)
    raise TypeError(f"Unsupported source request: {request!r}")


__all__ = [
    "FailureReason",
    "Resolved",
    "Failed",
    "ResolutionOutcome",
    "candidate_paths",
    "resolve_source",
]
