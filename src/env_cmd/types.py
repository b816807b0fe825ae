"""Request and option types shared by the resolver, engine and launcher."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

Environment = Dict[str, str]


@dataclass(frozen=True)
class EnvFileRequest:
    """Load a flat ``.env``-style file.

    Attributes:
        file_path: Explicit path; None scans the default locations
        fallback: With an explicit path, try the default ``./.env`` once
            if the explicit path cannot be loaded
    """

    file_path: Optional[str] = None
    fallback: bool = False


@dataclass(frozen=True)
class RcFileRequest:
    """Load named environments from a multi-environment ``.rc`` file.

    Attributes:
        environments: Environment names, merged in order
        file_path: Explicit path; None scans the default locations
    """

    environments: List[str] = field(default_factory=list)
    file_path: Optional[str] = None


SourceRequest = Union[EnvFileRequest, RcFileRequest]


@dataclass
class LaunchOptions:
    """Flags controlling how the resolved environment is applied.

    Attributes:
        expand_envs: Expand $VAR references in the command and its arguments
        recursive: Expand $VAR references inside the loaded values
        no_override: Keep existing process variables over file values
        silent: Ignore resolution failures instead of aborting
        use_shell: Run the command through the system shell
        verbose: Report which files were found or missed
    """

    expand_envs: bool = False
    recursive: bool = False
    no_override: bool = False
    silent: bool = False
    use_shell: bool = False
    verbose: bool = False


@dataclass
class EnvCmdOptions:
    """Everything needed for one env-cmd invocation."""

    command: str
    command_args: List[str] = field(default_factory=list)
    env_file: Optional[EnvFileRequest] = None
    rc: Optional[RcFileRequest] = None
    options: LaunchOptions = field(default_factory=LaunchOptions)


__all__ = [
    "Environment",
    "EnvFileRequest",
    "RcFileRequest",
    "SourceRequest",
    "LaunchOptions",
    "EnvCmdOptions",
]
