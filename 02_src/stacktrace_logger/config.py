"""Project-level configuration and path helpers."""

import os
from pathlib import Path
from typing import Iterable, Union

# Relative to the working directory of the process writing the log
LOGS_DIR = Path("04_logs")
DEFAULT_TRACE_LOG_PATH = LOGS_DIR / "stacktrace.log"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
DEFAULT_MAX_DEPTH = 15

# Dispatch functions whose first argument is the hook name.
DEFAULT_HOOK_FUNCTIONS = frozenset(
    {
        "do_action",
        "apply_filters",
        "do_action_ref_array",
        "apply_filters_ref_array",
    }
)


PathLike = Union[str, Path]


def resolve_log_path(
    env_value: PathLike | None = None,
    default: Path = DEFAULT_TRACE_LOG_PATH,
) -> Path:
    """Resolve a log path against the current working directory."""
    candidate = Path(env_value) if env_value else default
    return candidate if candidate.is_absolute() else Path.cwd() / candidate


class TraceConfig:
    """Process-wide settings shared by the snapshotter, formatter and sink."""

    def __init__(
        self,
        log_file: PathLike | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        hook_functions: Iterable[str] | None = None,
    ):
        self.log_file = log_file
        self.max_depth = max_depth
        self.hook_functions = (
            DEFAULT_HOOK_FUNCTIONS if hook_functions is None else hook_functions
        )

    @classmethod
    def from_env(cls) -> "TraceConfig":
        """Build config from STACK_TRACE_LOG_FILE / STACK_TRACE_MAX_DEPTH."""
        max_depth = os.getenv("STACK_TRACE_MAX_DEPTH")
        return cls(
            log_file=os.getenv("STACK_TRACE_LOG_FILE"),
            max_depth=int(max_depth) if max_depth else DEFAULT_MAX_DEPTH,
        )

    @property
    def log_file(self) -> Path:
        return self._log_file

    @log_file.setter
    def log_file(self, value: PathLike | None) -> None:
        self._log_file = resolve_log_path(value)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"max_depth must be a positive integer, got {value}")
        self._max_depth = value

    @property
    def hook_functions(self) -> frozenset[str]:
        return self._hook_functions

    @hook_functions.setter
    def hook_functions(self, names: Iterable[str]) -> None:
        if isinstance(names, str):
            raise TypeError("hook_functions must be a collection of names, not a str")
        self._hook_functions = frozenset(names)

    def add_hook_function(self, name: str) -> None:
        """Recognize another dispatch function name."""
        self._hook_functions = self._hook_functions | {name}

    def __repr__(self) -> str:
        return (
            f"TraceConfig(log_file={str(self._log_file)!r}, "
            f"max_depth={self._max_depth})"
        )
