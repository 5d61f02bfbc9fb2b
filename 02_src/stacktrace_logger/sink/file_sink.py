"""Append-only file sink for stack trace reports."""

from pathlib import Path
from typing import Protocol

from ..config import PathLike, resolve_log_path
from ..errors import IOFailure
from ..logging_config import get_logger

try:
    import fcntl
except ImportError:  # pragma: no cover - fcntl unavailable on non-POSIX platforms
    fcntl = None

logger = get_logger(__name__)

LOG_NOT_FOUND = "Log file not found."


class ITraceSink(Protocol):
    """Durable destination for rendered reports."""

    def append(self, text: str) -> None:
        """Append text under an exclusive lock, creating the directory."""
        ...

    def clear(self) -> None:
        """Truncate the sink to empty."""
        ...

    def tail(self, line_count: int = 50) -> str:
        """Return the last `line_count` lines."""
        ...


class FileTraceSink:
    """Trace log file with locked appends."""

    def __init__(self, path: PathLike | None = None):
        self._path = resolve_log_path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, text: str) -> None:
        """Append text; existing content is never truncated."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error(
                "Cannot create trace log directory %s: %s",
                self._path.parent,
                exc,
                extra={"context": {"path": str(self._path), "error": str(exc)}},
            )
            raise IOFailure(self._path, f"directory not writable ({exc})") from exc

        try:
            with open(self._path, "a", encoding="utf-8", newline="") as fh:
                self._lock(fh)
                try:
                    fh.write(text)
                    fh.flush()
                finally:
                    self._unlock(fh)
        except OSError as exc:
            logger.error(
                "Cannot append to trace log %s: %s",
                self._path,
                exc,
                extra={"context": {"path": str(self._path), "error": str(exc)}},
            )
            raise IOFailure(self._path, str(exc)) from exc

        logger.debug(
            "Appended %d characters to %s",
            len(text),
            self._path,
            extra={"context": {"path": str(self._path), "chars": len(text)}},
        )

    def clear(self) -> None:
        """Truncate the trace log if it exists."""
        if not self._path.exists():
            return
        try:
            with open(self._path, "r+b") as fh:
                self._lock(fh)
                try:
                    fh.truncate(0)
                finally:
                    self._unlock(fh)
        except OSError as exc:
            logger.error(
                "Cannot clear trace log %s: %s",
                self._path,
                exc,
                extra={"context": {"path": str(self._path), "error": str(exc)}},
            )
            raise IOFailure(self._path, str(exc)) from exc
        logger.info(
            "Cleared trace log %s",
            self._path,
            extra={"context": {"path": str(self._path)}},
        )

    def tail(self, line_count: int = 50) -> str:
        """Last `line_count` lines, or LOG_NOT_FOUND when there is no log."""
        if not self._path.exists():
            return LOG_NOT_FOUND

        with open(self._path, "rb") as fh:
            lines = fh.readlines()

        start = max(0, len(lines) - line_count)
        return b"".join(lines[start:]).decode("utf-8", errors="replace")

    @staticmethod
    def _lock(fh) -> None:
        if fcntl is not None:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX)

    @staticmethod
    def _unlock(fh) -> None:
        if fcntl is not None:
            fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
