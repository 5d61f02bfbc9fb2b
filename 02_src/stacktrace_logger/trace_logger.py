"""StackTraceLogger: capture, format and persist call stacks.

Usage::

    from stacktrace_logger import log_stack_trace, print_stack_trace

    log_stack_trace("Debugging REST API issue")     # append to the trace log
    print_stack_trace("Current execution path")     # write to stdout
    trace = get_stack_trace("Custom debug point")   # just return the text
"""

import sys
from datetime import datetime
from typing import Callable, Protocol, TextIO

from .config import PathLike, TraceConfig
from .formatter import TraceFormatter
from .logging_config import get_logger
from .models import CallFrame
from .sink import FileTraceSink, ITraceSink
from .snapshot import IFrameSource, StackSnapshotter

logger = get_logger(__name__)


class IStackTraceLogger(Protocol):
    """Capture entry points and trace log maintenance."""

    def log(self, message: str = "", skip_frames: int = 1) -> str:
        """Capture, append to the trace log and return the report."""
        ...

    def print_trace(
        self, message: str = "", skip_frames: int = 1, stream: TextIO | None = None
    ) -> None:
        """Capture and write the screen report."""
        ...

    def get_trace(self, message: str = "", skip_frames: int = 1) -> str:
        """Capture and return the string report without persisting it."""
        ...

    def clear_log(self) -> None:
        """Truncate the trace log."""
        ...

    def get_recent_logs(self, lines: int = 50) -> str:
        """Return the last lines of the trace log."""
        ...


class StackTraceLogger:
    """Wires config, snapshotter, formatter and sink together.

    `skip_frames` counts innermost frames hidden from the report; the default
    of 1 hides the entry point itself so frame #0 is its caller.
    """

    def __init__(
        self,
        config: TraceConfig | None = None,
        frame_source: IFrameSource | None = None,
        sink: ITraceSink | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._config = config or TraceConfig()
        self._snapshotter = StackSnapshotter(frame_source)
        self._formatter = TraceFormatter(self._config.hook_functions)
        self._sink = sink
        self._clock = clock

    @property
    def config(self) -> TraceConfig:
        return self._config

    @property
    def sink(self) -> ITraceSink:
        # Built lazily so set_log_file() is honored
        if self._sink is None:
            self._sink = FileTraceSink(self._config.log_file)
        return self._sink

    def set_log_file(self, path: PathLike) -> None:
        """Point subsequent writes at another trace log."""
        self._config.log_file = path
        self._sink = FileTraceSink(self._config.log_file)
        logger.info(
            "Stack trace log set to %s",
            self._config.log_file,
            extra={"context": {"path": str(self._config.log_file)}},
        )

    def set_max_depth(self, depth: int) -> None:
        """Change the number of frames captured per report."""
        self._config.max_depth = depth
        logger.info(
            "Stack trace max depth set to %d",
            depth,
            extra={"context": {"max_depth": depth}},
        )

    @property
    def formatter(self) -> TraceFormatter:
        # Follow changes made to config.hook_functions after construction
        if self._formatter.hook_functions != self._config.hook_functions:
            self._formatter = TraceFormatter(self._config.hook_functions)
        return self._formatter

    def add_hook_function(self, name: str) -> None:
        """Recognize another dispatch function when tagging hooks."""
        self._config.add_hook_function(name)

    def log(self, message: str = "", skip_frames: int = 1) -> str:
        """Capture, append to the trace log and return the report."""
        frames = self._snapshot(skip_frames)
        report = self.formatter.format_report(message, frames, self._clock())
        self.persist(report)
        return report

    def print_trace(
        self, message: str = "", skip_frames: int = 1, stream: TextIO | None = None
    ) -> None:
        """Capture and write the screen report to `stream` (stdout)."""
        frames = self._snapshot(skip_frames)
        out = stream if stream is not None else sys.stdout
        out.write(self.formatter.format_screen(message, frames))
        out.flush()

    def get_trace(self, message: str = "", skip_frames: int = 1) -> str:
        """Capture and return the string report without persisting it."""
        frames = self._snapshot(skip_frames)
        return self.formatter.format_string(message, frames)

    def persist(self, text: str) -> None:
        """Append already rendered text to the trace log."""
        self.sink.append(text)

    def clear_log(self) -> None:
        self.sink.clear()

    def get_recent_logs(self, lines: int = 50) -> str:
        return self.sink.tail(lines)

    def _snapshot(self, skip_frames: int) -> list[CallFrame]:
        # +1 hides this helper; the entry point is hidden by skip_frames
        return self._snapshotter.capture(
            max_depth=self._config.max_depth,
            skip_count=skip_frames + 1,
            preserve_arguments=True,
        )


_default_logger: StackTraceLogger | None = None


def get_default_logger() -> StackTraceLogger:
    """Process-wide logger used by the module-level helpers."""
    global _default_logger
    if _default_logger is None:
        _default_logger = StackTraceLogger(TraceConfig.from_env())
    return _default_logger


def set_default_logger(trace_logger: StackTraceLogger | None) -> None:
    """Replace the process-wide logger; None resets it."""
    global _default_logger
    _default_logger = trace_logger


def log_stack_trace(message: str = "") -> str:
    """Append a stack trace of the caller to the trace log."""
    return get_default_logger().log(message, skip_frames=2)


def print_stack_trace(message: str = "") -> None:
    """Print a stack trace of the caller to stdout."""
    get_default_logger().print_trace(message, skip_frames=2)


def get_stack_trace(message: str = "", skip_frames: int = 0) -> str:
    """Return a stack trace of the caller as a string.

    `skip_frames` hides that many additional frames above the caller.
    """
    return get_default_logger().get_trace(message, skip_frames=skip_frames + 2)
