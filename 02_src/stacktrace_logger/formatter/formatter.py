"""TraceFormatter: renders call frames as text reports."""

from datetime import datetime
from typing import Iterable, Sequence

from ..config import DEFAULT_HOOK_FUNCTIONS
from ..models import CallFrame

REPORT_SEPARATOR = "=" * 80
SCREEN_SEPARATOR = "=" * 50
STRING_SEPARATOR = "-" * 40
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

UNKNOWN_FILE = "Unknown file"
UNKNOWN_LINE = "Unknown line"
UNKNOWN_FUNCTION = "Unknown function"


class TraceFormatter:
    """Formats stack snapshots and tags hook dispatch frames."""

    def __init__(self, hook_functions: Iterable[str] | None = None):
        if isinstance(hook_functions, str):
            raise TypeError("hook_functions must be a collection of names, not a str")
        self._hook_functions = frozenset(
            DEFAULT_HOOK_FUNCTIONS if hook_functions is None else hook_functions
        )

    @property
    def hook_functions(self) -> frozenset[str]:
        return self._hook_functions

    def format_report(
        self,
        message: str | None,
        frames: Sequence[CallFrame],
        timestamp: datetime,
    ) -> str:
        """Render the block appended to the trace log."""
        parts = [
            "\n",
            f"{REPORT_SEPARATOR}\n",
            f"STACK TRACE - {timestamp.strftime(TIMESTAMP_FORMAT)}\n",
        ]
        if message:
            parts.append(f"MESSAGE: {message}\n")
        parts.append(f"{REPORT_SEPARATOR}\n")
        parts.extend(self.format_frames(frames))
        parts.append(f"{REPORT_SEPARATOR}\n")
        return "".join(parts)

    def format_screen(self, message: str | None, frames: Sequence[CallFrame]) -> str:
        """Render the shorter block written to a terminal."""
        header = f"STACK TRACE - {message}" if message else "STACK TRACE"
        parts = [f"\n{SCREEN_SEPARATOR}\n", f"{header}\n", f"{SCREEN_SEPARATOR}\n"]
        parts.extend(self.format_frames(frames))
        parts.append(f"{SCREEN_SEPARATOR}\n\n")
        return "".join(parts)

    def format_string(self, message: str | None, frames: Sequence[CallFrame]) -> str:
        """Render the compact block returned to callers."""
        header = f"STACK TRACE - {message}" if message else "STACK TRACE"
        parts = [f"\n{header}\n", f"{STRING_SEPARATOR}\n"]
        parts.extend(self.format_frames(frames))
        return "".join(parts)

    def format_frames(self, frames: Sequence[CallFrame]) -> list[str]:
        return [self.format_frame(index, frame) for index, frame in enumerate(frames)]

    def format_frame(self, index: int, frame: CallFrame) -> str:
        """Render one line: `#<index> <call> called at [<file>:<line>]`."""
        file = frame.source_file if frame.source_file else UNKNOWN_FILE
        line = frame.source_line if frame.source_line is not None else UNKNOWN_LINE
        function = frame.function_name if frame.function_name else UNKNOWN_FUNCTION

        if frame.owner_type:
            call = f"{frame.owner_type}{frame.call_operator or ''}{function}"
        else:
            call = function

        hook_name = self.extract_event_name(frame)
        if hook_name:
            call += f" [HOOK: '{hook_name}']"

        return f"#{index} {call} called at [{file}:{line}]\n"

    def extract_event_name(self, frame: CallFrame) -> str | None:
        """Hook name passed to a dispatch function, or None.

        Requires a capture that preserved arguments, a function name in the
        recognized set and a string first argument.
        """
        if frame.arguments is None or frame.function_name not in self._hook_functions:
            return None
        if not frame.arguments:
            return None

        first = frame.arguments[0]
        return first if isinstance(first, str) else None
