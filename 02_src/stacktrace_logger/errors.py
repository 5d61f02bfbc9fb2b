"""Error types raised by the stack trace logger."""


class StackTraceError(OSError):
    """Base class for stack trace logger failures."""


class IOFailure(StackTraceError):
    """Raised when a report cannot be written to the trace log."""

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot write stack trace to {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = ["StackTraceError", "IOFailure"]
