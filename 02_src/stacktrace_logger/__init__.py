"""Stack trace logger: call stack reports annotated with hook names."""

from .config import TraceConfig
from .errors import IOFailure, StackTraceError
from .formatter import TraceFormatter
from .models import CallFrame, RawFrame
from .sink import LOG_NOT_FOUND, FileTraceSink, ITraceSink
from .snapshot import IFrameSource, InspectFrameSource, StackSnapshotter
from .trace_logger import (
    IStackTraceLogger,
    StackTraceLogger,
    get_default_logger,
    get_stack_trace,
    log_stack_trace,
    print_stack_trace,
    set_default_logger,
)

__all__ = [
    # Config
    "TraceConfig",
    # Errors
    "StackTraceError",
    "IOFailure",
    # Models
    "CallFrame",
    "RawFrame",
    # Components
    "IFrameSource",
    "InspectFrameSource",
    "StackSnapshotter",
    "TraceFormatter",
    "ITraceSink",
    "FileTraceSink",
    "LOG_NOT_FOUND",
    "IStackTraceLogger",
    "StackTraceLogger",
    # Helpers
    "get_default_logger",
    "set_default_logger",
    "log_stack_trace",
    "print_stack_trace",
    "get_stack_trace",
]
