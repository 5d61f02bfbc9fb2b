"""Pytest configuration and fixtures."""

import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class StaticFrameSource:
    """Frame source returning a fixed synthetic stack, innermost first."""

    def __init__(self, frames):
        self.frames = list(frames)
        self.requested_limits = []

    def capture_raw_frames(self, limit, start=None, include_arguments=False):
        self.requested_limits.append(limit)
        frames = self.frames[:limit]
        if not include_arguments:
            frames = [replace(frame, args=None) for frame in frames]
        return frames


@pytest.fixture
def trace_config(tmp_path):
    """Create config pointing at a temporary trace log."""
    from stacktrace_logger import TraceConfig

    return TraceConfig(log_file=tmp_path / "logs" / "stacktrace.log")


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 12, 30, 45)


@pytest.fixture
def make_frame_source():
    """Factory for synthetic frame sources."""
    return StaticFrameSource


@pytest.fixture
def hook_stack():
    """Three-deep synthetic stack with an apply_filters call in the middle."""
    from stacktrace_logger import RawFrame

    return [
        RawFrame("render_title", "/srv/app/theme.php", 12, args=("Hello",)),
        RawFrame(
            "apply_filters", "/srv/app/post.php", 48, args=("my_filter", 42)
        ),
        RawFrame("main", "/srv/app/index.php", 3, args=()),
    ]


@pytest.fixture
def trace_logger(trace_config, fixed_now):
    """Create StackTraceLogger writing to a temporary trace log."""
    from stacktrace_logger import StackTraceLogger

    return StackTraceLogger(trace_config, clock=lambda: fixed_now)


@pytest.fixture
def default_logger(trace_logger):
    """Install trace_logger as the process-wide logger for the test."""
    from stacktrace_logger import set_default_logger

    set_default_logger(trace_logger)
    yield trace_logger
    set_default_logger(None)
