"""Trace formatting module."""

from .formatter import (
    REPORT_SEPARATOR,
    SCREEN_SEPARATOR,
    STRING_SEPARATOR,
    TraceFormatter,
)

__all__ = [
    "TraceFormatter",
    "REPORT_SEPARATOR",
    "SCREEN_SEPARATOR",
    "STRING_SEPARATOR",
]
