"""Trace sink module."""

from .file_sink import LOG_NOT_FOUND, FileTraceSink, ITraceSink

__all__ = ["FileTraceSink", "ITraceSink", "LOG_NOT_FOUND"]
