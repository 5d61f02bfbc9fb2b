"""Core data models for the stack trace logger."""

from .frames import INSTANCE_CALL, STATIC_CALL, CallFrame, RawFrame

__all__ = [
    "CallFrame",
    "RawFrame",
    "INSTANCE_CALL",
    "STATIC_CALL",
]
