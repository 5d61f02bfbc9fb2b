"""Demo plugin host for the stack trace logger."""

from .hooks import HookRegistry
from .scenario import Sim

__all__ = ["HookRegistry", "Sim"]
