"""Minimal WordPress-style hook registry used as a demo host."""

from typing import Any, Callable

from stacktrace_logger.logging_config import get_logger

logger = get_logger(__name__)

Listener = Callable[..., Any]


class HookRegistry:
    """Named actions and filters with listeners called in registration order."""

    def __init__(self):
        self._actions: dict[str, list[Listener]] = {}
        self._filters: dict[str, list[Listener]] = {}

    def add_action(self, tag: str, listener: Listener) -> None:
        self._actions.setdefault(tag, []).append(listener)

    def add_filter(self, tag: str, listener: Listener) -> None:
        self._filters.setdefault(tag, []).append(listener)

    def do_action(self, tag: str, *args: Any) -> None:
        """Call every listener registered for `tag`."""
        for listener in self._actions.get(tag, []):
            listener(*args)

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any:
        """Pass `value` through every filter registered for `tag`."""
        for listener in self._filters.get(tag, []):
            value = listener(value, *args)
        return value

    def do_action_ref_array(self, tag: str, args: list) -> None:
        self.do_action(tag, *args)

    def apply_filters_ref_array(self, tag: str, args: list) -> Any:
        return self.apply_filters(tag, *args)
