"""SIM implementation - hardcoded plugin scenario for trying the logger."""

from typing import Protocol

from stacktrace_logger import StackTraceLogger
from stacktrace_logger.logging_config import get_logger

from .hooks import HookRegistry

logger = get_logger(__name__)


class ISim(Protocol):
    """Run a hook scenario that records stack traces."""

    def run(self) -> list[str]:
        """Run the scenario and return the captured reports."""
        ...


class SeoPlugin:
    """Plugin whose title filter records where it was called from."""

    def __init__(self, trace_logger: StackTraceLogger, reports: list[str]):
        self._trace_logger = trace_logger
        self._reports = reports

    def register(self, hooks: HookRegistry) -> None:
        hooks.add_filter("the_title", self.filter_title)
        hooks.add_action("init", self.on_init)

    def filter_title(self, title: str) -> str:
        self._reports.append(self._trace_logger.log(f"filtering title {title!r}"))
        return title.strip().title()

    def on_init(self) -> None:
        self._reports.append(self._trace_logger.log("plugin init"))


class Sim:
    """SIM with a hardcoded bootstrap -> render scenario."""

    def __init__(
        self,
        trace_logger: StackTraceLogger | None = None,
        hooks: HookRegistry | None = None,
    ):
        self._trace_logger = trace_logger or StackTraceLogger()
        self._hooks = hooks or HookRegistry()
        self._reports: list[str] = []
        SeoPlugin(self._trace_logger, self._reports).register(self._hooks)

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    def run(self) -> list[str]:
        """Fire `init`, then render a title through `the_title`."""
        self._reports.clear()
        self._bootstrap()
        title = self._render_title("  hello world  ")
        logger.info(
            "SIM: rendered title %r, %d reports",
            title,
            len(self._reports),
            extra={"context": {"title": title, "reports": len(self._reports)}},
        )
        return list(self._reports)

    def _bootstrap(self) -> None:
        self._hooks.do_action("init")

    def _render_title(self, raw_title: str) -> str:
        return self._hooks.apply_filters("the_title", raw_title)
