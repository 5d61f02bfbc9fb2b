"""Main entry point: run the demo plugin scenario and show the trace log."""

from pathlib import Path

from dotenv import load_dotenv

from sim import Sim
from stacktrace_logger import StackTraceLogger, TraceConfig
from stacktrace_logger.logging_config import setup_logging


def main():
    """Run the demo scenario."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    setup_logging()

    # STACK_TRACE_LOG_FILE / STACK_TRACE_MAX_DEPTH come from the environment
    trace_logger = StackTraceLogger(TraceConfig.from_env())

    Sim(trace_logger=trace_logger).run()
    trace_logger.print_trace("demo finished")

    print(trace_logger.get_recent_logs(40))


if __name__ == "__main__":
    main()
