"""Structured logging for the stack trace logger's own diagnostics.

These records describe what the library did (where reports were written,
configuration changes, write failures). They never contain the reports
themselves, which go to the trace log sink.
"""

import json
import logging
import logging.config
import logging.handlers
import os
from datetime import datetime, timezone
from typing import Iterable

from .config import DEFAULT_LOG_PATH, PathLike, resolve_log_path

# Package loggers configured by setup_logging(); the root logger is left alone.
DEFAULT_LOGGER_NAMES = ("stacktrace_logger", "sim")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with the record's `context` extra if given."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # e.g. extra={"context": {"path": ..., "chars": ...}}
        context = getattr(record, "context", None)
        if context is not None:
            log_data["context"] = context

        return json.dumps(log_data, default=str)


def setup_logging(
    log_level: str | None = None,
    log_file: PathLike | None = None,
    console: bool = True,
    logger_names: Iterable[str] = DEFAULT_LOGGER_NAMES,
) -> None:
    """
    Route the package loggers to a rotating JSON file and optionally stderr.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
                   Defaults to LOG_LEVEL env var or INFO.
        log_file: Diagnostic log path, relative to the working directory.
                  Defaults to 04_logs/app.log.
        console: Also write records to stderr. stdout is kept free for
                 print_trace() output.
        logger_names: Loggers to configure; they stop propagating to root.
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO")

    log_path = resolve_log_path(log_file, default=DEFAULT_LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_path),
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stderr",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JSONFormatter},
            },
            "handlers": handlers,
            "loggers": {
                name: {
                    "level": log_level.upper(),
                    "handlers": list(handlers),
                    "propagate": False,
                }
                for name in logger_names
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package (pass __name__)."""
    return logging.getLogger(name)
