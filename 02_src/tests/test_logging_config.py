"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from stacktrace_logger import FileTraceSink, StackTraceLogger, TraceConfig
from stacktrace_logger.logging_config import (
    DEFAULT_LOGGER_NAMES,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def _reset_package_loggers():
    for name in DEFAULT_LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        for handler in package_logger.handlers[:]:
            handler.close()
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True


@pytest.fixture
def app_log(tmp_path):
    """Configure package logging into a temporary file and undo it afterwards."""
    log_file = tmp_path / "diag" / "app.log"
    setup_logging(log_level="DEBUG", log_file=log_file, console=False)
    yield log_file
    _reset_package_loggers()


def _records(log_file):
    for handler in logging.getLogger("stacktrace_logger").handlers:
        handler.flush()
    return [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord(
            "stacktrace_logger.sink", logging.INFO, __file__, 12, "wrote %s", ("x",), None
        )
        record.__dict__.update(extra)
        return record

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(self._record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "stacktrace_logger.sink"
        assert data["message"] == "wrote x"
        assert data["line"] == 12
        assert "context" not in data

    def test_context_included(self):
        record = self._record(context={"path": "/tmp/trace.log", "chars": 42})
        data = json.loads(JSONFormatter().format(record))
        assert data["context"] == {"path": "/tmp/trace.log", "chars": 42}

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_creates_log_directory(self, app_log):
        assert app_log.parent.is_dir()

    def test_append_logged_with_context(self, app_log, tmp_path):
        """Test that sink appends produce a JSON record with path and size."""
        sink = FileTraceSink(tmp_path / "trace.log")
        sink.append("report\n")

        records = [r for r in _records(app_log) if r["message"].startswith("Appended")]
        assert len(records) == 1
        assert records[0]["level"] == "DEBUG"
        assert records[0]["logger"] == "stacktrace_logger.sink.file_sink"
        assert records[0]["context"] == {"path": str(sink.path), "chars": 7}

    def test_clear_logged_with_context(self, app_log, tmp_path):
        sink = FileTraceSink(tmp_path / "trace.log")
        sink.append("report\n")
        sink.clear()

        records = [r for r in _records(app_log) if r["message"].startswith("Cleared")]
        assert records[0]["context"] == {"path": str(sink.path)}

    def test_failure_logged_with_context(self, app_log, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        sink = FileTraceSink(blocker / "logs" / "trace.log")

        with pytest.raises(OSError):
            sink.append("lost\n")

        records = [r for r in _records(app_log) if r["level"] == "ERROR"]
        assert records[0]["context"]["path"] == str(sink.path)
        assert records[0]["context"]["error"]

    def test_setters_logged_with_context(self, app_log, tmp_path):
        trace_logger = StackTraceLogger(TraceConfig(log_file=tmp_path / "a.log"))
        trace_logger.set_log_file(tmp_path / "b.log")
        trace_logger.set_max_depth(4)

        contexts = [r.get("context") for r in _records(app_log)]
        assert {"path": str(tmp_path / "b.log")} in contexts
        assert {"max_depth": 4} in contexts

    def test_level_filters_records(self, tmp_path):
        log_file = tmp_path / "info.log"
        setup_logging(log_level="info", log_file=log_file, console=False)
        try:
            FileTraceSink(tmp_path / "trace.log").append("report\n")
            get_logger("stacktrace_logger.test").info("visible")

            messages = [r["message"] for r in _records(log_file)]
            assert messages == ["visible"]
        finally:
            _reset_package_loggers()

    def test_default_file_relative_to_working_directory(self, monkeypatch, tmp_path, app_log):
        monkeypatch.chdir(tmp_path / "diag")
        setup_logging(log_level="INFO", console=False)
        get_logger("stacktrace_logger.test").info("default location")

        default_file = tmp_path / "diag" / "04_logs" / "app.log"
        assert _records(default_file)[-1]["message"] == "default location"

    def test_root_logger_untouched(self, app_log):
        assert logging.getLogger("stacktrace_logger").propagate is False
        root_handlers = logging.getLogger().handlers
        assert not any(isinstance(h.formatter, JSONFormatter) for h in root_handlers)
