"""Unit tests for structlog configuration and get_logger."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from commandbus.application.cqrs import new_registry
from commandbus.observability.logging import JsonLoggerFactory, get_logger
from commandbus.testing import RecordingCommandHandler


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("commandbus.test", component="registry").info("ready")
        assert logs == [{"component": "registry", "event": "ready", "log_level": "info"}]

    def test_without_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("commandbus.test").warning("careful", attempt=2)
        assert logs[0]["attempt"] == 2

    @pytest.mark.usefixtures("restore_logging")
    def test_unconfigured_debug_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        get_logger("commandbus.quiet").debug("handler_registered", handler="SumHandler")
        get_logger("commandbus.quiet").info("registry_cleared")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    @pytest.mark.usefixtures("restore_logging")
    def test_registry_operations_print_nothing_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        registry = new_registry()
        registry.register_handler(RecordingCommandHandler, RecordingCommandHandler())
        registry.clear_registry()

        assert capsys.readouterr().out == ""

    def test_backed_by_stdlib_logger(self) -> None:
        assert get_logger("commandbus.named").name == "commandbus.named"


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_renders_json_lines(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.DEBUG, stream, cache_logger_on_first_use=False)
        get_logger("commandbus.json").debug("handler_registered", handler="SumHandler")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "handler_registered"
        assert record["handler"] == "SumHandler"
        assert record["level"] == "debug"
        assert record["logger"] == "commandbus.json"
        assert "timestamp" in record

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.WARNING, stream, cache_logger_on_first_use=False)
        get_logger("commandbus.json").info("hidden")
        get_logger("commandbus.json").error("shown")
        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]
