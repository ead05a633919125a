from __future__ import annotations

import logging

import pytest

from slimbot.errors import (
    BotError,
    ConfigurationError,
    ConnectFailure,
    PluginContractViolation,
    ResourceError,
    log_error,
)
from slimbot.logging_config import CONSOLE_HANDLER_NAME, LoggerConfigurator, error_aggregator


@pytest.fixture(autouse=True)
def _reset_aggregator():  # type: ignore[no-untyped-def]
    error_aggregator.reset()
    yield
    error_aggregator.reset()


def test_error_data_is_copied():
    data = {"path": "bot.json"}
    err = ConfigurationError("bad", data=data)
    data["path"] = "changed"
    assert err.data == {"path": "bot.json"}
    assert BotError("plain").data == {}


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (ConnectFailure("x"), "NETWORK"),
        (ConnectionRefusedError("x"), "NETWORK"),
        (ConfigurationError("x"), "CONFIG"),
        (ResourceError("x"), "RESOURCE"),
        (PluginContractViolation("x"), "PLUGIN"),
        (BotError("x"), "INTERNAL"),
        (ValueError("x"), "UNKNOWN"),
    ],
)
def test_log_error_categories(caplog, error, category):
    caplog.set_level(logging.ERROR)
    log_error("Setup failed", error)
    assert caplog.records[-1].getMessage().startswith(f"[{category}] Setup failed: x")


def test_log_error_includes_context_and_counts(caplog):
    caplog.set_level(logging.ERROR)
    log_error("Fatal error", ConnectFailure("down", data={"port": 6667}), context={"attempt": 1})
    message = caplog.records[-1].getMessage()
    assert "port=6667" in message
    assert "attempt=1" in message
    assert caplog.records[-1].levelno == logging.CRITICAL
    assert error_aggregator.get_error_summary()["network"]["total_count"] == 1


def test_summary_report_lists_categories(caplog):
    caplog.set_level(logging.WARNING)
    log_error("Fatal error", ResourceError("no pidfile"))
    error_aggregator.log_summary_report()
    assert any("resource: 1 total" in r.getMessage() for r in caplog.records)


def test_configurator_sets_console_level():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        handler = LoggerConfigurator().configure(debug=False)
        assert handler.level == logging.INFO
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configurator_replaces_its_console_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        first = LoggerConfigurator().configure(debug=False)
        second = LoggerConfigurator().configure(debug=True)
        console = [h for h in root.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
        assert console == [second]
        assert first not in root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
