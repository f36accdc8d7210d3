"""
Tests for settings, exceptions and logging setup.
"""

import structlog

from nodeinfluence.core import (
    DegenerateGraphError,
    GraphError,
    NodeInfluenceError,
    LogContext,
    NodeOutOfRangeError,
    get_logger,
    get_settings,
    setup_logging,
)


def test_settings_defaults():
    settings = get_settings()

    assert settings.score_precision == 2
    assert settings.default_mode == "auto"
    assert settings.log_format == "console"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SCORE_PRECISION", "4")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("DEFAULT_MODE", "weighted")

    settings = get_settings()

    assert settings.score_precision == 4
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.default_mode == "weighted"


def test_unknown_log_format_falls_back_to_console(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")

    assert get_settings().log_format == "console"


def test_out_of_range_error_details():
    err = NodeOutOfRangeError(7, 3)

    assert isinstance(err, GraphError)
    assert isinstance(err, NodeInfluenceError)
    assert err.node == 7
    assert err.details["node_count"] == 3
    assert "Details" in str(err)


def test_degenerate_error_message():
    err = DegenerateGraphError()

    assert "single-node" in err.message
    assert err.node_count == 1


def test_setup_logging_json(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    try:
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    finally:
        structlog.reset_defaults()


def test_get_logger_binds_context():
    logger = get_logger("test", dataset="social")

    assert structlog.get_context(logger) == {"dataset": "social"}


def test_setup_logging_debug_adds_callsite():
    try:
        setup_logging(level="debug", log_format="console")
        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()


def test_log_context_binds_and_restores():
    structlog.contextvars.clear_contextvars()

    with LogContext(dataset="social", engine="unweighted"):
        assert structlog.contextvars.get_contextvars() == {
            "dataset": "social",
            "engine": "unweighted",
        }

    assert structlog.contextvars.get_contextvars() == {}
