from __future__ import annotations

import logging

import pytest
from pythonjsonlogger import jsonlogger

from table_view.logging_config import ENGINE_LOGGER, configure_logging, resolve_format_mode


@pytest.fixture
def restore_logger():
    saved = {}
    for name in (ENGINE_LOGGER, None):
        lg = logging.getLogger(name)
        saved[name] = (list(lg.handlers), lg.level, lg.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


def test_resolve_format_mode_order(monkeypatch):
    monkeypatch.setenv("TABLE_VIEW_LOG_FORMAT", "PLAIN")

    assert resolve_format_mode() == "plain"
    assert resolve_format_mode("json") == "json"

    monkeypatch.delenv("TABLE_VIEW_LOG_FORMAT")
    assert resolve_format_mode() == "json"


def test_configure_logging_targets_engine_logger(restore_logger):
    root_handlers = list(logging.getLogger().handlers)

    logger = configure_logging(level=logging.DEBUG, force_format="json")
    configure_logging(level=logging.DEBUG, force_format="json")

    assert logger is logging.getLogger("table_view")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert logging.getLogger().handlers == root_handlers

    # module loggers inherit the engine logger's level
    assert logging.getLogger("table_view.core.view").getEffectiveLevel() == logging.DEBUG


def test_configure_logging_plain_root(restore_logger):
    logger = configure_logging(force_format="plain", logger_name=None)

    assert logger is logging.getLogger()
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0].formatter, jsonlogger.JsonFormatter)
