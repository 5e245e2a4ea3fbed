"""
Тесты для модуля Logging
"""

import logging

import pytest

from src.infrastructure.logging import (
    TRACE_LOGGER_NAME,
    get_logger,
    get_trace_logger,
    setup_logging,
)


@pytest.fixture
def fresh_trace_logger():
    """Trace logger без handler'ов и уровня; состояние восстанавливается."""
    logger = logging.getLogger(TRACE_LOGGER_NAME)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()
    yield logger
    logger.setLevel(saved_level)
    logger.handlers[:] = saved_handlers


def test_get_logger_returns_named_logger():
    assert get_logger("src.core").name == "src.core"


def test_trace_logger_defaults_to_info(fresh_trace_logger):
    """Уровень INFO выставляется, если не задан явно."""
    assert get_trace_logger().level == logging.INFO


def test_trace_logger_keeps_explicit_level(fresh_trace_logger):
    fresh_trace_logger.setLevel(logging.WARNING)
    assert get_trace_logger().level == logging.WARNING


def test_trace_logger_attaches_handler_once(fresh_trace_logger, monkeypatch):
    """Без handler'ов в иерархии добавляется ровно один stdout handler."""
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    monkeypatch.setattr(logging.getLogger("src"), "handlers", [])

    get_trace_logger()
    get_trace_logger()

    assert len(fresh_trace_logger.handlers) == 1


@pytest.fixture
def bare_root_logger():
    """Root logger без handler'ов; состояние восстанавливается."""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    root.handlers.clear()
    yield root
    root.setLevel(saved_level)
    root.handlers[:] = saved_handlers


def test_setup_logging_sets_root_level(bare_root_logger, monkeypatch):
    # pytest's logging plugin attaches handlers after fixture setup
    monkeypatch.setattr(bare_root_logger, "handlers", [])
    setup_logging("debug")

    assert bare_root_logger.level == logging.DEBUG
    assert len(bare_root_logger.handlers) == 1
