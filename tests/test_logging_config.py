"""Tests for logging setup."""

import logging

import pytest

from oruntime.logging_config import LOG_FORMAT, get_logger, setup_logging


@pytest.fixture
def restore_runtime_logger():
    runtime_logger = logging.getLogger("oruntime")
    handlers = list(runtime_logger.handlers)
    level = runtime_logger.level
    propagate = runtime_logger.propagate
    yield runtime_logger
    runtime_logger.handlers[:] = handlers
    runtime_logger.setLevel(level)
    runtime_logger.propagate = propagate


def test_get_logger_namespace():
    """Loggers should live under the oruntime namespace."""
    assert get_logger("fatal").name == "oruntime.fatal"


def test_setup_logging_is_idempotent(restore_runtime_logger):
    """Repeated setup should leave exactly one handler."""
    setup_logging(logging.INFO)
    runtime_logger = setup_logging(logging.DEBUG)
    assert runtime_logger is restore_runtime_logger
    assert len(runtime_logger.handlers) == 1
    assert runtime_logger.level == logging.DEBUG
    assert runtime_logger.propagate is False
    assert runtime_logger.handlers[0].formatter._fmt == LOG_FORMAT
