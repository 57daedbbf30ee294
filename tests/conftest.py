"""Pytest fixtures for strict_emitter tests."""

import logging

import pytest

from strict_emitter import PACKAGE, Emitter
from strict_emitter.config import get_default_max_listeners
from strict_emitter.constants import MAX_LISTENERS_ENV_VAR


@pytest.fixture
def emitter():
    """Create an empty Emitter."""
    return Emitter()


@pytest.fixture
def leak_records(caplog):
    """Capture the memory leak warnings logged by the emitter module."""
    caplog.set_level(logging.WARNING, logger="strict_emitter.emitter")

    def records():
        return [
            r
            for r in caplog.records
            if r.name == "strict_emitter.emitter" and r.levelno == logging.WARNING
        ]

    return records


@pytest.fixture(autouse=True)
def default_max_listeners(monkeypatch):
    """Keep the shell environment from changing the default listener limit."""
    monkeypatch.delenv(MAX_LISTENERS_ENV_VAR, raising=False)
    monkeypatch.setattr(Emitter, "default_max_listeners", get_default_max_listeners())


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo configure_logger() calls made by a test."""
    logger = logging.getLogger(PACKAGE)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
