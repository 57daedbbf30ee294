"""Tests for configure_logger."""

import io
import logging
from unittest.mock import MagicMock

from strict_emitter import Emitter, configure_logger
from strict_emitter.lib.logger import CustomFormatter


def test_configure_logger_sets_level_and_handler():
    logger = configure_logger(logging.DEBUG, stream=io.StringIO())

    assert logger.name == "strict_emitter"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, CustomFormatter)


def test_configure_logger_replaces_previous_handler():
    configure_logger(stream=io.StringIO())
    logger = configure_logger(stream=io.StringIO())

    assert len(logger.handlers) == 1


def test_leak_warning_written_to_stream():
    stream = io.StringIO()
    configure_logger(logging.WARNING, stream=stream)
    emitter = Emitter().set_max_listeners(1)

    emitter.on("test_event", MagicMock()).on("test_event", MagicMock())

    output = stream.getvalue()
    assert "WARNING " in output
    assert "strict_emitter.emitter" in output
    assert "Possible EventEmitter memory leak detected" in output


def test_debug_records_for_registration():
    stream = io.StringIO()
    configure_logger(logging.DEBUG, stream=stream)
    emitter = Emitter()
    listener = MagicMock()

    emitter.on("test_event", listener).off("test_event", listener)

    output = stream.getvalue()
    assert "Added listener" in output
    assert "Removed listener" in output
