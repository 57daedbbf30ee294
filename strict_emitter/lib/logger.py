import logging
from typing import IO

from strict_emitter.constants import PACKAGE  # Because __package__ will return strict_emitter.lib


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)  # Adjust the number as needed
        return super().format(record)


def configure_logger(
    log_level: int = logging.WARNING, stream: IO[str] | None = None
) -> logging.Logger:
    """Configures the package logger with a console handler, format and level

    The emitter reports its memory leak advisory and its debug traces through loggers under
    the `strict_emitter` namespace. Applications that already configure logging don't need
    this, records propagate to the root logger as usual. Calling it again replaces the
    handlers installed by the previous call.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.WARNING.
        stream (IO[str] | None): Where to write records. Defaults to sys.stderr.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(PACKAGE)
    logger.handlers.clear()  # Clear existing handlers

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(
        CustomFormatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")
    )

    logger.addHandler(stream_handler)
    logger.setLevel(log_level)
    return logger
