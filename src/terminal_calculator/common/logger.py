"""Shared logger for the terminal calculator."""
import logging
import sys
from typing import Optional

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger("terminal_calculator")

# Handler installed by configure_logging; other handlers on the logger are left alone
_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach the package stderr handler once and set the logger level.

    Calling this more than once only updates the level.

    :param str level: Standard logging level name

    :return: The configured package logger
    :rtype: logging.Logger
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    if _handler not in logger.handlers:
        logger.addHandler(_handler)
        # Keep records out of the root logger to avoid duplicate lines
        logger.propagate = False

    logger.setLevel(level.upper())
    return logger


def get_handler() -> Optional[logging.Handler]:
    """Return the handler installed by configure_logging, if any."""
    return _handler
