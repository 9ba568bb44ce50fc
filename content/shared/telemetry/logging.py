"""Logging for the content layer.

Modules log through get_logger(__name__), so everything lives under the
'content' logger. Hosts with their own logging configuration never need
setup_logging(); standalone tools and tests call it once.
"""

import logging
import sys

from content.core.config import get_settings

LOGGER_NAME = "content"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_HANDLER_NAME = "content.stdout"


def setup_logging() -> logging.Logger:
    """Configure the 'content' logger (idempotent).

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.

    Returns:
        The configured package logger.
    """
    settings = get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)
