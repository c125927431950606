"""Logging setup for the parrot package.

Modules log through ``logging.getLogger(__name__)``; this only attaches
a handler and level to the package logger.
"""

import logging

from parrot.config import get_log_level

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``parrot`` logger.

    Safe to call more than once: the handler is only attached on the first
    call, later calls just adjust the level.

    Args:
        level: Log level name (DEBUG, INFO, ...). Defaults to PARROT_LOG_LEVEL.

    Returns:
        The package logger
    """
    global _configured

    logger = logging.getLogger("parrot")
    level_name = (level or get_log_level()).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        _configured = True

    return logger
