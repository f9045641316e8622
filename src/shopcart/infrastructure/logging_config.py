"""Logging setup for the ``shopcart`` logger tree."""

from __future__ import annotations

import logging

LOGGER_NAME = "shopcart"
HANDLER_NAME = "shopcart-console"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send ``shopcart.*`` records to stderr at *level*.

    Safe to call more than once: the console handler installed by a
    previous call is replaced, so records always go to the current
    ``sys.stderr``. Handlers added by anyone else are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
