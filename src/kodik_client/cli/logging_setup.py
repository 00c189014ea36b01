"""Logging configuration for the ``kodik-client`` command."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "kodik_client"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    WARNING and above are shown by default, everything with *verbose*.
    Calling this again replaces the previous handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
