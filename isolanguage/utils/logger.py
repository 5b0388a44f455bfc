"""Logging for isolanguage.

The library only emits DEBUG records (table loading) under the
``isolanguage`` logger and stays silent by default. The CLI calls
``setup_logging`` to send them, with its own INFO messages, to stderr.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "isolanguage"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_VERBOSE = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

# Silent unless an application (or the CLI) configures handlers.
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Send isolanguage log records to stderr.

    Warnings only by default, INFO with ``verbose`` and DEBUG with ``debug``.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    fmt = LOG_FORMAT_VERBOSE if (verbose or debug) else LOG_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
