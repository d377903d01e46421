"""Diagnostic logging for the converter modules.

stderr doubles as the error channel for ``--error=stderr``, so log records
only reach it when ``--verbose`` is given. Otherwise the ``yaml2json`` logger
discards everything, including records that would fall through to the
interpreter's last-resort handler.
"""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "yaml2json"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(*, verbose: bool = False) -> None:
    """Route the tool's log records to stderr when ``verbose``, else drop them.

    Calling it again replaces the previously installed handler.
    """

    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False

    if _handler is not None:
        logger.removeHandler(_handler)

    if verbose:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        _handler = logging.NullHandler()
        logger.setLevel(logging.CRITICAL)

    logger.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the tool's logger."""

    return logging.getLogger(f"{LOGGER_NAME}.{name}")
