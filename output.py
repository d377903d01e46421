"""Guarded writes to the process output streams.

Every byte this tool produces goes through :func:`write_or_exit`. Once stdout
or stderr stops accepting data (usually because the reader of a pipe went
away) nothing further can be reported, so the process exits with status 1
instead of raising.
"""

from __future__ import annotations

import os
from typing import BinaryIO, NoReturn

from logging_utils import get_logger

logger = get_logger(__name__)


def terminate() -> NoReturn:
    """Exit the process with the fatal status code."""

    raise SystemExit(1)


def _detach(stream: BinaryIO) -> None:
    # Point the descriptor at the null device so the interpreter's final
    # flush does not report the broken pipe a second time.
    try:
        fileno = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return

    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fileno)
    except OSError:  # pragma: no cover - descriptor already gone
        pass
    finally:
        os.close(devnull)


def write_or_exit(stream: BinaryIO, text: str | bytes) -> None:
    """Write ``text`` to ``stream`` or terminate the process."""

    data = text.encode("utf-8") if isinstance(text, str) else text

    try:
        stream.write(data)
        stream.flush()
    except (OSError, ValueError) as exc:
        logger.debug("Write failed, exiting: %s", exc)
        _detach(stream)
        terminate()
