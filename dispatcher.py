from __future__ import annotations

import pathlib
from typing import BinaryIO, Optional, Sequence

import click

from converter import Yaml2Json
from driver import drive
from error_printer import ErrorPrinter
from logging_utils import get_logger

logger = get_logger(__name__)


def dispatch(
    paths: Sequence[str],
    converter: Yaml2Json,
    error_printer: ErrorPrinter,
    stdin: Optional[BinaryIO] = None,
) -> None:
    """Run the conversion driver over each path, or over stdin when none are given.

    Missing paths, directories and files that cannot be opened are reported
    through ``error_printer`` and skipped.
    """

    if not paths:
        source = stdin if stdin is not None else click.get_binary_stream("stdin")
        logger.debug("No input files given, reading from stdin")
        stats = drive(converter, error_printer, source)
        logger.debug("stdin: %d converted, %d failed", stats.converted, stats.failed)
        return

    for raw_path in paths:
        path = pathlib.Path(raw_path)

        try:
            if not path.exists():
                error_printer.print(f"{raw_path} does not exist")
                continue

            if path.is_dir():
                error_printer.print(f"{raw_path} is a directory")
                continue

            handle = path.open("rb")
        except OSError as exc:
            error_printer.print(exc)
            continue

        with handle:
            logger.debug("Converting %s", raw_path)
            stats = drive(converter, error_printer, handle)

        logger.debug("%s: %d converted, %d failed", raw_path, stats.converted, stats.failed)
