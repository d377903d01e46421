from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from converter import ConversionError, Yaml2Json
from error_printer import ErrorPrinter
from logging_utils import get_logger
from output import terminate, write_or_exit
from splitter import YamlSplitError, iter_documents

logger = get_logger(__name__)


@dataclass
class DriveStats:
    converted: int = 0
    failed: int = 0


def drive(converter: Yaml2Json, error_printer: ErrorPrinter, source: BinaryIO) -> DriveStats:
    """Convert every document of ``source`` to JSON on stdout.

    Outputs are separated by a single newline and followed by a trailing
    newline when anything was printed. The separator is written before the
    next item rather than after the previous one, so a document that fails to
    convert never leaves a dangling newline behind. A :class:`YamlSplitError`
    ends the process with status 1.
    """

    stdout = error_printer.stdout
    stats = DriveStats()
    printed_last = False

    for item in iter_documents(source):
        if printed_last:
            write_or_exit(stdout, "\n")

        printed_last = False

        if isinstance(item, YamlSplitError):
            logger.debug("Unable to read input, exiting: %s", item)
            terminate()

        try:
            converter.document_to_writer(item, stdout)
        except ConversionError as exc:
            stats.failed += 1
            error_printer.print(exc)
        else:
            stats.converted += 1
            printed_last = True

    if printed_last:
        write_or_exit(stdout, "\n")

    return stats
