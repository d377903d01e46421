from __future__ import annotations

import json
from typing import BinaryIO, Optional

import click

from error_style import ErrorStyle
from output import write_or_exit

ERROR_KEY = "yaml-error"


class ErrorPrinter:
    """Report recoverable errors according to the selected :class:`ErrorStyle`.

    ``Json`` envelopes go to stdout so they stay in document order with the
    converted output; ``Stderr`` messages go to stderr. The streams default to
    the process's binary stdout/stderr and can be replaced with in-memory
    buffers.
    """

    def __init__(
        self,
        style: ErrorStyle,
        pretty: bool = False,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
    ) -> None:
        self.style = style
        self.pretty = pretty
        self.stdout = stdout if stdout is not None else click.get_binary_stream("stdout")
        self.stderr = stderr if stderr is not None else click.get_binary_stream("stderr")

    def format_envelope(self, message: str) -> str:
        payload = {ERROR_KEY: message}
        if self.pretty:
            return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n"

    def print(self, error: object) -> None:
        if self.style is ErrorStyle.SILENT:
            return

        if self.style is ErrorStyle.STDERR:
            write_or_exit(self.stderr, f"{error}\n")
            return

        write_or_exit(self.stdout, self.format_envelope(str(error)))
