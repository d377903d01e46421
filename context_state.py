from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from converter import Style, Yaml2Json
from error_printer import ErrorPrinter
from error_style import ErrorStyle


@dataclass(frozen=True)
class ContextState:
    """Run configuration stored on Click's context object."""

    error_style: ErrorStyle = ErrorStyle.JSON
    pretty: bool = False
    verbose: bool = False

    @property
    def style(self) -> Style:
        return Style.from_pretty(self.pretty)

    def build_converter(self) -> Yaml2Json:
        return Yaml2Json(self.style)

    def build_error_printer(
        self, stdout: Optional[BinaryIO] = None, stderr: Optional[BinaryIO] = None
    ) -> ErrorPrinter:
        """Create the printer that owns the output streams for this run."""

        return ErrorPrinter(self.error_style, self.pretty, stdout=stdout, stderr=stderr)
