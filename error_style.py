from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import click


class ErrorStyle(Enum):
    """How recoverable errors are reported."""

    SILENT = "silent"
    STDERR = "stderr"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "ErrorStyle":
        for style in cls:
            if style.value == value:
                return style

        raise ValueError(f"invalid error style {value!r}")

    @classmethod
    def names(cls) -> list[str]:
        return [style.value for style in cls]

    def __str__(self) -> str:
        return self.value


class InvalidErrorStyle(click.BadParameter):
    """Usage error for ``--error`` that exits with status 1."""

    exit_code = 1


class ErrorStyleType(click.ParamType):
    """Click parameter type converting ``--error`` values into :class:`ErrorStyle`."""

    name = "error-style"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> ErrorStyle:
        if isinstance(value, ErrorStyle):
            return value

        try:
            return ErrorStyle.parse(value)
        except ValueError as exc:
            expected = ", ".join(f'"{name}"' for name in ErrorStyle.names())
            raise InvalidErrorStyle(
                f"{exc}, expected one of {expected}", ctx=ctx, param=param
            ) from exc


ERROR_STYLE = ErrorStyleType()
