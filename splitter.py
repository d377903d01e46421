"""Lazy splitting of a YAML byte stream into individual documents.

:func:`iter_documents` pulls one line at a time, so documents piped through
stdin are converted as soon as their end is seen. Each item is either the
document text or a :class:`YamlSplitError`; an error is always the last item.
"""

from __future__ import annotations

import re
from typing import BinaryIO, Iterator, List, Union

START_MARKER = re.compile(r"^---(?:[ \t\r\n]|$)")
END_MARKER = re.compile(r"^\.\.\.(?:[ \t]*(?:#.*)?)?\r?\n?$")


class YamlSplitError(Exception):
    """The input stream could not be read; the remaining documents are lost."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause


SplitResult = Union[str, YamlSplitError]


def _is_filler(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#") or stripped.startswith("%")


class _Document:
    def __init__(self) -> None:
        self.lines: List[str] = []
        self.has_content = False

    def add(self, line: str, *, marker: bool = False) -> None:
        self.lines.append(line)
        if marker or not _is_filler(line):
            self.has_content = True

    def text(self) -> str:
        return "".join(self.lines)


def _read_lines(stream: BinaryIO) -> Iterator[str]:
    first = True
    while True:
        raw = stream.readline()
        if not raw:
            return

        yield raw.decode("utf-8-sig" if first else "utf-8")
        first = False


def iter_documents(stream: BinaryIO) -> Iterator[SplitResult]:
    """Yield the YAML documents of ``stream`` in order."""

    current = _Document()

    try:
        for line in _read_lines(stream):
            if START_MARKER.match(line):
                if current.has_content:
                    yield current.text()
                    current = _Document()
                current.add(line, marker=True)
            elif END_MARKER.match(line):
                if current.has_content:
                    yield current.text()
                current = _Document()
            else:
                current.add(line)
    except (OSError, UnicodeDecodeError) as exc:
        yield YamlSplitError(exc)
        return

    if current.has_content:
        yield current.text()
