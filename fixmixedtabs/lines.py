# fixmixedtabs/lines.py
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class LineBoundsError(ValueError):
    """Raised when a line reports an extent that cannot belong to a document."""


@dataclass(frozen=True)
class Line:
    """A single line of a document, without its line break.

    ``start`` is the offset of the first character of the line within the
    buffer it was taken from.
    """

    start: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0:
            raise LineBoundsError(f"Line start must not be negative, got {self.start}")
        if _LINE_BREAK_RE.search(self.text):
            raise LineBoundsError(f"Line starting at {self.start} contains a line break")

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def split_lines(buffer: str) -> list[Line]:
    """Split ``buffer`` into lines, recording where each one starts.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. A trailing line break
    yields a final empty line, matching how editors number lines.
    """

    lines: list[Line] = []
    start = 0
    for match in _LINE_BREAK_RE.finditer(buffer):
        lines.append(Line(start, buffer[start : match.start()]))
        start = match.end()
    lines.append(Line(start, buffer[start:]))
    return lines


def iter_lines(lines: Iterable[Line | str]) -> Iterator[Line]:
    """Yield :class:`Line` objects, checking that they do not overlap.

    Plain strings are accepted too; they are placed as if the sequence had
    been joined with ``\\n``.
    """

    offset = 0
    previous_end: int | None = None
    for item in lines:
        if isinstance(item, Line):
            line = item
        elif isinstance(item, str):
            line = Line(offset, item)
        else:
            raise TypeError(f"Expected Line or str, got {type(item).__name__}")
        if previous_end is not None and line.start < previous_end:
            raise LineBoundsError(
                f"Line starting at {line.start} overlaps the previous line ending at "
                f"{previous_end}"
            )
        previous_end = line.end
        offset = line.end + 1
        yield line
