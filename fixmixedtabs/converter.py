# fixmixedtabs/converter.py
"""Tabify/untabify of leading whitespace.

Both converters return replacements instead of editing anything, so a host
can apply the whole batch as one undoable edit. Only the leading whitespace
of a line is ever replaced, and the visual column it reaches is preserved.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .columns import (
    SPACE,
    TAB,
    advance_column,
    check_tab_width,
    leading_whitespace,
    visual_column,
)
from .lines import Line, iter_lines


class ReplacementError(ValueError):
    """Raised when a batch of replacements does not fit the buffer."""


@dataclass(frozen=True)
class Replacement:
    """Replace ``length`` characters at ``start`` with ``text``."""

    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length

    def __iter__(self) -> Iterator[int | str]:
        return iter((self.start, self.length, self.text))


def _tabify_line(text: str, tab_width: int) -> tuple[int, str] | None:
    whitespace = leading_whitespace(text)
    tabs_after_spaces = False
    column = 0
    largest_run = 0
    current_run = 0

    for ch in whitespace:
        if ch == SPACE:
            current_run += 1
            largest_run = max(largest_run, current_run)
        else:
            # The flag stays set; only the run length resets.
            if largest_run > 0:
                tabs_after_spaces = True
            current_run = 0
        column = advance_column(column, ch, tab_width)

    if not tabs_after_spaces and largest_run < tab_width:
        return None

    tab_count, space_count = divmod(column, tab_width)
    return len(whitespace), TAB * tab_count + SPACE * space_count


def _untabify_line(text: str, tab_width: int) -> tuple[int, str] | None:
    whitespace = leading_whitespace(text)
    if TAB not in whitespace:
        return None
    return len(whitespace), SPACE * visual_column(whitespace, tab_width)


def tabify(lines: Iterable[Line | str], tab_width: int) -> list[Replacement]:
    """Rewrite leading whitespace as the fewest tabs plus remainder spaces.

    Lines are left alone unless a tab follows spaces or a run of spaces is at
    least ``tab_width`` long.
    """

    check_tab_width(tab_width)
    replacements: list[Replacement] = []
    for line in iter_lines(lines):
        result = _tabify_line(line.text, tab_width)
        if result is not None:
            replacements.append(Replacement(line.start, *result))
    return replacements


def untabify(lines: Iterable[Line | str], tab_width: int) -> list[Replacement]:
    """Rewrite leading whitespace containing tabs as spaces only."""

    check_tab_width(tab_width)
    replacements: list[Replacement] = []
    for line in iter_lines(lines):
        result = _untabify_line(line.text, tab_width)
        if result is not None:
            replacements.append(Replacement(line.start, *result))
    return replacements


def apply_replacements(
    buffer: str, replacements: Iterable[Replacement | tuple[int, int, str]]
) -> str:
    """Return ``buffer`` with every replacement applied.

    Offsets refer to ``buffer`` as given. If any replacement is out of range
    or overlaps another, :class:`ReplacementError` is raised and nothing is
    applied.
    """

    batch = [r if isinstance(r, Replacement) else Replacement(*r) for r in replacements]
    pieces: list[str] = []
    cursor = 0
    for replacement in sorted(batch, key=lambda r: r.start):
        if replacement.start < 0 or replacement.length < 0 or replacement.end > len(buffer):
            raise ReplacementError(
                f"Replacement at {replacement.start} (length {replacement.length}) is "
                f"outside a buffer of length {len(buffer)}"
            )
        if replacement.start < cursor:
            raise ReplacementError(
                f"Replacement at {replacement.start} overlaps a previous replacement"
            )
        pieces.append(buffer[cursor : replacement.start])
        pieces.append(replacement.text)
        cursor = replacement.end
    pieces.append(buffer[cursor:])
    return "".join(pieces)


__all__ = [
    "Replacement",
    "ReplacementError",
    "apply_replacements",
    "tabify",
    "untabify",
]
