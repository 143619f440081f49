# fixmixedtabs/detector.py
"""Mixed indentation detection.

Tab-led lines always count. Space-led lines only count once the run of
leading spaces reaches the tab width, or when a tab follows the spaces, so
files indented with a couple of spaces are never reported.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from .columns import TAB, check_tab_width, leading_whitespace
from .lines import Line, iter_lines

IndentKind = Literal["tabs", "spaces"]


def classify_line(text: str, tab_width: int) -> IndentKind | None:
    """Return which indentation style ``text`` contributes, if any."""

    check_tab_width(tab_width)
    whitespace = leading_whitespace(text)
    if not whitespace:
        return None
    if whitespace[0] == TAB:
        return "tabs"

    spaces = 0
    for ch in whitespace:
        if ch == TAB:
            return "spaces"
        spaces += 1
        # Counts from the first space, so with a tab width of 1 a lone
        # leading space already qualifies.
        if spaces >= tab_width:
            return "spaces"
    return None


def detect(lines: Iterable[Line | str], tab_width: int) -> bool:
    """Return ``True`` when the lines mix tab-led and space-led indentation."""

    check_tab_width(tab_width)
    seen: set[IndentKind] = set()
    for line in iter_lines(lines):
        kind = classify_line(line.text, tab_width)
        if kind is None:
            continue
        seen.add(kind)
        if len(seen) == 2:
            return True
    return False


__all__ = ["IndentKind", "classify_line", "detect"]
