# fixmixedtabs/columns.py
"""Visual column accounting shared by the detector and the converters.

A space advances the column by one; a tab advances it to the next multiple
of the tab width.
"""
from __future__ import annotations

import re

TAB = "\t"
SPACE = " "

_LEADING_WS_RE = re.compile(r"[ \t]*")


class InvalidTabWidthError(ValueError):
    """Raised when a tab width is not a positive integer."""


def check_tab_width(tab_width: int) -> int:
    """Return ``tab_width`` unchanged, or raise :class:`InvalidTabWidthError`."""

    if isinstance(tab_width, bool) or not isinstance(tab_width, int) or tab_width < 1:
        raise InvalidTabWidthError(
            f"Tab width must be a positive integer, got {tab_width!r}"
        )
    return tab_width


def next_tab_stop(column: int, tab_width: int) -> int:
    return column + tab_width - (column % tab_width)


def advance_column(column: int, ch: str, tab_width: int) -> int:
    if ch == TAB:
        return next_tab_stop(column, tab_width)
    return column + 1


def leading_whitespace(text: str) -> str:
    match = _LEADING_WS_RE.match(text)
    return match.group(0) if match else ""


def visual_column(whitespace: str, tab_width: int) -> int:
    """Column reached after laying out ``whitespace`` from column zero.

    Only spaces and tabs are counted; scanning stops at the first other
    character.
    """

    check_tab_width(tab_width)
    column = 0
    for ch in whitespace:
        if ch not in (SPACE, TAB):
            break
        column = advance_column(column, ch, tab_width)
    return column


__all__ = [
    "SPACE",
    "TAB",
    "InvalidTabWidthError",
    "advance_column",
    "check_tab_width",
    "leading_whitespace",
    "next_tab_stop",
    "visual_column",
]
