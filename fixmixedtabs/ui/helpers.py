from __future__ import annotations

import contextlib
import tkinter as tk
import tkinter.font as tkfont
from collections.abc import Sequence

from ..converter import Replacement, ReplacementError, apply_replacements
from ..lines import Line, split_lines

_SEL_FIRST_MARK = "fixmixedtabs_sel_first"
_SEL_LAST_MARK = "fixmixedtabs_sel_last"


def offset_to_tkindex(content: str, offset: int) -> str:
    """Convert a Python-string offset to a Tk index using UTF-16 code units."""

    if offset <= 0:
        return "1.0"

    prefix = content[:offset]
    line_no = prefix.count("\n") + 1
    last_newline = prefix.rfind("\n")
    col_text = prefix if last_newline == -1 else prefix[last_newline + 1 :]

    col_units = len(col_text.encode("utf-16-le")) // 2
    return f"{line_no}.{col_units}"


def text_content(text: tk.Text) -> str:
    return text.get("1.0", "end-1c")


def text_lines(text: tk.Text) -> list[Line]:
    return split_lines(text_content(text))


def set_tab_stops(text: tk.Text, font: tkfont.Font, tab_width: int) -> None:
    width_px = max(1, font.measure(" ") * tab_width)
    text.configure(tabs=(width_px,), tabstyle="wordprocessor")


def _remember_selection(text: tk.Text) -> bool:
    ranges = text.tag_ranges("sel")
    if not ranges:
        return False
    text.mark_set(_SEL_FIRST_MARK, ranges[0])
    text.mark_gravity(_SEL_FIRST_MARK, tk.LEFT)
    text.mark_set(_SEL_LAST_MARK, ranges[-1])
    text.mark_gravity(_SEL_LAST_MARK, tk.RIGHT)
    return True


def _restore_selection(text: tk.Text) -> None:
    with contextlib.suppress(tk.TclError):
        text.tag_remove("sel", "1.0", tk.END)
        text.tag_add("sel", _SEL_FIRST_MARK, _SEL_LAST_MARK)
    for mark in (_SEL_FIRST_MARK, _SEL_LAST_MARK):
        with contextlib.suppress(tk.TclError):
            text.mark_unset(mark)


def apply_replacements_to_text(text: tk.Text, replacements: Sequence[Replacement]) -> bool:
    """Apply a replacement batch to ``text`` as a single undo step.

    Returns ``False`` without touching the widget when the batch does not fit
    the current content. A Tcl failure part way through undoes the edits made
    so far, and only those.
    """

    content = text_content(text)
    try:
        apply_replacements(content, replacements)
    except ReplacementError:
        return False
    if not replacements:
        return True

    try:
        prev_autoseparators = text.cget("autoseparators")
    except tk.TclError:
        prev_autoseparators = None

    had_selection = _remember_selection(text)
    edits = 0
    try:
        text.configure(autoseparators=False)
        text.edit_separator()
        # Last first, so earlier offsets stay valid.
        for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
            start = offset_to_tkindex(content, replacement.start)
            end = offset_to_tkindex(content, replacement.end)
            text.delete(start, end)
            edits += 1
            text.insert(start, replacement.text)
            edits += 1
        text.edit_separator()
    except tk.TclError:
        # With nothing recorded yet, undo would revert the previous user edit.
        if edits:
            with contextlib.suppress(tk.TclError):
                text.edit_undo()
        return False
    finally:
        if had_selection:
            _restore_selection(text)
        if prev_autoseparators is not None:
            with contextlib.suppress(tk.TclError):
                text.configure(autoseparators=prev_autoseparators)
    return True
