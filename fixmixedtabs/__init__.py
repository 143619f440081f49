"""Detect and fix mixed tab/space indentation."""
from __future__ import annotations

from .columns import InvalidTabWidthError, visual_column
from .converter import Replacement, ReplacementError, apply_replacements, tabify, untabify
from .detector import classify_line, detect
from .lines import Line, LineBoundsError, split_lines

__all__ = [
    "InvalidTabWidthError",
    "Line",
    "LineBoundsError",
    "Replacement",
    "ReplacementError",
    "apply_replacements",
    "classify_line",
    "detect",
    "split_lines",
    "tabify",
    "untabify",
    "visual_column",
]
