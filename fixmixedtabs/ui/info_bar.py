from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, Flag, auto

from ..converter import Replacement, tabify, untabify
from ..detector import detect
from ..lines import Line

logger = logging.getLogger(__name__)


class InfoBarState(Enum):
    HIDDEN = "hidden"
    SHOWN = "shown"
    DISABLED = "disabled"


class FileAction(Flag):
    CONTENT_LOADED = auto()
    CONTENT_SAVED = auto()
    RENAMED = auto()


@dataclass
class InfoBarAdapter:
    """Bridges the info bar logic to a concrete editor and widget."""

    get_lines: Callable[[], Sequence[Line | str]]
    get_tab_width: Callable[[], int]
    show: Callable[[], None]
    hide: Callable[[], None]
    apply_replacements: Callable[[list[Replacement]], bool]
    focus_editor: Callable[[], None] | None = None


class InfoBarController:
    """Decides when the mixed-indentation bar is shown for one editor view.

    The controller is UI-agnostic; the :class:`InfoBarAdapter` supplies the
    document lines and the widget operations. Once disabled, either by the
    user or because the view closed, every later event is ignored.
    """

    def __init__(self, adapter: InfoBarAdapter) -> None:
        self.adapter = adapter
        self.state = InfoBarState.HIDDEN
        self._awaiting_focus = True

    @property
    def enabled(self) -> bool:
        return self.state is not InfoBarState.DISABLED

    def _set_state(self, state: InfoBarState) -> None:
        if state is self.state:
            return
        logger.debug("Info bar %s -> %s", self.state.value, state.value)
        self.state = state

    def check(self) -> bool:
        """Run detection and show the bar when the document is mixed."""
        if not self.enabled:
            return False
        mixed = detect(self.adapter.get_lines(), self.adapter.get_tab_width())
        if mixed and self.state is InfoBarState.HIDDEN:
            self.adapter.show()
            self._set_state(InfoBarState.SHOWN)
        return mixed

    def on_focus(self) -> None:
        # Only the first focus triggers a check.
        if not self._awaiting_focus or not self.enabled:
            return
        self._awaiting_focus = False
        self.check()

    def on_file_action(self, action: FileAction) -> None:
        if not self.enabled:
            return
        if action & (FileAction.CONTENT_LOADED | FileAction.CONTENT_SAVED):
            self.check()

    def on_view_closed(self) -> None:
        self.disable()

    def tabify(self) -> bool:
        return self._convert(tabify, "tabify")

    def untabify(self) -> bool:
        return self._convert(untabify, "untabify")

    def _convert(
        self,
        convert: Callable[[Sequence[Line | str], int], list[Replacement]],
        name: str,
    ) -> bool:
        replacements = convert(self.adapter.get_lines(), self.adapter.get_tab_width())
        if replacements and not self.adapter.apply_replacements(replacements):
            logger.warning("Could not %s: %d replacements rejected", name, len(replacements))
            return False
        logger.debug("Applied %s to %d lines", name, len(replacements))
        self.hide()
        return True

    def hide(self) -> None:
        if self.state is not InfoBarState.SHOWN:
            return
        if self.adapter.focus_editor is not None:
            self.adapter.focus_editor()
        self.adapter.hide()
        self._set_state(InfoBarState.HIDDEN)

    def dont_show_again(self) -> None:
        self.disable()

    def disable(self) -> None:
        if not self.enabled:
            return
        self.hide()
        self._set_state(InfoBarState.DISABLED)
