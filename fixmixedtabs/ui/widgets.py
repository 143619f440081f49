from __future__ import annotations

import contextlib
import tkinter as tk
from collections.abc import Callable
from tkinter import ttk

INFO_BAR_MESSAGE = "This file contains mixed tabs and spaces."
_FRAME_MS = 15


class InfoBarFrame(tk.Frame):
    """Notification bar that slides open above the editor.

    The bar starts collapsed. With ``animate`` off the height changes in one
    step.
    """

    def __init__(
        self,
        master: tk.Misc,
        *,
        on_tabify: Callable[[], None],
        on_untabify: Callable[[], None],
        on_hide: Callable[[], None],
        on_dont_show_again: Callable[[], None],
        height_px: int = 27,
        duration_ms: int = 175,
        animate: bool = True,
        bg: str = "#fff3c4",
    ) -> None:
        super().__init__(master, height=0, bg=bg, borderwidth=0, highlightthickness=0)
        self.pack_propagate(False)
        self.height_px = max(1, int(height_px))
        self.duration_ms = max(0, int(duration_ms))
        self.animate = animate
        self._current_height = 0
        self._animation_job: str | None = None

        inner = tk.Frame(self, bg=bg)
        inner.pack(fill=tk.BOTH, expand=True, padx=6)
        tk.Label(inner, text=INFO_BAR_MESSAGE, bg=bg, anchor="w").pack(
            side=tk.LEFT, fill=tk.X, expand=True
        )
        ttk.Button(inner, text="Don't show again", command=on_dont_show_again).pack(
            side=tk.RIGHT, padx=(4, 0)
        )
        ttk.Button(inner, text="Hide", command=on_hide).pack(side=tk.RIGHT, padx=(4, 0))
        ttk.Button(inner, text="Untabify", command=on_untabify).pack(
            side=tk.RIGHT, padx=(4, 0)
        )
        ttk.Button(inner, text="Tabify", command=on_tabify).pack(side=tk.RIGHT, padx=(4, 0))

    def show(self) -> None:
        self._change_height_to(self.height_px)

    def hide(self) -> None:
        self._change_height_to(0)

    def _cancel_animation(self) -> None:
        if self._animation_job is not None:
            with contextlib.suppress(tk.TclError):
                self.after_cancel(self._animation_job)
            self._animation_job = None

    def _set_height(self, height: int) -> None:
        self._current_height = height
        self.configure(height=height)

    def _change_height_to(self, target: int) -> None:
        self._cancel_animation()
        if not self.animate or self.duration_ms == 0:
            self._set_height(target)
            return

        start = self._current_height
        steps = max(1, self.duration_ms // _FRAME_MS)

        def step(i: int = 1) -> None:
            height = round(start + (target - start) * i / steps)
            self._set_height(height)
            if i < steps:
                self._animation_job = self.after(_FRAME_MS, step, i + 1)
            else:
                self._animation_job = None

        step()
