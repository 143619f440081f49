#!/usr/bin/env python3
"""
FixMixedTabs — Tkinter editor that spots mixed tab/space indentation
and offers to tabify or untabify the document.
"""

import contextlib
import logging
import os
import re
import sys
import tkinter as tk
import tkinter.font as tkfont
from collections.abc import Callable, Iterable, Sequence
from tkinter import filedialog, messagebox, ttk

from .columns import InvalidTabWidthError, check_tab_width
from .config import (
    CONFIG_PATH,
    DEFAULTS,
    ConfigSaveError,
    load_config,
    save_config,
    tab_width_from_config,
)
from .converter import Replacement
from .lines import Line
from .ui.helpers import (
    apply_replacements_to_text,
    set_tab_stops,
    text_content,
    text_lines,
)
from .ui.info_bar import FileAction, InfoBarAdapter, InfoBarController
from .ui.menus import AppMenus
from .ui.widgets import InfoBarFrame

logger = logging.getLogger(__name__)


class FixMixedTabsApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("FixMixedTabs")
        self.geometry("1000x700")

        self.cfg = load_config()
        with contextlib.suppress(ValueError):
            logging.getLogger("fixmixedtabs").setLevel(
                str(self.cfg.get("log_level", DEFAULTS["log_level"])).upper()
            )
        try:
            self.tab_width = tab_width_from_config(self.cfg)
        except InvalidTabWidthError as exc:
            logger.warning("%s; using %d", exc, DEFAULTS["tab_width"])
            self.tab_width = DEFAULTS["tab_width"]
        self.app_font = tkfont.Font(family=self.cfg["font_family"], size=self.cfg["font_size"])
        self.path: str | None = None
        self.dirty = False
        self._suppress_modified = False

        self._apply_open_maximized(self.cfg.get("open_maximized", False))
        with contextlib.suppress(tk.TclError):
            self.style = ttk.Style(self)
            if "clam" in self.style.theme_names():
                self.style.theme_use("clam")

        self._build_editor()
        self.controller = InfoBarController(
            InfoBarAdapter(
                get_lines=self._document_lines,
                get_tab_width=lambda: self.tab_width,
                show=self.info_bar.show,
                hide=self.info_bar.hide,
                apply_replacements=self._apply_replacements,
                focus_editor=self.text.focus_set,
            )
        )
        self.menus = AppMenus(self)
        self.menus.attach()
        self._register_shortcuts()

        self.text.bind("<FocusIn>", self._on_text_focus, add="+")
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._update_title()

    def _build_editor(self) -> None:
        self.info_bar = InfoBarFrame(
            self,
            on_tabify=self.tabify,
            on_untabify=self.untabify,
            on_hide=lambda: self.controller.hide(),
            on_dont_show_again=lambda: self.controller.dont_show_again(),
            height_px=self.cfg.get("info_bar_height_px", DEFAULTS["info_bar_height_px"]),
            duration_ms=self.cfg.get(
                "info_bar_animation_ms", DEFAULTS["info_bar_animation_ms"]
            ),
            animate=self.cfg.get("animate_info_bar", True),
            bg=self.cfg.get("info_bar_bg", DEFAULTS["info_bar_bg"]),
        )
        self.info_bar.pack(side=tk.TOP, fill=tk.X)

        text_frame = ttk.Frame(self)
        text_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        text_frame.grid_rowconfigure(0, weight=1)
        text_frame.grid_columnconfigure(0, weight=1)

        self.text = tk.Text(
            text_frame,
            undo=True,
            maxundo=-1,
            wrap=tk.NONE,
            highlightthickness=0,
            borderwidth=0,
            relief=tk.FLAT,
            font=self.app_font,
            fg=self.cfg["fg"],
            bg=self.cfg["bg"],
        )
        self.text.grid(row=0, column=0, sticky="nsew")
        yscroll = ttk.Scrollbar(text_frame, orient=tk.VERTICAL, command=self.text.yview)
        yscroll.grid(row=0, column=1, sticky="ns")
        xscroll = ttk.Scrollbar(text_frame, orient=tk.HORIZONTAL, command=self.text.xview)
        xscroll.grid(row=1, column=0, sticky="ew")
        self.text.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)
        set_tab_stops(self.text, self.app_font, self.tab_width)

        def on_modified(event=None):
            if self._suppress_modified:
                self.text.edit_modified(False)
            elif self.text.edit_modified():
                self._set_dirty(True)
                self.text.edit_modified(False)

        self.text.bind("<<Modified>>", on_modified)

    def _apply_open_maximized(self, open_maximized: bool) -> None:
        if not open_maximized:
            return
        with contextlib.suppress(tk.TclError):
            try:
                self.state("zoomed")
            except tk.TclError:
                self.attributes("-zoomed", True)

    def _make_shortcut_handler(
        self, callback: Callable[[], None]
    ) -> Callable[[tk.Event], str]:
        def handler(_event: tk.Event | None = None) -> str:
            callback()
            return "break"

        return handler

    @staticmethod
    def _uppercase_keysym_sequence(seq: str) -> str | None:
        match = re.fullmatch(r"<(.+)-([a-z])>", seq)
        if not match:
            return None
        prefix, key = match.groups()
        return f"<{prefix}-{key.upper()}>"

    def _register_shortcuts(self) -> None:
        def add(sequence: str, callback: Callable[[], None]) -> None:
            handler = self._make_shortcut_handler(callback)
            self.bind_all(sequence, handler, add="+")
            uppercase = self._uppercase_keysym_sequence(sequence)
            if uppercase:
                self.bind_all(uppercase, handler, add="+")

        add("<Control-o>", self._open_file)
        add("<Control-s>", self._save_file)
        add("<Control-Shift-s>", self._save_file_as)
        add("<Control-q>", self._on_close)
        add("<Alt-c>", self.check_indentation)
        add("<Alt-t>", self.tabify)
        add("<Alt-u>", self.untabify)

    # ---------- Document ----------

    def _document_lines(self) -> list[Line]:
        return text_lines(self.text)

    def _apply_replacements(self, replacements: list[Replacement]) -> bool:
        return apply_replacements_to_text(self.text, replacements)

    def _on_text_focus(self, _event=None) -> None:
        if self.cfg.get("check_on_focus", True):
            self.controller.on_focus()

    def _set_dirty(self, dirty: bool) -> None:
        self.dirty = dirty
        self._update_title()

    def _update_title(self) -> None:
        name = os.path.basename(self.path) if self.path else "Untitled"
        marker = "*" if self.dirty else ""
        self.title(f"{marker}{name} - FixMixedTabs")

    def set_tab_width(self, tab_width: int) -> None:
        try:
            self.tab_width = check_tab_width(tab_width)
        except InvalidTabWidthError as exc:
            self._show_error("Tab Width", "Invalid tab width.", detail=str(exc))
            return
        self.cfg["tab_width"] = self.tab_width
        set_tab_stops(self.text, self.app_font, self.tab_width)
        logger.debug("Tab width set to %d", self.tab_width)

    def set_animate_info_bar(self, animate: bool) -> None:
        self.cfg["animate_info_bar"] = bool(animate)
        self.info_bar.animate = bool(animate)

    def check_indentation(self) -> None:
        if not self.controller.enabled:
            return
        if not self.controller.check():
            self._show_message("Check Indentation", "No mixed indentation found.")

    def tabify(self) -> None:
        if not self.controller.tabify():
            self._show_error("Tabify", "Could not tabify the document.")

    def untabify(self) -> None:
        if not self.controller.untabify():
            self._show_error("Untabify", "Could not untabify the document.")

    # ---------- Dialogs ----------

    def _show_error(self, title: str, message: str, detail: str | None = None) -> None:
        messagebox.showerror(title, message, detail=detail, parent=self)

    def _show_message(self, title: str, message: str, detail: str | None = None) -> None:
        messagebox.showinfo(title, message, detail=detail, parent=self)

    def _persist_config(self) -> None:
        try:
            save_config(self.cfg)
        except ConfigSaveError as exc:
            self._show_error(
                "Config Save Failed",
                f"Could not save settings to {CONFIG_PATH}.",
                detail=str(exc),
            )

    # ---------- File Ops + Dirty ----------

    def _load_file(self, path: str) -> bool:
        normalized = os.path.abspath(os.path.expanduser(path))
        try:
            with open(normalized, encoding="utf-8") as f:
                data = f.read()
        except Exception as e:
            self._show_error("Open Error", "Could not open the file.", detail=str(e))
            return False
        self._suppress_modified = True
        self.text.delete("1.0", tk.END)
        self.text.insert("1.0", data)
        self.text.edit_reset()
        self.text.mark_set("insert", "1.0")
        self.text.edit_modified(False)
        self._suppress_modified = False
        self.path = normalized
        self._set_dirty(False)
        logger.debug("Loaded %s", normalized)
        if self.cfg.get("check_on_load", True):
            self.controller.on_file_action(FileAction.CONTENT_LOADED)
        return True

    def open_files(self, paths: Iterable[str]) -> None:
        path_list = [p for p in paths if p]
        if not path_list:
            return
        if len(path_list) > 1:
            logger.warning("Only one document per window; opening %s", path_list[0])
        self._load_file(path_list[0])

    def _open_file(self) -> None:
        if not self._maybe_save():
            return
        initial_dir = os.path.dirname(self.path) if self.path else None
        path = filedialog.askopenfilename(parent=self, initialdir=initial_dir)
        if path:
            self._load_file(path)

    def _write_file(self, path: str) -> bool:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text_content(self.text))
        except Exception as e:
            self._show_error("Save Error", "Could not save the file.", detail=str(e))
            return False
        self.path = path
        self.text.edit_modified(False)
        self._set_dirty(False)
        if self.cfg.get("check_on_save", True):
            self.controller.on_file_action(FileAction.CONTENT_SAVED)
        return True

    def _save_file(self) -> None:
        if not self.path:
            self._save_file_as()
            return
        self._write_file(self.path)

    def _save_file_as(self) -> None:
        initial_dir = os.path.dirname(self.path) if self.path else None
        default_name = os.path.basename(self.path) if self.path else "Untitled.txt"
        path = filedialog.asksaveasfilename(
            parent=self, initialdir=initial_dir, initialfile=default_name
        )
        if path:
            self._write_file(path)

    def _maybe_save(self) -> bool:
        if not self.dirty:
            return True
        title = os.path.basename(self.path) if self.path else "Untitled"
        resp = messagebox.askyesnocancel("Unsaved Changes", f"Save changes to '{title}'?")
        if resp is None:
            return False
        if resp:
            self._save_file()
            if self.dirty:
                return False
        return True

    def _on_close(self):
        if not self._maybe_save():
            return
        self.info_bar.animate = False
        self.controller.on_view_closed()
        self._persist_config()
        self.destroy()


def main(
    argv: Sequence[str] | None = None,
    app_factory: Callable[[], FixMixedTabsApp] = FixMixedTabsApp,
) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = list(sys.argv[1:] if argv is None else argv)
    app = app_factory()
    if args:
        open_files = getattr(app, "open_files", None)
        if callable(open_files):
            open_files(args)
    app.mainloop()


if __name__ == "__main__":
    main()
