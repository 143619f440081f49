import tkinter as tk

TAB_WIDTH_CHOICES = tuple(range(1, 9))


class AppMenus:
    def __init__(self, app):
        self.app = app
        self.menubar = tk.Menu(app)
        self._build_menus()

    def _build_menus(self) -> None:
        app = self.app
        menubar = self.menubar

        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="Open…", accelerator="Ctrl+O", command=app._open_file)
        filemenu.add_command(label="Save", accelerator="Ctrl+S", command=app._save_file)
        filemenu.add_command(
            label="Save As…", accelerator="Ctrl+Shift+S", command=app._save_file_as
        )
        filemenu.add_separator()
        filemenu.add_command(label="Quit", accelerator="Ctrl+Q", command=app._on_close)
        menubar.add_cascade(label="File", menu=filemenu)

        editmenu = tk.Menu(menubar, tearoff=0)
        editmenu.add_command(
            label="Undo",
            accelerator="Ctrl+Z",
            command=lambda: app.text.event_generate("<<Undo>>"),
        )
        editmenu.add_command(
            label="Redo",
            accelerator="Ctrl+Shift+Z",
            command=lambda: app.text.event_generate("<<Redo>>"),
        )
        editmenu.add_separator()
        editmenu.add_command(
            label="Check Indentation", accelerator="Alt+C", command=app.check_indentation
        )
        editmenu.add_command(label="Tabify", accelerator="Alt+T", command=app.tabify)
        editmenu.add_command(label="Untabify", accelerator="Alt+U", command=app.untabify)
        menubar.add_cascade(label="Edit", menu=editmenu)

        viewmenu = tk.Menu(menubar, tearoff=0)
        self.tab_width_var = tk.IntVar(value=app.tab_width)
        widthmenu = tk.Menu(viewmenu, tearoff=0)
        for width in TAB_WIDTH_CHOICES:
            widthmenu.add_radiobutton(
                label=str(width),
                value=width,
                variable=self.tab_width_var,
                command=lambda: app.set_tab_width(self.tab_width_var.get()),
            )
        viewmenu.add_cascade(label="Tab Width", menu=widthmenu)
        self.animate_var = tk.BooleanVar(value=app.cfg.get("animate_info_bar", True))
        viewmenu.add_checkbutton(
            label="Animate Info Bar",
            variable=self.animate_var,
            command=lambda: app.set_animate_info_bar(self.animate_var.get()),
        )
        menubar.add_cascade(label="View", menu=viewmenu)

    def attach(self) -> None:
        self.app.config(menu=self.menubar)
