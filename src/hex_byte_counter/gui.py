# hex_byte_counter/gui.py

from __future__ import annotations

import logging
import tkinter as tk
import tkinter.filedialog as fdialog
import tkinter.messagebox as mbox
from pathlib import Path
from tkinter import ttk

from .__about__ import APP_TITLE
from .gui_menu import build_menubar, show_about_dialog, show_shortcuts_dialog
from .logic import count_hex_bytes, selection_status

logger = logging.getLogger(__name__)


class SelectionCounterApp:
    """Text pane with a status bar showing the hex byte count of the selection."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        root.title(APP_TITLE)
        root.minsize(640, 400)

        self.main = ttk.Frame(root, padding=12)
        self.main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)
        self.main.columnconfigure(0, weight=1)
        self.main.rowconfigure(0, weight=1)

        self.status_var = tk.StringVar(value="")

        build_menubar(self.root, self)
        self._build_editor(row=0)
        self._build_status_bar(row=1)

        self._update_status()


    # ----------------- Layout -----------------
    def _build_editor(self, row: int) -> None:
        self.text = tk.Text(self.main, wrap="none", undo=True, font="TkFixedFont")
        self.text.grid(row=row, column=0, sticky="nsew")

        yscroll = ttk.Scrollbar(self.main, orient="vertical", command=self.text.yview)
        yscroll.grid(row=row, column=1, sticky="ns")
        xscroll = ttk.Scrollbar(self.main, orient="horizontal", command=self.text.xview)
        xscroll.grid(row=row + 1, column=0, sticky="ew")
        self.text.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)

        # Fired by Tk whenever the selection range changes
        self.text.bind("<<Selection>>", lambda _e: self._update_status())

    def _build_status_bar(self, row: int) -> None:
        bar = ttk.Frame(self.main)
        bar.grid(row=row + 1, column=0, columnspan=2, sticky="ew", pady=(6, 0))
        bar.columnconfigure(0, weight=1)

        self.status_label = ttk.Label(bar, textvariable=self.status_var, anchor="e")
        self.status_label.grid(row=0, column=1, sticky="e")


    # ----------------- Selection -----------------
    def selected_text(self) -> str:
        try:
            return self.text.get("sel.first", "sel.last")
        except tk.TclError:
            # No selection
            return ""

    def _update_status(self) -> None:
        status = selection_status(self.selected_text())
        if status is None:
            self.status_var.set("")
            self.status_label.grid_remove()
            return
        logger.debug("selection status: %s", status)
        self.status_var.set(status)
        self.status_label.grid()


    # ----------------- Menu commands -----------------
    def _open_file(self) -> None:
        path = fdialog.askopenfilename(parent=self.root, title="Open source file")
        if not path:
            return
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not open %s: %s", path, exc)
            mbox.showerror("Open failed", f"{path}\n\n{exc}", parent=self.root)
            return
        self.text.delete("1.0", "end")
        self.text.insert("1.0", content)
        self._update_status()

    def _clear_text(self) -> None:
        self.text.delete("1.0", "end")
        self._update_status()

    def _select_all(self) -> None:
        self.text.tag_add("sel", "1.0", "end-1c")
        self._update_status()

    def _copy_count(self) -> None:
        selection = self.selected_text()
        if not selection:
            return
        self.root.clipboard_clear()
        self.root.clipboard_append(str(count_hex_bytes(selection)))

    def _show_about(self):
        show_about_dialog(self, self.root)

    def _show_shortcuts(self):
        show_shortcuts_dialog(self, self.root)


def run() -> None:
    root = tk.Tk()
    SelectionCounterApp(root)
    root.mainloop()


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    run()


if __name__ == "__main__":
    main()
