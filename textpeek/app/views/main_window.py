"""
MainWindowView
---------------
Tkinter main window for TextPeek. This file contains **only View code**: no
file I/O, no persistence. It exposes callback hooks that are connected to the
app controller and the recent-files view model.

The window provides:
  * Title label
  * Scrollable list of recently opened files
  * "Open File" button
  * Transient toast bar with an optional dismiss action
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional

from .file_content_view import FileContentView
from .theme import CONTENT_FONT, RECENT_ITEM_BG, apply_theme
from .view_utils import safe_call
from ...viewmodels.file_content_vm import FileContentVM


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only. Wires UI events to callbacks provided by the app controller and
    renders whatever recent-file labels it is given.
    """

    OnVoid = Optional[Callable[[], None]]
    OnIndex = Optional[Callable[[int], None]]

    def __init__(
        self,
        *,
        on_open_file: OnVoid = None,
        on_recent_selected: OnIndex = None,
        toast_duration_ms: int = 4000,
    ) -> None:
        super().__init__()

        self.title("TextPeek")
        self.geometry("480x640")
        self.minsize(320, 400)
        apply_theme(self)

        self._on_open_file = on_open_file
        self._on_recent_selected = on_recent_selected
        self._toast_duration_ms = toast_duration_ms
        self._toast_after_id: Optional[str] = None
        self.content_windows: list[FileContentView] = []

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        ttk.Label(self, text="TextPeek", style="Title.TLabel").grid(
            row=0, column=0, sticky="w", padx=16, pady=(16, 8)
        )
        self._build_recent_list(self)
        ttk.Button(self, text="Open File", style="Primary.TButton", command=self._open_clicked).grid(
            row=2, column=0, sticky="ew", padx=16, pady=(8, 8)
        )
        self._build_toast_bar(self)

        self.bind("<Control-o>", lambda e: self._open_clicked())

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_recent_list(self, parent: tk.Misc) -> None:
        host = ttk.Frame(parent)
        host.grid(row=1, column=0, sticky="nsew", padx=16)
        host.rowconfigure(0, weight=1)
        host.columnconfigure(0, weight=1)

        self.recent_list = tk.Listbox(
            host,
            activestyle="none",
            background=RECENT_ITEM_BG,
            borderwidth=0,
            highlightthickness=0,
            font=CONTENT_FONT,
        )
        vbar = ttk.Scrollbar(host, orient="vertical", command=self.recent_list.yview)
        self.recent_list.configure(yscrollcommand=vbar.set)
        self.recent_list.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        self.recent_list.bind("<Double-Button-1>", self._recent_activated)
        self.recent_list.bind("<Return>", self._recent_activated)

    def _build_toast_bar(self, parent: tk.Misc) -> None:
        self._toast_bar = ttk.Frame(parent, style="Toast.TFrame", padding=(12, 8))
        self._toast_bar.columnconfigure(0, weight=1)
        self.toast_var = tk.StringVar(value="")
        ttk.Label(self._toast_bar, textvariable=self.toast_var, style="Toast.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        self._toast_action = ttk.Button(self._toast_bar, style="Toast.TButton", command=self.hide_toast)
        # shown on demand by show_toast

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _open_clicked(self) -> None:
        safe_call(self._on_open_file, on_error=lambda exc: self.show_toast(str(exc)))

    def _recent_activated(self, event=None) -> None:
        selection = self.recent_list.curselection()
        if not selection:
            return
        safe_call(self._on_recent_selected, int(selection[0]), on_error=lambda exc: self.show_toast(str(exc)))

    # ------------------------------------------------------------------
    # Public API (called by the controller / view models)
    # ------------------------------------------------------------------
    def set_recent_files(self, labels: Iterable[str]) -> None:
        """Replace the recent list content with ``labels`` in order."""
        self.recent_list.delete(0, tk.END)
        for label in labels:
            self.recent_list.insert(tk.END, label)

    def show_toast(self, message: str, action_label: Optional[str] = None) -> None:
        """Show a transient message; it hides itself after the toast duration."""
        self.toast_var.set(message)
        if action_label:
            self._toast_action.configure(text=action_label)
            self._toast_action.grid(row=0, column=1, sticky="e", padx=(12, 0))
        else:
            self._toast_action.grid_remove()
        self._toast_bar.grid(row=3, column=0, sticky="ew", padx=16, pady=(0, 16))
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
        self._toast_after_id = self.after(self._toast_duration_ms, self.hide_toast)

    def hide_toast(self) -> None:
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
            self._toast_after_id = None
        self.toast_var.set("")
        self._toast_bar.grid_remove()

    def open_content_window(self, file_name: str, file_content: str) -> None:
        """Display handoff: show name and content read-only in a new window."""
        window = FileContentView(self, FileContentVM(file_name=file_name, file_content=file_content))
        self.content_windows.append(window)
        window.bind("<Destroy>", lambda e, w=window: self._forget_window(w, e), add="+")

    def _forget_window(self, window: FileContentView, event) -> None:
        if event.widget is window and window in self.content_windows:
            self.content_windows.remove(window)


if __name__ == "__main__":
    # Minimal manual preview (no real callbacks wired).
    win = MainWindowView()
    win.set_recent_files(["notes.txt", "profile.pit", "part.gcode"])
    win.show_toast("Unsupported file type", action_label="Dismiss")
    win.mainloop()
