"""Shared visual theme for TextPeek desktop views.

Centralizes ttk style tokens so the main window and the content window
render the same look without carrying styling logic in each view.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

RECENT_ITEM_BG = "#d3d3d3"
CONTENT_FONT = ("TkFixedFont", 10)


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk theme to the whole application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = "#f7f7fa"
    border = "#d9dfeb"
    primary = "#6750a4"
    text = "#1c1b1f"
    toast_bg = "#313033"

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure("Title.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 16, "bold"))
    style.configure("Heading.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 12, "bold"))

    style.configure("TButton", padding=(10, 6), bordercolor=border, relief="flat")
    style.configure("Primary.TButton", background=primary, foreground="#ffffff", bordercolor=primary)
    style.map("Primary.TButton", background=[("active", "#4f378b")])

    style.configure("Toast.TFrame", background=toast_bg)
    style.configure("Toast.TLabel", background=toast_bg, foreground="#f4eff4")
    style.configure("Toast.TButton", background=toast_bg, foreground="#d0bcff", relief="flat")
    style.map("Toast.TButton", background=[("active", "#48464c")])
