from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from .theme import CONTENT_FONT
from ...viewmodels.file_content_vm import FileContentVM


class FileContentView(tk.Toplevel):
    """Read-only window showing one file's name and content."""

    def __init__(self, master: tk.Misc, vm: FileContentVM) -> None:
        super().__init__(master)
        self.vm = vm
        self.title(vm.title)
        self.geometry("640x720")

        self.rowconfigure(2, weight=1)
        self.columnconfigure(0, weight=1)

        bar = ttk.Frame(self)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        bar.columnconfigure(1, weight=1)
        ttk.Button(bar, text="← Back", command=self.destroy).grid(row=0, column=0, sticky="w")
        ttk.Label(bar, text=vm.title, style="Heading.TLabel").grid(row=0, column=1, sticky="w", padx=(12, 0))

        ttk.Label(self, text=vm.heading, style="Heading.TLabel").grid(
            row=1, column=0, sticky="w", padx=16, pady=(8, 8)
        )

        host = ttk.Frame(self)
        host.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 16))
        host.rowconfigure(0, weight=1)
        host.columnconfigure(0, weight=1)

        self.text = tk.Text(host, wrap="word", font=CONTENT_FONT, borderwidth=0, highlightthickness=0)
        vbar = ttk.Scrollbar(host, orient="vertical", command=self.text.yview)
        self.text.configure(yscrollcommand=vbar.set)
        self.text.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        self.text.insert("1.0", vm.body)
        self.text.configure(state="disabled")

        self.bind("<Escape>", lambda e: self.destroy())
