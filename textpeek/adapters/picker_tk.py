"""Tk native file dialog as a :class:`FilePickerPort`.

MIME hints are translated into ``filedialog`` filetype rows; the wildcard
hint always keeps an "All files" row so unsupported files can still be
chosen and rejected by the open workflow with a visible message.
"""

from __future__ import annotations

import os
from tkinter import filedialog
from typing import List, Optional, Sequence, Tuple
import tkinter as tk

from textpeek.adapters.documents_local import LocalDocuments
from textpeek.domain.entities import ALLOWED_EXTENSIONS
from textpeek.domain.ports import FilePickerPort, FileReference

_MIME_FILETYPES = {
    "text/plain": ("Text files", tuple(f"*{ext}" for ext in sorted(ALLOWED_EXTENSIONS))),
    "application/octet-stream": ("Binary files", ("*.bin", "*.dat")),
    "*/*": ("All files", ("*",)),
}


def filetypes_for(mime_types: Sequence[str]) -> List[Tuple[str, Tuple[str, ...]]]:
    rows: List[Tuple[str, Tuple[str, ...]]] = []
    for mime in mime_types:
        row = _MIME_FILETYPES.get(mime)
        if row and row not in rows:
            rows.append(row)
    if not rows:
        rows.append(_MIME_FILETYPES["*/*"])
    return rows


class TkFilePicker(FilePickerPort):
    """Modal ``askopenfilename`` bound to a parent window.

    The directory of the last chosen file becomes the next dialog's start.
    """

    def __init__(
        self,
        parent: Optional[tk.Misc] = None,
        *,
        initial_dir: Optional[str] = None,
        title: str = "Open File",
    ) -> None:
        self.parent = parent
        self.last_dir = initial_dir
        self.title = title

    def pick(self, mime_types: Sequence[str]) -> Optional[FileReference]:
        options = {
            "filetypes": filetypes_for(mime_types),
            "title": self.title,
        }
        if self.parent is not None:
            options["parent"] = self.parent
        if self.last_dir:
            options["initialdir"] = self.last_dir
        path = filedialog.askopenfilename(**options)
        if not path:
            return None
        self.last_dir = os.path.dirname(path) or self.last_dir
        return LocalDocuments.to_reference(path)


__all__ = ["TkFilePicker", "filetypes_for"]
