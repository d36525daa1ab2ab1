"""Filesystem-backed document adapter.

References are ``file://`` URIs so the rest of the app treats them as opaque
strings. Only this module turns them back into paths.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from textpeek.domain.ports import DocumentPort, FileReference

_log = logging.getLogger(__name__)


class LocalDocuments(DocumentPort):
    """Resolve and read ``file://`` references on the local filesystem."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    @staticmethod
    def to_reference(path: Union[str, Path]) -> FileReference:
        return Path(path).expanduser().resolve().as_uri()

    @staticmethod
    def to_path(reference: FileReference) -> Path:
        parsed = urlparse(reference)
        if parsed.scheme != "file":
            raise ValueError(f"Unsupported reference scheme: {reference!r}")
        if parsed.netloc and parsed.netloc != "localhost":
            raise ValueError(f"Remote file references are not supported: {reference!r}")
        return Path(url2pathname(parsed.path))

    def display_name(self, reference: FileReference) -> str:
        path = self.to_path(reference)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return path.name

    def read_text(self, reference: FileReference) -> str:
        path = self.to_path(reference)
        _log.debug("Reading %s", path)
        with path.open("r", encoding=self.encoding, errors="replace") as fh:
            return fh.read()


__all__ = ["LocalDocuments"]
