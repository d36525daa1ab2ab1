from __future__ import annotations
from typing import Iterable, Optional, Protocol, Sequence, Set

from .entities import FileReference

PICKER_MIME_TYPES: tuple[str, ...] = ("text/plain", "application/octet-stream", "*/*")


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class FilePickerPort(Protocol):
    """Native file selection surface.

    Returns one opaque reference, or ``None`` when the user dismisses it.
    """

    def pick(self, mime_types: Sequence[str]) -> Optional[FileReference]: ...


class DocumentPort(Protocol):
    """Host lookup and read primitives for opaque file references."""

    def display_name(self, reference: FileReference) -> str: ...  # may raise
    def read_text(self, reference: FileReference) -> str: ...  # may raise OSError


class RecentFilesStoragePort(Protocol):
    """Durable string set holding the recent file references."""

    def load_recent_references(self) -> Set[FileReference]: ...
    def save_recent_references(self, references: Iterable[FileReference]) -> None: ...
