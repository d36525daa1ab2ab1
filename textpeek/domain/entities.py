from __future__ import annotations

"""Domain value objects shared across adapters, use-cases, and view models."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

FileReference = str

ALLOWED_EXTENSIONS: FrozenSet[str] = frozenset({".txt", ".pim", ".pit", ".gcode"})
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class FileRecord:
    """A previously or currently opened file.

    Identity is the opaque ``reference`` issued by the host. ``display_name``
    is informational only and does not take part in equality or hashing.
    """

    display_name: str = field(compare=False)
    """Name shown in the recent list and the content window title."""

    reference: FileReference
    """Opaque host handle (a ``file://`` URI for the local adapter)."""

    def __post_init__(self) -> None:
        if not isinstance(self.reference, str) or not self.reference.strip():
            raise ValueError("FileRecord reference must be a non-empty string.")
        if not isinstance(self.display_name, str):
            raise ValueError("FileRecord display_name must be a string.")

    def __str__(self) -> str:
        return self.display_name


RecentFilesList = Tuple[FileRecord, ...]


def is_supported_name(name: str) -> bool:
    """True when ``name`` ends with an allow-listed extension (case-insensitive)."""
    lowered = (name or "").lower()
    return any(lowered.endswith(ext) for ext in ALLOWED_EXTENSIONS)


__all__ = [
    "ALLOWED_EXTENSIONS",
    "UNKNOWN_NAME",
    "FileRecord",
    "FileReference",
    "RecentFilesList",
    "is_supported_name",
]
