"""Domain package exports for value objects and recent-file operations."""

from .entities import (
    ALLOWED_EXTENSIONS,
    UNKNOWN_NAME,
    FileRecord,
    FileReference,
    RecentFilesList,
    is_supported_name,
)
from .recent_files import append_record, contains_reference, references_of

__all__ = [
    "ALLOWED_EXTENSIONS",
    "UNKNOWN_NAME",
    "FileRecord",
    "FileReference",
    "RecentFilesList",
    "append_record",
    "contains_reference",
    "is_supported_name",
    "references_of",
]
