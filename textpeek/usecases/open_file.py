"""Use cases for opening a picked file and re-opening a recent entry.

The workflow resolves the display name, validates the extension, reads the
content, and appends the record to the recent list. Handing the content to
the display view is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.entities import UNKNOWN_NAME, FileRecord, RecentFilesList, is_supported_name
from ..domain.errors import ContentReadFailed, NameResolutionFailed, PersistenceFailure, UnsupportedFileType
from ..domain.ports import DocumentPort, FileReference
from ..domain.recent_files import append_record
from .save_recent_files import SaveRecentFiles

_log = logging.getLogger(__name__)


@dataclass
class OpenFileResult:
    """Outcome of a successful open.

    Attributes:
        record: The opened file.
        content: Full text content (``""`` when a lenient read failed).
        recent: Recent list after the open.
        added: ``True`` when the record was new and the list was persisted.
        persist_error: Set when the list changed but could not be saved; the
            in-memory list still contains the record.
    """

    record: FileRecord
    content: str
    recent: RecentFilesList
    added: bool = False
    persist_error: Optional[PersistenceFailure] = None


@dataclass
class ReadContent:
    """Read a record's content under the configured failure policy.

    ``strict=False`` keeps the historical behaviour: the error is logged and
    the content is empty. ``strict=True`` raises :class:`ContentReadFailed`.
    """

    documents: DocumentPort
    strict: bool = False

    def __call__(self, record: FileRecord) -> str:
        try:
            return self.documents.read_text(record.reference)
        except Exception as exc:
            if self.strict:
                raise ContentReadFailed(record.display_name, str(exc))
            _log.warning("Reading %s failed; showing empty content", record.display_name, exc_info=True)
            return ""


def resolve_display_name(documents: DocumentPort, reference: FileReference) -> str:
    """Return the host display name, or ``"Unknown"`` when lookup fails."""
    try:
        name = documents.display_name(reference)
    except Exception as exc:
        failure = NameResolutionFailed(reference, str(exc))
        _log.info("%s; using placeholder", failure.message)
        return UNKNOWN_NAME
    return name or UNKNOWN_NAME


@dataclass
class OpenFile:
    """Open a newly picked reference (steps after the picker)."""

    documents: DocumentPort
    save_recent: SaveRecentFiles
    read_content: Optional[ReadContent] = field(default=None)

    def __post_init__(self) -> None:
        if self.read_content is None:
            self.read_content = ReadContent(self.documents)

    def __call__(self, reference: FileReference, recent: RecentFilesList) -> OpenFileResult:
        """Validate, read, and record ``reference``.

        Raises:
            UnsupportedFileType: The name does not end with an allowed
                extension. Nothing is read or persisted.
            ContentReadFailed: Strict read policy and the read failed.
                Nothing is persisted.
        """
        name = resolve_display_name(self.documents, reference)
        if not is_supported_name(name):
            _log.info("Rejected unsupported file %s", name)
            raise UnsupportedFileType(name)

        record = FileRecord(display_name=name, reference=reference)
        content = self.read_content(record)  # type: ignore[misc]

        updated = append_record(recent, record)
        result = OpenFileResult(record=record, content=content, recent=updated)
        if len(updated) == len(recent):
            return result

        result.added = True
        try:
            self.save_recent(updated)
        except PersistenceFailure as exc:
            _log.error("%s", exc.message)
            result.persist_error = exc
        return result


@dataclass
class ReopenRecentFile:
    """Re-open an entry already in the recent list.

    Extension validation is skipped and the list is left untouched.
    """

    read_content: ReadContent

    def __call__(self, record: FileRecord, recent: RecentFilesList) -> OpenFileResult:
        content = self.read_content(record)
        return OpenFileResult(record=record, content=content, recent=tuple(recent))


__all__ = [
    "OpenFile",
    "OpenFileResult",
    "ReadContent",
    "ReopenRecentFile",
    "resolve_display_name",
]
