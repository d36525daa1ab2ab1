from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.entities import FileRecord, RecentFilesList
from ..domain.ports import DocumentPort, RecentFilesStoragePort, UseCaseError

_log = logging.getLogger(__name__)


@dataclass
class LoadRecentFiles:
    storage: RecentFilesStoragePort
    documents: DocumentPort

    def __call__(self) -> RecentFilesList:
        """Rebuild the recent list from the stored reference set.

        Entries whose name lookup fails are dropped silently. The order of
        the result is unspecified because the store keeps a set.
        """
        try:
            references = self.storage.load_recent_references()
        except Exception as exc:
            raise UseCaseError("LOAD_RECENT_FAILED", f"Could not load recent files: {exc}")

        records = []
        for reference in references:
            try:
                name = self.documents.display_name(reference)
                records.append(FileRecord(display_name=name, reference=reference))
            except Exception as exc:
                _log.debug("Dropping recent entry %s: %s", reference, exc)
        return tuple(records)
