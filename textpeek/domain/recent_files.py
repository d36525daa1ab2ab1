"""Pure operations over the recent-files list.

The list is an insertion-ordered tuple with unique references. Appending is
the only mutation primitive; nothing is ever removed or reordered.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable

from .entities import FileRecord, FileReference, RecentFilesList


def contains_reference(recent: RecentFilesList, reference: FileReference) -> bool:
    return any(item.reference == reference for item in recent)


def append_record(recent: Iterable[FileRecord], record: FileRecord) -> RecentFilesList:
    """Return ``recent`` with ``record`` at the end unless its reference exists."""
    current = tuple(recent)
    if contains_reference(current, record.reference):
        return current
    return current + (record,)


def references_of(recent: Iterable[FileRecord]) -> FrozenSet[FileReference]:
    """Persistable form of the list: the set of references, order discarded."""
    return frozenset(item.reference for item in recent)


__all__ = ["append_record", "contains_reference", "references_of"]
