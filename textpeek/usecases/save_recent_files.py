from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
from ..domain.entities import FileRecord
from ..domain.errors import PersistenceFailure
from ..domain.ports import RecentFilesStoragePort
from ..domain.recent_files import references_of


@dataclass
class SaveRecentFiles:
    storage: RecentFilesStoragePort

    def __call__(self, recent: Iterable[FileRecord]) -> None:
        try:
            self.storage.save_recent_references(references_of(recent))
        except Exception as e:
            raise PersistenceFailure(str(e))
