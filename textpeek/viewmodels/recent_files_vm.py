from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..domain.entities import FileRecord, RecentFilesList


@dataclass
class RecentFilesVM:
    """Holds the recent-files list shown on the main screen. Pure UI state.

    The list is replaced wholesale by the app controller after load/open use
    cases run; the view only reads ``labels()`` and reports clicks by index.
    """

    on_changed: Optional[Callable[[RecentFilesList], None]] = None
    on_open_requested: Optional[Callable[[FileRecord], None]] = None

    _items: RecentFilesList = field(default_factory=tuple)

    @property
    def items(self) -> RecentFilesList:
        return self._items

    def replace(self, items: RecentFilesList) -> None:
        items = tuple(items)
        if items == self._items and [i.display_name for i in items] == self.labels():
            return
        self._items = items
        if self.on_changed:
            self.on_changed(self._items)

    def labels(self) -> List[str]:
        return [item.display_name for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    # ---- Commands surfaced to View ----
    def cmd_open_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            return
        if self.on_open_requested:
            self.on_open_requested(self._items[index])
