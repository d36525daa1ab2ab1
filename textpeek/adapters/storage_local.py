from __future__ import annotations
import json, logging, os, tempfile
from typing import Any, Dict, Iterable, Set
from textpeek.domain.ports import FileReference, RecentFilesStoragePort

_log = logging.getLogger(__name__)


class StorageLocal(RecentFilesStoragePort):
    """Local filesystem key-value prefs (one JSON record, string-set values)."""

    PREFS_NAME = "textpeek_prefs"
    RECENT_KEY = "RecentFileUris"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def prefs_path(self) -> str:
        return os.path.join(self.root, f"{self.PREFS_NAME}.json")

    # ---- Recent files (string set under a fixed key) ----
    def load_recent_references(self) -> Set[FileReference]:
        raw = self._read_prefs().get(self.RECENT_KEY)
        if not isinstance(raw, list):
            return set()
        return {item for item in raw if isinstance(item, str) and item}

    def save_recent_references(self, references: Iterable[FileReference]) -> None:
        try:
            prefs = self._read_prefs()
        except (OSError, ValueError) as exc:
            # unreadable record is replaced, not merged
            _log.warning("Overwriting unreadable prefs %s: %s", self.prefs_path, exc)
            prefs = {}
        # stored as a set; sorted for a stable file
        prefs[self.RECENT_KEY] = sorted({str(ref) for ref in references})
        self._write_prefs(prefs)

    # ---- Raw prefs record ----
    def _read_prefs(self) -> Dict[str, Any]:
        path = self.prefs_path
        if not os.path.exists(path):
            return {}
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def _write_prefs(self, prefs: Dict[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.root, prefix=f"{self.PREFS_NAME}_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(prefs, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.prefs_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
