from __future__ import annotations

import pytest

from textpeek.adapters.documents_memory import InMemoryDocuments
from textpeek.adapters.storage_local import StorageLocal
from textpeek.domain.entities import FileRecord
from textpeek.domain.errors import PersistenceFailure
from textpeek.domain.ports import UseCaseError
from textpeek.usecases.load_recent_files import LoadRecentFiles
from textpeek.usecases.save_recent_files import SaveRecentFiles


def test_save_then_load_is_set_equal(tmp_path):
    docs = InMemoryDocuments()
    a = docs.add("ref://a", "a.txt")
    b = docs.add("ref://b", "b.pim")
    c = docs.add("ref://c", "c.gcode")
    storage = StorageLocal(root_dir=str(tmp_path))
    recent = tuple(
        FileRecord(display_name=name, reference=ref)
        for name, ref in (("a.txt", a), ("b.pim", b), ("c.gcode", c))
    )

    SaveRecentFiles(storage)(recent)
    loaded = LoadRecentFiles(storage, docs)()

    assert set(loaded) == set(recent)
    assert {r.reference: r.display_name for r in loaded} == {a: "a.txt", b: "b.pim", c: "c.gcode"}


def test_load_drops_entries_whose_lookup_fails(tmp_path):
    docs = InMemoryDocuments()
    kept = docs.add("ref://kept", "kept.txt")
    broken = docs.add("ref://broken", PermissionError("revoked"))
    storage = StorageLocal(root_dir=str(tmp_path))
    storage.save_recent_references([kept, broken, "ref://vanished"])

    loaded = LoadRecentFiles(storage, docs)()

    assert loaded == (FileRecord(display_name="kept.txt", reference=kept),)


def test_load_failure_is_mapped_to_use_case_error():
    class _Broken:
        def load_recent_references(self):
            raise ValueError("bad json")

    with pytest.raises(UseCaseError) as excinfo:
        LoadRecentFiles(_Broken(), InMemoryDocuments())()

    assert excinfo.value.code == "LOAD_RECENT_FAILED"
    assert "bad json" in excinfo.value.message


def test_save_failure_raises_persistence_failure():
    class _ReadOnly:
        def save_recent_references(self, references):
            raise PermissionError("read-only")

    with pytest.raises(PersistenceFailure) as excinfo:
        SaveRecentFiles(_ReadOnly())([FileRecord(display_name="a.txt", reference="ref://a")])

    assert "read-only" in excinfo.value.message
