from __future__ import annotations

from typing import Iterable, List, Set

import pytest

from textpeek.adapters.documents_memory import InMemoryDocuments
from textpeek.domain.entities import FileRecord
from textpeek.domain.errors import ContentReadFailed, PersistenceFailure, UnsupportedFileType
from textpeek.usecases.open_file import OpenFile, ReadContent, ReopenRecentFile, resolve_display_name
from textpeek.usecases.save_recent_files import SaveRecentFiles


class _StorageSpy:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.saved: List[Set[str]] = []

    def load_recent_references(self) -> Set[str]:
        return set(self.saved[-1]) if self.saved else set()

    def save_recent_references(self, references: Iterable[str]) -> None:
        if self.fail:
            raise OSError("disk full")
        self.saved.append(set(references))


def _open_uc(docs: InMemoryDocuments, storage: _StorageSpy, *, strict: bool = False) -> OpenFile:
    return OpenFile(docs, SaveRecentFiles(storage), ReadContent(docs, strict=strict))


def test_open_supported_file_appends_and_persists():
    docs = InMemoryDocuments()
    ref = docs.add("ref://profile", "profile.pit", "abc")
    storage = _StorageSpy()

    result = _open_uc(docs, storage)(ref, ())

    assert result.record == FileRecord(display_name="profile.pit", reference=ref)
    assert result.record.display_name == "profile.pit"
    assert result.content == "abc"
    assert result.recent == (result.record,)
    assert result.added is True
    assert result.persist_error is None
    assert storage.saved == [{ref}]


def test_open_unsupported_file_reads_and_persists_nothing():
    docs = InMemoryDocuments()
    ref = docs.add("ref://image", "image.png", "binary")
    storage = _StorageSpy()

    with pytest.raises(UnsupportedFileType) as excinfo:
        _open_uc(docs, storage)(ref, ())

    assert excinfo.value.code == "UNSUPPORTED_FILE_TYPE"
    assert excinfo.value.message == "Unsupported file type"
    assert excinfo.value.display_name == "image.png"
    assert docs.reads == []
    assert storage.saved == []


def test_open_with_failed_name_lookup_uses_unknown_and_is_rejected():
    docs = InMemoryDocuments()
    ref = docs.add("ref://nameless", LookupError("no cursor"), "abc")
    storage = _StorageSpy()

    assert resolve_display_name(docs, ref) == "Unknown"
    with pytest.raises(UnsupportedFileType) as excinfo:
        _open_uc(docs, storage)(ref, ())
    assert excinfo.value.display_name == "Unknown"
    assert storage.saved == []


def test_open_existing_reference_does_not_persist_again():
    docs = InMemoryDocuments()
    ref = docs.add("ref://a", "a.txt", "new content")
    existing = FileRecord(display_name="a.txt", reference=ref)
    storage = _StorageSpy()

    result = _open_uc(docs, storage)(ref, (existing,))

    assert result.recent == (existing,)
    assert result.added is False
    assert result.content == "new content"
    assert storage.saved == []


def test_lenient_read_failure_yields_empty_content_and_still_records(caplog):
    docs = InMemoryDocuments()
    ref = docs.add("ref://broken", "broken.gcode", OSError("read error"))
    storage = _StorageSpy()

    with caplog.at_level("WARNING"):
        result = _open_uc(docs, storage)(ref, ())

    assert result.content == ""
    assert result.added is True
    assert storage.saved == [{ref}]
    assert any("broken.gcode" in rec.getMessage() for rec in caplog.records)


def test_strict_read_failure_raises_and_persists_nothing():
    docs = InMemoryDocuments()
    ref = docs.add("ref://broken", "broken.gcode", OSError("read error"))
    storage = _StorageSpy()

    with pytest.raises(ContentReadFailed) as excinfo:
        _open_uc(docs, storage, strict=True)(ref, ())

    assert excinfo.value.code == "CONTENT_READ_FAILED"
    assert "broken.gcode" in excinfo.value.message
    assert storage.saved == []


def test_persistence_failure_is_reported_and_list_keeps_record():
    docs = InMemoryDocuments()
    ref = docs.add("ref://a", "a.txt", "abc")
    storage = _StorageSpy(fail=True)

    result = _open_uc(docs, storage)(ref, ())

    assert result.recent == (FileRecord(display_name="a.txt", reference=ref),)
    assert isinstance(result.persist_error, PersistenceFailure)
    assert result.persist_error.code == "PERSISTENCE_FAILED"
    assert "disk full" in result.persist_error.message


def test_reopen_reads_without_validation_or_list_change():
    docs = InMemoryDocuments()
    ref = docs.add("ref://legacy", "legacy.dat", "old data")
    record = FileRecord(display_name="legacy.dat", reference=ref)
    recent = (record,)

    result = ReopenRecentFile(ReadContent(docs))(record, recent)

    assert result.content == "old data"
    assert result.recent == recent
    assert result.added is False
    assert docs.reads == [ref]


def test_default_read_policy_is_lenient():
    docs = InMemoryDocuments()
    ref = docs.add("ref://broken", "broken.txt", OSError("boom"))
    uc = OpenFile(docs, SaveRecentFiles(_StorageSpy()))

    assert uc(ref, ()).content == ""
