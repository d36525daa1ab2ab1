from __future__ import annotations

import pytest

from textpeek.adapters.documents_memory import ScriptedPicker
from textpeek.domain.errors import SelectionCancelled, UnsupportedFileType
from textpeek.domain.ports import PICKER_MIME_TYPES, UseCaseError
from textpeek.usecases.error_mapping import is_silent, map_error
from textpeek.usecases.pick_file import PickFile


def test_pick_returns_reference_and_passes_mime_hints():
    picker = ScriptedPicker("ref://a")

    assert PickFile(picker)() == "ref://a"
    assert picker.requests == [PICKER_MIME_TYPES]
    assert PICKER_MIME_TYPES == ("text/plain", "application/octet-stream", "*/*")


def test_pick_cancel_raises_selection_cancelled():
    with pytest.raises(SelectionCancelled):
        PickFile(ScriptedPicker(None))()


def test_picker_crash_is_wrapped():
    class _Exploding:
        def pick(self, mime_types):
            raise RuntimeError("no display")

    with pytest.raises(UseCaseError) as excinfo:
        PickFile(_Exploding())()

    assert excinfo.value.code == "PICKER_FAILED"


def test_map_error_passes_use_case_errors_through():
    err = UnsupportedFileType("x.png")

    assert map_error(err) is err
    assert is_silent(map_error(SelectionCancelled()))
    assert not is_silent(err)


@pytest.mark.parametrize(
    "exc, code",
    [
        (FileNotFoundError(2, "No such file", "/tmp/a.txt"), "FILE_NOT_FOUND"),
        (PermissionError(13, "Permission denied", "/tmp/a.txt"), "PERMISSION_DENIED"),
        (OSError(5, "Input/output error"), "IO_ERROR"),
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), "DECODE_FAILED"),
        (RuntimeError("boom"), "OPEN_FAILED"),
    ],
)
def test_map_error_codes(exc, code):
    assert map_error(exc, default_code="OPEN_FAILED").code == code


def test_map_error_messages():
    assert map_error(FileNotFoundError(2, "No such file", "/tmp/a.txt")).message == "File not found: /tmp/a.txt"
    assert map_error(RuntimeError("")).message == "Unexpected error."
    assert map_error(RuntimeError("x"), default_message="Could not open").message == "Could not open"
