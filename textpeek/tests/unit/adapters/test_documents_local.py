import pytest

from textpeek.adapters.documents_local import LocalDocuments


def test_reference_round_trips_to_path(tmp_path):
    target = tmp_path / "with space" / "profile.pit"
    target.parent.mkdir()
    target.write_text("abc", encoding="utf-8")

    reference = LocalDocuments.to_reference(target)

    assert reference.startswith("file://")
    assert " " not in reference
    assert LocalDocuments.to_path(reference) == target.resolve()


def test_display_name_and_read_text(tmp_path):
    target = tmp_path / "Report.TXT"
    target.write_text("line 1\nline 2\n", encoding="utf-8")
    docs = LocalDocuments()
    reference = LocalDocuments.to_reference(target)

    assert docs.display_name(reference) == "Report.TXT"
    assert docs.read_text(reference) == "line 1\nline 2\n"


def test_display_name_fails_for_missing_file(tmp_path):
    docs = LocalDocuments()
    reference = LocalDocuments.to_reference(tmp_path / "gone.txt")

    with pytest.raises(FileNotFoundError):
        docs.display_name(reference)


def test_read_text_raises_for_missing_file(tmp_path):
    docs = LocalDocuments()
    reference = LocalDocuments.to_reference(tmp_path / "gone.txt")

    with pytest.raises(OSError):
        docs.read_text(reference)


def test_undecodable_bytes_are_replaced(tmp_path):
    target = tmp_path / "bytes.gcode"
    target.write_bytes(b"G1 X1\n\xff\xfe")
    docs = LocalDocuments(encoding="utf-8")

    text = docs.read_text(LocalDocuments.to_reference(target))

    assert text.startswith("G1 X1\n")
    assert "\ufffd" in text


@pytest.mark.parametrize(
    "reference",
    ["content://provider/doc/1", "https://example.test/a.txt", "file://otherhost/a.txt"],
)
def test_non_local_references_are_rejected(reference):
    with pytest.raises(ValueError):
        LocalDocuments.to_path(reference)
