from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Union
from textpeek.domain.ports import DocumentPort, FileReference, FilePickerPort


class InMemoryDocuments(DocumentPort):
    """In-memory documents used for tests and offline development.

    ``files`` maps a reference to ``(display_name, content)``. Either part may
    be an exception instance, which is raised when that part is accessed.
    """

    def __init__(
        self,
        files: Optional[Dict[FileReference, tuple]] = None,
    ) -> None:
        self.files: Dict[FileReference, tuple] = dict(files or {})
        self.reads: List[FileReference] = []

    def add(
        self,
        reference: FileReference,
        name: Union[str, Exception],
        content: Union[str, Exception] = "",
    ) -> FileReference:
        self.files[reference] = (name, content)
        return reference

    def display_name(self, reference: FileReference) -> str:
        return self._part(reference, 0)

    def read_text(self, reference: FileReference) -> str:
        self.reads.append(reference)
        return self._part(reference, 1)

    def _part(self, reference: FileReference, index: int) -> str:
        if reference not in self.files:
            raise FileNotFoundError(reference)
        value = self.files[reference][index]
        if isinstance(value, Exception):
            raise value
        return value


class ScriptedPicker(FilePickerPort):
    """Picker stub returning queued answers; ``None`` simulates a cancel."""

    def __init__(self, *answers: Optional[FileReference]) -> None:
        self.answers: List[Optional[FileReference]] = list(answers)
        self.requests: List[Sequence[str]] = []

    def pick(self, mime_types: Sequence[str]) -> Optional[FileReference]:
        self.requests.append(tuple(mime_types))
        if not self.answers:
            return None
        return self.answers.pop(0)


__all__ = ["InMemoryDocuments", "ScriptedPicker"]
