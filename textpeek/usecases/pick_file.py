from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
from ..domain.errors import SelectionCancelled
from ..domain.ports import PICKER_MIME_TYPES, FilePickerPort, FileReference, UseCaseError


@dataclass
class PickFile:
    picker: FilePickerPort
    mime_types: Sequence[str] = PICKER_MIME_TYPES

    def __call__(self) -> FileReference:
        try:
            reference = self.picker.pick(tuple(self.mime_types))
        except Exception as exc:
            raise UseCaseError("PICKER_FAILED", f"Could not open file picker: {exc}")
        if not reference:
            raise SelectionCancelled()
        return reference
