"""Domain-level error types for the file-open workflow.

Each condition carries a stable code so the app layer can choose its handling
without inspecting messages.
"""

from __future__ import annotations

from .ports import UseCaseError


class SelectionCancelled(UseCaseError):
    """User dismissed the picker without choosing a file."""

    def __init__(self) -> None:
        super().__init__("SELECTION_CANCELLED", "No file selected.")


class UnsupportedFileType(UseCaseError):
    def __init__(self, display_name: str) -> None:
        super().__init__("UNSUPPORTED_FILE_TYPE", "Unsupported file type")
        self.display_name = display_name


class NameResolutionFailed(UseCaseError):
    def __init__(self, reference: str, reason: str) -> None:
        super().__init__("NAME_RESOLUTION_FAILED", f"Could not resolve file name: {reason}")
        self.reference = reference


class ContentReadFailed(UseCaseError):
    def __init__(self, display_name: str, reason: str) -> None:
        super().__init__("CONTENT_READ_FAILED", f"Could not read {display_name}: {reason}")
        self.display_name = display_name


class PersistenceFailure(UseCaseError):
    def __init__(self, reason: str) -> None:
        super().__init__("PERSISTENCE_FAILED", f"Could not save recent files: {reason}")


__all__ = [
    "ContentReadFailed",
    "NameResolutionFailed",
    "PersistenceFailure",
    "SelectionCancelled",
    "UnsupportedFileType",
]
