from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

MISSING_NAME = "Unknown File"
MISSING_CONTENT = "No content available."
CONTENT_HEADING = "File Content:"


@dataclass(frozen=True)
class FileContentVM:
    """Read-only state of the content window.

    Renders exactly what it is given; ``None`` falls back to placeholder
    text, an empty string is shown as empty.
    """

    file_name: Optional[str] = None
    file_content: Optional[str] = None

    @property
    def title(self) -> str:
        return self.file_name if self.file_name is not None else MISSING_NAME

    @property
    def body(self) -> str:
        return self.file_content if self.file_content is not None else MISSING_CONTENT

    @property
    def heading(self) -> str:
        return CONTENT_HEADING
