"""Translate workflow and adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from textpeek.domain.errors import SelectionCancelled
from textpeek.domain.ports import UseCaseError

SILENT_CODES = frozenset({SelectionCancelled().code})


def map_error(
    exc: Exception,
    *,
    default_code: str = "UNEXPECTED_ERROR",
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map any exception to a stable UseCaseError code.

    Use-case errors pass through unchanged. Filesystem and decoding errors
    get their own codes; everything else falls back to ``default_code``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, FileNotFoundError):
        return UseCaseError("FILE_NOT_FOUND", _compose_error_message("File not found", exc.filename))
    if isinstance(exc, PermissionError):
        return UseCaseError("PERMISSION_DENIED", _compose_error_message("Permission denied", exc.filename))
    if isinstance(exc, UnicodeDecodeError):
        return UseCaseError("DECODE_FAILED", f"File is not valid {exc.encoding} text.")
    if isinstance(exc, OSError):
        return UseCaseError("IO_ERROR", _compose_error_message("I/O error", exc.strerror))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def is_silent(err: UseCaseError) -> bool:
    """True for conditions that end a workflow without telling the user."""
    return err.code in SILENT_CODES


def _compose_error_message(base: str, hint: Optional[object]) -> str:
    hint_text = str(hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_error", "is_silent"]
