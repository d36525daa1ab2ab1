"""Use-case wiring and open-file workflow orchestration for the desktop app.

This module owns the adapters and use cases built from
:class:`textpeek.viewmodels.settings_vm.SettingsVM` together with the recent
files state container. Views talk to it only through callbacks; it talks back
through the small :class:`ShellView` surface.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..adapters.documents_local import LocalDocuments
from ..adapters.storage_local import StorageLocal
from ..domain.entities import FileRecord
from ..domain.errors import SelectionCancelled, UnsupportedFileType
from ..domain.ports import (
    DocumentPort,
    FilePickerPort,
    FileReference,
    RecentFilesStoragePort,
    UseCaseError,
)
from ..usecases.error_mapping import is_silent, map_error
from ..usecases.load_recent_files import LoadRecentFiles
from ..usecases.open_file import OpenFile, OpenFileResult, ReadContent, ReopenRecentFile
from ..usecases.pick_file import PickFile
from ..usecases.save_recent_files import SaveRecentFiles
from ..viewmodels.recent_files_vm import RecentFilesVM
from ..viewmodels.settings_vm import SettingsVM

DISMISS_LABEL = "Dismiss"


class ShellView(Protocol):
    """What the controller needs from the main window."""

    def show_toast(self, message: str, action_label: Optional[str] = None) -> None: ...
    def open_content_window(self, file_name: str, file_content: str) -> None: ...


class AppController:
    """Create use cases from settings and run the open-file workflow.

    Call chain:
        ``textpeek.app.main.App`` creates one instance, binds the main window
        as ``view``, then calls ``start`` once. Toolbar and list callbacks end
        up in ``request_open`` and ``reopen``.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        picker: FilePickerPort,
        documents: Optional[DocumentPort] = None,
        storage: Optional[RecentFilesStoragePort] = None,
        view: Optional[ShellView] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self.view = view
        self.documents = documents or LocalDocuments(encoding=settings_vm.encoding)
        self.storage = storage or StorageLocal(root_dir=settings_vm.storage_root)
        self.recent_vm = RecentFilesVM(on_open_requested=self.reopen)

        read_content = ReadContent(self.documents, strict=settings_vm.strict_read)
        self.uc_pick = PickFile(picker)
        self.uc_load_recent = LoadRecentFiles(self.storage, self.documents)
        self.uc_save_recent = SaveRecentFiles(self.storage)
        self.uc_open = OpenFile(self.documents, self.uc_save_recent, read_content)
        self.uc_reopen = ReopenRecentFile(read_content)

        self.last_opened: Optional[FileRecord] = None
        self._pick_pending = False

    @property
    def pick_pending(self) -> bool:
        """``True`` while a picker request is outstanding."""
        return self._pick_pending

    def start(self) -> None:
        """Load the persisted recent list into the state container."""
        try:
            recent = self.uc_load_recent()
        except UseCaseError as exc:
            self._log.warning("%s", exc.message)
            self._toast(exc.message)
            return
        self._log.info("Loaded %d recent file(s)", len(recent))
        self.recent_vm.replace(recent)

    # ------------------------------------------------------------------
    # Open workflow
    # ------------------------------------------------------------------
    def request_open(self) -> bool:
        """Show the picker and open the selection.

        Only one picker request may be outstanding. Returns ``True`` when a
        file was opened and handed to the view.
        """
        if self._pick_pending:
            self._toast("A file picker is already open.")
            return False
        self._pick_pending = True
        try:
            reference = self.uc_pick()
        except SelectionCancelled:
            self._log.debug("File selection cancelled")
            return False
        except Exception as exc:
            self._toast_error(exc)
            return False
        finally:
            self._pick_pending = False
        return self.open_reference(reference)

    def open_reference(self, reference: FileReference) -> bool:
        """Run the open workflow for an already selected reference."""
        try:
            result = self.uc_open(reference, self.recent_vm.items)
        except UnsupportedFileType as exc:
            self._toast(exc.message, action_label=DISMISS_LABEL)
            return False
        except Exception as exc:
            self._toast_error(exc)
            return False

        self.recent_vm.replace(result.recent)
        if result.persist_error is not None:
            self._toast(result.persist_error.message)
        self._show(result)
        return True

    def reopen(self, record: FileRecord) -> bool:
        """Read and display a recent entry without touching the list."""
        try:
            result = self.uc_reopen(record, self.recent_vm.items)
        except Exception as exc:
            self._toast_error(exc)
            return False
        self._show(result)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _show(self, result: OpenFileResult) -> None:
        self.last_opened = result.record
        self._log.info(
            "Opened %s (%d chars, added=%s)",
            result.record.display_name,
            len(result.content),
            result.added,
        )
        if self.view is not None:
            self.view.open_content_window(result.record.display_name, result.content)

    def _toast(self, message: str, action_label: Optional[str] = None) -> None:
        if self.view is not None:
            self.view.show_toast(message, action_label=action_label)

    def _toast_error(self, exc: Exception) -> None:
        err = map_error(exc, default_code="OPEN_FAILED")
        if is_silent(err):
            return
        self._log.error("%s: %s", err.code, err.message)
        self._toast(err.message, action_label=DISMISS_LABEL)
