# textpeek/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView

# ---- Controller, ViewModels & Adapters ----
from .controller import AppController
from ..adapters.picker_tk import TkFilePicker
from ..domain.entities import RecentFilesList
from ..viewmodels.settings_vm import SettingsVM
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire the main window, the controller, and the Tk picker."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or SettingsVM.from_env()
        self._log.debug(
            "Settings: %s (log level %s)",
            self.settings_vm.to_dict(),
            logging.getLevelName(logging.getLogger().level),
        )

        self.win = MainWindowView(
            on_open_file=self._on_open_file,
            on_recent_selected=self._on_recent_selected,
            toast_duration_ms=self.settings_vm.toast_duration_ms,
        )

        picker = TkFilePicker(self.win)
        self.controller = AppController(self.settings_vm, picker=picker, view=self.win)
        self.controller.recent_vm.on_changed = self._apply_recent_files

        self.controller.start()
        self._apply_recent_files(self.controller.recent_vm.items)

    # ==================================================================
    # Toolbar / Actions
    # ==================================================================
    def _on_open_file(self) -> None:
        self.controller.request_open()

    def _on_recent_selected(self, index: int) -> None:
        self.controller.recent_vm.cmd_open_index(index)

    def _apply_recent_files(self, items: RecentFilesList) -> None:
        self.win.set_recent_files(item.display_name for item in items)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
