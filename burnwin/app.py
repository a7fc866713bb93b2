# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication, QMainWindow

from burnwin.ui.preferences_dialog import PreferencesDialog

APP_NAME = "burn-my-windows"
ORGANIZATION_NAME = "Burn-My-Windows"


def set_application_names() -> None:
    """Set the names Qt derives the config and cache directories from.

    Must run before the settings store is first created.
    """
    QCoreApplication.setApplicationName(APP_NAME)
    QCoreApplication.setOrganizationName(ORGANIZATION_NAME)


class PreferencesWindow(QMainWindow):
    """Top-level window hosting one preferences dialog."""

    def __init__(self, page: str | None = None, parent=None):
        super().__init__(parent)
        self._dialog = PreferencesDialog()
        self.setCentralWidget(self._dialog.get_widget())
        self.resize(self._dialog.get_widget().size())
        if page:
            self._dialog.show_page(page)

    @property
    def dialog(self) -> PreferencesDialog:
        return self._dialog


class PrefsApp:
    """Top-level application controller for the preferences."""

    def __init__(self, argv: list[str]):
        set_application_names()
        self._qt = QApplication(argv)

        # An optional first argument selects the page to open.
        page = argv[1] if len(argv) > 1 else None
        self._window = PreferencesWindow(page)

    def run(self) -> int:
        """Show the preferences window and enter the Qt event loop."""
        self._window.show()
        return self._qt.exec()
