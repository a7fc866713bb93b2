# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Page template shared by all effects.

Every effect page shows the effect's name and a preview button.  The
effect's own preferences (if any) are appended below by the dialog.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)

from burnwin.ui.icons import APP_ICON, icon as lucide_icon, pixmap as lucide_pixmap
from burnwin.ui.style import active_theme, add_css_class

log = logging.getLogger(__name__)


class EffectPage(QWidget):
    """Title + preview button for one effect."""

    def __init__(self, effect, dialog, parent=None):
        super().__init__(parent)
        self._effect = effect
        self._dialog = dialog
        self._preview: PreviewWindow | None = None
        self.setObjectName(f"{effect.get_nick()}-page")
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        header = QHBoxLayout()
        header.setSpacing(12)

        self._label = QLabel(self._effect.get_label())
        add_css_class(self._label, "large-title")
        header.addWidget(self._label, 1)

        self._button = QPushButton(" Preview")
        self._button.setIcon(lucide_icon("eye", 16, "#FFFFFF"))
        self._button.setCursor(Qt.CursorShape.PointingHandCursor)
        add_css_class(self._button, "suggested-action")
        self._button.clicked.connect(self._on_preview)
        header.addWidget(self._button)

        layout.addLayout(header)

    @property
    def label(self) -> QLabel:
        return self._label

    @property
    def button(self) -> QPushButton:
        return self._button

    def preview_window(self) -> PreviewWindow | None:
        """The preview window opened last, or None once it has been deleted."""
        return self._preview

    def finish(self) -> None:
        """Push everything added after construction to the top."""
        self.layout().addStretch()

    def _on_preview(self):
        nick = self._effect.get_nick()
        log.debug("Previewing effect '%s'", nick)

        # The shell picks up the to-be-previewed effect from the settings.
        self._dialog.get_settings().set_string("close-preview-effect", nick)

        preview = PreviewWindow(self._effect.get_label(), self._dialog, self.window())
        preview.destroyed.connect(lambda *_, p=preview: self._forget_preview(p))
        self._preview = preview
        preview.show()

    def _forget_preview(self, preview) -> None:
        if self._preview is preview:
            self._preview = None


class PreviewWindow(QDialog):
    """Modal window whose closing plays the effect being previewed."""

    def __init__(self, effect_label: str, dialog, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"Preview for {effect_label}")
        self.setModal(True)
        self.resize(800, 450)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)

        box = QWidget()
        v = QVBoxLayout(box)
        v.setSpacing(10)
        v.setAlignment(Qt.AlignmentFlag.AlignCenter)

        image = QLabel()
        image.setPixmap(lucide_pixmap(APP_ICON, 128, active_theme().accent_primary))
        image.setAlignment(Qt.AlignmentFlag.AlignCenter)

        label = QLabel("Close this Window to Preview the Effect!")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        add_css_class(label, "large-title")

        dialog.box_append(box, image)
        dialog.box_append(box, label)

        root = QVBoxLayout(self)
        root.addWidget(box, 0, Qt.AlignmentFlag.AlignVCenter)
