# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Reusable preference rows.

Each row helper creates a control whose ``objectName`` is the settings key
it edits, plus a reset button named ``reset-<key>``.  Ranges of numeric
controls come straight from the schema so the widgets can never produce a
value the settings store would refuse.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import (
    QCheckBox, QColorDialog, QComboBox, QDoubleSpinBox, QGroupBox, QHBoxLayout,
    QLabel, QPushButton, QSlider, QSpinBox, QToolButton, QVBoxLayout, QWidget,
)

from burnwin.core.schema import SCHEMA_BY_NAME
from burnwin.ui.icons import icon as lucide_icon
from burnwin.ui.style import active_theme, add_css_class


_LABEL_WIDTH = 150


# ======================================================================
# Colour button
# ======================================================================

class ColorButton(QPushButton):
    """Push button showing a colour swatch; clicking opens a colour chooser.

    :attr:`colorSet` is only emitted when the user picks a colour, never
    for :meth:`setColor` calls.
    """

    colorSet = Signal()

    def __init__(self, color: QColor | None = None, parent=None):
        super().__init__(parent)
        self._color = QColor(color) if color is not None else QColor(Qt.GlobalColor.white)
        add_css_class(self, "color-button")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clicked.connect(self._choose)
        self._update_swatch()

    def color(self) -> QColor:
        return QColor(self._color)

    def setColor(self, color: QColor) -> None:
        self._color = QColor(color)
        self._update_swatch()

    def _choose(self) -> None:
        chosen = QColorDialog.getColor(
            self._color, self, "Select a Color",
            QColorDialog.ColorDialogOption.ShowAlphaChannel,
        )
        if chosen.isValid() and chosen != self._color:
            self.setColor(chosen)
            self.colorSet.emit()

    def _update_swatch(self) -> None:
        swatch = QPixmap(32, 16)
        swatch.fill(Qt.GlobalColor.transparent)
        painter = QPainter(swatch)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(QColor(active_theme().border))
        painter.setBrush(self._color)
        painter.drawRoundedRect(0, 0, 31, 15, 3, 3)
        painter.end()
        self.setIcon(QIcon(swatch))
        self.setIconSize(swatch.size())
        self.setToolTip(self._color.name(QColor.NameFormat.HexArgb))


# ======================================================================
# Row helpers
# ======================================================================

def reset_button(key: str) -> QToolButton:
    """Small button resetting *key* to its default once wired by the dialog."""
    btn = QToolButton()
    btn.setObjectName(f"reset-{key}")
    btn.setIcon(lucide_icon("rotate-ccw", 14, active_theme().fg_secondary))
    btn.setToolTip("Reset to default value")
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    add_css_class(btn, "reset-button")
    return btn


def _row(label: str, control: QWidget, key: str, subtitle: str = "") -> QWidget:
    """Label column + control + reset button."""
    w = QWidget()
    row = QHBoxLayout(w)
    row.setContentsMargins(4, 2, 0, 2)
    row.setSpacing(8)

    text = QWidget()
    text_col = QVBoxLayout(text)
    text_col.setContentsMargins(0, 0, 0, 0)
    text_col.setSpacing(0)
    lbl = QLabel(label)
    lbl.setMinimumWidth(_LABEL_WIDTH)
    text_col.addWidget(lbl)
    if subtitle:
        sub = QLabel(subtitle)
        sub.setWordWrap(True)
        add_css_class(sub, "dim-label")
        text_col.addWidget(sub)
    row.addWidget(text)

    row.addWidget(control, 1)
    row.addWidget(reset_button(key))
    return w


def switch_row(key: str, label: str, subtitle: str = "") -> QWidget:
    """Row with a checkbox bound through ``bind_switch``."""
    chk = QCheckBox()
    chk.setObjectName(key)
    chk.setCursor(Qt.CursorShape.PointingHandCursor)
    control = QWidget()
    h = QHBoxLayout(control)
    h.setContentsMargins(0, 0, 0, 0)
    h.addStretch()
    h.addWidget(chk)
    return _row(label, control, key, subtitle)


def _link_slider(slider: QSlider, spin: QDoubleSpinBox | QSpinBox, factor: int) -> None:
    """Keep *slider* (integer steps) in sync with *spin*, which holds the value."""
    slider.setRange(round(spin.minimum() * factor), round(spin.maximum() * factor))
    slider.setValue(round(spin.value() * factor))

    def _on_slider(steps: int) -> None:
        spin.setValue(steps / factor if factor != 1 else steps)

    def _on_spin(value) -> None:
        # setValue() with the current value emits nothing, so no loop
        slider.setValue(round(value * factor))

    slider.valueChanged.connect(_on_slider)
    spin.valueChanged.connect(_on_spin)


def slider_row(key: str, label: str, digits: int = 1, suffix: str = "",
               subtitle: str = "") -> QWidget:
    """Row with a slider and a spin box bound through ``bind_adjustment``.

    The spin box carries the value and the object name; the slider only
    mirrors it.
    """
    entry = SCHEMA_BY_NAME[key]
    if entry.type is int:
        spin: QSpinBox | QDoubleSpinBox = QSpinBox()
        spin.setRange(int(entry.minimum), int(entry.maximum))
        factor = 1
    else:
        spin = QDoubleSpinBox()
        spin.setDecimals(digits)
        spin.setSingleStep(10 ** -digits)
        spin.setRange(entry.minimum, entry.maximum)
        factor = 10 ** digits
    spin.setObjectName(key)
    spin.setValue(entry.default)
    if suffix:
        spin.setSuffix(suffix)
    spin.setFixedWidth(90)

    slider = QSlider(Qt.Orientation.Horizontal)
    _link_slider(slider, spin, factor)

    control = QWidget()
    h = QHBoxLayout(control)
    h.setContentsMargins(0, 0, 0, 0)
    h.setSpacing(8)
    h.addWidget(slider, 1)
    h.addWidget(spin)
    return _row(label, control, key, subtitle)


def color_row(key: str, label: str, subtitle: str = "") -> QWidget:
    """Row with a :class:`ColorButton` bound through ``bind_color_button``."""
    btn = ColorButton()
    btn.setObjectName(key)
    control = QWidget()
    h = QHBoxLayout(control)
    h.setContentsMargins(0, 0, 0, 0)
    h.addStretch()
    h.addWidget(btn)
    return _row(label, control, key, subtitle)


def combo_row(key: str, label: str, items: list[tuple[str, str]],
              subtitle: str = "") -> QWidget:
    """Row with a combo box of ``(id, text)`` items bound through ``bind_combobox``."""
    combo = QComboBox()
    combo.setObjectName(key)
    for item_id, text in items:
        combo.addItem(text, item_id)
    return _row(label, combo, key, subtitle)


def preferences_group(title: str, rows: list[QWidget]) -> QGroupBox:
    grp = QGroupBox(title)
    g = QVBoxLayout(grp)
    g.setSpacing(4)
    for row in rows:
        g.addWidget(row)
    return grp


def preferences_box(name: str, groups: list[QWidget]) -> QWidget:
    """Vertical container named *name* holding preference groups."""
    w = QWidget()
    w.setObjectName(name)
    layout = QVBoxLayout(w)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(12)
    for grp in groups:
        layout.addWidget(grp)
    return w
