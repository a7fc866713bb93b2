# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Fire effect: windows burn away from the bottom up.

Besides the individual options, the page offers a handful of presets
which set the speed, scale, noise mode and all five gradient colours in
one go.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QMenu, QToolButton, QWidget

from burnwin.effects.base import Effect
from burnwin.ui.icons import icon as lucide_icon
from burnwin.ui.style import active_theme
from burnwin.ui.widgets import color_row, preferences_group, slider_row, switch_row

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirePreset:
    name: str
    movement_speed: float
    scale: float
    noise_3d: bool
    colors: tuple[str, str, str, str, str]

    def values(self) -> dict[str, object]:
        """Settings key -> value for every key the preset touches."""
        values: dict[str, object] = {
            "fire-movement-speed": self.movement_speed,
            "fire-scale": self.scale,
            "fire-3d-noise": self.noise_3d,
        }
        for i, color in enumerate(self.colors, start=1):
            values[f"fire-color-{i}"] = color
        return values


FIRE_PRESETS: list[FirePreset] = [
    FirePreset("Default Fire", 1.0, 1.0, True, (
        "rgba(76,51,25,0)", "rgba(180,55,30,0.7)", "rgb(255,76,38)",
        "rgb(255,166,25)", "rgb(255,255,255)",
    )),
    FirePreset("Hell Fire", 1.3, 1.2, True, (
        "rgba(0,0,0,0)", "rgba(103,7,80,0.5)", "rgb(150,0,24)",
        "rgb(255,0,0)", "rgb(255,255,255)",
    )),
    FirePreset("Dark and Smutty", 0.7, 1.0, True, (
        "rgba(0,0,0,0)", "rgba(36,3,0,0.5)", "rgb(150,0,24)",
        "rgb(255,177,21)", "rgb(255,238,166)",
    )),
    FirePreset("Cold Breeze", 1.5, 0.8, False, (
        "rgba(0,110,255,0)", "rgba(30,111,180,0.24)", "rgba(38,181,255,0.54)",
        "rgba(34,162,255,0.84)", "rgb(97,189,255)",
    )),
    FirePreset("Santa is Coming", 0.2, 0.4, False, (
        "rgba(0,0,255,0)", "rgba(227,227,227,0.5)", "rgb(255,255,255)",
        "rgb(255,255,255)", "rgb(255,255,255)",
    )),
]


def apply_preset(settings, preset: FirePreset) -> None:
    log.debug("Applying fire preset '%s'", preset.name)
    for key, value in preset.values().items():
        settings.set(key, value)


class Fire(Effect):
    nick = "fire"
    label = "Fire"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            cls._preset_row(dialog),
            preferences_group("Animation", [
                slider_row("fire-animation-time", "Animation Time", suffix=" ms"),
                slider_row("fire-movement-speed", "Flame Speed", digits=2),
                slider_row("fire-scale", "Flame Scale", digits=2),
                switch_row("fire-3d-noise", "3D Noise",
                           "Slower, but gives the flames more depth."),
            ]),
            preferences_group("Colors", [
                color_row(f"fire-color-{i}", f"Gradient Color {i}") for i in range(1, 6)
            ]),
        ])

        dialog.bind_adjustment("fire-animation-time")
        dialog.bind_adjustment("fire-movement-speed")
        dialog.bind_adjustment("fire-scale")
        dialog.bind_switch("fire-3d-noise")
        for i in range(1, 6):
            dialog.bind_color_button(f"fire-color-{i}")
        return box

    @staticmethod
    def _preset_row(dialog) -> QWidget:
        row = QWidget()
        h = QHBoxLayout(row)
        h.setContentsMargins(0, 0, 0, 0)
        h.addStretch()

        btn = QToolButton()
        btn.setObjectName("fire-preset-button")
        btn.setText(" Load Preset")
        btn.setIcon(lucide_icon("palette", 16, active_theme().fg_primary))
        btn.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)

        menu = QMenu(btn)
        menu.setObjectName("fire-preset-menu")
        settings = dialog.get_settings()
        for preset in FIRE_PRESETS:
            action = menu.addAction(preset.name)
            action.triggered.connect(lambda _=False, p=preset: apply_preset(settings, p))
        btn.setMenu(menu)

        h.addWidget(btn)
        return row
