# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Wisps effect: windows dissolve into swirling fairy dust."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import color_row, preferences_group, slider_row


class Wisps(Effect):
    nick = "wisps"
    label = "Wisps"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row("wisps-animation-time", "Animation Time", suffix=" ms"),
                slider_row("wisps-scale", "Wisp Scale", digits=2),
            ]),
            preferences_group("Colors", [
                color_row(f"wisps-color-{i}", f"Wisp Color {i}") for i in range(1, 4)
            ]),
        ])

        dialog.bind_adjustment("wisps-animation-time")
        dialog.bind_adjustment("wisps-scale")
        for i in range(1, 4):
            dialog.bind_color_button(f"wisps-color-{i}")
        return box
