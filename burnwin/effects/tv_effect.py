# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""TV effect: windows collapse like an old cathode-ray tube switching off."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import color_row, preferences_group, slider_row


class TVEffect(Effect):
    nick = "tv"
    label = "TV Effect"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row("tv-animation-time", "Animation Time", suffix=" ms"),
                color_row("tv-effect-color", "Flash Color"),
            ]),
        ])

        dialog.bind_adjustment("tv-animation-time")
        dialog.bind_color_button("tv-effect-color")
        return box
