# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""T-Rex Attack effect: claw scratches tear the window apart."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import color_row, preferences_group, slider_row


class TRexAttack(Effect):
    nick = "trex"
    label = "T-Rex Attack"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row("trex-animation-time", "Animation Time", suffix=" ms"),
            ]),
            preferences_group("Scratches", [
                color_row("claw-scratch-color", "Scratch Color"),
                slider_row("claw-scratch-scale", "Scratch Scale", digits=2),
                slider_row("claw-scratch-count", "Scratch Count"),
                slider_row("claw-scratch-warp", "Scratch Warping", digits=2),
            ]),
        ])

        dialog.bind_adjustment("trex-animation-time")
        dialog.bind_color_button("claw-scratch-color")
        dialog.bind_adjustment("claw-scratch-scale")
        dialog.bind_adjustment("claw-scratch-count")
        dialog.bind_adjustment("claw-scratch-warp")
        return box
