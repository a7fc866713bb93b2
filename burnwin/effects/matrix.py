# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Matrix effect: windows decay into falling glyph trails."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import color_row, preferences_group, slider_row


class Matrix(Effect):
    nick = "matrix"
    label = "Matrix"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row("matrix-animation-time", "Animation Time", suffix=" ms"),
                slider_row("matrix-scale", "Letter Scale", digits=2),
                slider_row("matrix-randomness", "Randomness", digits=2,
                           subtitle="How much the letters deviate from a straight fall."),
                slider_row("matrix-overshoot", "Overshoot", digits=2),
            ]),
            preferences_group("Colors", [
                color_row("matrix-trail-color", "Trail Color"),
                color_row("matrix-tip-color", "Tip Color"),
            ]),
        ])

        dialog.bind_adjustment("matrix-animation-time")
        dialog.bind_adjustment("matrix-scale")
        dialog.bind_adjustment("matrix-randomness")
        dialog.bind_adjustment("matrix-overshoot")
        dialog.bind_color_button("matrix-trail-color")
        dialog.bind_color_button("matrix-tip-color")
        return box
