# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Broken Glass effect: windows shatter and the shards fall away."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import preferences_group, slider_row, switch_row


class BrokenGlass(Effect):
    nick = "broken-glass"
    label = "Broken Glass"

    @classmethod
    def get_preferences(cls, dialog):
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row("broken-glass-animation-time", "Animation Time", suffix=" ms"),
                slider_row("broken-glass-scale", "Shard Scale", digits=2),
                slider_row("broken-glass-gravity", "Gravity", digits=2),
                slider_row("broken-glass-blow-force", "Blow Force", digits=2),
                switch_row("broken-glass-use-pointer", "Blow Away from Pointer",
                           "Shards fly away from the mouse pointer instead of the window center."),
            ]),
        ])

        dialog.bind_adjustment("broken-glass-animation-time")
        dialog.bind_adjustment("broken-glass-scale")
        dialog.bind_adjustment("broken-glass-gravity")
        dialog.bind_adjustment("broken-glass-blow-force")
        dialog.bind_switch("broken-glass-use-pointer")
        return box
