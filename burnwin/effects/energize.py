# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""The two Energize effects: windows dissolve into a beam of light."""

from __future__ import annotations

from burnwin.effects.base import Effect
from burnwin.ui.widgets import color_row, preferences_group, slider_row


class _Energize(Effect):

    @classmethod
    def get_preferences(cls, dialog):
        n = cls.nick
        box = cls._attach(dialog, [
            preferences_group("Animation", [
                slider_row(f"{n}-animation-time", "Animation Time", suffix=" ms"),
                slider_row(f"{n}-scale", "Pattern Scale", digits=2),
                color_row(f"{n}-color", "Color"),
            ]),
        ])

        dialog.bind_adjustment(f"{n}-animation-time")
        dialog.bind_adjustment(f"{n}-scale")
        dialog.bind_color_button(f"{n}-color")
        return box


class EnergizeA(_Energize):
    nick = "energize-a"
    label = "Energize A"


class EnergizeB(_Energize):
    nick = "energize-b"
    label = "Energize B"
