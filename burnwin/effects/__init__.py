# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Registry of the close effects shown in the preferences.

Each descriptor exposes ``get_nick()``, ``get_label()``,
``get_min_shell_version()`` and ``get_preferences(dialog)``; see
:class:`~burnwin.effects.base.Effect`.
"""

from __future__ import annotations

from burnwin.core.shell import shell_version_is_at_least
from burnwin.effects.base import Effect
from burnwin.effects.broken_glass import BrokenGlass
from burnwin.effects.energize import EnergizeA, EnergizeB
from burnwin.effects.fire import Fire
from burnwin.effects.matrix import Matrix
from burnwin.effects.trex_attack import TRexAttack
from burnwin.effects.tv_effect import TVEffect
from burnwin.effects.wisps import Wisps


def check_unique_nicks(effects: list) -> None:
    """Raise ValueError if two effects share a nick."""
    seen: set[str] = set()
    for effect in effects:
        nick = effect.get_nick()
        if not nick:
            raise ValueError(f"{effect.__name__} has no nick")
        if nick in seen:
            raise ValueError(f"Duplicate effect nick '{nick}'")
        seen.add(nick)


def available_effects(effects: list, version: str | None = None) -> list:
    """Effects of *effects* the shell (or *version*) is new enough for."""
    return [
        e for e in effects
        if shell_version_is_at_least(*e.get_min_shell_version(), current=version)
    ]


# New effects must be registered here.
ALL_EFFECTS: list[type[Effect]] = [
    EnergizeA,
    EnergizeB,
    Fire,
    Matrix,
    BrokenGlass,
    TRexAttack,
    TVEffect,
    Wisps,
]

check_unique_nicks(ALL_EFFECTS)

__all__ = [
    "ALL_EFFECTS",
    "Effect",
    "available_effects",
    "check_unique_nicks",
]
