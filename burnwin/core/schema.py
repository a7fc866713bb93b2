# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Settings schema for Burn-My-Windows.

Every key the preferences dialog (and the effects it hosts) can read or
write is declared here with its type, default value and allowed range.
The :class:`~burnwin.core.settings.Settings` store refuses any key that
is not part of the schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# -- Key definition --------------------------------------------------------

@dataclass(frozen=True)
class SettingsKey:
    """One typed settings key."""
    name: str
    type: type                         # bool / int / float / str
    default: Any
    minimum: float | None = None       # numeric keys only
    maximum: float | None = None
    choices: tuple[str, ...] = ()      # string keys only, empty = free text
    summary: str = ""

    def validate(self, value: Any) -> Any:
        """Return *value* coerced to the key's type, or raise.

        Ints are accepted for float keys.  Bools are never accepted as
        numbers even though ``bool`` subclasses ``int``.
        """
        if self.type is bool:
            if not isinstance(value, bool):
                raise TypeError(f"'{self.name}' expects a bool, got {type(value).__name__}")
            return value

        if self.type in (int, float):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"'{self.name}' expects a number, got {type(value).__name__}"
                )
            if self.type is int and not isinstance(value, int):
                raise TypeError(f"'{self.name}' expects an int, got float")
            value = self.type(value)
            if self.minimum is not None and value < self.minimum:
                raise ValueError(f"'{self.name}' must be >= {self.minimum}, got {value}")
            if self.maximum is not None and value > self.maximum:
                raise ValueError(f"'{self.name}' must be <= {self.maximum}, got {value}")
            return value

        if not isinstance(value, str):
            raise TypeError(f"'{self.name}' expects a string, got {type(value).__name__}")
        if self.choices and value not in self.choices:
            raise ValueError(
                f"'{self.name}' must be one of {', '.join(self.choices)}, got {value!r}"
            )
        return value


def _bool(name: str, default: bool, summary: str = "") -> SettingsKey:
    return SettingsKey(name, bool, default, summary=summary)


def _int(name: str, default: int, lo: int, hi: int, summary: str = "") -> SettingsKey:
    return SettingsKey(name, int, default, lo, hi, summary=summary)


def _float(name: str, default: float, lo: float, hi: float, summary: str = "") -> SettingsKey:
    return SettingsKey(name, float, default, lo, hi, summary=summary)


def _color(name: str, default: str, summary: str = "") -> SettingsKey:
    return SettingsKey(name, str, default, summary=summary)


def _animation_time(nick: str, default: int) -> SettingsKey:
    return _int(f"{nick}-animation-time", default, 100, 10000,
                "Duration of the close animation in milliseconds")


def _close_effect(nick: str, default: bool = False) -> SettingsKey:
    return _bool(f"{nick}-close-effect", default,
                 "Use this effect when a window is closed")


LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


# -- Schema ----------------------------------------------------------------

SCHEMA: list[SettingsKey] = [
    # --- General ---
    _bool("destroy-dialogs", True, "Also animate closing dialog windows"),
    SettingsKey("close-preview-effect", str, "",
                summary="Nick of the effect used for the next preview window"),
    _bool("debug-logging", False, "Write a debug log to the cache directory"),
    SettingsKey("debug-log-level", str, "WARNING", choices=LOG_LEVELS,
                summary="Minimum level of debug log records"),

    # --- Energize A ---
    _close_effect("energize-a"),
    _animation_time("energize-a", 1500),
    _float("energize-a-scale", 1.0, 0.1, 3.0),
    _color("energize-a-color", "rgb(64,150,255)"),

    # --- Energize B ---
    _close_effect("energize-b"),
    _animation_time("energize-b", 1500),
    _float("energize-b-scale", 1.0, 0.1, 3.0),
    _color("energize-b-color", "rgb(255,140,50)"),

    # --- Fire ---
    _close_effect("fire", True),
    _animation_time("fire", 2000),
    _float("fire-movement-speed", 1.0, 0.0, 5.0),
    _float("fire-scale", 1.0, 0.1, 5.0),
    _bool("fire-3d-noise", True, "Use animated 3D noise for the flames"),
    _color("fire-color-1", "rgba(76,51,25,0)"),
    _color("fire-color-2", "rgba(180,55,30,0.7)"),
    _color("fire-color-3", "rgb(255,76,38)"),
    _color("fire-color-4", "rgb(255,166,25)"),
    _color("fire-color-5", "rgb(255,255,255)"),

    # --- Matrix ---
    _close_effect("matrix"),
    _animation_time("matrix", 2000),
    _float("matrix-scale", 1.0, 0.1, 3.0),
    _float("matrix-randomness", 1.0, 0.0, 1.0),
    _float("matrix-overshoot", 0.0, 0.0, 1.0),
    _color("matrix-trail-color", "rgb(100,255,100)"),
    _color("matrix-tip-color", "rgb(200,255,200)"),

    # --- Broken Glass ---
    _close_effect("broken-glass"),
    _animation_time("broken-glass", 2000),
    _float("broken-glass-scale", 1.0, 0.1, 3.0),
    _float("broken-glass-gravity", 1.0, 0.0, 3.0),
    _float("broken-glass-blow-force", 1.0, 0.0, 3.0),
    _bool("broken-glass-use-pointer", True,
          "Shards fly away from the mouse pointer"),

    # --- T-Rex Attack ---
    _close_effect("trex"),
    _animation_time("trex", 1500),
    _color("claw-scratch-color", "rgb(255,50,50)"),
    _float("claw-scratch-scale", 1.0, 0.1, 3.0),
    _int("claw-scratch-count", 4, 1, 20),
    _float("claw-scratch-warp", 0.5, 0.0, 1.0),

    # --- TV Effect ---
    _close_effect("tv"),
    _animation_time("tv", 1000),
    _color("tv-effect-color", "rgb(255,255,255)"),

    # --- Wisps ---
    _close_effect("wisps"),
    _animation_time("wisps", 3000),
    _float("wisps-scale", 1.0, 0.1, 3.0),
    _color("wisps-color-1", "rgb(100,150,255)"),
    _color("wisps-color-2", "rgb(150,255,150)"),
    _color("wisps-color-3", "rgb(255,200,100)"),
]

SCHEMA_BY_NAME: dict[str, SettingsKey] = {k.name: k for k in SCHEMA}
