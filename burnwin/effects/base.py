# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Base class of the effect descriptors shown in the preferences."""

from __future__ import annotations

from PySide6.QtWidgets import QWidget

from burnwin.ui.widgets import preferences_box


class Effect:
    """Metadata of one close effect.

    Subclasses set the class attributes and, if the effect has options,
    override :meth:`get_preferences`.  Descriptors are never instantiated;
    the registry holds the classes themselves.
    """

    # Stable machine identifier, also the prefix of the effect's keys.
    nick: str = ""
    # Human-readable name.
    label: str = ""
    # Oldest shell release (major, minor) the effect works on.
    min_shell_version: tuple[int, int] = (3, 36)

    @classmethod
    def get_nick(cls) -> str:
        return cls.nick

    @classmethod
    def get_label(cls) -> str:
        return cls.label

    @classmethod
    def get_min_shell_version(cls) -> list[int]:
        return list(cls.min_shell_version)

    @classmethod
    def get_preferences(cls, dialog) -> QWidget | None:
        """Return the effect's options widget, or None if it has none."""
        return None

    @classmethod
    def _attach(cls, dialog, groups: list[QWidget]) -> QWidget:
        """Wrap *groups* in the ``<nick>-prefs`` box and register it with
        the dialog's builder so the controls can be bound by name."""
        box = preferences_box(f"{cls.nick}-prefs", groups)
        dialog.get_builder().add_from_widget(box)
        return box
