# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Menus of the preferences header bar.

The main menu holds links to the project pages; the close-effects menu
holds one checkable entry per effect, each mirroring the effect's
``<nick>-close-effect`` key.
"""

from __future__ import annotations

import logging
import webbrowser

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu

from burnwin.ui.icons import icon as lucide_icon
from burnwin.ui.style import active_theme

log = logging.getLogger(__name__)


_REPO_URL = "https://github.com/Schneegans/Burn-My-Windows"

# (action name, menu label, uri); None marks a separator
MAIN_MENU_LINKS: list[tuple[str, str, str] | None] = [
    ("homepage",      "Homepage",                f"{_REPO_URL}"),
    ("changelog",     "Changelog",               f"{_REPO_URL}/blob/main/docs/changelog.md"),
    ("bugs",          "Report a Bug",            f"{_REPO_URL}/issues"),
    ("new-effect",    "Create a New Effect",     f"{_REPO_URL}/blob/main/docs/how-to-create-new-effects.md"),
    None,
    ("donate-paypal", "Donate via PayPal",       "https://www.paypal.com/donate/?hosted_button_id=3F7UFL8KLVPXE"),
    ("donate-github", "Become a GitHub Sponsor", "https://github.com/sponsors/Schneegans"),
]


def open_uri(uri: str) -> None:
    log.debug("Opening %s", uri)
    if not webbrowser.open(uri):
        log.warning("No web browser available to open %s", uri)


def populate_main_menu(menu: QMenu, group: dict[str, QAction]) -> None:
    """Add the link actions to *menu* and record them in *group* by name."""
    for entry in MAIN_MENU_LINKS:
        if entry is None:
            menu.addSeparator()
            continue
        name, text, uri = entry
        glyph = "heart" if name.startswith("donate-") else "external-link"
        group[name] = _action(
            menu, text, name=name, icon_name=glyph,
            callback=lambda _=False, u=uri: open_uri(u),
        )


def populate_close_effects_menu(menu: QMenu, group: dict[str, QAction],
                                effects: list, settings) -> None:
    """Add one checkable action per effect to *menu*.

    The actions are created by the settings store so that they stay in
    sync with the ``<nick>-close-effect`` keys.
    """
    for effect in effects:
        action_name = f"{effect.get_nick()}-close-effect"
        action = settings.create_action(action_name, menu)
        action.setText(effect.get_label())
        menu.addAction(action)
        group[action_name] = action


# ----------------------------------------------------------------------
# Helper
# ----------------------------------------------------------------------

def _action(
    menu: QMenu,
    text: str,
    *,
    name: str = "",
    icon_name: str = "",
    callback=None,
) -> QAction:
    """Create a QAction, add it to *menu*, and return it."""
    action = QAction(text, menu)
    if name:
        action.setObjectName(name)
    if icon_name:
        action.setIcon(lucide_icon(icon_name, 16, active_theme().fg_primary))
    if callback:
        action.triggered.connect(callback)
    menu.addAction(action)
    return action
