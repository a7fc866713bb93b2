# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Preferences dialog for Burn-My-Windows.

Layout
------
Header bar with the close-effects menu and the main menu, a sidebar on the
left and a stack of pages on the right.  The first page holds the general
options; every other page belongs to one effect and is built from the
:class:`~burnwin.ui.effect_page.EffectPage` template plus whatever the
effect's ``get_preferences()`` returns.

Unlike a staged settings dialog, every control is bound directly to the
settings store: changes are applied (and saved) immediately.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication, QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QMenu,
    QScrollArea, QStackedWidget, QToolButton, QVBoxLayout, QWidget,
)

from burnwin import __version__
from burnwin.core.schema import LOG_LEVELS
from burnwin.core.settings import Settings, default_settings
from burnwin.effects import ALL_EFFECTS, available_effects
from burnwin.ui.builder import Builder
from burnwin.ui.effect_page import EffectPage
from burnwin.ui.icons import APP_ICON, icon as lucide_icon
from burnwin.ui.main_menu import populate_close_effects_menu, populate_main_menu
from burnwin.ui.style import (
    active_theme, add_css_class, build_stylesheet, set_theme, theme_for_palette,
)
from burnwin.ui.widgets import combo_row, preferences_box, preferences_group, switch_row

log = logging.getLogger(__name__)

APP_TITLE = "Burn-My-Windows"


class PreferencesDialog(QObject):
    """Builds the preferences widget and binds it to the settings store.

    A new instance is created for every preferences window, so several
    windows can be open at the same time.  Without an explicit store they
    all share the process-wide one from :func:`default_settings` and so stay
    in sync.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        effects: list | None = None,
        shell_version: str | None = None,
    ):
        super().__init__()

        # Theme and stylesheet follow the platform palette.
        app = QApplication.instance()
        if app is not None:
            set_theme(theme_for_palette(app.palette()))

        # Store a reference to the settings object.
        self._settings = settings if settings is not None else default_settings()
        self._effects = list(ALL_EFFECTS if effects is None else effects)
        self._shell_version = shell_version
        self._pages: dict[str, EffectPage] = {}
        self._action_groups: dict[str, dict[str, QAction]] = {
            "prefs": {}, "close-effects": {},
        }
        self._realized = False

        # Build the general user interface.
        self._builder = Builder()
        self._widget = self._build_main_ui()
        self._builder.add_from_widget(self._widget)
        self._widget.setStyleSheet(build_stylesheet())
        self._widget.setWindowIcon(lucide_icon(APP_ICON, 64, active_theme().accent_primary))

        # The dialog lives as long as its widget does.
        self.setParent(self._widget)

        # Bind general options properties.
        self.bind_switch("destroy-dialogs")
        self.bind_switch("debug-logging")
        self.bind_combobox("debug-log-level")

        # Add all effect pages.
        effects_shown = self.available_effects()
        for effect in effects_shown:
            page = EffectPage(effect, self)

            # Add the effect's preferences (if any).
            preferences = effect.get_preferences(self)
            if preferences is not None:
                self.box_append(page, preferences)
            page.finish()

            self._add_titled(page, effect.get_nick(), effect.get_label())
            self._pages[effect.get_nick()] = page

        log.debug(
            "Showing %d of %d effects", len(effects_shown), len(self._effects),
        )

        # Populate the menus of the header bar.
        populate_main_menu(self._builder.get_object("main-menu"), self._action_groups["prefs"])
        populate_close_effects_menu(
            self._builder.get_object("close-effect-menu"),
            self._action_groups["close-effects"],
            effects_shown, self._settings,
        )

        self._sidebar.setCurrentRow(0)

        # Some things need the top-level window, which only exists once the
        # widget is shown.
        self._widget.installEventFilter(self)
        # The dialog is a child of the widget and is gone by the time
        # 'destroyed' fires, so a bound slot would never be called.
        self._widget.destroyed.connect(lambda *_: self._on_destroyed())

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get_builder(self) -> Builder:
        """The named object registry.  Effects use it to look up and
        register their widgets."""
        return self._builder

    def get_settings(self) -> Settings:
        return self._settings

    def get_widget(self) -> QWidget:
        """The top-level widget of the preferences."""
        return self._widget

    def available_effects(self) -> list:
        """Effects supported by the running shell, in registry order."""
        return available_effects(self._effects, self._shell_version)

    def effect_page(self, nick: str) -> EffectPage | None:
        return self._pages.get(nick)

    def actions(self, group: str) -> dict[str, QAction]:
        """Actions of the ``prefs`` or ``close-effects`` group by name."""
        return dict(self._action_groups[group])

    def show_page(self, name: str) -> bool:
        """Switch to the page named *name* (``general`` or an effect nick)."""
        for row in range(self._sidebar.count()):
            if self._sidebar.item(row).data(Qt.ItemDataRole.UserRole) == name:
                self._sidebar.setCurrentRow(row)
                return True
        log.warning("No preferences page named '%s'", name)
        return False

    def current_page(self) -> str:
        item = self._sidebar.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item else ""

    # Connects a QComboBox whose items carry ids as item data to a settings
    # key.  It also binds the corresponding reset button.
    def bind_combobox(self, key: str) -> None:
        self._bind(key, "current-id")

    # Connects a spin box or slider (anything with a 'value') to a settings
    # key.  It also binds the corresponding reset button.
    def bind_adjustment(self, key: str) -> None:
        self._bind(key, "value")

    # Connects a checkbox (anything checkable) to a settings key.  It also
    # binds the corresponding reset button.
    def bind_switch(self, key: str) -> None:
        self._bind(key, "checked")

    # Colours are stored as strings like 'rgb(255,76,38)'.  It also binds
    # the corresponding reset button.
    def bind_color_button(self, key: str) -> None:
        self._bind(key, "color")

    def box_append(self, box: QWidget, child: QWidget) -> None:
        """Append *child* to the vertical layout of *box*."""
        layout = box.layout()
        if layout is None:
            layout = QVBoxLayout(box)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(child)

    # ------------------------------------------------------------------
    # Build UI
    # ------------------------------------------------------------------

    def _build_main_ui(self) -> QWidget:
        root_widget = QWidget()
        root_widget.setObjectName("settings-widget")
        root_widget.resize(760, 620)
        root = QVBoxLayout(root_widget)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # -- Header bar ------------------------------------------------
        header = QWidget()
        header.setObjectName("header-bar")
        add_css_class(header, "header-bar")
        h = QHBoxLayout(header)
        h.setContentsMargins(10, 6, 10, 6)
        h.setSpacing(6)
        h.addStretch()

        fg = active_theme().fg_primary

        close_btn = QToolButton()
        close_btn.setObjectName("close-effect-button")
        close_btn.setText("Close Effects ")
        close_btn.setIcon(lucide_icon("chevron-down", 14, fg))
        close_btn.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        close_btn.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        close_btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        close_btn.setToolTip("Choose the effects used when a window is closed")
        close_menu = QMenu(close_btn)
        close_menu.setObjectName("close-effect-menu")
        close_btn.setMenu(close_menu)
        h.addWidget(close_btn)

        menu_btn = QToolButton()
        menu_btn.setObjectName("menu-button")
        menu_btn.setIcon(lucide_icon("menu", 16, fg))
        menu_btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        main_menu = QMenu(menu_btn)
        main_menu.setObjectName("main-menu")
        menu_btn.setMenu(main_menu)
        h.addWidget(menu_btn)

        root.addWidget(header)

        # -- Sidebar + stack -------------------------------------------
        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setObjectName("main-sidebar")
        add_css_class(self._sidebar, "sidebar")
        self._sidebar.setFixedWidth(170)
        self._sidebar.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        body.addWidget(self._sidebar)

        self._stack = QStackedWidget()
        self._stack.setObjectName("main-stack")
        body.addWidget(self._stack, 1)

        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)
        root.addLayout(body, 1)

        self._add_titled(self._general_page(), "general", "General")
        return root_widget

    def _general_page(self) -> QWidget:
        page = QWidget()
        page.setObjectName("general-page")
        layout = QVBoxLayout(page)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        title = QLabel("General Options")
        add_css_class(title, "large-title")
        layout.addWidget(title)

        layout.addWidget(preferences_box("general-prefs", [
            preferences_group("Behavior", [
                switch_row(
                    "destroy-dialogs", "Animate Dialogs",
                    "Also use the effects when dialog windows are closed.",
                ),
            ]),
            preferences_group("Debugging", [
                switch_row(
                    "debug-logging", "Debug Log",
                    "Write a log file to the cache directory. Takes effect after a restart.",
                ),
                combo_row(
                    "debug-log-level", "Log Level",
                    [(level, level.title()) for level in LOG_LEVELS],
                ),
            ]),
        ]))

        layout.addStretch()
        return page

    def _add_titled(self, page: QWidget, name: str, title: str) -> None:
        """Add *page* to the stack and a matching entry to the sidebar."""
        scroll = QScrollArea()
        scroll.setObjectName(name)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setWidget(page)
        self._stack.addWidget(scroll)

        item = QListWidgetItem(title)
        item.setData(Qt.ItemDataRole.UserRole, name)
        item.setTextAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self._sidebar.addItem(item)

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    # Searches for a reset button for the given settings key and makes it
    # reset the key when clicked.
    def _bind_reset_button(self, key: str) -> None:
        button = self._builder.get_object(f"reset-{key}")
        if button is not None:
            button.clicked.connect(lambda _=False, k=key: self._settings.reset(k))

    # Connects a widget property to a settings key.  The widget must have
    # the settings key as object name.
    def _bind(self, key: str, prop: str) -> None:
        obj = self._builder.get_object(key)
        if obj is not None:
            self._settings.bind(key, obj, prop)
        else:
            log.debug("No widget named '%s', skipping binding", key)
        self._bind_reset_button(key)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def eventFilter(self, obj, event) -> bool:
        if (not self._realized and obj is self._widget
                and event.type() == QEvent.Type.Show):
            self._realized = True
            self._on_realize(self._widget.window())
        return super().eventFilter(obj, event)

    def _on_realize(self, window: QWidget) -> None:
        # Show the version number in the title bar.
        window.setWindowTitle(f"{APP_TITLE} {__version__}")
        window.setWindowIcon(self._widget.windowIcon())

        # Make the menu entries reachable from the whole window.
        for group in self._action_groups.values():
            for action in group.values():
                if action not in window.actions():
                    window.addAction(action)

    def _on_destroyed(self) -> None:
        log.debug("Preferences widget destroyed")
        self._pages.clear()
        for group in self._action_groups.values():
            group.clear()


def build_prefs_widget(settings: Settings | None = None) -> QWidget:
    """Create a new preferences dialog and return its widget.

    Every call builds an independent dialog on the shared settings store,
    so several preference windows can be open at once.
    """
    dialog = PreferencesDialog(settings)
    return dialog.get_widget()
