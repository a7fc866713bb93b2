# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Theme engine for the Burn-My-Windows preferences.

Every colour and dimension token used by the dialog lives here.  Themes are
``Theme`` dataclass instances; :func:`build_stylesheet` turns the active
theme into the QSS installed on the preferences widget.

Widgets opt into the special rules below through the ``cssClass`` dynamic
property (see :func:`add_css_class`), the Qt counterpart of a style class.

Usage
-----
    from burnwin.ui.style import set_theme, build_stylesheet

    set_theme("Light")
    widget.setStyleSheet(build_stylesheet())
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtGui import QPalette


# ======================================================================
# Theme dataclass
# ======================================================================

@dataclass(frozen=True)
class Theme:
    name: str

    # Backgrounds
    bg_base:     str   # deepest background
    bg_surface:  str   # header bar / sidebar
    bg_elevated: str   # menus / group boxes
    bg_hover:    str
    bg_pressed:  str

    # Foregrounds
    fg_primary:   str
    fg_secondary: str  # hints, captions
    fg_disabled:  str

    border: str

    # Accents
    accent_primary:   str  # selections, switches
    accent_secondary: str  # hover on accented controls

    font_size: str = "10pt"


THEMES: dict[str, Theme] = {
    "Dark": Theme(
        name="Dark",
        bg_base="#1E1E1E", bg_surface="#262626", bg_elevated="#2E2E2E",
        bg_hover="#363636", bg_pressed="#404040",
        fg_primary="#E6E6E6", fg_secondary="#9A9A9A", fg_disabled="#5A5A5A",
        border="#383838",
        accent_primary="#E0622A", accent_secondary="#F28A3B",
    ),
    "Light": Theme(
        name="Light",
        bg_base="#FAFAFA", bg_surface="#EDEDED", bg_elevated="#FFFFFF",
        bg_hover="#E0E0E0", bg_pressed="#D0D0D0",
        fg_primary="#1E1E1E", fg_secondary="#5E5E5E", fg_disabled="#B0B0B0",
        border="#D6D6D6",
        accent_primary="#D1521C", accent_secondary="#E0622A",
    ),
}


# ======================================================================
# Active theme state
# ======================================================================

_active: Theme = THEMES["Dark"]


def active_theme() -> Theme:
    """Return the current global theme."""
    return _active


def set_theme(name: str) -> Theme:
    """Set the active theme by name.  Returns the new theme."""
    global _active
    _active = THEMES.get(name, THEMES["Dark"])
    return _active


def theme_for_palette(palette: QPalette) -> str:
    """Pick the theme matching the lightness of the platform palette."""
    window = palette.color(QPalette.ColorRole.Window)
    return "Dark" if window.lightness() < 128 else "Light"


def add_css_class(widget, name: str) -> None:
    """Tag *widget* with a style class used by the selectors below."""
    classes = set(str(widget.property("cssClass") or "").split())
    classes.add(name)
    widget.setProperty("cssClass", " ".join(sorted(classes)))


# ======================================================================
# Dimensions (theme-independent)
# ======================================================================

_RADIUS = "6px"
_SEPARATOR_H = "1px"
_RESET_SIZE = "24px"


# ======================================================================
# Stylesheet builder
# ======================================================================

def build_stylesheet(theme: Theme | None = None) -> str:
    """Return the QSS for the preferences widget."""
    t = theme or _active

    return f"""

    /* ================================================================= */
    /*  Base                                                              */
    /* ================================================================= */

    QWidget       {{ color: {t.fg_primary}; font-size: {t.font_size}; }}
    QDialog       {{ background-color: {t.bg_base}; }}
    QStackedWidget {{ background-color: {t.bg_base}; }}
    QScrollArea   {{ background-color: {t.bg_base}; border: none; }}
    QScrollArea > QWidget > QWidget {{ background-color: {t.bg_base}; }}
    QLabel        {{ background: transparent; }}

    QLabel[cssClass~="large-title"] {{
        font-size: 20pt; font-weight: 300; color: {t.fg_primary};
    }}
    QLabel[cssClass~="dim-label"] {{ color: {t.fg_secondary}; }}

    /* ================================================================= */
    /*  Header bar + sidebar                                              */
    /* ================================================================= */

    QWidget[cssClass~="header-bar"] {{
        background-color: {t.bg_surface};
        border-bottom: {_SEPARATOR_H} solid {t.border};
    }}
    QListWidget[cssClass~="sidebar"] {{
        background-color: {t.bg_surface}; border: none;
        border-right: {_SEPARATOR_H} solid {t.border};
        outline: none; padding-top: 6px;
    }}
    QListWidget[cssClass~="sidebar"]::item {{
        padding: 8px 14px; border: none; color: {t.fg_secondary};
    }}
    QListWidget[cssClass~="sidebar"]::item:selected {{
        background-color: {t.bg_pressed}; color: {t.fg_primary};
        border-left: 3px solid {t.accent_primary};
    }}
    QListWidget[cssClass~="sidebar"]::item:hover:!selected {{
        background-color: {t.bg_hover};
    }}

    /* ================================================================= */
    /*  Menus                                                             */
    /* ================================================================= */

    QMenu {{
        background-color: {t.bg_elevated}; color: {t.fg_primary};
        border: {_SEPARATOR_H} solid {t.border};
        border-radius: {_RADIUS}; padding: 4px 0px;
    }}
    QMenu::item {{ padding: 5px 22px; margin: 0px 4px; border-radius: 3px; }}
    QMenu::item:selected {{ background-color: {t.bg_hover}; }}
    QMenu::separator {{
        height: {_SEPARATOR_H}; background-color: {t.border}; margin: 4px 12px;
    }}

    /* ================================================================= */
    /*  Preference groups                                                 */
    /* ================================================================= */

    QGroupBox {{
        background-color: {t.bg_elevated};
        border: {_SEPARATOR_H} solid {t.border};
        border-radius: {_RADIUS};
        margin-top: 18px; padding: 10px 8px 6px 8px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin; left: 4px; padding: 0px 2px;
        color: {t.fg_secondary}; font-weight: 600;
    }}

    /* ================================================================= */
    /*  Buttons                                                           */
    /* ================================================================= */

    QPushButton, QToolButton {{
        background-color: {t.bg_elevated}; color: {t.fg_primary};
        border: {_SEPARATOR_H} solid {t.border}; border-radius: {_RADIUS};
        padding: 5px 12px;
    }}
    QPushButton:hover, QToolButton:hover {{ background-color: {t.bg_hover}; }}
    QPushButton:pressed, QToolButton:pressed {{ background-color: {t.bg_pressed}; }}
    QToolButton::menu-indicator {{ image: none; }}

    QPushButton[cssClass~="suggested-action"] {{
        background-color: {t.accent_primary}; color: #FFFFFF; border: none;
    }}
    QPushButton[cssClass~="suggested-action"]:hover {{
        background-color: {t.accent_secondary};
    }}

    QToolButton[cssClass~="reset-button"] {{
        background: transparent; border: none; padding: 2px;
        min-width: {_RESET_SIZE}; min-height: {_RESET_SIZE};
    }}
    QToolButton[cssClass~="reset-button"]:hover {{ background-color: {t.bg_hover}; }}

    QPushButton[cssClass~="color-button"] {{ padding: 3px; min-width: 44px; }}

    /* ================================================================= */
    /*  Inputs                                                            */
    /* ================================================================= */

    QCheckBox {{ spacing: 6px; }}
    QCheckBox::indicator {{
        width: 34px; height: 18px; border-radius: 9px;
        background-color: {t.bg_pressed};
    }}
    QCheckBox::indicator:checked {{ background-color: {t.accent_primary}; }}
    QCheckBox::indicator:disabled {{ background-color: {t.fg_disabled}; }}

    QSlider::groove:horizontal {{
        height: 4px; border-radius: 2px; background-color: {t.bg_pressed};
    }}
    QSlider::sub-page:horizontal {{
        height: 4px; border-radius: 2px; background-color: {t.accent_primary};
    }}
    QSlider::handle:horizontal {{
        width: 14px; height: 14px; margin: -5px 0px; border-radius: 7px;
        background-color: {t.fg_primary};
    }}
    QSlider::handle:horizontal:hover {{ background-color: {t.accent_secondary}; }}

    QSpinBox, QDoubleSpinBox, QComboBox {{
        background-color: {t.bg_base}; color: {t.fg_primary};
        border: {_SEPARATOR_H} solid {t.border}; border-radius: 4px;
        padding: 3px 6px;
    }}
    QComboBox QAbstractItemView {{
        background-color: {t.bg_elevated}; color: {t.fg_primary};
        selection-background-color: {t.bg_hover};
    }}
    """
