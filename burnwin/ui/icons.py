# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Lucide icon rendering for the preferences dialog.

Stores Lucide SVG path data inline and renders them as QIcons / QPixmaps
via PySide6's QSvgRenderer.  Icons can be rendered at any size and colour.
``flame`` doubles as the application icon.

Source: https://lucide.dev/icons/
License: ISC (https://github.com/lucide-icons/lucide/blob/main/LICENSE)
"""

from __future__ import annotations

from PySide6.QtCore import Qt, QByteArray, QRectF
from PySide6.QtGui import QPixmap, QIcon, QPainter, QImage
from PySide6.QtSvg import QSvgRenderer


APP_ICON = "flame"

# -- SVG path data (Lucide, 24x24 viewBox) --------------------------------

_ICONS: dict[str, str] = {
    "flame": (
        '<path d="M8.5 14.5A2.5 2.5 0 0 0 11 12c0-1.38-.5-2-1-3-1.072-2.143-.224-4.054'
        ' 2-6 .5 2.5 2 4.9 4 6.5 2 1.6 3 3.5 3 5.5a7 7 0 1 1-14 0c0-1.153.433-2.294'
        ' 1-3a2.5 2.5 0 0 0 2.5 2.5z"/>'
    ),
    "menu": (
        '<line x1="4" x2="20" y1="12" y2="12"/>'
        '<line x1="4" x2="20" y1="6" y2="6"/>'
        '<line x1="4" x2="20" y1="18" y2="18"/>'
    ),
    "rotate-ccw": (
        '<path d="M3 12a9 9 0 1 0 9-9 9.75 9.75 0 0 0-6.74 2.74L3 8"/>'
        '<path d="M3 3v5h5"/>'
    ),
    "eye": (
        '<path d="M2 12s3-7 10-7 10 7 10 7-3 7-10 7-10-7-10-7Z"/>'
        '<circle cx="12" cy="12" r="3"/>'
    ),
    "chevron-down": '<path d="m6 9 6 6 6-6"/>',
    "heart": (
        '<path d="M19 14c1.49-1.46 3-3.21 3-5.5A5.5 5.5 0 0 0 16.5 3c-1.76 0-3 .5-4.5 2'
        '-1.5-1.5-2.74-2-4.5-2A5.5 5.5 0 0 0 2 8.5c0 2.3 1.5 4.05 3 5.5l7 7Z"/>'
    ),
    "external-link": (
        '<path d="M15 3h6v6"/>'
        '<path d="M10 14 21 3"/>'
        '<path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 2-2h6"/>'
    ),
    "palette": (
        '<circle cx="13.5" cy="6.5" r=".5"/>'
        '<circle cx="17.5" cy="10.5" r=".5"/>'
        '<circle cx="8.5" cy="7.5" r=".5"/>'
        '<circle cx="6.5" cy="12.5" r=".5"/>'
        '<path d="M12 2C6.5 2 2 6.5 2 12s4.5 10 10 10c.926 0 1.648-.746 1.648-1.688'
        ' 0-.437-.18-.835-.437-1.125-.29-.289-.438-.652-.438-1.125a1.64 1.64 0 0 1'
        ' 1.668-1.668h1.996c3.051 0 5.555-2.503 5.555-5.554C21.965 6.012 17.461 2 12 2z"/>'
    ),
}


# -- Rendering -------------------------------------------------------------

def _build_svg(icon_name: str, color: str, stroke_width: float = 2.0) -> bytes:
    """Build a complete SVG document for the given Lucide icon name."""
    paths = _ICONS.get(icon_name, "")
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
        f'viewBox="0 0 24 24" fill="none" stroke="{color}" '
        f'stroke-width="{stroke_width}" stroke-linecap="round" '
        f'stroke-linejoin="round">{paths}</svg>'
    )
    return svg.encode("utf-8")


def icon(name: str, size: int = 16, color: str = "#CDD2DA") -> QIcon:
    """Return a QIcon rendered from a Lucide icon at the given size and colour."""
    return QIcon(pixmap(name, size, color))


def pixmap(name: str, size: int = 16, color: str = "#CDD2DA") -> QPixmap:
    """Return a QPixmap rendered from a Lucide icon at the given size and colour."""
    svg_data = _build_svg(name, color)
    renderer = QSvgRenderer(QByteArray(svg_data))

    img = QImage(size, size, QImage.Format.Format_ARGB32)
    img.fill(Qt.GlobalColor.transparent)

    painter = QPainter(img)
    renderer.render(painter, QRectF(0, 0, size, size))
    painter.end()

    return QPixmap.fromImage(img)
