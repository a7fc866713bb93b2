# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Colour strings for the settings store.

Colours are persisted as CSS-style strings: ``rgb(255,76,38)`` for opaque
colours and ``rgba(180,55,30,0.7)`` when the alpha channel is in use.
Hex notation and SVG colour names are accepted on input as well.
"""

from __future__ import annotations

import re

from PySide6.QtGui import QColor


_FUNCTIONAL_RE = re.compile(r"^(rgba?)\s*\(\s*([^)]*)\)$", re.IGNORECASE)


def _channel(token: str) -> int:
    token = token.strip()
    if token.endswith("%"):
        value = float(token[:-1]) * 255.0 / 100.0
    else:
        value = float(token)
    return max(0, min(255, round(value)))


def _alpha(token: str) -> float:
    token = token.strip()
    if token.endswith("%"):
        value = float(token[:-1]) / 100.0
    else:
        value = float(token)
    return max(0.0, min(1.0, value))


def parse_color(text: str) -> QColor:
    """Parse a colour string into a :class:`QColor`.

    Raises :class:`ValueError` if *text* is not a colour.
    """
    stripped = text.strip()
    match = _FUNCTIONAL_RE.match(stripped)
    if match:
        func, args = match.group(1).lower(), match.group(2)
        parts = args.split(",")
        expected = 4 if func == "rgba" else 3
        if len(parts) != expected:
            raise ValueError(f"{func}() expects {expected} components: {text!r}")
        try:
            r, g, b = (_channel(p) for p in parts[:3])
            a = _alpha(parts[3]) if func == "rgba" else 1.0
        except ValueError:
            raise ValueError(f"Invalid colour component in {text!r}") from None
        color = QColor(r, g, b)
        color.setAlphaF(a)
        return color

    color = QColor(stripped)
    if not stripped or not color.isValid():
        raise ValueError(f"Not a colour: {text!r}")
    return color


def format_color(color: QColor) -> str:
    """Return the canonical settings string for *color*."""
    r, g, b = color.red(), color.green(), color.blue()
    if color.alpha() == 255:
        return f"rgb({r},{g},{b})"
    return f"rgba({r},{g},{b},{round(color.alphaF(), 3):g})"
