# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Crash report written by the launcher's exception hook."""

from __future__ import annotations

import platform
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

from burnwin import __version__


def format_crash_report(exc_type, exc_value, exc_tb,
                        settings_path: Path | None = None,
                        now: datetime | None = None) -> str:
    """Header with the app and environment details, then the traceback."""
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%d %H:%M:%S UTC")
    lines = [
        f"Burn-My-Windows preferences {__version__} crashed",
        "",
        f"Time          : {stamp}",
        f"Python        : {platform.python_version()} ({sys.platform})",
        f"Settings file : {settings_path if settings_path else 'not loaded yet'}",
        f"Error         : {exc_type.__name__}: {exc_value}",
        "",
    ]
    body = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    return "\n".join(lines) + "\n" + body


def write_crash_report(target: Path, report: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(report, encoding="utf-8")
