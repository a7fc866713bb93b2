# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Version of the desktop shell the effects run in.

Effects declare the oldest shell release they work with; the preferences
dialog hides every effect the running shell is too old for.
"""

from __future__ import annotations

import functools
import logging
import os
import re
import shutil
import subprocess

log = logging.getLogger(__name__)

_VERSION_ENV = "BURNWIN_SHELL_VERSION"
_VERSION_RE = re.compile(r"(\d+)(?:\.([0-9A-Za-z]+))?")


@functools.lru_cache(maxsize=1)
def shell_version() -> str | None:
    """Return the running shell's version string, e.g. ``"41.1"``.

    ``$BURNWIN_SHELL_VERSION`` takes precedence over asking
    ``gnome-shell --version`` unless it is not a version number.  Returns
    None if neither is available.
    """
    override = os.environ.get(_VERSION_ENV, "").strip()
    if override:
        if _VERSION_RE.search(override):
            return override
        log.warning("Ignoring $%s=%r, not a version number", _VERSION_ENV, override)

    exe = shutil.which("gnome-shell")
    if not exe:
        log.info("gnome-shell not found; showing all effects")
        return None
    try:
        out = subprocess.run(
            [exe, "--version"], capture_output=True, text=True, timeout=5, check=True,
        ).stdout
    except (OSError, subprocess.SubprocessError) as exc:
        log.warning("Could not query the shell version: %s", exc)
        return None

    match = _VERSION_RE.search(out)
    if not match:
        log.warning("Unexpected output from gnome-shell --version: %r", out)
        return None
    return match.group(0)


def parse_version(text: str) -> tuple[int, int]:
    """Split a version string into ``(major, minor)``.

    Pre-release minors like ``40.beta`` or ``41.alpha`` sort before ``.0``
    and are returned as ``-1``.  A missing minor counts as ``0``.
    """
    match = _VERSION_RE.search(text)
    if not match:
        raise ValueError(f"Not a version: {text!r}")
    major = int(match.group(1))
    minor_text = match.group(2)
    if minor_text is None:
        return major, 0
    return major, int(minor_text) if minor_text.isdigit() else -1


def shell_version_is_at_least(major: int, minor: int, current: str | None = None) -> bool:
    """True if the shell version (or *current*) is *major*.*minor* or newer.

    An unknown shell version supports everything.
    """
    if current is None:
        current = shell_version()
    if current is None:
        return True

    current_major, current_minor = parse_version(current)
    if current_major == major:
        return current_minor >= minor
    return current_major > major
