# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
_CACHE_DIR = _ROOT / "cache"
_CRASH_LOG = _CACHE_DIR / "latest.log"

# Known once the settings store has been opened.
_settings_path: Path | None = None


def _install_crash_logger() -> None:
    """Write unhandled errors to ``cache/latest.log``, then hand them on to
    the previous exception hook."""
    from burnwin.crash import format_crash_report, write_crash_report

    previous_hook = sys.excepthook

    def _crash_hook(exc_type, exc_value, exc_tb):
        report = format_crash_report(exc_type, exc_value, exc_tb, _settings_path)
        try:
            write_crash_report(_CRASH_LOG, report)
        except OSError as exc:
            print(f"Could not write {_CRASH_LOG}: {exc}", file=sys.stderr)
        previous_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = _crash_hook


def _apply_debug_logging() -> None:
    """Configure Python logging based on the user's debug settings."""
    global _settings_path
    import logging
    from burnwin.app import set_application_names
    from burnwin.core.settings import default_settings

    set_application_names()
    settings = default_settings()
    _settings_path = settings.path
    if settings.get_boolean("debug-logging"):
        level = getattr(logging, settings.get_string("debug-log-level"), logging.WARNING)
        log_file = _CACHE_DIR / "burnwin_debug.log"
        _CACHE_DIR.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            handlers=[
                logging.FileHandler(str(log_file), encoding="utf-8"),
                logging.StreamHandler(sys.stderr),
            ],
            force=True,
        )
    else:
        logging.basicConfig(level=logging.WARNING, force=True)


def main():
    _install_crash_logger()
    _apply_debug_logging()
    from burnwin.app import PrefsApp
    app = PrefsApp(sys.argv)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
