# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Persistent settings store for Burn-My-Windows.

Values are stored as a JSON file in the OS-appropriate config directory.
Only values the user has changed are written; everything else falls back
to the default declared in :mod:`burnwin.core.schema`.  Every change is
written to disk immediately and announced through the :attr:`Settings.changed`
signal as well as through per-key callbacks (see :meth:`Settings.connect_changed`).

Widgets are tied to keys with :meth:`Settings.bind`; checkable actions
mirroring boolean keys come from :meth:`Settings.create_action`.
"""

from __future__ import annotations

import functools
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from PySide6.QtCore import QObject, QStandardPaths, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QDoubleSpinBox

from burnwin.core.colors import format_color, parse_color
from burnwin.core.schema import SCHEMA, SettingsKey

log = logging.getLogger(__name__)


# -- Location --------------------------------------------------------------

_SETTINGS_FILE = "settings.json"
_PATH_ENV = "BURNWIN_SETTINGS_PATH"


def _config_dir() -> Path:
    """Return (and create) the per-user config directory."""
    base = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppConfigLocation,
    )
    path = Path(base)
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_settings_path() -> Path:
    override = os.environ.get(_PATH_ENV)
    if override:
        return Path(override)
    return _config_dir() / _SETTINGS_FILE


# -- Widget property adapters ----------------------------------------------

@dataclass(frozen=True)
class _PropertyAdapter:
    signal: str
    read: Callable[[Any], Any]
    write: Callable[[Any, Any], None]


def _write_numeric(obj, value) -> None:
    if isinstance(obj, QDoubleSpinBox):
        obj.setValue(float(value))
    else:
        obj.setValue(int(round(value)))


def _read_current_id(combo):
    return combo.currentData() if combo.currentIndex() >= 0 else None


def _write_current_id(combo, value) -> None:
    combo.setCurrentIndex(combo.findData(value))


def _write_color(button, value) -> None:
    try:
        button.setColor(parse_color(value))
    except ValueError:
        log.warning("Ignoring invalid colour %r for %s", value, button.objectName())


_ADAPTERS: dict[str, _PropertyAdapter] = {
    # QCheckBox, QRadioButton, checkable QPushButton / QToolButton
    "checked": _PropertyAdapter(
        "toggled", lambda o: o.isChecked(), lambda o, v: o.setChecked(bool(v)),
    ),
    # QSpinBox, QDoubleSpinBox, QSlider, QDial
    "value": _PropertyAdapter("valueChanged", lambda o: o.value(), _write_numeric),
    # QComboBox items carrying an id as item data
    "current-id": _PropertyAdapter(
        "currentIndexChanged", _read_current_id, _write_current_id,
    ),
    # burnwin.ui.widgets.ColorButton
    "color": _PropertyAdapter(
        "colorSet", lambda o: format_color(o.color()), _write_color,
    ),
}

SUPPORTED_PROPERTIES: tuple[str, ...] = tuple(_ADAPTERS)


def _coerce(entry: SettingsKey, value: Any) -> Any:
    """Convert a raw widget value to the key's type."""
    if entry.type is int and isinstance(value, float):
        return int(round(value))
    if entry.type is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


# -- Store -----------------------------------------------------------------

class Settings(QObject):
    """Typed key/value store backed by a JSON file."""

    changed = Signal(str)

    def __init__(
        self,
        path: str | Path | None = None,
        schema: list[SettingsKey] | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._schema: dict[str, SettingsKey] = {
            k.name: k for k in (SCHEMA if schema is None else schema)
        }
        self._path = Path(path) if path is not None else default_settings_path()
        self._values: dict[str, Any] = {}
        self._watchers: dict[str, dict[int, Callable[[str], None]]] = {}
        self._next_handler = 1
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        """Read user values from disk.

        A missing or unreadable file leaves every key at its default.
        Unknown keys (left over from older versions) and values that no
        longer fit the schema are dropped.
        """
        if not self._path.exists():
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Could not read settings from %s: %s", self._path, exc)
            return
        if not isinstance(raw, dict):
            log.warning("Ignoring malformed settings file %s", self._path)
            return

        for name, value in raw.items():
            entry = self._schema.get(name)
            if entry is None:
                log.debug("Dropping unknown settings key '%s'", name)
                continue
            try:
                self._values[name] = entry.validate(value)
            except (TypeError, ValueError) as exc:
                log.warning("Dropping stored value for '%s': %s", name, exc)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(self._values, indent=2, sort_keys=True, ensure_ascii=False),
            encoding="utf-8",
        )

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def schema_key(self, key: str) -> SettingsKey:
        """Return the schema entry for *key*.  Raises KeyError if unknown."""
        try:
            return self._schema[key]
        except KeyError:
            raise KeyError(f"Unknown settings key '{key}'") from None

    def keys(self) -> list[str]:
        return list(self._schema)

    def get(self, key: str) -> Any:
        entry = self.schema_key(key)
        return self._values.get(key, entry.default)

    def set(self, key: str, value: Any) -> None:
        entry = self.schema_key(key)
        value = entry.validate(value)
        if key in self._values and self._values[key] == value:
            return

        old = self.get(key)
        self._values[key] = value
        self._save()
        if old != value:
            self._emit(key)

    def reset(self, key: str) -> None:
        """Drop the user value for *key* so its default applies again."""
        entry = self.schema_key(key)
        if key not in self._values:
            return

        old = self._values.pop(key)
        self._save()
        if old != entry.default:
            self._emit(key)

    def is_default(self, key: str) -> bool:
        """True if *key* has no user value."""
        self.schema_key(key)
        return key not in self._values

    def _typed(self, key: str, expected: type) -> SettingsKey:
        entry = self.schema_key(key)
        if entry.type is not expected:
            raise TypeError(f"'{key}' is a {entry.type.__name__} key, not {expected.__name__}")
        return entry

    def get_string(self, key: str) -> str:
        self._typed(key, str)
        return self.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._typed(key, str)
        self.set(key, value)

    def get_boolean(self, key: str) -> bool:
        self._typed(key, bool)
        return self.get(key)

    def set_boolean(self, key: str, value: bool) -> None:
        self._typed(key, bool)
        self.set(key, value)

    def get_int(self, key: str) -> int:
        self._typed(key, int)
        return self.get(key)

    def set_int(self, key: str, value: int) -> None:
        self._typed(key, int)
        self.set(key, value)

    def get_double(self, key: str) -> float:
        self._typed(key, float)
        return self.get(key)

    def set_double(self, key: str, value: float) -> None:
        self._typed(key, float)
        self.set(key, value)

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def connect_changed(self, key: str, callback: Callable[[str], None]) -> int:
        """Call *callback(key)* whenever the value of *key* changes.

        Returns a handler id for :meth:`disconnect_changed`.
        """
        self.schema_key(key)
        handler = self._next_handler
        self._next_handler += 1
        self._watchers.setdefault(key, {})[handler] = callback
        return handler

    def disconnect_changed(self, handler: int) -> None:
        for callbacks in self._watchers.values():
            if callbacks.pop(handler, None) is not None:
                return

    def _emit(self, key: str) -> None:
        log.debug("Setting '%s' changed to %r", key, self.get(key))
        for callback in list(self._watchers.get(key, {}).values()):
            callback(key)
        self.changed.emit(key)

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def bind(self, key: str, obj: QObject, prop: str) -> int:
        """Keep *key* and the property *prop* of *obj* in sync.

        The widget is initialised from the store.  Edits on either side
        propagate to the other until *obj* is destroyed.
        """
        adapter = _ADAPTERS.get(prop)
        if adapter is None:
            raise ValueError(
                f"Unsupported property '{prop}'; expected one of {', '.join(SUPPORTED_PROPERTIES)}"
            )
        entry = self.schema_key(key)
        updating = False

        def _to_widget(_key: str | None = None) -> None:
            nonlocal updating
            updating = True
            try:
                adapter.write(obj, self.get(key))
            finally:
                updating = False

        def _from_widget(*_args) -> None:
            if updating:
                return
            value = adapter.read(obj)
            if value is None:
                return
            self.set(key, _coerce(entry, value))

        _to_widget()
        getattr(obj, adapter.signal).connect(_from_widget)
        handler = self.connect_changed(key, _to_widget)
        obj.destroyed.connect(lambda *_: self.disconnect_changed(handler))
        log.debug("Bound '%s' to %s.%s", key, obj.objectName() or type(obj).__name__, prop)
        return handler

    def create_action(self, key: str, parent: QObject | None = None) -> QAction:
        """Return a checkable action that mirrors the boolean *key*."""
        entry = self.schema_key(key)
        if entry.type is not bool:
            raise TypeError(f"Actions can only be created for bool keys, '{key}' is {entry.type.__name__}")

        action = QAction(parent)
        action.setObjectName(key)
        action.setCheckable(True)
        action.setChecked(self.get(key))
        action.toggled.connect(lambda checked: self.set(key, bool(checked)))
        handler = self.connect_changed(key, lambda _key: action.setChecked(self.get(key)))
        action.destroyed.connect(lambda *_: self.disconnect_changed(handler))
        return action


# -- Shared store ----------------------------------------------------------

@functools.lru_cache(maxsize=None)
def _shared_settings(path: Path) -> Settings:
    log.debug("Opening shared settings store %s", path)
    return Settings(path)


def default_settings() -> Settings:
    """Return the process-wide store for :func:`default_settings_path`.

    Every caller asking for the same file gets the same object, so all
    preference windows see each other's changes.  The store has no Qt
    parent and lives until the process exits.
    """
    return _shared_settings(default_settings_path().resolve())
