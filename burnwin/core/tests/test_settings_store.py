"""Tests for the JSON-backed settings store and its widget bindings."""

import json
from pathlib import Path

import pytest
import shiboken6
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QCheckBox, QComboBox, QDoubleSpinBox, QSpinBox

from burnwin.core.schema import SCHEMA
from burnwin.core.settings import Settings, default_settings, default_settings_path
from burnwin.ui.widgets import ColorButton


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


class TestValues:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.get_boolean("destroy-dialogs") is True
        assert settings.get_int("fire-animation-time") == 2000
        assert settings.get_string("close-preview-effect") == ""
        assert settings.is_default("fire-scale")
        assert settings.keys() == [k.name for k in SCHEMA]

    def test_set_persists_only_user_values(self, settings: Settings, settings_path: Path) -> None:
        settings.set_double("fire-scale", 2.5)
        assert settings.get_double("fire-scale") == 2.5
        assert not settings.is_default("fire-scale")
        assert _read(settings_path) == {"fire-scale": 2.5}

        reloaded = Settings(settings_path)
        assert reloaded.get_double("fire-scale") == 2.5

    def test_reset(self, settings: Settings, settings_path: Path) -> None:
        settings.set_int("tv-animation-time", 3000)
        settings.reset("tv-animation-time")
        assert settings.get_int("tv-animation-time") == 1000
        assert settings.is_default("tv-animation-time")
        assert _read(settings_path) == {}

    def test_unknown_key(self, settings: Settings) -> None:
        with pytest.raises(KeyError):
            settings.get("no-such-key")
        with pytest.raises(KeyError):
            settings.set("no-such-key", 1)

    def test_invalid_values_are_rejected(self, settings: Settings, settings_path: Path) -> None:
        with pytest.raises(TypeError):
            settings.set("destroy-dialogs", "yes")
        with pytest.raises(ValueError):
            settings.set("fire-animation-time", 50)
        assert not settings_path.exists()

    def test_typed_accessors_check_key_type(self, settings: Settings) -> None:
        with pytest.raises(TypeError):
            settings.get_string("destroy-dialogs")
        with pytest.raises(TypeError):
            settings.set_int("fire-scale", 2)

    def test_int_is_accepted_for_double(self, settings: Settings) -> None:
        settings.set("fire-scale", 2)
        assert settings.get("fire-scale") == 2.0
        assert isinstance(settings.get("fire-scale"), float)


class TestLoading:
    def test_missing_file(self, tmp_path: Path) -> None:
        s = Settings(tmp_path / "nested" / "settings.json")
        assert s.get_boolean("fire-close-effect") is True
        s.set_boolean("fire-close-effect", False)
        assert (tmp_path / "nested" / "settings.json").exists()

    def test_corrupt_file(self, settings_path: Path) -> None:
        settings_path.write_text("{not json", encoding="utf-8")
        s = Settings(settings_path)
        assert s.get_int("fire-animation-time") == 2000

    def test_non_object_file(self, settings_path: Path) -> None:
        settings_path.write_text("[1, 2, 3]", encoding="utf-8")
        s = Settings(settings_path)
        assert s.is_default("fire-animation-time")

    def test_bad_entries_are_dropped(self, settings_path: Path) -> None:
        settings_path.write_text(json.dumps({
            "old-removed-key": 5,
            "fire-animation-time": "slow",
            "tv-animation-time": 99999,
            "wisps-animation-time": 2500,
        }), encoding="utf-8")
        s = Settings(settings_path)
        assert s.get_int("fire-animation-time") == 2000
        assert s.get_int("tv-animation-time") == 1000
        assert s.get_int("wisps-animation-time") == 2500

    def test_env_override(self, tmp_path: Path, monkeypatch) -> None:
        target = tmp_path / "elsewhere.json"
        monkeypatch.setenv("BURNWIN_SETTINGS_PATH", str(target))
        assert default_settings_path() == target
        assert Settings().path == target

    def test_default_store_is_shared_per_file(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("BURNWIN_SETTINGS_PATH", str(tmp_path / "a.json"))
        first = default_settings()
        assert default_settings() is first
        assert first.parent() is None

        monkeypatch.setenv("BURNWIN_SETTINGS_PATH", str(tmp_path / "b.json"))
        assert default_settings() is not first


class TestNotification:
    def test_changed_signal(self, settings: Settings) -> None:
        seen = []
        settings.changed.connect(seen.append)
        settings.set_boolean("destroy-dialogs", False)
        settings.set_boolean("destroy-dialogs", False)
        settings.reset("destroy-dialogs")
        assert seen == ["destroy-dialogs", "destroy-dialogs"]

    def test_setting_the_default_explicitly_is_silent(self, settings: Settings, settings_path: Path) -> None:
        seen = []
        settings.changed.connect(seen.append)
        settings.set_int("fire-animation-time", 2000)
        assert seen == []
        assert not settings.is_default("fire-animation-time")
        settings.reset("fire-animation-time")
        assert seen == []
        assert _read(settings_path) == {}

    def test_per_key_callbacks(self, settings: Settings) -> None:
        seen = []
        handler = settings.connect_changed("tv-effect-color", seen.append)
        settings.set_string("wisps-color-1", "rgb(1,2,3)")
        settings.set_string("tv-effect-color", "rgb(1,2,3)")
        settings.disconnect_changed(handler)
        settings.set_string("tv-effect-color", "rgb(4,5,6)")
        assert seen == ["tv-effect-color"]

    def test_connect_unknown_key(self, settings: Settings) -> None:
        with pytest.raises(KeyError):
            settings.connect_changed("no-such-key", print)


class TestBind:
    def test_checked(self, qapp, settings: Settings) -> None:
        box = QCheckBox()
        settings.bind("destroy-dialogs", box, "checked")
        assert box.isChecked()

        box.setChecked(False)
        assert settings.get_boolean("destroy-dialogs") is False

        settings.reset("destroy-dialogs")
        assert box.isChecked()

    def test_double_value(self, qapp, settings: Settings) -> None:
        spin = QDoubleSpinBox()
        spin.setRange(0.1, 5.0)
        settings.bind("fire-scale", spin, "value")
        assert spin.value() == 1.0

        spin.setValue(2.5)
        assert settings.get_double("fire-scale") == 2.5

        settings.set_double("fire-scale", 0.5)
        assert spin.value() == 0.5

    def test_int_value(self, qapp, settings: Settings) -> None:
        spin = QSpinBox()
        spin.setRange(100, 10000)
        settings.bind("matrix-animation-time", spin, "value")
        assert spin.value() == 2000

        spin.setValue(4000)
        assert settings.get_int("matrix-animation-time") == 4000

    def test_current_id(self, qapp, settings: Settings) -> None:
        combo = QComboBox()
        for level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            combo.addItem(level.title(), level)
        settings.bind("debug-log-level", combo, "current-id")
        assert combo.currentData() == "WARNING"

        combo.setCurrentIndex(0)
        assert settings.get_string("debug-log-level") == "DEBUG"

        settings.set_string("debug-log-level", "ERROR")
        assert combo.currentIndex() == 3

    def test_color(self, qapp, settings: Settings) -> None:
        button = ColorButton()
        settings.bind("tv-effect-color", button, "color")
        assert button.color() == QColor(255, 255, 255)

        button.setColor(QColor(1, 2, 3))
        assert settings.get_string("tv-effect-color") == "rgb(255,255,255)"
        button.colorSet.emit()
        assert settings.get_string("tv-effect-color") == "rgb(1,2,3)"

    def test_invalid_stored_color_leaves_button_alone(self, qapp, settings: Settings) -> None:
        button = ColorButton()
        settings.bind("tv-effect-color", button, "color")
        settings.set_string("tv-effect-color", "not a colour")
        assert button.color() == QColor(255, 255, 255)

    def test_unsupported_property(self, qapp, settings: Settings) -> None:
        with pytest.raises(ValueError):
            settings.bind("destroy-dialogs", QCheckBox(), "text")

    def test_destroyed_widget_is_released(self, qapp, settings: Settings) -> None:
        box = QCheckBox()
        settings.bind("destroy-dialogs", box, "checked")
        shiboken6.delete(box)
        settings.set_boolean("destroy-dialogs", False)
        assert settings.get_boolean("destroy-dialogs") is False


class TestCreateAction:
    def test_mirrors_key(self, qapp, settings: Settings) -> None:
        action = settings.create_action("wisps-close-effect")
        assert action.objectName() == "wisps-close-effect"
        assert action.isCheckable()
        assert not action.isChecked()

        action.trigger()
        assert settings.get_boolean("wisps-close-effect") is True

        settings.set_boolean("wisps-close-effect", False)
        assert not action.isChecked()

    def test_rejects_non_bool_keys(self, qapp, settings: Settings) -> None:
        with pytest.raises(TypeError):
            settings.create_action("fire-scale")
