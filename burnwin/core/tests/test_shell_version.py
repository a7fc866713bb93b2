"""Tests for shell version detection and comparison."""

from types import SimpleNamespace

import pytest

from burnwin.core import shell
from burnwin.core.shell import parse_version, shell_version, shell_version_is_at_least


@pytest.fixture
def fresh_cache():
    shell_version.cache_clear()
    yield
    shell_version.cache_clear()


class TestParseVersion:
    @pytest.mark.parametrize("text, expected", [
        ("41.1", (41, 1)),
        ("3.38.4", (3, 38)),
        ("40.beta", (40, -1)),
        ("41.alpha", (41, -1)),
        ("42", (42, 0)),
        ("GNOME Shell 45.2", (45, 2)),
    ])
    def test_parses(self, text: str, expected: tuple[int, int]) -> None:
        assert parse_version(text) == expected

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_version("unknown")


class TestIsAtLeast:
    @pytest.mark.parametrize("current, major, minor, expected", [
        ("3.38", 3, 36, True),
        ("3.36", 3, 36, True),
        ("3.34", 3, 36, False),
        ("40.0", 3, 36, True),
        ("40.beta", 40, 0, False),
        ("40.1", 40, 0, True),
        ("41.0", 42, 0, False),
    ])
    def test_compare(self, current: str, major: int, minor: int, expected: bool) -> None:
        assert shell_version_is_at_least(major, minor, current) is expected

    def test_unknown_version_supports_everything(self, monkeypatch) -> None:
        monkeypatch.setattr(shell, "shell_version", lambda: None)
        assert shell_version_is_at_least(99, 0)


class TestShellVersion:
    def test_env_override(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.setenv("BURNWIN_SHELL_VERSION", "42.3")
        assert shell_version() == "42.3"

    def test_missing_shell(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.delenv("BURNWIN_SHELL_VERSION", raising=False)
        monkeypatch.setattr(shell.shutil, "which", lambda _name: None)
        assert shell_version() is None

    def test_asks_gnome_shell(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.delenv("BURNWIN_SHELL_VERSION", raising=False)
        monkeypatch.setattr(shell.shutil, "which", lambda _name: "/usr/bin/gnome-shell")
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            return SimpleNamespace(stdout="GNOME Shell 45.2\n")

        monkeypatch.setattr(shell.subprocess, "run", fake_run)
        assert shell_version() == "45.2"
        assert calls == [["/usr/bin/gnome-shell", "--version"]]

    def test_failing_gnome_shell(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.delenv("BURNWIN_SHELL_VERSION", raising=False)
        monkeypatch.setattr(shell.shutil, "which", lambda _name: "/usr/bin/gnome-shell")

        def fake_run(cmd, **kwargs):
            raise shell.subprocess.TimeoutExpired(cmd, 5)

        monkeypatch.setattr(shell.subprocess, "run", fake_run)
        assert shell_version() is None

    def test_unparsable_override_is_ignored(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.setenv("BURNWIN_SHELL_VERSION", "unknown")
        monkeypatch.setattr(shell.shutil, "which", lambda _name: None)
        assert shell_version() is None
        assert shell_version_is_at_least(99, 0)

    def test_unparsable_override_falls_back_to_gnome_shell(self, fresh_cache, monkeypatch) -> None:
        monkeypatch.setenv("BURNWIN_SHELL_VERSION", "latest")
        monkeypatch.setattr(shell.shutil, "which", lambda _name: "/usr/bin/gnome-shell")
        monkeypatch.setattr(
            shell.subprocess, "run",
            lambda cmd, **kwargs: SimpleNamespace(stdout="GNOME Shell 44.1\n"),
        )
        assert shell_version() == "44.1"
