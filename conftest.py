"""Shared pytest fixtures.

Qt runs headless and the shell version is pinned so that tests never
depend on the desktop they happen to run on.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("BURNWIN_SHELL_VERSION", "41.1")

import pytest
from PySide6.QtWidgets import QApplication

from burnwin.core.settings import Settings


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


@pytest.fixture
def settings(qapp, settings_path):
    return Settings(settings_path)
