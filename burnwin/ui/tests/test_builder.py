"""Tests for the named object registry."""

import shiboken6
from PySide6.QtWidgets import QCheckBox, QLabel, QVBoxLayout, QWidget

from burnwin.ui.builder import Builder


def _tree() -> QWidget:
    root = QWidget()
    root.setObjectName("root")
    layout = QVBoxLayout(root)
    box = QCheckBox()
    box.setObjectName("destroy-dialogs")
    layout.addWidget(box)
    layout.addWidget(QLabel("unnamed"))
    return root


class TestBuilder:
    def test_add_from_widget(self, qapp) -> None:
        builder = Builder()
        root = builder.add_from_widget(_tree())
        assert builder.get_object("root") is root
        assert isinstance(builder.get_object("destroy-dialogs"), QCheckBox)
        assert builder.get_object("missing") is None
        assert all(o.objectName() for o in builder.get_objects())

    def test_add_object_replaces(self, qapp) -> None:
        builder = Builder()
        first, second = QWidget(), QWidget()
        builder.add_object("page", first)
        builder.add_object("page", second)
        assert builder.get_object("page") is second

    def test_destroyed_objects_are_forgotten(self, qapp) -> None:
        builder = Builder()
        root = builder.add_from_widget(_tree())
        shiboken6.delete(root)
        assert builder.get_object("root") is None
        assert builder.get_object("destroy-dialogs") is None
        assert builder.get_objects() == []
