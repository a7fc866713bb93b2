# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Named object registry for the preferences dialog.

Pages are built in code; once a subtree exists it is handed to
:meth:`Builder.add_from_widget`, which records every descendant carrying an
``objectName``.  Controls are named after the settings key they edit and
reset buttons after ``reset-<key>``, so the dialog and the effects can
look them up later by name.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject

log = logging.getLogger(__name__)


class Builder:
    """Maps object names to the objects of the constructed widget tree."""

    def __init__(self):
        self._objects: dict[str, QObject] = {}

    def add_object(self, name: str, obj: QObject) -> None:
        """Register *obj* under *name*, replacing any earlier object."""
        if name in self._objects and self._objects[name] is not obj:
            log.debug("Builder object '%s' replaced", name)
        self._objects[name] = obj
        obj.destroyed.connect(lambda *_, n=name: self._forget(n, obj))

    def add_from_widget(self, root: QObject) -> QObject:
        """Register *root* and all of its named descendants.  Returns *root*."""
        for obj in [root, *root.findChildren(QObject)]:
            name = obj.objectName()
            if name and not name.startswith("qt_"):
                self.add_object(name, obj)
        return root

    def get_object(self, name: str) -> QObject | None:
        return self._objects.get(name)

    def get_objects(self) -> list[QObject]:
        return list(self._objects.values())

    def _forget(self, name: str, obj: QObject) -> None:
        if self._objects.get(name) is obj:
            del self._objects[name]
