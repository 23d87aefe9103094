"""
QSettings wrapper: main window geometry and the last selected tab.

The selected theme is deliberately not stored.
"""
from __future__ import annotations

from typing import cast

from PySide6.QtCore import QByteArray, QSettings

from templateapp.config import APP_NAME, ORG_NAME


class AppSettings:
    """Window persistence via QSettings (platform-specific path)."""

    def __init__(self, q: QSettings | None = None) -> None:
        self._q = q if q is not None else QSettings(ORG_NAME, APP_NAME)

    def get_main_window_geometry(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/geometry", None, QByteArray))

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue("mainWindow/geometry", geometry)

    def get_current_tab(self) -> int:
        return int(self._q.value("mainWindow/tab", 0, int))

    def set_current_tab(self, index: int) -> None:
        self._q.setValue("mainWindow/tab", index)

    def sync(self) -> None:
        self._q.sync()
