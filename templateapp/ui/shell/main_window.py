"""
Main window: themed screens in tabs, View menu for explicit theme selection,
geometry and last tab persisted.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QByteArray
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QMainWindow, QStatusBar, QTabWidget

from templateapp.config import APP_NAME, APP_VERSION
from templateapp.core.theme import Theme
from templateapp.ui.infrastructure.settings import AppSettings
from templateapp.ui.screens.base import ThemedScreen
from templateapp.ui.screens.form import FormScreen
from templateapp.ui.screens.listing import GridScreen, ListScreen

if TYPE_CHECKING:
    from templateapp.ui.infrastructure.di import Container


class MainWindow(QMainWindow):
    """Tabs of themed screens. Only the visible tab is registered for theme changes."""

    def __init__(self, settings: AppSettings, container: Container) -> None:
        super().__init__()
        self._settings = settings
        self._container = container
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.setMinimumSize(480, 420)
        self.resize(640, 560)

        broadcaster = container.theme_broadcaster
        self._screens: list[ThemedScreen] = [
            FormScreen(broadcaster),
            ListScreen(broadcaster),
            GridScreen(broadcaster),
        ]
        self._tabs = QTabWidget()
        for screen in self._screens:
            self._tabs.addTab(screen, screen.title)
        self.setCentralWidget(self._tabs)

        self._theme_manager = container.theme_manager
        self._theme_manager.theme_changed.connect(self._on_theme_changed)

        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Ctrl+L: light theme  |  Ctrl+D: dark theme")
        self._setup_menu()
        self._restore_geometry()

    @property
    def screens(self) -> list[ThemedScreen]:
        return list(self._screens)

    def _setup_menu(self) -> None:
        view_menu = self.menuBar().addMenu("&View")
        for label, shortcut, theme in (
            ("&Light theme", "Ctrl+L", Theme.LIGHT),
            ("&Dark theme", "Ctrl+D", Theme.DARK),
        ):
            action = QAction(label, self)
            action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(lambda checked=False, t=theme: self._theme_manager.set_theme(t))
            view_menu.addAction(action)

    def _on_theme_changed(self, theme: Theme) -> None:
        self.statusBar().showMessage(f"Theme: {theme.value}", 3000)

    def _restore_geometry(self) -> None:
        geom = self._settings.get_main_window_geometry()
        if isinstance(geom, QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)
        index = self._settings.get_current_tab()
        if 0 <= index < self._tabs.count():
            self._tabs.setCurrentIndex(index)

    def _save_geometry(self) -> None:
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.set_current_tab(self._tabs.currentIndex())
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._save_geometry()
        self._theme_manager.close()
        super().closeEvent(event)
