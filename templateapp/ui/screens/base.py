"""
ThemedScreen: nav bar + content container + bottom toggle button, driven by a
ThemedScreenController. Subclasses add their widgets and implement refresh().
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QHideEvent, QShowEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from templateapp.core.theme import Theme
from templateapp.ui.screens.controller import ThemedScreenController
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import TokenSet, tokens_for


class ThemedScreen(QWidget):
    """Base screen. Registers for theme changes while shown."""

    def __init__(
        self,
        title: str,
        broadcaster: ThemeBroadcaster,
        *,
        theme: Theme,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._nav_bar = QFrame()
        self._nav_bar.setObjectName("navBar")
        self._nav_bar.setMinimumHeight(44)
        nav_layout = QHBoxLayout(self._nav_bar)
        self._title_label = QLabel(title)
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        nav_layout.addWidget(self._title_label)
        root.addWidget(self._nav_bar)

        self._container = QFrame()
        self._container.setObjectName("container")
        self._content = QVBoxLayout(self._container)
        self._content.setContentsMargins(16, 16, 16, 16)
        self._content.setSpacing(8)

        self._toggle_button = QPushButton("Change theme")
        self._toggle_button.setObjectName("toggleThemeButton")
        self._toggle_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._toggle_button.setMinimumHeight(36)
        self._toggle_button.clicked.connect(self._on_toggle_clicked)
        self._content.addWidget(self._toggle_button)
        root.addWidget(self._container, 1)

        self._controller = ThemedScreenController(self, broadcaster, theme=theme, name=title)
        # A widget deleted while visible gets no hideEvent.
        controller = self._controller
        self.destroyed.connect(lambda *_: controller.deactivate())

    @property
    def controller(self) -> ThemedScreenController:
        return self._controller

    @property
    def toggle_button(self) -> QPushButton:
        return self._toggle_button

    @property
    def title(self) -> str:
        return self._title_label.text()

    def set_title(self, title: str) -> None:
        self._title_label.setText(title)

    def _add_content(self, widget: QWidget, stretch: int = 0) -> None:
        """Insert a screen-specific widget above the toggle button."""
        self._content.insertWidget(self._content.count() - 1, widget, stretch)

    # --- lifecycle ---
    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self._controller.activate()

    def hideEvent(self, event: QHideEvent) -> None:
        self._controller.deactivate()
        super().hideEvent(event)

    def _on_toggle_clicked(self) -> None:
        self._controller.toggle_theme()

    # --- ThemedView ---
    def update_colors(self, theme: Theme) -> None:
        t = tokens_for(theme)
        self._nav_bar.setStyleSheet(f"QFrame#navBar {{ background-color: {t.nav_bar_tint}; }}")
        self._title_label.setStyleSheet(f"color: {t.text_primary}; font-weight: 600;")
        self._container.setStyleSheet(
            f"QFrame#container {{ background-color: {t.content_background}; }}"
        )
        self._toggle_button.setStyleSheet(f"QPushButton {{ color: {t.button_text}; }}")
        self._update_content_colors(t)

    def _update_content_colors(self, t: TokenSet) -> None:
        """Recolor screen-specific widgets."""

    def refresh(self) -> None:
        """Re-render content that depends on the theme (lists, grids)."""
