"""
ThemeManager: application-level theme listener. Mirrors the last broadcast theme
into the QApplication palette and re-emits it as a Qt signal.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from templateapp.core.events import ThemeChanged
from templateapp.core.theme import Theme
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import TokenSet, hex_to_rgb, tokens_for

log = logging.getLogger(__name__)


def _qcolor(hex_color: str) -> QColor:
    return QColor(*hex_to_rgb(hex_color))


class ThemeManager(QObject):
    """
    Tracks the current application theme; emits theme_changed after each delivery.
    No global singleton; created by the Container.
    """

    theme_changed = Signal(object)  # Theme

    def __init__(self, broadcaster: ThemeBroadcaster, initial_palette: Theme | None = None) -> None:
        super().__init__()
        self._broadcaster = broadcaster
        self._current: Theme | None = None
        if initial_palette is not None:
            # Palette only: the first broadcast still counts as a change.
            self._apply_palette(tokens_for(initial_palette))
        broadcaster.register(self._on_theme_changed)

    def get_theme(self) -> Theme | None:
        """Last theme delivered, or None before the first broadcast."""
        return self._current

    def set_theme(self, theme: Theme) -> None:
        self._broadcaster.publish(theme)

    def close(self) -> None:
        self._broadcaster.unregister(self._on_theme_changed)

    def _on_theme_changed(self, event: ThemeChanged) -> None:
        if event.theme == self._current:
            return
        self._current = event.theme
        self._apply_palette(tokens_for(event.theme))
        log.info("Application theme is now '%s'", event.theme.value, extra={"theme": event.theme.value})
        self.theme_changed.emit(event.theme)

    def _apply_palette(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not app:
            return
        pal = QPalette()
        pal.setColor(QPalette.ColorRole.Window, _qcolor(t.content_background))
        pal.setColor(QPalette.ColorRole.Base, _qcolor(t.field_background))
        pal.setColor(QPalette.ColorRole.Button, _qcolor(t.content_background))
        pal.setColor(QPalette.ColorRole.WindowText, _qcolor(t.text_primary))
        pal.setColor(QPalette.ColorRole.ButtonText, _qcolor(t.button_text))
        pal.setColor(QPalette.ColorRole.Text, _qcolor(t.text_primary))
        app.setPalette(pal)
