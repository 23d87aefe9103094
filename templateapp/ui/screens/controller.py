"""
Themed screen controller: the Inactive/Active state machine behind every screen.

Qt-free so it can be driven headless; the Qt screens own one controller each and
forward show/hide events to activate()/deactivate().
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from templateapp.core.events import ThemeChanged
from templateapp.core.theme import Theme

if TYPE_CHECKING:
    from templateapp.ui.theme.broadcaster import ThemeBroadcaster

log = logging.getLogger(__name__)


class ColorUpdatable(Protocol):
    theme: Theme

    def update_colors(self, theme: Theme) -> None: ...


class ThemedView(Protocol):
    """What a controller needs from the widgets it drives."""

    def update_colors(self, theme: Theme) -> None: ...

    def refresh(self) -> None: ...


class ScreenState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


def apply_theme_change(target: ColorUpdatable, theme: Theme) -> bool:
    """Switch ``target`` to ``theme`` and recolor it. Returns False when already there."""
    if theme == target.theme:
        return False
    target.theme = theme
    target.update_colors(theme)
    return True


class ThemedScreenController:
    def __init__(
        self,
        view: ThemedView,
        broadcaster: ThemeBroadcaster,
        *,
        theme: Theme = Theme.DARK,
        name: str = "screen",
    ) -> None:
        self._view = view
        self._broadcaster = broadcaster
        self.theme = theme
        self.name = name
        self._state = ScreenState.INACTIVE

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is ScreenState.ACTIVE

    def update_colors(self, theme: Theme) -> None:
        self._view.update_colors(theme)

    def activate(self) -> None:
        if self.is_active:
            return
        self._broadcaster.register(self.on_theme_changed)
        self._state = ScreenState.ACTIVE
        log.debug("Screen activated", extra={"screen": self.name, "theme": self.theme.value})
        # Apply own theme without waiting for an event.
        self.update_colors(self.theme)
        self._view.refresh()

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self._broadcaster.unregister(self.on_theme_changed)
        self._state = ScreenState.INACTIVE
        log.debug("Screen deactivated", extra={"screen": self.name})

    def on_theme_changed(self, event: ThemeChanged) -> None:
        if not self.is_active:
            log.debug("Ignoring theme change on inactive screen", extra={"screen": self.name})
            return
        if apply_theme_change(self, event.theme):
            self._view.refresh()

    def toggle_theme(self) -> None:
        """Broadcast the opposite theme; this screen updates when its own event arrives."""
        self._broadcaster.publish(self.theme.opposite())
