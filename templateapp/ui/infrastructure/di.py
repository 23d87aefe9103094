"""Composition root / DI container.

Screens never reach for global state: the event bus, broadcaster and theme
manager are created here and injected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from templateapp.config import FORM_SCREEN_THEME, screen_default_theme
from templateapp.core.events import EventBus
from templateapp.ui.theme.broadcaster import Scheduler, ThemeBroadcaster

if TYPE_CHECKING:
    from templateapp.ui.theme.manager import ThemeManager


class Container:
    """Resolves UI services lazily. Single place to swap implementations if needed."""

    def __init__(self, schedule: Scheduler | None = None) -> None:
        self._schedule = schedule
        self._event_bus: EventBus | None = None
        self._theme_broadcaster: ThemeBroadcaster | None = None
        self._theme_manager: ThemeManager | None = None

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def theme_broadcaster(self) -> ThemeBroadcaster:
        if self._theme_broadcaster is None:
            schedule = self._schedule
            if schedule is None:
                from templateapp.ui.infrastructure.scheduling import qt_call_soon

                schedule = qt_call_soon
            self._theme_broadcaster = ThemeBroadcaster(self.event_bus, schedule)
        return self._theme_broadcaster

    @property
    def theme_manager(self) -> ThemeManager:
        if self._theme_manager is None:
            from templateapp.ui.theme.manager import ThemeManager

            # Matches the form screen shown first, so unstyled widgets agree with it.
            self._theme_manager = ThemeManager(
                self.theme_broadcaster,
                initial_palette=screen_default_theme(FORM_SCREEN_THEME),
            )
        return self._theme_manager


__all__ = ["Container"]
