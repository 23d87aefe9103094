"""
ThemeBroadcaster: deferred ThemeChanged delivery on top of an injected EventBus.

publish() never runs listeners itself. It hands a delivery callback to the
scheduler (QTimer.singleShot(0, ...) in the app), so listeners run on a later
event-loop tick, after the publisher has returned. The listener set is read at
delivery time: a listener unregistered before its delivery runs is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from templateapp.core.events import EventBus, Subscription, ThemeChanged
from templateapp.core.theme import Theme

log = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], None]
ThemeListener = Callable[[ThemeChanged], None]


class ThemeBroadcaster:
    """Publishes theme changes to every registered listener."""

    def __init__(self, bus: EventBus, schedule: Scheduler) -> None:
        self._bus = bus
        self._schedule = schedule
        self._subscriptions: dict[ThemeListener, Subscription] = {}

    def publish(self, theme: Theme) -> None:
        event = ThemeChanged(theme)
        log.debug("Theme change scheduled", extra={"event": "theme_publish", "theme": theme.value})
        self._schedule(lambda: self._deliver(event))

    def _deliver(self, event: ThemeChanged) -> None:
        log.info(
            "Delivering theme '%s' to %d listener(s)",
            event.theme.value,
            self.listener_count,
            extra={"event": "theme_deliver", "theme": event.theme.value},
        )
        self._bus.publish(event)

    def register(self, listener: ThemeListener) -> None:
        if self.is_registered(listener):
            log.debug("Listener already registered: %r", listener)
            return
        self._subscriptions[listener] = self._bus.subscribe(ThemeChanged, listener)

    def unregister(self, listener: ThemeListener) -> None:
        sub = self._subscriptions.pop(listener, None)
        if sub is not None:
            self._bus.unsubscribe(sub)

    def is_registered(self, listener: ThemeListener) -> bool:
        # The bus may have been cleared behind our back.
        sub = self._subscriptions.get(listener)
        return sub is not None and self._bus.is_subscribed(sub)

    @property
    def listener_count(self) -> int:
        return self._bus.handler_count(ThemeChanged)
