"""Lightweight in-process event bus.

Decouples the theme broadcaster from the screens: the broadcaster publishes
events, screens subscribe.
"""

from .event_bus import EventBus, Subscription
from .events import ThemeChanged

__all__ = [
    "EventBus",
    "Subscription",
    "ThemeChanged",
]
