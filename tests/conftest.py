from __future__ import annotations

from collections import deque
from collections.abc import Callable

import pytest

from templateapp.core.events import EventBus
from templateapp.ui.theme.broadcaster import ThemeBroadcaster


class QueueScheduler:
    """Stands in for the Qt event loop: callbacks run only when drained, FIFO."""

    def __init__(self) -> None:
        self._queue: deque[Callable[[], None]] = deque()

    def __call__(self, fn: Callable[[], None]) -> None:
        self._queue.append(fn)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_next(self) -> None:
        self._queue.popleft()()

    def drain(self) -> None:
        while self._queue:
            self.run_next()


@pytest.fixture
def scheduler() -> QueueScheduler:
    return QueueScheduler()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def broadcaster(bus: EventBus, scheduler: QueueScheduler) -> ThemeBroadcaster:
    return ThemeBroadcaster(bus, scheduler)
