"""Deferred execution on the Qt main loop."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QTimer


def qt_call_soon(fn: Callable[[], None]) -> None:
    """Run ``fn`` on the next event-loop tick; queued calls keep their order."""
    QTimer.singleShot(0, fn)
