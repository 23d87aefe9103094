"""Infrastructure: application bootstrap, scheduling, DI, settings, error boundary.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Some headless CI environments have PySide6 installed but miss runtime GUI libs
(e.g. ``libGL.so.1``). Lazy exports below keep ``import templateapp.ui.infrastructure``
free of Qt initialization.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_application",
    "Container",
    "install_error_boundary",
    "AppSettings",
    "qt_call_soon",
]


def __getattr__(name: str) -> Any:
    if name in ("create_application", "run_application"):
        return getattr(import_module("templateapp.ui.infrastructure.application"), name)
    if name == "Container":
        return import_module("templateapp.ui.infrastructure.di").Container
    if name == "install_error_boundary":
        return import_module("templateapp.ui.infrastructure.error_boundary").install_error_boundary
    if name == "AppSettings":
        return import_module("templateapp.ui.infrastructure.settings").AppSettings
    if name == "qt_call_soon":
        return import_module("templateapp.ui.infrastructure.scheduling").qt_call_soon
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
