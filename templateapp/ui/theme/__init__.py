"""Theme tokens, broadcaster and the Qt ThemeManager.

ThemeManager is exported lazily so the pure-Python parts import without Qt.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from templateapp.core.theme import Theme
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import DARK, LIGHT, ColorRole, Palette, TokenSet, resolve, tokens_for

__all__ = [
    "Theme",
    "Palette",
    "ColorRole",
    "TokenSet",
    "LIGHT",
    "DARK",
    "resolve",
    "tokens_for",
    "ThemeBroadcaster",
    "ThemeManager",
]


def __getattr__(name: str) -> Any:
    if name == "ThemeManager":
        return import_module("templateapp.ui.theme.manager").ThemeManager
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
