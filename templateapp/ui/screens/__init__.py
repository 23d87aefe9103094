"""Themed screens and their Qt-free controller."""

from templateapp.ui.screens.controller import (
    ColorUpdatable,
    ScreenState,
    ThemedScreenController,
    ThemedView,
    apply_theme_change,
)

__all__ = [
    "ColorUpdatable",
    "ScreenState",
    "ThemedScreenController",
    "ThemedView",
    "apply_theme_change",
]
