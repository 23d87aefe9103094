"""
Design tokens: raw palette, per-theme TokenSet and the color resolver.

Pure Python: importable without Qt.
"""
from __future__ import annotations

import re
from enum import Enum

from templateapp.core.errors import ValidationError
from templateapp.core.theme import Theme


class Palette:
    """Raw source colors every theme color is derived from."""

    BLACK = "#000000"
    WHITE = "#ffffff"
    GRAY = "#757575"


class ColorRole(Enum):
    CONTENT_BACKGROUND = "content_background"
    FIELD_BACKGROUND = "field_background"
    BUTTON_TEXT = "button_text"
    NAV_BAR_TINT = "nav_bar_tint"


class TokenSet:
    """Immutable-like set of color tokens for one theme."""

    __slots__ = (
        "content_background", "field_background", "button_text",
        "nav_bar_tint", "text_primary",
    )

    def __init__(
        self,
        *,
        content_background: str,
        field_background: str,
        button_text: str,
        nav_bar_tint: str,
        text_primary: str,
    ) -> None:
        self.content_background = content_background
        self.field_background = field_background
        self.button_text = button_text
        self.nav_bar_tint = nav_bar_tint
        self.text_primary = text_primary

    def color(self, role: ColorRole) -> str:
        return getattr(self, role.value)


# Predefined palettes
LIGHT = TokenSet(
    content_background=Palette.WHITE,
    field_background=Palette.WHITE,
    button_text=Palette.BLACK,
    nav_bar_tint=Palette.WHITE,
    text_primary=Palette.BLACK,
)

DARK = TokenSet(
    content_background=Palette.BLACK,
    field_background=Palette.GRAY,
    button_text=Palette.WHITE,
    nav_bar_tint=Palette.BLACK,
    text_primary=Palette.WHITE,
)

_BY_THEME = {Theme.LIGHT: LIGHT, Theme.DARK: DARK}


def tokens_for(theme: Theme) -> TokenSet:
    return _BY_THEME[theme]


def resolve(role: ColorRole, theme: Theme) -> str:
    """Hex color for ``role`` under ``theme``."""
    return tokens_for(theme).color(role)


_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Parse "#363636" or "363636" (surrounding whitespace ignored) into (r, g, b)."""
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ValidationError(f"Invalid hex color: {text!r}")
    value = int(match.group(1), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
