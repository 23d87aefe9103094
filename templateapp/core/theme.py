"""Theme value shared by the event layer and the UI."""

from __future__ import annotations

from enum import Enum

from templateapp.core.errors import ValidationError


class Theme(Enum):
    """Light/dark display mode."""

    LIGHT = "light"
    DARK = "dark"

    def opposite(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @classmethod
    def parse(cls, name: str) -> Theme:
        """Case-insensitive lookup by value ("light" / "dark")."""
        key = str(name).strip().lower()
        for theme in cls:
            if theme.value == key:
                return theme
        raise ValidationError(f"Unknown theme: {name!r} (expected 'light' or 'dark')")
