"""Form screen: four text fields in a container, toggle button at the bottom."""

from __future__ import annotations

from PySide6.QtWidgets import QLineEdit, QWidget

from templateapp.config import FORM_SCREEN_THEME, screen_default_theme
from templateapp.ui.screens.base import ThemedScreen
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import TokenSet

FIELD_COUNT = 4
# Only the first fields get explicit colors; the rest follow the application palette.
RECOLORED_FIELDS = 2


class FormScreen(ThemedScreen):
    def __init__(self, broadcaster: ThemeBroadcaster, parent: QWidget | None = None) -> None:
        super().__init__(
            "Form",
            broadcaster,
            theme=screen_default_theme(FORM_SCREEN_THEME),
            parent=parent,
        )
        self._fields: list[QLineEdit] = []
        for i in range(FIELD_COUNT):
            edit = QLineEdit()
            edit.setPlaceholderText(f"Field {i + 1}")
            edit.setMinimumHeight(32)
            self._add_content(edit)
            self._fields.append(edit)

    @property
    def fields(self) -> list[QLineEdit]:
        return list(self._fields)

    def _update_content_colors(self, t: TokenSet) -> None:
        style = f"QLineEdit {{ background-color: {t.field_background}; color: {t.text_primary}; }}"
        for edit in self._fields[:RECOLORED_FIELDS]:
            edit.setStyleSheet(style)
