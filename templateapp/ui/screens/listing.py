"""List and grid screens: item views re-colored on refresh()."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QListWidget, QTableWidget, QTableWidgetItem, QWidget

from templateapp.config import GRID_SCREEN_THEME, LIST_SCREEN_THEME, screen_default_theme
from templateapp.ui.screens.base import ThemedScreen
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import TokenSet, tokens_for

SAMPLE_ITEMS = ("Inbox", "Drafts", "Sent", "Archive", "Trash")


class ListScreen(ThemedScreen):
    def __init__(
        self,
        broadcaster: ThemeBroadcaster,
        items: Sequence[str] = SAMPLE_ITEMS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(
            "List",
            broadcaster,
            theme=screen_default_theme(LIST_SCREEN_THEME),
            parent=parent,
        )
        self._list = QListWidget()
        self._list.addItems(list(items))
        self._add_content(self._list, 1)

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    def _update_content_colors(self, t: TokenSet) -> None:
        self._list.setStyleSheet(f"QListWidget {{ background-color: {t.content_background}; }}")

    def refresh(self) -> None:
        brush = QBrush(QColor(tokens_for(self.controller.theme).text_primary))
        for row in range(self._list.count()):
            self._list.item(row).setForeground(brush)


class GridScreen(ThemedScreen):
    def __init__(
        self,
        broadcaster: ThemeBroadcaster,
        rows: int = 4,
        columns: int = 3,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(
            "Grid",
            broadcaster,
            theme=screen_default_theme(GRID_SCREEN_THEME),
            parent=parent,
        )
        self._table = QTableWidget(rows, columns)
        for r in range(rows):
            for c in range(columns):
                self._table.setItem(r, c, QTableWidgetItem(f"{r + 1}:{c + 1}"))
        self._add_content(self._table, 1)

    @property
    def table(self) -> QTableWidget:
        return self._table

    def _update_content_colors(self, t: TokenSet) -> None:
        self._table.setStyleSheet(f"QTableWidget {{ background-color: {t.content_background}; }}")

    def refresh(self) -> None:
        t = tokens_for(self.controller.theme)
        background = QBrush(QColor(t.field_background))
        foreground = QBrush(QColor(t.text_primary))
        for r in range(self._table.rowCount()):
            for c in range(self._table.columnCount()):
                item = self._table.item(r, c)
                if item is None:
                    continue
                item.setBackground(background)
                item.setForeground(foreground)
