from __future__ import annotations

from dataclasses import dataclass

from templateapp.core.theme import Theme


@dataclass(frozen=True, slots=True)
class ThemeChanged:
    """The application's color theme has changed.

    The event type is the subscription key, so a ThemeChanged handler never sees
    any other payload.
    """

    theme: Theme
