"""Application configuration and constants.

Paths, application identity for QSettings, and the default theme of each screen.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from templateapp.core.errors import ValidationError
from templateapp.core.theme import Theme

log = logging.getLogger(__name__)

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

APP_NAME = "TemplateApp"
ORG_NAME = "TemplateApp"
APP_VERSION = "1.0"

# Default theme of each screen before any theme change is broadcast
FORM_SCREEN_THEME = Theme.DARK
LIST_SCREEN_THEME = Theme.LIGHT
GRID_SCREEN_THEME = Theme.LIGHT

DEFAULT_THEME_ENV = "TEMPLATEAPP_DEFAULT_THEME"


def default_theme_override() -> Theme | None:
    """Theme forced on every screen by TEMPLATEAPP_DEFAULT_THEME, if set and valid."""
    raw = os.getenv(DEFAULT_THEME_ENV)
    if not raw:
        return None
    try:
        return Theme.parse(raw)
    except ValidationError as exc:
        log.warning("Ignoring %s: %s", DEFAULT_THEME_ENV, exc)
        return None


def screen_default_theme(builtin: Theme) -> Theme:
    return default_theme_override() or builtin
