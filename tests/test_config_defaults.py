from __future__ import annotations

import logging

from templateapp import config
from templateapp.core.theme import Theme


def test_builtin_default_used_without_override(monkeypatch) -> None:
    monkeypatch.delenv(config.DEFAULT_THEME_ENV, raising=False)

    assert config.screen_default_theme(Theme.DARK) is Theme.DARK
    assert config.screen_default_theme(Theme.LIGHT) is Theme.LIGHT


def test_env_override_applies_to_every_screen(monkeypatch) -> None:
    monkeypatch.setenv(config.DEFAULT_THEME_ENV, "LIGHT")

    assert config.screen_default_theme(Theme.DARK) is Theme.LIGHT


def test_invalid_env_override_is_ignored(monkeypatch, caplog) -> None:
    monkeypatch.setenv(config.DEFAULT_THEME_ENV, "neon")

    with caplog.at_level(logging.WARNING, logger="templateapp.config"):
        assert config.screen_default_theme(Theme.DARK) is Theme.DARK

    assert any("neon" in r.getMessage() for r in caplog.records)
