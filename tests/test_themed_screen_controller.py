from __future__ import annotations

from templateapp.core.events import ThemeChanged
from templateapp.core.theme import Theme
from templateapp.ui.screens.controller import ScreenState, ThemedScreenController, apply_theme_change
from templateapp.ui.theme.broadcaster import ThemeBroadcaster
from templateapp.ui.theme.tokens import ColorRole, Palette, resolve


class _View:
    """Records what the controller applies, like a screen's widgets would."""

    def __init__(self) -> None:
        self.applied: list[Theme] = []
        self.refreshes = 0
        self.content_background: str | None = None

    def update_colors(self, theme: Theme) -> None:
        self.applied.append(theme)
        self.content_background = resolve(ColorRole.CONTENT_BACKGROUND, theme)

    def refresh(self) -> None:
        self.refreshes += 1


def _screen(broadcaster: ThemeBroadcaster, theme: Theme) -> tuple[ThemedScreenController, _View]:
    view = _View()
    return ThemedScreenController(view, broadcaster, theme=theme), view


def test_activation_applies_default_theme_immediately(broadcaster, scheduler) -> None:
    screen, view = _screen(broadcaster, Theme.DARK)

    screen.activate()

    assert screen.state is ScreenState.ACTIVE
    assert view.applied == [Theme.DARK]
    assert view.content_background == Palette.BLACK
    assert view.refreshes == 1
    assert scheduler.pending == 0


def test_activate_twice_registers_once(broadcaster) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)

    screen.activate()
    screen.activate()

    assert broadcaster.listener_count == 1
    assert view.applied == [Theme.LIGHT]


def test_same_theme_delivery_is_idempotent(broadcaster, scheduler) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)
    screen.activate()

    broadcaster.publish(Theme.DARK)
    scheduler.drain()
    broadcaster.publish(Theme.DARK)
    scheduler.drain()

    assert screen.theme is Theme.DARK
    assert view.applied == [Theme.LIGHT, Theme.DARK]
    assert view.refreshes == 2


def test_inactive_screen_receives_nothing(broadcaster, scheduler) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)

    broadcaster.publish(Theme.DARK)
    scheduler.drain()

    assert screen.state is ScreenState.INACTIVE
    assert screen.theme is Theme.LIGHT
    assert view.applied == []


def test_active_screen_receives_every_event_until_deactivated(broadcaster, scheduler) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)
    screen.activate()

    for theme in (Theme.DARK, Theme.LIGHT, Theme.DARK):
        broadcaster.publish(theme)
        scheduler.drain()
    screen.deactivate()
    broadcaster.publish(Theme.LIGHT)
    scheduler.drain()

    assert view.applied == [Theme.LIGHT, Theme.DARK, Theme.LIGHT, Theme.DARK]
    assert screen.theme is Theme.DARK
    assert broadcaster.listener_count == 0


def test_deactivate_between_publish_and_delivery(broadcaster, scheduler) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)
    screen.activate()

    broadcaster.publish(Theme.DARK)
    screen.deactivate()
    scheduler.drain()

    assert screen.theme is Theme.LIGHT
    assert view.applied == [Theme.LIGHT]


def test_direct_delivery_to_inactive_screen_is_ignored(broadcaster) -> None:
    screen, view = _screen(broadcaster, Theme.LIGHT)

    screen.on_theme_changed(ThemeChanged(Theme.DARK))

    assert screen.theme is Theme.LIGHT
    assert view.applied == []


def test_toggle_round_trip(broadcaster, scheduler) -> None:
    screens = [_screen(broadcaster, Theme.LIGHT), _screen(broadcaster, Theme.DARK)]
    for screen, _view in screens:
        screen.activate()

    broadcaster.publish(Theme.DARK)
    broadcaster.publish(Theme.LIGHT)
    scheduler.drain()

    for screen, view in screens:
        assert screen.theme is Theme.LIGHT
        assert view.applied[-1] is Theme.LIGHT
        assert view.content_background == Palette.WHITE


def test_toggle_updates_every_active_screen_through_the_broadcast(broadcaster, scheduler) -> None:
    a, a_view = _screen(broadcaster, Theme.LIGHT)
    b, b_view = _screen(broadcaster, Theme.DARK)
    a.activate()
    b.activate()

    a.toggle_theme()
    # The toggling screen does not change itself directly.
    assert a.theme is Theme.LIGHT

    scheduler.drain()

    assert a.theme is Theme.DARK
    assert b.theme is Theme.DARK
    assert a_view.content_background == Palette.BLACK
    assert a_view.applied == [Theme.LIGHT, Theme.DARK]
    # B was already dark: nothing re-applied.
    assert b_view.applied == [Theme.DARK]
    assert b_view.content_background == Palette.BLACK


def test_apply_theme_change_helper() -> None:
    class _Target:
        def __init__(self) -> None:
            self.theme = Theme.LIGHT
            self.updates: list[Theme] = []

        def update_colors(self, theme: Theme) -> None:
            self.updates.append(theme)

    target = _Target()

    assert apply_theme_change(target, Theme.LIGHT) is False
    assert apply_theme_change(target, Theme.DARK) is True
    assert target.theme is Theme.DARK
    assert target.updates == [Theme.DARK]
