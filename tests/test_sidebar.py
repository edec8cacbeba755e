"""
Tests for the sidebar composition: Flet events drive the visibility and
playback controllers, developer buttons reach the host capability.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from editor_sidebar.config import SIDEBAR_VISIBLE_KEY, SettingsStore
from editor_sidebar.host_api import HostApi
from editor_sidebar.models import (
    DEV_TOOLS_BUTTON_ID,
    RELOAD_THEME_BUTTON_ID,
    SidebarDescriptor,
    default_descriptor,
)
from editor_sidebar.playback import PlaybackState
from editor_sidebar.ui_flet.sidebar import Sidebar
from editor_sidebar.ui_flet.view_tree import SLIDE_CONTAINER
from editor_sidebar.visibility import HIDE_AFFORDANCE, PANEL_AREA, SHOW_AFFORDANCE

INTRO_TAB = "sidebar-tab-introduction"


def expanded(value: bool):
    return SimpleNamespace(data="true" if value else "false")


@pytest.fixture
def host():
    return MagicMock(spec=HostApi)


@pytest.fixture
def sidebar(settings, host, resolver):
    return Sidebar(None, settings, host, clip_resolver=resolver)


class TestConstruction:

    def test_container_is_view_root(self, sidebar):
        assert sidebar.get_container() is sidebar.view.root

    def test_clip_count_follows_slides(self, sidebar):
        assert sidebar.playback.clip_count == 5
        assert sidebar.playback.state is PlaybackState.NOT_INITIALIZED

    def test_duplicate_ids_rejected(self, settings, host, resolver):
        descriptor = default_descriptor()
        descriptor.show_button_id = descriptor.hide_button_id
        with pytest.raises(ValueError):
            Sidebar(None, settings, host, descriptor=descriptor, clip_resolver=resolver)

    def test_without_slides_there_is_no_playback(self, settings, host):
        sidebar = Sidebar(None, settings, host, descriptor=SidebarDescriptor(tabs=[]))
        assert sidebar.playback is None


class TestVisibilityWiring:

    def test_hide_and_show_affordances(self, sidebar, settings):
        sidebar.view.role(HIDE_AFFORDANCE).on_click(None)

        assert sidebar.view.role(PANEL_AREA).visible is False
        assert sidebar.view.role(SHOW_AFFORDANCE).visible is True
        assert settings.get_key_sync(SIDEBAR_VISIBLE_KEY) is False

        sidebar.view.role(SHOW_AFFORDANCE).on_click(None)

        assert sidebar.view.role(PANEL_AREA).visible is True
        assert settings.get_key_sync(SIDEBAR_VISIBLE_KEY) is True

    def test_initial_fetch_applies_persisted_state(self, settings_path, host, resolver):
        SettingsStore(settings_path).set_key(SIDEBAR_VISIBLE_KEY, False)
        sidebar = Sidebar(None, SettingsStore(settings_path), host, clip_resolver=resolver)

        assert sidebar.visibility.is_open is True
        asyncio.run(sidebar.load_initial_visibility())
        assert sidebar.visibility.is_open is False

    def test_failing_fetch_keeps_default(self, sidebar, settings, caplog):
        async def broken(name):
            raise OSError("disk gone")

        settings.get_key = broken
        asyncio.run(sidebar.load_initial_visibility())

        assert sidebar.visibility.is_open is True
        assert "disk gone" in caplog.text

    def test_page_schedules_initial_fetch(self, settings, host, resolver):
        page = MagicMock()
        sidebar = Sidebar(page, settings, host, clip_resolver=resolver)

        page.run_task.assert_called_once_with(sidebar.load_initial_visibility)


class TestPlaybackWiring:

    def test_expanding_intro_tab_plays_first_clip(self, sidebar, resolver):
        assert resolver.resolved == []

        sidebar.view.element(INTRO_TAB).on_change(expanded(True))

        assert resolver.board.playing() == [0]

    def test_carousel_switches_clip(self, sidebar, resolver):
        sidebar.view.element(INTRO_TAB).on_change(expanded(True))

        sidebar.view.role(SLIDE_CONTAINER).next_slide()

        assert resolver.board.playing() == [1]
        assert sidebar.playback.current_index == 1

    def test_collapsing_intro_tab_pauses(self, sidebar, resolver):
        tile = sidebar.view.element(INTRO_TAB)
        tile.on_change(expanded(True))
        tile.on_change(expanded(False))

        assert resolver.board.playing() == []

    def test_hiding_sidebar_stops_playback(self, sidebar, resolver):
        sidebar.view.element(INTRO_TAB).on_change(expanded(True))
        sidebar.view.role(SLIDE_CONTAINER).go_to(3)

        sidebar.view.role(HIDE_AFFORDANCE).on_click(None)
        assert resolver.board.playing() == []

        sidebar.view.role(SHOW_AFFORDANCE).on_click(None)
        assert resolver.board.playing() == [3]
        assert resolver.clip(3).calls[-2:] == ["rewind", "play"]

    def test_persisted_hidden_state_pauses_expanded_tab(self, settings_path, host, resolver):
        # Tab expanded while the open default is shown, before the fetch lands
        SettingsStore(settings_path).set_key(SIDEBAR_VISIBLE_KEY, False)
        sidebar = Sidebar(None, SettingsStore(settings_path), host, clip_resolver=resolver)
        sidebar.view.element(INTRO_TAB).on_change(expanded(True))
        assert resolver.board.playing() == [0]

        asyncio.run(sidebar.load_initial_visibility())

        assert sidebar.view.role(PANEL_AREA).visible is False
        assert resolver.board.playing() == []

    def test_hide_after_failed_fetch_pauses(self, settings_path, host, resolver):
        SettingsStore(settings_path).set_key(SIDEBAR_VISIBLE_KEY, False)
        settings = SettingsStore(settings_path)

        async def broken(name):
            raise OSError("disk gone")

        settings.get_key = broken
        sidebar = Sidebar(None, settings, host, clip_resolver=resolver)
        asyncio.run(sidebar.load_initial_visibility())
        sidebar.view.element(INTRO_TAB).on_change(expanded(True))

        sidebar.view.role(HIDE_AFFORDANCE).on_click(None)

        assert sidebar.view.role(PANEL_AREA).visible is False
        assert resolver.board.playing() == []

        sidebar.view.role(SHOW_AFFORDANCE).on_click(None)
        assert resolver.board.playing() == [0]

    def test_hidden_sidebar_with_collapsed_tab_stays_silent(self, sidebar, resolver):
        sidebar.view.role(HIDE_AFFORDANCE).on_click(None)
        sidebar.view.role(SHOW_AFFORDANCE).on_click(None)

        assert resolver.resolved == []

    def test_dispose_stops_everything(self, sidebar, settings, resolver):
        sidebar.view.element(INTRO_TAB).on_change(expanded(True))

        sidebar.dispose()

        assert resolver.board.playing() == []
        settings.set_key(SIDEBAR_VISIBLE_KEY, False)
        assert sidebar.visibility.is_open is True
        sidebar.visibility.set_visibility(False)
        assert resolver.clip(0).calls == ["rewind", "play", "pause"]


class TestHostActions:

    def test_dev_tools_button(self, sidebar, host):
        sidebar.view.element(DEV_TOOLS_BUTTON_ID).on_click(None)

        host.show_dev_tools.assert_called_once_with()
        host.reload_menu_theme.assert_not_called()

    def test_reload_theme_button(self, sidebar, host):
        sidebar.view.element(RELOAD_THEME_BUTTON_ID).on_click(None)

        host.reload_menu_theme.assert_called_once_with()
