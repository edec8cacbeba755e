"""
Sidebar of the editor surface.

Builds the view tree from a descriptor and attaches the two controllers:
- VisibilityController: open/closed state, synced with the settings store
- PlaybackLifecycleManager: instructional clips of the introduction tab

The controllers do not know about each other or about Flet events; this
class translates tile, carousel and button events into their handlers.
"""

import logging
from typing import Optional

import flet as ft

from editor_sidebar.config import SettingsStore
from editor_sidebar.host_api import HostApi
from editor_sidebar.models import (
    DEV_TOOLS_BUTTON_ID,
    RELOAD_THEME_BUTTON_ID,
    ButtonListBlock,
    SidebarDescriptor,
    default_descriptor,
)
from editor_sidebar.playback import ClipResolver, PlaybackLifecycleManager
from editor_sidebar.ui_flet.view_tree import SLIDE_CONTAINER, ViewTree, build_view_tree
from editor_sidebar.visibility import (
    HIDE_AFFORDANCE,
    SHOW_AFFORDANCE,
    VisibilityController,
)

# Button id -> HostApi method
HOST_ACTIONS = {
    DEV_TOOLS_BUTTON_ID: "show_dev_tools",
    RELOAD_THEME_BUTTON_ID: "reload_menu_theme",
}


class Sidebar:
    """
    Collapsible sidebar with onboarding slides and developer actions.

    Usage:
        sidebar = Sidebar(page, settings, FletHostApi(page, settings), logger=logger)
        page.add(ft.Row([sidebar.get_container(), editor]))

    Without a page the initial visibility fetch is not scheduled; await
    ``sidebar.load_initial_visibility()`` instead.
    """

    def __init__(
        self,
        page: Optional[ft.Page],
        settings: SettingsStore,
        host: HostApi,
        descriptor: Optional[SidebarDescriptor] = None,
        clip_resolver: Optional[ClipResolver] = None,
        logger: Optional[logging.Logger] = None,
        assets_dir: Optional[str] = None,
    ):
        """
        Initialize the sidebar.

        Args:
            page: Flet page the sidebar is shown on (None in tests)
            settings: Settings store holding "sidebarVisible"
            host: Host capability for the developer actions
            descriptor: Sidebar content (defaults to the stock content)
            clip_resolver: Resolves clip index -> clip handle (defaults to flet-video)
            logger: Logger for diagnostics
            assets_dir: Flet assets directory, used to check clip files exist

        Raises:
            MissingElementError: the descriptor lacks an element the
                controllers need
            ValueError: the descriptor declares an element id twice
        """
        self.page = page
        self.settings = settings
        self.host = host
        self.logger = logger or logging.getLogger(__name__)
        self.descriptor = (descriptor or default_descriptor()).validate()

        self.view: ViewTree = build_view_tree(self.descriptor, page)
        self.visibility = VisibilityController(self.view, settings, self.logger)

        self.playback: Optional[PlaybackLifecycleManager] = None
        self._introduction_expanded = False
        self._init_affordances()
        self._init_introduction(clip_resolver, assets_dir)
        self._init_buttons()

        self._remove_visibility_listener = self.visibility.add_listener(
            self._on_visibility_changed
        )

        if page is not None:
            page.run_task(self.load_initial_visibility)

        self.logger.info("Sidebar initialized")

    def get_container(self) -> ft.Control:
        """Root control of the sidebar"""
        return self.visibility.get_container()

    async def load_initial_visibility(self) -> None:
        """Apply the persisted visibility; a failing read keeps the default"""
        try:
            await self.visibility.load_initial()
        except Exception as e:
            self.logger.error(f"Failed to load sidebar visibility: {e}", exc_info=True)

    def _init_affordances(self) -> None:
        self.view.role(SHOW_AFFORDANCE).on_click = lambda e: self.visibility.set_visibility(True)
        self.view.role(HIDE_AFFORDANCE).on_click = lambda e: self.visibility.set_visibility(False)

    def _init_introduction(
        self,
        clip_resolver: Optional[ClipResolver],
        assets_dir: Optional[str],
    ) -> None:
        """Attach playback to the tab holding the instructional slides"""
        tab = self.descriptor.slides_tab()
        if tab is None:
            return

        carousel = self.view.role(SLIDE_CONTAINER)
        if clip_resolver is None:
            from editor_sidebar.ui_flet.media import VideoClipResolver
            clip_resolver = VideoClipResolver(carousel, assets_dir, self.logger)

        self.playback = PlaybackLifecycleManager(
            clip_resolver,
            clip_count=carousel.slide_count,
            logger=self.logger,
        )
        self.view.element(tab.id).on_change = self._on_introduction_tab_change
        carousel.on_slide_callback = self._on_slide

    def _init_buttons(self) -> None:
        for tab in self.descriptor.tabs:
            if not isinstance(tab.content, ButtonListBlock):
                continue
            for button in tab.content.buttons:
                action = HOST_ACTIONS.get(button.id)
                if action is None:
                    self.logger.debug(f"No host action for button '{button.id}'")
                    continue
                self.view.element(button.id).on_click = (
                    lambda e, action=action: self._request_host_action(action)
                )

    def _request_host_action(self, action: str) -> None:
        self.logger.info(f"Requesting host action: {action}")
        getattr(self.host, action)()

    def _on_introduction_tab_change(self, e) -> None:
        expanded = str(e.data).lower() == "true"
        self._introduction_expanded = expanded
        if not self.visibility.is_open:
            return
        if expanded:
            self.playback.on_tab_shown()
        else:
            self.playback.on_tab_hidden()

    def _on_slide(self, previous: int, index: int) -> None:
        self.playback.on_slide_changed(index)

    def _on_visibility_changed(self, open: bool) -> None:
        # An expanded introduction tab is revealed/hidden with the whole panel
        if self.playback is None or not self._introduction_expanded:
            return
        if open:
            self.playback.on_tab_shown()
        else:
            self.playback.on_tab_hidden()

    def dispose(self) -> None:
        """Stop playback and drop settings subscriptions"""
        self._remove_visibility_listener()
        self.visibility.close()
        if self.playback is not None:
            self.playback.dispose()
        self.logger.info("Sidebar disposed")
