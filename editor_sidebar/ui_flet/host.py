"""
Flet implementation of the sidebar's host capability.
"""

import logging
from typing import Optional

import flet as ft

from editor_sidebar.config import DARK_MODE_KEY, SettingsStore
from editor_sidebar.ui_flet.theme.theme_aware import get_theme_registry


class FletHostApi:
    """
    Host actions backed by the Flet page.

    - Developer inspector: toggles Flet's semantics debugger overlay
    - Theme reload: re-reads the dark mode setting and re-colors themed controls
    """

    def __init__(
        self,
        page: ft.Page,
        settings: SettingsStore,
        logger: Optional[logging.Logger] = None,
    ):
        self.page = page
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    def show_dev_tools(self) -> None:
        enabled = not bool(self.page.show_semantics_debugger)
        self.page.show_semantics_debugger = enabled
        self.page.update()
        self.logger.info(f"Developer inspector {'opened' if enabled else 'closed'}")

    def reload_menu_theme(self) -> None:
        is_dark = bool(self.settings.get_key_sync(DARK_MODE_KEY))
        self.page.theme_mode = ft.ThemeMode.DARK if is_dark else ft.ThemeMode.LIGHT
        get_theme_registry().apply_theme_to_all(is_dark, page=self.page)
        self.logger.info(f"Reloaded {'dark' if is_dark else 'light'} theme")
