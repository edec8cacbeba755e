"""
Editor Sidebar - Flet UI Entry Point
Async/await-based Material Design editor surface with a collapsible sidebar
"""

import os
import sys

import flet as ft

from editor_sidebar.config import DARK_MODE_KEY, SettingsStore
from editor_sidebar.logger import get_logger, setup_logger
from editor_sidebar.ui_flet import FletHostApi, Sidebar
from editor_sidebar.ui_flet.theme import MD3Colors, get_theme_registry

ASSETS_DIR = os.path.join(os.path.abspath(os.path.dirname(__file__)), "assets")


async def main(page: ft.Page):
    """
    Main async entry point for the Flet application

    Args:
        page: The Flet page instance
    """
    logger = get_logger()
    logger.info("Editor Sidebar (Flet) starting...")

    settings = SettingsStore(logger=logger)
    is_dark = bool(settings.get_key_sync(DARK_MODE_KEY))
    get_theme_registry().is_dark = is_dark

    # Configure page
    page.title = "Editor"
    page.window.width = 1100
    page.window.height = 720
    page.window.min_width = 700
    page.window.min_height = 500
    page.padding = 0
    page.spacing = 0
    page.theme_mode = ft.ThemeMode.DARK if is_dark else ft.ThemeMode.LIGHT
    page.theme = ft.Theme(color_scheme_seed=MD3Colors.PRIMARY, use_material3=True)
    page.dark_theme = ft.Theme(color_scheme_seed=MD3Colors.PRIMARY, use_material3=True)

    host = FletHostApi(page, settings, logger)
    sidebar = Sidebar(page, settings, host, logger=logger, assets_dir=ASSETS_DIR)

    editor = ft.Container(
        content=ft.Text("Menu editor", color=MD3Colors.get_on_surface_variant(is_dark)),
        alignment=ft.alignment.center,
        expand=True,
    )

    page.add(
        ft.Row(
            controls=[sidebar.get_container(), editor],
            spacing=0,
            expand=True,
            vertical_alignment=ft.CrossAxisAlignment.STRETCH,
        )
    )
    page.update()

    # Pick up settings edited by another process
    page.run_task(settings.watch)

    def on_disconnect(e):
        sidebar.dispose()

    page.on_disconnect = on_disconnect

    logger.info("UI initialized successfully")


if __name__ == "__main__":
    logger = setup_logger()
    logger.info(f"Python {sys.version.split()[0]}")

    # Launch Flet app with async main
    ft.app(target=main, assets_dir=ASSETS_DIR)
