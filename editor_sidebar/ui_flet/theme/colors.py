"""
Material Design 3 color palette for the editor sidebar
Centralized theme colors and animation constants
"""

import flet as ft


class MD3Colors:
    """Material Design 3 color palette"""

    # Primary (brand color - teal blue)
    PRIMARY = "#2D6E88"

    # (dark, light) pairs keyed by role name
    _THEMED = {
        "primary": ("#2D6E88", "#1A5A70"),
        "surface": ("#1E1E1E", "#FFFFFF"),
        "surface_variant": ("#2E2E2E", "#F5F5F5"),
        "on_surface": ("#E4E2E0", "#1C1B1F"),
        "on_surface_variant": ("#C4C7CA", "#49454F"),
        "indicator_inactive": ("#5A5A5A", "#C4C7CA"),
    }

    @classmethod
    def get_themed_pair(cls, role: str) -> tuple[str, str]:
        """(dark_value, light_value) for a color role"""
        return cls._THEMED[role]

    @classmethod
    def get_themed(cls, role: str, is_dark: bool = True) -> str:
        dark, light = cls._THEMED[role]
        return dark if is_dark else light

    @staticmethod
    def get_primary(is_dark: bool = True) -> str:
        return "#2D6E88" if is_dark else "#1A5A70"

    @staticmethod
    def get_surface(is_dark: bool = True) -> str:
        return "#1E1E1E" if is_dark else "#FFFFFF"

    @staticmethod
    def get_surface_variant(is_dark: bool = True) -> str:
        return "#2E2E2E" if is_dark else "#F5F5F5"

    @staticmethod
    def get_on_surface(is_dark: bool = True) -> str:
        return "#E4E2E0" if is_dark else "#1C1B1F"

    @staticmethod
    def get_on_surface_variant(is_dark: bool = True) -> str:
        return "#C4C7CA" if is_dark else "#49454F"


class Animations:
    """Animation constants following Material Design motion guidelines"""

    FAST = ft.Animation(150, ft.AnimationCurve.EASE_IN_OUT)
