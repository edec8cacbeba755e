"""Theme module for the editor sidebar Flet UI"""

from .colors import MD3Colors, Animations
from .theme_aware import (
    ThemeAwareMixin,
    ThemeRegistry,
    get_theme_registry,
    reset_theme_registry,
)

__all__ = [
    'MD3Colors',
    'Animations',
    'ThemeAwareMixin',
    'ThemeRegistry',
    'get_theme_registry',
    'reset_theme_registry',
]
