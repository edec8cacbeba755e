"""
Theme-Aware Component System
Lets controls re-color themselves when the dark/light theme is reloaded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from weakref import WeakSet

if TYPE_CHECKING:
    import flet as ft

logger = logging.getLogger(__name__)


class ThemeAwareMixin:
    """
    Mixin for controls that respond to theme changes.

    Controls should:
    1. Inherit from this mixin AND their Flet base class
    2. Call _register_theme_aware() in __init__ after building UI
    3. Implement get_themed_properties() to return color mappings

    Example:
        class SlideCarousel(ThemeAwareMixin, ft.Container):
            def get_themed_properties(self) -> dict[str, tuple[str, str]]:
                return {
                    "bgcolor": ("#1E1E1E", "#FFFFFF"),
                    "caption.color": ("#E4E2E0", "#1C1B1F"),
                }
    """

    def _register_theme_aware(self) -> None:
        """Register with ThemeRegistry for updates"""
        get_theme_registry().register(self)

    def get_themed_properties(self) -> dict[str, tuple[str, str]]:
        """
        Return themed property mappings.

        Returns:
            Dict mapping property paths to (dark_value, light_value) tuples.
            Property paths support nested attributes via dot notation.
        """
        return {}

    def apply_theme(self, is_dark: bool) -> None:
        """Set every themed property to its dark or light value"""
        for prop_path, (dark_val, light_val) in self.get_themed_properties().items():
            self._set_nested_property(prop_path, dark_val if is_dark else light_val)

    def _set_nested_property(self, prop_path: str, value) -> None:
        """
        Set a potentially nested property using dot notation.

        Args:
            prop_path: Property path like "bgcolor" or "caption.color"
            value: Value to set
        """
        parts = prop_path.split('.')
        obj = self

        for part in parts[:-1]:
            if not hasattr(obj, part):
                return  # Property path doesn't exist
            obj = getattr(obj, part)

        final_attr = parts[-1]
        if hasattr(obj, final_attr):
            setattr(obj, final_attr, value)


class ThemeRegistry:
    """
    Central registry for theme-aware controls.

    Uses WeakSet to automatically clean up garbage-collected controls.
    """

    _instance: ThemeRegistry | None = None

    def __new__(cls) -> ThemeRegistry:
        """Singleton pattern"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return

        self._components: WeakSet[ThemeAwareMixin] = WeakSet()
        self._is_dark: bool = True  # Default to dark mode
        self._initialized = True

    @property
    def is_dark(self) -> bool:
        """Current theme mode"""
        return self._is_dark

    @is_dark.setter
    def is_dark(self, value: bool) -> None:
        """Set theme mode (does not re-color - call apply_theme_to_all)"""
        self._is_dark = value

    def register(self, component: ThemeAwareMixin) -> None:
        if component is not None:
            self._components.add(component)

    def get_component_count(self) -> int:
        """Get the number of registered components (for debugging)"""
        return len(self._components)

    def apply_theme_to_all(self, is_dark: bool, page: "ft.Page | None" = None) -> None:
        """
        Apply theme to all registered controls in a single pass.

        Args:
            is_dark: Whether to apply dark mode
            page: Optional Flet page for the final update
        """
        self._is_dark = is_dark

        # Snapshot: the WeakSet may change during iteration
        for comp in list(self._components):
            comp.apply_theme(is_dark)

        logger.debug(
            f"Applied {'dark' if is_dark else 'light'} theme to "
            f"{len(self._components)} components"
        )

        if page is not None:
            page.update()


# Global registry instance
_registry: ThemeRegistry | None = None


def get_theme_registry() -> ThemeRegistry:
    """
    Get the global ThemeRegistry singleton.

    Returns:
        The ThemeRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = ThemeRegistry()
    return _registry


def reset_theme_registry() -> None:
    """
    Reset the global registry (for testing purposes).
    """
    global _registry
    _registry = None
    ThemeRegistry._instance = None


__all__ = [
    'ThemeAwareMixin',
    'ThemeRegistry',
    'get_theme_registry',
    'reset_theme_registry',
]
