"""
Visibility controller for the sidebar.
Keeps the panel's open/closed state, its view toggles and the persisted
"sidebarVisible" setting in agreement.
"""

import logging
from typing import Any, Callable, Protocol

from .config import SIDEBAR_VISIBLE_KEY
from .exceptions import SettingsWriteError

PANEL_AREA = "panel_area"
SHOW_AFFORDANCE = "show_affordance"
HIDE_AFFORDANCE = "hide_affordance"

DEFAULT_OPEN = True

VisibilityListener = Callable[[bool], None]


class VisibilityView(Protocol):
    """Part of the view tree the controller drives"""

    root: Any

    def role(self, name: str) -> Any:
        """Element for a named role; the element exposes a ``visible`` flag"""
        ...

    def refresh(self) -> None:
        """Push pending visual changes to the screen"""
        ...


class VisibilitySettings(Protocol):
    """Part of the settings store the controller uses"""

    async def get_key(self, name: str) -> Any: ...

    def set_key(self, name: str, value: Any) -> None: ...

    def on_change(self, name: str, handler: Callable[[Any], None]) -> Callable[[], None]: ...


class VisibilityController:
    """
    Owns the boolean "is the sidebar open" state.

    The panel area and the hide affordance are visible iff the sidebar is open,
    the show affordance iff it is closed. The in-memory state is the fast
    comparison copy; the settings store holds the persisted copy. Changes
    arriving from the store are routed through set_visibility, whose
    idempotence check stops the echo of its own writes.

    Usage:
        controller = VisibilityController(view, settings, logger)
        page.run_task(controller.load_initial)
        controller.set_visibility(False)
    """

    def __init__(
        self,
        view: VisibilityView,
        settings: VisibilitySettings,
        logger: logging.Logger | None = None,
        default_open: bool = DEFAULT_OPEN,
    ):
        """
        Resolve the view roles, render the default state and subscribe to
        settings changes.

        Args:
            view: View tree exposing the three visibility roles
            settings: Settings store
            logger: Logger for diagnostics
            default_open: State rendered until the persisted value is known

        Raises:
            MissingElementError: a visibility role is missing from the view
        """
        self.logger = logger or logging.getLogger(__name__)
        self._view = view
        self._settings = settings

        # Roles are resolved once; a missing one fails here, not on first click
        self._panel_area = view.role(PANEL_AREA)
        self._show_affordance = view.role(SHOW_AFFORDANCE)
        self._hide_affordance = view.role(HIDE_AFFORDANCE)

        self._open = default_open
        self._apply(default_open)
        self._listeners: list[VisibilityListener] = []

        self._unsubscribe: Callable[[], None] | None = settings.on_change(
            SIDEBAR_VISIBLE_KEY, self._on_setting_changed
        )

    @property
    def is_open(self) -> bool:
        return self._open

    def get_container(self) -> Any:
        """Root of the rendered view tree"""
        return self._view.root

    async def load_initial(self) -> None:
        """
        Fetch the persisted visibility and apply it.
        An unset key keeps the sidebar open.
        """
        value = await self._settings.get_key(SIDEBAR_VISIBLE_KEY)
        if value is None:
            value = DEFAULT_OPEN
        self.logger.debug(f"Initial sidebar visibility: {value!r}")
        self._apply_setting(value)

    def set_visibility(self, open: bool) -> None:
        """
        Show or hide the sidebar.

        Does nothing if the sidebar is already in the requested state.
        Otherwise updates the view, the in-memory state and the persisted
        setting, in that order. A failed write is logged and not retried.

        Args:
            open: Whether the sidebar should be visible
        """
        if self._open == open:
            return

        self._apply(open)
        self._view.refresh()
        self._open = open
        self.logger.info(f"Sidebar {'shown' if open else 'hidden'}")
        self._notify(open)

        try:
            self._settings.set_key(SIDEBAR_VISIBLE_KEY, open)
        except SettingsWriteError as e:
            self.logger.warning(f"Sidebar visibility not persisted: {e}")

    def add_listener(self, listener: VisibilityListener) -> Callable[[], None]:
        """
        Subscribe to effective open/closed transitions.

        Listeners run after the view and in-memory state changed and before the
        setting is written; requests that change nothing are not reported.

        Args:
            listener: Called with the new state

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _notify(self, open: bool) -> None:
        for listener in list(self._listeners):
            try:
                listener(open)
            except Exception as e:
                self.logger.error(f"Sidebar visibility listener failed: {e}", exc_info=True)

    def close(self) -> None:
        """Drop the settings subscription and the listeners"""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._listeners.clear()

    def _on_setting_changed(self, value: Any) -> None:
        self._apply_setting(value)

    def _apply_setting(self, value: Any) -> None:
        # Only real booleans count; a hand-edited "false" must not open the panel
        if not isinstance(value, bool):
            self.logger.warning(
                f"Ignoring malformed value for '{SIDEBAR_VISIBLE_KEY}': {value!r}"
            )
            return
        self.set_visibility(value)

    def _apply(self, open: bool) -> None:
        self._panel_area.visible = open
        self._hide_affordance.visible = open
        self._show_affordance.visible = not open
