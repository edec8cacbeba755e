"""
Host capability consumed by the sidebar.

The sidebar issues fire-and-forget requests to the application hosting it.
The capability is injected at construction so tests can pass a substitute.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HostApi(Protocol):
    """Actions the sidebar can request from its host application"""

    def show_dev_tools(self) -> None:
        """Open the developer inspector"""
        ...

    def reload_menu_theme(self) -> None:
        """Reload the current visual theme"""
        ...
