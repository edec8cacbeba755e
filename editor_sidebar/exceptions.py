"""
Exception hierarchy for the editor sidebar.

Contract violations (a descriptor that does not provide an element the
controllers rely on) propagate immediately. Settings I/O failures are raised
by the store and degrade to the last known good state in the callers.
"""


class SidebarError(Exception):
    """Base exception for all sidebar errors"""


class MissingElementError(SidebarError, LookupError):
    """A role or element id is not present in the rendered view tree"""

    def __init__(self, name: str):
        super().__init__(f"View tree has no element for '{name}'")
        self.name = name


class SettingsError(SidebarError):
    """Base exception for settings store failures"""


class SettingsWriteError(SettingsError):
    """The settings file could not be written"""

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"Failed to persist setting '{key}': {cause}")
        self.key = key
        self.cause = cause
