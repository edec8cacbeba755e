"""
Settings store for the editor sidebar.
INI-backed key/value store with async reads and per-key change notifications.
"""

import asyncio
import configparser
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable

import msgspec
import platformdirs

from .exceptions import SettingsWriteError

APP_NAME = "EditorSidebar"
APP_AUTHOR = "EditorSidebar"
SETTINGS_FILE_NAME = "settings.ini"
SETTINGS_SECTION = "Settings"

SIDEBAR_VISIBLE_KEY = "sidebarVisible"
DARK_MODE_KEY = "darkMode"

DEFAULT_SETTINGS: dict[str, Any] = {
    SIDEBAR_VISIBLE_KEY: True,
    DARK_MODE_KEY: True,
}

ChangeHandler = Callable[[Any], None]


def get_app_config_dir() -> Path:
    """
    Get the application config directory.

    Returns:
        Path to the config directory (created if doesn't exist)
    """
    config_dir = Path(platformdirs.user_config_dir(APP_NAME, APP_AUTHOR))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    """Default location of the settings file"""
    return get_app_config_dir() / SETTINGS_FILE_NAME


class SettingsStore:
    """
    Persisted key/value settings shared by the whole application.

    Values are stored msgspec-JSON encoded inside a single INI section so that
    booleans and numbers keep their type across sessions. Reads are async,
    writes are synchronous and notify subscribers of the written key when its
    value changed.

    Usage:
        store = SettingsStore(path)
        unsubscribe = store.on_change("sidebarVisible", handler)
        visible = await store.get_key("sidebarVisible")
        store.set_key("sidebarVisible", False)
    """

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        defaults: dict[str, Any] | None = None,
        logger: logging.Logger | None = None,
    ):
        self.path = Path(path) if path is not None else get_settings_path()
        self.defaults = dict(DEFAULT_SETTINGS if defaults is None else defaults)
        self.logger = logger or logging.getLogger(__name__)

        self._parser = self._new_parser()
        self._lock = threading.Lock()
        self._handlers: dict[str, list[ChangeHandler]] = {}
        self._mtime: float | None = None

        self._load()

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        # Keep camelCase key names as written
        parser.optionxform = str
        parser.add_section(SETTINGS_SECTION)
        return parser

    def _load(self) -> None:
        """Read the settings file into the in-memory parser (missing file is fine)"""
        parser = self._new_parser()
        if self.path.exists():
            try:
                parser.read(self.path, encoding="utf-8")
                self._mtime = self.path.stat().st_mtime
            except (OSError, configparser.Error) as e:
                self.logger.warning(f"Could not read settings from {self.path}: {e}")
        if not parser.has_section(SETTINGS_SECTION):
            parser.add_section(SETTINGS_SECTION)
        self._parser = parser

    def _decode(self, name: str, raw: str | None) -> Any:
        if raw is None:
            return self.defaults.get(name)
        try:
            return msgspec.json.decode(raw.encode("utf-8"))
        except msgspec.DecodeError:
            self.logger.warning(f"Ignoring malformed value for '{name}': {raw!r}")
            return self.defaults.get(name)

    def get_key_sync(self, name: str) -> Any:
        """
        Read a setting without awaiting.

        Args:
            name: Setting key

        Returns:
            Stored value, the default for the key, or None
        """
        with self._lock:
            raw = self._parser.get(SETTINGS_SECTION, name, fallback=None)
        return self._decode(name, raw)

    async def get_key(self, name: str) -> Any:
        """
        Read a setting asynchronously.

        Args:
            name: Setting key

        Returns:
            Stored value, the default for the key, or None
        """
        return await asyncio.to_thread(self.get_key_sync, name)

    def set_key(self, name: str, value: Any) -> None:
        """
        Write a setting and persist the settings file.

        Subscribers of the key are notified before the file is written, so the
        in-memory view is consistent even if persisting fails.

        Args:
            name: Setting key
            value: Any msgspec-encodable value

        Raises:
            SettingsWriteError: the settings file could not be written
        """
        encoded = msgspec.json.encode(value).decode("utf-8")

        with self._lock:
            previous = self._parser.get(SETTINGS_SECTION, name, fallback=None)
            self._parser.set(SETTINGS_SECTION, name, encoded)

        changed = self._decode(name, previous) != value
        self.logger.debug(f"Setting '{name}' = {encoded}")

        if changed:
            self._notify(name, value)

        self._persist(name)

    def _persist(self, name: str) -> None:
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "w", encoding="utf-8") as configfile:
                    self._parser.write(configfile)
                self._mtime = self.path.stat().st_mtime
            except OSError as e:
                raise SettingsWriteError(name, e) from e

    def on_change(self, name: str, handler: ChangeHandler) -> Callable[[], None]:
        """
        Subscribe to changes of a single key.

        Args:
            name: Setting key
            handler: Called with the new value

        Returns:
            Callable that removes the subscription
        """
        with self._lock:
            self._handlers.setdefault(name, []).append(handler)

        def unsubscribe() -> None:
            with self._lock:
                handlers = self._handlers.get(name, [])
                if handler in handlers:
                    handlers.remove(handler)

        return unsubscribe

    def _notify(self, name: str, value: Any) -> None:
        with self._lock:
            handlers = list(self._handlers.get(name, []))

        for handler in handlers:
            try:
                handler(value)
            except Exception as e:
                self.logger.error(
                    f"Settings change handler for '{name}' failed: {e}",
                    exc_info=True,
                )

    def reload(self) -> list[str]:
        """
        Re-read the settings file and notify subscribers of keys changed on disk.

        Returns:
            Names of the keys whose value changed
        """
        return self._publish(self._read_changes())

    def _read_changes(self) -> dict[str, Any]:
        """Re-read the settings file; returns the keys whose value changed on disk"""
        with self._lock:
            before = {
                key: self._decode(key, raw)
                for key, raw in self._parser.items(SETTINGS_SECTION)
            }
            self._load()
            after = {
                key: self._decode(key, raw)
                for key, raw in self._parser.items(SETTINGS_SECTION)
            }

        changes = {}
        for key in sorted(set(before) | set(after)):
            old = before.get(key, self.defaults.get(key))
            new = after.get(key, self.defaults.get(key))
            if old != new:
                changes[key] = new
        return changes

    def _publish(self, changes: dict[str, Any]) -> list[str]:
        changed = list(changes)
        for key, value in changes.items():
            self._notify(key, value)

        if changed:
            self.logger.info(f"Settings changed on disk: {', '.join(changed)}")
        return changed

    async def watch(self, interval: float = 1.0) -> None:
        """
        Poll the settings file and reload it when another process modifies it.
        Runs until cancelled.

        Args:
            interval: Seconds between checks
        """
        self.logger.debug(f"Watching settings file {self.path}")
        while True:
            await asyncio.sleep(interval)
            try:
                stat = await asyncio.to_thread(self.path.stat)
            except FileNotFoundError:
                continue
            if self._mtime is None or stat.st_mtime != self._mtime:
                # File I/O off the loop, handlers on it
                changes = await asyncio.to_thread(self._read_changes)
                self._publish(changes)
