from .version import __version__
from .config import SettingsStore, get_app_config_dir, SIDEBAR_VISIBLE_KEY
from .exceptions import (
    SidebarError,
    MissingElementError,
    SettingsError,
    SettingsWriteError,
)
from .host_api import HostApi
from .logger import setup_logger
from .models import SidebarDescriptor, default_descriptor, load_descriptor
from .playback import PlaybackLifecycleManager, PlaybackState, ClipHandle
from .visibility import VisibilityController

__all__ = [
    "__version__",
    "SettingsStore",
    "get_app_config_dir",
    "SIDEBAR_VISIBLE_KEY",
    "SidebarError",
    "MissingElementError",
    "SettingsError",
    "SettingsWriteError",
    "HostApi",
    "setup_logger",
    "SidebarDescriptor",
    "default_descriptor",
    "load_descriptor",
    "PlaybackLifecycleManager",
    "PlaybackState",
    "ClipHandle",
    "VisibilityController",
]
