"""
Flet UI for the editor sidebar

Components:
    - Sidebar: composition of view tree, visibility and playback
    - ViewTree: rendered descriptor with element/role lookup
    - SlideCarousel: instructional slides with media placeholders
    - FletHostApi: host actions backed by the Flet page
"""

from .host import FletHostApi
from .sidebar import Sidebar
from .slides import SlideCarousel
from .view_tree import ViewTree, build_view_tree

__all__ = [
    "FletHostApi",
    "Sidebar",
    "SlideCarousel",
    "ViewTree",
    "build_view_tree",
]
