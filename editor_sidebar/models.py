"""
msgspec-based view model for the sidebar.

The sidebar is built from a declarative descriptor: an ordered list of tabs,
each carrying an icon, a title and one content block. Two block kinds exist:

- SlidesBlock: ordered captions, rendered as slides with paired media
  placeholders (one instructional clip per slide)
- ButtonListBlock: ordered developer actions

Descriptors can be created in code (default_descriptor) or loaded from JSON.
"""

import os
from pathlib import Path
from typing import List, Union

import msgspec


# =============================================================================
# Content Blocks
# =============================================================================

class Slide(msgspec.Struct):
    """One instructional slide. Its clip index is its position in the block."""
    caption: str


class SlidesBlock(msgspec.Struct, tag="slides"):
    """
    Instructional slides with paired media placeholders.

    Element ids derived from ``id``:
        {id}          - the carousel (slide container)
        {id}-video-N  - media placeholder of slide N
    """
    id: str
    slides: List[Slide]

    def placeholder_id(self, index: int) -> str:
        return f"{self.id}-video-{index}"


class SidebarButton(msgspec.Struct):
    """Developer action button"""
    id: str
    icon: str
    title: str
    tooltip: str = ""


class ButtonListBlock(msgspec.Struct, tag="buttons"):
    buttons: List[SidebarButton]


ContentBlock = Union[SlidesBlock, ButtonListBlock]


class SidebarTab(msgspec.Struct):
    """One collapsible section of the sidebar"""
    id: str
    icon: str
    title: str
    content: ContentBlock


class SidebarDescriptor(msgspec.Struct):
    """
    Complete description of the sidebar content.

    Attributes:
        tabs: Ordered tab list
        area_id: Element id of the panel area
        show_button_id: Element id of the "show sidebar" affordance
        hide_button_id: Element id of the "hide sidebar" affordance
        tabs_id: Element id of the tab container
    """
    tabs: List[SidebarTab]
    area_id: str = "editor-sidebar-area"
    show_button_id: str = "show-sidebar-button"
    hide_button_id: str = "hide-sidebar-button"
    tabs_id: str = "editor-sidebar-tabs"

    def slides_block(self) -> SlidesBlock | None:
        """First instructional slides block, if any"""
        for tab in self.tabs:
            if isinstance(tab.content, SlidesBlock):
                return tab.content
        return None

    def slides_tab(self) -> SidebarTab | None:
        """Tab holding the first instructional slides block, if any"""
        for tab in self.tabs:
            if isinstance(tab.content, SlidesBlock):
                return tab
        return None

    def element_ids(self) -> list[str]:
        """All element ids the descriptor declares, in document order"""
        ids = [self.area_id, self.show_button_id, self.hide_button_id, self.tabs_id]
        for tab in self.tabs:
            ids.append(tab.id)
            if isinstance(tab.content, SlidesBlock):
                ids.append(tab.content.id)
                ids.extend(
                    tab.content.placeholder_id(i)
                    for i in range(len(tab.content.slides))
                )
            else:
                ids.extend(button.id for button in tab.content.buttons)
        return ids

    def validate(self) -> "SidebarDescriptor":
        """
        Check that every element id is unique.

        Returns:
            self, for chaining

        Raises:
            ValueError: if an id is declared more than once
        """
        seen = set()
        for element_id in self.element_ids():
            if element_id in seen:
                raise ValueError(f"Duplicate element id in sidebar descriptor: {element_id}")
            seen.add(element_id)
        return self


# =============================================================================
# Convenience Functions
# =============================================================================

json_encoder = msgspec.json.Encoder()
descriptor_decoder = msgspec.json.Decoder(SidebarDescriptor)


def encode_json(obj) -> bytes:
    """
    Encode object to JSON bytes using msgspec.

    Args:
        obj: Any msgspec.Struct or serializable object

    Returns:
        JSON as bytes
    """
    return json_encoder.encode(obj)


def decode_json(data: bytes, type=None):
    """
    Decode JSON bytes to object using msgspec.

    Args:
        data: JSON as bytes
        type: Optional msgspec.Struct type for validation

    Returns:
        Decoded object (validated if type provided)
    """
    if type is SidebarDescriptor:
        return descriptor_decoder.decode(data)
    if type:
        return msgspec.json.decode(data, type=type)
    return msgspec.json.decode(data)


def load_descriptor(path: str | os.PathLike) -> SidebarDescriptor:
    """
    Load and validate a sidebar descriptor from a JSON file.

    Raises:
        msgspec.ValidationError: the file does not match the descriptor schema
        ValueError: element ids are not unique
    """
    data = Path(path).read_bytes()
    return decode_json(data, type=SidebarDescriptor).validate()


# =============================================================================
# Stock Content
# =============================================================================

INTRODUCTION_CAPTIONS = [
    "Click Anywhere: You do not have to exactly click on an item, you just have "
    "to click somewhere into its wedge!",
    "Go Back: Quickly navigate one level up by clicking the center item.",
    "Marking Mode: Drag over an item to enter marking mode. If you pause the "
    "pointer movement or make a turn, the currently dragged submenu will be opened.",
    "Turbo Mode: If you keep a key pressed after opening the menu, you can perform "
    "selections by just moving the pointer. This is the fastest way to select items!",
    "No accidental selections: Final items are only selected as soon as you release "
    "your mouse button in \"Marking Mode\" or a keyboard key in \"Turbo Mode\". "
    "Use this to explore the menu!",
]

DEV_TOOLS_BUTTON_ID = "dev-tools-button"
RELOAD_THEME_BUTTON_ID = "reload-menu-theme-button"


def default_descriptor() -> SidebarDescriptor:
    """The stock sidebar: an introduction tab and a development tab"""
    return SidebarDescriptor(
        tabs=[
            SidebarTab(
                id="sidebar-tab-introduction",
                icon="school",
                title="Introduction",
                content=SlidesBlock(
                    id="introduction-slides",
                    slides=[Slide(caption=caption) for caption in INTRODUCTION_CAPTIONS],
                ),
            ),
            SidebarTab(
                id="sidebar-tab-debugging",
                icon="ads_click",
                title="Development",
                content=ButtonListBlock(
                    buttons=[
                        SidebarButton(
                            id=DEV_TOOLS_BUTTON_ID,
                            icon="code",
                            title="Show Developer Tools",
                            tooltip="Open the inspector for the UI.",
                        ),
                        SidebarButton(
                            id=RELOAD_THEME_BUTTON_ID,
                            icon="palette",
                            title="Reload Current Menu Theme",
                            tooltip="Re-read the theme settings and re-apply the colors.",
                        ),
                    ],
                ),
            ),
        ],
    )
