"""
View tree for the sidebar.

Renders a SidebarDescriptor into Flet controls once and indexes them by
element id and by role. Controllers address elements through roles resolved
at construction; after that the tree only changes through visibility toggles.
"""

import logging
from typing import Optional

import flet as ft

from editor_sidebar.exceptions import MissingElementError
from editor_sidebar.models import (
    ButtonListBlock,
    SidebarButton,
    SidebarDescriptor,
    SidebarTab,
    SlidesBlock,
)
from editor_sidebar.ui_flet.slides import SlideCarousel
from editor_sidebar.ui_flet.theme.colors import MD3Colors
from editor_sidebar.ui_flet.theme.theme_aware import ThemeAwareMixin, get_theme_registry
from editor_sidebar.visibility import HIDE_AFFORDANCE, PANEL_AREA, SHOW_AFFORDANCE

logger = logging.getLogger(__name__)

TAB_CONTAINER = "tab_container"
SLIDE_CONTAINER = "slide_container"

PANEL_WIDTH = 320


class SidebarArea(ThemeAwareMixin, ft.Container):
    """Panel area holding the collapsible tabs"""

    def __init__(self, element_id: str, tabs: ft.Column, hide_button: ft.IconButton):
        super().__init__()
        self._registry = get_theme_registry()
        is_dark = self._registry.is_dark

        self.title_text = ft.Text(
            "Editor",
            size=16,
            weight=ft.FontWeight.BOLD,
            color=MD3Colors.get_on_surface(is_dark),
        )

        self.data = element_id
        self.width = PANEL_WIDTH
        self.bgcolor = MD3Colors.get_surface(is_dark)
        self.padding = ft.padding.only(left=12, right=4, top=8, bottom=8)
        self.content = ft.Column(
            controls=[
                ft.Row(
                    controls=[self.title_text, hide_button],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                tabs,
            ],
            spacing=4,
            scroll=ft.ScrollMode.AUTO,
            expand=True,
        )

        self._register_theme_aware()

    def get_themed_properties(self) -> dict[str, tuple[str, str]]:
        return {
            "bgcolor": MD3Colors.get_themed_pair("surface"),
            "title_text.color": MD3Colors.get_themed_pair("on_surface"),
        }


class ViewTree:
    """
    Rendered sidebar with element and role lookup.

    Roles:
        panel_area       - the collapsible panel
        show_affordance  - button that shows the panel
        hide_affordance  - button that hides the panel
        tab_container    - column of collapsible tabs
        slide_container  - carousel of the instructional slides (optional)
    """

    def __init__(
        self,
        root: ft.Control,
        elements: dict[str, ft.Control],
        roles: dict[str, str],
        page: Optional[ft.Page] = None,
    ):
        self.root = root
        self.page = page
        self._elements = elements
        self._roles = roles

    def element(self, element_id: str) -> ft.Control:
        """
        Control rendered for an element id.

        Raises:
            MissingElementError: the id is not part of the tree
        """
        try:
            return self._elements[element_id]
        except KeyError:
            raise MissingElementError(element_id) from None

    def has_element(self, element_id: str) -> bool:
        return element_id in self._elements

    def role(self, name: str) -> ft.Control:
        """
        Control playing a named role.

        Raises:
            MissingElementError: the role is not part of the tree
        """
        if name not in self._roles:
            raise MissingElementError(name)
        return self.element(self._roles[name])

    def refresh(self) -> None:
        """Push pending changes to the page (no-op until the tree is attached)"""
        if self.page is not None:
            self.page.update()


def _build_slides(block: SlidesBlock, elements: dict[str, ft.Control]) -> ft.Control:
    carousel = SlideCarousel(block)
    elements[block.id] = carousel
    for i in range(carousel.slide_count):
        elements[block.placeholder_id(i)] = carousel.placeholder(i)
    return carousel


def _build_button(button: SidebarButton) -> ft.Control:
    return ft.TextButton(
        text=button.title,
        icon=button.icon,
        tooltip=button.tooltip or None,
        data=button.id,
    )


def _build_buttons(block: ButtonListBlock, elements: dict[str, ft.Control]) -> ft.Control:
    controls = []
    for button in block.buttons:
        control = _build_button(button)
        elements[button.id] = control
        controls.append(control)
    return ft.Column(controls=controls, spacing=4)


def _build_tab(tab: SidebarTab, elements: dict[str, ft.Control]) -> ft.ExpansionTile:
    if isinstance(tab.content, SlidesBlock):
        content = _build_slides(tab.content, elements)
    else:
        content = _build_buttons(tab.content, elements)

    tile = ft.ExpansionTile(
        title=ft.Text(tab.title),
        leading=ft.Icon(tab.icon),
        controls=[ft.Container(content=content, padding=ft.padding.only(bottom=8))],
        initially_expanded=False,
        maintain_state=True,
        data=tab.id,
    )
    elements[tab.id] = tile
    return tile


def build_view_tree(
    descriptor: SidebarDescriptor,
    page: Optional[ft.Page] = None,
) -> ViewTree:
    """
    Render a descriptor into a ViewTree.

    The default rendered state is "open": panel area and hide affordance
    visible, show affordance hidden.

    Args:
        descriptor: Validated sidebar descriptor
        page: Page the tree will be added to, if already known

    Returns:
        ViewTree indexing every element of the descriptor
    """
    elements: dict[str, ft.Control] = {}

    tabs = ft.Column(
        controls=[_build_tab(tab, elements) for tab in descriptor.tabs],
        spacing=0,
        data=descriptor.tabs_id,
    )
    elements[descriptor.tabs_id] = tabs

    show_button = ft.IconButton(
        icon=ft.Icons.MENU_OPEN,
        tooltip="Show sidebar",
        visible=False,
        data=descriptor.show_button_id,
    )
    hide_button = ft.IconButton(
        icon=ft.Icons.CHEVRON_LEFT,
        tooltip="Hide sidebar",
        visible=True,
        data=descriptor.hide_button_id,
    )
    elements[descriptor.show_button_id] = show_button
    elements[descriptor.hide_button_id] = hide_button

    area = SidebarArea(descriptor.area_id, tabs, hide_button)
    area.visible = True
    elements[descriptor.area_id] = area

    root = ft.Row(
        controls=[
            area,
            ft.Column(controls=[show_button], alignment=ft.MainAxisAlignment.START),
        ],
        spacing=0,
        vertical_alignment=ft.CrossAxisAlignment.STRETCH,
    )

    roles = {
        PANEL_AREA: descriptor.area_id,
        SHOW_AFFORDANCE: descriptor.show_button_id,
        HIDE_AFFORDANCE: descriptor.hide_button_id,
        TAB_CONTAINER: descriptor.tabs_id,
    }
    slides = descriptor.slides_block()
    if slides is not None:
        roles[SLIDE_CONTAINER] = slides.id

    logger.debug(f"Built sidebar view tree with {len(elements)} elements")
    return ViewTree(root, elements, roles, page)
