"""
Slide Carousel Component

Shows one instructional slide at a time:
- Media placeholder (filled with a clip once the tab is first opened)
- Caption text
- Previous/next buttons and dot indicators, wrapping around at the ends

Listeners are told about a slide change before the carousel switches.
"""

from typing import Callable, Optional

import flet as ft

from editor_sidebar.models import SlidesBlock
from editor_sidebar.ui_flet.theme.colors import MD3Colors, Animations
from editor_sidebar.ui_flet.theme.theme_aware import ThemeAwareMixin, get_theme_registry

SlideListener = Callable[[int, int], None]


class SlideCarousel(ThemeAwareMixin, ft.Container):
    """
    Carousel over the slides of a SlidesBlock.

    Usage:
        carousel = SlideCarousel(block, on_slide=lambda old, new: ...)
        carousel.next_slide()
        carousel.go_to(3)
    """

    PLACEHOLDER_HEIGHT = 180
    INDICATOR_SIZE = 8

    def __init__(self, block: SlidesBlock, on_slide: Optional[SlideListener] = None):
        super().__init__()
        if not block.slides:
            raise ValueError(f"Slides block '{block.id}' has no slides")

        self.block = block
        self.on_slide_callback = on_slide
        self._index = 0
        self._registry = get_theme_registry()

        self._placeholders: list[ft.Container] = []
        self._captions: list[ft.Text] = []
        self._slides: list[ft.Column] = []
        self._indicators: list[ft.Container] = []

        self._build_ui()
        self._register_theme_aware()

    def _build_ui(self):
        is_dark = self._registry.is_dark

        for i, slide in enumerate(self.block.slides):
            placeholder = ft.Container(
                data=self.block.placeholder_id(i),
                height=self.PLACEHOLDER_HEIGHT,
                bgcolor=MD3Colors.get_surface_variant(is_dark),
                border_radius=8,
                alignment=ft.alignment.center,
            )
            caption = ft.Text(
                slide.caption,
                size=13,
                color=MD3Colors.get_on_surface_variant(is_dark),
            )
            self._placeholders.append(placeholder)
            self._captions.append(caption)
            self._slides.append(
                ft.Column(
                    controls=[placeholder, caption],
                    spacing=8,
                    visible=i == 0,
                )
            )

        for i in range(len(self.block.slides)):
            self._indicators.append(
                ft.Container(
                    width=self.INDICATOR_SIZE,
                    height=self.INDICATOR_SIZE,
                    border_radius=self.INDICATOR_SIZE // 2,
                    bgcolor=self._indicator_color(i == 0, is_dark),
                    animate=Animations.FAST,
                    on_click=lambda e, index=i: self.go_to(index),
                )
            )

        self.prev_button = ft.IconButton(
            icon=ft.Icons.CHEVRON_LEFT,
            tooltip="Previous",
            on_click=lambda e: self.previous_slide(),
        )
        self.next_button = ft.IconButton(
            icon=ft.Icons.CHEVRON_RIGHT,
            tooltip="Next",
            on_click=lambda e: self.next_slide(),
        )

        self.data = self.block.id
        self.content = ft.Column(
            controls=[
                ft.Stack(controls=self._slides),
                ft.Row(
                    controls=[
                        self.prev_button,
                        ft.Row(controls=self._indicators, spacing=6),
                        self.next_button,
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
            ],
            spacing=4,
        )

    @staticmethod
    def _indicator_color(active: bool, is_dark: bool) -> str:
        if active:
            return MD3Colors.get_primary(is_dark)
        return MD3Colors.get_themed("indicator_inactive", is_dark)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def slide_count(self) -> int:
        return len(self._slides)

    def placeholder(self, index: int) -> ft.Container:
        """Media placeholder paired with slide ``index``"""
        return self._placeholders[index]

    def go_to(self, index: int) -> None:
        """
        Move to a slide. Moving to the current slide does nothing.

        Raises:
            IndexError: index is outside the slide range
        """
        if not 0 <= index < len(self._slides):
            raise IndexError(f"Slide index {index} out of range")
        if index == self._index:
            return

        previous = self._index
        if self.on_slide_callback is not None:
            self.on_slide_callback(previous, index)

        is_dark = self._registry.is_dark
        self._slides[previous].visible = False
        self._slides[index].visible = True
        self._indicators[previous].bgcolor = self._indicator_color(False, is_dark)
        self._indicators[index].bgcolor = self._indicator_color(True, is_dark)
        self._index = index

        if self.page:
            self.update()

    def next_slide(self) -> None:
        self.go_to((self._index + 1) % len(self._slides))

    def previous_slide(self) -> None:
        self.go_to((self._index - 1) % len(self._slides))

    def apply_theme(self, is_dark: bool) -> None:
        # Per-slide controls live in lists, out of reach of dotted property paths
        for placeholder in self._placeholders:
            placeholder.bgcolor = MD3Colors.get_surface_variant(is_dark)
        for caption in self._captions:
            caption.color = MD3Colors.get_on_surface_variant(is_dark)
        for i, indicator in enumerate(self._indicators):
            indicator.bgcolor = self._indicator_color(i == self._index, is_dark)
