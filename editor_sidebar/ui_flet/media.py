"""
Clip binding for the instructional slides.
Creates flet-video players in the carousel placeholders on demand.
"""

import logging
from pathlib import Path
from typing import Optional

import flet as ft
import flet_video as ftv

from editor_sidebar.ui_flet.slides import SlideCarousel

VIDEO_DIR = "videos"
VIDEO_FILE_PATTERN = "introduction-{number}.mp4"


class FletVideoClip:
    """
    Adapts a flet-video player to the clip handle interface.

    Pausing or rewinding a clip that never started is a no-op.
    """

    def __init__(self, video: ftv.Video):
        self.video = video
        self._started = False

    @property
    def loop(self) -> bool:
        return self.video.playlist_mode == ftv.PlaylistMode.LOOP

    @loop.setter
    def loop(self, value: bool) -> None:
        self.video.playlist_mode = ftv.PlaylistMode.LOOP if value else ftv.PlaylistMode.NONE
        if self.video.page:
            self.video.update()

    def play(self) -> None:
        self.video.play()
        self._started = True

    def pause(self) -> None:
        if self._started:
            self.video.pause()

    def rewind(self) -> None:
        if self._started:
            self.video.seek(0)


class VideoClipResolver:
    """
    Resolves clip ``i`` to a video player placed into placeholder ``i``.

    Usage:
        resolver = VideoClipResolver(carousel, assets_dir="assets")
        manager = PlaybackLifecycleManager(resolver, carousel.slide_count)
    """

    def __init__(
        self,
        carousel: SlideCarousel,
        assets_dir: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.carousel = carousel
        self.assets_dir = Path(assets_dir) if assets_dir else None
        self.logger = logger or logging.getLogger(__name__)

    def source_for(self, index: int) -> str:
        """Asset path of clip ``index`` (files are numbered from 1)"""
        return f"/{VIDEO_DIR}/{VIDEO_FILE_PATTERN.format(number=index + 1)}"

    def __call__(self, index: int) -> FletVideoClip:
        src = self.source_for(index)
        if self.assets_dir is not None and not (self.assets_dir / src.lstrip("/")).exists():
            self.logger.warning(f"Instructional clip not found: {src}")

        video = ftv.Video(
            playlist=[ftv.VideoMedia(src)],
            playlist_mode=ftv.PlaylistMode.LOOP,
            autoplay=False,
            show_controls=False,
            volume=0,
            aspect_ratio=16 / 9,
            fill_color=ft.Colors.BLACK,
        )

        placeholder = self.carousel.placeholder(index)
        placeholder.content = video
        if placeholder.page:
            placeholder.update()

        self.logger.debug(f"Bound clip {index} to {src}")
        return FletVideoClip(video)
