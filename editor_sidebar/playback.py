"""
Playback lifecycle for the instructional clips.

States:
    NOT_INITIALIZED - clips not resolved yet (tab never shown)
    IDLE            - clips resolved, nothing playing
    PLAYING         - the clip at current_index is playing

Every transition pauses the old clip before starting a new one, so two clips
never play at the same time.
"""

import logging
from enum import Enum, auto
from typing import Callable, Protocol, runtime_checkable

DEFAULT_CLIP_COUNT = 5


class PlaybackState(Enum):
    NOT_INITIALIZED = auto()
    IDLE = auto()
    PLAYING = auto()


@runtime_checkable
class ClipHandle(Protocol):
    """A playable looping media item"""

    loop: bool

    def play(self) -> None: ...

    def pause(self) -> None:
        """Pause; a no-op on a clip that never started"""
        ...

    def rewind(self) -> None:
        """Seek back to the start position"""
        ...


ClipResolver = Callable[[int], ClipHandle]


class PlaybackLifecycleManager:
    """
    Tracks the current clip and starts/stops playback on tab and slide events.

    Clips are resolved lazily, the first time the tab is shown, so media is
    not fetched until the user opens it.

    Usage:
        manager = PlaybackLifecycleManager(resolver, clip_count=5)
        manager.on_tab_shown()       # resolves clips, plays clip 0
        manager.on_slide_changed(2)  # pauses 0, plays 2
        manager.on_tab_hidden()      # pauses 2
    """

    def __init__(
        self,
        resolver: ClipResolver,
        clip_count: int = DEFAULT_CLIP_COUNT,
        logger: logging.Logger | None = None,
    ):
        if clip_count < 1:
            raise ValueError(f"clip_count must be positive, got {clip_count}")

        self.logger = logger or logging.getLogger(__name__)
        self._resolver = resolver
        self._clip_count = clip_count
        self._clips: list[ClipHandle] = []
        self._current = 0
        self._state = PlaybackState.NOT_INITIALIZED

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def clip_count(self) -> int:
        return self._clip_count

    @property
    def clips(self) -> tuple[ClipHandle, ...]:
        return tuple(self._clips)

    def _resolve_clips(self) -> None:
        self._clips = [self._resolver(i) for i in range(self._clip_count)]
        for clip in self._clips:
            clip.loop = True
        self._state = PlaybackState.IDLE
        self.logger.info(f"Resolved {self._clip_count} instructional clips")

    def on_tab_shown(self) -> None:
        """Restart the current clip from the beginning"""
        if self._state is PlaybackState.NOT_INITIALIZED:
            self._resolve_clips()

        clip = self._clips[self._current]
        clip.rewind()
        clip.play()
        self._state = PlaybackState.PLAYING
        self.logger.debug(f"Playing clip {self._current}")

    def on_tab_hidden(self) -> None:
        """Pause the current clip, keeping its position"""
        if self._state is PlaybackState.NOT_INITIALIZED:
            return

        self._clips[self._current].pause()
        self._state = PlaybackState.IDLE
        self.logger.debug(f"Paused clip {self._current}")

    def on_slide_changed(self, index: int) -> None:
        """
        Switch playback to the clip of another slide.

        While nothing is playing only the current index moves.

        Args:
            index: Slide (and clip) index the carousel moves to

        Raises:
            IndexError: index is outside the clip set
        """
        if not 0 <= index < self._clip_count:
            raise IndexError(
                f"Slide index {index} out of range for {self._clip_count} clips"
            )

        if self._state is PlaybackState.PLAYING:
            self._clips[self._current].pause()
            clip = self._clips[index]
            clip.rewind()
            clip.play()
            self.logger.debug(f"Switched clip {self._current} -> {index}")

        self._current = index

    def dispose(self) -> None:
        """Stop playback when the sidebar goes away"""
        if self._state is PlaybackState.PLAYING:
            self._clips[self._current].pause()
            self._state = PlaybackState.IDLE
