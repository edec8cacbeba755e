"""
Shared fixtures: settings store on a temp path, clip fakes that record
playback order, and a fresh theme registry per test.
"""

from types import SimpleNamespace

import pytest

from editor_sidebar.config import SettingsStore
from editor_sidebar.ui_flet.theme.theme_aware import reset_theme_registry


class ClipBoard:
    """Tracks every fake clip so tests can check who is playing"""

    def __init__(self):
        self.clips = []
        self.overlaps = []

    def playing(self):
        return [clip.index for clip in self.clips if clip.playing]

    def on_play(self, clip):
        others = [c.index for c in self.clips if c.playing and c is not clip]
        if others:
            self.overlaps.append((clip.index, others))


class FakeClip:
    """Clip handle recording its calls; pause on an unstarted clip is a no-op"""

    def __init__(self, index, board):
        self.index = index
        self.board = board
        self.loop = False
        self.playing = False
        self.position = 0
        self.calls = []

    def play(self):
        self.board.on_play(self)
        self.playing = True
        self.calls.append("play")

    def pause(self):
        self.playing = False
        self.calls.append("pause")

    def rewind(self):
        self.position = 0
        self.calls.append("rewind")


class FakeResolver:
    def __init__(self):
        self.board = ClipBoard()
        self.resolved = []

    def __call__(self, index):
        self.resolved.append(index)
        clip = FakeClip(index, self.board)
        self.board.clips.append(clip)
        return clip

    def clip(self, index):
        return self.board.clips[index]


class FakeView:
    """View tree stand-in exposing the three visibility roles"""

    def __init__(self, roles=("panel_area", "show_affordance", "hide_affordance")):
        self.root = SimpleNamespace(name="root")
        self._roles = {name: SimpleNamespace(visible=None) for name in roles}
        self.refresh_count = 0

    def role(self, name):
        from editor_sidebar.exceptions import MissingElementError
        if name not in self._roles:
            raise MissingElementError(name)
        return self._roles[name]

    def refresh(self):
        self.refresh_count += 1


@pytest.fixture(autouse=True)
def fresh_theme_registry():
    reset_theme_registry()
    yield
    reset_theme_registry()


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.ini"


@pytest.fixture
def settings(settings_path):
    return SettingsStore(settings_path)


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def fake_view():
    return FakeView()
