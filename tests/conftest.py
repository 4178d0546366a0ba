"""Shared test fixtures for storyreel tests."""

import itertools

import pytest

from storyreel.editor import AssetStore, SceneStore, Studio
from storyreel.models import FileDescriptor
from storyreel.services import LocatorAllocator


class ManualHandle:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualTicker:
    """Ticker that only fires when the test says so."""

    def __init__(self):
        self.handles = []

    def schedule(self, interval, callback):
        handle = ManualHandle(interval, callback)
        self.handles.append(handle)
        return handle

    @property
    def last(self):
        return self.handles[-1]

    def fire(self, times=1):
        """Fire the latest schedule like a real timer would, unless cancelled."""
        for _ in range(times):
            if self.last.cancelled:
                return
            self.last.callback()


class FailingSuggestions:
    def suggest(self, script):
        raise RuntimeError("service unavailable")


class EchoSuggestions:
    def __init__(self):
        self.calls = []

    def suggest(self, script):
        self.calls.append(script)
        return f"Try rewriting: {script}"


def make_descriptor(name, mime_type, data=b"\x00" * 16):
    return FileDescriptor(name=name, mime_type=mime_type, size=len(data), data=data)


@pytest.fixture
def ids():
    """Sequential id factory: 's1', 's2', ..."""
    counter = itertools.count(1)
    return lambda: f"s{next(counter)}"


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def store(ids):
    return SceneStore(id_factory=ids)


@pytest.fixture
def locators():
    return LocatorAllocator()


@pytest.fixture
def assets(locators):
    counter = itertools.count(1)
    return AssetStore(locators, id_factory=lambda: f"a{next(counter)}", release_on_delete=False)


@pytest.fixture
def image_file():
    return make_descriptor("cover.png", "image/png")


@pytest.fixture
def video_file():
    return make_descriptor("clip.mp4", "video/mp4")


@pytest.fixture
def audio_file():
    return make_descriptor("voice.mp3", "audio/mpeg")


@pytest.fixture
def studio(store, assets, ticker):
    return Studio(scenes=store, assets=assets, suggestions=EchoSuggestions(), ticker=ticker)
