import os

# Keep pygame headless and quiet during tests
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import pytest

from sketchkit.canvas import Canvas
from sketchkit.sketch import Host


class RecordingCanvas(Canvas):
    """Canvas that also logs background and ellipse calls in order."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.calls = []

    def background(self, r, g, b):
        self.calls.append(("background", (r, g, b)))
        super().background(r, g, b)

    def ellipse(self, x, y, w, h):
        self.calls.append(("ellipse", (x, y, w, h), self.style))
        super().ellipse(x, y, w, h)

    def ellipses(self):
        return [c for c in self.calls if c[0] == "ellipse"]


class RecordingHost(Host):
    def create_canvas(self, width, height):
        self.canvas = RecordingCanvas(width, height)
        return self.canvas


@pytest.fixture
def host():
    return RecordingHost()
