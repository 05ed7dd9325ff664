"""Sketch lifecycle: the interface a sketch implements and the host it draws through."""

from abc import ABC, abstractmethod
from typing import NamedTuple

from sketchkit.canvas import Canvas


class SketchError(Exception):
    """Raised when a sketch is driven outside its initialize/render_frame lifecycle."""


class Pointer(NamedTuple):
    """Pointer position in canvas pixel coordinates."""

    x: float = 0.0
    y: float = 0.0


class Host:
    """Hands out the drawing surface a sketch asks for during initialize()."""

    def __init__(self):
        self.canvas: Canvas | None = None

    def create_canvas(self, width: int, height: int) -> Canvas:
        """Create the surface. Calling again replaces the previous one."""
        self.canvas = Canvas(width, height)
        return self.canvas


class Sketch(ABC):
    """A procedural animation driven by a runtime loop.

    The runtime calls initialize() exactly once, then render_frame() once per
    frame with the current pointer. Calls never overlap.
    """

    @abstractmethod
    def initialize(self, host: Host) -> None:
        """Create the canvas through the host and paint the first frame."""

    @abstractmethod
    def render_frame(self, pointer: Pointer) -> None:
        """Draw one frame."""
