"""Small toolkit for p5-style procedural sketches drawn into an RGB canvas."""

from sketchkit.canvas import Canvas
from sketchkit.run import play, run
from sketchkit.sketch import Host, Pointer, Sketch, SketchError

__all__ = ["Canvas", "Host", "Pointer", "Sketch", "SketchError", "play", "run"]
