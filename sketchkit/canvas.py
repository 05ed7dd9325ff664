"""RGB pixel surface with p5-style drawing state and primitives."""

from dataclasses import dataclass, replace

import numpy as np

# Type alias for RGB tuples
Color = tuple[int, int, int]

DEFAULT_STROKE: Color = (0, 0, 0)
DEFAULT_FILL: Color = (255, 255, 255)


@dataclass(frozen=True)
class Style:
    """Current pen. A color of None disables that part of the shape."""

    weight: float = 1.0
    stroke: Color | None = DEFAULT_STROKE
    fill: Color | None = DEFAULT_FILL


def _inside(dx: np.ndarray, dy: np.ndarray, a: float, b: float) -> np.ndarray:
    return (dx / a) ** 2 + (dy / b) ** 2 <= 1.0


class Canvas:
    """Width x height RGB pixel surface.

    Pixels are stored as a numpy uint8 array shaped (height, width, 3), so
    pixel (x, y) is ``pixels[y, x]``. A pixel covers the unit square starting
    at (x, y); shapes are rasterized by testing pixel centers (x+0.5, y+0.5).
    """

    def __init__(self, width: int, height: int):
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive integers, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self._style = Style()
        # Pixel-center coordinate grids, reused by every shape
        ys, xs = np.indices((self.height, self.width), dtype=np.float64)
        self._cx = xs + 0.5
        self._cy = ys + 0.5

    @property
    def style(self) -> Style:
        return self._style

    def background(self, r: int, g: int, b: int) -> None:
        """Fill the entire surface with a color. Style is left untouched."""
        self.pixels[:, :] = self.rgb(r, g, b)

    def stroke_weight(self, weight: float) -> None:
        if weight < 0:
            raise ValueError(f"Stroke weight must be >= 0, got {weight}")
        self._style = replace(self._style, weight=float(weight))

    def stroke(self, r: int, g: int, b: int) -> None:
        self._style = replace(self._style, stroke=self.rgb(r, g, b))

    def fill(self, r: int, g: int, b: int) -> None:
        self._style = replace(self._style, fill=self.rgb(r, g, b))

    def no_stroke(self) -> None:
        self._style = replace(self._style, stroke=None)

    def no_fill(self) -> None:
        self._style = replace(self._style, fill=None)

    def ellipse(self, x: float, y: float, w: float, h: float) -> None:
        """Draw an ellipse centered at (x, y) with full width w and height h.

        The fill covers the ellipse interior. The stroke is centered on the
        outline, half its weight inside and half outside, and is painted over
        the fill. Anything off the surface is clipped.
        """
        a = abs(w) / 2.0
        b = abs(h) / 2.0
        dx = self._cx - x
        dy = self._cy - y
        style = self._style

        if style.fill is not None and a > 0 and b > 0:
            self.pixels[_inside(dx, dy, a, b)] = style.fill

        if style.stroke is not None and style.weight > 0:
            half = style.weight / 2.0
            ring = _inside(dx, dy, a + half, b + half)
            if a - half > 0 and b - half > 0:
                ring &= ~_inside(dx, dy, a - half, b - half)
            self.pixels[ring] = style.stroke

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b = self.pixels[y, x]
            return (int(r), int(g), int(b))
        return (0, 0, 0)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as row-major RGB bytes."""
        return self.pixels.tobytes()

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Convenience: clamp and return an RGB tuple."""
        return (max(0, min(255, int(r))), max(0, min(255, int(g))), max(0, min(255, int(b))))
