"""Render a sketch headlessly into an animated GIF."""

import math
from pathlib import Path
from typing import Iterable, Iterator

from PIL import Image

from sketchkit.canvas import Canvas
from sketchkit.run import play
from sketchkit.sketch import Pointer, Sketch, SketchError

# GIF settings
SCALE = 1          # Upscale factor
GIF_FPS = 30       # Frames per second in the GIF


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a scaled-up PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def orbit(cx: float, cy: float, radius: float, frames: int,
          turns: float = 1.0) -> Iterator[Pointer]:
    """Pointer path going `turns` times around a circle in `frames` steps."""
    for i in range(frames):
        angle = 2 * math.pi * turns * i / frames
        yield Pointer(cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def record_gif(sketch: Sketch, pointers: Iterable[Pointer], out_path: Path,
               fps: float = GIF_FPS, scale: int = SCALE) -> Path:
    """Render one frame per pointer and save as a looping GIF."""
    if fps <= 0:
        raise ValueError(f"GIF fps must be positive, got {fps}")
    frames = [canvas_to_image(canvas, scale) for _, canvas in play(sketch, pointers)]
    if not frames:
        raise SketchError("No frames to record")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {len(frames) / fps:.1f}s)")
    return out_path
