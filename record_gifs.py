#!/usr/bin/env python3
"""Record an animated GIF of the growing circle by rendering frames headlessly.

Usage: python record_gifs.py
Output: media/demo-growing-circle.gif
"""

from pathlib import Path

from apps.growing_circle import HEIGHT, WIDTH, GrowingCircle
from sketchkit.record import GIF_FPS, orbit, record_gif

ROOT = Path(__file__).parent
MEDIA_DIR = ROOT / "media"

DURATION_S = 4.0   # Seconds of animation per GIF


def record_growing_circle(out_dir: Path = MEDIA_DIR, duration: float = DURATION_S,
                          fps: float = GIF_FPS) -> Path:
    # Pointer circles the middle of the surface once over the whole clip
    n_frames = int(duration * fps)
    path = orbit(WIDTH / 2, HEIGHT / 2, HEIGHT / 3, n_frames)
    return record_gif(GrowingCircle(), path, Path(out_dir) / "demo-growing-circle.gif", fps=fps)


if __name__ == "__main__":
    record_growing_circle()
