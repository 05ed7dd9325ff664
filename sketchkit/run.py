"""Run loops - drive a Sketch through initialize() and render_frame()."""

from typing import Iterable, Iterator

from sketchkit.canvas import Canvas
from sketchkit.config import DEFAULT_FPS, DEFAULT_SCALE, DEFAULT_TITLE
from sketchkit.sketch import Host, Pointer, Sketch, SketchError


def _initialize(sketch: Sketch) -> Canvas:
    host = Host()
    sketch.initialize(host)
    if host.canvas is None:
        raise SketchError(f"{type(sketch).__name__}.initialize() did not create a canvas")
    return host.canvas


def run(sketch: Sketch, fps: int = DEFAULT_FPS, title: str = DEFAULT_TITLE,
        scale: int = DEFAULT_SCALE) -> None:
    """Main entry point. Shows the sketch in a window until it is closed.

    Args:
        sketch: Initialized once, then asked to render one frame per tick with
                the mouse position over the window.
        fps: Target frames per second (default 60).
        title: Window title.
        scale: Pixel scale factor for the window (default 1).
    """
    # Imported here so headless use never loads pygame
    from sketchkit.simulator import Simulator

    canvas = _initialize(sketch)
    sim = Simulator(canvas, scale=scale, title=title)
    print(f"[run] {title}: {canvas.width}x{canvas.height} @ {fps} fps")

    frame = 0
    try:
        while True:
            sketch.render_frame(sim.pointer())
            frame += 1

            if not sim.update():
                break

            sim.tick(fps)
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
    print(f"[run] Stopped after {frame} frames")


def play(sketch: Sketch, pointers: Iterable[Pointer]) -> Iterator[tuple[int, Canvas]]:
    """Headless run: one frame per pointer, yielding (frame_number, canvas) after each.

    The same canvas object is yielded every time; copy its pixels to keep a frame.
    """
    canvas = _initialize(sketch)
    for frame, pointer in enumerate(pointers):
        sketch.render_frame(Pointer(*pointer))
        yield frame, canvas
