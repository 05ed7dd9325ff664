"""Growing circle - a circle that follows the pointer and gets one pixel wider every frame."""

from sketchkit import Canvas, Host, Pointer, Sketch, SketchError, run
from sketchkit.config import RunConfig

WIDTH, HEIGHT = 400, 300
BACKGROUND = (255, 0, 0)

STROKE_WEIGHT = 10
STROKE = (210, 0, 100)
FILL = (0, 0, 0)


def apply_style(canvas: Canvas) -> None:
    canvas.stroke_weight(STROKE_WEIGHT)
    canvas.stroke(*STROKE)
    canvas.fill(*FILL)


class GrowingCircle(Sketch):
    def __init__(self, diameter: int = 1):
        self.diameter = diameter
        self.canvas: Canvas | None = None

    def initialize(self, host: Host) -> None:
        self.canvas = host.create_canvas(WIDTH, HEIGHT)
        self.canvas.background(*BACKGROUND)

    def render_frame(self, pointer: Pointer) -> None:
        if self.canvas is None:
            raise SketchError("render_frame() called before initialize()")
        # Repaint so the previous circle leaves no trail
        self.canvas.background(*BACKGROUND)
        apply_style(self.canvas)
        self.canvas.ellipse(pointer.x, pointer.y, self.diameter, self.diameter)
        self.diameter += 1


if __name__ == "__main__":
    config = RunConfig.from_env()
    run(GrowingCircle(), fps=config.fps, title=config.title, scale=config.scale)
