import pytest
from PIL import Image

from apps.growing_circle import GrowingCircle
from sketchkit.canvas import Canvas
from sketchkit.record import canvas_to_image, orbit, record_gif
from sketchkit.sketch import Pointer, SketchError


def test_canvas_to_image_scales_with_nearest_neighbour():
    canvas = Canvas(3, 2)
    canvas.pixels[0, 0] = (255, 0, 0)
    img = canvas_to_image(canvas, scale=4)

    assert img.size == (12, 8)
    assert img.getpixel((3, 3)) == (255, 0, 0)
    assert img.getpixel((4, 0)) == (0, 0, 0)


def test_orbit_starts_on_the_right_and_keeps_radius():
    points = list(orbit(100, 50, 10, 4))
    assert len(points) == 4
    assert points[0] == Pointer(110, 50)
    assert points[1].x == pytest.approx(100)
    assert points[1].y == pytest.approx(60)
    for p in points:
        assert ((p.x - 100) ** 2 + (p.y - 50) ** 2) ** 0.5 == pytest.approx(10)


def test_record_gif_writes_one_frame_per_pointer(tmp_path):
    out = record_gif(GrowingCircle(), orbit(200, 150, 50, 5), tmp_path / "media" / "demo.gif")

    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (400, 300)
        assert img.n_frames == 5


def test_record_gif_without_frames_raises(tmp_path):
    with pytest.raises(SketchError):
        record_gif(GrowingCircle(), [], tmp_path / "empty.gif")


@pytest.mark.parametrize("fps", [0, -10])
def test_record_gif_rejects_non_positive_fps(tmp_path, fps):
    with pytest.raises(ValueError, match="fps"):
        record_gif(GrowingCircle(), orbit(200, 150, 50, 2), tmp_path / "bad.gif", fps=fps)
    assert not (tmp_path / "bad.gif").exists()


def test_record_module_does_not_depend_on_apps():
    import inspect

    import sketchkit.record

    assert "apps" not in inspect.getsource(sketchkit.record)
