from pathlib import Path

from PIL import Image

import record_gifs


def test_media_dir_is_next_to_the_script():
    assert record_gifs.MEDIA_DIR == Path(record_gifs.__file__).parent / "media"


def test_record_growing_circle_writes_demo_gif(tmp_path):
    out = record_gifs.record_growing_circle(tmp_path, duration=0.5, fps=10)

    assert out == tmp_path / "demo-growing-circle.gif"
    with Image.open(out) as img:
        assert img.size == (400, 300)
        assert img.n_frames == 5
