"""Run settings, with overrides from SKETCH_* environment variables."""

import os
from dataclasses import dataclass

DEFAULT_FPS = 60
DEFAULT_SCALE = 1
DEFAULT_TITLE = "Growing Circle"


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class RunConfig:
    fps: int = DEFAULT_FPS
    scale: int = DEFAULT_SCALE
    title: str = DEFAULT_TITLE

    @classmethod
    def from_env(cls, title: str = DEFAULT_TITLE) -> "RunConfig":
        """Build a config, letting SKETCH_FPS, SKETCH_SCALE and SKETCH_TITLE override defaults."""
        return cls(
            fps=_positive_int("SKETCH_FPS", DEFAULT_FPS),
            scale=_positive_int("SKETCH_SCALE", DEFAULT_SCALE),
            title=os.environ.get("SKETCH_TITLE") or title,
        )
