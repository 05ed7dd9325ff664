"""Pygame window that shows a Canvas and reports the pointer over it."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from sketchkit.canvas import Canvas
from sketchkit.sketch import Pointer


class Simulator:
    """Opens a window that displays the Canvas contents, upscaled by `scale`."""

    def __init__(self, canvas: Canvas, scale: int = 1, title: str = "Sketch"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        # Surface at canvas resolution, then upscale
        self.surface = pygame.Surface((canvas.width, canvas.height), 0, 24)

    def pointer(self) -> Pointer:
        """Current mouse position in canvas coordinates."""
        mx, my = pygame.mouse.get_pos()
        return Pointer(mx / self.scale, my / self.scale)

    def update(self) -> bool:
        """Blit canvas to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # surfarray is indexed [x, y], the canvas [y, x]
        pygame.surfarray.blit_array(self.surface, self.canvas.pixels.swapaxes(0, 1))

        if self.scale == 1:
            self.screen.blit(self.surface, (0, 0))
        else:
            pygame.transform.scale(self.surface, (self.width, self.height), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
