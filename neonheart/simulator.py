"""Pygame window that shows the Canvas, upscaled, and follows window resizes."""

import pygame

from neonheart.canvas import Canvas


class Simulator:
    """Opens a resizable window that displays the Canvas contents."""

    def __init__(self, canvas: Canvas, scale: int = 4, title: str = "Neon Heart"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def _resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        # Render resolution follows the window, divided by the pixel scale
        self.canvas.resize(max(1, width // self.scale), max(1, height // self.scale))
        print(f"[sim] Resized to {width}x{height} "
              f"(render {self.canvas.width}x{self.canvas.height})")

    def update(self) -> bool:
        """Blit canvas to screen. Returns False if window was closed.

        A resize clears the canvas, so that frame is not shown; the next
        render fills the new size first.
        """
        resized = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
                resized = True

        if resized:
            return True

        surface = pygame.image.frombuffer(
            self.canvas.get_buffer(), (self.canvas.width, self.canvas.height), "RGB"
        )
        pygame.transform.scale(surface, self.screen.get_size(), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 30) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
