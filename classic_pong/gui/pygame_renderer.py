"""
PyGame renderer for the Pong game
"""

import pygame

from classic_pong.core.entities import Vector2D
from classic_pong.utils.config import game_config
from classic_pong.utils.errors import ResourceLoadError, WindowError
from classic_pong.utils.logger import logger


def to_rgb255(color: tuple[float, float, float]) -> tuple[int, int, int]:
    """Converts a unit float RGB color to 0-255 integer channels"""
    r, g, b = (int(round(channel * 255)) for channel in color)
    return (r, g, b)


class PygameRenderer:
    """PyGame-based renderer for Pong"""

    def __init__(
        self, width: int | None = None, height: int | None = None, title: str | None = None
    ):
        """Initialize PyGame and open the window"""
        self.width = width or int(game_config.WINDOW_WIDTH)
        self.height = height or int(game_config.WINDOW_HEIGHT)
        self.title = title or game_config.WINDOW_TITLE

        pygame.init()

        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as e:
            pygame.quit()
            raise WindowError(f"Could not create a {self.width}x{self.height} window: {e}") from e
        pygame.display.set_caption(self.title)

        logger.info(f"Opened '{self.title}' window ({self.width}x{self.height})")

    def load_texture(self, path: str) -> pygame.Surface:
        """Load an image, keeping its alpha channel"""
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError) as e:
            raise ResourceLoadError(path, str(e)) from e
        return surface.convert_alpha()

    def clear(self, color: tuple[float, float, float]) -> None:
        """Clear the screen with a solid color"""
        self.screen.fill(to_rgb255(color))

    def draw_texture(self, texture: pygame.Surface, position: Vector2D) -> None:
        """Blit a texture with its top-left corner at position"""
        self.screen.blit(texture, (int(position.x), int(position.y)))

    def present(self) -> None:
        """Show the frame drawn since the last call"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
