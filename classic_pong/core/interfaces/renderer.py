"""
Renderer protocol - defines interface for rendering backends
"""

from typing import Protocol

from classic_pong.core.entities import Texture
from classic_pong.core.entities import Vector2D


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The game core only clears the frame and blits textures; window creation,
    presentation and event handling stay with the host.
    """

    def load_texture(self, path: str) -> Texture:
        """
        Load an image from disk.

        Args:
            path: Image file path

        Raises:
            ResourceLoadError: if the image cannot be read
        """
        ...

    def clear(self, color: tuple[float, float, float]) -> None:
        """
        Fill the frame with a solid color.

        Args:
            color: RGB color with channels in [0, 1]
        """
        ...

    def draw_texture(self, texture: Texture, position: Vector2D) -> None:
        """
        Draw a texture unscaled with its top-left corner at position.

        Args:
            texture: Texture previously returned by load_texture
            position: Top-left corner in window coordinates
        """
        ...
