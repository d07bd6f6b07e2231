"""
Main game application with PyGame window
"""

import pygame

from classic_pong.core.game_state import GameState
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import game_config
from classic_pong.utils.errors import PongError
from classic_pong.utils.logger import logger


class PygameKeyboard:
    """Keyboard state read from pygame once per frame"""

    def __init__(self) -> None:
        self._pressed = pygame.key.get_pressed()

    def is_key_down(self, key: int) -> bool:
        return bool(self._pressed[key])


class PongApp:
    """Owns the window and drives update and draw once per frame"""

    def __init__(self, resources_dir: str | None = None) -> None:
        """
        Open the window and load the game

        Raises:
            WindowError: if the window cannot be created
            ResourceLoadError: if an image fails to load
        """
        self.renderer = PygameRenderer()
        try:
            self.game_state = GameState.load(self.renderer.load_texture, resources_dir)
        except PongError:
            self.renderer.cleanup()
            raise
        self.clock = pygame.time.Clock()
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Stop running on window close, or on Escape when enabled"""
        if event.type == pygame.QUIT:
            self.running = False
        elif (
            event.type == pygame.KEYDOWN
            and event.key == pygame.K_ESCAPE
            and game_config.QUIT_ON_ESCAPE
        ):
            self.running = False

    def tick(self) -> None:
        """Run one frame: events, update, draw, present"""
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.running:
            return

        self.game_state.update(PygameKeyboard())
        self.game_state.draw(self.renderer)
        self.renderer.present()

    def run(self) -> None:
        """Main loop, returns when the window is closed"""
        try:
            while self.running:
                self.tick()
                self.clock.tick(game_config.FPS)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        logger.info("Pong closed properly.")


def main() -> int:
    """Main entry point, returns the process exit status"""
    try:
        app = PongApp()
    except PongError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
