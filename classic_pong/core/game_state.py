"""
Game state for Pong: two paddles, one ball and the per-frame rules
"""

import math
import os
from collections.abc import Callable
from typing import Any

from classic_pong.core.entities import Entity, Rectangle, Texture, Vector2D
from classic_pong.core.input import KeyboardState
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.utils.config import (
    PLAYER1_CONTROLS,
    PLAYER2_CONTROLS,
    GameConfig,
    PlayerControls,
    game_config,
)
from classic_pong.utils.logger import logger

PLAYER1_TEXTURE = "player1.png"
PLAYER2_TEXTURE = "player2.png"
BALL_TEXTURE = "ball.png"


class GameState:
    """Owns the paddles and the ball, advances them one frame at a time"""

    def __init__(
        self,
        player1: Entity,
        player2: Entity,
        ball: Entity,
        config: GameConfig | None = None,
    ):
        self.player1 = player1
        self.player2 = player2
        self.ball = ball
        self.config = config if config is not None else game_config

    @classmethod
    def load(
        cls,
        load_texture: Callable[[str], Texture],
        resources_dir: str | None = None,
        config: GameConfig | None = None,
    ) -> "GameState":
        """
        Loads the three textures and lays out a fresh round

        Args:
            load_texture: Callable returning a texture for an image path
            resources_dir: Directory holding the images, defaults to RESOURCES_DIR
            config: Constants to use, defaults to the global game_config

        Raises:
            ResourceLoadError: if any image fails to load
        """
        config = config if config is not None else game_config
        resources_dir = resources_dir if resources_dir is not None else config.RESOURCES_DIR

        player1_texture = load_texture(os.path.join(resources_dir, PLAYER1_TEXTURE))
        player2_texture = load_texture(os.path.join(resources_dir, PLAYER2_TEXTURE))
        ball_texture = load_texture(os.path.join(resources_dir, BALL_TEXTURE))
        logger.info(f"Loaded textures from {resources_dir}")

        player1 = Entity(player1_texture, Vector2D.zero())
        player2 = Entity(player2_texture, Vector2D.zero())
        ball = Entity.with_velocity(
            ball_texture, Vector2D.zero(), Vector2D(-config.BALL_SPEED, 0.0)
        )
        state = cls(player1, player2, ball, config)
        state.reset_round(ball.bounds(), player1.bounds(), player2.bounds())
        return state

    def update(self, keyboard: KeyboardState) -> dict[str, list[Any]]:
        """
        Advances the game by exactly one frame

        Args:
            keyboard: Currently held keys

        Returns:
            Dict of events that happened this frame:
            {"paddle_hits": [...], "wall_bounces": [...], "resets": [...]}
        """
        events: dict[str, list[Any]] = {
            "paddle_hits": [],
            "wall_bounces": [],
            "resets": [],
        }

        # Paddle collisions are tested against the bounds from before this frame's moves
        player1_bounds = self.player1.bounds()
        player2_bounds = self.player2.bounds()

        self._move_paddle(self.player1, player1_bounds, PLAYER1_CONTROLS, keyboard)
        self._move_paddle(self.player2, player2_bounds, PLAYER2_CONTROLS, keyboard)

        self.ball.position += self.ball.velocity
        ball_bounds = self.ball.bounds()

        hit_player = None
        if ball_bounds.intersects(player1_bounds):
            hit_player = 1
        elif ball_bounds.intersects(player2_bounds):
            hit_player = 2

        if hit_player is not None:
            # Spin is measured against player1's paddle whichever paddle was hit
            self._apply_paddle_hit(self.player1)
            events["paddle_hits"].append({"player": hit_player})

        if self.ball.position.y <= 0.0:
            self.ball.velocity.y = -self.ball.velocity.y
            events["wall_bounces"].append("top")
        elif self.ball.position.y + self.ball.height >= self.config.WINDOW_HEIGHT:
            self.ball.velocity.y = -self.ball.velocity.y
            events["wall_bounces"].append("bottom")

        exit_side = None
        if self.ball.position.x < 0.0:
            exit_side = "left"
        elif self.ball.position.x > self.config.WINDOW_WIDTH:
            exit_side = "right"

        if exit_side is not None:
            logger.debug(f"Ball left the field on the {exit_side} side, restarting round")
            self.reset_round(ball_bounds, player1_bounds, player2_bounds)
            events["resets"].append({"side": exit_side})

        return events

    def _move_paddle(
        self,
        paddle: Entity,
        bounds: Rectangle,
        controls: PlayerControls,
        keyboard: KeyboardState,
    ) -> None:
        """Moves a paddle vertically, checking the edge before the move"""
        if keyboard.is_key_down(controls.up) and bounds.top > 0.0:
            paddle.position.y -= self.config.PADDLE_SPEED

        if keyboard.is_key_down(controls.down) and bounds.bottom < self.config.WINDOW_HEIGHT:
            paddle.position.y += self.config.PADDLE_SPEED

    def _apply_paddle_hit(self, paddle: Entity) -> None:
        """Speeds the ball up, sends it back and adds spin from the contact point"""
        velocity = self.ball.velocity
        velocity.x = -(velocity.x + self.config.BALL_ACC * math.copysign(1.0, velocity.x))

        # Roughly -0.5 (bottom edge) to 0.5 (top edge) of the paddle
        offset = (paddle.centre().y - self.ball.centre().y) / paddle.height
        velocity.y += self.config.PADDLE_SPIN * -offset

    def reset_round(
        self, ball_bounds: Rectangle, player1_bounds: Rectangle, player2_bounds: Rectangle
    ) -> None:
        """Puts the ball back in the centre moving left and recentres both paddles"""
        width = self.config.WINDOW_WIDTH
        height = self.config.WINDOW_HEIGHT
        margin = self.config.PADDLE_MARGIN

        self.ball.velocity = Vector2D(-self.config.BALL_SPEED, 0.0)
        self.ball.position = Vector2D(
            width / 2.0 - ball_bounds.width / 2.0,
            height / 2.0 - ball_bounds.height / 2.0,
        )

        self.player1.position = Vector2D(margin, (height - player1_bounds.height) / 2.0)
        self.player2.position = Vector2D(
            width - player2_bounds.width - margin,
            (height - player2_bounds.height) / 2.0,
        )

    def draw(self, renderer: RendererProtocol) -> None:
        """Clears the frame and draws both paddles then the ball"""
        renderer.clear(self.config.BACKGROUND_COLOR)

        renderer.draw_texture(self.player1.texture, self.player1.position)
        renderer.draw_texture(self.player2.texture, self.player2.position)
        renderer.draw_texture(self.ball.texture, self.ball.position)
