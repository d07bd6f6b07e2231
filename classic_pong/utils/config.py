"""
Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass(frozen=True)
class PlayerControls:
    """Keys moving one paddle"""

    up: int
    down: int


PLAYER1_CONTROLS = PlayerControls(up=pygame.K_w, down=pygame.K_s)
PLAYER2_CONTROLS = PlayerControls(up=pygame.K_UP, down=pygame.K_DOWN)


class GameConfig(BaseModel):
    """Game constants with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Window
    WINDOW_WIDTH: float = Field(default=640.0, gt=0, description="Window width in pixels")
    WINDOW_HEIGHT: float = Field(default=480.0, gt=0, description="Window height in pixels")
    WINDOW_TITLE: str = Field(default="Pong", description="Window caption")
    QUIT_ON_ESCAPE: bool = Field(default=True, description="Close the window on Escape")

    # Movement, in pixels per frame
    PADDLE_SPEED: float = Field(default=8.0, gt=0, description="Paddle speed")
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Ball speed after a reset")
    PADDLE_SPIN: float = Field(default=4.0, ge=0, description="Spin applied on paddle hits")
    BALL_ACC: float = Field(default=0.05, ge=0, description="Speed gained on paddle hits")
    PADDLE_MARGIN: float = Field(default=16.0, ge=0, description="Paddle margin from edge")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[float, float, float] = Field(
        default=(0.392, 0.583, 0.929), description="RGB color, channels in [0, 1]"
    )
    RESOURCES_DIR: str = Field(default="./resources", description="Image directory")

    @field_validator("BACKGROUND_COLOR")
    @classmethod
    def validate_background_color(cls, v: tuple[float, float, float]) -> tuple[float, float, float]:
        """Validate that every channel is a unit float"""
        for channel in v:
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Color channel {channel} must be between 0.0 and 1.0")
        return v

    @model_validator(mode="after")
    def validate_window_dimensions(self) -> "GameConfig":
        """Validate the window leaves room between the paddles"""
        if self.WINDOW_WIDTH <= 2 * self.PADDLE_MARGIN:
            raise ValueError(
                f"WINDOW_WIDTH must be larger than {2 * self.PADDLE_MARGIN} pixels"
            )
        return self


# Global configuration instance
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> None:
    """Helper to set several config values"""
    for name, new_value in kwargs.items():
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = {name: getattr(game_config, name) for name in kwargs}
    try:
        _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
