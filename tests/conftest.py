"""
Shared fixtures for the Pong tests
"""

import os
from pathlib import Path

# Headless SDL drivers, set before pygame opens anything
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from classic_pong.core.entities import Entity, Vector2D  # noqa: E402
from classic_pong.core.game_state import GameState  # noqa: E402

RESOURCES_DIR = str(Path(__file__).resolve().parent.parent / "resources")

PADDLE_SIZE = (16, 96)
BALL_SIZE = (16, 16)


def _make_state(
    ball_position: tuple[float, float] = (312.0, 224.0),
    ball_velocity: tuple[float, float] = (-5.0, 0.0),
    player1_y: float = 192.0,
    player2_y: float = 192.0,
) -> GameState:
    """Builds a 640x480 game with 16x96 paddles and a 16x16 ball"""
    player1 = Entity(pygame.Surface(PADDLE_SIZE), Vector2D(16.0, player1_y))
    player2 = Entity(pygame.Surface(PADDLE_SIZE), Vector2D(608.0, player2_y))
    ball = Entity.with_velocity(
        pygame.Surface(BALL_SIZE), Vector2D(*ball_position), Vector2D(*ball_velocity)
    )
    return GameState(player1, player2, ball)


@pytest.fixture
def make_state():
    """Factory for games with chosen positions and velocities"""
    return _make_state


@pytest.fixture
def game_state() -> GameState:
    """Game laid out as at the start of a round"""
    return _make_state()


@pytest.fixture
def resources_dir() -> str:
    return RESOURCES_DIR
