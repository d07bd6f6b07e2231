"""
Core module of the Pong game
"""

from classic_pong.core.entities import Entity
from classic_pong.core.entities import Rectangle
from classic_pong.core.entities import Vector2D
from classic_pong.core.game_state import GameState
from classic_pong.core.input import KeyboardState
from classic_pong.core.input import PressedKeys

__all__ = [
    "Entity",
    "GameState",
    "KeyboardState",
    "PressedKeys",
    "Rectangle",
    "Vector2D",
]
