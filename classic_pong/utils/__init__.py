"""
Pong utility modules: configuration, errors and logging
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import PlayerControls
from classic_pong.utils.config import game_config
from classic_pong.utils.errors import PongError
from classic_pong.utils.errors import ResourceLoadError
from classic_pong.utils.errors import WindowError

__all__ = [
    "game_config",
    "GameConfig",
    "PlayerControls",
    "PongError",
    "ResourceLoadError",
    "WindowError",
]
