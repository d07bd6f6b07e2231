"""
Error types raised while starting the game
"""


class PongError(Exception):
    """Base error for everything that can abort startup"""


class WindowError(PongError):
    """The window or rendering context could not be created"""


class ResourceLoadError(PongError):
    """An image resource could not be loaded"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Failed to load resource '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
