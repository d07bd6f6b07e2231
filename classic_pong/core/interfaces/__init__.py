"""
Protocols for the collaborators the game core relies on
"""

from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
