"""
Keyboard state consumed by the game update
"""

from collections.abc import Iterable
from typing import Protocol


class KeyboardState(Protocol):
    """Anything that can tell whether a key is currently held"""

    def is_key_down(self, key: int) -> bool: ...


class PressedKeys:
    """Immutable snapshot of held keys"""

    def __init__(self, keys: Iterable[int] = ()):
        self._keys = frozenset(keys)

    def is_key_down(self, key: int) -> bool:
        return key in self._keys

    def __repr__(self) -> str:
        return f"PressedKeys({sorted(self._keys)})"
