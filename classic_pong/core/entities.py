"""
Pong game entities: vectors, rectangles and textured entities
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle, origin at the top-left corner"""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rectangle") -> bool:
        """Returns True if the rectangles overlap (touching edges do not count)"""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )


class Texture(Protocol):
    """Drawable image with a fixed pixel size (a pygame Surface satisfies this)"""

    def get_width(self) -> int: ...

    def get_height(self) -> int: ...


class Entity:
    """A textured rectangle that moves by its velocity"""

    def __init__(self, texture: Texture, position: Vector2D, velocity: Vector2D | None = None):
        self.texture = texture
        self.position = position
        self.velocity = velocity if velocity is not None else Vector2D.zero()

    @classmethod
    def with_velocity(cls, texture: Texture, position: Vector2D, velocity: Vector2D) -> "Entity":
        """Creates an entity that starts moving straight away"""
        return cls(texture, position, velocity)

    @property
    def width(self) -> float:
        return float(self.texture.get_width())

    @property
    def height(self) -> float:
        return float(self.texture.get_height())

    def bounds(self) -> Rectangle:
        """Returns the current bounding rectangle"""
        return Rectangle(self.position.x, self.position.y, self.width, self.height)

    def centre(self) -> Vector2D:
        """Returns the midpoint of the bounding rectangle"""
        return Vector2D(
            self.position.x + self.width / 2.0,
            self.position.y + self.height / 2.0,
        )

    def __repr__(self) -> str:
        return (
            f"Entity(position={self.position.to_tuple()}, velocity={self.velocity.to_tuple()}, "
            f"size=({self.width:g}, {self.height:g}))"
        )
