"""Axis-aligned 2D rectangle and mesh vertex records."""

from dataclasses import dataclass, field

from zephyrus.vector2 import Vector2
from zephyrus.vector3 import Vector3


@dataclass(eq=False)
class Rectangle:
    """Rectangle given by its top-left position and its dimensions."""

    position: Vector2 = field(default_factory=Vector2)
    dimensions: Vector2 = field(default_factory=Vector2)

    def to_int_rect(self):
        """Return ``(x, y, width, height)`` truncated to integers."""
        return (
            int(self.position.x),
            int(self.position.y),
            int(self.dimensions.x),
            int(self.dimensions.y),
        )

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.position == other.position and self.dimensions == other.dimensions


Rectangle.NULL = Rectangle(Vector2(0.0, 0.0), Vector2(0.0, 0.0))


@dataclass
class Vertex:
    """A mesh vertex: position, normal and texture coordinate."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    tex_coord: Vector2 = field(default_factory=Vector2)