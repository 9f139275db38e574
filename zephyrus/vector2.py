"""Two dimensional vector."""

import math
from dataclasses import dataclass

_SCALAR = (int, float)


@dataclass(eq=False)
class Vector2:
    """Mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, _SCALAR):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALAR):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, _SCALAR):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, _SCALAR):
            return Vector2(other / self.x, other / self.y)
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other):
        if not isinstance(other, _SCALAR):
            return NotImplemented
        self.x *= other
        self.y *= other
        return self

    def __itruediv__(self, other):
        if not isinstance(other, _SCALAR):
            return NotImplemented
        self.x /= other
        self.y /= other
        return self

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __str__(self):
        return f"( {self.x:f} , {self.y:f} )"

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self):
        """Scale this vector to unit length in place."""
        self /= self.length()

    def normalized(self):
        """Return a unit-length copy."""
        return self / self.length()

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def clamp(self, low, high):
        """Clamp each component into ``[low, high]`` in place."""
        self.x = min(max(self.x, low.x), high.x)
        self.y = min(max(self.y, low.y), high.y)

    def clamped(self, low, high):
        """Return a clamped copy."""
        result = Vector2(self.x, self.y)
        result.clamp(low, high)
        return result

    def distance(self, other):
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def equals(self, other, acceptance):
        """True when this vector falls outside the acceptance band of ``other``.

        The upper bound on x is measured against ``other.y``.
        """
        return (
            self.x < other.x - acceptance
            or self.x > other.y + acceptance
            or self.y < other.y - acceptance
            or self.y > other.y + acceptance
        )


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)