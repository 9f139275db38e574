"""Four dimensional vector."""

import math
from dataclasses import dataclass

from zephyrus.vector3 import Vector3

_SCALAR = (int, float)
_FIELDS = ("x", "y", "z", "w")


@dataclass
class Vector4:
    """Mutable 4D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vector3(cls, vec, w=1.0):
        """Build from a 3D vector and a w component."""
        return cls(vec.x, vec.y, vec.z, w)

    @property
    def xyz(self):
        return Vector3(self.x, self.y, self.z)

    def set(self, x, y, z, w):
        self.x, self.y, self.z, self.w = x, y, z, w

    def length_sqr(self):
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self):
        return math.sqrt(self.length_sqr())

    def normalize(self):
        """Scale this vector to unit length in place."""
        self /= self.length()

    def normalized(self):
        """Return a unit-length copy."""
        return self / self.length()

    def __getitem__(self, index):
        if not 0 <= index < 4:
            raise IndexError(f"Vector4 index out of range: {index}")
        return getattr(self, _FIELDS[index])

    def __setitem__(self, index, value):
        if not 0 <= index < 4:
            raise IndexError(f"Vector4 index out of range: {index}")
        setattr(self, _FIELDS[index], value)

    def __add__(self, other):
        if isinstance(other, Vector4):
            return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector4):
            return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector4):
            return Vector4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        if isinstance(other, _SCALAR):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALAR):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector4):
            return Vector4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)
        if isinstance(other, _SCALAR):
            return Vector4(self.x / other, self.y / other, self.z / other, self.w / other)
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def __imul__(self, other):
        if not isinstance(other, _SCALAR):
            return NotImplemented
        self.x *= other
        self.y *= other
        self.z *= other
        self.w *= other
        return self

    def __itruediv__(self, other):
        if not isinstance(other, _SCALAR):
            return NotImplemented
        self.x /= other
        self.y /= other
        self.z /= other
        self.w /= other
        return self

    @staticmethod
    def dot(a, b):
        """Dot product of the x, y and z components; w is ignored."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a, b):
        """Cross product of the xyz parts; w of the result is zero."""
        return Vector4(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
            0.0,
        )

    @staticmethod
    def lerp(a, b, f):
        """Interpolate from ``a`` to ``b`` by ``f``."""
        return a + f * (b - a)

    @staticmethod
    def reflect(v, n):
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector4.dot(v, n) * n