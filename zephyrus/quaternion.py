"""Rotation quaternion."""

import math
from dataclasses import dataclass

from zephyrus.matrix4 import Matrix4
from zephyrus.matrix4_row import Matrix4Row


def _rotation_terms(q):
    x, y, z, w = q.x, q.y, q.z, q.w
    return (
        x * x, y * y, z * z,
        x * y, x * z, x * w,
        y * z, y * w, z * w,
    )


@dataclass
class Quaternion:
    """Quaternion with vector part ``(x, y, z)`` and scalar part ``w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis, angle):
        """Rotation of ``angle`` radians about the (normalized) ``axis``."""
        scalar = math.sin(angle / 2.0)
        return cls(axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0))

    def set(self, x, y, z, w):
        self.x, self.y, self.z, self.w = x, y, z, w

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def conjugate(self):
        """Negate the vector part in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def conjugated(self):
        """Return the conjugate as a new quaternion."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def normalize(self):
        """Scale to unit length in place."""
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length
        self.w /= length

    def as_matrix(self):
        """Rotation as a column-major Matrix4."""
        xx, yy, zz, xy, xz, xw, yz, yw, zw = _rotation_terms(self)
        return Matrix4((
            1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw), 0.0,
            2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw), 0.0,
            2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy), 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def as_matrix_row(self):
        """Rotation as a row-major Matrix4Row."""
        xx, yy, zz, xy, xz, xw, yz, yw, zw = _rotation_terms(self)
        return Matrix4Row((
            (1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw), 0.0),
            (2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw), 0.0),
            (2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy), 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)