"""Row-major 4x4 matrix stored as four rows of four floats."""

import math

from zephyrus.matrix4 import Matrix4
from zephyrus.scalar import cot
from zephyrus.vector3 import Vector3

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class Matrix4Row:
    """A 4x4 matrix in row-major order.

    ``m[i, j]`` is the element in row ``i``, column ``j``; ``m[i]`` is row ``i``
    as a tuple. Equality allows an absolute difference of ``EPSILON`` per
    element.
    """

    __slots__ = ("_rows",)

    EPSILON = 1e-6

    def __init__(self, rows=None):
        if rows is None:
            rows = _IDENTITY_ROWS
        rows = [[float(v) for v in row] for row in rows]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Matrix4Row needs four rows of four values")
        self._rows = rows

    @classmethod
    def identity(cls):
        return cls(_IDENTITY_ROWS)

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            self._check(i, j)
            return self._rows[i][j]
        self._check(index, 0)
        return tuple(self._rows[index])

    def __setitem__(self, index, value):
        if isinstance(index, tuple):
            i, j = index
            self._check(i, j)
            self._rows[i][j] = float(value)
            return
        self._check(index, 0)
        row = [float(v) for v in value]
        if len(row) != 4:
            raise ValueError("a row needs four values")
        self._rows[index] = row

    @staticmethod
    def _check(i, j):
        if not (0 <= i < 4 and 0 <= j < 4):
            raise IndexError(f"Matrix4Row index out of range: {(i, j)}")

    def __iter__(self):
        return (tuple(row) for row in self._rows)

    def __eq__(self, other):
        if not isinstance(other, Matrix4Row):
            return NotImplemented
        return all(
            math.fabs(a - b) <= self.EPSILON
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None

    def __repr__(self):
        return f"Matrix4Row({self._rows!r})"

    def __mul__(self, other):
        if not isinstance(other, Matrix4Row):
            return NotImplemented
        a = self._rows
        b = other._rows
        return Matrix4Row(
            [sum(a[i][k] * b[k][j] for k in range(4)) for j in range(4)]
            for i in range(4)
        )

    def invert(self):
        """Invert this matrix in place; raise ValueError if it is singular."""
        flat = Matrix4([v for row in self._rows for v in row]).inverted()
        values = list(flat)
        self._rows = [values[i * 4:i * 4 + 4] for i in range(4)]

    def inverted(self):
        """Return an inverted copy."""
        result = Matrix4Row(self._rows)
        result.invert()
        return result

    def translation(self):
        row = self._rows[3]
        return Vector3(row[0], row[1], row[2])

    def transform_vector(self, vec):
        """Apply the upper 3x3 block to ``vec`` as a column vector."""
        m = self._rows
        return Vector3(
            m[0][0] * vec.x + m[0][1] * vec.y + m[0][2] * vec.z,
            m[1][0] * vec.x + m[1][1] * vec.y + m[1][2] * vec.z,
            m[2][0] * vec.x + m[2][1] * vec.y + m[2][2] * vec.z,
        )

    def transform_point(self, point):
        """Apply the 3x3 block plus the fourth column to ``point``."""
        m = self._rows
        return Vector3(
            m[0][0] * point.x + m[0][1] * point.y + m[0][2] * point.z + m[0][3],
            m[1][0] * point.x + m[1][1] * point.y + m[1][2] * point.z + m[1][3],
            m[2][0] * point.x + m[2][1] * point.y + m[2][2] * point.z + m[2][3],
        )

    def x_axis(self):
        return Vector3(*self._rows[0][:3]).normalized()

    def y_axis(self):
        return Vector3(*self._rows[1][:3]).normalized()

    def z_axis(self):
        return Vector3(*self._rows[2][:3]).normalized()

    def scale(self):
        return Vector3(
            Vector3(*self._rows[0][:3]).length(),
            Vector3(*self._rows[1][:3]).length(),
            Vector3(*self._rows[2][:3]).length(),
        )

    @classmethod
    def delete_translation(cls, matrix):
        """Copy of ``matrix`` with the last row reset to ``(0, 0, 0, 1)``."""
        rows = list(matrix)
        return cls((rows[0], rows[1], rows[2], (0.0, 0.0, 0.0, 1.0)))

    @classmethod
    def create_scale(cls, x, y=None, z=None):
        """Scale matrix from a Vector3, one uniform factor, or three factors."""
        if isinstance(x, Vector3):
            x, y, z = x.x, x.y, x.z
        elif y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("create_scale takes one factor, a Vector3, or three factors")
        return cls((
            (x, 0.0, 0.0, 0.0),
            (0.0, y, 0.0, 0.0),
            (0.0, 0.0, z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def create_rotation_x(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, -s, 0.0),
            (0.0, s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def create_rotation_y(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            (c, 0.0, s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def create_rotation_z(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            (c, -s, 0.0, 0.0),
            (s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def create_translation(cls, trans):
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (trans.x, trans.y, trans.z, 1.0),
        ))

    @classmethod
    def create_simple_view_proj(cls, width, height):
        return cls((
            (2.0 / width, 0.0, 0.0, 0.0),
            (0.0, 2.0 / height, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 1.0, 1.0),
        ))

    @classmethod
    def create_from_quaternion(cls, q):
        """Rotation matrix from any object with x, y, z and w attributes."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls((
            (
                1.0 - 2.0 * y * y - 2.0 * z * z,
                2.0 * x * y + 2.0 * w * z,
                2.0 * x * z - 2.0 * w * y,
                0.0,
            ),
            (
                2.0 * x * y - 2.0 * w * z,
                1.0 - 2.0 * x * x - 2.0 * z * z,
                2.0 * y * z + 2.0 * w * x,
                0.0,
            ),
            (
                2.0 * x * z + 2.0 * w * y,
                2.0 * y * z - 2.0 * w * x,
                1.0 - 2.0 * x * x - 2.0 * y * y,
                0.0,
            ),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def create_look_at(cls, eye, target, up):
        zaxis = (target - eye).normalized()
        xaxis = Vector3.cross(up, zaxis).normalized()
        yaxis = Vector3.cross(zaxis, xaxis).normalized()
        trans = Vector3(
            -Vector3.dot(xaxis, eye),
            -Vector3.dot(yaxis, eye),
            -Vector3.dot(zaxis, eye),
        )
        return cls((
            (xaxis.x, yaxis.x, zaxis.x, 0.0),
            (xaxis.y, yaxis.y, zaxis.y, 0.0),
            (xaxis.z, yaxis.z, zaxis.z, 0.0),
            (trans.x, trans.y, trans.z, 1.0),
        ))

    @classmethod
    def create_ortho(cls, width, height, near, far):
        return cls((
            (1.0 / width, 0.0, 0.0, 0.0),
            (0.0, 1.0 / height, 0.0, 0.0),
            (0.0, 0.0, -2.0 / (far - near), 0.0),
            (0.0, 0.0, (far + near) / (near - far), 1.0),
        ))

    @classmethod
    def create_perspective_fov(cls, fov_y, width, height, near, far):
        y_scale = cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return cls((
            (x_scale, 0.0, 0.0, 0.0),
            (0.0, y_scale, 0.0, 0.0),
            (0.0, 0.0, far / (far - near), 1.0),
            (0.0, 0.0, -near * far / (far - near), 0.0),
        ))

    @classmethod
    def create_perspective(cls, left, right, bottom, top, near, far):
        return cls((
            (2.0 * near / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 * near / (top - bottom), 0.0, 0.0),
            (
                (right + left) / (right - left),
                (top + bottom) / (top - bottom),
                (far + near) / (near - far),
                -1.0,
            ),
            (0.0, 0.0, 2.0 * near * far / (near - far), 0.0),
        ))