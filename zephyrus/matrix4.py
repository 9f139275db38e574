"""Column-major 4x4 matrix stored as a flat sequence of 16 floats."""

import math

from zephyrus.scalar import cot
from zephyrus.vector3 import Vector3

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _ieee_div(numer, denom):
    """Float division that yields inf or nan on a zero divisor."""
    if denom == 0.0:
        if numer == 0.0 or math.isnan(numer):
            return math.nan
        return math.copysign(math.inf, numer) * math.copysign(1.0, denom)
    return numer / denom


class Matrix4:
    """A 4x4 matrix in column-major order.

    Element ``(i, j)`` lives at flat index ``i * 4 + j``; the translation
    occupies indices 12, 13 and 14.
    """

    __slots__ = ("_values",)

    def __init__(self, values=None):
        if values is None:
            self._values = list(_IDENTITY)
            return
        values = [float(v) for v in values]
        if len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        self._values = values

    @classmethod
    def identity(cls):
        return cls(_IDENTITY)

    @staticmethod
    def _flat_index(index):
        if isinstance(index, tuple):
            i, j = index
            if not (0 <= i < 4 and 0 <= j < 4):
                raise IndexError(f"Matrix4 index out of range: {index}")
            return i * 4 + j
        if not 0 <= index < 16:
            raise IndexError(f"Matrix4 index out of range: {index}")
        return index

    def __getitem__(self, index):
        return self._values[self._flat_index(index)]

    def __setitem__(self, index, value):
        self._values[self._flat_index(index)] = float(value)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._values == other._values

    __hash__ = None

    def __repr__(self):
        return f"Matrix4({self._values!r})"

    def __add__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a - b for a, b in zip(self._values, other._values))

    def __mul__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        a = self._values
        b = other._values
        return Matrix4(
            sum(a[k * 4 + j] * b[i * 4 + k] for k in range(4))
            for i in range(4)
            for j in range(4)
        )

    def invert(self):
        """Invert this matrix in place using cofactor expansion."""
        m = self._values
        # Transpose into src.
        src = [m[(n % 4) * 4 + n // 4] for n in range(16)]
        dst = [0.0] * 16

        tmp = [
            src[10] * src[15], src[11] * src[14], src[9] * src[15],
            src[11] * src[13], src[9] * src[14], src[10] * src[13],
            src[8] * src[15], src[11] * src[12], src[8] * src[14],
            src[10] * src[12], src[8] * src[13], src[9] * src[12],
        ]
        dst[0] = (tmp[0] * src[5] + tmp[3] * src[6] + tmp[4] * src[7]) - (
            tmp[1] * src[5] + tmp[2] * src[6] + tmp[5] * src[7])
        dst[1] = (tmp[1] * src[4] + tmp[6] * src[6] + tmp[9] * src[7]) - (
            tmp[0] * src[4] + tmp[7] * src[6] + tmp[8] * src[7])
        dst[2] = (tmp[2] * src[4] + tmp[7] * src[5] + tmp[10] * src[7]) - (
            tmp[3] * src[4] + tmp[6] * src[5] + tmp[11] * src[7])
        dst[3] = (tmp[5] * src[4] + tmp[8] * src[5] + tmp[11] * src[6]) - (
            tmp[4] * src[4] + tmp[9] * src[5] + tmp[10] * src[6])
        dst[4] = (tmp[1] * src[1] + tmp[2] * src[2] + tmp[5] * src[3]) - (
            tmp[0] * src[1] + tmp[3] * src[2] + tmp[4] * src[3])
        dst[5] = (tmp[0] * src[0] + tmp[7] * src[2] + tmp[8] * src[3]) - (
            tmp[1] * src[0] + tmp[6] * src[2] + tmp[9] * src[3])
        dst[6] = (tmp[3] * src[0] + tmp[6] * src[1] + tmp[11] * src[3]) - (
            tmp[2] * src[0] + tmp[7] * src[1] + tmp[10] * src[3])
        dst[7] = (tmp[4] * src[0] + tmp[9] * src[1] + tmp[10] * src[2]) - (
            tmp[5] * src[0] + tmp[8] * src[1] + tmp[11] * src[2])

        tmp = [
            src[2] * src[7], src[3] * src[6], src[1] * src[7],
            src[3] * src[5], src[1] * src[6], src[2] * src[5],
            src[0] * src[7], src[3] * src[4], src[0] * src[6],
            src[2] * src[4], src[0] * src[5], src[1] * src[4],
        ]
        dst[8] = (tmp[0] * src[13] + tmp[3] * src[14] + tmp[4] * src[15]) - (
            tmp[1] * src[13] + tmp[2] * src[14] + tmp[5] * src[15])
        dst[9] = (tmp[1] * src[12] + tmp[6] * src[14] + tmp[9] * src[15]) - (
            tmp[0] * src[12] + tmp[7] * src[14] + tmp[8] * src[15])
        dst[10] = (tmp[2] * src[12] + tmp[7] * src[13] + tmp[10] * src[15]) - (
            tmp[3] * src[12] + tmp[6] * src[13] + tmp[11] * src[15])
        dst[11] = (tmp[5] * src[12] + tmp[8] * src[13] + tmp[11] * src[14]) - (
            tmp[4] * src[12] + tmp[9] * src[13] + tmp[10] * src[14])
        dst[12] = (tmp[2] * src[10] + tmp[5] * src[11] + tmp[1] * src[9]) - (
            tmp[4] * src[11] + tmp[0] * src[9] + tmp[3] * src[10])
        dst[13] = (tmp[8] * src[11] + tmp[0] * src[8] + tmp[7] * src[10]) - (
            tmp[6] * src[10] + tmp[9] * src[11] + tmp[1] * src[8])
        dst[14] = (tmp[6] * src[9] + tmp[11] * src[11] + tmp[3] * src[8]) - (
            tmp[10] * src[11] + tmp[2] * src[8] + tmp[7] * src[9])
        dst[15] = (tmp[10] * src[10] + tmp[4] * src[8] + tmp[9] * src[9]) - (
            tmp[8] * src[9] + tmp[11] * src[10] + tmp[5] * src[8])

        det = sum(s * d for s, d in zip(src[:4], dst[:4]))
        if det == 0.0:
            raise ValueError("matrix is singular and cannot be inverted")
        inv_det = 1.0 / det
        self._values = [d * inv_det for d in dst]

    def inverted(self):
        """Return an inverted copy."""
        result = Matrix4(self._values)
        result.invert()
        return result

    def translation(self):
        m = self._values
        return Vector3(m[12], m[13], m[14])

    def x_axis(self):
        m = self._values
        return Vector3(m[0], m[1], m[2]).normalized()

    def y_axis(self):
        m = self._values
        return Vector3(m[4], m[5], m[6]).normalized()

    def z_axis(self):
        m = self._values
        return Vector3(m[8], m[9], m[10]).normalized()

    def scale(self):
        m = self._values
        return Vector3(
            Vector3(m[0], m[1], m[2]).length(),
            Vector3(m[4], m[5], m[6]).length(),
            Vector3(m[8], m[9], m[10]).length(),
        )

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
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_rotation_x(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_rotation_y(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_rotation_z(cls, theta):
        c, s = math.cos(theta), math.sin(theta)
        return cls((
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_translation(cls, trans):
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            trans.x, trans.y, trans.z, 1.0,
        ))

    @classmethod
    def create_simple_view_proj(cls, width, height):
        return cls((
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / height, 0.0, 0.0,
            0.0, 0.0, 1.0, 1.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_from_quaternion(cls, q):
        """Rotation matrix from any object with x, y, z and w attributes."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls((
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y - 2.0 * w * z,
            2.0 * x * z + 2.0 * w * y,
            0.0,
            2.0 * x * y + 2.0 * w * z,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z - 2.0 * w * x,
            0.0,
            2.0 * x * z - 2.0 * w * y,
            2.0 * y * z - 2.0 * w * x,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def create_look_at(cls, eye, target, up):
        zaxis = (eye - target).normalized()
        normalized_up = up.normalized()
        xaxis = Vector3.cross(normalized_up, zaxis).normalized()
        yaxis = Vector3.cross(zaxis, xaxis).normalized()
        rotation = cls((
            xaxis.x, yaxis.x, zaxis.x, 0.0,
            xaxis.y, yaxis.y, zaxis.y, 0.0,
            xaxis.z, yaxis.z, zaxis.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))
        translation = cls.create_translation(Vector3(-eye.x, -eye.y, -eye.z))
        return rotation * translation

    @classmethod
    def create_ortho(cls, width, height, near, far):
        """Orthographic projection.

        The depth offset divides by ``far - far``, so it is always infinite
        (or nan when ``far + near`` is zero).
        """
        return cls((
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / height, 0.0, 0.0,
            0.0, 0.0, 2.0 / (near - far), 0.0,
            0.0, 0.0, _ieee_div(far + near, far - far), 1.0,
        ))

    @classmethod
    def create_perspective_fov(cls, fov_y, width, height, near, far):
        y_scale = cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return cls((
            x_scale, 0.0, 0.0, 0.0,
            0.0, y_scale, 0.0, 0.0,
            0.0, 0.0, near + far / (near - far), -1.0,
            0.0, 0.0, 2.0 * near * far / (near - far), 0.0,
        ))

    @classmethod
    def create_perspective(cls, left, right, bottom, top, near, far):
        return cls((
            2.0 * near / (right - left), 0.0, 0.0, 0.0,
            0.0, 2.0 * near / (top - bottom), 0.0, 0.0,
            (right + left) / (right - left),
            (top + bottom) / (top - bottom),
            (far + near) / (near - far),
            -1.0,
            0.0, 0.0, 2.0 * near * far / (near - far), 0.0,
        ))