"""Transforming vectors by matrices and quaternions."""

from zephyrus.scalar import near_zero
from zephyrus.vector3 import Vector3


def _transform4(vec, mat, w):
    x = vec.x * mat[0, 0] + vec.y * mat[1, 0] + vec.z * mat[2, 0] + w * mat[3, 0]
    y = vec.x * mat[0, 1] + vec.y * mat[1, 1] + vec.z * mat[2, 1] + w * mat[3, 1]
    z = vec.x * mat[0, 2] + vec.y * mat[1, 2] + vec.z * mat[2, 2] + w * mat[3, 2]
    tw = vec.x * mat[0, 3] + vec.y * mat[1, 3] + vec.z * mat[2, 3] + w * mat[3, 3]
    return Vector3(x, y, z), tw


def transform(vec, mat, w=1.0):
    """Transform ``vec`` with homogeneous coordinate ``w`` by a Matrix4.

    The resulting w component is dropped.
    """
    result, _ = _transform4(vec, mat, w)
    return result


def transform_with_persp_div(vec, mat, w=1.0):
    """Transform ``vec`` and divide by the resulting w unless it is near zero."""
    result, tw = _transform4(vec, mat, w)
    if not near_zero(abs(tw)):
        result *= 1.0 / tw
    return result


def transform_by_quaternion(v, q):
    """Rotate ``v`` by the unit quaternion ``q``."""
    qv = Vector3(q.x, q.y, q.z)
    return v + 2.0 * Vector3.cross(qv, Vector3.cross(qv, v) + q.w * v)