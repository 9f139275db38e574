"""Axis-aligned bounding box."""

import math
from dataclasses import dataclass, field

from zephyrus.vector3 import Vector3


def _reciprocal(value):
    """1 / value, giving a signed infinity for a zero divisor."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass
class AABB:
    """Box spanning ``min`` to ``max`` on every axis."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)

    def contains(self, point):
        """True when ``point`` lies inside the box or on its surface."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )

    def intersects(self, other):
        """True when the two boxes overlap or touch."""
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
            and self.min.z <= other.max.z
            and self.max.z >= other.min.z
        )

    def ray_intersects(self, origin, end):
        """Intersect the segment from ``origin`` to ``end`` with the box.

        Returns the entry parameter along the segment (0 at ``origin``,
        1 at ``end``; negative when ``origin`` is inside the box), or None
        when the segment misses.
        """
        direction = end - origin
        inv_dir = Vector3(
            _reciprocal(direction.x),
            _reciprocal(direction.y),
            _reciprocal(direction.z),
        )
        t_min_vec = (self.min - origin) * inv_dir
        t_max_vec = (self.max - origin) * inv_dir

        t_enter = Vector3.min(t_min_vec, t_max_vec)
        t_exit = Vector3.max(t_min_vec, t_max_vec)

        t_min = max(t_enter.x, t_enter.y, t_enter.z)
        t_max = min(t_exit.x, t_exit.y, t_exit.z)

        if t_max < 0.0 or t_min > t_max or t_min > 1.0:
            return None
        return t_min