"""Broad collision detection between registered colliders.

Actors are duck-typed and expose ``is_active`` (True while the actor is
alive and active) and ``position`` (a Vector3). Colliders expose:

* ``owner`` - the actor the collider belongs to,
* ``is_active`` - whether the collider takes part in tests,
* ``update()`` - refresh its cached shape,
* ``check_collision_with(other)`` - a ContactManifold, or None on no contact,
* ``collision_positions`` - a pair of Vector3 positions for the last contact,
* ``size`` - half extents as a Vector3,
* ``aabb`` - its current AABB.
"""

import math

from zephyrus.collision import (
    CollisionInfo,
    CollisionType,
    HitResult,
    unordered_pair_key,
)
from zephyrus.vector3 import Vector3


class CollisionManager:
    """Tracks colliders per actor and reports enter, stay and exit events.

    Each event is passed as a CollisionInfo to ``on_collision``; when it is
    None the events are discarded.
    """

    def __init__(self, on_collision=None):
        self._on_collision = on_collision
        self._colliders = {}
        self._current = {}
        self._collision_normal = Vector3()
        self._collision_depth = 0.0

    def _emit(self, info):
        if self._on_collision is not None:
            self._on_collision(info)

    def unload(self):
        """Forget every collider and every ongoing collision."""
        self._colliders.clear()
        self._current.clear()

    def register_collider(self, owner, collider):
        if owner is None or collider is None:
            return
        self._colliders.setdefault(owner, []).append(collider)

    def remove_collider(self, owner, collider):
        colliders = self._colliders.get(owner)
        if colliders is None:
            return
        for position, candidate in enumerate(colliders):
            if candidate is collider:
                del colliders[position]
                break
        if not colliders:
            del self._colliders[owner]

    def update_colliders(self):
        for colliders in self._colliders.values():
            for collider in colliders:
                collider.update()

    def _prune_inactive(self):
        pruned = {}
        for collider, others in self._current.items():
            if not collider.owner.is_active:
                continue
            pruned[collider] = {other for other in others if other.owner.is_active}
        self._current = pruned

    def check_collisions(self):
        """Test every pair of active actors and emit collision events."""
        if not self._colliders:
            return

        new_collisions = {}
        active_actors = [actor for actor in self._colliders if actor.is_active]
        self._prune_inactive()

        for index, actor1 in enumerate(active_actors):
            for actor2 in active_actors[index + 1:]:
                for collider1 in self._colliders[actor1]:
                    for collider2 in self._colliders[actor2]:
                        if not collider1.is_active or not collider2.is_active:
                            continue
                        manifold = collider1.check_collision_with(collider2)
                        if manifold is None:
                            continue
                        is_new = (
                            collider2 not in self._current.get(collider1, ())
                            or collider1 not in self._current.get(collider2, ())
                        )
                        kind = CollisionType.ENTER if is_new else CollisionType.STAY
                        self._emit(CollisionInfo(
                            (collider1.owner, collider2.owner),
                            (collider1, collider2),
                            kind,
                            manifold.normal,
                            manifold.penetration_depth,
                            collider1.collision_positions,
                        ))
                        new_collisions.setdefault(collider1, set()).add(collider2)
                        new_collisions.setdefault(collider2, set()).add(collider1)

        processed = set()
        for collider, others in self._current.items():
            still_touching = new_collisions.get(collider, set())
            for other in others:
                if other in still_touching:
                    continue
                key = unordered_pair_key(collider, other)
                if key in processed:
                    continue
                processed.add(key)
                normal = self._collision_normal
                self._emit(CollisionInfo(
                    (collider.owner, other.owner),
                    (collider, other),
                    CollisionType.EXIT,
                    Vector3(normal.x, normal.y, normal.z),
                    0.0,
                    (Vector3(), Vector3()),
                ))

        self._current = new_collisions

    def calculate_normal(self, collider1, collider2):
        """Store and return ``(normal, depth)`` for two box colliders.

        The normal points from the first owner to the second in the xy plane;
        the depth is the smallest overlap along any axis.
        """
        pos1 = collider1.owner.position
        pos2 = collider2.owner.position
        half1 = collider1.size
        half2 = collider2.size

        min1, max1 = pos1 - half1, pos1 + half1
        min2, max2 = pos2 - half2, pos2 + half2

        offset = pos2 - pos1
        normal = Vector3(offset.x, offset.y, 0.0)

        overlap_x = min(max1.x, max2.x) - max(min1.x, min2.x)
        overlap_y = min(max1.y, max2.y) - max(min1.y, min2.y)
        overlap_z = min(max1.z, max2.z) - max(min1.z, min2.z)

        self._collision_normal = normal
        self._collision_depth = min(overlap_x, overlap_y, overlap_z)
        return Vector3(normal.x, normal.y, normal.z), self._collision_depth

    def line_trace(self, start, end, ignore_actor=None):
        """Trace the segment ``start``-``end`` against every active collider.

        Returns a HitResult for the closest hit; its ``has_hit`` is False
        when nothing was hit.
        """
        result = HitResult()
        closest = math.inf
        direction = end - start

        for owner, colliders in self._colliders.items():
            for collider in colliders:
                if collider is None:
                    continue
                if collider.owner is ignore_actor:
                    continue
                if not collider.is_active:
                    continue
                distance = collider.aabb.ray_intersects(start, end)
                if distance is not None and distance < closest:
                    closest = distance
                    result.has_hit = True
                    result.hit_point = start + direction * distance
                    result.distance = distance
                    result.hit_actor = owner
                    result.hit_collider = collider
        return result