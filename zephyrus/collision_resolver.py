"""Turns queued collision events into trigger notifications and physics responses.

The objects taking part are duck-typed:

* an actor has a ``rigid_body`` attribute (None when it has none) and a
  settable ``position`` (a Vector3);
* a rigid body has ``mass``, ``bounciness``, ``is_static``, a settable
  ``is_grounded`` and ``velocity`` (a Vector3), plus ``update()`` and
  ``resolve_collision(force)``;
* a collider has ``is_query`` and the methods ``notify_listeners_started``,
  ``notify_listeners_stay`` and ``notify_listeners_ended``, each taking a
  HitResult naming the other actor.
"""

import logging
import math

from zephyrus.collision import CollisionType, HitResult, unordered_pair_key
from zephyrus.vector3 import Vector3

logger = logging.getLogger(__name__)

_STATIC_MASS = 10000
_IMPULSE_BOOST = 1.3
_PENETRATION_SLOP = 1.01
_GROUND_NORMAL_Z = 0.1


def _is_static(body):
    return body is not None and (body.is_static or body.mass > _STATIC_MASS)


def _is_grounded(body):
    return _is_static(body) or (body is not None and body.is_grounded)


def _safe_normalized(vec):
    """Unit copy of ``vec``; a zero vector gives nan components."""
    if vec.length() == 0.0:
        return Vector3(math.nan, math.nan, math.nan)
    return vec.normalized()


def _ieee_div(numer, denom):
    if denom == 0.0:
        if numer == 0.0 or math.isnan(numer):
            return math.nan
        return math.copysign(math.inf, numer) * math.copysign(1.0, denom)
    return numer / denom


class CollisionResolver:
    """Holds rigid bodies and the collision events queued for this step."""

    def __init__(self):
        self._physic_collisions = {}
        self._query_collisions = {}
        self._rigidbodies = {}
        self._collision_positions = {}
        self._reaction_forces = {}

    def unload(self):
        """Drop every queued event, rigid body and pending force."""
        self._query_collisions.clear()
        self._physic_collisions.clear()
        self._rigidbodies.clear()
        self._collision_positions.clear()
        self._reaction_forces.clear()

    def rigidbodies(self):
        """Return a copy of the actor to rigid body mapping."""
        return dict(self._rigidbodies)

    def register_rigid_body(self, owner, rigidbody):
        """Attach ``rigidbody`` to ``owner``; a second one is refused and logged."""
        if owner in self._rigidbodies:
            logger.error("You already have a rigidbody attached to this actor !")
            return
        self._rigidbodies[owner] = rigidbody

    def remove_rigid_body(self, owner, rigidbody):
        self._rigidbodies.pop(owner, None)

    def update_rigidbodies(self):
        for body in list(self._rigidbodies.values()):
            if body is not None:
                body.update()

    def add_collision_to_queue(self, info):
        """Queue ``info``; only the first event per unordered pair is kept."""
        first, second = info.colliders
        if first.is_query or second.is_query:
            key = unordered_pair_key(first, second)
            self._query_collisions.setdefault(key, info)
        else:
            key = unordered_pair_key(*info.actors)
            self._physic_collisions.setdefault(key, info)

    def resolve_collisions(self):
        if self._physic_collisions:
            self.calculate_physic_collisions()
            self._physic_collisions.clear()
        if self._query_collisions:
            self.calculate_query_collisions()
            self._query_collisions.clear()

    def calculate_query_collisions(self):
        """Notify trigger listeners of both colliders of every queued query event."""
        for info in self._query_collisions.values():
            hit_first = HitResult(hit_actor=info.actors[0])
            hit_second = HitResult(hit_actor=info.actors[1])
            first, second = info.colliders
            if info.kind is CollisionType.ENTER:
                first.notify_listeners_started(hit_second)
                second.notify_listeners_started(hit_first)
            elif info.kind is CollisionType.STAY:
                first.notify_listeners_stay(hit_second)
                second.notify_listeners_stay(hit_first)
            else:
                first.notify_listeners_ended(hit_second)
                second.notify_listeners_ended(hit_first)

    def calculate_physic_collisions(self):
        """Compute impulses, grounding and penetration for queued physics events."""
        for info in self._physic_collisions.values():
            actor_a, actor_b = info.actors
            body_a = actor_a.rigid_body
            body_b = actor_b.rigid_body
            if body_a is None and body_b is None:
                continue

            static_a = _is_static(body_a)
            static_b = _is_static(body_b)
            grounded_a = _is_grounded(body_a)
            grounded_b = _is_grounded(body_b)
            normal = _safe_normalized(info.normal)

            if info.kind is CollisionType.ENTER:
                self._set_grounding(body_a, body_b, grounded_a, grounded_b, normal, True)
                self._queue_impulse(info, body_a, body_b, static_a, static_b, normal)
            elif info.kind is CollisionType.STAY:
                self.resolve_penetration(actor_a, actor_b, normal, info.depth)
            else:
                self._set_grounding(body_a, body_b, grounded_a, grounded_b, normal, False)
        self._physic_collisions.clear()
        self.apply_reaction_force()

    @staticmethod
    def _set_grounding(body_a, body_b, grounded_a, grounded_b, normal, value):
        if grounded_a and normal.z > _GROUND_NORMAL_Z and body_b is not None:
            body_b.is_grounded = value
        if grounded_b and normal.z > _GROUND_NORMAL_Z and body_a is not None:
            body_a.is_grounded = value

    def _queue_impulse(self, info, body_a, body_b, static_a, static_b, normal):
        vel_a, vel_b = info.velocities
        velocity_a = vel_a if body_a is not None and not static_a else Vector3()
        velocity_b = vel_b if body_b is not None and not static_b else Vector3()
        v_rel = Vector3.dot(velocity_a - velocity_b, normal)

        e = (body_a.bounciness if body_a is not None else 0.0) * (
            body_b.bounciness if body_b is not None else 0.0
        )
        inv_a = 1.0 / body_a.mass if body_a is not None and body_a.mass > 0.0 else 0.0
        inv_b = 1.0 / body_b.mass if body_b is not None and body_b.mass > 0.0 else 0.0

        j = _ieee_div(-(1.0 + e) * v_rel, inv_a + inv_b) * _IMPULSE_BOOST
        impulse = normal * j

        if body_a is not None and not static_a:
            self._reaction_forces[body_a] = impulse * inv_a
        if body_b is not None and not static_b:
            self._reaction_forces[body_b] = (impulse * -1.0) * inv_b

    def apply_reaction_force(self):
        """Hand every pending reaction force to its rigid body, then forget them."""
        for body, force in self._reaction_forces.items():
            body.resolve_collision(force)
        self._reaction_forces.clear()

    def resolve_penetration(self, actor_a, actor_b, normal, depth):
        """Push two overlapping actors apart along ``normal``."""
        body_a = actor_a.rigid_body
        body_b = actor_b.rigid_body
        static_a = _is_static(body_a)
        static_b = _is_static(body_b)
        if static_a and static_b:
            return

        total_mass = 0.0
        if body_a is not None and not static_a:
            total_mass += body_a.mass
        if body_b is not None and not static_b:
            total_mass += body_b.mass
        if total_mass <= 0.0:
            return

        percent_a = 0.0
        percent_b = 0.0
        if body_a is not None:
            percent_a = 0.0 if static_a else body_a.mass / total_mass
        if body_b is not None:
            percent_b = 0.0 if static_b else body_b.mass / total_mass
        depth *= _PENETRATION_SLOP

        if body_a is not None and not static_a:
            movement = normal * (-depth * (1.0 - percent_a))
            actor_a.position = actor_a.position + movement
        if body_b is not None and not static_b:
            movement = normal * (depth * (1.0 - percent_b))
            actor_b.position = actor_b.position + movement