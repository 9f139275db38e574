"""Records exchanged between the collision detection and resolution stages.

Actors are duck-typed: an actor may carry a ``rigid_body`` attribute (None
when it has none), and a rigid body exposes ``velocity`` as a Vector3.
"""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from zephyrus.vector3 import Vector3


@dataclass
class HitResult:
    """Outcome of a trace or a trigger notification."""

    has_hit: bool = False
    hit_point: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    hit_actor: object = None
    hit_collider: object = None
    distance: float = 0.0

    def reset(self):
        """Return every field to its default."""
        self.has_hit = False
        self.hit_point = Vector3()
        self.normal = Vector3()
        self.hit_actor = None
        self.hit_collider = None
        self.distance = 0.0


@dataclass
class ContactManifold:
    """Contact data produced by a narrow-phase collision test."""

    normal: Vector3 = field(default_factory=Vector3)
    penetration_depth: float = 0.0
    contact_points: list = field(default_factory=list)


class CollisionType(enum.Enum):
    ENTER = "enter"
    STAY = "stay"
    EXIT = "exit"


def _copy(vec):
    return Vector3(vec.x, vec.y, vec.z)


class CollisionInfo:
    """One collision event between two colliders of two actors."""

    def __init__(self, actors, colliders, kind, normal, depth, positions):
        self.actors = tuple(actors)
        self.colliders = tuple(colliders)
        first_body = getattr(self.actors[0], "rigid_body", None)
        second_body = getattr(self.actors[1], "rigid_body", None)
        if first_body is not None and second_body is not None:
            self.velocities = (_copy(first_body.velocity), _copy(second_body.velocity))
        else:
            self.velocities = (Vector3(), Vector3())
        self.positions = tuple(positions)
        self.kind = CollisionType(kind)
        self.normal = normal
        self.depth = depth

    def __repr__(self):
        return (
            f"CollisionInfo(kind={self.kind.name}, normal={self.normal!r}, "
            f"depth={self.depth!r})"
        )


class CollisionListener(ABC):
    """Receives trigger notifications from a query collider."""

    @abstractmethod
    def on_trigger_enter(self, collider, hit):
        """Called when another collider starts overlapping ``collider``."""

    @abstractmethod
    def on_trigger_stay(self, collider, hit):
        """Called while another collider keeps overlapping ``collider``."""

    @abstractmethod
    def on_trigger_exit(self, collider, hit):
        """Called when another collider stops overlapping ``collider``."""


def unordered_pair_key(first, second):
    """Hashable key under which ``(a, b)`` and ``(b, a)`` are the same."""
    return frozenset((first, second))