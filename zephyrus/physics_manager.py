"""Entry point to the physics step: detection followed by resolution."""

from zephyrus.collision_manager import CollisionManager
from zephyrus.collision_resolver import CollisionResolver


class PhysicsManager:
    """Owns a CollisionManager and a CollisionResolver and runs them in order.

    ``instance()`` gives the shared manager; separate managers may also be
    created directly.
    """

    _instance = None

    def __init__(self):
        self._resolver = CollisionResolver()
        self._manager = CollisionManager(on_collision=self._resolver.add_collision_to_queue)

    @classmethod
    def instance(cls):
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def update(self):
        """Run one physics step."""
        self._resolver.update_rigidbodies()
        self._manager.update_colliders()
        self._manager.check_collisions()
        self._resolver.resolve_collisions()
        self._manager.update_colliders()

    def unload(self):
        self._manager.unload()
        self._resolver.unload()

    def register_collider(self, owner, collider):
        self._manager.register_collider(owner, collider)

    def remove_collider(self, owner, collider):
        self._manager.remove_collider(owner, collider)

    def line_trace(self, start, end, ignore_actor=None):
        """Closest hit along ``start``-``end`` as a HitResult."""
        return self._manager.line_trace(start, end, ignore_actor)

    def register_rigid_body(self, owner, rigidbody):
        self._resolver.register_rigid_body(owner, rigidbody)

    def remove_rigid_body(self, owner, rigidbody):
        self._resolver.remove_rigid_body(owner, rigidbody)

    def add_collision_to_queue(self, info):
        self._resolver.add_collision_to_queue(info)