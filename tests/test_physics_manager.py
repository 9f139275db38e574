import pytest

from zephyrus.aabb import AABB
from zephyrus.collision import CollisionInfo, CollisionType, ContactManifold
from zephyrus.physics_manager import PhysicsManager
from zephyrus.vector3 import Vector3


class Body:
    def __init__(self, mass=1.0, velocity=None):
        self.mass = mass
        self.velocity = velocity if velocity is not None else Vector3()
        self.bounciness = 0.0
        self.is_static = False
        self.is_grounded = False
        self.updates = 0
        self.forces = []

    def update(self):
        self.updates += 1

    def resolve_collision(self, force):
        self.forces.append(force)


class Actor:
    def __init__(self, body=None, position=None):
        self.rigid_body = body
        self.position = position if position is not None else Vector3()
        self.is_active = True


class Collider:
    def __init__(self, owner, is_query=False):
        self.owner = owner
        self.is_query = is_query
        self.is_active = True
        self.touching = True
        self.updates = 0
        self.events = []
        self.size = Vector3(1.0, 1.0, 1.0)
        self.collision_positions = (Vector3(), Vector3())

    def update(self):
        self.updates += 1

    def check_collision_with(self, other):
        if self.touching and other.touching:
            return ContactManifold(normal=Vector3(1.0, 0.0, 0.0), penetration_depth=0.1)
        return None

    @property
    def aabb(self):
        return AABB(self.owner.position - self.size, self.owner.position + self.size)

    def notify_listeners_started(self, hit):
        self.events.append(("enter", hit.hit_actor))

    def notify_listeners_stay(self, hit):
        self.events.append(("stay", hit.hit_actor))

    def notify_listeners_ended(self, hit):
        self.events.append(("exit", hit.hit_actor))


@pytest.fixture
def physics():
    return PhysicsManager()


def add_actor(physics, body=None, position=None, is_query=False):
    actor = Actor(body, position)
    collider = Collider(actor, is_query=is_query)
    physics.register_collider(actor, collider)
    if body is not None:
        physics.register_rigid_body(actor, body)
    return actor, collider


def test_instance_is_shared():
    shared = PhysicsManager.instance()
    actor, collider = add_actor(shared)
    try:
        hit = PhysicsManager.instance().line_trace(
            Vector3(-5.0, 0.0, 0.0), Vector3(5.0, 0.0, 0.0)
        )
    finally:
        shared.unload()
    assert hit.has_hit is True
    assert hit.hit_actor is actor
    assert hit.hit_collider is collider


def test_update_runs_bodies_once_and_colliders_twice(physics):
    body = Body()
    _, collider = add_actor(physics, body)
    physics.update()
    assert body.updates == 1
    assert collider.updates == 2


def test_query_pipeline_enter_stay_exit(physics):
    actor_a, col_a = add_actor(physics, is_query=True)
    actor_b, col_b = add_actor(physics, position=Vector3(1.0, 0.0, 0.0))
    physics.update()
    physics.update()
    col_a.touching = False
    physics.update()
    assert col_a.events == [("enter", actor_b), ("stay", actor_b), ("exit", actor_b)]
    assert col_b.events == [("enter", actor_a), ("stay", actor_a), ("exit", actor_a)]


def test_physic_enter_applies_balanced_forces(physics):
    body_a = Body(mass=1.0, velocity=Vector3(1.0, 0.0, 0.0))
    body_b = Body(mass=3.0, velocity=Vector3(-1.0, 0.0, 0.0))
    add_actor(physics, body_a)
    add_actor(physics, body_b, Vector3(1.0, 0.0, 0.0))
    physics.update()
    assert len(body_a.forces) == 1 and len(body_b.forces) == 1
    total = body_a.forces[0] * body_a.mass + body_b.forces[0] * body_b.mass
    assert total.x == pytest.approx(0.0)
    assert abs(body_a.forces[0].x) > 0.0


def test_removed_collider_produces_no_events(physics):
    actor_a, col_a = add_actor(physics, is_query=True)
    add_actor(physics)
    physics.remove_collider(actor_a, col_a)
    physics.update()
    assert col_a.events == []
    assert col_a.updates == 0


def test_removed_rigid_body_is_not_updated(physics):
    body = Body()
    actor, _ = add_actor(physics, body)
    physics.remove_rigid_body(actor, body)
    physics.update()
    assert body.updates == 0


def test_line_trace_hits_and_ignores(physics):
    actor, collider = add_actor(physics)
    start = Vector3(-5.0, 0.0, 0.0)
    end = Vector3(5.0, 0.0, 0.0)
    hit = physics.line_trace(start, end)
    assert hit.has_hit is True
    assert hit.hit_actor is actor
    assert hit.hit_collider is collider
    assert collider.aabb.contains(hit.hit_point)
    missed = physics.line_trace(start, end, actor)
    assert missed.has_hit is False


def test_queued_collision_is_resolved_on_update(physics):
    actor_a, actor_b = Actor(), Actor()
    col_a = Collider(actor_a, is_query=True)
    col_b = Collider(actor_b)
    physics.add_collision_to_queue(CollisionInfo(
        (actor_a, actor_b), (col_a, col_b), CollisionType.ENTER,
        Vector3(), 0.0, (Vector3(), Vector3()),
    ))
    physics.update()
    assert col_a.events == [("enter", actor_b)]
    assert col_b.events == [("enter", actor_a)]


def test_unload_forgets_everything(physics):
    body = Body()
    _, col_a = add_actor(physics, body, is_query=True)
    add_actor(physics)
    physics.unload()
    physics.update()
    assert body.updates == 0
    assert col_a.events == []
    assert physics.line_trace(Vector3(-5.0, 0.0, 0.0), Vector3(5.0, 0.0, 0.0)).has_hit is False