import logging

import pytest

from zephyrus.collision import CollisionInfo, CollisionType
from zephyrus.collision_resolver import CollisionResolver
from zephyrus.vector3 import Vector3


class Body:
    def __init__(self, mass=1.0, velocity=None, bounciness=0.0,
                 is_static=False, is_grounded=False):
        self.mass = mass
        self.velocity = velocity if velocity is not None else Vector3()
        self.bounciness = bounciness
        self.is_static = is_static
        self.is_grounded = is_grounded
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


class Collider:
    def __init__(self, owner, is_query=False):
        self.owner = owner
        self.is_query = is_query
        self.events = []

    def notify_listeners_started(self, hit):
        self.events.append(("enter", hit.hit_actor))

    def notify_listeners_stay(self, hit):
        self.events.append(("stay", hit.hit_actor))

    def notify_listeners_ended(self, hit):
        self.events.append(("exit", hit.hit_actor))


def make_info(actor_a, actor_b, kind, normal=None, depth=0.0,
              col_a=None, col_b=None):
    col_a = col_a or Collider(actor_a)
    col_b = col_b or Collider(actor_b)
    return CollisionInfo(
        (actor_a, actor_b), (col_a, col_b), kind,
        normal if normal is not None else Vector3(1.0, 0.0, 0.0),
        depth, (Vector3(), Vector3()),
    )


@pytest.fixture
def resolver():
    return CollisionResolver()


def test_register_twice_keeps_first_and_logs(resolver, caplog):
    actor = Actor()
    first, second = Body(), Body()
    resolver.register_rigid_body(actor, first)
    with caplog.at_level(logging.ERROR):
        resolver.register_rigid_body(actor, second)
    assert resolver.rigidbodies()[actor] is first
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_remove_rigid_body(resolver):
    actor = Actor()
    body = Body()
    resolver.register_rigid_body(actor, body)
    resolver.remove_rigid_body(actor, body)
    assert actor not in resolver.rigidbodies()


def test_rigidbodies_returns_copy(resolver):
    actor = Actor()
    resolver.register_rigid_body(actor, Body())
    copy = resolver.rigidbodies()
    copy.clear()
    assert actor in resolver.rigidbodies()


def test_update_rigidbodies_updates_each_once(resolver):
    bodies = [Body(), Body()]
    actors = [Actor(body) for body in bodies]
    for actor, body in zip(actors, bodies):
        resolver.register_rigid_body(actor, body)
    resolver.update_rigidbodies()
    registered = resolver.rigidbodies()
    assert [registered[actor] for actor in actors] == bodies
    assert [b.updates for b in bodies] == [1, 1]


@pytest.mark.parametrize(
    "kind, name",
    [(CollisionType.ENTER, "enter"), (CollisionType.STAY, "stay"), (CollisionType.EXIT, "exit")],
)
def test_query_collision_notifies_both_sides(resolver, kind, name):
    actor_a, actor_b = Actor(), Actor()
    col_a = Collider(actor_a, is_query=True)
    col_b = Collider(actor_b)
    resolver.add_collision_to_queue(make_info(actor_a, actor_b, kind, col_a=col_a, col_b=col_b))
    resolver.resolve_collisions()
    assert col_a.events == [(name, actor_b)]
    assert col_b.events == [(name, actor_a)]


def test_swapped_query_pair_is_queued_once(resolver):
    actor_a, actor_b = Actor(), Actor()
    col_a = Collider(actor_a, is_query=True)
    col_b = Collider(actor_b, is_query=True)
    resolver.add_collision_to_queue(
        make_info(actor_a, actor_b, CollisionType.ENTER, col_a=col_a, col_b=col_b))
    resolver.add_collision_to_queue(
        make_info(actor_b, actor_a, CollisionType.STAY, col_a=col_b, col_b=col_a))
    resolver.resolve_collisions()
    assert col_a.events == [("enter", actor_b)]
    assert col_b.events == [("enter", actor_a)]


def test_enter_impulse_conserves_momentum(resolver):
    body_a = Body(mass=2.0, velocity=Vector3(1.0, 0.0, 0.0))
    body_b = Body(mass=3.0, velocity=Vector3(-1.0, 0.0, 0.0))
    actor_a, actor_b = Actor(body_a), Actor(body_b)
    resolver.add_collision_to_queue(make_info(actor_a, actor_b, CollisionType.ENTER))
    resolver.resolve_collisions()
    assert len(body_a.forces) == 1 and len(body_b.forces) == 1
    fa, fb = body_a.forces[0], body_b.forces[0]
    assert body_a.mass * fa.x + body_b.mass * fb.x == pytest.approx(0.0)
    # The impulse pushes A back against its approach direction.
    assert fa.x < 0.0 < fb.x


def test_static_body_receives_no_force(resolver):
    body_a = Body(mass=1.0, velocity=Vector3(1.0, 0.0, 0.0))
    wall = Body(mass=10000000.0)
    actor_a, actor_b = Actor(body_a), Actor(wall)
    resolver.add_collision_to_queue(make_info(actor_a, actor_b, CollisionType.ENTER))
    resolver.resolve_collisions()
    assert wall.forces == []
    assert len(body_a.forces) == 1
    assert body_a.forces[0].x < 0.0


def test_grounding_set_on_enter_and_cleared_on_exit(resolver):
    ground = Body(is_static=True)
    body = Body()
    ground_actor, actor = Actor(ground), Actor(body)
    resolver.register_rigid_body(ground_actor, ground)
    resolver.register_rigid_body(actor, body)
    up = Vector3(0.0, 0.0, 1.0)
    resolver.add_collision_to_queue(make_info(ground_actor, actor, CollisionType.ENTER, normal=up))
    resolver.resolve_collisions()
    assert resolver.rigidbodies()[actor].is_grounded is True
    resolver.add_collision_to_queue(make_info(ground_actor, actor, CollisionType.EXIT, normal=up))
    resolver.resolve_collisions()
    assert resolver.rigidbodies()[actor].is_grounded is False
    assert resolver.rigidbodies() == {ground_actor: ground, actor: body}


def test_exit_with_zero_normal_leaves_grounding(resolver):
    ground = Body(is_static=True)
    body = Body(is_grounded=True)
    info = make_info(Actor(ground), Actor(body), CollisionType.EXIT, normal=Vector3())
    resolver.add_collision_to_queue(info)
    resolver.resolve_collisions()
    assert body.is_grounded is True


def test_stay_pushes_equal_masses_apart_symmetrically(resolver):
    actor_a = Actor(Body(mass=1.0), Vector3(0.0, 0.0, 0.0))
    actor_b = Actor(Body(mass=1.0), Vector3(1.0, 0.0, 0.0))
    resolver.add_collision_to_queue(
        make_info(actor_a, actor_b, CollisionType.STAY, depth=0.5))
    resolver.resolve_collisions()
    moved_a = actor_a.position.x - 0.0
    moved_b = actor_b.position.x - 1.0
    assert moved_a < 0.0
    assert moved_a == pytest.approx(-moved_b)
    assert actor_a.position.y == 0.0 and actor_b.position.z == 0.0


def test_penetration_against_static_moves_nothing(resolver):
    actor_a = Actor(Body(mass=1.0), Vector3(0.0, 0.0, 0.0))
    actor_b = Actor(Body(is_static=True), Vector3(1.0, 0.0, 0.0))
    resolver.resolve_penetration(actor_a, actor_b, Vector3(1.0, 0.0, 0.0), 0.5)
    assert actor_a.position == Vector3(0.0, 0.0, 0.0)
    assert actor_b.position == Vector3(1.0, 0.0, 0.0)


def test_actors_without_bodies_are_skipped(resolver):
    actor_a = Actor(None, Vector3(0.0, 0.0, 0.0))
    actor_b = Actor(None, Vector3(1.0, 0.0, 0.0))
    resolver.add_collision_to_queue(
        make_info(actor_a, actor_b, CollisionType.STAY, depth=0.5))
    resolver.resolve_collisions()
    assert actor_a.position == Vector3(0.0, 0.0, 0.0)
    assert actor_b.position == Vector3(1.0, 0.0, 0.0)


def test_first_physic_event_per_pair_wins(resolver):
    body_a = Body(velocity=Vector3(1.0, 0.0, 0.0))
    body_b = Body(velocity=Vector3(-1.0, 0.0, 0.0))
    actor_a = Actor(body_a, Vector3(0.0, 0.0, 0.0))
    actor_b = Actor(body_b, Vector3(1.0, 0.0, 0.0))
    resolver.add_collision_to_queue(make_info(actor_a, actor_b, CollisionType.ENTER))
    resolver.add_collision_to_queue(
        make_info(actor_b, actor_a, CollisionType.STAY, depth=0.5))
    resolver.resolve_collisions()
    assert len(body_a.forces) == 1
    assert actor_a.position == Vector3(0.0, 0.0, 0.0)


def test_unload_clears_everything(resolver):
    body = Body(velocity=Vector3(1.0, 0.0, 0.0))
    actor_a, actor_b = Actor(body), Actor(Body())
    resolver.register_rigid_body(actor_a, body)
    resolver.add_collision_to_queue(make_info(actor_a, actor_b, CollisionType.ENTER))
    resolver.unload()
    resolver.resolve_collisions()
    resolver.update_rigidbodies()
    assert resolver.rigidbodies() == {}
    assert body.forces == []
    assert body.updates == 0