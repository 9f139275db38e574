# zephyrus

A small maths and collision toolkit for game engines. It has no dependencies
outside the Python standard library.

## Modules

- `zephyrus.scalar`
  - Angle conversion: `to_rad` and `to_deg`.
  - Helpers: `near_zero` (default epsilon 0.001), `clamp`, `lerp`, `cot`, `fmod`,
    and `round_to_int`, which truncates towards zero.
  - Random ranges that include both ends: `random_range_float` and
    `random_range_int`. `random_range_int` raises `ValueError` on an empty range.
  - Constants: `PI`, `TWO_PI`, `PI_HALVED`, `INFINITY_POS` and `INFINITY_NEG`.
- `zephyrus.vector2`: `Vector2`, a mutable 2D vector.
  - Operators: `+`, `-`, `*`, `/` and their in-place forms. `*` takes a scalar or
    another vector, multiplying component by component.
  - Methods: `length`, `normalize`/`normalized`, `dot`, `clamp`/`clamped`,
    `distance` and `equals`.
  - `equals` returns True when the vector lies *outside* the acceptance band
    around the other vector. Its upper bound on x is measured against the
    other vector's y.
  - Constants: `Vector2.ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`.
- `zephyrus.vector3`: `Vector3`, a mutable 3D vector.
  - It has the same arithmetic as `Vector2`, plus negation and iteration over
    `x, y, z`.
  - Static methods: `dot`, `cross`, `min`, `max` (both component-wise), `lerp`
    and `reflect`.
  - Instance methods: `set`, `length_sq`, `length`, `normalize`/`normalized`,
    `clamp`/`clamped`, `distance` and `equals`, which behaves as it does in
    `Vector2`.
  - Constants: `ZERO`, `UNIT_X/Y/Z`, `NEG_UNIT_X/Y/Z`, `INFINITY` and
    `NEG_INFINITY`.
- `zephyrus.vector4`: `Vector4`, a 4D vector.
  - Construction: `from_vector3(vec, w=1.0)`. The `xyz` property returns the
    first three components as a `Vector3`.
  - Components can be indexed `v[0]` to `v[3]`.
  - Methods: `set`, `length_sqr`, `length`, `normalize`/`normalized`, and the
    arithmetic operators.
  - Static methods: `dot` and `cross`, which use only x, y and z, plus `lerp`
    and `reflect`.
- `zephyrus.matrix4`: `Matrix4`, a column-major 4×4 matrix of 16 floats.
  - Indexing: `m[n]` gives a flat element and `m[i, j]` gives element `i * 4 + j`.
  - Operators: `+`, `-`, `*` and `==`.
  - Inversion: `invert`/`inverted`, which raise `ValueError` on a singular
    matrix.
  - Accessors: `translation`, `x_axis`, `y_axis`, `z_axis` and `scale`.
  - Factories: `create_scale`, `create_rotation_x/y/z`, `create_translation`,
    `create_simple_view_proj`, `create_from_quaternion`, `create_look_at`,
    `create_ortho`, `create_perspective_fov` and `create_perspective`.
  - In `create_ortho` the depth offset is always infinite, or nan when
    `far + near` is zero.
- `zephyrus.matrix4_row`: `Matrix4Row`, the row-major counterpart, stored as
  four rows.
  - Indexing: `m[i]` gives a row and `m[i, j]` gives an element.
  - `==` allows a difference of `EPSILON` (1e-6) per element.
  - It has the same factories as `Matrix4`, with row-major conventions, plus
    `delete_translation`, `transform_vector` and `transform_point`.
- `zephyrus.quaternion`: `Quaternion`.
  - Construction: from components (default identity), or from an axis and an
    angle with `from_axis_angle`.
  - Methods: `set`, `length`, `conjugate`/`conjugated`, `normalize`,
    `as_matrix` (gives a `Matrix4`) and `as_matrix_row` (gives a `Matrix4Row`).
  - Constant: `Quaternion.IDENTITY`.
- `zephyrus.transform`
  - `transform(vec, mat, w=1.0)` transforms a vector by a `Matrix4`.
  - `transform_with_persp_div` does the same, then divides by the resulting w
    unless that w is near zero.
  - `transform_by_quaternion(v, q)` rotates a vector by a quaternion.
- `zephyrus.rectangle`
  - `Rectangle` has a position and dimensions as `Vector2`. `to_int_rect()`
    returns a truncated `(x, y, w, h)`. The constant is `Rectangle.NULL`.
  - `Vertex` holds a position, a normal and a texture coordinate.
- `zephyrus.timer`: `FrameTimer`, which works in milliseconds.
  - `compute_delta_time()` starts a frame. It returns the elapsed time, capped
    at 50 ms, and updates `delta_time` (in seconds) and `fps`.
  - `delay_time()` sleeps out the rest of a 60 FPS frame budget.
  - By default it uses a monotonic clock and `time.sleep`. You can pass your
    own `clock` and `sleep` callables.
- `zephyrus.aabb`: `AABB`, with `contains(point)`, `intersects(other)` and
  `ray_intersects(origin, end)`.
  - `ray_intersects` returns the entry parameter along the segment, or `None`
    when the segment misses.
- `zephyrus.collision`
  - Records: `HitResult`, `ContactManifold`, `CollisionType` (ENTER, STAY,
    EXIT) and `CollisionInfo`.
  - `CollisionListener` is an abstract base class with
    `on_trigger_enter/stay/exit`.
  - `unordered_pair_key` builds a key in which `(a, b)` and `(b, a)` are the
    same.
- `zephyrus.collision_manager`: `CollisionManager`.
  - Colliders are registered per actor.
  - `check_collisions()` reports enter, stay and exit events as `CollisionInfo`
    to an optional `on_collision` callback.
  - `line_trace()` returns the closest hit as a `HitResult`.
  - `calculate_normal()` computes an xy-plane normal and the smallest overlap of
    two box colliders.
- `zephyrus.collision_resolver`: `CollisionResolver`.
  - It queues one event per unordered pair.
  - Query colliders get trigger notifications.
  - Physics events get impulses on enter, penetration correction on stay, and
    grounding updates.
  - Registering a second rigid body for the same actor is refused and logged.
- `zephyrus.physics_manager`: `PhysicsManager`.
  - It joins a manager and a resolver, and `update()` runs one physics step.
  - `PhysicsManager.instance()` returns a shared manager.

## What it does not do

The physics modules work on objects that you provide. The package has no
actor, collider or rigid-body classes of its own. Actors, colliders and rigid
bodies are duck-typed, and each module's docstring lists the attributes and
methods it expects.

There is no rendering, windowing, input handling or scene management.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from zephyrus.vector3 import Vector3
from zephyrus.matrix4_row import Matrix4Row
from zephyrus.aabb import AABB

m = Matrix4Row.create_scale(2.0, 2.0, 2.0)
print(m.transform_point(Vector3(1.0, 2.0, 3.0)))   # ( 2.000000 , 4.000000 , 6.000000 )

box = AABB(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
print(box.contains(Vector3(0.0, 0.0, 0.0)))        # True
print(box.ray_intersects(Vector3(-5.0, 0.0, 0.0), Vector3(5.0, 0.0, 0.0)))  # about 0.4
```