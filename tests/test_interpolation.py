import math

import pytest

from bundlebash.components import (
    InterpolationState,
    Quaternion,
    Spin,
    Vector3,
    WorldTransform,
)
from bundlebash.ecs import FIXED_DT, World
from bundlebash.interpolation import register_systems, set_render_state, store_previous


def _quat(q):
    return (q.x, q.y, q.z, q.w)


def test_store_previous_creates_copied_state():
    world = World()
    transform = WorldTransform(pos=Vector3(1.0, 2.0, 3.0), rot=Vector3(0.0, 45.0, 0.0))
    entity = world.spawn(transform)
    store_previous(world, FIXED_DT)
    state = world.get(entity, InterpolationState)
    assert state.prev_pos == Vector3(1.0, 2.0, 3.0)
    assert state.prev_rot == Vector3(0.0, 45.0, 0.0)
    transform.pos.x = 9.0
    transform.rot.y = 90.0
    assert state.prev_pos.x == 1.0
    assert state.prev_rot.y == 45.0


def test_store_previous_reuses_existing_state():
    world = World()
    existing = InterpolationState(render_pos=Vector3(5.0, 5.0, 5.0))
    entity = world.spawn(WorldTransform(pos=Vector3(1.0, 0.0, 0.0)), existing)
    store_previous(world, FIXED_DT)
    assert world.get(entity, InterpolationState) is existing
    assert existing.prev_pos == Vector3(1.0, 0.0, 0.0)


def test_entities_without_transform_are_ignored():
    world = World()
    entity = world.spawn(Spin())
    store_previous(world, FIXED_DT)
    assert not world.has(entity, InterpolationState)


def test_render_state_endpoints():
    world = World()
    transform = WorldTransform(pos=Vector3(0.0, 0.0, 0.0), rot=Vector3(0.0, 0.0, 0.0))
    entity = world.spawn(transform)
    store_previous(world, FIXED_DT)
    transform.pos = Vector3(4.0, 1.0, -2.0)
    transform.rot = Vector3(0.0, 90.0, 0.0)
    state = world.get(entity, InterpolationState)

    set_render_state(world, 0.0)
    assert state.render_pos == Vector3(0.0, 0.0, 0.0)
    assert _quat(state.render_rot) == pytest.approx(_quat(Quaternion()))

    set_render_state(world, 1.0)
    assert tuple(state.render_pos) == pytest.approx((4.0, 1.0, -2.0))
    expected = Quaternion.from_euler(0.0, math.radians(90.0), 0.0)
    assert _quat(state.render_rot) == pytest.approx(_quat(expected))


def test_render_position_lies_between_steps():
    world = World()
    transform = WorldTransform()
    entity = world.spawn(transform)
    store_previous(world, FIXED_DT)
    transform.pos = Vector3(2.0, 0.0, 0.0)
    set_render_state(world, 0.25)
    x = world.get(entity, InterpolationState).render_pos.x
    assert 0.0 < x < 2.0


def test_registered_systems_run_through_update():
    world = World()
    register_systems(world)
    entity = world.spawn(WorldTransform(pos=Vector3(3.0, 0.0, -1.0)))
    world.update(FIXED_DT)
    state = world.get(entity, InterpolationState)
    assert tuple(state.render_pos) == pytest.approx((3.0, 0.0, -1.0))