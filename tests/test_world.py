import pytest

from bundlebash import util
from bundlebash.components import (
    Animation,
    Color,
    Consumable,
    Consumer,
    Explosion,
    InterpolationState,
    MoveTo,
    Particle,
    Spin,
    Vector3,
    WorldCamera,
    WorldTransform,
)
from bundlebash.ecs import FIXED_DT
from bundlebash.world import create_world


def test_update_runs_fixed_steps_then_interpolates():
    world = create_world()
    entity = world.spawn(Spin(speed=1.0), WorldTransform())
    alpha = world.update(FIXED_DT * 2.5)
    assert alpha == pytest.approx(0.5)
    assert world.get(entity, WorldTransform).rot.y == pytest.approx(2.0)
    state = world.get(entity, InterpolationState)
    assert state.prev_rot.y == pytest.approx(1.0)


def test_render_position_lies_between_steps():
    world = create_world()
    entity = world.spawn(
        MoveTo(target=Vector3(10.0, 0.0, 0.0), speed=0.5),
        WorldTransform(),
        Animation(name="Idle"),
    )
    world.update(FIXED_DT * 1.5)
    state = world.get(entity, InterpolationState)
    current = world.get(entity, WorldTransform).pos
    assert state.prev_pos.x <= state.render_pos.x <= current.x
    assert state.prev_pos.x < current.x


def test_explosion_bursts_into_particles():
    util.seed(3)
    world = create_world()
    explosion = world.spawn(Explosion(particles=5, colors=[Color(1, 2, 3)]), WorldTransform())
    world.update(FIXED_DT)
    assert not world.alive(explosion)
    sparks = list(world.query(Particle))
    assert len(sparks) == 5
    assert all(spark.color == Color(1, 2, 3) for _, spark in sparks)


def test_eating_fruit_sprays_its_particles():
    util.seed(5)
    world = create_world()
    world.set_singleton(WorldCamera(distance=3.0))
    eater = world.spawn(Consumer(range=0.5), WorldTransform(), Animation(name="Idle"))
    world.spawn(Consumable(colors=[Color(10, 20, 30)], particles=9), WorldTransform(pos=Vector3(0.2, 1.0, 0.0)))
    world.update(FIXED_DT)
    assert list(world.query(Consumable)) == []
    assert len(list(world.query(Particle))) == 9
    assert world.get(eater, Animation).run_once == "Eat"


def test_worlds_are_independent():
    first = create_world()
    second = create_world()
    entity = first.spawn(Spin(speed=1.0), WorldTransform())
    second.update(FIXED_DT)
    assert first.get(entity, WorldTransform).rot.y == 0.0
    assert not second.alive(entity)