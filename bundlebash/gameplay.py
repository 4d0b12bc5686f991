"""Systems for movement, spinning and bouncing fruit, and eating."""

from __future__ import annotations

import copy
import math

from .components import (
    Animation,
    Bounce,
    Consumable,
    Consumer,
    Explosion,
    MoveTo,
    Pointer,
    Spin,
    Vector3,
    WorldTransform,
)
from .ecs import Phase, World

IDLE_ANIMATION = "Idle"
RUN_ANIMATION = "Run"
EAT_ANIMATION = "Eat"


def move_target(world: World, delta: float) -> None:
    """Point every ``MoveTo`` at the ground spot under a held pointer."""
    try:
        pointer = world.singleton(Pointer)
    except KeyError:
        return
    if not pointer.down or pointer.direction.y == 0.0:
        return
    distance = -pointer.position.y / pointer.direction.y
    if distance <= 0.0:
        return
    target = pointer.position + pointer.direction * distance
    for _, move in world.query(MoveTo):
        move.target = Vector3(*target)


def move_to(world: World, delta: float) -> None:
    """Walk entities towards their target, facing the way they move."""
    for _, move, transform, animation in world.query(MoveTo, WorldTransform, Animation):
        direction = move.target - transform.pos
        forward = direction.normalized()
        if direction.length() < move.speed:
            transform.pos = Vector3(*move.target)
            animation.name = IDLE_ANIMATION
        else:
            transform.pos = transform.pos + forward * move.speed
            transform.rot.y = math.degrees(math.atan2(forward.x, forward.z))
            animation.name = RUN_ANIMATION


def spin(world: World, delta: float) -> None:
    """Turn spinning entities around the vertical axis."""
    for _, spinner, transform in world.query(Spin, WorldTransform):
        transform.rot.y += spinner.speed


def bounce(world: World, delta: float) -> None:
    """Move bouncing entities up and down along a sine wave."""
    for _, bouncer, transform in world.query(Bounce, WorldTransform):
        transform.pos.y = bouncer.center_y + math.sin(bouncer.elapsed) * bouncer.height
        bouncer.elapsed += bouncer.speed


def _ground_distance(a: Vector3, b: Vector3) -> float:
    return math.hypot(a.x - b.x, a.z - b.z)


def eat(world: World, delta: float) -> None:
    """Let consumers eat one nearby consumable, leaving an explosion behind."""
    for _, consumer, transform, animation in world.query(Consumer, WorldTransform, Animation):
        for food, consumable, food_transform in world.query(Consumable, WorldTransform):
            if animation.run_once is not None:
                break
            if _ground_distance(transform.pos, food_transform.pos) > consumer.range:
                continue
            world.destroy(food)
            world.spawn(
                copy.deepcopy(food_transform),
                Explosion(colors=list(consumable.colors), particles=consumable.particles),
            )
            animation.run_once = EAT_ANIMATION
            animation.frame_time = 0.0


def register_systems(world: World) -> None:
    world.add_system(Phase.FIXED, "move_target", move_target)
    world.add_system(Phase.FIXED, "move_to", move_to)
    world.add_system(Phase.FIXED, "spin", spin)
    world.add_system(Phase.FIXED, "bounce", bounce)
    world.add_system(Phase.FIXED, "eat_system", eat)