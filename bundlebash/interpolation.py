"""Systems that smooth transforms between fixed game-loop steps."""

from __future__ import annotations

import math

from .components import InterpolationState, Quaternion, Vector3, WorldTransform
from .ecs import Phase, World


def _to_quaternion(degrees: Vector3) -> Quaternion:
    return Quaternion.from_euler(
        math.radians(degrees.x), math.radians(degrees.y), math.radians(degrees.z)
    )


def store_previous(world: World, delta: float) -> None:
    """Record each transform before the step changes it."""
    for entity, transform in world.query(WorldTransform):
        if world.has(entity, InterpolationState):
            state = world.get(entity, InterpolationState)
        else:
            state = InterpolationState()
            world.set(entity, state)
        state.prev_pos = Vector3(*transform.pos)
        state.prev_rot = Vector3(*transform.rot)


def set_render_state(world: World, alpha: float) -> None:
    """Blend the previous and current transforms by ``alpha`` for drawing."""
    for _, transform, state in world.query(WorldTransform, InterpolationState):
        state.render_pos = state.prev_pos.lerp(transform.pos, alpha)
        state.render_rot = _to_quaternion(state.prev_rot).slerp(
            _to_quaternion(transform.rot), alpha
        )


def register_systems(world: World) -> None:
    world.add_system(Phase.FIXED, "store_previous", store_previous)
    world.add_system(Phase.RENDER, "set_render_state", set_render_state)