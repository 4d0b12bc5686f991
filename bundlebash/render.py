"""Camera, animation and shadow systems that prepare a frame for drawing."""

from __future__ import annotations

import math

from .components import (
    Animation,
    CameraFollow,
    InterpolationState,
    ShadowCaster,
    Vector3,
    WorldCamera,
    WorldModel,
)
from .ecs import Phase, World

ANIMATION_SPEED = 240.0
LIGHT_DIR = Vector3(-0.5, -1.0, -0.5)
LIGHT_COLOR = Vector3(0.4, 0.4, 0.4)
MAX_SHADOWS = 64


def _camera(world: World) -> WorldCamera | None:
    try:
        return world.singleton(WorldCamera)
    except KeyError:
        return None


def camera_follow(world: World, alpha: float) -> None:
    """Aim the camera at the smoothed position of the followed entity."""
    cam = _camera(world)
    if cam is None:
        return
    for _, _, state in world.query(CameraFollow, InterpolationState):
        cam.camera.target = Vector3(*state.render_pos)


def update_camera(world: World, alpha: float) -> None:
    """Place the camera above and behind its target at its set distance."""
    cam = _camera(world)
    if cam is None:
        return
    offset = Vector3(cam.distance, cam.distance * 1.5, cam.distance)
    cam.camera.position = cam.camera.target + offset


def animate_model(world: World, delta: float) -> None:
    """Advance animation clocks, looping clips and ending one-shot clips."""
    for _, model, anim in world.query(WorldModel, Animation):
        key = anim.run_once if anim.run_once is not None else anim.name
        clip = model.animations.get(key)
        frame_count = clip.frame_count if clip is not None else 0
        anim.frame_time += delta
        frame = int(anim.frame_time * ANIMATION_SPEED)
        if frame < frame_count:
            continue
        if anim.run_once is not None:
            anim.run_once = None
            anim.frame_time = 0.0
        elif frame_count:
            anim.frame_time = math.fmod(anim.frame_time, frame_count / ANIMATION_SPEED)
        else:
            anim.frame_time = 0.0


def compute_shadows(world: World) -> list[tuple[Vector3, float]]:
    """Project shadow casters onto the ground along the light.

    Returns ``(ground position, radius)`` pairs, nearest to the camera target
    first, at most ``MAX_SHADOWS`` of them.
    """
    target = world.singleton(WorldCamera).camera.target
    shadows = []
    for _, caster, state in world.query(ShadowCaster, InterpolationState):
        pos = state.render_pos
        t = -pos.y / LIGHT_DIR.y
        ground = Vector3(pos.x + LIGHT_DIR.x * t, 0.0, pos.z + LIGHT_DIR.z * t)
        shadows.append((ground, caster.radius))
    shadows.sort(key=lambda shadow: shadow[0].distance(target))
    return shadows[:MAX_SHADOWS]


def register_systems(world: World) -> None:
    world.add_system(Phase.RENDER, "camera_follow", camera_follow)
    world.add_system(Phase.RENDER, "update_camera", update_camera)
    world.add_system(Phase.FIXED, "animate_model", animate_model)