"""Systems that burst explosions into particles and move those particles."""

from __future__ import annotations

import copy
import math

from . import util
from .components import Explosion, Particle, Vector3, WorldTransform
from .ecs import Phase, World

GRAVITY = 9.8


def update_particles(world: World, delta: float) -> None:
    """Age particles, removing expired ones and moving the rest under gravity."""
    for entity, particle, transform in world.query(Particle, WorldTransform):
        particle.lifetime -= delta
        if particle.lifetime < 0.0:
            world.defer(lambda entity=entity: world.destroy(entity))
            continue
        particle.velocity.y -= GRAVITY * delta
        transform.pos = transform.pos + particle.velocity * delta
        transform.rot = transform.rot + particle.rot_velocity * delta


def _spawn_particle(world: World, explosion: Explosion, transform: WorldTransform) -> None:
    theta = math.radians(util.get_random_float(0.0, 360.0))
    phi = math.radians(util.get_random_float(0.0, 180.0))
    speed = util.get_random_float(0.5, 1.0)
    rot_speed = util.get_random_float(1.0, 5.0)

    lifetime = util.get_random_float(0.5, 1.0)
    if explosion.colors:
        color = explosion.colors[util.get_random_int(0, len(explosion.colors) - 1)]
    else:
        color = Particle().color
    variation = util.get_random_float(-5.0, 5.0)
    velocity = Vector3(
        math.cos(theta) * math.sin(phi) * speed,
        math.cos(phi) * speed + 3.0,
        math.sin(theta) * math.sin(phi) * speed,
    )
    rot_velocity = Vector3(
        util.get_random_float(0.0, 360.0) * rot_speed,
        util.get_random_float(0.0, 360.0) * rot_speed,
        util.get_random_float(0.0, 360.0) * rot_speed,
    )
    world.spawn(
        copy.deepcopy(transform),
        Particle(
            lifetime=lifetime,
            variation=variation,
            color=color,
            velocity=velocity,
            rot_velocity=rot_velocity,
        ),
    )


def explode(world: World, delta: float) -> None:
    """Turn each explosion into a spray of particles and remove it."""
    for entity, explosion, transform in world.query(Explosion, WorldTransform):
        for _ in range(explosion.particles):
            _spawn_particle(world, explosion, transform)
        world.defer(lambda entity=entity: world.destroy(entity))


def register_systems(world: World) -> None:
    world.add_system(Phase.FIXED, "particle_system", update_particles)
    world.add_system(Phase.FIXED, "explosion_system", explode)