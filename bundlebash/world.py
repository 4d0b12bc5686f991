"""Assembly of a world with every game system registered."""

from __future__ import annotations

from . import gameplay, interpolation, particles, render
from .ecs import World


def create_world() -> World:
    """Return an empty world with all systems in their pipeline order."""
    world = World()
    interpolation.register_systems(world)
    gameplay.register_systems(world)
    render.register_systems(world)
    particles.register_systems(world)
    return world