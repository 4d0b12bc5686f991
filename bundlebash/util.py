"""Random number helpers shared by the game systems."""

from __future__ import annotations

import random

_rng = random.Random()


def seed(value: int | float | str | bytes | None) -> None:
    """Reseed the shared generator so that later draws are reproducible."""
    _rng.seed(value)


def get_random_int(low: int, high: int) -> int:
    """Return a uniformly distributed integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _rng.randint(low, high)


def get_random_float(low: float, high: float) -> float:
    """Return a uniformly distributed float in the half-open range [low, high)."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return low + (high - low) * _rng.random()