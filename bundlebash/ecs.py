"""A small entity-component registry and the world that runs the game loop."""

from __future__ import annotations

import itertools
from collections import deque
from enum import Enum
from typing import Any, Callable, Iterator, TypeVar

FIXED_DT = 1.0 / 60.0

T = TypeVar("T")
System = Callable[["World", float], None]


class Phase(Enum):
    """The pipelines a system can belong to."""

    FIXED = "fixed"
    RENDER = "render"


class Registry:
    """Stores entities and the components attached to them."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._alive: set[int] = set()
        self._names: dict[str, int] = {}
        self._stores: dict[type, dict[int, Any]] = {}
        self._singletons: dict[type, Any] = {}
        self._deferred: deque[Callable[[], None]] = deque()

    def spawn(self, *components: Any, name: str | None = None) -> int:
        """Create an entity with the given components; a known name reuses its entity."""
        entity = self._names.get(name) if name is not None else None
        if entity is None or entity not in self._alive:
            entity = next(self._ids)
            self._alive.add(entity)
            if name is not None:
                self._names[name] = entity
        self.set(entity, *components)
        return entity

    def set(self, entity: int, *components: Any) -> None:
        """Attach or replace components on an entity, one per component type."""
        self._require_alive(entity)
        for component in components:
            self._stores.setdefault(type(component), {})[entity] = component

    def get(self, entity: int, kind: type[T]) -> T:
        """Return the entity's component of the given type."""
        self._require_alive(entity)
        try:
            return self._stores[kind][entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no {kind.__name__}") from None

    def has(self, entity: int, kind: type) -> bool:
        return entity in self._alive and entity in self._stores.get(kind, {})

    def alive(self, entity: int) -> bool:
        return entity in self._alive

    def destroy(self, entity: int) -> None:
        """Remove an entity and all of its components; unknown entities are ignored."""
        if entity not in self._alive:
            return
        self._alive.discard(entity)
        for store in self._stores.values():
            store.pop(entity, None)
        for name in [n for n, e in self._names.items() if e == entity]:
            del self._names[name]

    def query(self, *kinds: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every kind.

        Entities are visited in the order their first kind was attached. Entities
        created during iteration are not visited, and destroyed ones are skipped.
        """
        if not kinds:
            raise ValueError("query needs at least one component type")
        return self._iterate(kinds)

    def _iterate(self, kinds: tuple[type, ...]) -> Iterator[tuple[Any, ...]]:
        for entity in list(self._stores.get(kinds[0], {})):
            if entity not in self._alive:
                continue
            try:
                components = tuple(self._stores[kind][entity] for kind in kinds)
            except KeyError:
                continue
            yield (entity, *components)

    def defer(self, action: Callable[[], None]) -> None:
        """Queue an action to run at the next flush."""
        self._deferred.append(action)

    def flush(self) -> None:
        """Run queued actions, including any they queue themselves."""
        while self._deferred:
            self._deferred.popleft()()

    def set_singleton(self, component: Any) -> None:
        self._singletons[type(component)] = component

    def singleton(self, kind: type[T]) -> T:
        try:
            return self._singletons[kind]
        except KeyError:
            raise KeyError(f"no {kind.__name__} singleton") from None

    def _require_alive(self, entity: int) -> None:
        if entity not in self._alive:
            raise KeyError(f"entity {entity} does not exist")


class World(Registry):
    """A registry with fixed-step and render pipelines of systems."""

    def __init__(self) -> None:
        super().__init__()
        self.accumulator = 0.0
        self._systems: dict[Phase, list[tuple[str, System]]] = {phase: [] for phase in Phase}

    def add_system(self, phase: Phase, name: str, system: System) -> None:
        """Append a system to a phase; names are unique across the world."""
        if any(name == known for systems in self._systems.values() for known, _ in systems):
            raise ValueError(f"system {name!r} is already registered")
        self._systems[phase].append((name, system))

    def run_phase(self, phase: Phase, delta: float) -> None:
        """Run every system of a phase in order, flushing deferred work after each."""
        for _, system in list(self._systems[phase]):
            system(self, delta)
            self.flush()

    def update(self, frame_time: float) -> float:
        """Advance by ``frame_time`` seconds in fixed steps, then render.

        Returns the interpolation factor handed to the render phase.
        """
        self.accumulator += frame_time
        while self.accumulator >= FIXED_DT:
            self.run_phase(Phase.FIXED, FIXED_DT)
            self.accumulator -= FIXED_DT
        alpha = self.accumulator / FIXED_DT
        self.run_phase(Phase.RENDER, alpha)
        return alpha