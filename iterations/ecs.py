"""A small entity-component-system: entities, component stores, systems and the world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import ItemsView, Iterator
from typing import Any, Generic, TypeVar

Entity = int
NULL_ENTITY: Entity = 0

T = TypeVar("T")


class ComponentStore(Generic[T]):
    """Components of one type, keyed by entity."""

    def __init__(self) -> None:
        self._components: dict[Entity, T] = {}

    def add(self, entity: Entity, component: T) -> None:
        """Attach a component to an entity, replacing any previous one."""
        self._components[entity] = component

    def remove(self, entity: Entity) -> None:
        """Detach the entity's component if it has one."""
        self._components.pop(entity, None)

    def has(self, entity: Entity) -> bool:
        return entity in self._components

    def get(self, entity: Entity) -> T:
        """Return the entity's component; raise KeyError if it has none."""
        return self._components[entity]

    def try_get(self, entity: Entity) -> T | None:
        """Return the entity's component, or None if it has none."""
        return self._components.get(entity)

    def items(self) -> ItemsView[Entity, T]:
        """A live view of (entity, component) pairs in insertion order."""
        return self._components.items()

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._components)


class System(ABC):
    """Logic run over the world once per tick or frame."""

    @abstractmethod
    def update(self, world: World, delta_time: float) -> None:
        """Advance this system by ``delta_time`` seconds."""


class World:
    """Owns entities, their component stores and the registered systems."""

    def __init__(self) -> None:
        self._next_entity: Entity = NULL_ENTITY + 1
        self._stores: dict[type, ComponentStore[Any]] = {}
        self._update_systems: list[System] = []
        self._render_systems: list[System] = []

    def create_entity(self) -> Entity:
        """Return a fresh entity id; ids start at 1 and are never reused."""
        entity = self._next_entity
        self._next_entity += 1
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Remove every component the entity has."""
        for store in self._stores.values():
            store.remove(entity)

    def _store_for(self, component_type: type) -> ComponentStore[Any]:
        store = self._stores.get(component_type)
        if store is None:
            store = ComponentStore()
            self._stores[component_type] = store
        return store

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach a component, stored under its own type."""
        self._store_for(type(component)).add(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._store_for(component_type).remove(entity)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        return self._store_for(component_type).has(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the entity's component of the type; raise KeyError if missing."""
        return self._store_for(component_type).get(entity)

    def get_store(self, component_type: type[T]) -> ComponentStore[T]:
        """Return the store for a component type, creating it if needed."""
        return self._store_for(component_type)

    def view(self, primary: type, *args: type) -> list[Entity]:
        """Entities holding a ``primary`` component and every type in ``args``.

        Entities come in the primary store's order.
        """
        primary_store = self._stores.get(primary)
        if primary_store is None:
            return []
        others = [self._stores.get(component_type) for component_type in args]
        if any(store is None for store in others):
            return []
        return [
            entity
            for entity in primary_store
            if all(store.has(entity) for store in others)
        ]

    def add_update_system(self, system: System) -> None:
        self._update_systems.append(system)

    def add_render_system(self, system: System) -> None:
        self._render_systems.append(system)

    def update_systems(self, delta_time: float) -> None:
        """Run update systems in the order they were added."""
        for system in self._update_systems:
            system.update(self, delta_time)

    def render_systems(self, delta_time: float) -> None:
        """Run render systems in the order they were added."""
        for system in self._render_systems:
            system.update(self, delta_time)