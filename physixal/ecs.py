"""A minimal entity-component store."""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

__all__ = ["Component", "Entity", "ECSManager"]


class Component:
    """Base class of everything that can be attached to an entity."""


C = TypeVar("C", bound=Component)


def _require_component_type(component_type: Any) -> None:
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} must derive from Component")


class Entity:
    """An identifier holding at most one component of each type."""

    def __init__(self, entity_id: int) -> None:
        self._id = entity_id
        self._components: dict[type, Component] = {}

    @property
    def id(self) -> int:
        return self._id

    def add_component(self, component_type: Type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component of the given type, attach it, and return it."""
        _require_component_type(component_type)
        component = component_type(*args, **kwargs)
        self._components[component_type] = component
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """Return the attached component of this exact type, or None."""
        _require_component_type(component_type)
        return self._components.get(component_type)  # type: ignore[return-value]

    def has_component(self, component_type: Type[Component]) -> bool:
        _require_component_type(component_type)
        return component_type in self._components

    def __repr__(self) -> str:
        return f"Entity({self._id})"


class ECSManager:
    """Creates entities with increasing ids and tracks the selected one."""

    def __init__(self) -> None:
        self._next_entity_id = 0
        self._entities: list[Entity] = []
        self.selected_entity: Optional[Entity] = None

    def create_entity(self) -> Entity:
        entity = Entity(self._next_entity_id)
        self._next_entity_id += 1
        self._entities.append(entity)
        return entity

    def entities(self) -> tuple[Entity, ...]:
        """All entities in creation order."""
        return tuple(self._entities)