"""World - entity and component storage with queries and detach hooks."""

from __future__ import annotations

from typing import Any, Callable, Generator, TypeVar, cast

from carnav_loop.types import DeadEntityError, EntityId

T = TypeVar("T")

# Hook callback signature.
HookCallback = Callable[["World", EntityId, Any], None]


class World:
    """Entities are plain ints; components are keyed by their exact type.

    Animation sets, timers and other short-lived jobs live here as
    entities so that one system can advance all of them per tick.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()
        self._on_attach: dict[type, list[HookCallback]] = {}
        self._on_detach: dict[type, list[HookCallback]] = {}

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        if entity_id not in self._alive:
            return
        self._alive.discard(entity_id)
        for ctype, store in list(self._components.items()):
            component = store.pop(entity_id, None)
            if component is not None:
                for cb in list(self._on_detach.get(ctype, ())):
                    cb(self, entity_id, component)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component
        for cb in list(self._on_attach.get(ctype, ())):
            cb(self, entity_id, component)

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        store = self._components.get(component_type)
        if store is not None:
            component = store.pop(entity_id, None)
            if component is not None:
                for cb in list(self._on_detach.get(component_type, ())):
                    cb(self, entity_id, component)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            )
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(
        self, *ctypes: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        if not ctypes:
            return
        base_store = self._components.get(ctypes[0])
        if base_store is None:
            return
        for eid in list(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in ctypes:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    # -- Change detection hooks --

    def on_attach(self, ctype: type, callback: HookCallback) -> None:
        self._on_attach.setdefault(ctype, []).append(callback)

    def on_detach(self, ctype: type, callback: HookCallback) -> None:
        self._on_detach.setdefault(ctype, []).append(callback)
