"""In-memory pub/sub bus with per-tick flush semantics."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from carnav_loop.types import TickContext
    from carnav_loop.world import World

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self, signal_name: str) -> bool:
        return any(name == signal_name for name, _ in self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)


def make_signal_system(bus: SignalBus) -> Callable[[World, TickContext], None]:
    """Return a system that dispatches everything queued during the tick."""

    def signal_system(world: World, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
