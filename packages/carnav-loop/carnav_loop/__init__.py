"""carnav-loop - Single-threaded cooperative tick loop for the carnav widget."""

from carnav_loop.bus import SignalBus, make_signal_system
from carnav_loop.clock import Clock
from carnav_loop.engine import Engine
from carnav_loop.tasks import Task
from carnav_loop.types import DeadEntityError, EntityId, TickContext
from carnav_loop.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "Task",
    "SignalBus",
    "make_signal_system",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
