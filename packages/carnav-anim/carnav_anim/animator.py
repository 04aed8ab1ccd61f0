"""Animator - starts, tracks and cancels AnimationSet entities."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from carnav_anim.components import Animation, AnimationSet

if TYPE_CHECKING:
    from carnav_loop import EntityId, World


class Animator:
    """Plays animation sets on a World.

    ``on_start`` fires as the set is attached; ``on_end`` fires when the
    set leaves the world, whether it completed or was cancelled, so it
    runs exactly once per played set.
    """

    def __init__(self, world: World) -> None:
        self._world = world
        world.on_attach(AnimationSet, self._started)
        world.on_detach(AnimationSet, self._ended)

    @staticmethod
    def _started(world: World, eid: EntityId, anim_set: AnimationSet) -> None:
        if anim_set.on_start is not None:
            anim_set.on_start()

    @staticmethod
    def _ended(world: World, eid: EntityId, anim_set: AnimationSet) -> None:
        if anim_set.on_end is not None:
            anim_set.on_end()

    def play(
        self,
        *animations: Animation,
        on_start: Callable[[], None] | None = None,
        on_end: Callable[[], None] | None = None,
        reverse: bool = False,
    ) -> EntityId:
        """Start a set of animations together and return its handle."""
        eid = self._world.spawn()
        self._world.attach(
            eid,
            AnimationSet(
                animations=list(animations),
                on_start=on_start,
                on_end=on_end,
                reverse=reverse,
            ),
        )
        return eid

    def cancel(self, handle: EntityId | None) -> None:
        """Stop a set immediately. Unknown or finished handles are ignored."""
        if handle is None:
            return
        self._world.despawn(handle)

    def is_running(self, handle: EntityId | None) -> bool:
        return handle is not None and self._world.has(handle, AnimationSet)
