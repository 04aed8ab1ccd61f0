"""System factories for animation sets and timers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from carnav_anim.components import Animation, AnimationSet, Timer

if TYPE_CHECKING:
    from carnav_loop import TickContext, World


def _advance(anim: Animation, local: int) -> float | None:
    """Forward fraction of ``anim`` at ``local`` ticks into its window."""
    if anim.finished or local <= 0:
        return None
    if anim.duration == 0:
        return 1.0
    return min(local / anim.duration, 1.0)


def make_animation_system() -> Callable[[World, TickContext], None]:
    """Return a system that steps every AnimationSet by one tick.

    A set whose span has elapsed is despawned; its ``on_end`` hook runs
    from the detach hook installed by ``Animator``.
    """

    def animation_system(world: World, ctx: TickContext) -> None:
        for eid, (anim_set,) in list(world.query(AnimationSet)):
            # An update callback earlier in this tick may have cancelled it.
            if not world.has(eid, AnimationSet):
                continue
            anim_set.elapsed += 1
            span = anim_set.span
            for anim in anim_set.animations:
                if anim_set.reverse:
                    local = anim_set.elapsed - (span - anim.span)
                else:
                    local = anim_set.elapsed - anim.delay
                t = _advance(anim, local)
                if t is None:
                    continue
                if t >= 1.0:
                    anim.finished = True
                    value = anim.start_val if anim_set.reverse else anim.end_val
                else:
                    value = anim.value_at(1.0 - t if anim_set.reverse else t)
                anim.on_update(value)
                if not world.has(eid, AnimationSet):
                    break
            else:
                if anim_set.elapsed >= span:
                    world.despawn(eid)

    return animation_system


def make_timer_system() -> Callable[[World, TickContext], None]:
    """Return a system that decrements Timers and fires them at zero.

    The timer is detached before its ``on_fire`` runs, so the callable
    may attach a fresh Timer to the same entity.
    """

    def timer_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in list(world.query(Timer)):
            if not world.has(eid, Timer):
                continue
            timer.remaining -= 1
            if timer.remaining <= 0:
                world.detach(eid, Timer)
                if timer.on_fire is not None:
                    timer.on_fire()

    return timer_system
