"""Radiating water-wave rings around the car icon."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from carnav_anim import Animation, Timer

from carnav.canvas import FILL, Paint
from carnav.parts import UIPart

if TYPE_CHECKING:
    from carnav_anim import Animator
    from carnav_loop import EntityId, World

    from carnav.canvas import Canvas
    from carnav.config import Configuration, ViewSize

logger = logging.getLogger(__name__)

WAVE_INTERVAL = 1000
GROW_DURATION = 4500
FADE_IN_DURATION = 500
FADE_OUT_DURATION = 2500
FADE_OUT_DELAY = 2000
RING_ALPHA = 0.2


@dataclass
class WaveRing:
    """One expanding ring. Lives from its cycle's start to its end."""

    radius: float
    alpha: float = 0.0
    blur: float = 0.0


class CarWaterWave(UIPart):
    """Spawns a new ring every WAVE_INTERVAL ticks while running.

    Each ring is driven by its own animation set; the next cycle is
    re-armed by a one-shot Timer regardless of how long the rings live,
    so several rings overlap. ``stop`` cancels both the timer and every
    set in flight.
    """

    def __init__(
        self,
        config: Configuration,
        view_size: ViewSize,
        animator: Animator,
        world: World,
        invalidate: Callable[[], None],
    ) -> None:
        super().__init__(config, view_size)
        self._animator = animator
        self._world = world
        self._invalidate = invalidate
        self._rings: list[WaveRing] = []
        self._active: list[EntityId] = []
        self._enabled = False
        self._rearm: EntityId | None = None

    @property
    def rings(self) -> tuple[WaveRing, ...]:
        return tuple(self._rings)

    @property
    def running(self) -> bool:
        return bool(self._active)

    def start(self, scale_start: float, scale_end: float) -> None:
        if self._active:
            return
        logger.debug("[water_wave] start scale %.2f -> %.2f", scale_start, scale_end)
        self._cancel_rearm()
        self._enabled = True
        self._start_cycle(scale_start, scale_end)

    def stop(self) -> None:
        if self._enabled or self._active:
            logger.debug("[water_wave] stop with %d rings", len(self._rings))
        self._enabled = False
        self._rings.clear()
        for handle in list(self._active):
            self._animator.cancel(handle)
        self._cancel_rearm()

    def _cancel_rearm(self) -> None:
        if self._rearm is not None:
            self._world.despawn(self._rearm)
            self._rearm = None

    def _start_cycle(self, scale_start: float, scale_end: float) -> None:
        if not self._enabled:
            return
        bg_radius = self.config.car_icon_bg_radius
        ring = WaveRing(radius=bg_radius)

        def on_grow(value: float) -> None:
            ring.radius = bg_radius * self.params.scale * value
            self._invalidate()

        def on_alpha(value: float) -> None:
            ring.alpha = value
            self._invalidate()

        def on_blur(value: float) -> None:
            ring.blur = bg_radius * value

        def on_start() -> None:
            self._rings.append(ring)

        def on_end() -> None:
            if ring in self._rings:
                self._rings.remove(ring)
            if handle in self._active:
                self._active.remove(handle)

        handle = self._animator.play(
            Animation(scale_start, scale_end, GROW_DURATION, on_grow, easing="scale"),
            Animation(0.0, RING_ALPHA, FADE_IN_DURATION, on_alpha, easing="alpha"),
            Animation(
                RING_ALPHA, 0.0, FADE_OUT_DURATION, on_alpha,
                easing="alpha", delay=FADE_OUT_DELAY,
            ),
            Animation(
                0.0, 1.0, FADE_OUT_DURATION, on_blur,
                easing="alpha", delay=FADE_OUT_DELAY,
            ),
            on_start=on_start,
            on_end=on_end,
        )
        self._active.append(handle)

        eid = self._world.spawn()
        self._world.attach(
            eid,
            Timer(
                name="water_wave",
                remaining=WAVE_INTERVAL,
                on_fire=lambda: self._on_rearm(eid, scale_start, scale_end),
            ),
        )
        self._rearm = eid

    def _on_rearm(self, eid: EntityId, scale_start: float, scale_end: float) -> None:
        self._world.despawn(eid)
        if self._rearm == eid:
            self._rearm = None
        self._start_cycle(scale_start, scale_end)

    def draw(self, canvas: Canvas) -> None:
        x, y = self.cartesian_position()
        color = self.config.car_icon_bounds_color
        for ring in list(self._rings):
            paint = Paint(color=color, alpha=round(ring.alpha * 255), style=FILL, blur=ring.blur)
            canvas.draw_circle(x, y, ring.radius, paint)
