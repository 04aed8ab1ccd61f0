"""CarNavigationView - owns the parts, the current state and the loop wiring."""
from __future__ import annotations

import logging
import math
import weakref
from typing import TYPE_CHECKING

from carnav_anim import Animator, make_animation_system, make_timer_system
from carnav_loop import Engine, SignalBus, make_signal_system

from carnav.config import ViewSize
from carnav.parts import (
    CarArrow,
    CenterPoint,
    EmptyProgressBar,
    FrontSector,
    IconCar,
    IconCarBackground,
    ProgressBar,
)
from carnav.progress import SmoothProgressDriver
from carnav.states import AtFrontState, NavigationState, NearbyState, SearchState
from carnav.wave import CarWaterWave

if TYPE_CHECKING:
    from carnav.canvas import Canvas
    from carnav.config import Configuration

logger = logging.getLogger(__name__)

# Published on the view's bus at most once per tick when a redraw is due.
INVALIDATE = "invalidate"

_animators: weakref.WeakKeyDictionary[Engine, Animator] = weakref.WeakKeyDictionary()


def animator_for(engine: Engine) -> Animator:
    """Return the engine's shared Animator.

    The first call installs the animation and timer systems on ``engine``;
    later calls reuse them, so views sharing an engine step each set once
    per tick.
    """
    animator = _animators.get(engine)
    if animator is None:
        animator = Animator(engine.world)
        engine.add_system(make_animation_system())
        engine.add_system(make_timer_system())
        _animators[engine] = animator
    return animator


class CarNavigationView:
    """Circular progress dial with a car moving along the ring.

    Several views may share one engine; the animation and timer systems
    are installed once per engine, while each view adds the flush system
    for its own bus. Hosts step the engine, subscribe to ``INVALIDATE``
    on ``bus`` and call ``draw`` with their canvas.
    """

    def __init__(self, config: Configuration, engine: Engine | None = None) -> None:
        self.config = config
        self.engine = engine if engine is not None else Engine(tps=1000)
        self.view_size = ViewSize()
        self.bus = SignalBus()
        self.animator = animator_for(self.engine)
        self.engine.add_system(make_signal_system(self.bus))
        self.bus.subscribe(INVALIDATE, self._on_invalidate)

        self.redraw_count = 0
        self.is_in_guarded_transition = False
        self._progress = 0.0

        size = self.view_size
        self.center_point = CenterPoint(config, size)
        self.front_sector = FrontSector(config, size)
        self.empty_progress_bar = EmptyProgressBar(config, size)
        self.progress_bar = ProgressBar(config, size)
        self.car_arrow = CarArrow(config, size, self.animator, self.invalidate)
        self.icon_car = IconCar(config, size)
        self.icon_car_background = IconCarBackground(config, size)
        self.water_wave = CarWaterWave(
            config, size, self.animator, self.engine.world, self.invalidate
        )
        # Back to front.
        self.parts = [
            self.empty_progress_bar,
            self.progress_bar,
            self.front_sector,
            self.center_point,
            self.car_arrow,
            self.water_wave,
            self.icon_car_background,
            self.icon_car,
        ]

        self.search_state = SearchState(self)
        self.nearby_state = NearbyState(self)
        self.at_front_state = AtFrontState(self)
        self._state: NavigationState = self.search_state
        self._state.init_params()

        self._driver = SmoothProgressDriver(
            self.engine, lambda: self._progress, self.try_set_progress
        )

    # --- State ---

    @property
    def state(self) -> NavigationState:
        return self._state

    def _change_state(self, new: NavigationState) -> None:
        old = self._state
        if new is old:
            return
        logger.debug("[change_state] from %s to %s", old.name, new.name)
        old.on_exit_state()
        self._state = new
        new.init_params()
        new.on_enter_state()

    # --- Progress ---

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        self.try_set_progress(value)

    def try_set_progress(self, value: float) -> bool:
        """Write progress unless a guarded transition owns the dial.

        Returns False when the write was ignored: guarded, NaN, or equal
        to the current value. Values outside [0, 1] are clamped.
        """
        if self.is_in_guarded_transition:
            return False
        if math.isnan(value):
            logger.warning("Ignoring NaN progress")
            return False
        if not 0.0 <= value <= 1.0:
            logger.warning("Progress %r out of range, clamping", value)
            value = min(max(value, 0.0), 1.0)
        if value == self._progress:
            return False
        self._progress = value
        self._on_progress_changed()
        return True

    def _on_progress_changed(self) -> None:
        self._state.progress = self._progress
        if self._progress in (0.0, 1.0):
            self._change_state(self.at_front_state)
        else:
            self.set_nearby_state(False)

    def set_nearby_state(self, nearby: bool) -> None:
        if nearby:
            self._change_state(self.nearby_state)
        elif self._progress == 1.0:
            self._change_state(self.at_front_state)
        else:
            self._change_state(self.search_state)

    @property
    def target_progress(self) -> float:
        return self._driver.target

    def smoothly_set_progress(self, target: float) -> None:
        self._driver.smoothly_set_progress(target)

    # --- Host lifecycle ---

    def measure(self, width: int) -> tuple[int, int]:
        """Size the dial for ``width``; the car icon needs room below the ring."""
        height = width + self.config.car_icon_size
        self.view_size.set(width, height)
        logger.debug("[measure] %dx%d", width, height)
        for part in self.parts:
            part.on_dimensions_changed()
        self.invalidate()
        return width, height

    def attach(self) -> None:
        self._resume_animations()

    def detach(self) -> None:
        self._pause_animations()

    def set_visible(self, visible: bool) -> None:
        if visible:
            self._resume_animations()
        else:
            self._pause_animations()

    def _pause_animations(self) -> None:
        self._state.on_exit_state()

    def _resume_animations(self) -> None:
        self._state.on_enter_state()

    # --- Drawing ---

    def invalidate(self) -> None:
        if not self.bus.pending(INVALIDATE):
            self.bus.publish(INVALIDATE)

    def _on_invalidate(self, signal: str, data: dict) -> None:
        self.redraw_count += 1

    def draw(self, canvas: Canvas) -> None:
        for part in self.parts:
            part.draw(canvas)
