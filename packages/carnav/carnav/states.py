"""Navigation states: where every part sits and what animates in it."""
from __future__ import annotations

from typing import TYPE_CHECKING

from carnav_anim import Animation

if TYPE_CHECKING:
    from carnav_loop import EntityId

    from carnav.view import CarNavigationView

TRANSITION_DURATION = 600
TRACK_ENLARGE = 1.4
BACKGROUND_ENLARGE = 3.7
TRACK_ALPHA = 0.1
TOP = -90.0
AT_FRONT_WAVE_SCALE = (0.2, 1.6)
NEARBY_WAVE_SCALE = (1.0, 1.92)


class NavigationState:
    """Shared base: no-op hooks and a progress shadow.

    Setting ``progress`` to a new value calls ``on_progress_changed``.
    The view guarantees ``on_exit_state`` of the old state runs before
    ``init_params`` and ``on_enter_state`` of the new one.
    """

    def __init__(self, view: CarNavigationView) -> None:
        self.view = view
        self._progress = 0.0

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        if value != self._progress:
            self._progress = value
            self.on_progress_changed()

    def init_params(self) -> None:
        pass

    def on_progress_changed(self) -> None:
        pass

    def on_enter_state(self) -> None:
        pass

    def on_exit_state(self) -> None:
        pass

    def display(self) -> None:
        self.view.invalidate()


class SearchState(NavigationState):
    """The car travels the ring as progress grows."""

    def init_params(self) -> None:
        view = self.view
        radius = view.config.progress_bar_radius
        view.front_sector.update_params(alpha=1.0)
        view.empty_progress_bar.update_params(alpha=TRACK_ALPHA, scale=1.0)
        view.icon_car.update_params(radius=radius)
        view.icon_car_background.update_params(radius=radius)
        view.water_wave.update_params(radius=radius)
        view.car_arrow.update_params(radius=view.config.arrow_distance, angle=TOP)

    def on_progress_changed(self) -> None:
        view = self.view
        radius = view.config.progress_bar_radius
        angle = TOP + self.progress * 360
        for part in (
            view.icon_car,
            view.icon_car_background,
            view.water_wave,
            view.progress_bar,
        ):
            part.update_params(radius=radius, angle=angle)
        self.display()

    def on_enter_state(self) -> None:
        self.view.car_arrow.start_fade_anim(False)

    def on_exit_state(self) -> None:
        self.view.water_wave.stop()
        self.view.car_arrow.stop_anim()


class AtFrontState(NavigationState):
    """The car parks at the top and the arrival rings pulse."""

    def init_params(self) -> None:
        view = self.view
        radius = view.config.progress_bar_radius
        view.front_sector.update_params(alpha=1.0)
        view.empty_progress_bar.update_params(alpha=TRACK_ALPHA, scale=1.0)
        for part in (view.icon_car, view.icon_car_background, view.water_wave):
            part.update_params(radius=radius, angle=TOP, scale=1.0, alpha=1.0)
        view.progress_bar.update_params(radius=radius, angle=TOP)

    def on_enter_state(self) -> None:
        self.view.water_wave.start(*AT_FRONT_WAVE_SCALE)
        self.view.car_arrow.start_fade_anim(True)

    def on_exit_state(self) -> None:
        self.view.water_wave.stop()
        self.view.car_arrow.stop_anim()


class NearbyState(NavigationState):
    """The car moves into the center and grows into a large pulsing disc.

    The move in (and back out on exit) is one choreographed set; while
    it plays the view ignores progress writes.
    """

    def __init__(self, view: CarNavigationView) -> None:
        super().__init__(view)
        self._transition: EntityId | None = None

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        self._progress = value

    @property
    def transitioning(self) -> bool:
        return self.view.animator.is_running(self._transition)

    def init_params(self) -> None:
        view = self.view
        view.progress_bar.update_params(radius=view.config.progress_bar_radius, angle=TOP)
        view.front_sector.update_params(alpha=0.0)

    def on_enter_state(self) -> None:
        self._start_intermediate_anim(reverse=False)
        self.view.car_arrow.start_fade_anim(False)

    def on_exit_state(self) -> None:
        self._start_intermediate_anim(reverse=True)

    def _start_intermediate_anim(self, reverse: bool) -> None:
        view = self.view
        radius = view.config.progress_bar_radius
        view.animator.cancel(self._transition)
        view.water_wave.update_params(radius=0.0)

        def on_translate(value: float) -> None:
            for part in (view.icon_car, view.icon_car_background, view.water_wave):
                part.update_params(radius=radius - value)
            self.display()

        def on_fade(value: float) -> None:
            view.icon_car.update_params(alpha=value)
            view.front_sector.update_params(alpha=value)
            self.display()

        def on_track_scale(value: float) -> None:
            view.empty_progress_bar.update_params(scale=value)

        def on_background_scale(value: float) -> None:
            view.icon_car_background.update_params(scale=value)
            view.water_wave.update_params(scale=value)
            self.display()

        def on_start() -> None:
            view.water_wave.stop()
            view.is_in_guarded_transition = True

        def on_end() -> None:
            view.is_in_guarded_transition = False
            if self._transition == handle:
                self._transition = None

        handle = view.animator.play(
            Animation(0.0, radius, TRANSITION_DURATION, on_translate, easing="alpha"),
            Animation(1.0, 0.0, TRANSITION_DURATION, on_fade, easing="alpha"),
            Animation(1.0, TRACK_ENLARGE, TRANSITION_DURATION, on_track_scale, easing="alpha"),
            Animation(1.0, BACKGROUND_ENLARGE, TRANSITION_DURATION, on_background_scale, easing="alpha"),
            on_start=on_start,
            on_end=on_end,
            reverse=reverse,
        )
        self._transition = handle
        if reverse:
            view.water_wave.stop()
        else:
            view.water_wave.start(*NEARBY_WAVE_SCALE)
