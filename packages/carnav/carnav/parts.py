"""Visual parts of the dial.

Every part owns a ``PartParams`` and a ``Paint``. State logic changes
the params through ``update_params`` only, which keeps the paint in
step with them; ``draw`` reads both and issues canvas calls without
touching either.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from carnav_anim import Animation

from carnav.canvas import FILL, STROKE, Paint, Rect
from carnav.geometry import CartesianPosition, PolarPosition, offset, to_cartesian

if TYPE_CHECKING:
    from carnav_anim import Animator
    from carnav_loop import EntityId

    from carnav.canvas import Canvas
    from carnav.config import Configuration, ViewSize

ARROW_FADE_DURATION = 650


@dataclass
class PartParams:
    position: PolarPosition = field(default_factory=PolarPosition)
    rotation: float = 0.0
    scale: float = 1.0
    alpha: float = 1.0


def sweep_angles(angle: float) -> tuple[float, float]:
    """Start and sweep of the progress arc for a car at ``angle``.

    Up to 90 degrees the arc grows from the top; past that it is drawn
    from the car back to the top so the arc never wraps around its own
    start.
    """
    if angle > 90:
        return angle, 270 - angle
    return -90.0, angle + 90


class UIPart:
    def __init__(self, config: Configuration, view_size: ViewSize) -> None:
        self.config = config
        self.view_size = view_size
        self.params = PartParams()
        self.paint = self._make_paint()
        self.on_params_changed()

    def _make_paint(self) -> Paint:
        return Paint()

    def update_params(
        self,
        mutator: Callable[[PartParams], None] | None = None,
        *,
        radius: float | None = None,
        angle: float | None = None,
        **changes: float,
    ) -> None:
        """Apply ``mutator`` and keyword changes, then refresh the paint."""
        if mutator is not None:
            mutator(self.params)
        self.params.position.set(radius, angle)
        for name, value in changes.items():
            if name not in ("rotation", "scale", "alpha"):
                raise TypeError(f"Unknown part parameter {name!r}")
            setattr(self.params, name, value)
        self.on_params_changed()

    def on_params_changed(self) -> None:
        self.paint.alpha = round(self.params.alpha * 255)

    def on_dimensions_changed(self) -> None:
        pass

    def cartesian_position(self) -> CartesianPosition:
        return offset(
            to_cartesian(self.params.position),
            self.view_size.width / 2,
            self.view_size.height / 2,
        )

    def draw(self, canvas: Canvas) -> None:
        pass


class CenterPoint(UIPart):
    def _make_paint(self) -> Paint:
        return Paint(color=self.config.car_icon_bounds_color, style=FILL)

    def draw(self, canvas: Canvas) -> None:
        x, y = self.cartesian_position()
        canvas.draw_circle(x, y, self.config.center_point_radius, self.paint)


class FrontSector(UIPart):
    """Sector image standing on the dial center, pointing up."""

    def draw(self, canvas: Canvas) -> None:
        sector = self.config.sector
        x, y = offset(self.cartesian_position(), -sector.width / 2, -sector.height)
        canvas.draw_bitmap(sector, x, y, self.paint)


class EmptyProgressBar(UIPart):
    """The full track ring under the progress arc."""

    def _make_paint(self) -> Paint:
        return Paint(
            color=self.config.progress_bar_unused_color,
            style=STROKE,
            stroke_width=self.config.progress_bar_width,
        )

    def draw(self, canvas: Canvas) -> None:
        x, y = self.cartesian_position()
        radius = self.config.progress_bar_radius * self.params.scale
        canvas.draw_circle(x, y, radius, self.paint)


class ProgressBar(UIPart):
    """Arc from the top of the ring to the car, following sweep_angles."""

    def __init__(self, config: Configuration, view_size: ViewSize) -> None:
        super().__init__(config, view_size)
        self.rect = Rect()

    def _make_paint(self) -> Paint:
        return Paint(
            color=self.config.progress_bar_used_color,
            style=STROKE,
            stroke_width=self.config.progress_bar_width,
            round_cap=True,
        )

    def on_dimensions_changed(self) -> None:
        diameter = self.config.progress_bar_radius * 2
        self.rect = Rect(
            (self.view_size.width - diameter) / 2,
            (self.view_size.height - diameter) / 2,
            (self.view_size.width + diameter) / 2,
            (self.view_size.height + diameter) / 2,
        )

    def draw(self, canvas: Canvas) -> None:
        start, sweep = sweep_angles(self.params.position.angle)
        canvas.draw_arc(self.rect, start, sweep, self.paint)


class IconCar(UIPart):
    def draw(self, canvas: Canvas) -> None:
        icon = self.config.car_icon
        x, y = offset(self.cartesian_position(), -icon.width / 2, -icon.height / 2)
        canvas.draw_bitmap(icon, x, y, self.paint)


class IconCarBackground(UIPart):
    def _make_paint(self) -> Paint:
        return Paint(color=self.config.car_icon_bounds_color, style=FILL)

    def draw(self, canvas: Canvas) -> None:
        x, y = self.cartesian_position()
        radius = self.config.car_icon_bg_radius * self.params.scale
        canvas.draw_circle(x, y, radius, self.paint)


class CarArrow(UIPart):
    """Arrival arrow above the center; fades in and out with the state."""

    def __init__(
        self,
        config: Configuration,
        view_size: ViewSize,
        animator: Animator,
        invalidate: Callable[[], None],
    ) -> None:
        super().__init__(config, view_size)
        self._animator = animator
        self._invalidate = invalidate
        self._fade: EntityId | None = None

    @property
    def fading(self) -> bool:
        return self._animator.is_running(self._fade)

    def draw(self, canvas: Canvas) -> None:
        arrow = self.config.at_front_arrow
        x, y = offset(self.cartesian_position(), -arrow.width / 2, -arrow.height / 2)
        canvas.draw_bitmap(arrow, x, y, self.paint)

    def start_fade_anim(self, fade_in: bool) -> None:
        self.stop_anim()
        target = 1.0 if fade_in else 0.0
        if self.params.alpha == target:
            return
        self._fade = self._animator.play(
            Animation(1.0 - target, target, ARROW_FADE_DURATION, self._on_fade, easing="alpha")
        )

    def _on_fade(self, alpha: float) -> None:
        self.update_params(alpha=alpha)
        self._invalidate()

    def stop_anim(self) -> None:
        self._animator.cancel(self._fade)
        self._fade = None
