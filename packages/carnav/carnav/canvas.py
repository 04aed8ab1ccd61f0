"""Drawing contract between the dial and whatever rasterizes it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from carnav.config import Bitmap

Color = tuple[int, int, int]

FILL = "fill"
STROKE = "stroke"


@dataclass
class Paint:
    """How a shape is drawn. ``alpha`` is 0..255."""

    color: Color = (0, 0, 0)
    alpha: int = 255
    style: str = FILL
    stroke_width: float = 0.0
    round_cap: bool = False
    blur: float = 0.0


@dataclass
class Rect:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


class Canvas(Protocol):
    """Render target handed to ``CarNavigationView.draw``.

    Angles are in degrees, 0 pointing right and growing clockwise.
    """

    def draw_circle(self, x: float, y: float, radius: float, paint: Paint) -> None:
        ...

    def draw_arc(
        self, rect: Rect, start_angle: float, sweep_angle: float, paint: Paint
    ) -> None:
        ...

    def draw_bitmap(self, bitmap: Bitmap, x: float, y: float, paint: Paint) -> None:
        ...
