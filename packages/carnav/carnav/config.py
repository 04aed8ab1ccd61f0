"""Configuration bundle resolved once when the dial is built."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from carnav.canvas import Color

_IMAGE_FIELDS = ("car_icon", "at_front_arrow", "sector")
_SIZE_FIELDS = (
    "car_icon_size",
    "car_icon_bg_radius",
    "center_point_radius",
    "progress_bar_radius",
    "progress_bar_width",
    "arrow_distance",
)

# Dimensions and colors used when the host style leaves them out.
DEFAULT_STYLE: dict[str, Any] = {
    "car_icon_size": 48,
    "car_icon_bg_radius": 22,
    "center_point_radius": 5,
    "progress_bar_radius": 120,
    "progress_bar_width": 8,
    "arrow_distance": 60,
    "car_icon_bounds_color": (59, 130, 246),
    "progress_bar_used_color": (59, 130, 246),
    "progress_bar_unused_color": (148, 163, 184),
}


class ConfigurationError(ValueError):
    """Raised when the dial cannot be built from the given configuration."""


@dataclass(frozen=True)
class Bitmap:
    """An image asset. ``image`` is whatever handle the host renders."""

    width: int
    height: int
    image: Any = None


@dataclass
class ViewSize:
    """Measured size of the dial, shared by every part for centering."""

    width: int = 0
    height: int = 0

    def set(self, width: int, height: int) -> None:
        self.width = width
        self.height = height


@dataclass(frozen=True)
class Configuration:
    """Immutable sizes, colors and images of one dial.

    Attributes:
        car_icon_size: Extra height added below the ring for the car icon.
        car_icon_bg_radius: Radius of the disc behind the car and of the
            first wave ring.
        center_point_radius: Radius of the dot at the dial center.
        progress_bar_radius: Radius of the ring the car travels along.
        progress_bar_width: Stroke width of the track and the progress arc.
        arrow_distance: Distance from the center of the arrival arrow.
    """

    car_icon: Bitmap
    at_front_arrow: Bitmap
    sector: Bitmap
    car_icon_size: int = DEFAULT_STYLE["car_icon_size"]
    car_icon_bg_radius: int = DEFAULT_STYLE["car_icon_bg_radius"]
    center_point_radius: int = DEFAULT_STYLE["center_point_radius"]
    progress_bar_radius: int = DEFAULT_STYLE["progress_bar_radius"]
    progress_bar_width: int = DEFAULT_STYLE["progress_bar_width"]
    arrow_distance: int = DEFAULT_STYLE["arrow_distance"]
    car_icon_bounds_color: Color = DEFAULT_STYLE["car_icon_bounds_color"]
    progress_bar_used_color: Color = DEFAULT_STYLE["progress_bar_used_color"]
    progress_bar_unused_color: Color = DEFAULT_STYLE["progress_bar_unused_color"]

    def __post_init__(self) -> None:
        for name in _IMAGE_FIELDS:
            if not isinstance(getattr(self, name), Bitmap):
                raise ConfigurationError(f"{name} must be a Bitmap")
        for name in _SIZE_FIELDS:
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")

    @classmethod
    def from_style(
        cls, style: Mapping[str, Any] | None = None, **overrides: Any
    ) -> Configuration:
        """Resolve a host style on top of DEFAULT_STYLE.

        Later sources win: defaults, then ``style``, then keyword
        overrides. Unknown keys and missing images are fatal.
        """
        merged: dict[str, Any] = dict(DEFAULT_STYLE)
        merged.update(style or {})
        merged.update(overrides)

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise ConfigurationError(f"Unknown style keys: {', '.join(unknown)}")
        missing = [name for name in _IMAGE_FIELDS if merged.get(name) is None]
        if missing:
            raise ConfigurationError(f"Missing image assets: {', '.join(missing)}")
        return cls(**merged)
