"""carnav - Animated car-navigation progress dial."""
from __future__ import annotations

from carnav.canvas import Canvas, Paint, Rect
from carnav.config import (
    DEFAULT_STYLE,
    Bitmap,
    Configuration,
    ConfigurationError,
    ViewSize,
)
from carnav.geometry import CartesianPosition, PolarPosition, offset, to_cartesian
from carnav.states import AtFrontState, NavigationState, NearbyState, SearchState
from carnav.view import INVALIDATE, CarNavigationView

__all__ = [
    "CarNavigationView",
    "INVALIDATE",
    "Configuration",
    "ConfigurationError",
    "DEFAULT_STYLE",
    "Bitmap",
    "ViewSize",
    "Canvas",
    "Paint",
    "Rect",
    "PolarPosition",
    "CartesianPosition",
    "to_cartesian",
    "offset",
    "NavigationState",
    "SearchState",
    "NearbyState",
    "AtFrontState",
]
