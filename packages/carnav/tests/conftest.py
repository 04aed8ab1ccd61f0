"""Shared fixtures: a configuration with dummy bitmaps and a recording canvas."""
from __future__ import annotations

import pytest

from carnav import Bitmap, CarNavigationView, Configuration


class RecordingCanvas:
    """Canvas that remembers every call instead of rasterizing."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def draw_circle(self, x, y, radius, paint):
        self.calls.append(("circle", x, y, radius, paint))

    def draw_arc(self, rect, start_angle, sweep_angle, paint):
        self.calls.append(("arc", rect, start_angle, sweep_angle, paint))

    def draw_bitmap(self, bitmap, x, y, paint):
        self.calls.append(("bitmap", bitmap, x, y, paint))


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        car_icon=Bitmap(40, 40, "car"),
        at_front_arrow=Bitmap(24, 16, "arrow"),
        sector=Bitmap(60, 90, "sector"),
        car_icon_size=40,
        car_icon_bg_radius=20,
        center_point_radius=4,
        progress_bar_radius=100,
        progress_bar_width=6,
        arrow_distance=50,
    )


@pytest.fixture
def view(config) -> CarNavigationView:
    navi = CarNavigationView(config)
    navi.measure(300)
    return navi


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
