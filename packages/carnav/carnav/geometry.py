"""Polar and cartesian positions around the dial center."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class PolarPosition:
    """Radius and angle in degrees. Angles grow clockwise on screen."""

    radius: float = 0.0
    angle: float = 0.0

    def set(self, radius: float | None = None, angle: float | None = None) -> None:
        if radius is not None:
            self.radius = radius
        if angle is not None:
            self.angle = angle


class CartesianPosition(NamedTuple):
    x: float
    y: float


def to_cartesian(polar: PolarPosition) -> CartesianPosition:
    theta = math.radians(polar.angle)
    return CartesianPosition(polar.radius * math.cos(theta), polar.radius * math.sin(theta))


def offset(point: CartesianPosition, dx: float, dy: float) -> CartesianPosition:
    return CartesianPosition(point.x + dx, point.y + dy)
