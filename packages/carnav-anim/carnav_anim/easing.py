"""Easing functions for animation interpolation."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_BISECTION_ITERATIONS = 40
_EPSILON = 1e-7


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Build a curve through (0, 0), (x1, y1), (x2, y2), (1, 1).

    The returned function maps a time fraction to the curve's y at the
    point whose x equals that fraction. x1 and x2 must lie in [0, 1] so
    that x is monotonic in the curve parameter.
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("control point x values must be within [0, 1]")

    def _coord(a: float, b: float, s: float) -> float:
        # Bernstein form with fixed endpoints 0 and 1.
        u = 1 - s
        return 3 * u * u * s * a + 3 * u * s * s * b + s * s * s

    def _slope(a: float, b: float, s: float) -> float:
        u = 1 - s
        return 3 * u * u * a + 6 * u * s * (b - a) + 3 * s * s * (1 - b)

    def _solve(x: float) -> float:
        s = x
        for _ in range(_NEWTON_ITERATIONS):
            err = _coord(x1, x2, s) - x
            if abs(err) < _EPSILON:
                return s
            d = _slope(x1, x2, s)
            if abs(d) < 1e-6:
                break
            s -= err / d
        lo, hi = 0.0, 1.0
        s = x
        for _ in range(_BISECTION_ITERATIONS):
            err = _coord(x1, x2, s) - x
            if abs(err) < _EPSILON:
                break
            if err > 0:
                hi = s
            else:
                lo = s
            s = (lo + hi) / 2
        return s

    def curve(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return _coord(y1, y2, _solve(t))

    return curve


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    # Wave ring growth: fast start, long settle.
    "scale": cubic_bezier(0.0, 0.0, 0.52, 1.0),
    # Fades and layout moves.
    "alpha": cubic_bezier(0.33, 0.0, 0.67, 1.0),
}
