"""Canvas adapter that renders dial draw calls onto a pygame Surface."""
from __future__ import annotations

import math

import pygame

from carnav import Bitmap, Paint, Rect
from carnav.canvas import STROKE


class PygameCanvas:
    """Draws with per-call alpha by going through a scratch SRCALPHA layer."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def _begin(self) -> pygame.Surface:
        self._layer.fill((0, 0, 0, 0))
        return self._layer

    def _end(self) -> None:
        self.surface.blit(self._layer, (0, 0))

    def draw_circle(self, x: float, y: float, radius: float, paint: Paint) -> None:
        if paint.alpha <= 0 or radius <= 0:
            return
        layer = self._begin()
        width = max(int(paint.stroke_width), 1) if paint.style == STROKE else 0
        if paint.blur > 0:
            # Soft edge: a wider, fainter disc under the main one.
            halo = (*paint.color, paint.alpha // 3)
            pygame.draw.circle(layer, halo, (x, y), radius + paint.blur, width)
        pygame.draw.circle(layer, (*paint.color, paint.alpha), (x, y), radius, width)
        self._end()

    def draw_arc(self, rect: Rect, start_angle: float, sweep_angle: float, paint: Paint) -> None:
        if paint.alpha <= 0 or sweep_angle <= 0:
            return
        layer = self._begin()
        bounds = pygame.Rect(rect.left, rect.top, rect.width, rect.height)
        # Screen angles grow clockwise; pygame's grow counter-clockwise.
        start = -math.radians(start_angle + sweep_angle)
        stop = -math.radians(start_angle)
        width = max(int(paint.stroke_width), 1)
        color = (*paint.color, paint.alpha)
        pygame.draw.arc(layer, color, bounds, start, stop, width)
        if paint.round_cap:
            cx, cy = bounds.center
            r = rect.width / 2 - width / 2
            for angle in (start_angle, start_angle + sweep_angle):
                theta = math.radians(angle)
                pygame.draw.circle(
                    layer, color, (cx + r * math.cos(theta), cy + r * math.sin(theta)), width / 2
                )
        self._end()

    def draw_bitmap(self, bitmap: Bitmap, x: float, y: float, paint: Paint) -> None:
        if paint.alpha <= 0 or bitmap.image is None:
            return
        image = bitmap.image
        if paint.alpha < 255:
            image = image.copy()
            image.set_alpha(paint.alpha)
        self.surface.blit(image, (x, y))
