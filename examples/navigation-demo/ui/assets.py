"""Procedurally drawn image assets for the dial."""
from __future__ import annotations

import math

import pygame

from carnav import Bitmap
from ui.constants import ARROW_COLOR, CAR_COLOR, SECTOR_COLOR


def make_car_icon(size: int) -> Bitmap:
    """A small top-down car pointing up."""
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    body = pygame.Rect(size * 0.3, size * 0.15, size * 0.4, size * 0.7)
    pygame.draw.rect(surface, CAR_COLOR, body, border_radius=size // 8)
    windshield = pygame.Rect(size * 0.35, size * 0.28, size * 0.3, size * 0.14)
    pygame.draw.rect(surface, (40, 40, 60), windshield, border_radius=2)
    return Bitmap(size, size, surface)


def make_arrow(width: int, height: int) -> Bitmap:
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.polygon(
        surface, ARROW_COLOR, [(width / 2, 0), (width, height), (0, height)]
    )
    return Bitmap(width, height, surface)


def make_sector(width: int, height: int) -> Bitmap:
    """Fan of light spreading up from the bottom center."""
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    apex = (width / 2, height)
    half = math.atan2(width / 2, height)
    steps = 24
    points = [apex]
    for i in range(steps + 1):
        theta = -half + 2 * half * i / steps
        points.append((apex[0] + height * math.sin(theta), apex[1] - height * math.cos(theta)))
    pygame.draw.polygon(surface, (*SECTOR_COLOR, 70), points)
    return Bitmap(width, height, surface)
