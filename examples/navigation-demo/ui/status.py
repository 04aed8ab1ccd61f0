"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import (
    DIAL_H,
    DIAL_W,
    LABEL_COLOR,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATE_COLORS,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state_name: str,
    progress: float,
    target: float,
    guarded: bool,
    rings: int,
    redraws: int,
    visible: bool,
) -> None:
    """Draw right-side info panel."""
    x = DIAL_W
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, DIAL_H))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, DIAL_H))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("DIAL", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    color = STATE_COLORS.get(state_name, TEXT_COLOR)
    surface.blit(font.render(state_name.removesuffix("State"), True, color), (cx, cy))
    cy += line_h + 8

    rows = [
        f"Progress: {progress:.3f}",
        f"Target:   {target:.3f}",
        f"Rings:    {rings}",
        f"Redraws:  {redraws}",
    ]
    for row in rows:
        surface.blit(font.render(row, True, TEXT_COLOR), (cx, cy))
        cy += line_h

    cy += 8
    if guarded:
        surface.blit(font.render("transition...", True, TEXT_DIM), (cx, cy))
        cy += line_h
    if not visible:
        surface.blit(font.render("hidden", True, TEXT_DIM), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom bar with key hints."""
    y = DIAL_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    hints = "Up/Down progress  S smooth  0/1 ends  N nearby  V visible  Esc quit"
    surface.blit(font.render(hints, True, TEXT_DIM), (10, y + 10))
