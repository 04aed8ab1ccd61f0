"""Navigation Demo - the car navigation dial in a pygame window.

Exercises carnav, carnav-anim and carnav-loop.

Controls:
  Up/Down   Nudge progress by a step
  S         Smoothly ease to a random target
  0 / 1     Jump to the start / the front (arrival rings)
  N         Toggle the nearby state
  V         Toggle visibility (pauses animations)
  Esc       Quit
"""
from __future__ import annotations

import logging
import random
import sys

import pygame

from carnav import CarNavigationView, Configuration, NearbyState
from ui.assets import make_arrow, make_car_icon, make_sector
from ui.canvas import PygameCanvas
from ui.constants import (
    BG_COLOR,
    DIAL_STYLE,
    DIAL_W,
    FPS,
    PROGRESS_STEP,
    SCREEN_H,
    SCREEN_W,
    TPS,
)
from ui.status import draw_sidebar, draw_status_bar


class DemoState:
    """Holds the dial and the host-side flags."""

    def __init__(self) -> None:
        icon_size = DIAL_STYLE["car_icon_size"]
        config = Configuration.from_style(
            DIAL_STYLE,
            car_icon=make_car_icon(icon_size),
            at_front_arrow=make_arrow(28, 20),
            sector=make_sector(90, 130),
        )
        self.view = CarNavigationView(config)
        self.view.measure(DIAL_W)
        self.view.attach()
        self.visible = True
        self.rng = random.Random(7)

    def nudge(self, delta: float) -> None:
        self.view.progress = min(max(self.view.progress + delta, 0.0), 1.0)

    def smooth_to_random(self) -> None:
        self.view.smoothly_set_progress(round(self.rng.uniform(0.05, 1.0), 2))

    def toggle_nearby(self) -> None:
        self.view.set_nearby_state(not isinstance(self.view.state, NearbyState))

    def toggle_visible(self) -> None:
        self.visible = not self.visible
        self.view.set_visible(self.visible)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Navigation Demo - carnav dial")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
    canvas = PygameCanvas(screen)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    state.nudge(PROGRESS_STEP)
                elif event.key == pygame.K_DOWN:
                    state.nudge(-PROGRESS_STEP)
                elif event.key == pygame.K_s:
                    state.smooth_to_random()
                elif event.key == pygame.K_0:
                    state.view.progress = 0.0
                elif event.key == pygame.K_1:
                    state.view.progress = 1.0
                elif event.key == pygame.K_n:
                    state.toggle_nearby()
                elif event.key == pygame.K_v:
                    state.toggle_visible()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.view.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        if state.visible:
            state.view.draw(canvas)

        view = state.view
        draw_sidebar(
            screen,
            font,
            state_name=view.state.name,
            progress=view.progress,
            target=view.target_progress,
            guarded=view.is_in_guarded_transition,
            rings=len(view.water_wave.rings),
            redraws=view.redraw_count,
            visible=state.visible,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
