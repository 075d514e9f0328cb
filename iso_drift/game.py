"""Iso Drift — main game module (window, input and frame loop)."""

from __future__ import annotations

import logging
import os
import sys

import pygame

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, SPACE_BG, TITLE
from .models.movement import Intent
from .models.simulation import Simulation
from .screens.sector_view import SectorViewScreen
from .ui.hud import HUD
from .ui.starfield import StarField

_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
_BOOST_KEYS = (pygame.K_LSHIFT, pygame.K_RSHIFT)


class Game:
    """Core game class — turns key state into intents and runs the simulation."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.sim = Simulation(view_size=self.screen.get_size())
        self.sim.boot()

        # Shared components
        self.starfield = StarField(*self.screen.get_size())
        self.hud = HUD()
        self.sector_view = SectorViewScreen(self.sim)

        self._keys_held: set[int] = set()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self._update(dt)
            self._draw()

        pygame.quit()
        sys.exit()

    def _intent(self) -> Intent:
        held = self._keys_held
        return Intent(
            up=any(k in held for k in _UP_KEYS),
            down=any(k in held for k in _DOWN_KEYS),
            left=any(k in held for k in _LEFT_KEYS),
            right=any(k in held for k in _RIGHT_KEYS),
            boost=any(k in held for k in _BOOST_KEYS),
            brake=pygame.K_SPACE in held,
        )

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._keys_held.add(event.key)
                self._handle_keydown(event)
            elif event.type == pygame.KEYUP:
                self._keys_held.discard(event.key)
            elif event.type == pygame.MOUSEWHEEL:
                if event.y > 0:
                    self.sim.zoom_in()
                elif event.y < 0:
                    self.sim.zoom_out()
            elif event.type == pygame.VIDEORESIZE:
                self.sim.resize(event.w, event.h)
                self.starfield.resize(event.w, event.h)
            elif event.type == pygame.WINDOWFOCUSLOST:
                # Key-ups are lost while unfocused
                self._keys_held.clear()

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_e:
            self.sim.interact()
        elif event.key == pygame.K_n:
            self.sim.new_run()
        elif event.unicode in ("+", "=") or event.key == pygame.K_KP_PLUS:
            self.sim.zoom_in()
        elif event.unicode in ("-", "_") or event.key == pygame.K_KP_MINUS:
            self.sim.zoom_out()
        elif event.key in (pygame.K_0, pygame.K_KP0):
            self.sim.zoom_reset()

    def _update(self, dt: float) -> None:
        self.starfield.update(dt)
        self.sim.step(dt, self._intent())

    def _draw(self) -> None:
        self.screen.fill(SPACE_BG)
        self.starfield.draw(self.screen)
        self.sector_view.draw(self.screen)
        self.hud.draw(self.screen, self.sim)
        pygame.display.flip()


def main() -> None:
    """Entry point for the iso-drift command."""
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("ISO_DRIFT_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
