"""HUD overlay — status bar, interaction hint and the ship's log."""

from __future__ import annotations

import pygame

from ..constants import (
    AMBER,
    CYAN,
    FRAGMENT_VIOLET,
    FRAGMENT_TOTAL,
    FUEL_YELLOW,
    HULL_GREEN,
    LIGHT_GREY,
    PANEL_BG,
    PANEL_BORDER,
    RED_ALERT,
    SCRAP_GREY,
    WHITE,
)
from ..models.simulation import Simulation


class HUD:
    """Heads-up display drawn over the sector view."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)
        self.panel_height = 40

    def draw(self, surface: pygame.Surface, sim: Simulation) -> None:
        width, height = surface.get_size()

        # Semi-transparent top bar
        bar = pygame.Surface((width, self.panel_height), pygame.SRCALPHA)
        bar.fill(PANEL_BG)
        surface.blit(bar, (0, 0))
        pygame.draw.line(surface, PANEL_BORDER, (0, self.panel_height), (width, self.panel_height))

        ship = sim.ship
        x = 15
        y = 12

        hull_color = RED_ALERT if ship.hull / ship.max_hull < 0.3 else HULL_GREEN
        x = self._draw_stat(surface, "Hull", f"{ship.hull}/{ship.max_hull}", hull_color, x, y)

        fuel_color = RED_ALERT if ship.fuel_empty else FUEL_YELLOW
        x = self._draw_stat(surface, "Fuel", f"{ship.fuel:.1f}/{ship.max_fuel:g}", fuel_color, x, y)

        x = self._draw_stat(surface, "Scrap", f"{ship.scrap}", SCRAP_GREY, x, y)
        x = self._draw_stat(
            surface, "Fragments", f"{ship.fragment_count}/{FRAGMENT_TOTAL}", FRAGMENT_VIOLET, x, y,
        )
        if ship.has_legendary:
            x = self._draw_stat(surface, "", "LEGENDARY", AMBER, x, y)

        pos = self.font_small.render(
            f"({sim.vessel.x:.2f}, {sim.vessel.y:.2f})", True, LIGHT_GREY,
        )
        surface.blit(pos, (width - pos.get_width() - 15, y + 2))

        # Hint
        hint = sim.hint_text()
        if hint:
            hint_surf = self.font.render(hint, True, CYAN)
            surface.blit(hint_surf, ((width - hint_surf.get_width()) // 2, height - 60))

        # Log, newest on top, older lines fading
        ly = self.panel_height + 10
        for i, line in enumerate(sim.log.lines):
            fade = max(0.35, 1.0 - i * 0.1)
            color = tuple(int(c * fade) for c in WHITE)
            line_surf = self.font_small.render(line, True, color)
            surface.blit(line_surf, (15, ly))
            ly += 20

    def _draw_stat(
        self,
        surface: pygame.Surface,
        label: str,
        text: str,
        color: tuple[int, int, int],
        x: int,
        y: int,
    ) -> int:
        if label:
            label_surf = self.font_small.render(label, True, LIGHT_GREY)
            surface.blit(label_surf, (x, y + 2))
            x += label_surf.get_width() + 6
        val_surf = self.font.render(text, True, color)
        surface.blit(val_surf, (x, y))
        return x + val_surf.get_width() + 24
