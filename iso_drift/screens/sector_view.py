"""Sector view — the isometric grid, visible POIs and the vessel."""

from __future__ import annotations

import pygame

from ..constants import (
    GRID_H,
    GRID_LINE,
    GRID_W,
    LIGHT_GREY,
    POI_COLORS,
    TILE_H,
    TILE_W,
    WHITE,
)
from ..models.grid import diamond_points
from ..models.sector import Poi
from ..models.simulation import Simulation


class SectorViewScreen:
    """Draws the simulation through the camera (zoom about the view centre, then offset)."""

    def __init__(self, sim: Simulation) -> None:
        self.sim = sim
        self.font_label = pygame.font.Font(None, 18)

    def _to_view(self, point: tuple[float, float]) -> tuple[float, float]:
        return self.sim.camera.apply(point, (self.sim.view_w, self.sim.view_h))

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_grid(surface)
        for poi in self.sim.visible_pois():
            self._draw_poi(surface, poi)
        self._draw_vessel(surface)

    def _draw_grid(self, surface: pygame.Surface) -> None:
        zoom = self.sim.camera.zoom
        w, h = TILE_W * zoom, TILE_H * zoom
        for gy in range(GRID_H):
            for gx in range(GRID_W):
                cx, cy = self._to_view(self.sim.project(gx, gy))
                pygame.draw.polygon(surface, GRID_LINE, diamond_points(cx, cy, w, h), 1)

    def _draw_poi(self, surface: pygame.Surface, poi: Poi) -> None:
        zoom = self.sim.camera.zoom
        sx, sy = self._to_view(self.sim.project(poi.x, poi.y))
        color = POI_COLORS.get(poi.poi_type.value, WHITE)
        center = (int(sx), int(sy - 6 * zoom))
        pygame.draw.circle(surface, color, center, max(2, int(5 * zoom)))

        label = self.font_label.render(poi.poi_type.label, True, LIGHT_GREY)
        surface.blit(label, (sx + 8 * zoom, sy - 6 * zoom - label.get_height() // 2))

    def _draw_vessel(self, surface: pygame.Surface) -> None:
        zoom = self.sim.camera.zoom
        sx, sy = self._to_view(self.sim.vessel_screen)
        points = [
            (sx, sy - 14 * zoom),
            (sx + 7 * zoom, sy - 2 * zoom),
            (sx, sy + 2 * zoom),
            (sx - 7 * zoom, sy - 2 * zoom),
        ]
        pygame.draw.polygon(surface, WHITE, points)
