"""Faint twinkling star field drawn behind the grid, in screen space."""

from __future__ import annotations

import math
import random

import pygame

from ..constants import NUM_BACKGROUND_STARS, STAR_DIM, WHITE


class StarField:
    """Screen-fixed background; it does not scroll with the camera."""

    def __init__(self, width: int, height: int, count: int = NUM_BACKGROUND_STARS) -> None:
        self.timer = 0.0
        self.count = count
        self.stars: list[dict] = []
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        self.stars = [
            {
                "x": random.randint(0, max(width - 1, 0)),
                "y": random.randint(0, max(height - 1, 0)),
                "color": random.choice([STAR_DIM, STAR_DIM, WHITE]),
                "twinkle_speed": random.uniform(0.3, 1.2),
                "twinkle_offset": random.uniform(0, math.tau),
            }
            for _ in range(self.count)
        ]

    def update(self, dt: float) -> None:
        self.timer += dt

    def draw(self, surface: pygame.Surface) -> None:
        for star in self.stars:
            brightness = 0.25 + 0.15 * math.sin(
                self.timer * star["twinkle_speed"] + star["twinkle_offset"]
            )
            color = tuple(int(c * brightness) for c in star["color"])
            surface.set_at((star["x"], star["y"]), color)
