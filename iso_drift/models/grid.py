"""Isometric grid projection and distance helpers."""

from __future__ import annotations

import math

from ..constants import TILE_H, TILE_W


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def manhattan(ax: float, ay: float, bx: float, by: float) -> float:
    return abs(ax - bx) + abs(ay - by)


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def grid_to_screen(
    gx: float,
    gy: float,
    origin: tuple[float, float],
    tile_w: float = TILE_W,
    tile_h: float = TILE_H,
) -> tuple[float, float]:
    """Project a grid coordinate (integer or continuous) to screen space.

    Grid x runs down-right and grid y runs down-left, so the grid reads as a
    diamond with cell (0, 0) at ``origin``.
    """
    sx = origin[0] + (gx - gy) * (tile_w / 2)
    sy = origin[1] + (gx + gy) * (tile_h / 2)
    return sx, sy


def diamond_points(
    cx: float, cy: float, w: float = TILE_W, h: float = TILE_H,
) -> list[tuple[float, float]]:
    """Corners of a tile diamond centred on a screen point (top, right, bottom, left)."""
    return [
        (cx, cy - h / 2),
        (cx + w / 2, cy),
        (cx, cy + h / 2),
        (cx - w / 2, cy),
    ]
