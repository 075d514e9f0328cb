"""Isometric projection and distance helpers."""

from __future__ import annotations

import pytest

from iso_drift.constants import TILE_H, TILE_W
from iso_drift.models.grid import clamp, diamond_points, distance, grid_to_screen, manhattan


def test_origin_cell_lands_on_origin() -> None:
    assert grid_to_screen(0, 0, (400.0, 80.0)) == (400.0, 80.0)


def test_projection_follows_isometric_axes() -> None:
    origin = (400.0, 80.0)
    # +x goes down-right, +y goes down-left
    assert grid_to_screen(1, 0, origin) == (400.0 + TILE_W / 2, 80.0 + TILE_H / 2)
    assert grid_to_screen(0, 1, origin) == (400.0 - TILE_W / 2, 80.0 + TILE_H / 2)
    # Equal x and y sit on the vertical centre line
    sx, sy = grid_to_screen(12, 12, origin)
    assert sx == 400.0
    assert sy == 80.0 + 24 * TILE_H / 2


def test_projection_accepts_fractional_cells() -> None:
    sx, sy = grid_to_screen(0.5, 0.0, (0.0, 0.0))
    assert sx == pytest.approx(TILE_W / 4)
    assert sy == pytest.approx(TILE_H / 4)


def test_moving_origin_translates_everything() -> None:
    a = grid_to_screen(7, 3, (100.0, 80.0))
    b = grid_to_screen(7, 3, (350.0, 80.0))
    assert b[0] - a[0] == pytest.approx(250.0)
    assert b[1] == a[1]


def test_distances() -> None:
    assert manhattan(0, 0, 3, -4) == 7
    assert distance(0, 0, 3, -4) == pytest.approx(5.0)


def test_clamp() -> None:
    assert clamp(-1.0, 0.0, 23.0) == 0.0
    assert clamp(30.0, 0.0, 23.0) == 23.0
    assert clamp(5.5, 0.0, 23.0) == 5.5


def test_diamond_points_span_the_tile() -> None:
    top, right, bottom, left = diamond_points(100.0, 50.0, 36, 18)
    assert top == (100.0, 41.0)
    assert right == (118.0, 50.0)
    assert bottom == (100.0, 59.0)
    assert left == (82.0, 50.0)
