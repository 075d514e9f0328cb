"""Thrust, drag, soft speed cap and grid clamping."""

from __future__ import annotations

import math

import pytest

from iso_drift.constants import (
    ACCEL,
    BOOST_MAX_SPEED,
    BRAKE_DRAG,
    DRAG,
    GRID_H,
    GRID_W,
    MAX_SPEED,
    START_X,
    START_Y,
)
from iso_drift.models.movement import Intent, Vessel, integrate

DT = 1 / 60


def test_no_intent_gives_no_thrust() -> None:
    assert Intent().thrust_direction() == (0.0, 0.0)


def test_opposing_intents_cancel() -> None:
    assert Intent(up=True, down=True, left=True, right=True).thrust_direction() == (0.0, 0.0)
    assert Intent(left=True, right=True, up=True).thrust_direction() == (0.0, -1.0)


def test_diagonal_is_normalised() -> None:
    ax, ay = Intent(down=True, right=True).thrust_direction()
    assert math.hypot(ax, ay) == pytest.approx(1.0)
    assert ax == pytest.approx(ay)


def test_vessel_starts_at_the_start_cell() -> None:
    v = Vessel()
    assert (v.x, v.y, v.vx, v.vy) == (START_X, START_Y, 0.0, 0.0)


def test_single_step_applies_thrust_then_drag() -> None:
    v = Vessel()
    moved = integrate(v, Intent(right=True), DT)
    expected_vx = ACCEL * DT * math.exp(-DRAG * DT)
    assert v.vx == pytest.approx(expected_vx)
    assert v.vy == 0.0
    assert v.x == pytest.approx(START_X + expected_vx * DT)
    assert moved == pytest.approx(expected_vx * DT)


def test_drag_decays_exponentially_without_input() -> None:
    v = Vessel(vx=5.0)
    integrate(v, Intent(), 0.05)
    assert v.vx == pytest.approx(5.0 * math.exp(-DRAG * 0.05))


def test_brake_replaces_normal_drag() -> None:
    coasting = Vessel(vx=5.0)
    braking = Vessel(vx=5.0)
    integrate(coasting, Intent(), 0.05)
    integrate(braking, Intent(brake=True), 0.05)
    assert braking.vx == pytest.approx(5.0 * math.exp(-BRAKE_DRAG * 0.05))
    assert braking.vx < coasting.vx


def test_overspeed_is_damped_not_clipped() -> None:
    v = Vessel(x=0.0, vx=30.0)
    integrate(v, Intent(), 0.05)
    after_drag = 30.0 * math.exp(-DRAG * 0.05)
    damp = math.exp(-(after_drag - MAX_SPEED) * 0.35 * 0.05)
    assert v.vx == pytest.approx(after_drag * damp)
    # Still above the cap after one step: the ceiling is soft
    assert v.vx > MAX_SPEED


def test_held_thrust_settles_below_the_cap() -> None:
    v = Vessel(x=0.0, y=0.0)
    for _ in range(600):
        integrate(v, Intent(right=True), DT, grid_w=10_000)
    # Terminal speed from drag alone is ACCEL / DRAG, under the cap
    assert v.speed == pytest.approx(ACCEL / DRAG, rel=0.05)
    assert v.speed <= MAX_SPEED


def test_boost_raises_the_speed_ceiling() -> None:
    normal = Vessel(x=0.0)
    boosted = Vessel(x=0.0)
    for _ in range(600):
        integrate(normal, Intent(right=True), DT, grid_w=10_000)
        integrate(boosted, Intent(right=True, boost=True), DT, grid_w=10_000)
    assert boosted.speed > normal.speed
    assert boosted.speed <= BOOST_MAX_SPEED


def test_position_clamps_without_zeroing_velocity() -> None:
    v = Vessel(x=GRID_W - 1.01, y=0.0, vx=8.0, vy=-8.0)
    integrate(v, Intent(), 0.05)
    assert v.x == GRID_W - 1
    assert v.y == 0.0
    assert v.vx > 0
    assert v.vy < 0


def test_pinned_against_the_edge_moves_nothing() -> None:
    v = Vessel(x=0.0, y=GRID_H - 1, vx=-3.0, vy=3.0)
    moved = integrate(v, Intent(left=True, down=True), DT)
    assert moved == 0.0


def test_place_stops_the_vessel() -> None:
    v = Vessel(vx=3.0, vy=-2.0)
    v.place(4.0, 5.0)
    assert (v.x, v.y, v.vx, v.vy) == (4.0, 5.0, 0.0, 0.0)
