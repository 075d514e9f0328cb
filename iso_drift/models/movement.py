"""Vessel movement: thrust, drag and a soft speed cap in world (grid) space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import (
    ACCEL,
    BOOST_ACCEL,
    BOOST_MAX_SPEED,
    BRAKE_DRAG,
    DRAG,
    GRID_H,
    GRID_W,
    MAX_SPEED,
    OVERSPEED_DAMPING,
    START_X,
    START_Y,
)
from .grid import clamp


@dataclass
class Intent:
    """Held controls, sampled once per simulation step."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    boost: bool = False
    brake: bool = False

    def thrust_direction(self) -> tuple[float, float]:
        """Unit thrust vector, or (0, 0). Opposing keys cancel."""
        ax = float(self.right) - float(self.left)
        ay = float(self.down) - float(self.up)
        length = math.hypot(ax, ay)
        if length > 0:
            return ax / length, ay / length
        return 0.0, 0.0


@dataclass
class Vessel:
    """World-space position (float tiles) and velocity."""

    x: float = float(START_X)
    y: float = float(START_Y)
    vx: float = 0.0
    vy: float = 0.0

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def place(self, x: float, y: float) -> None:
        """Teleport and stop."""
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0

    def reset(self) -> None:
        self.place(float(START_X), float(START_Y))


def integrate(
    vessel: Vessel,
    intent: Intent,
    dt: float,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
) -> float:
    """Advance the vessel by one step and return the distance it moved.

    Drag and over-speed damping are exponential so deceleration looks the same
    at any frame rate and the speed cap is approached without a hard clip.
    Position is clamped to the grid per axis; velocity is left untouched.
    """
    ax, ay = intent.thrust_direction()
    accel = BOOST_ACCEL if intent.boost else ACCEL
    max_speed = BOOST_MAX_SPEED if intent.boost else MAX_SPEED

    vessel.vx += ax * accel * dt
    vessel.vy += ay * accel * dt

    used_drag = BRAKE_DRAG if intent.brake else DRAG
    drag_factor = math.exp(-used_drag * dt)
    vessel.vx *= drag_factor
    vessel.vy *= drag_factor

    speed = vessel.speed
    if speed > max_speed:
        damp = math.exp(-(speed - max_speed) * OVERSPEED_DAMPING * dt)
        vessel.vx *= damp
        vessel.vy *= damp

    old_x, old_y = vessel.x, vessel.y
    vessel.x = clamp(vessel.x + vessel.vx * dt, 0, grid_w - 1)
    vessel.y = clamp(vessel.y + vessel.vy * dt, 0, grid_h - 1)

    return math.hypot(vessel.x - old_x, vessel.y - old_y)
