"""Screen-space camera that eases toward keeping the vessel centred."""

from __future__ import annotations

import math

from ..constants import (
    CAMERA_DEADZONE,
    CAMERA_FOLLOW,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)


class Camera:
    """Translation offset plus a stepped zoom scalar."""

    def __init__(
        self,
        follow_rate: float = CAMERA_FOLLOW,
        deadzone: float = CAMERA_DEADZONE,
    ) -> None:
        self.x = 0.0
        self.y = 0.0
        self.zoom = 1.0
        self.min_zoom = ZOOM_MIN
        self.max_zoom = ZOOM_MAX
        self.follow_rate = follow_rate
        self.deadzone = deadzone

    @staticmethod
    def _target(
        focus: tuple[float, float], view_size: tuple[int, int],
    ) -> tuple[float, float]:
        return view_size[0] / 2 - focus[0], view_size[1] / 2 - focus[1]

    def follow(
        self, focus: tuple[float, float], view_size: tuple[int, int], dt: float,
    ) -> None:
        """Ease toward centring ``focus`` (a screen position) in the view."""
        tx, ty = self._target(focus, view_size)

        # Inside the dead zone an axis keeps its current value
        if self.deadzone > 0:
            if abs(tx) < self.deadzone:
                tx = self.x
            if abs(ty) < self.deadzone:
                ty = self.y

        t = 1 - math.exp(-self.follow_rate * dt)
        self.x += (tx - self.x) * t
        self.y += (ty - self.y) * t

    def snap(self, focus: tuple[float, float], view_size: tuple[int, int]) -> None:
        """Centre immediately, no easing."""
        self.x, self.y = self._target(focus, view_size)

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------

    def _set_zoom(self, value: float) -> None:
        self.zoom = max(self.min_zoom, min(self.max_zoom, value))

    def zoom_in(self) -> None:
        self._set_zoom(self.zoom * ZOOM_STEP)

    def zoom_out(self) -> None:
        self._set_zoom(self.zoom / ZOOM_STEP)

    def zoom_reset(self) -> None:
        self.zoom = 1.0

    def apply(
        self, point: tuple[float, float], view_size: tuple[int, int],
    ) -> tuple[float, float]:
        """Map an unscrolled screen point through zoom (about the view centre) and offset."""
        px, py = view_size[0] / 2, view_size[1] / 2
        sx = (point[0] + self.x - px) * self.zoom + px
        sy = (point[1] + self.y - py) * self.zoom + py
        return sx, sy
