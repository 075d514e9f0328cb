"""Simulation context — owns every piece of mutable game state.

One ``step`` per frame advances movement, fuel and the camera in a fixed
order; interactions and run resets happen between steps. The front end only
writes intents and reads the presentation properties.
"""

from __future__ import annotations

import logging
import random

from ..constants import (
    EMPTY_FUEL_DAMAGE_CHANCE,
    FRAGMENT_TOTAL,
    GRID_H,
    GRID_W,
    INTERACT_RADIUS,
    MAX_DT,
    MOVE_EPSILON,
    ORIGIN_TOP,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    VIS_RADIUS,
)
from .camera import Camera
from .grid import distance, grid_to_screen
from .interactions import DESTROYED_MESSAGE, Encounter, hint_for, nearest_poi
from .interactions import interact as resolve_interaction
from .movement import Intent, Vessel, integrate
from .save import SaveFile, SaveThrottle, restore, snapshot
from .sector import HUB_TYPE, Poi, generate_pois
from .ship import Ship
from .ship_log import ShipLog

_logger = logging.getLogger(__name__)


class Simulation:
    """Vessel, ship, sector, camera and log for one player."""

    def __init__(
        self,
        save_file: SaveFile | None = None,
        view_size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.save_file = save_file or SaveFile()
        self.throttle = SaveThrottle()

        self.vessel = Vessel()
        self.ship = Ship()
        self.pois: list[Poi] = []
        self.camera = Camera()
        self.log = ShipLog()

        self.view_w, self.view_h = view_size
        self.origin = (self.view_w / 2, float(ORIGIN_TOP))
        self.vessel_screen = self._project_vessel()

        self._dirty = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def boot(self) -> None:
        """Resume the saved run, or start a fresh sector if there is none."""
        loaded = self.load()
        if not loaded or not self.pois:
            self.pois = generate_pois(rng=self.rng)
            self.request_save()
            self.log.add("Generated a new sector map.")
        else:
            self.log.add("Loaded saved sector map.")
        self.log.add(
            "Move with WASD/Arrows. Hold Shift to boost. "
            "Press E near POIs. Press N for New Game."
        )
        self.vessel_screen = self._project_vessel()
        self.recenter()
        self.flush()

    def new_run(self) -> None:
        """Start over completely: collection, stats, position and sector."""
        self.ship.reset_all()
        self.vessel.reset()
        self.pois = generate_pois(rng=self.rng)
        self.log.clear()
        self.log.add("New Game started. Fresh sector generated.")
        self.vessel_screen = self._project_vessel()
        self.recenter()
        _logger.info("New run: %d POIs placed", len(self.pois))
        self.request_save()
        self.flush()

    def _on_destroyed(self) -> None:
        """Ship hull hit zero: the ship model already reset its stats."""
        self.vessel.reset()
        self.vessel_screen = self._project_vessel()
        _logger.info(
            "Ship destroyed; collection kept (%d/%d fragments)",
            self.ship.fragment_count, FRAGMENT_TOTAL,
        )
        self.request_save()

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def step(self, dt: float, intent: Intent) -> None:
        dt = min(MAX_DT, max(0.0, dt))

        moved = integrate(self.vessel, intent, dt, GRID_W, GRID_H)
        moving = moved > MOVE_EPSILON

        if moving:
            if self.ship.fuel_empty:
                # Empty tanks never stop the ship, they just wear the hull
                if self.rng.random() < EMPTY_FUEL_DAMAGE_CHANCE:
                    if self.ship.damage(1):
                        self.log.add(DESTROYED_MESSAGE)
                        self._on_destroyed()
            else:
                self.ship.drain_fuel(moved, intent.boost)

        if self.throttle.tick(dt, moving):
            self.request_save()
        self.flush()

        # Camera must follow the freshly projected position
        self.vessel_screen = self._project_vessel()
        self.camera.follow(self.vessel_screen, (self.view_w, self.view_h), dt)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def interact(self) -> Encounter | None:
        """Work the POI in reach, if any."""
        enc = resolve_interaction(self.ship, self.pois, self.vessel.x, self.vessel.y, self.rng)
        if enc is None:
            return None
        self.log.extend(enc.messages)
        if enc.destroyed:
            self._on_destroyed()
        self.request_save()
        self.flush()
        return enc

    def zoom_in(self) -> None:
        self.camera.zoom_in()
        self.recenter()

    def zoom_out(self) -> None:
        self.camera.zoom_out()
        self.recenter()

    def zoom_reset(self) -> None:
        self.camera.zoom_reset()
        self.recenter()

    def resize(self, width: int, height: int) -> None:
        self.view_w, self.view_h = width, height
        self.origin = (width / 2, float(ORIGIN_TOP))
        self.vessel_screen = self._project_vessel()
        self.recenter()

    def recenter(self) -> None:
        """Snap the camera onto the vessel without easing."""
        self.camera.snap(self.vessel_screen, (self.view_w, self.view_h))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def request_save(self) -> None:
        self._dirty = True

    def flush(self) -> None:
        """Write the snapshot if anything changed since the last write."""
        if not self._dirty:
            return
        self._dirty = False
        self.save_file.write(snapshot(self.ship, self.vessel, self.pois))

    def load(self) -> bool:
        """Apply the saved snapshot. Returns False if there was nothing usable."""
        restored = restore(self.save_file.read(), self.ship, self.vessel, GRID_W, GRID_H)
        if restored is None:
            return False
        self.ship = restored.ship
        self.vessel.place(restored.x, restored.y)
        if restored.pois:
            self.pois = restored.pois
        self.vessel_screen = self._project_vessel()
        return True

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def _project_vessel(self) -> tuple[float, float]:
        return grid_to_screen(self.vessel.x, self.vessel.y, self.origin)

    def project(self, gx: float, gy: float) -> tuple[float, float]:
        return grid_to_screen(gx, gy, self.origin)

    def visible_pois(self) -> list[Poi]:
        """POIs inside the fog-of-war radius; the station is always shown."""
        return [
            p for p in self.pois
            if p.poi_type is HUB_TYPE
            or distance(self.vessel.x, self.vessel.y, p.x, p.y) <= VIS_RADIUS
        ]

    def poi_in_reach(self) -> Poi | None:
        return nearest_poi(self.pois, self.vessel.x, self.vessel.y, INTERACT_RADIUS)

    def status_text(self) -> str:
        s = self.ship
        return (
            f"Pos: ({self.vessel.x:.2f}, {self.vessel.y:.2f})  |  "
            f"Hull: {s.hull}/{s.max_hull}  |  "
            f"Fuel: {s.fuel:.1f}/{s.max_fuel:g}  |  "
            f"Scrap: {s.scrap}  |  "
            f"Fragments: {s.fragment_count}/{FRAGMENT_TOTAL}  |  "
            f"Legendary: {'YES' if s.has_legendary else 'no'}"
        )

    def hint_text(self) -> str:
        return hint_for(self.poi_in_reach(), self.ship)
