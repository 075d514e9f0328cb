"""Save / load game state to JSON.

Uses platformdirs for cross-platform save location:
  Linux:   ~/.local/share/iso_drift/save.json
  macOS:   ~/Library/Application Support/iso_drift/save.json
  Windows: C:/Users/.../AppData/Local/iso_drift/save.json

The sector layout is random and unseeded, so the POI list is saved verbatim
alongside the ship and the vessel position. A missing or unreadable file is
never an error: the game just starts fresh.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from ..constants import FRAGMENT_TOTAL, GRID_H, GRID_W, SAVE_INTERVAL
from .grid import clamp
from .movement import Vessel
from .sector import Poi, PoiType
from .ship import Ship

SAVE_DIR = Path(user_data_dir("iso_drift"))
SAVE_FILE = SAVE_DIR / "save.json"

_logger = logging.getLogger(__name__)


# ── Serialise helpers ─────────────────────────────────────────────────

def _ship_to_dict(s: Ship) -> dict:
    return {
        "hull": s.hull,
        "maxHull": s.max_hull,
        "scrap": s.scrap,
        "fuel": s.fuel,
        "maxFuel": s.max_fuel,
        "hasLegendary": s.has_legendary,
        "fragments": sorted(s.fragments),
    }


def _ship_from_dict(d: dict, current: Ship) -> Ship:
    """Build a ship from save data; missing or invalid fields keep ``current``'s values."""
    max_hull = int(d.get("maxHull", current.max_hull))
    if max_hull < 1:
        max_hull = current.max_hull
    max_fuel = float(d.get("maxFuel", current.max_fuel))
    if not max_fuel > 0:
        max_fuel = current.max_fuel
    raw_fragments = d.get("fragments")
    if isinstance(raw_fragments, list):
        fragments = {
            f for f in raw_fragments
            if isinstance(f, int) and not isinstance(f, bool) and 1 <= f <= FRAGMENT_TOTAL
        }
    else:
        fragments = set(current.fragments)
    ship = Ship(
        hull=int(clamp(int(d.get("hull", current.hull)), 0, max_hull)),
        max_hull=max_hull,
        fuel=clamp(float(d.get("fuel", current.fuel)), 0.0, max_fuel),
        max_fuel=max_fuel,
        scrap=max(0, int(d.get("scrap", current.scrap))),
        fragments=fragments,
        # The module only exists once the collection is complete
        has_legendary=bool(d.get("hasLegendary", current.has_legendary))
        and len(fragments) == FRAGMENT_TOTAL,
    )
    if ship.hull == 0:
        # Saved mid-destruction: finish the reset
        ship.reset_run()
    return ship


def _poi_to_dict(p: Poi) -> dict:
    return {"x": p.x, "y": p.y, "type": p.poi_type.value}


def _pois_from_list(data: object, grid_w: int, grid_h: int) -> list[Poi]:
    """Parse saved POIs, dropping entries that are malformed or off-grid."""
    if not isinstance(data, list):
        return []
    pois: list[Poi] = []
    seen: set[tuple[int, int]] = set()
    for entry in data:
        try:
            x = int(entry["x"])
            y = int(entry["y"])
            poi_type = PoiType(entry["type"])
        except (KeyError, TypeError, ValueError):
            continue
        if not (0 <= x < grid_w and 0 <= y < grid_h) or (x, y) in seen:
            continue
        seen.add((x, y))
        pois.append(Poi(x, y, poi_type))
    return pois


# ── Snapshot API ──────────────────────────────────────────────────────

def snapshot(ship: Ship, vessel: Vessel, pois: list[Poi]) -> dict:
    """Serialisable view of everything a run needs to resume."""
    return {
        "ship": _ship_to_dict(ship),
        "player": {"wx": vessel.x, "wy": vessel.y},
        "pois": [_poi_to_dict(p) for p in pois],
    }


@dataclass
class Restored:
    """Result of reading a snapshot. An empty ``pois`` means generate a new sector."""

    ship: Ship
    x: float
    y: float
    pois: list[Poi]


def restore(
    data: object,
    ship: Ship,
    vessel: Vessel,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
) -> Restored | None:
    """Decode a snapshot against the current in-memory defaults.

    Returns None when the blob is not usable at all. Nothing is mutated here;
    the caller applies the result.
    """
    if not isinstance(data, dict):
        return None
    try:
        ship_data = data.get("ship")
        new_ship = _ship_from_dict(ship_data, ship) if isinstance(ship_data, dict) else ship

        x, y = vessel.x, vessel.y
        player = data.get("player")
        if isinstance(player, dict):
            x = float(player.get("wx", x))
            y = float(player.get("wy", y))
        x = clamp(x, 0, grid_w - 1)
        y = clamp(y, 0, grid_h - 1)

        pois = _pois_from_list(data.get("pois"), grid_w, grid_h)
    except (TypeError, ValueError, OverflowError) as exc:
        _logger.warning("Ignoring malformed save data: %s", exc)
        return None

    return Restored(ship=new_ship, x=x, y=y, pois=pois)


# ── Storage ───────────────────────────────────────────────────────────

class SaveFile:
    """JSON file holding a single snapshot."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else SAVE_FILE

    def write(self, data: dict) -> bool:
        """Write a snapshot. Failures are logged, never raised."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2))
        except (OSError, TypeError, ValueError) as exc:
            _logger.warning("Could not write save file %s: %s", self.path, exc)
            return False
        return True

    def read(self) -> object | None:
        """Read the raw snapshot. Returns None if missing or unreadable."""
        if not self.exists():
            return None
        try:
            return json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
            _logger.warning("Could not read save file %s: %s", self.path, exc)
            return None

    def exists(self) -> bool:
        return self.path.exists()


class SaveThrottle:
    """Rate-limits saves while the vessel is moving.

    The cooldown runs down every step; a write is allowed only on a step where
    the vessel actually moved and the cooldown has expired.
    """

    def __init__(self, interval: float = SAVE_INTERVAL) -> None:
        self.interval = interval
        self.cooldown = 0.0

    def tick(self, dt: float, moving: bool) -> bool:
        self.cooldown -= dt
        if moving and self.cooldown <= 0:
            self.cooldown = self.interval
            return True
        return False
