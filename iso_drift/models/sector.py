"""Procedural sector layout for Iso Drift.

A sector is the fixed grid the vessel flies over. Four anchor POIs sit at
fixed cells; the rest are scattered by rejection sampling once per run and
never move afterwards.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass

from ..constants import (
    EXTRA_POI_COUNT,
    GRID_H,
    GRID_W,
    MAX_PLACEMENT_ATTEMPTS,
    MIN_DIST_FROM_STATION,
)
from .grid import manhattan

_logger = logging.getLogger(__name__)


class PoiType(enum.Enum):
    """Types of points of interest. Values double as save-file tags."""

    STATION = "Station"        # Hub: repair, refuel, crafting
    ASTEROIDS = "Asteroids"    # Scrap with debris risk
    DERELICT = "Derelict"      # Fragments or a trap
    FAR_CORNER = "Far Corner"  # Gated behind the legendary module
    RELAY = "Relay"
    WRECKAGE = "Wreckage"
    GAS = "Gas"
    BEACON = "Beacon"

    @property
    def label(self) -> str:
        return self.value


HUB_TYPE = PoiType.STATION
GATED_TYPE = PoiType.FAR_CORNER

# Types scattered by the generator (never anchors)
FILLER_TYPES: tuple[PoiType, ...] = (
    PoiType.RELAY,
    PoiType.WRECKAGE,
    PoiType.GAS,
    PoiType.BEACON,
)


@dataclass(frozen=True)
class Poi:
    """A point of interest pinned to a grid cell."""

    x: int
    y: int
    poi_type: PoiType


ANCHOR_POIS: tuple[Poi, ...] = (
    Poi(6, 6, PoiType.STATION),
    Poi(18, 9, PoiType.ASTEROIDS),
    Poi(10, 18, PoiType.DERELICT),
    Poi(22, 22, PoiType.FAR_CORNER),
)


def find_hub(pois: list[Poi] | tuple[Poi, ...]) -> Poi | None:
    for poi in pois:
        if poi.poi_type is HUB_TYPE:
            return poi
    return None


def generate_pois(
    anchors: tuple[Poi, ...] | list[Poi] = ANCHOR_POIS,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
    extra_count: int = EXTRA_POI_COUNT,
    min_dist_from_hub: int = MIN_DIST_FROM_STATION,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    rng: random.Random | None = None,
) -> list[Poi]:
    """Lay out the POIs for a new run.

    Anchors are kept verbatim. Extra POIs are placed on uniformly random cells,
    rejecting any cell that is occupied, closer than ``min_dist_from_hub`` to
    the hub (Manhattan), or orthogonally adjacent to anything already placed.
    Running out of attempts returns a partial layout rather than failing.
    """
    if rng is None:
        rng = random.Random()

    hub = find_hub(anchors)
    out: list[Poi] = list(anchors)
    used: set[tuple[int, int]] = {(p.x, p.y) for p in anchors}
    target = len(anchors) + extra_count

    attempts = 0
    while len(out) < target and attempts < max_attempts:
        attempts += 1

        x = rng.randint(0, grid_w - 1)
        y = rng.randint(0, grid_h - 1)

        if (x, y) in used:
            continue
        if hub is not None and manhattan(x, y, hub.x, hub.y) < min_dist_from_hub:
            continue

        too_close = False
        for p in out:
            if manhattan(x, y, p.x, p.y) <= 1:
                too_close = True
                break
        if too_close:
            continue

        out.append(Poi(x, y, rng.choice(FILLER_TYPES)))
        used.add((x, y))

    if len(out) < target:
        _logger.debug(
            "Placed %d of %d extra POIs after %d attempts",
            len(out) - len(anchors), extra_count, attempts,
        )
    return out
