"""POI interactions for Iso Drift.

Interacting is always an explicit player action. The nearest POI within reach
is resolved by a per-type handler that rolls rewards and risks, mutates the
ship and records what happened as log messages. Nothing here depletes or
cools down: a POI can be worked again and again.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from ..constants import (
    FRAGMENT_TOTAL,
    INTERACT_RADIUS,
    REFUEL_AMOUNT,
    REFUEL_COST,
    REPAIR_AMOUNT,
    REPAIR_COST,
)
from .grid import distance
from .sector import GATED_TYPE, Poi, PoiType
from .ship import Ship

DESTROYED_MESSAGE = "Ship destroyed! Resetting run (keeping collection)."


@dataclass
class Encounter:
    """One resolved interaction: where it happened and what it produced."""

    poi: Poi
    pois: list[Poi]
    x: float
    y: float
    messages: list[str] = field(default_factory=list)
    destroyed: bool = False
    locked: bool = False

    def say(self, text: str) -> None:
        self.messages.append(text)


def nearest_poi(
    pois: list[Poi], x: float, y: float, radius: float = INTERACT_RADIUS,
) -> Poi | None:
    """Closest POI within ``radius`` (Euclidean) of a world position."""
    best: Poi | None = None
    best_d = 0.0
    for poi in pois:
        d = distance(poi.x, poi.y, x, y)
        if d <= radius and (best is None or d < best_d):
            best = poi
            best_d = d
    return best


def _chance(rng: random.Random, p: float) -> bool:
    return rng.random() < p


def _hit(enc: Encounter, ship: Ship, amount: int) -> None:
    if ship.damage(amount):
        enc.destroyed = True
        enc.say(DESTROYED_MESSAGE)


def _fragment_line(source: str, verb: str, fragment: int, ship: Ship) -> str:
    return (
        f"{source}: {verb} Fragment {fragment}/{FRAGMENT_TOTAL}! "
        f"({ship.fragment_count}/{FRAGMENT_TOTAL})"
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _station(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    if not ship.hull_full and ship.spend_scrap(REPAIR_COST):
        ship.repair(REPAIR_AMOUNT)
        enc.say(f"Station: repaired +{REPAIR_AMOUNT} hull for {REPAIR_COST} scrap.")
    elif not ship.hull_full:
        enc.say(f"Station: need {REPAIR_COST} scrap to repair.")
    else:
        enc.say("Station: hull already full.")

    if not ship.fuel_full and ship.spend_scrap(REFUEL_COST):
        ship.refuel(REFUEL_AMOUNT)
        enc.say(f"Refueled +{REFUEL_AMOUNT} for {REFUEL_COST} scrap.")

    if ship.craft_legendary():
        enc.say("Crafted LEGENDARY MODULE! Far Corner unlocked.")
        enc.say("Bonus: better loot odds.")


def _asteroids(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    gained = rng.randint(2, 4) if ship.has_legendary else rng.randint(1, 3)
    ship.gain_scrap(gained)
    enc.say(f"Asteroids: +{gained} scrap.")
    if _chance(rng, 0.20):
        _hit(enc, ship, 1)
        enc.say("Took 1 hull damage from debris.")


def _derelict(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    find_chance = 0.75 if ship.has_legendary else 0.60
    if _chance(rng, find_chance):
        fragment = ship.random_missing_fragment(rng)
        if fragment is None:
            enc.say("Derelict: nothing new, collection complete.")
        else:
            ship.add_fragment(fragment)
            enc.say(_fragment_line("Derelict", "found", fragment, ship))
    else:
        ship.gain_scrap(4)
        _hit(enc, ship, 2)
        enc.say("Derelict trap! +4 scrap, took 2 hull damage.")


def _far_corner(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    gained = rng.randint(4, 7)
    ship.gain_scrap(gained)
    enc.say(f"Far Corner: +{gained} scrap. Strange signals...")

    if _chance(rng, 0.50):
        fragment = ship.random_missing_fragment(rng)
        if fragment is not None:
            ship.add_fragment(fragment)
            enc.say(_fragment_line("Far Corner", "discovered", fragment, ship))

    if _chance(rng, 0.35):
        _hit(enc, ship, 3)
        enc.say("Hazard surge! Took 3 hull damage.")


def _relay(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    ship.gain_scrap(1)
    enc.say("Relay: +1 scrap. Rumor: 'Derelict signals spike near the outer rim.'")


def _wreckage(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    gained = rng.randint(1, 3)
    ship.gain_scrap(gained)
    enc.say(f"Wreckage: +{gained} scrap.")
    if _chance(rng, 0.15):
        _hit(enc, ship, 1)
        enc.say("Sharp debris: took 1 hull damage.")


def _gas(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    if _chance(rng, 0.35):
        _hit(enc, ship, 2)
        enc.say("Gas Cloud: corrosive! Took 2 hull damage.")
    else:
        ship.gain_scrap(3)
        enc.say("Gas Cloud: harvested condensates. +3 scrap.")


def _beacon(enc: Encounter, ship: Ship, rng: random.Random) -> None:
    derelicts = [p for p in enc.pois if p.poi_type is PoiType.DERELICT]
    if not derelicts:
        enc.say("Beacon: no derelict found (weird).")
        return
    d = min(distance(enc.x, enc.y, p.x, p.y) for p in derelicts)
    enc.say(f"Beacon: nearest Derelict is ~{d:.1f} tiles away.")


_HANDLERS: dict[PoiType, Callable[[Encounter, Ship, random.Random], None]] = {
    PoiType.STATION: _station,
    PoiType.ASTEROIDS: _asteroids,
    PoiType.DERELICT: _derelict,
    PoiType.FAR_CORNER: _far_corner,
    PoiType.RELAY: _relay,
    PoiType.WRECKAGE: _wreckage,
    PoiType.GAS: _gas,
    PoiType.BEACON: _beacon,
}

_unhandled = set(PoiType) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No interaction handler for: {sorted(t.value for t in _unhandled)}")


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def resolve(
    poi: Poi,
    ship: Ship,
    pois: list[Poi],
    x: float,
    y: float,
    rng: random.Random | None = None,
) -> Encounter:
    """Resolve an interaction with a specific POI."""
    if rng is None:
        rng = random.Random()

    enc = Encounter(poi=poi, pois=pois, x=x, y=y)
    if poi.poi_type is GATED_TYPE and not ship.has_legendary:
        enc.locked = True
        enc.say("Far Corner is unreachable. Craft the Legendary Module first.")
        return enc

    _HANDLERS[poi.poi_type](enc, ship, rng)
    return enc


def interact(
    ship: Ship,
    pois: list[Poi],
    x: float,
    y: float,
    rng: random.Random | None = None,
    radius: float = INTERACT_RADIUS,
) -> Encounter | None:
    """Interact with whatever is in reach. Returns None if nothing is."""
    poi = nearest_poi(pois, x, y, radius)
    if poi is None:
        return None
    return resolve(poi, ship, pois, x, y, rng)


def hint_for(poi: Poi | None, ship: Ship) -> str:
    """One-line prompt for the POI in reach."""
    if poi is None:
        return ""
    if poi.poi_type is GATED_TYPE and not ship.has_legendary:
        return f"{poi.poi_type.label} — locked (craft legendary)"
    if poi.poi_type is PoiType.STATION:
        can_repair = not ship.hull_full and ship.scrap >= REPAIR_COST
        can_craft = not ship.has_legendary and ship.fragments_complete
        repair = "Repair" if can_repair else f"Repair: {REPAIR_COST} scrap"
        craft = ", Craft Legendary" if can_craft else ""
        return f"Station — press E ({repair}{craft})"
    return f"{poi.poi_type.label} — press E"
