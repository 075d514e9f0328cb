"""Ship economy for Iso Drift.

Hull, fuel and scrap are run-local and reset when the ship is destroyed.
Fragments and the legendary module are the collection: they survive
destruction and only a brand new run clears them.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from ..constants import (
    BOOST_FUEL_RATE,
    FRAGMENT_TOTAL,
    FUEL_RATE,
    MAX_FUEL,
    MAX_HULL,
)
from .grid import clamp


@dataclass
class Ship:
    """The player's vessel stats and collection."""

    hull: int = MAX_HULL
    max_hull: int = MAX_HULL
    fuel: float = MAX_FUEL
    max_fuel: float = MAX_FUEL
    scrap: int = 0
    fragments: set[int] = field(default_factory=set)
    has_legendary: bool = False

    # ------------------------------------------------------------------
    # Hull
    # ------------------------------------------------------------------

    def damage(self, amount: int) -> bool:
        """Take hull damage. Returns True if the ship was destroyed.

        Destruction immediately resets the run-local stats; the caller is
        responsible for moving the vessel back to the start cell.
        """
        self.hull = int(clamp(self.hull - amount, 0, self.max_hull))
        if self.hull <= 0:
            self.reset_run()
            return True
        return False

    def repair(self, amount: int) -> None:
        self.hull = int(clamp(self.hull + amount, 0, self.max_hull))

    @property
    def hull_full(self) -> bool:
        return self.hull >= self.max_hull

    # ------------------------------------------------------------------
    # Fuel & scrap
    # ------------------------------------------------------------------

    def drain_fuel(self, distance: float, boosting: bool = False) -> None:
        """Burn fuel proportional to distance travelled."""
        rate = BOOST_FUEL_RATE if boosting else FUEL_RATE
        self.fuel = clamp(self.fuel - distance * rate, 0.0, self.max_fuel)

    def refuel(self, amount: float) -> None:
        self.fuel = clamp(self.fuel + amount, 0.0, self.max_fuel)

    @property
    def fuel_empty(self) -> bool:
        return self.fuel <= 0

    @property
    def fuel_full(self) -> bool:
        return self.fuel >= self.max_fuel

    def gain_scrap(self, amount: int) -> None:
        self.scrap += max(0, amount)

    def spend_scrap(self, amount: int) -> bool:
        """Deduct scrap if affordable. Returns False (and changes nothing) otherwise."""
        if self.scrap < amount:
            return False
        self.scrap -= amount
        return True

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    @property
    def fragment_count(self) -> int:
        return len(self.fragments)

    @property
    def fragments_complete(self) -> bool:
        return self.fragment_count >= FRAGMENT_TOTAL

    def add_fragment(self, fragment_id: int) -> bool:
        """Add a fragment. Returns False if already held or not a valid id."""
        if not 1 <= fragment_id <= FRAGMENT_TOTAL:
            return False
        if fragment_id in self.fragments:
            return False
        self.fragments.add(fragment_id)
        return True

    def missing_fragments(self) -> list[int]:
        return [i for i in range(1, FRAGMENT_TOTAL + 1) if i not in self.fragments]

    def random_missing_fragment(self, rng: random.Random | None = None) -> int | None:
        """Pick one of the missing fragment ids uniformly, or None if complete."""
        missing = self.missing_fragments()
        if not missing:
            return None
        return (rng or random).choice(missing)

    def craft_legendary(self) -> bool:
        """Turn a complete collection into the legendary module (one-way, free)."""
        if self.has_legendary or not self.fragments_complete:
            return False
        self.has_legendary = True
        return True

    # ------------------------------------------------------------------
    # Resets
    # ------------------------------------------------------------------

    def reset_run(self) -> None:
        """Restore run-local stats; the collection is kept."""
        self.hull = self.max_hull
        self.fuel = self.max_fuel
        self.scrap = 0

    def reset_all(self) -> None:
        """Fresh start: run-local stats and the collection."""
        self.reset_run()
        self.fragments = set()
        self.has_legendary = False
