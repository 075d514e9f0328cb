"""Ship economy: bounded stats, scrap spending and the fragment collection."""

from __future__ import annotations

import random

import pytest

from iso_drift.constants import FRAGMENT_TOTAL, MAX_FUEL, MAX_HULL
from iso_drift.models.ship import Ship


def test_damage_and_repair_clamp() -> None:
    ship = Ship()
    ship.repair(5)
    assert ship.hull == MAX_HULL

    assert ship.damage(3) is False
    assert ship.hull == MAX_HULL - 3
    ship.repair(100)
    assert ship.hull == MAX_HULL


def test_destruction_resets_run_but_keeps_collection() -> None:
    ship = Ship(hull=2, fuel=4.0, scrap=17, fragments={1, 2, 3}, has_legendary=True)
    assert ship.damage(5) is True
    assert ship.hull == ship.max_hull
    assert ship.fuel == ship.max_fuel
    assert ship.scrap == 0
    assert ship.fragments == {1, 2, 3}
    assert ship.has_legendary is True


def test_exact_zero_hull_counts_as_destroyed() -> None:
    ship = Ship(hull=1, scrap=4)
    assert ship.damage(1) is True
    assert ship.scrap == 0


def test_spend_scrap_fails_without_mutation() -> None:
    ship = Ship(scrap=2)
    assert ship.spend_scrap(3) is False
    assert ship.scrap == 2
    assert ship.spend_scrap(2) is True
    assert ship.scrap == 0


def test_fuel_drain_scales_with_boost_and_clamps() -> None:
    ship = Ship()
    ship.drain_fuel(1.0)
    assert ship.fuel == pytest.approx(MAX_FUEL - 1.0)
    ship.drain_fuel(1.0, boosting=True)
    assert ship.fuel == pytest.approx(MAX_FUEL - 2.6)
    ship.drain_fuel(1000.0)
    assert ship.fuel == 0.0
    assert ship.fuel_empty
    ship.refuel(1000.0)
    assert ship.fuel == ship.max_fuel


def test_add_fragment_is_idempotent() -> None:
    ship = Ship()
    assert ship.add_fragment(4) is True
    assert ship.add_fragment(4) is False
    assert ship.fragments == {4}


@pytest.mark.parametrize("bad_id", [0, -1, FRAGMENT_TOTAL + 1])
def test_add_fragment_rejects_out_of_range_ids(bad_id: int) -> None:
    ship = Ship()
    assert ship.add_fragment(bad_id) is False
    assert ship.fragments == set()


def test_random_missing_fragment_picks_the_only_gap() -> None:
    ship = Ship(fragments=set(range(1, FRAGMENT_TOTAL + 1)) - {7})
    for seed in range(25):
        assert ship.random_missing_fragment(random.Random(seed)) == 7


def test_random_missing_fragment_none_when_complete() -> None:
    ship = Ship(fragments=set(range(1, FRAGMENT_TOTAL + 1)))
    assert ship.random_missing_fragment(random.Random(0)) is None


def test_legendary_requires_a_complete_collection() -> None:
    ship = Ship(fragments=set(range(1, FRAGMENT_TOTAL)))
    assert ship.craft_legendary() is False
    assert ship.has_legendary is False

    ship.add_fragment(FRAGMENT_TOTAL)
    assert ship.craft_legendary() is True
    assert ship.has_legendary is True
    # One-way: crafting again changes nothing
    assert ship.craft_legendary() is False
    assert ship.has_legendary is True


def test_reset_all_clears_collection() -> None:
    ship = Ship(hull=3, scrap=9, fragments={1, 2}, has_legendary=True)
    ship.reset_all()
    assert ship == Ship()


def test_random_mutation_sequences_stay_in_bounds() -> None:
    rng = random.Random(1234)
    ship = Ship()
    legendary_seen = False
    for _ in range(5000):
        op = rng.randrange(6)
        if op == 0:
            ship.damage(rng.randint(0, 4))
        elif op == 1:
            ship.repair(rng.randint(0, 6))
        elif op == 2:
            ship.drain_fuel(rng.uniform(0, 3), boosting=rng.random() < 0.5)
        elif op == 3:
            ship.refuel(rng.uniform(0, 12))
        elif op == 4:
            ship.add_fragment(rng.randint(-2, FRAGMENT_TOTAL + 2))
        else:
            ship.craft_legendary()

        assert 0 <= ship.hull <= ship.max_hull
        assert 0.0 <= ship.fuel <= ship.max_fuel
        assert ship.scrap >= 0
        assert ship.fragments <= set(range(1, FRAGMENT_TOTAL + 1))
        if ship.has_legendary:
            legendary_seen = True
            assert ship.fragments_complete
        assert ship.has_legendary == legendary_seen
