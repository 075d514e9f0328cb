"""Shared fixtures for the Iso Drift test suite."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from iso_drift.models.save import SaveFile
from iso_drift.models.simulation import Simulation


class ScriptedRandom(random.Random):
    """``random()`` replays fixed rolls; integer draws stay on the seeded generator.

    Overriding ``getrandbits`` keeps ``randint``/``choice`` off the scripted
    rolls, so a test only has to script the probability checks.
    """

    def __init__(self, rolls: list[float] | None = None, default: float | None = None, seed: int = 0) -> None:
        super().__init__(seed)
        self._rolls = list(rolls or [])
        self._default = default

    def random(self) -> float:
        if self._rolls:
            return self._rolls.pop(0)
        if self._default is not None:
            return self._default
        return super().random()

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


@pytest.fixture
def save_file(tmp_path: Path) -> SaveFile:
    return SaveFile(tmp_path / "save.json")


@pytest.fixture
def sim(save_file: SaveFile) -> Simulation:
    """A booted simulation on a fresh sector, saving into a temp dir."""
    simulation = Simulation(save_file=save_file, view_size=(800, 600), rng=random.Random(7))
    simulation.boot()
    return simulation
