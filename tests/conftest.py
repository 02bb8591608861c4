import random

import pytest

from lunar_lander.config import Settings
from lunar_lander.terrain import LandingZone, TerrainProfile


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, floats, ints):
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self):
        return self.floats.pop(0)

    def randint(self, a, b):
        v = self.ints.pop(0)
        assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
        return v


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def flat_ground():
    terrain = TerrainProfile([(0, 500), (900, 500)])
    zones = [LandingZone(0, 900, 500, 1.0)]
    return terrain, zones
