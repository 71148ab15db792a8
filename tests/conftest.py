"""Pytest fixtures for all tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from wator.config import WorldConfig
from wator.world import World


@pytest.fixture
def empty_world():
    """Factory for an unpopulated world to place entities by hand."""
    def make(width=5, height=5, fish_breed=5, shark_breed=10, shark_starve=10, seed=0):
        cfg = WorldConfig(width=width, height=height, n_fish=0, n_sharks=0,
                          fish_breed=fish_breed, shark_breed=shark_breed,
                          shark_starve=shark_starve, seed=seed)
        return World(cfg, populate=False)
    return make


@pytest.fixture
def small_cfg():
    """A busy 40x30 world."""
    return WorldConfig(width=40, height=30, n_fish=300, n_sharks=60,
                       fish_breed=4, shark_breed=8, shark_starve=5, seed=1234)
