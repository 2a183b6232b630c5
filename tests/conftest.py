"""Shared fixtures for the PIKAIA test suite."""

import numpy as np
import pytest

from pikaia.evolution.population import Population
from pikaia.problems import paraboloid


class ScriptedRandom:
    """Random source replaying a fixed list of deviates, to force operator branches."""

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def __call__(self) -> float:
        if not self.values:
            raise AssertionError(f"scripted random source exhausted after {self.draws} draws")
        self.draws += 1
        return self.values.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self.values


@pytest.fixture
def scripted():
    """Factory building a ScriptedRandom from a list of deviates."""
    return ScriptedRandom


@pytest.fixture
def random_population():
    """Factory for a population of uniform phenotypes scored by the paraboloid."""

    def _make(size: int = 10, n: int = 2, seed: int = 0) -> Population:
        phenotypes = np.random.default_rng(seed).random((size, n))
        return Population.evaluate(phenotypes, paraboloid)

    return _make
