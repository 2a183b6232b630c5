from __future__ import annotations

import numpy as np

from pikaia.evolution.population import Population
from pikaia.evolution.strategies.base import ReplacementStrategy
from pikaia.utils.random_source import RandomSource


class SteadyStateReplacement(ReplacementStrategy):
    """Steady-state reproduction into the live population.

    Each offspring is evaluated at once and admitted only if it beats some
    member. It then overwrites the worst member (``replace_worst``) or a
    random one, and the rank table is shifted incrementally around the
    insertion point. An offspring identical to the member ranked just above
    its insertion point is dropped; the check looks at that one neighbour
    only.
    """

    def __init__(self, evaluate, replace_worst: bool, elitism: bool = True):
        super().__init__(evaluate, elitism)
        self.replace_worst = replace_worst

    def insert(
        self,
        population: Population,
        event: int,
        offspring: np.ndarray,
        rng: RandomSource,
    ) -> int:
        admitted = 0
        for child in offspring:
            if self.admit(population, child, rng):
                admitted += 1
        return admitted

    def admit(self, population: Population, child: np.ndarray, rng: RandomSource) -> bool:
        fitness = self.evaluate(child)
        ranks = population.ranks

        beaten = self.highest_beaten(population, fitness)
        if beaten is None:
            return False

        if beaten < population.size - 1:
            neighbour = population.phenotypes[ranks.index_by_rank[beaten + 1]]
            if np.array_equal(neighbour, child):
                return False

        site = self.choose_site(population.size, beaten, rng)
        population.overwrite(int(ranks.index_by_rank[site]), child, fitness)
        ranks.relocate(site, beaten)
        return True

    @staticmethod
    def highest_beaten(population: Population, fitness: float) -> int | None:
        """Highest rank whose fitness *fitness* strictly exceeds, or None."""
        ranked = population.fitness[population.ranks.index_by_rank]
        beaten = np.flatnonzero(fitness > ranked)
        if not beaten.size:
            return None
        return int(beaten[-1])

    def choose_site(self, size: int, beaten: int, rng: RandomSource) -> int:
        """Rank of the member to overwrite."""
        if self.replace_worst:
            return 0
        if not self.elitism or beaten == size - 1:
            return int(rng() * size)
        # keep the current best out of reach
        return int(rng() * (size - 1))
