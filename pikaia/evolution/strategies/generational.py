from __future__ import annotations

from loguru import logger
import numpy as np

from pikaia.evolution.population import Population
from pikaia.evolution.strategies.base import ReplacementStrategy
from pikaia.utils.random_source import RandomSource


class GenerationalReplacement(ReplacementStrategy):
    """Full generational replacement, optionally elitist.

    Offspring accumulate in a staging buffer, pair ``k`` in slots ``2k`` and
    ``2k + 1``. When the generation ends the buffer replaces the population
    wholesale and the ranking is rebuilt from scratch. With elitism, the old
    best individual takes slot 0 if it is strictly fitter than the offspring
    staged there.
    """

    def __init__(self, evaluate, elitism: bool = True):
        super().__init__(evaluate, elitism)
        self._staging: np.ndarray | None = None

    def begin_generation(self, population: Population) -> None:
        self._staging = np.empty_like(population.phenotypes)
        self.elite_preserved = False

    def insert(
        self,
        population: Population,
        event: int,
        offspring: np.ndarray,
        rng: RandomSource,
    ) -> int:
        if self._staging is None:
            raise RuntimeError("begin_generation() must be called before insert()")
        self._staging[2 * event : 2 * event + 2] = offspring
        return 0

    def end_generation(self, population: Population) -> int:
        if self._staging is None:
            raise RuntimeError("begin_generation() must be called before end_generation()")
        staging, self._staging = self._staging, None
        fitness = np.empty(population.size)
        admitted = population.size

        first = 0
        if self.elitism:
            fitness[0] = self.evaluate(staging[0])
            first = 1
            if fitness[0] < population.best_fitness:
                staging[0] = population.best_phenotype
                fitness[0] = population.best_fitness
                admitted -= 1
                self.elite_preserved = True
                logger.debug(
                    "[GenerationalReplacement] Elite carried over (f={:.6g})",
                    fitness[0],
                )

        for index in range(first, population.size):
            fitness[index] = self.evaluate(staging[index])

        population.replace_all(staging, fitness)
        return admitted
