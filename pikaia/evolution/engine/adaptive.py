from __future__ import annotations

from loguru import logger
import numpy as np

from pikaia.evolution.operators.mutation import RatePolicy
from pikaia.evolution.population import Population

RDIF_LOW = 0.05
RDIF_HIGH = 0.25
RATE_FACTOR = 1.5


def fitness_differential(best: float, median: float) -> float:
    """Normalized best-vs-median fitness gap, with IEEE semantics for a zero denominator."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.abs(np.float64(best) - median) / (np.float64(best) + median))


def metric_distance(best: np.ndarray, median: np.ndarray) -> float:
    """Euclidean best-vs-median distance divided by the number of variables."""
    best = np.asarray(best, dtype=float)
    return float(np.sqrt(np.sum((best - np.asarray(median, dtype=float)) ** 2)) / len(best))


class MutationRateController:
    """Adjusts the mutation rate once per generation from population diversity.

    A small best-vs-median gap (``rdif <= 0.05``) means the population is
    collapsing, so the rate grows by 1.5x up to ``maximum``; a large gap
    (``rdif >= 0.25``) shrinks it by 1.5x down to ``minimum``.
    """

    def __init__(
        self,
        policy: RatePolicy,
        initial: float,
        minimum: float,
        maximum: float,
    ):
        self.policy = policy
        self.rate = initial
        self.minimum = minimum
        self.maximum = maximum

    def diversity(self, population: Population) -> float:
        ranks = population.ranks
        if self.policy is RatePolicy.FITNESS:
            return fitness_differential(
                population.fitness[ranks.best], population.fitness[ranks.median]
            )
        return metric_distance(
            population.phenotypes[ranks.best], population.phenotypes[ranks.median]
        )

    def apply(self, rdif: float) -> float:
        """Update the rate from a diversity signal and return the new rate."""
        if rdif <= RDIF_LOW:
            self.rate = min(self.maximum, self.rate * RATE_FACTOR)
        elif rdif >= RDIF_HIGH:
            self.rate = max(self.minimum, self.rate / RATE_FACTOR)
        return self.rate

    def adjust(self, population: Population) -> float:
        if self.policy is RatePolicy.FIXED:
            return self.rate
        previous = self.rate
        rdif = self.diversity(population)
        self.apply(rdif)
        if self.rate != previous:
            logger.debug(
                "[MutationRateController] rdif={:.4g} -> rate {:.6f} -> {:.6f}",
                rdif,
                previous,
                self.rate,
            )
        return self.rate
