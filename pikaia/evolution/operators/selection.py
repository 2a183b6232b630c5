from __future__ import annotations

import numpy as np

from pikaia.evolution.population import RankTable
from pikaia.exceptions import SelectionError
from pikaia.utils.random_source import RandomSource


class RankRouletteSelector:
    """Roulette-wheel parent selection weighted by fitness rank.

    The individual holding 1-based rank ``r`` (1 = worst, ``np`` = best) gets
    weight ``(np + 1) + fdif * (2r - (np + 1))``. The weights always sum to
    ``np * (np + 1)``: with ``fdif = 0`` every individual is equally likely,
    with ``fdif = 1`` the best is ``np`` times likelier than the worst.
    """

    def __init__(self, fitness_differential: float = 1.0):
        if not 0.0 <= fitness_differential <= 1.0:
            raise ValueError(
                f"fitness_differential must be in [0, 1], got {fitness_differential}"
            )
        self.fitness_differential = fitness_differential

    def weights(self, ranks: RankTable) -> np.ndarray:
        np1 = ranks.size + 1
        return np1 + self.fitness_differential * (2 * (ranks.rank_by_index + 1) - np1)

    def select(self, ranks: RankTable, rng: RandomSource) -> int:
        """Return the population index of one parent."""
        size = ranks.size
        dice = rng() * size * (size + 1)
        cumulative = np.cumsum(self.weights(ranks))
        index = int(np.searchsorted(cumulative, dice, side="left"))
        if index >= size:
            raise SelectionError(
                f"Roulette wheel fell through: draw {dice} exceeds cumulative weight {cumulative[-1]}"
            )
        return index

    def select_pair(self, ranks: RankTable, rng: RandomSource) -> tuple[int, int]:
        """Pick two distinct parents; the second is redrawn until it differs."""
        first = self.select(ranks, rng)
        while True:
            second = self.select(ranks, rng)
            if second != first:
                return first, second
