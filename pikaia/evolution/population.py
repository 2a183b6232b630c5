from __future__ import annotations

from typing import Callable

import numpy as np

from pikaia.utils.sorting import rank_sort


class RankTable:
    """Fitness ranking of a population.

    ``index_by_rank[r]`` is the population index holding rank ``r`` and
    ``rank_by_index[i]`` is the rank of individual ``i``. Ranks are 0-based and
    ascend with fitness: rank 0 is the worst individual, rank ``size - 1`` the
    best. The two arrays are kept as mutual inverses.
    """

    def __init__(self, index_by_rank: np.ndarray):
        self.index_by_rank = np.asarray(index_by_rank, dtype=np.int64).copy()
        self.rank_by_index = np.empty_like(self.index_by_rank)
        self.rank_by_index[self.index_by_rank] = np.arange(self.size)

    @classmethod
    def from_fitness(cls, fitness: np.ndarray) -> RankTable:
        return cls(rank_sort(fitness))

    @property
    def size(self) -> int:
        return len(self.index_by_rank)

    @property
    def best(self) -> int:
        return int(self.index_by_rank[-1])

    @property
    def second_best(self) -> int:
        return int(self.index_by_rank[-2])

    @property
    def worst(self) -> int:
        return int(self.index_by_rank[0])

    @property
    def median(self) -> int:
        """Individual at 1-based ascending position ``size // 2``."""
        return int(self.index_by_rank[self.size // 2 - 1])

    def rebuild(self, fitness: np.ndarray) -> None:
        self.index_by_rank = rank_sort(fitness).astype(np.int64)
        self.rank_by_index[self.index_by_rank] = np.arange(self.size)

    def relocate(self, site: int, beaten: int) -> int:
        """Move the individual at rank *site* just above everything up to rank *beaten*.

        Used after the individual at *site* has been overwritten by an
        offspring that beats rank *beaten* and nothing higher. Ranks in
        between shift by one position; no re-sort takes place.

        Returns:
            The new rank of the relocated individual.
        """
        moved = self.index_by_rank[site]
        if beaten < site:
            # shift up: ranks beaten+1 .. site-1 move one rank higher
            target = beaten + 1
            self.index_by_rank[target + 1 : site + 1] = self.index_by_rank[target:site].copy()
            self.index_by_rank[target] = moved
            span = slice(target, site + 1)
        else:
            # shift down: ranks site+1 .. beaten move one rank lower
            target = beaten
            self.index_by_rank[site:target] = self.index_by_rank[site + 1 : target + 1].copy()
            self.index_by_rank[target] = moved
            span = slice(site, target + 1)
        self.rank_by_index[self.index_by_rank[span]] = np.arange(span.start, span.stop)
        return target

    def is_consistent(self) -> bool:
        return bool(
            np.array_equal(self.rank_by_index[self.index_by_rank], np.arange(self.size))
        )


class Population:
    """Phenotypes in normalized coordinates with their fitness and ranking."""

    def __init__(self, phenotypes: np.ndarray, fitness: np.ndarray):
        self.phenotypes = np.asarray(phenotypes, dtype=float)
        self.fitness = np.asarray(fitness, dtype=float)
        if self.phenotypes.ndim != 2 or len(self.phenotypes) != len(self.fitness):
            raise ValueError(
                f"Expected phenotypes of shape (size, n) matching {len(self.fitness)} fitness values, "
                f"got {self.phenotypes.shape}"
            )
        self.ranks = RankTable.from_fitness(self.fitness)

    @classmethod
    def evaluate(
        cls, phenotypes: np.ndarray, objective: Callable[[np.ndarray], float]
    ) -> Population:
        phenotypes = np.asarray(phenotypes, dtype=float)
        fitness = np.array([objective(x) for x in phenotypes], dtype=float)
        return cls(phenotypes, fitness)

    @property
    def size(self) -> int:
        return len(self.fitness)

    @property
    def n(self) -> int:
        return self.phenotypes.shape[1]

    @property
    def best_phenotype(self) -> np.ndarray:
        return self.phenotypes[self.ranks.best]

    @property
    def best_fitness(self) -> float:
        return float(self.fitness[self.ranks.best])

    def fitness_at_rank(self, rank: int) -> float:
        return float(self.fitness[self.ranks.index_by_rank[rank]])

    def replace_all(self, phenotypes: np.ndarray, fitness: np.ndarray) -> None:
        """Swap in a whole new generation and rebuild the ranking."""
        self.phenotypes = np.asarray(phenotypes, dtype=float).copy()
        self.fitness = np.asarray(fitness, dtype=float).copy()
        self.ranks.rebuild(self.fitness)

    def overwrite(self, index: int, phenotype: np.ndarray, fitness: float) -> None:
        self.phenotypes[index] = phenotype
        self.fitness[index] = fitness
