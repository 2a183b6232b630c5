from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable

import numpy as np

from pikaia.evolution.population import Population
from pikaia.utils.random_source import RandomSource

Evaluator = Callable[[np.ndarray], float]


class ReplacementPlan(IntEnum):
    GENERATIONAL = 1
    STEADY_STATE_RANDOM = 2
    STEADY_STATE_WORST = 3

    @property
    def label(self) -> str:
        return {
            ReplacementPlan.GENERATIONAL: "Full generational replacement",
            ReplacementPlan.STEADY_STATE_RANDOM: "Steady-state-replace-random",
            ReplacementPlan.STEADY_STATE_WORST: "Steady-state-replace-worst",
        }[self]


class ReplacementStrategy(ABC):
    """Base class for the ways offspring re-enter the population.

    The engine calls :meth:`begin_generation`, then :meth:`insert` once per
    breeding event with the decoded offspring pair, then
    :meth:`end_generation`. Each hook returns the number of offspring admitted
    into the live population.
    """

    def __init__(self, evaluate: Evaluator, elitism: bool = True):
        self.evaluate = evaluate
        self.elitism = elitism
        self.elite_preserved = False

    def begin_generation(self, population: Population) -> None:
        """Prepare for a new round of breeding events."""

    @abstractmethod
    def insert(
        self,
        population: Population,
        event: int,
        offspring: np.ndarray,
        rng: RandomSource,
    ) -> int:
        """Hand over the offspring pair bred in breeding event *event*."""

    def end_generation(self, population: Population) -> int:
        """Finish the generation once all breeding events are done."""
        return 0
