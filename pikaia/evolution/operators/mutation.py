from __future__ import annotations

from enum import Enum, IntEnum

import numpy as np

from pikaia.utils.random_source import RandomSource


class RatePolicy(Enum):
    """How the mutation rate evolves between generations."""

    FIXED = "fixed"
    FITNESS = "fitness"  # driven by best-vs-median fitness differential
    DISTANCE = "distance"  # driven by best-vs-median metric distance


class MutationMode(IntEnum):
    UNIFORM_FIXED = 1
    UNIFORM_FITNESS = 2
    UNIFORM_DISTANCE = 3
    CREEP_FIXED = 4
    CREEP_FITNESS = 5
    CREEP_DISTANCE = 6

    @property
    def uses_creep(self) -> bool:
        return self >= MutationMode.CREEP_FIXED

    @property
    def rate_policy(self) -> RatePolicy:
        return (RatePolicy.FIXED, RatePolicy.FITNESS, RatePolicy.DISTANCE)[(self - 1) % 3]

    @property
    def is_adaptive(self) -> bool:
        return self.rate_policy is not RatePolicy.FIXED

    @property
    def label(self) -> str:
        operator = "Uniform+Creep" if self.uses_creep else "Uniform"
        rate = {
            RatePolicy.FIXED: "Constant Rate",
            RatePolicy.FITNESS: "Variable Rate (F)",
            RatePolicy.DISTANCE: "Variable Rate (D)",
        }[self.rate_policy]
        return f"{operator}, {rate}"


def uniform_mutation(genotype: np.ndarray, rate: float, rng: RandomSource) -> int:
    """Replace each gene, with probability *rate*, by a freshly drawn digit.

    Returns:
        Number of genes hit.
    """
    hits = 0
    for locus in range(len(genotype)):
        if rng() < rate:
            genotype[locus] = int(rng() * 10.0)
            hits += 1
    return hits


def creep(genotype: np.ndarray, group: slice, locus: int, step: int) -> None:
    """Add *step* (+1 or -1) at *locus* and carry within the variable's digit *group*.

    A borrow or carry out of the group's most significant digit clamps the
    whole group to all zeros (underflow) or all nines (overflow), so the
    encoded value never leaves [0, 1).
    """
    genotype[locus] += step
    position = locus
    while not 0 <= genotype[position] <= 9:
        if position == group.start:
            genotype[group] = 0 if step < 0 else 9
            return
        genotype[position] -= 10 * step
        genotype[position - 1] += step
        position -= 1


def creep_mutation(
    genotype: np.ndarray, digits: int, rate: float, rng: RandomSource
) -> int:
    """Perturb each gene, with probability *rate*, by +/-1 with decimal carry.

    Returns:
        Number of genes hit.
    """
    hits = 0
    for start in range(0, len(genotype), digits):
        group = slice(start, start + digits)
        for locus in range(start, start + digits):
            if rng() < rate:
                step = 1 if rng() >= 0.5 else -1
                creep(genotype, group, locus, step)
                hits += 1
    return hits


class Mutator:
    """Applies the operator family selected by a :class:`MutationMode`."""

    def __init__(self, mode: MutationMode | int, digits: int):
        self.mode = MutationMode(mode)
        self.digits = digits

    def mutate(self, genotype: np.ndarray, rate: float, rng: RandomSource) -> int:
        """Mutate *genotype* in place; creep modes toss a coin per call between creep and uniform."""
        if self.mode.uses_creep and rng() <= 0.5:
            return creep_mutation(genotype, self.digits, rate, rng)
        return uniform_mutation(genotype, rate, rng)
