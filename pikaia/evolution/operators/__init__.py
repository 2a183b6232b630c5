from pikaia.evolution.operators.crossover import cross, swap_segment
from pikaia.evolution.operators.mutation import (
    MutationMode,
    Mutator,
    RatePolicy,
    creep,
    creep_mutation,
    uniform_mutation,
)
from pikaia.evolution.operators.selection import RankRouletteSelector

__all__ = [
    "MutationMode",
    "Mutator",
    "RankRouletteSelector",
    "RatePolicy",
    "creep",
    "creep_mutation",
    "cross",
    "swap_segment",
    "uniform_mutation",
]
