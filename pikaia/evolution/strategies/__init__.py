from __future__ import annotations

from pikaia.evolution.strategies.base import (
    Evaluator,
    ReplacementPlan,
    ReplacementStrategy,
)
from pikaia.evolution.strategies.generational import GenerationalReplacement
from pikaia.evolution.strategies.steady_state import SteadyStateReplacement


def create_strategy(
    plan: ReplacementPlan | int, evaluate: Evaluator, elitism: bool = True
) -> ReplacementStrategy:
    """Build the replacement strategy implementing *plan*."""
    plan = ReplacementPlan(plan)
    if plan is ReplacementPlan.GENERATIONAL:
        return GenerationalReplacement(evaluate, elitism=elitism)
    return SteadyStateReplacement(
        evaluate,
        replace_worst=plan is ReplacementPlan.STEADY_STATE_WORST,
        elitism=elitism,
    )


__all__ = [
    "Evaluator",
    "GenerationalReplacement",
    "ReplacementPlan",
    "ReplacementStrategy",
    "SteadyStateReplacement",
    "create_strategy",
]
