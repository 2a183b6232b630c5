from __future__ import annotations

from typing import Callable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

GenerationCallback = Callable[[int, np.ndarray, float], None]


class EngineConfig(BaseModel):
    """Options controlling a PIKAIA run.

    Values are only type-coerced here; range checks are reported as numeric
    error codes by :func:`pikaia.config.validation.validate_config` so that a
    bad option never raises during configuration.
    """

    population_size: int = Field(
        default=100, description="Individuals per generation (even, at least 2)"
    )
    max_generations: int = Field(
        default=500, description="Generation budget before the run stops"
    )
    digits_per_variable: int = Field(
        default=5, description="Decimal digits encoding each variable (1-9)"
    )
    crossover_prob: float = Field(
        default=0.85, description="Probability that a parent pair is crossed"
    )
    mutation_mode: int = Field(
        default=2,
        description="1/2/3 uniform, 4/5/6 uniform+creep; fixed, fitness- or distance-adaptive rate",
    )
    mutation_rate_initial: float = Field(
        default=0.005, description="Initial per-gene mutation probability"
    )
    mutation_rate_min: float = Field(
        default=0.0005, description="Lower bound of the adaptive mutation rate"
    )
    mutation_rate_max: float = Field(
        default=0.25, description="Upper bound of the adaptive mutation rate"
    )
    fitness_differential: float = Field(
        default=1.0,
        description="Rank selection bias: 0 uniform, 1 maximal pressure on the best",
    )
    replacement_plan: int = Field(
        default=1,
        description="1 full generational, 2 steady-state replace-random, 3 steady-state replace-worst",
    )
    elitism: bool | int = Field(
        default=True, description="Never lose the best individual (plans 1 and 2)"
    )
    verbosity: int = Field(
        default=0, description="Textual report: 0 none, 1 minimal, 2 verbose"
    )
    convergence_tolerance: float = Field(
        default=1e-4,
        description="Best-fitness change below which a generation counts as stalled",
    )
    convergence_window: int = Field(
        default=20,
        description="Consecutive stalled generations that declare convergence",
    )
    random_seed: int = Field(default=999, description="Seed of the uniform random source")
    per_generation_callback: GenerationCallback | None = Field(
        default=None,
        description="Called as (generation, best_x, best_f) after every generation",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    @property
    def elitism_enabled(self) -> bool:
        return bool(self.elitism)
