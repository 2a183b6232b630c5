from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from loguru import logger
import numpy as np
from pydantic import BaseModel, Field, computed_field

from pikaia.evolution.engine.config import EngineConfig
from pikaia.evolution.operators.mutation import MutationMode
from pikaia.evolution.strategies.base import ReplacementPlan
from pikaia.utils.enums import enum_has_value


class ErrorCode(IntEnum):
    """Numeric codes of failed option checks."""

    CROSSOVER_PROB = 4
    MUTATION_MODE = 5
    FITNESS_DIFFERENTIAL = 9
    REPLACEMENT_PLAN = 10
    ELITISM = 11
    CONVERGENCE_TOLERANCE = 101
    CONVERGENCE_WINDOW = 102
    RANDOM_SEED = 103
    DIGITS_PER_VARIABLE = 104
    ODD_POPULATION = 105
    POPULATION_TOO_SMALL = 106
    BOUNDS = 107
    MUTATION_RATES = 108
    MAX_GENERATIONS = 109


class ConfigIssue(BaseModel):
    code: ErrorCode = Field(description="Numeric error code")
    message: str = Field(description="Human-readable description of the failed check")


class ConfigResult(BaseModel):
    """Outcome of option validation. Errors block solving; warnings are advisory."""

    errors: list[ConfigIssue] = Field(
        default_factory=list, description="Failed checks, in the order they were run"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Advisory messages about risky settings"
    )

    @computed_field  # type: ignore[misc]
    @property
    def codes(self) -> list[int]:
        return [int(issue.code) for issue in self.errors]

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> int:
        """Last error code set, or 0 when every check passed."""
        return self.codes[-1] if self.errors else 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, code: ErrorCode, message: str) -> None:
        logger.error("[Validation] {} (code {})", message, int(code))
        self.errors.append(ConfigIssue(code=code, message=message))

    def add_warning(self, message: str) -> None:
        logger.warning("[Validation] {}", message)
        self.warnings.append(message)


def _check_bounds(n: int, lower: np.ndarray, upper: np.ndarray) -> str | None:
    if n < 1:
        return f"number of variables must be at least 1, got {n}"
    if lower.shape != (n,) or upper.shape != (n,):
        return f"bounds must both have length {n}, got {lower.shape} and {upper.shape}"
    if not np.all(upper > lower):
        return "every upper bound must exceed its lower bound"
    return None


def validate_config(
    n: int,
    lower: Sequence[float] | np.ndarray,
    upper: Sequence[float] | np.ndarray,
    config: EngineConfig,
) -> ConfigResult:
    """Run every option check and collect error codes and warnings.

    Nothing raises here: a failing check only adds its code, so several
    problems can be reported at once.
    """
    result = ConfigResult()
    lower = np.atleast_1d(np.asarray(lower, dtype=float))
    upper = np.atleast_1d(np.asarray(upper, dtype=float))

    if not enum_has_value(MutationMode, config.mutation_mode):
        result.add_error(ErrorCode.MUTATION_MODE, "illegal value for Mutation Mode")
    if not 0.0 <= config.fitness_differential <= 1.0:
        result.add_error(
            ErrorCode.FITNESS_DIFFERENTIAL, "illegal value for Relative fitness differential"
        )
    if not enum_has_value(ReplacementPlan, config.replacement_plan):
        result.add_error(ErrorCode.REPLACEMENT_PLAN, "illegal value for Reproduction plan")
    if not 0.0 <= config.crossover_prob <= 1.0:
        result.add_error(ErrorCode.CROSSOVER_PROB, "illegal value for Crossover probability")
    if config.elitism not in (0, 1):
        result.add_error(ErrorCode.ELITISM, "illegal value for Elitism flag")
    if not config.convergence_tolerance > 0.0:
        result.add_error(
            ErrorCode.CONVERGENCE_TOLERANCE, "illegal value for Convergence tolerance"
        )
    if config.convergence_window <= 0:
        result.add_error(ErrorCode.CONVERGENCE_WINDOW, "illegal value for Convergence window")
    if config.random_seed <= 0:
        result.add_error(ErrorCode.RANDOM_SEED, "illegal value for random seed")
    if not 1 <= config.digits_per_variable <= 9:
        result.add_error(ErrorCode.DIGITS_PER_VARIABLE, "illegal value for Chromosome length")
    if config.population_size % 2:
        result.add_error(ErrorCode.ODD_POPULATION, "population size must be an even number")
    if config.population_size < 2:
        result.add_error(ErrorCode.POPULATION_TOO_SMALL, "population size must be at least 2")

    bounds_problem = _check_bounds(n, lower, upper)
    if bounds_problem is not None:
        result.add_error(ErrorCode.BOUNDS, bounds_problem)

    rates = (config.mutation_rate_min, config.mutation_rate_max)
    if not (
        0.0 <= rates[0] <= rates[1] <= 1.0 and 0.0 <= config.mutation_rate_initial <= 1.0
    ):
        result.add_error(
            ErrorCode.MUTATION_RATES,
            "mutation rates must satisfy 0 <= min <= max <= 1 with initial in [0, 1]",
        )
    if config.max_generations < 1:
        result.add_error(ErrorCode.MAX_GENERATIONS, "max generations must be at least 1")

    generational = config.replacement_plan == ReplacementPlan.GENERATIONAL
    if (
        generational
        and config.mutation_mode == MutationMode.UNIFORM_FIXED
        and config.mutation_rate_initial > 0.5
        and not config.elitism
    ):
        result.add_warning(
            "dangerously high value for Initial mutation rate; "
            "(Should enforce elitism with elitism=True.)"
        )
    if (
        generational
        and config.mutation_mode == MutationMode.UNIFORM_FITNESS
        and config.mutation_rate_max > 0.5
        and not config.elitism
    ):
        result.add_warning(
            "dangerously high value for Maximum mutation rate; "
            "(Should enforce elitism with elitism=True.)"
        )
    if (
        config.fitness_differential < 0.33
        and config.replacement_plan != ReplacementPlan.STEADY_STATE_WORST
    ):
        result.add_warning("dangerously low value of Relative fitness differential")

    return result
