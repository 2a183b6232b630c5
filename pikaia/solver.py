from __future__ import annotations

from typing import Any, Callable, NamedTuple, Sequence

from loguru import logger
import numpy as np
from pydantic import ValidationError

from pikaia.config.validation import ConfigResult, validate_config
from pikaia.evolution.engine import (
    EngineConfig,
    EngineMetrics,
    EvolutionEngine,
    GenerationReporter,
    StopReason,
)
from pikaia.exceptions import ConfigurationError

Objective = Callable[[np.ndarray], float]


class SolveResult(NamedTuple):
    x: np.ndarray
    f: float
    stop_reason: StopReason


class Pikaia:
    """Genetic-algorithm maximizer of *objective* over the box ``[lower, upper]``.

    The engine works in normalized [0, 1]^n coordinates; this facade maps
    between those and the caller's physical coordinates, so the objective,
    the initial guess, the per-generation callback and the result all use
    physical values.

    Example:
        >>> solver = Pikaia(2, [-1.0, -1.0], [1.0, 1.0], lambda x: -np.sum(x**2))
        >>> solver.status
        0
        >>> x, f, reason = solver.solve([0.5, 0.5])
    """

    def __init__(
        self,
        n: int,
        lower: Sequence[float] | np.ndarray,
        upper: Sequence[float] | np.ndarray,
        objective: Objective,
        **options: Any,
    ):
        self.metrics: EngineMetrics | None = None
        self.configure(n, lower, upper, objective, **options)

    def configure(
        self,
        n: int,
        lower: Sequence[float] | np.ndarray,
        upper: Sequence[float] | np.ndarray,
        objective: Objective,
        **options: Any,
    ) -> ConfigResult:
        """Set the problem and options, and validate them.

        Out-of-range option values are reported through the returned
        :class:`ConfigResult`, not raised.

        Raises:
            ConfigurationError: An option name is unknown or a value has the wrong type.
        """
        try:
            config = EngineConfig(**options)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid options: {exc}") from exc

        self.n = n
        self.lower = np.atleast_1d(np.asarray(lower, dtype=float))
        self.upper = np.atleast_1d(np.asarray(upper, dtype=float))
        self.objective = objective
        self.config = config

        GenerationReporter(
            verbosity=config.verbosity, digits=config.digits_per_variable
        ).header(config, n)
        self.config_result = validate_config(n, self.lower, self.upper, config)
        if self.config_result.ok:
            logger.info("[Pikaia] Configured | n={}, options={}", n, sorted(options))
        else:
            logger.warning(
                "[Pikaia] Configuration has errors | codes={}", self.config_result.codes
            )
        return self.config_result

    @property
    def status(self) -> int:
        return self.config_result.status

    def to_physical(self, normalized: np.ndarray) -> np.ndarray:
        return self.lower + (self.upper - self.lower) * np.asarray(normalized, dtype=float)

    def to_normalized(self, physical: Sequence[float] | np.ndarray) -> np.ndarray:
        return (np.asarray(physical, dtype=float) - self.lower) / (self.upper - self.lower)

    def _normalized_objective(self, normalized: np.ndarray) -> float:
        return self.objective(self.to_physical(normalized))

    def solve(self, initial_guess: Sequence[float] | np.ndarray) -> SolveResult:
        """Maximize the objective starting from *initial_guess* (physical coordinates).

        The guess is clamped into the bounds and seeds the first individual.
        Every call reseeds the random source, so repeated solves with the
        same configuration give identical results.

        Raises:
            ConfigurationError: The current configuration failed validation.
        """
        if not self.config_result.ok:
            raise ConfigurationError(
                f"Cannot solve with an invalid configuration (codes {self.config_result.codes})"
            )

        config = self.config
        callback = config.per_generation_callback
        if callback is not None:
            config = config.model_copy(
                update={
                    "per_generation_callback": lambda generation, x, f: callback(
                        generation, self.to_physical(x), f
                    )
                }
            )

        engine = EvolutionEngine(self._normalized_objective, self.n, config)
        try:
            result = engine.run(self.to_normalized(initial_guess))
        finally:
            self.metrics = engine.metrics
        return SolveResult(self.to_physical(result.x), result.f, result.stop_reason)
