from __future__ import annotations

from enum import Enum
import sys
from typing import TextIO

from pikaia.evolution.engine.config import EngineConfig
from pikaia.evolution.operators.mutation import MutationMode
from pikaia.evolution.population import Population
from pikaia.evolution.strategies.base import ReplacementPlan
from pikaia.utils.enums import enum_has_value

RULE = "-" * 60


def _label(enum_cls: type[Enum], value: int) -> str | None:
    return enum_cls(value).label if enum_has_value(enum_cls, value) else None


class GenerationReporter:
    """Plain-text run report written to *stream*.

    Nothing is written at verbosity 0. At verbosity 1 a generation line is
    written only when the mutation rate or the best fitness changed since the
    last line; at verbosity 2 every generation is written.
    """

    def __init__(self, verbosity: int = 0, digits: int = 5, stream: TextIO | None = None):
        self.verbosity = verbosity
        self.digits = digits
        self.stream = stream if stream is not None else sys.stdout
        self._last_rate: float | None = None
        self._last_best: float | None = None

    @property
    def enabled(self) -> bool:
        return self.verbosity > 0

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def header(self, config: EngineConfig, n: int) -> None:
        if not self.enabled:
            return
        rows = [
            ("Number of Generations evolving", f"{config.max_generations:4d}"),
            ("Individuals per generation", f"{config.population_size:4d}"),
            ("Number of Chromosome segments", f"{n:4d}"),
            ("Length of Chromosome segments", f"{config.digits_per_variable:4d}"),
            ("Crossover probability", f"{config.crossover_prob:10.4E}"),
            ("Initial mutation rate", f"{config.mutation_rate_initial:10.4E}"),
            ("Minimum mutation rate", f"{config.mutation_rate_min:10.4E}"),
            ("Maximum mutation rate", f"{config.mutation_rate_max:10.4E}"),
            ("Relative fitness differential", f"{config.fitness_differential:10.4E}"),
            ("Convergence tolerance", f"{config.convergence_tolerance:10.4E}"),
            ("Convergence window", f"{config.convergence_window:4d}"),
        ]
        mode = _label(MutationMode, config.mutation_mode)
        if mode is not None:
            rows.append(("Mutation Mode", mode))
        plan = _label(ReplacementPlan, config.replacement_plan)
        if plan is not None:
            rows.append(("Reproduction Plan", plan))

        self._write(RULE)
        self._write("              PIKAIA Genetic Algorithm Report               ")
        self._write(RULE)
        for name, value in rows:
            self._write(f"{name:>31}: {value}")
        self._write(RULE)

    def generation(
        self,
        generation: int,
        admitted: int,
        rate: float,
        population: Population,
    ) -> bool:
        """Write the line for one finished generation; return whether anything was written."""
        if not self.enabled:
            return False
        best = population.best_fitness
        changed = rate != self._last_rate or best != self._last_best
        self._last_rate, self._last_best = rate, best
        if not (changed or self.verbosity >= 2):
            return False

        ranks = population.ranks
        shown = (ranks.best, ranks.second_best, ranks.median)
        fitness = "".join(f"{population.fitness[i]:10.6f}" for i in shown)
        self._write()
        self._write(f"{generation:6d}{admitted:6d}{rate:10.6f}{fitness}")

        scale = 10**self.digits
        for k in range(population.n):
            encoded = "".join(
                f"{int(round(scale * population.phenotypes[i, k])):10d}" for i in shown
            )
            self._write(" " * 22 + encoded)
        return True

    def finish(self, converged: bool) -> None:
        if not self.enabled:
            return
        self._write("Solution Converged" if converged else "Iteration Limit Reached")
