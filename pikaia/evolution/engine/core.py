from __future__ import annotations

from enum import Enum
from typing import Callable, NamedTuple

from loguru import logger
import numpy as np

from pikaia.evolution.engine.adaptive import MutationRateController
from pikaia.evolution.engine.config import EngineConfig
from pikaia.evolution.engine.convergence import ConvergenceTracker
from pikaia.evolution.engine.metrics import EngineMetrics
from pikaia.evolution.engine.report import GenerationReporter
from pikaia.evolution.genotype import GenotypeCodec
from pikaia.evolution.operators.crossover import cross
from pikaia.evolution.operators.mutation import MutationMode, Mutator
from pikaia.evolution.operators.selection import RankRouletteSelector
from pikaia.evolution.population import Population
from pikaia.evolution.strategies import ReplacementStrategy, create_strategy
from pikaia.utils.random_source import RandomSource, UniformRandomSource

__all__ = ["EvolutionEngine", "EvolutionResult", "StopReason"]


class StopReason(str, Enum):
    CONVERGED = "converged"
    GENERATION_LIMIT_REACHED = "generation_limit_reached"


class EvolutionResult(NamedTuple):
    x: np.ndarray
    f: float
    stop_reason: StopReason
    generations: int


class EvolutionEngine:
    """
    Generational loop over a population in normalized [0, 1]^n space:
    - Each generation runs np/2 breeding events (select, cross, mutate, insert).
    - The replacement strategy decides what re-enters the population.
    - Mutation rate adaptation, report, callback and convergence check follow.
    """

    def __init__(
        self,
        objective: Callable[[np.ndarray], float],
        n: int,
        config: EngineConfig,
        reporter: GenerationReporter | None = None,
    ):
        self.objective = objective
        self.n = n
        self.config = config

        self.codec = GenotypeCodec(n, config.digits_per_variable)
        self.selector = RankRouletteSelector(config.fitness_differential)
        self.mode = MutationMode(config.mutation_mode)
        self.mutator = Mutator(self.mode, config.digits_per_variable)
        self.reporter = reporter or GenerationReporter(
            verbosity=config.verbosity, digits=config.digits_per_variable
        )
        self.metrics = EngineMetrics()

        logger.info(
            "[EvolutionEngine] Init | n={}, np={}, mode={}, plan={}, elitism={}",
            n,
            config.population_size,
            self.mode.name,
            config.replacement_plan,
            config.elitism_enabled,
        )

    def evaluate(self, phenotype: np.ndarray) -> float:
        self.metrics.evaluations += 1
        return float(self.objective(phenotype))

    def run(self, initial: np.ndarray) -> EvolutionResult:
        """Evolve from *initial* (normalized, clamped into [0, 1]) until convergence or the generation cap."""
        config = self.config
        self.metrics = EngineMetrics()
        rng = UniformRandomSource(config.random_seed)

        population = self._initialize(initial, rng)
        strategy = create_strategy(config.replacement_plan, self.evaluate, config.elitism_enabled)
        controller = MutationRateController(
            self.mode.rate_policy,
            config.mutation_rate_initial,
            config.mutation_rate_min,
            config.mutation_rate_max,
        )
        tracker = ConvergenceTracker(config.convergence_tolerance, config.convergence_window)
        logger.info(
            "[EvolutionEngine] Start | seed={}, initial best={:.6g}",
            config.random_seed,
            population.best_fitness,
        )

        stop_reason = StopReason.GENERATION_LIMIT_REACHED
        for generation in range(1, config.max_generations + 1):
            # Stage 1: breed and replace
            admitted = self._breed(population, strategy, controller.rate, rng)

            # Stage 2: adapt the mutation rate
            previous_rate = controller.rate
            controller.adjust(population)
            self.metrics.record_rate_change(previous_rate, controller.rate)
            self.metrics.record_generation(
                population.size // 2, admitted, population.best_fitness
            )
            if strategy.elite_preserved:
                self.metrics.elites_preserved += 1

            # Stage 3: report
            self.reporter.generation(generation, admitted, controller.rate, population)
            if config.per_generation_callback is not None:
                config.per_generation_callback(
                    generation, population.best_phenotype.copy(), population.best_fitness
                )
            logger.debug(
                "[EvolutionEngine] Generation {} | admitted={}, rate={:.6f}, best={:.6g}",
                generation,
                admitted,
                controller.rate,
                population.best_fitness,
            )

            # Stage 4: convergence
            if tracker.update(population.best_fitness):
                stop_reason = StopReason.CONVERGED
                break

        self.reporter.finish(stop_reason is StopReason.CONVERGED)
        logger.info(
            "[EvolutionEngine] Stop: {} after {} generations | best={:.6g}, evaluations={}",
            stop_reason.value,
            self.metrics.total_generations,
            population.best_fitness,
            self.metrics.evaluations,
        )
        return EvolutionResult(
            x=population.best_phenotype.copy(),
            f=population.best_fitness,
            stop_reason=stop_reason,
            generations=self.metrics.total_generations,
        )

    def _initialize(self, initial: np.ndarray, rng: RandomSource) -> Population:
        initial = np.asarray(initial, dtype=float)
        if initial.shape != (self.n,):
            raise ValueError(f"Initial guess must have shape ({self.n},), got {initial.shape}")

        phenotypes = np.empty((self.config.population_size, self.n))
        phenotypes[0] = np.clip(initial, 0.0, 1.0)
        for individual in range(1, len(phenotypes)):
            for k in range(self.n):
                phenotypes[individual, k] = rng()
        return Population.evaluate(phenotypes, self.evaluate)

    def _breed(
        self,
        population: Population,
        strategy: ReplacementStrategy,
        rate: float,
        rng: RandomSource,
    ) -> int:
        """Run np/2 breeding events and hand the offspring to *strategy*; return admissions."""
        strategy.begin_generation(population)
        admitted = 0
        for event in range(population.size // 2):
            first, second = self.selector.select_pair(population.ranks, rng)
            genotype_a = self.codec.encode(population.phenotypes[first])
            genotype_b = self.codec.encode(population.phenotypes[second])

            cross(genotype_a, genotype_b, self.config.crossover_prob, rng)
            self.mutator.mutate(genotype_a, rate, rng)
            self.mutator.mutate(genotype_b, rate, rng)

            offspring = np.vstack(
                [self.codec.decode(genotype_a), self.codec.decode(genotype_b)]
            )
            admitted += strategy.insert(population, event, offspring, rng)
        admitted += strategy.end_generation(population)
        return admitted
