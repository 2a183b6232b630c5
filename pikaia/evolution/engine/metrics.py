from __future__ import annotations

from pydantic import BaseModel, Field


class EngineMetrics(BaseModel):
    """Counters accumulated over one run of the evolution engine."""

    total_generations: int = Field(
        default=0, description="Total number of generations run"
    )
    evaluations: int = Field(
        default=0, description="Total number of objective function calls"
    )
    breeding_events: int = Field(
        default=0, description="Total number of parent pairs bred"
    )
    offspring_admitted: int = Field(
        default=0, description="Total offspring that entered the population"
    )
    elites_preserved: int = Field(
        default=0,
        description="Generations in which the previous best was carried over by elitism",
    )
    rate_increases: int = Field(
        default=0, description="Generations in which the mutation rate was raised"
    )
    rate_decreases: int = Field(
        default=0, description="Generations in which the mutation rate was lowered"
    )
    best_fitness_history: list[float] = Field(
        default_factory=list, description="Best fitness at the end of each generation"
    )

    def record_generation(
        self,
        breeding_events: int,
        admitted: int,
        best_fitness: float,
    ) -> None:
        """Record metrics from one completed generation."""
        self.total_generations += 1
        self.breeding_events += breeding_events
        self.offspring_admitted += admitted
        self.best_fitness_history.append(best_fitness)

    def record_rate_change(self, previous: float, current: float) -> None:
        """Record metrics from mutation-rate adaptation."""
        if current > previous:
            self.rate_increases += 1
        elif current < previous:
            self.rate_decreases += 1

    model_config = {"extra": "forbid"}
