from pikaia.evolution.engine import (
    EngineConfig,
    EngineMetrics,
    EvolutionEngine,
    EvolutionResult,
    StopReason,
)
from pikaia.evolution.genotype import GenotypeCodec
from pikaia.evolution.population import Population, RankTable

__all__ = [
    "EngineConfig",
    "EngineMetrics",
    "EvolutionEngine",
    "EvolutionResult",
    "GenotypeCodec",
    "Population",
    "RankTable",
    "StopReason",
]
