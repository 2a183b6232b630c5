from pikaia.evolution.engine.config import EngineConfig, GenerationCallback
from pikaia.evolution.engine.core import EvolutionEngine, EvolutionResult, StopReason
from pikaia.evolution.engine.metrics import EngineMetrics
from pikaia.evolution.engine.report import GenerationReporter

__all__ = [
    "EngineConfig",
    "EngineMetrics",
    "EvolutionEngine",
    "EvolutionResult",
    "GenerationCallback",
    "GenerationReporter",
    "StopReason",
]
