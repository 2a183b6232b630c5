"""PIKAIA: genetic-algorithm maximization of real-valued functions."""

from loguru import logger

from pikaia.config.validation import ConfigResult, ErrorCode
from pikaia.evolution.engine import EngineConfig, EngineMetrics, StopReason
from pikaia.exceptions import (
    ConfigurationError,
    EvolutionError,
    PikaiaError,
    SelectionError,
)
from pikaia.solver import Pikaia, SolveResult

__version__ = "1.2.0"

# off until setup_logger() turns it on
logger.disable("pikaia")

__all__ = [
    "ConfigResult",
    "ConfigurationError",
    "EngineConfig",
    "EngineMetrics",
    "ErrorCode",
    "EvolutionError",
    "Pikaia",
    "PikaiaError",
    "SelectionError",
    "SolveResult",
    "StopReason",
]
