from pikaia.utils.enums import enum_has_value
from pikaia.utils.logger_setup import setup_logger
from pikaia.utils.random_source import RandomSource, UniformRandomSource
from pikaia.utils.sorting import rank_sort

__all__ = [
    "RandomSource",
    "UniformRandomSource",
    "enum_has_value",
    "rank_sort",
    "setup_logger",
]
