from __future__ import annotations

from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    def __call__(self) -> float:
        """Return the next deviate, uniform on [0, 1)."""


class UniformRandomSource:
    """Seeded stream of uniform deviates on [0, 1).

    Every stochastic decision of a run draws from one instance, one value per
    call, so a run is reproducible from its seed as long as the objective is
    deterministic.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.draws = 0

    def __call__(self) -> float:
        self.draws += 1
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"UniformRandomSource(seed={self.seed}, draws={self.draws})"
