"""Benchmark objectives for maximization.

All take a 1-D array ``x`` and return a float; larger is better.
"""

from __future__ import annotations

import numpy as np


def paraboloid(x: np.ndarray) -> float:
    """Inverted paraboloid with its maximum 0 at ``x = 0.5`` in every variable."""
    x = np.asarray(x, dtype=float)
    return float(-np.sum((x - 0.5) ** 2))


def rosenbrock(x: np.ndarray) -> float:
    """Negated Rosenbrock valley; maximum 0 at ``x = 1``."""
    x = np.asarray(x, dtype=float)
    return float(-np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def twod(x: np.ndarray, rings: int = 9, width: float = 0.15) -> float:
    """Charbonneau's 2-D ring landscape.

    Concentric ridges around ``(0.5, 0.5)`` under a Gaussian envelope; the
    global maximum 1 sits at the centre, surrounded by ring-shaped local
    maxima that trap hill climbers.
    """
    x = np.asarray(x, dtype=float)
    r2 = float(np.sum((x[:2] - 0.5) ** 2))
    return float(np.cos(rings * np.pi * np.sqrt(r2)) ** 2 * np.exp(-r2 / width))
