from __future__ import annotations

import math


class ConvergenceTracker:
    """Counts consecutive generations whose best fitness moved by at most *tolerance*."""

    def __init__(self, tolerance: float, window: int):
        self.tolerance = tolerance
        self.window = window
        self.last_best = -math.inf
        self.streak = 0

    def update(self, best: float) -> bool:
        """Record this generation's best fitness; return True once converged."""
        if abs(best - self.last_best) <= self.tolerance:
            self.streak += 1
        else:
            self.streak = 0
        if self.streak >= self.window:
            return True
        self.last_best = best
        return False
