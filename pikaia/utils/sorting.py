from __future__ import annotations

import numpy as np


def rank_sort(values: np.ndarray) -> np.ndarray:
    """Return the permutation that orders *values* ascending.

    *values* is not modified. Ties keep their original relative order, so
    equal fitnesses rank by population index.
    """
    return np.argsort(np.asarray(values, dtype=float), kind="stable")
