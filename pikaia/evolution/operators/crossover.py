from __future__ import annotations

import numpy as np

from pikaia.utils.random_source import RandomSource


def swap_segment(first: np.ndarray, second: np.ndarray, start: int, stop: int) -> None:
    """Exchange genes ``start..stop`` (inclusive) between two genotypes in place."""
    segment = slice(start, stop + 1)
    buffer = first[segment].copy()
    first[segment] = second[segment]
    second[segment] = buffer


def cross(
    first: np.ndarray, second: np.ndarray, pcross: float, rng: RandomSource
) -> bool:
    """Breed two genotypes in place by one- or two-point crossover.

    With probability *pcross* a crossover happens. The first splice point is
    uniform over gene positions; half of the time the tail from that point is
    swapped (one-point), otherwise a second point is drawn and the segment
    between the two points is swapped (two-point).

    Returns:
        True if the genotypes were crossed.
    """
    if rng() >= pcross:
        return False

    length = len(first)
    start = int(rng() * length)
    if rng() < 0.5:
        stop = length - 1
    else:
        stop = int(rng() * length)
        if stop < start:
            start, stop = stop, start

    swap_segment(first, second, start, stop)
    return True
